"""Isometric hexagons: the outline of an isometric cube seen from above."""

from dataclasses import dataclass, field
from typing import Iterator, List

from ..geometry import Axis, IntRect, IntVector2
from .base import Shape
from .line import Line
from .path import Path


def _hexagon_border(rect: IntRect) -> Path:
    """Fit the largest symmetric hexagon outline into the rect.

    The result may be narrower than the rect when the diagonal edges cannot
    reach its sides.
    """
    mid_left = (rect.min_x + rect.max_x) // 2
    mid_right = (rect.min_x + rect.max_x + 1) // 2

    if rect.height == 1:
        return Path.from_points(IntVector2(mid_left, rect.min_y), IntVector2(mid_right, rect.min_y))
    if rect.width == 1:
        return Path.from_points(rect.bottom_left, rect.top_right)
    if rect.width == 2:
        return Path.from_points(rect.bottom_left, rect.bottom_right, rect.top_right, rect.top_left, rect.bottom_left)

    num_blocks = min((mid_left - rect.min_x) // 2, max(rect.height - 2, 0) // 2)
    # Give the vertical edges their own column, unless the diagonals already
    # reach the sides or the top and bottom diagonals meet
    own_column = int(mid_left - num_blocks * 2 != rect.min_x
                      and rect.min_y + num_blocks + 1 != rect.max_y - num_blocks)
    right_x = mid_right + num_blocks * 2 + own_column
    left_x = mid_left - num_blocks * 2 - own_column
    vertical_bottom = rect.min_y + num_blocks + own_column
    vertical_top = rect.max_y - num_blocks - own_column

    lines: List[Line] = [Line(IntVector2(mid_left, rect.min_y), IntVector2(mid_right, rect.min_y))]
    if num_blocks:
        lines.append(Line(IntVector2(mid_right + 1, rect.min_y + 1),
                          IntVector2(mid_right + num_blocks * 2, rect.min_y + num_blocks)))
    lines.append(Line(IntVector2(right_x, vertical_bottom), IntVector2(right_x, vertical_top)))
    if num_blocks:
        lines.append(Line(IntVector2(mid_right + num_blocks * 2, rect.max_y - num_blocks),
                          IntVector2(mid_right + 1, rect.max_y - 1)))
    lines.append(Line(IntVector2(mid_right, rect.max_y), IntVector2(mid_left, rect.max_y)))
    if num_blocks:
        lines.append(Line(IntVector2(mid_left - 1, rect.max_y - 1),
                          IntVector2(mid_left - num_blocks * 2, rect.max_y - num_blocks)))
    lines.append(Line(IntVector2(left_x, vertical_top), IntVector2(left_x, vertical_bottom)))
    if num_blocks:
        lines.append(Line(IntVector2(mid_left - num_blocks * 2, rect.min_y + num_blocks),
                          IntVector2(mid_left - 1, rect.min_y + 1)))
    return Path(*lines)


@dataclass(frozen=True, repr=False)
class IsometricHexagon(Shape):
    """A hexagon with flat vertical sides and 2:1 diagonal sides.

    Two hexagons are equal when they draw the same outline, whatever rect
    they were asked to fit.
    """
    rect: IntRect = field(compare=False)
    filled: bool
    border: Path = field(init=False, compare=False)
    bounding_rect: IntRect = field(init=False)

    def __post_init__(self):
        border = _hexagon_border(self.rect)
        object.__setattr__(self, "border", border)
        object.__setattr__(self, "bounding_rect", border.bounding_rect)

    def __repr__(self) -> str:
        return f"IsometricHexagon({self.bounding_rect}, {'filled' if self.filled else 'unfilled'})"

    def __len__(self) -> int:
        if not self.filled:
            return len(self.border)
        border = self.border
        return sum(border.max_y(x) - border.min_y(x) + 1 for x in self.bounding_rect.x_range)

    def contains(self, point: IntVector2) -> bool:
        if not self.filled:
            return self.border.contains(point)
        return (self.bounding_rect.contains_x(point.x)
                and self.border.min_y(point.x) <= point.y <= self.border.max_y(point.x))

    def __iter__(self) -> Iterator[IntVector2]:
        if not self.filled:
            yield from self.border
            return
        for x in self.bounding_rect.x_range:
            for y in range(self.border.min_y(x), self.border.max_y(x) + 1):
                yield IntVector2(x, y)

    def translate(self, translation: IntVector2) -> "IsometricHexagon":
        return IsometricHexagon(self.bounding_rect + translation, self.filled)

    def reflect(self, axis: Axis) -> "IsometricHexagon":
        """Reflect across the horizontal or vertical axis.

        Raises:
            ValueError: For a diagonal axis.
        """
        if not axis.is_cardinal:
            raise ValueError(f"Isometric hexagons can only be reflected across the horizontal or vertical axis, not {axis}.")
        return IsometricHexagon(self.bounding_rect.reflect(axis), self.filled)

    def __neg__(self) -> "IsometricHexagon":
        return IsometricHexagon(IntRect(-self.bounding_rect.bottom_left, -self.bounding_rect.top_right), self.filled)
