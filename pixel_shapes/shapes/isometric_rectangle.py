"""Isometric rectangles: rectangles on the ground plane of an isometric view.

The edges are drawn with blocks of 2 pixels for each step up or down. The
two given corners are opposite each other; the other two are inferred from
which region around the start corner the end corner falls in:

- left/right: the end corner is further sideways than a 1/2 gradient
- top/bottom: the end corner is steeper than a 1/2 gradient
- line: the corners are on a 1/2 gradient, so the rectangle is a line

Within each region, ``(|dx| + 2|dy|) % 4`` decides the sizes of the blocks at
each corner.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Tuple

from ..exceptions import UnreachableError
from ..geometry import Axis, IntRect, IntVector2, sign
from .base import Shape
from .line import Line
from .path import Path


class _CornerType(Enum):
    LINE = "line"
    LEFT_RIGHT = "left_right"
    TOP_BOTTOM = "top_bottom"


def _corner_type(start: IntVector2, end: IntVector2) -> _CornerType:
    """Classify which pair of corners start and end are."""
    # Shift the end 1 away from the start so the columns between them are an even number
    if abs(end.x - start.x) % 2 == 0:
        end = end + IntVector2(sign(end.x - start.x), 0)
    # Compares |gradient| to 1/2 without division
    value = 2 * (abs(end.y - start.y) + 1) - (abs(end.x - start.x) + 1)
    if value < 0:
        return _CornerType.LEFT_RIGHT
    if value == 0:
        return _CornerType.LINE
    return _CornerType.TOP_BOTTOM


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def _forward_path(lines: Iterable[Line], heading: int) -> Path:
    """Path of the lines that don't step backwards against the x heading.

    Backwards lines appear when two corners are diagonally adjacent; they
    add no pixels but would make the enumeration repeat some.
    """
    return Path(*(line for line in lines if line.vector.sign.x != -heading))


Borders = Tuple[Tuple[IntVector2, ...], Path, Path]


def _infer_corners_and_borders(start: IntVector2, end: IntVector2) -> Borders:
    """Return the corners, lower border and upper border."""
    if start == end:
        point = Path(Line(start, start))
        return (start,), point, point

    if abs(start.y - end.y) == 1 and abs(start.x - end.x) <= 1:
        rect = IntRect(start, end)
        if start.x == end.x:
            # 3x2
            left = rect.bottom_left + IntVector2.LEFT
            right = rect.top_right + IntVector2.RIGHT
        else:
            # 2x2
            left = rect.bottom_left
            right = rect.top_right
        return ((start, end, left, right),
                Path(Line(left, right + IntVector2.DOWN)),
                Path(Line(right, left + IntVector2.UP)))

    corner_type = _corner_type(start, end)
    diff = end - start
    abs_diff = abs(diff)
    step = diff.sign

    if corner_type is _CornerType.LINE:
        if (abs_diff.x + 1) % 2 == 0:
            lower = Path(Line(start, end))
        else:
            lower = Path(Line(start, end - step), Line(end, end))
        return (start, end), lower, lower.reverse

    shape_type = (abs_diff.x + 2 * abs_diff.y) % 4
    if corner_type is _CornerType.LEFT_RIGHT:
        return _infer_left_right(start, end, abs_diff, step, shape_type)
    if corner_type is _CornerType.TOP_BOTTOM:
        return _infer_top_bottom(start, end, abs_diff, step, shape_type)
    raise UnreachableError(f"Unexpected corner type: {corner_type}")


def _infer_left_right(start: IntVector2, end: IntVector2, abs_diff: IntVector2,
                      step: IntVector2, shape_type: int) -> Borders:
    """Start and end are the left and right corners, in some order."""
    sx = step.x
    half_dy = (end.y - start.y) // 2
    forward = sign(end.x - start.x)
    backward = sign(start.x - end.x)
    rise = IntVector2(sx, 1)

    if shape_type == 0:
        num_blocks = _ceil_div(abs_diff.x + 2, 4) - half_dy
        offset = num_blocks * IntVector2(2 * sx, -1) + IntVector2(-sx, 1)
        bottom = start + offset
        top = end + IntVector2(sx, 0) - offset
        lower = [Line(start, bottom), Line(bottom + rise, end - rise), Line(end, end)]
        upper = [Line(end, end), Line(end + IntVector2(-sx, 1), top), Line(top - rise, start)]
    elif shape_type == 1:
        num_blocks = _ceil_div(abs_diff.x + 1, 4) - half_dy
        offset = num_blocks * IntVector2(2 * sx, -1) + IntVector2(-sx, 1)
        bottom = start + offset
        top = end - offset
        lower = [Line(start, bottom), Line(bottom + rise, end)]
        upper = [Line(end, top), Line(top - rise, start)]
    elif shape_type == 2:
        num_blocks = _ceil_div(abs_diff.x, 4) - half_dy
        offset = num_blocks * IntVector2(2 * sx, -1) + IntVector2(-sx, 1)
        bottom = start + offset
        top = end - offset
        lower = [Line(start, bottom), Line(bottom, end)]
        upper = [Line(end, top), Line(top, start)]
    elif shape_type == 3:
        num_blocks = _ceil_div(abs_diff.x - 1, 4) - half_dy
        offset = num_blocks * IntVector2(2 * sx, -1)
        bottom = start + offset
        top = end - offset
        lower = [Line(start, start), Line(start + IntVector2(sx, -1), bottom),
                 Line(bottom + rise, end - rise), Line(end, end)]
        upper = [Line(end, end), Line(end + IntVector2(-sx, 1), top),
                 Line(top - rise, start + rise), Line(start, start)]
    else:
        raise UnreachableError(f"Unexpected shape type: {shape_type}")

    return (start, end, bottom, top), _forward_path(lower, forward), _forward_path(upper, backward)


def _infer_top_bottom(start: IntVector2, end: IntVector2, abs_diff: IntVector2,
                      step: IntVector2, shape_type: int) -> Borders:
    """Start and end are the top and bottom corners, in some order."""
    # Moving the end 1 row towards the start makes it a line: a thick line
    if _corner_type(start, end - IntVector2(0, step.y)) is _CornerType.LINE:
        corner1 = start + step.y * IntVector2.UP
        corner2 = end + step.y * IntVector2.DOWN
        corners = (start, end, corner1, corner2)
        even_width = (abs_diff.x + 1) % 2 == 0
        if start.y < end.y:
            if even_width:
                return corners, Path(Line(start, corner2)), Path(Line(end, corner1))
            return (corners,
                    Path(Line(start, corner2 - step), Line(corner2, corner2)),
                    Path(Line(end, end), Line(end - step, corner1)))
        if even_width:
            return corners, Path(Line(end, corner1)), Path(Line(start, corner2))
        return (corners,
                Path(Line(end, end), Line(end - step, corner1)),
                Path(Line(start, corner2 - step), Line(corner2, corner2)))

    if end.y > start.y:
        top, bottom = end, start
    elif end.y < start.y:
        top, bottom = start, end
    else:
        raise UnreachableError(f"Top and bottom corners {start} and {end} are on the same row.")
    sx = (top - bottom).sign.x
    rise = IntVector2(sx, 1)
    fall = IntVector2(sx, -1)

    if shape_type == 0 and bottom.x == top.x:
        num_blocks = abs_diff.y // 2
        offset = num_blocks * IntVector2(2, 1)
        right = bottom + offset
        left = top - offset
        return ((bottom, top, right, left),
                Path(Line(left, left), Line(left + IntVector2.DOWN_RIGHT, bottom),
                     Line(bottom, right + IntVector2.DOWN_LEFT), Line(right, right)),
                Path(Line(right, right), Line(right + IntVector2.UP_LEFT, top),
                     Line(top, left + IntVector2.UP_RIGHT), Line(left, left)))

    if shape_type == 2 and bottom.x == top.x:
        num_blocks = (abs_diff.y - 1) // 2
        offset = num_blocks * IntVector2(2, 1)
        right = bottom + offset
        left = top - offset
        return ((bottom, top, right, left),
                Path(Line(left + IntVector2.DOWN, left + IntVector2.DOWN), Line(left + IntVector2(1, -2), bottom),
                     Line(bottom, right + IntVector2.DOWN_LEFT), Line(right, right)),
                Path(Line(right + IntVector2.UP, right + IntVector2.UP), Line(right - IntVector2(1, -2), top),
                     Line(top, left + IntVector2.UP_RIGHT), Line(left, left)))

    if shape_type == 0:
        num_blocks = abs_diff.y // 2 + _ceil_div(abs_diff.x, 4)
    elif shape_type == 1:
        num_blocks = abs_diff.y // 2 + _ceil_div(abs_diff.x - 1, 4)
    elif shape_type == 2:
        num_blocks = (abs_diff.y - 1) // 2 + _ceil_div(abs_diff.x, 4)
    elif shape_type == 3:
        num_blocks = (abs_diff.y - 1) // 2 + _ceil_div(abs_diff.x - 1, 4)
    else:
        raise UnreachableError(f"Unexpected shape type: {shape_type}")

    # corner1 is on the row nearer the bottom corner, corner2 on the row nearer the top
    offset = num_blocks * IntVector2(2 * sx, 1)
    corner1 = bottom + offset
    corner2 = top - offset

    # Odd types end the blocks beside the top and bottom corners one step early
    bottom_end = bottom + IntVector2(-sx, 1) if shape_type % 2 == 1 else bottom
    top_end = top - IntVector2(-sx, 1) if shape_type % 2 == 1 else top

    if shape_type in (0, 1):
        # The side corners are single pixels
        lower_start = corner2
        upper_start = corner1
        lower_first_step = fall
        upper_first_step = -fall
    else:
        # The side corners are vertical blocks of 2
        lower_start = corner2 + IntVector2.DOWN
        upper_start = corner1 + IntVector2.UP
        lower_first_step = IntVector2(sx, -2)
        upper_first_step = -IntVector2(sx, -2)

    lower = [Line(lower_start, lower_start), Line(corner2 + lower_first_step, bottom_end),
             Line(bottom, corner1 - rise), Line(corner1, corner1)]
    upper = [Line(upper_start, upper_start), Line(corner1 + upper_first_step, top_end),
             Line(top, corner2 + rise), Line(corner2, corner2)]
    return ((bottom, top, corner1, corner2),
            _forward_path(lower, sign(corner1.x - corner2.x)),
            _forward_path(upper, sign(corner2.x - corner1.x)))


@dataclass(frozen=True, repr=False)
class IsometricRectangle(Shape):
    """An isometric rectangle given by two opposite corners."""
    start_corner: IntVector2
    end_corner: IntVector2
    filled: bool
    _corners: Tuple[IntVector2, ...] = field(init=False, compare=False)
    lower_border: Path = field(init=False, compare=False)
    upper_border: Path = field(init=False, compare=False)

    def __post_init__(self):
        corners, lower, upper = _infer_corners_and_borders(self.start_corner, self.end_corner)
        object.__setattr__(self, "_corners", corners)
        object.__setattr__(self, "lower_border", lower)
        object.__setattr__(self, "upper_border", upper)

    def __repr__(self) -> str:
        return (f"IsometricRectangle({self.start_corner}, {self.end_corner}, "
                f"{'filled' if self.filled else 'unfilled'})")

    @property
    def left_corner(self) -> IntVector2:
        return min(self._corners, key=lambda corner: corner.x)

    @property
    def right_corner(self) -> IntVector2:
        return max(self._corners, key=lambda corner: corner.x)

    @property
    def bottom_corner(self) -> IntVector2:
        return min(self._corners, key=lambda corner: corner.y)

    @property
    def top_corner(self) -> IntVector2:
        return max(self._corners, key=lambda corner: corner.y)

    @property
    def border(self) -> Path:
        """The lower border followed by the upper border."""
        return Path.concat(self.lower_border, self.upper_border)

    @property
    def bounding_rect(self) -> IntRect:
        return IntRect(IntVector2(self.left_corner.x, self.bottom_corner.y),
                       IntVector2(self.right_corner.x, self.top_corner.y))

    @property
    def is_isometric_square(self) -> bool:
        """Whether the bottom edge is centred, i.e. all four sides have the same length."""
        rect = self.bounding_rect
        return (self.lower_border.min_x(rect.min_y) - rect.min_x) == (rect.max_x - self.lower_border.max_x(rect.min_y))

    def __len__(self) -> int:
        lower, upper = self.lower_border, self.upper_border
        if self.filled:
            return sum(upper.max_y(x) - lower.min_y(x) + 1 for x in self.bounding_rect.x_range)
        # Each column has 1 or 2 border pixels
        return sum(1 if upper.max_y(x) == lower.min_y(x) else 2 for x in self.bounding_rect.x_range)

    def contains(self, point: IntVector2) -> bool:
        if not self.filled:
            return self.border.contains(point)
        return (self.bounding_rect.contains_x(point.x)
                and self.lower_border.min_y(point.x) <= point.y <= self.upper_border.max_y(point.x))

    def __iter__(self) -> Iterator[IntVector2]:
        lower, upper = self.lower_border, self.upper_border
        if not self.filled:
            # The borders can meet away from the corners, so skip what the lower border already gave
            yield from lower
            for point in upper:
                if not lower.contains(point):
                    yield point
            return

        for x in self.bounding_rect.x_range:
            for y in range(lower.min_y(x), upper.max_y(x) + 1):
                yield IntVector2(x, y)

    def translate(self, translation: IntVector2) -> "IsometricRectangle":
        return IsometricRectangle(self.start_corner + translation, self.end_corner + translation, self.filled)

    def reflect(self, axis: Axis) -> "IsometricRectangle":
        """Reflect across the horizontal or vertical axis.

        Raises:
            ValueError: For a diagonal axis, which has no isometric counterpart.
        """
        if not axis.is_cardinal:
            raise ValueError(f"Isometric rectangles can only be reflected across the horizontal or vertical axis, not {axis}.")
        return IsometricRectangle(self.start_corner.reflect(axis), self.end_corner.reflect(axis), self.filled)

    def __neg__(self) -> "IsometricRectangle":
        return IsometricRectangle(-self.start_corner, -self.end_corner, self.filled)
