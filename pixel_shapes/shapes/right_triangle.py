"""Right-angled triangles.

The hypotenuse is a Line drawn from the end of the longer side (or of the
horizontal side, for isosceles triangles), so rotating or reflecting the
corners rotates or reflects the pixels. It is inset by one pixel from the two
non-right-angle corners, except for triangles 1 or 2 pixels thick.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Tuple

from ..exceptions import UnreachableError
from ..geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from .base import Shape
from .line import Line
from .path import Path


class RightAngleLocation(Enum):
    """Which corner of the bounding rect holds the right angle.

    Each value is the direction of that corner from the rect's centre.
    """
    BOTTOM_LEFT = (-1, -1)
    BOTTOM_RIGHT = (1, -1)
    TOP_LEFT = (-1, 1)
    TOP_RIGHT = (1, 1)

    @property
    def direction(self) -> IntVector2:
        return IntVector2(*self.value)

    def rotate(self, angle: QuadrantalAngle) -> "RightAngleLocation":
        return RightAngleLocation(tuple(self.direction.rotate(angle)))

    def reflect(self, axis: Axis) -> "RightAngleLocation":
        return RightAngleLocation(tuple(self.direction.reflect(axis)))


def _truncating_half(vector: IntVector2) -> IntVector2:
    """Halve each component, rounding towards zero."""
    return IntVector2(int(vector.x / 2), int(vector.y / 2))


@dataclass(frozen=True, repr=False)
class RightTriangle(Shape):
    """The largest right-angled triangle in a rect with its right angle at the given corner."""
    bounding_rect: IntRect
    right_angle_location: RightAngleLocation = field(compare=False)
    filled: bool
    right_angle_corner: IntVector2 = field(init=False)
    border: Path = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.right_angle_location, RightAngleLocation):
            raise ValueError(f"Unknown right angle location: {self.right_angle_location}")
        object.__setattr__(self, "right_angle_corner", self._corner("right_angle"))
        object.__setattr__(self, "border", self._compute_border())

    @classmethod
    def from_corners(cls, corner: IntVector2, opposite_corner: IntVector2,
                     horizontal_edge_is_bottom_edge: bool, filled: bool) -> "RightTriangle":
        """Create a triangle from its two non-right-angle corners.

        Args:
            corner: One of the non-right-angle corners
            opposite_corner: The other non-right-angle corner
            horizontal_edge_is_bottom_edge: Whether the horizontal side is at
                the bottom rather than the top
            filled: Whether to fill the triangle
        """
        rising = (corner.x >= opposite_corner.x) == (corner.y >= opposite_corner.y)
        location = {
            (False, False): RightAngleLocation.TOP_RIGHT,
            (False, True): RightAngleLocation.BOTTOM_LEFT,
            (True, False): RightAngleLocation.TOP_LEFT,
            (True, True): RightAngleLocation.BOTTOM_RIGHT,
        }[(rising, horizontal_edge_is_bottom_edge)]
        return cls(IntRect(corner, opposite_corner), location, filled)

    def __repr__(self) -> str:
        return (f"RightTriangle({self.bounding_rect}, {self.right_angle_location.name}, "
                f"{'filled' if self.filled else 'unfilled'})")

    _CORNERS = {
        # location: (bottom, top, left, right, right angle)
        RightAngleLocation.BOTTOM_LEFT: ("bottom_right", "top_left", "top_left", "bottom_right", "bottom_left"),
        RightAngleLocation.BOTTOM_RIGHT: ("bottom_left", "top_right", "bottom_left", "top_right", "bottom_right"),
        RightAngleLocation.TOP_LEFT: ("bottom_left", "top_right", "bottom_left", "top_right", "top_left"),
        RightAngleLocation.TOP_RIGHT: ("bottom_right", "top_left", "top_left", "bottom_right", "top_right"),
    }
    _CORNER_NAMES = ("bottom", "top", "left", "right", "right_angle")

    def _corner(self, which: str) -> IntVector2:
        try:
            corners = self._CORNERS[self.right_angle_location]
        except KeyError:
            raise UnreachableError(f"Unknown right angle location: {self.right_angle_location}")
        return getattr(self.bounding_rect, corners[self._CORNER_NAMES.index(which)])

    @property
    def bottom_corner(self) -> IntVector2:
        """The lower of the two non-right-angle corners."""
        return self._corner("bottom")

    @property
    def top_corner(self) -> IntVector2:
        """The higher of the two non-right-angle corners."""
        return self._corner("top")

    @property
    def left_corner(self) -> IntVector2:
        """The leftmost of the two non-right-angle corners."""
        return self._corner("left")

    @property
    def right_corner(self) -> IntVector2:
        """The rightmost of the two non-right-angle corners."""
        return self._corner("right")

    @property
    def is_isosceles(self) -> bool:
        return self.bounding_rect.is_square

    def _compute_border(self) -> Path:
        """The outline, hypotenuse first.

        Not a loop for triangles 2 pixels thick and at least 4 long.
        """
        rect = self.bounding_rect
        if rect.width == 1 or rect.height == 1:
            return Path(Line(self.bottom_corner, self.top_corner))

        longer, shorter, longer_offset, shorter_offset = self._hypotenuse_corners()
        right_angle = self.right_angle_corner

        if rect.width == 2 or rect.height == 2:
            return Path(
                Line(shorter + _truncating_half(longer + longer_offset - shorter), shorter),
                Line(right_angle, longer),
            )

        return Path(
            Line(longer + longer_offset, shorter + shorter_offset),
            Line(shorter, right_angle),
            Line(right_angle, longer),
        )

    def _hypotenuse_corners(self) -> Tuple[IntVector2, IntVector2, IntVector2, IntVector2]:
        """The ends of the longer and shorter sides, and the insets from each."""
        rect = self.bounding_rect
        location = self.right_angle_location
        if location is RightAngleLocation.BOTTOM_LEFT:
            corners = (rect.bottom_right, rect.top_left, IntVector2.UP, IntVector2.RIGHT)
        elif location is RightAngleLocation.BOTTOM_RIGHT:
            corners = (rect.bottom_left, rect.top_right, IntVector2.UP, IntVector2.LEFT)
        elif location is RightAngleLocation.TOP_LEFT:
            corners = (rect.top_right, rect.bottom_left, IntVector2.DOWN, IntVector2.RIGHT)
        elif location is RightAngleLocation.TOP_RIGHT:
            corners = (rect.top_left, rect.bottom_right, IntVector2.DOWN, IntVector2.LEFT)
        else:
            raise UnreachableError(f"Unknown right angle location: {location}")

        longer, shorter, longer_offset, shorter_offset = corners
        if rect.width < rect.height:
            return shorter, longer, shorter_offset, longer_offset
        return longer, shorter, longer_offset, shorter_offset

    def _is_thin(self) -> bool:
        return self.bounding_rect.width <= 2 or self.bounding_rect.height <= 2

    def __len__(self) -> int:
        rect = self.bounding_rect
        if rect.width == 1 or rect.height == 1:
            return rect.area
        if not self.filled or self._is_thin():
            return len(self.border)

        right_angle = self.right_angle_corner
        hypotenuse = self.border.lines[0]
        # The side along the longer axis is not covered by the hypotenuse columns
        if rect.width >= rect.height:
            return rect.height + sum(abs(point.y - right_angle.y) + 1 for point in hypotenuse)
        return rect.width + sum(abs(point.x - right_angle.x) + 1 for point in hypotenuse)

    def contains(self, point: IntVector2) -> bool:
        if self.border.contains(point):
            return True
        # Thin borders need not be loops, so have no winding number
        if not self.filled or self._is_thin():
            return False
        return self.bounding_rect.contains(point) and self.border.winding_number(point) != 0

    def __iter__(self) -> Iterator[IntVector2]:
        border = self.border
        yield from border

        if not self.filled or self._is_thin():
            return

        right_angle = self.right_angle_corner
        to_top = (self.top_corner - right_angle).simplify()
        to_bottom = (self.bottom_corner - right_angle).simplify()

        scan_line_start = right_angle + to_top + to_bottom
        while not border.contains(scan_line_start):
            point = scan_line_start
            while not border.contains(point):
                yield point
                point += to_bottom
            scan_line_start += to_top

    def translate(self, translation: IntVector2) -> "RightTriangle":
        return RightTriangle(self.bounding_rect + translation, self.right_angle_location, self.filled)

    def rotate(self, angle: QuadrantalAngle) -> "RightTriangle":
        return RightTriangle(self.bounding_rect.rotate(angle), self.right_angle_location.rotate(angle), self.filled)

    def reflect(self, axis: Axis) -> "RightTriangle":
        return RightTriangle(self.bounding_rect.reflect(axis), self.right_angle_location.reflect(axis), self.filled)

    def __neg__(self) -> "RightTriangle":
        return self.rotate(QuadrantalAngle.HALF_TURN)
