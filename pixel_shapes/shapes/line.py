"""Pixel-perfect rasterized lines.

A Line is drawn by imagining a real-valued line that runs from the outer
corner of the start pixel to the outer corner of the end pixel (each endpoint
pushed half a pixel outwards along the line's direction) and then, for each
column along the dominant axis, rounding that line's height to the nearest
pixel. Pushing the endpoints out makes lines whose longer extent is a
multiple of their shorter extent come out as equal-sized blocks.

Rounding ties (the imaginary line passing exactly between two pixels) go
towards the start's side in the first half of the line and towards the
end's side in the second half. The exact midpoint counts as the first half.

Lines that are more vertical than horizontal are rotated 90 degrees
clockwise, drawn as more-horizontal lines, and rotated back. This keeps the
rasterization consistent under rotation and reflection.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from math import ceil, floor
from typing import Iterator, List, Optional, Tuple, Union

from ..geometry import Axis, IntRect, IntVector2, QuadrantalAngle, sign
from .base import Shape

HALF = Fraction(1, 2)


@dataclass(frozen=True, repr=False)
class Line(Shape):
    """A rasterized line segment from start to end, both included.

    The order of the endpoints matters: reversing a line can move the middle
    pixel of an odd-length line.
    """
    start: IntVector2
    end: IntVector2
    is_more_horizontal: bool = field(init=False, compare=False)
    # Start of the imaginary line and its gradient (None when it is vertical).
    _imaginary_start: Tuple[Fraction, Fraction] = field(init=False, compare=False)
    _gradient: Optional[Fraction] = field(init=False, compare=False)
    # The line rotated clockwise, kept for lines that are more vertical.
    _clockwise: Optional["Line"] = field(init=False, compare=False)

    def __post_init__(self):
        diff = self.end - self.start
        step = diff.sign
        imaginary_start = (self.start.x - HALF * step.x, self.start.y - HALF * step.y)
        imaginary_end = (self.end.x + HALF * step.x, self.end.y + HALF * step.y)
        gradient = None
        if imaginary_end[0] != imaginary_start[0]:
            gradient = (imaginary_end[1] - imaginary_start[1]) / (imaginary_end[0] - imaginary_start[0])

        is_more_horizontal = abs(diff.y) <= abs(diff.x)
        object.__setattr__(self, "is_more_horizontal", is_more_horizontal)
        object.__setattr__(self, "_imaginary_start", imaginary_start)
        object.__setattr__(self, "_gradient", gradient)
        object.__setattr__(self, "_clockwise", None if is_more_horizontal else self.rotate(QuadrantalAngle.CLOCKWISE_90))

    def __repr__(self) -> str:
        return f"Line({self.start}, {self.end})"

    def with_start(self, start: IntVector2) -> "Line":
        return Line(start, self.end)

    def with_end(self, end: IntVector2) -> "Line":
        return Line(self.start, end)

    @property
    def vector(self) -> IntVector2:
        """The vector from start to end."""
        return self.end - self.start

    @property
    def reverse(self) -> "Line":
        return Line(self.end, self.start)

    @property
    def is_point(self) -> bool:
        return self.start == self.end

    @property
    def is_vertical(self) -> bool:
        return self.start.x == self.end.x

    @property
    def is_horizontal(self) -> bool:
        return self.start.y == self.end.y

    @property
    def is_perfect(self) -> bool:
        """Whether the line is made of equal-sized blocks along its dominant axis."""
        rect = self.bounding_rect
        if self.is_more_horizontal:
            return rect.width % rect.height == 0
        return rect.height % rect.width == 0

    @property
    def bounding_rect(self) -> IntRect:
        return IntRect(self.start, self.end)

    def __len__(self) -> int:
        return IntVector2.sup_distance(self.start, self.end) + 1

    def _calculate_y(self, x: int) -> Fraction:
        return (x - self._imaginary_start[0]) * self._gradient + self._imaginary_start[1]

    def _calculate_x(self, y: Fraction) -> Fraction:
        return (y - self._imaginary_start[1]) / self._gradient + self._imaginary_start[0]

    def __getitem__(self, index: Union[int, slice]) -> Union[IntVector2, List[IntVector2]]:
        """Return the index-th pixel from the start in O(1).

        Negative indices count back from the end. Slices return a list.

        Raises:
            IndexError: If index is out of range.
        """
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]

        count = len(self)
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"Index {index} out of range for {self}, which has {count} pixels.")

        if not self.is_more_horizontal:
            return self._clockwise[index].rotate(QuadrantalAngle.ANTICLOCKWISE_90)

        if index == 0:
            return self.start
        if index == count - 1:
            return self.end

        x = self.start.x + index * sign(self.end.x - self.start.x)
        y = self._calculate_y(x)
        if y.denominator == 2:
            first_half = 2 * abs(x - self.start.x) <= abs(self.end.x - self.start.x)
            if first_half:
                return IntVector2(x, floor(y) + (0 if self.start.y < self.end.y else 1))
            return IntVector2(x, floor(y) + (1 if self.start.y < self.end.y else 0))
        return IntVector2(x, floor(y + HALF))

    def __iter__(self) -> Iterator[IntVector2]:
        for i in range(len(self)):
            yield self[i]

    def contains(self, point: IntVector2) -> bool:
        if self.is_more_horizontal:
            index = (point.x - self.start.x) * sign(self.end.x - self.start.x)
        else:
            index = (point.y - self.start.y) * sign(self.end.y - self.start.y)
        if not 0 <= index < len(self):
            return False
        return self[index] == point

    def point_is_to_left(self, point: IntVector2) -> bool:
        """Whether the point is on the line or to the left of it, within the line's rows."""
        return self.bounding_rect.contains_y(point.y) and point.x <= self.max_x(point.y)

    def point_is_to_right(self, point: IntVector2) -> bool:
        """Whether the point is on the line or to the right of it, within the line's rows."""
        return self.bounding_rect.contains_y(point.y) and point.x >= self.min_x(point.y)

    def point_is_below(self, point: IntVector2) -> bool:
        """Whether the point is on the line or below it, within the line's columns."""
        return self.bounding_rect.contains_x(point.x) and point.y <= self.max_y(point.x)

    def point_is_above(self, point: IntVector2) -> bool:
        """Whether the point is on the line or above it, within the line's columns."""
        return self.bounding_rect.contains_x(point.x) and point.y >= self.min_y(point.x)

    def _min_x(self, y: int, coord_name: str, coord_range: range) -> int:
        if not self.bounding_rect.contains_y(y):
            raise ValueError(
                f"{coord_name} must be within the {coord_name} range of the line. "
                f"{coord_name}: {y}; line {coord_name} range: "
                f"[{coord_range.start}, {coord_range.stop - 1}]"
            )

        if not self.is_more_horizontal:
            return self[(y - self.start.y) * sign(self.end.y - self.start.y)].x
        if self.start.y == self.end.y:
            return min(self.start.x, self.end.x)

        # Invert the rounding: find where the imaginary line leaves the row below
        y_to_invert = y - HALF * sign(self.end.y - self.start.y) * sign(self.end.x - self.start.x)
        x = self._calculate_x(y_to_invert)
        if x.denominator == 1:
            x = int(x)
            first_half = 2 * abs(x - self.start.x) <= abs(self.end.x - self.start.x)
            if first_half:
                return x + 1 if self.start.x < self.end.x else x
            return x if self.start.x < self.end.x else x + 1
        return ceil(x)

    def min_x(self, y: int) -> int:
        """Smallest x of the pixels in row y.

        Raises:
            ValueError: If y is outside the line's y range.
        """
        return self._min_x(y, "y", self.bounding_rect.y_range)

    def max_x(self, y: int) -> int:
        """Largest x of the pixels in row y.

        Raises:
            ValueError: If y is outside the line's y range.
        """
        return -(-self)._min_x(-y, "y", self.bounding_rect.y_range)

    def min_y(self, x: int) -> int:
        """Smallest y of the pixels in column x.

        Raises:
            ValueError: If x is outside the line's x range.
        """
        return self.rotate(QuadrantalAngle.CLOCKWISE_90)._min_x(-x, "x", self.bounding_rect.x_range)

    def max_y(self, x: int) -> int:
        """Largest y of the pixels in column x.

        Raises:
            ValueError: If x is outside the line's x range.
        """
        return -self.rotate(QuadrantalAngle.ANTICLOCKWISE_90)._min_x(x, "x", self.bounding_rect.x_range)

    def count_on_x(self, x: int) -> int:
        """Number of pixels in column x."""
        if not self.bounding_rect.contains_x(x):
            return 0
        return self.max_y(x) - self.min_y(x) + 1

    def count_on_y(self, y: int) -> int:
        """Number of pixels in row y."""
        if not self.bounding_rect.contains_y(y):
            return 0
        return self.max_x(y) - self.min_x(y) + 1

    def translate(self, translation: IntVector2) -> "Line":
        return Line(self.start + translation, self.end + translation)

    def rotate(self, angle: QuadrantalAngle) -> "Line":
        return Line(self.start.rotate(angle), self.end.rotate(angle))

    def reflect(self, axis: Axis) -> "Line":
        return Line(self.start.reflect(axis), self.end.reflect(axis))

    def __neg__(self) -> "Line":
        return Line(-self.start, -self.end)
