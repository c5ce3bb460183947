"""Axis-aligned integer rectangles."""

from dataclasses import dataclass
from typing import Iterator, Union

from .types import Axis, IntVector2, QuadrantalAngle


@dataclass(frozen=True, repr=False)
class IntRect:
    """An axis-aligned rectangle of integer points, inclusive of both corners.

    Built from any two opposite corners; always stored as bottom-left and
    top-right, so a rect contains at least one point.
    """
    bottom_left: IntVector2
    top_right: IntVector2

    def __init__(self, corner: IntVector2, opposite_corner: IntVector2):
        object.__setattr__(self, "bottom_left", IntVector2.min(corner, opposite_corner))
        object.__setattr__(self, "top_right", IntVector2.max(corner, opposite_corner))

    def __repr__(self) -> str:
        return f"IntRect({self.bottom_left}, {self.top_right})"

    @property
    def min_x(self) -> int:
        return self.bottom_left.x

    @property
    def max_x(self) -> int:
        return self.top_right.x

    @property
    def min_y(self) -> int:
        return self.bottom_left.y

    @property
    def max_y(self) -> int:
        return self.top_right.y

    @property
    def bottom_right(self) -> IntVector2:
        return IntVector2(self.max_x, self.min_y)

    @property
    def top_left(self) -> IntVector2:
        return IntVector2(self.min_x, self.max_y)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    @property
    def x_range(self) -> range:
        return range(self.min_x, self.max_x + 1)

    @property
    def y_range(self) -> range:
        return range(self.min_y, self.max_y + 1)

    def contains_x(self, x: int) -> bool:
        return self.min_x <= x <= self.max_x

    def contains_y(self, y: int) -> bool:
        return self.min_y <= y <= self.max_y

    def contains(self, point: IntVector2) -> bool:
        return self.contains_x(point.x) and self.contains_y(point.y)

    def __contains__(self, point: IntVector2) -> bool:
        return self.contains(point)

    def overlaps(self, other: "IntRect") -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x
                and self.min_y <= other.max_y and other.min_y <= self.max_y)

    @staticmethod
    def bounding_rect(*items: Union["IntRect", IntVector2]) -> "IntRect":
        """Smallest rect containing all the given rects and points.

        Raises:
            ValueError: If nothing is given.
        """
        if not items:
            raise ValueError("Cannot take the bounding rect of nothing.")
        corners = []
        for item in items:
            if isinstance(item, IntRect):
                corners.extend((item.bottom_left, item.top_right))
            else:
                corners.append(item)
        return IntRect(IntVector2.min(*corners), IntVector2.max(*corners))

    def translate(self, translation: IntVector2) -> "IntRect":
        return IntRect(self.bottom_left + translation, self.top_right + translation)

    def __add__(self, translation: IntVector2) -> "IntRect":
        if not isinstance(translation, IntVector2):
            return NotImplemented
        return self.translate(translation)

    __radd__ = __add__

    def __sub__(self, translation: IntVector2) -> "IntRect":
        if not isinstance(translation, IntVector2):
            return NotImplemented
        return self.translate(-translation)

    def rotate(self, angle: QuadrantalAngle) -> "IntRect":
        return IntRect(self.bottom_left.rotate(angle), self.top_right.rotate(angle))

    def reflect(self, axis: Axis) -> "IntRect":
        return IntRect(self.bottom_left.reflect(axis), self.top_right.reflect(axis))

    def __len__(self) -> int:
        return self.area

    def __iter__(self) -> Iterator[IntVector2]:
        """Yield every point, row by row from the bottom-left."""
        for y in self.y_range:
            for x in self.x_range:
                yield IntVector2(x, y)
