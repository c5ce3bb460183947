"""Axis-aligned rectangles."""

from dataclasses import dataclass
from typing import Iterator

from ..geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from .base import Shape


@dataclass(frozen=True, repr=False)
class Rectangle(Shape):
    """A filled or outlined axis-aligned rectangle."""
    bounding_rect: IntRect
    filled: bool

    def __repr__(self) -> str:
        return f"Rectangle({self.bounding_rect}, {'filled' if self.filled else 'unfilled'})"

    @property
    def is_square(self) -> bool:
        return self.bounding_rect.is_square

    def __len__(self) -> int:
        rect = self.bounding_rect
        if self.filled:
            return rect.area
        if rect.width == 1:
            return rect.height
        if rect.height == 1:
            return rect.width
        # Each side, minus the four corners counted twice
        return 2 * (rect.width + rect.height) - 4

    def contains(self, point: IntVector2) -> bool:
        rect = self.bounding_rect
        if not rect.contains(point):
            return False
        if self.filled:
            return True
        return not (rect.min_x < point.x < rect.max_x and rect.min_y < point.y < rect.max_y)

    def __iter__(self) -> Iterator[IntVector2]:
        """Yield the pixels; an outline goes clockwise from the bottom-left corner."""
        rect = self.bounding_rect
        if self.filled:
            yield from rect
            return

        for y in rect.y_range:
            yield IntVector2(rect.min_x, y)
        if rect.width == 1:
            return
        for x in rect.x_range[1:]:
            yield IntVector2(x, rect.max_y)
        if rect.height == 1:
            return
        for y in reversed(rect.y_range[:-1]):
            yield IntVector2(rect.max_x, y)
        for x in reversed(rect.x_range[1:-1]):
            yield IntVector2(x, rect.min_y)

    def translate(self, translation: IntVector2) -> "Rectangle":
        return Rectangle(self.bounding_rect + translation, self.filled)

    def rotate(self, angle: QuadrantalAngle) -> "Rectangle":
        return Rectangle(self.bounding_rect.rotate(angle), self.filled)

    def reflect(self, axis: Axis) -> "Rectangle":
        return Rectangle(self.bounding_rect.reflect(axis), self.filled)

    def __neg__(self) -> "Rectangle":
        return self.rotate(QuadrantalAngle.HALF_TURN)
