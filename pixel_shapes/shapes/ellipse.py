"""Axis-aligned ellipses.

Integer coordinates here denote the centre of a pixel, so the ellipse for a
rect has its centre at the midpoint of the rect's corner pixels and its radii
are half the rect's width and height.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from ..exceptions import IterationLimitError
from ..geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from .base import Shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class Ellipse(Shape):
    """A filled or outlined ellipse inscribed in a rect."""
    bounding_rect: IntRect
    filled: bool

    def __repr__(self) -> str:
        return f"Ellipse({self.bounding_rect}, {'filled' if self.filled else 'unfilled'})"

    @property
    def is_circle(self) -> bool:
        return self.bounding_rect.is_square

    def is_inside(self, pixel: IntVector2) -> bool:
        """Whether the pixel is inside the ellipse, border included."""
        rect = self.bounding_rect
        # Thin ellipses would lose their end rows/columns, so use the whole rect
        if rect.width <= 2 or rect.height <= 2:
            return rect.contains(pixel)
        # A plus sign rather than a 3x3 square
        if rect.width == 3 and rect.height == 3:
            return IntVector2.l1_distance(pixel, rect.bottom_left + IntVector2.UP_RIGHT) <= 1

        # (dx / rx)^2 + (dy / ry)^2 <= 1, scaled by (2 * rx * ry)^2 to stay in integers
        width, height = rect.width, rect.height
        twice_dx = 2 * pixel.x - (rect.min_x + rect.max_x)
        twice_dy = 2 * pixel.y - (rect.min_y + rect.max_y)
        return twice_dx * twice_dx * height * height + twice_dy * twice_dy * width * width <= width * width * height * height

    def contains(self, point: IntVector2) -> bool:
        if not self.is_inside(point):
            return False
        if self.filled:
            return True
        return not all(self.is_inside(point + step) for step in
                       (IntVector2.UP, IntVector2.DOWN, IntVector2.LEFT, IntVector2.RIGHT))

    def __iter__(self) -> Iterator[IntVector2]:
        rect = self.bounding_rect
        if rect.width == 1 or rect.height == 1:
            yield from rect
            return

        if self.filled:
            middle_x = (rect.min_x + rect.max_x) // 2
            for y in rect.y_range:
                x = middle_x
                while self.is_inside(IntVector2(x, y)):
                    yield IntVector2(x, y)
                    x -= 1
                x = middle_x + 1
                while self.is_inside(IntVector2(x, y)):
                    yield IntVector2(x, y)
                    x += 1
            return

        yield from self._walk_border()

    def _walk_border(self) -> Iterator[IntVector2]:
        """Walk clockwise round the border from the leftmost pixel of the top row.

        At each pixel, try to step straight on, then diagonally inwards, then
        turn inwards; if none of these is inside, turn 90 degrees clockwise
        and try again.
        """
        rect = self.bounding_rect
        start = self._top_left_pixel()
        primary = IntVector2.RIGHT
        secondary = IntVector2.DOWN_RIGHT
        tertiary = IntVector2.DOWN

        max_steps = 4 * (rect.width + rect.height) + 8
        steps = 0
        pixel = start
        # Thin ellipses turn round at their tips and retrace a pixel
        walked = set()
        while True:
            steps += 1
            if steps > max_steps:
                raise IterationLimitError(f"Border walk of {self} did not return to {start} within {max_steps} steps.")

            for direction in (primary, secondary, tertiary):
                if self.is_inside(pixel + direction):
                    if pixel not in walked:
                        walked.add(pixel)
                        yield pixel
                    pixel += direction
                    break
            else:
                primary = primary.rotate(QuadrantalAngle.CLOCKWISE_90)
                secondary = secondary.rotate(QuadrantalAngle.CLOCKWISE_90)
                tertiary = tertiary.rotate(QuadrantalAngle.CLOCKWISE_90)
                continue

            if pixel == start:
                logger.debug("Walked border of %s in %d steps", self, steps)
                return

    def _top_left_pixel(self) -> IntVector2:
        """Leftmost pixel of the highest non-empty row."""
        rect = self.bounding_rect
        for y in reversed(rect.y_range):
            for x in rect.x_range:
                if self.is_inside(IntVector2(x, y)):
                    return IntVector2(x, y)
        raise ValueError(f"{self} has no pixels.")

    def translate(self, translation: IntVector2) -> "Ellipse":
        return Ellipse(self.bounding_rect + translation, self.filled)

    def rotate(self, angle: QuadrantalAngle) -> "Ellipse":
        return Ellipse(self.bounding_rect.rotate(angle), self.filled)

    def reflect(self, axis: Axis) -> "Ellipse":
        return Ellipse(self.bounding_rect.reflect(axis), self.filled)

    def __neg__(self) -> "Ellipse":
        return self.rotate(QuadrantalAngle.HALF_TURN)
