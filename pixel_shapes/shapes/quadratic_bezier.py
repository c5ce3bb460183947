"""Quadratic Bezier curves, sampled into connected pixel sequences."""

from dataclasses import dataclass
from fractions import Fraction
from math import floor
from typing import Iterator, Tuple

from ..exceptions import IterationLimitError
from ..geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from .base import Shape

MAX_SAMPLES = 10000
MAX_BISECTIONS = 64


def _round(value: Fraction) -> int:
    """Round to the nearest integer, halves upwards."""
    return floor(value + Fraction(1, 2))


@dataclass(frozen=True, repr=False)
class QuadraticBezier(Shape):
    """The curve from start to end pulled towards control.

    Iterating samples the curve at increasing parameters, halving each step
    until the next pixel is a king move away, so consecutive pixels touch and
    are never equal.
    """
    start: IntVector2
    control: IntVector2
    end: IntVector2

    def __repr__(self) -> str:
        return f"QuadraticBezier({self.start}, {self.control}, {self.end})"

    def evaluate(self, t: Fraction) -> Tuple[Fraction, Fraction]:
        """Exact point of the curve at parameter t in [0, 1]."""
        t = Fraction(t)
        s = 1 - t
        a, b, c = s * s, 2 * s * t, t * t
        return (a * self.start.x + b * self.control.x + c * self.end.x,
                a * self.start.y + b * self.control.y + c * self.end.y)

    def _pixel_at(self, t: Fraction) -> IntVector2:
        x, y = self.evaluate(t)
        return IntVector2(_round(x), _round(y))

    @property
    def reverse(self) -> "QuadraticBezier":
        return QuadraticBezier(self.end, self.control, self.start)

    @property
    def bounding_rect(self) -> IntRect:
        return IntRect.bounding_rect(*self)

    def __iter__(self) -> Iterator[IntVector2]:
        t = Fraction(0)
        point = self.start
        yield point

        samples = 0
        while IntVector2.sup_distance(point, self.end) > 1:
            samples += 1
            if samples > MAX_SAMPLES:
                raise IterationLimitError(f"Sampling {self} took more than {MAX_SAMPLES} steps.")

            next_t = (1 + t) / 2
            next_point = self._pixel_at(next_t)
            bisections = 0
            while IntVector2.sup_distance(next_point, point) > 1:
                bisections += 1
                if bisections > MAX_BISECTIONS:
                    raise IterationLimitError(f"Could not find a pixel next to {point} on {self}.")
                next_t = (next_t + t) / 2
                next_point = self._pixel_at(next_t)

            t = next_t
            if next_point != point:
                point = next_point
                yield point

        if point != self.end:
            yield self.end

    def contains(self, point: IntVector2) -> bool:
        return any(pixel == point for pixel in self)

    def translate(self, translation: IntVector2) -> "QuadraticBezier":
        return QuadraticBezier(self.start + translation, self.control + translation, self.end + translation)

    def rotate(self, angle: QuadrantalAngle) -> "QuadraticBezier":
        return QuadraticBezier(self.start.rotate(angle), self.control.rotate(angle), self.end.rotate(angle))

    def reflect(self, axis: Axis) -> "QuadraticBezier":
        return QuadraticBezier(self.start.reflect(axis), self.control.reflect(axis), self.end.reflect(axis))

    def __neg__(self) -> "QuadraticBezier":
        return QuadraticBezier(-self.start, -self.control, -self.end)
