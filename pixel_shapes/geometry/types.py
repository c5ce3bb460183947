"""Type definitions for pixel-shapes geometry."""

from dataclasses import dataclass
from enum import Enum
from math import gcd
from typing import Tuple, Union


def sign(n: int) -> int:
    """Return -1, 0 or 1 according to the sign of n."""
    return (n > 0) - (n < 0)


class QuadrantalAngle(Enum):
    """A rotation by a multiple of 90 degrees. Positive values are clockwise."""
    ZERO = 0
    CLOCKWISE_90 = 90
    HALF_TURN = 180
    ANTICLOCKWISE_90 = -90

    def __neg__(self) -> "QuadrantalAngle":
        if self is QuadrantalAngle.CLOCKWISE_90:
            return QuadrantalAngle.ANTICLOCKWISE_90
        if self is QuadrantalAngle.ANTICLOCKWISE_90:
            return QuadrantalAngle.CLOCKWISE_90
        return self


class Axis(Enum):
    """An axis through the origin that shapes can be reflected across."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_45 = "diagonal_45"  # the line y = x
    MINUS_45 = "minus_45"  # the line y = -x

    @property
    def is_cardinal(self) -> bool:
        return self in (Axis.HORIZONTAL, Axis.VERTICAL)


@dataclass(frozen=True)
class IntVector2:
    """2D integer point."""
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    @classmethod
    def of(cls, value: "VectorLike") -> "IntVector2":
        """Build a vector from an IntVector2 or an (x, y) pair."""
        if isinstance(value, IntVector2):
            return value
        x, y = value
        return cls(x, y)

    def __add__(self, other: "IntVector2") -> "IntVector2":
        if not isinstance(other, IntVector2):
            return NotImplemented
        return IntVector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "IntVector2") -> "IntVector2":
        if not isinstance(other, IntVector2):
            return NotImplemented
        return IntVector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "IntVector2":
        return IntVector2(-self.x, -self.y)

    def __mul__(self, scalar: int) -> "IntVector2":
        if not isinstance(scalar, int):
            return NotImplemented
        return IntVector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __abs__(self) -> "IntVector2":
        return IntVector2(abs(self.x), abs(self.y))

    @property
    def sign(self) -> "IntVector2":
        """Componentwise sign."""
        return IntVector2(sign(self.x), sign(self.y))

    @staticmethod
    def min(*vectors: "IntVector2") -> "IntVector2":
        """Componentwise minimum."""
        return IntVector2(min(v.x for v in vectors), min(v.y for v in vectors))

    @staticmethod
    def max(*vectors: "IntVector2") -> "IntVector2":
        """Componentwise maximum."""
        return IntVector2(max(v.x for v in vectors), max(v.y for v in vectors))

    @staticmethod
    def sup_distance(a: "IntVector2", b: "IntVector2") -> int:
        """Chebyshev distance: the number of king moves from a to b."""
        return max(abs(a.x - b.x), abs(a.y - b.y))

    @staticmethod
    def l1_distance(a: "IntVector2", b: "IntVector2") -> int:
        return abs(a.x - b.x) + abs(a.y - b.y)

    def simplify(self) -> "IntVector2":
        """Divide both components by their greatest common divisor."""
        divisor = gcd(self.x, self.y)
        if divisor == 0:
            return self
        return IntVector2(self.x // divisor, self.y // divisor)

    def rotate(self, angle: QuadrantalAngle) -> "IntVector2":
        if angle is QuadrantalAngle.ZERO:
            return self
        if angle is QuadrantalAngle.CLOCKWISE_90:
            return IntVector2(self.y, -self.x)
        if angle is QuadrantalAngle.ANTICLOCKWISE_90:
            return IntVector2(-self.y, self.x)
        if angle is QuadrantalAngle.HALF_TURN:
            return IntVector2(-self.x, -self.y)
        raise ValueError(f"Unknown angle: {angle}")

    def reflect(self, axis: Axis) -> "IntVector2":
        if axis is Axis.HORIZONTAL:
            return IntVector2(self.x, -self.y)
        if axis is Axis.VERTICAL:
            return IntVector2(-self.x, self.y)
        if axis is Axis.DIAGONAL_45:
            return IntVector2(self.y, self.x)
        if axis is Axis.MINUS_45:
            return IntVector2(-self.y, -self.x)
        raise ValueError(f"Unknown axis: {axis}")


VectorLike = Union[IntVector2, Tuple[int, int]]

IntVector2.ZERO = IntVector2(0, 0)
IntVector2.UP = IntVector2(0, 1)
IntVector2.DOWN = IntVector2(0, -1)
IntVector2.LEFT = IntVector2(-1, 0)
IntVector2.RIGHT = IntVector2(1, 0)
IntVector2.UP_LEFT = IntVector2(-1, 1)
IntVector2.UP_RIGHT = IntVector2(1, 1)
IntVector2.DOWN_LEFT = IntVector2(-1, -1)
IntVector2.DOWN_RIGHT = IntVector2(1, -1)


class Direction(Enum):
    """The eight king-move directions, in anticlockwise order from east."""
    EAST = (1, 0)
    NORTH_EAST = (1, 1)
    NORTH = (0, 1)
    NORTH_WEST = (-1, 1)
    WEST = (-1, 0)
    SOUTH_WEST = (-1, -1)
    SOUTH = (0, -1)
    SOUTH_EAST = (1, -1)

    @classmethod
    def of(cls, vector: IntVector2) -> "Direction":
        """Look up the direction of a unit king move.

        Raises:
            ValueError: If vector is not one of the eight unit king moves.
        """
        return cls((vector.x, vector.y))

    @classmethod
    def between(cls, start: IntVector2, end: IntVector2) -> "Direction":
        return cls.of(end - start)

    @property
    def vector(self) -> IntVector2:
        return IntVector2(*self.value)

    @property
    def index(self) -> int:
        """Position in anticlockwise order, 0 (east) to 7 (south-east)."""
        return _DIRECTION_ORDER.index(self)

    def rotate(self, angle: QuadrantalAngle) -> "Direction":
        return Direction.of(self.vector.rotate(angle))


_DIRECTION_ORDER = list(Direction)
