"""Geometry primitives for pixel-shapes."""

from .types import Axis, Direction, IntVector2, QuadrantalAngle, sign
from .rect import IntRect
from .polygon import (
    point_in_polygon,
    winding_number,
)

__all__ = [
    "Axis",
    "Direction",
    "IntVector2",
    "IntRect",
    "QuadrantalAngle",
    "sign",
    "point_in_polygon",
    "winding_number",
]
