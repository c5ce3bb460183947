"""Pixel-art shapes.

Every shape is an immutable, hashable value with a ``bounding_rect``, a
``contains`` test, a lazy enumeration of its pixels and ``len()``.
"""

from typing import Union

from .base import Shape
from .line import Line
from .path import Path
from .quadratic_bezier import QuadraticBezier
from .rectangle import Rectangle
from .ellipse import Ellipse
from .diamond import Diamond
from .right_triangle import RightAngleLocation, RightTriangle
from .isometric_rectangle import IsometricRectangle
from .isometric_cuboid import IsometricCuboid
from .isometric_hexagon import IsometricHexagon

AnyShape = Union[
    Line,
    Path,
    QuadraticBezier,
    Rectangle,
    Ellipse,
    Diamond,
    RightTriangle,
    IsometricRectangle,
    IsometricCuboid,
    IsometricHexagon,
]

__all__ = [
    "AnyShape",
    "Shape",
    "Line",
    "Path",
    "QuadraticBezier",
    "Rectangle",
    "Ellipse",
    "Diamond",
    "RightAngleLocation",
    "RightTriangle",
    "IsometricRectangle",
    "IsometricCuboid",
    "IsometricHexagon",
]
