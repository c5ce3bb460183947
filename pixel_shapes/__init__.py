"""pixel-shapes: pixel-art rasterization of lines, paths and shapes."""

__version__ = "0.1.0"

from .geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from .shapes import (
    AnyShape,
    Diamond,
    Ellipse,
    IsometricCuboid,
    IsometricHexagon,
    IsometricRectangle,
    Line,
    Path,
    QuadraticBezier,
    Rectangle,
    RightAngleLocation,
    RightTriangle,
    Shape,
)

__all__ = [
    "Axis",
    "IntRect",
    "IntVector2",
    "QuadrantalAngle",
    "AnyShape",
    "Diamond",
    "Ellipse",
    "IsometricCuboid",
    "IsometricHexagon",
    "IsometricRectangle",
    "Line",
    "Path",
    "QuadraticBezier",
    "Rectangle",
    "RightAngleLocation",
    "RightTriangle",
    "Shape",
]
