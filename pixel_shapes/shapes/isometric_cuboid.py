"""Isometric cuboids: an isometric rectangle extruded upwards."""

from dataclasses import dataclass
from typing import Iterator, List, Union

from ..geometry import Axis, IntRect, IntVector2
from .base import Shape
from .isometric_rectangle import IsometricRectangle
from .line import Line
from .path import Path


@dataclass(frozen=True, repr=False)
class IsometricCuboid(Shape):
    """A cuboid with an isometric rectangle as its base.

    The faces' own ``filled`` flags are ignored.
    """
    bottom_face: IsometricRectangle
    height: int
    filled: bool
    include_back_edges: bool

    def __init__(self, face: IsometricRectangle, height: int, filled: bool, include_back_edges: bool):
        """Create a cuboid.

        Args:
            face: The bottom face if height is non-negative, else the top face
            height: Number of pixels from the bottom face up to the top face
            filled: Whether to fill the cuboid
            include_back_edges: Whether the wireframe shows the hidden edges
        """
        # The faces are drawn as outlines whatever the given face says
        face = IsometricRectangle(face.start_corner, face.end_corner, False)
        bottom_face = face if height >= 0 else face + IntVector2(0, height)
        object.__setattr__(self, "bottom_face", bottom_face)
        object.__setattr__(self, "height", height)
        object.__setattr__(self, "filled", filled)
        object.__setattr__(self, "include_back_edges", include_back_edges)

    def __repr__(self) -> str:
        filled = "filled" if self.filled else "unfilled"
        back_edges = "show back edges" if self.include_back_edges else "don't show back edges"
        return (f"IsometricCuboid({self.bottom_face.start_corner}, {self.bottom_face.end_corner}, "
                f"{self.height}, {filled}, {back_edges})")

    @property
    def top_face(self) -> IsometricRectangle:
        return self.bottom_face + abs(self.height) * IntVector2.UP

    @property
    def _given_face(self) -> IsometricRectangle:
        return self.bottom_face if self.height >= 0 else self.top_face

    def copy(self) -> "IsometricCuboid":
        return IsometricCuboid(self._given_face, self.height, self.filled, self.include_back_edges)

    def with_height(self, height: int) -> "IsometricCuboid":
        """The cuboid with the same bottom face and a new height."""
        face = self.bottom_face if height >= 0 else self.bottom_face + abs(height) * IntVector2.UP
        return IsometricCuboid(face, height, self.filled, self.include_back_edges)

    @property
    def wireframe(self) -> List[Union[Line, Path]]:
        """The edges: bottom face, top face, then the vertical edges."""
        bottom, top = self.bottom_face, self.top_face
        edges: List[Union[Line, Path]] = [
            bottom.border if self.include_back_edges else bottom.lower_border,
            top.border,
            Line(bottom.left_corner, top.left_corner),
            Line(bottom.right_corner, top.right_corner),
            Line(bottom.bottom_corner, top.bottom_corner),
        ]
        if self.include_back_edges:
            edges.append(Line(bottom.top_corner, top.top_corner))
        return edges

    @property
    def bounding_rect(self) -> IntRect:
        return IntRect.bounding_rect(self.bottom_face.bounding_rect, self.top_face.bounding_rect)

    def contains(self, point: IntVector2) -> bool:
        if self.filled:
            return (self.bounding_rect.contains_x(point.x)
                    and self.bottom_face.lower_border.min_y(point.x) <= point.y <= self.top_face.upper_border.max_y(point.x))
        return any(edge.contains(point) for edge in self.wireframe)

    def __iter__(self) -> Iterator[IntVector2]:
        if self.filled:
            lower = self.bottom_face.lower_border
            upper = self.top_face.upper_border
            for x in self.bounding_rect.x_range:
                for y in range(lower.min_y(x), upper.max_y(x) + 1):
                    yield IntVector2(x, y)
            return

        # The edges share their ends
        seen = set()
        for edge in self.wireframe:
            for point in edge:
                if point not in seen:
                    seen.add(point)
                    yield point

    def translate(self, translation: IntVector2) -> "IsometricCuboid":
        return IsometricCuboid(self._given_face + translation, self.height, self.filled, self.include_back_edges)

    def reflect(self, axis: Axis) -> "IsometricCuboid":
        """Reflect across the vertical axis.

        Raises:
            ValueError: For any other axis, which would turn the cuboid upside down.
        """
        if axis is not Axis.VERTICAL:
            raise ValueError(f"Isometric cuboids can only be reflected across the vertical axis, not {axis}.")
        return IsometricCuboid(self._given_face.reflect(axis), self.height, self.filled, self.include_back_edges)

