"""Tests for isometric cuboids."""

import random

import pytest
from helpers import assert_connected, assert_shape_properties, assert_translates
from pixel_shapes.geometry import Axis, IntVector2
from pixel_shapes.shapes import IsometricCuboid, IsometricRectangle, Line


def v(x, y):
    return IntVector2(x, y)


def random_cuboids(count, seed=0):
    rng = random.Random(seed)
    for _ in range(count):
        start = v(rng.randint(-8, 8), rng.randint(-8, 8))
        end = start + v(rng.randint(-8, 8), rng.randint(-8, 8))
        height = rng.randint(-6, 6)
        yield IsometricRectangle(start, end, False), height


CASES = [(IsometricRectangle(v(0, 0), v(0, 0), False), h) for h in (0, 1, 3, -2)] + list(random_cuboids(40))


@pytest.mark.parametrize("include_back_edges", [False, True])
@pytest.mark.parametrize("filled", [False, True])
def test_shape_properties(filled, include_back_edges):
    """Test enumeration, count, bounding rect and contains agree."""
    for face, height in CASES:
        cuboid = IsometricCuboid(face, height, filled, include_back_edges)
        assert_shape_properties(cuboid)
        assert_connected(cuboid)
        assert_translates(cuboid)


def test_point_face():
    """Test a cuboid on a single pixel is a vertical line."""
    face = IsometricRectangle(v(0, 0), v(0, 0), False)
    for filled in (False, True):
        cuboid = IsometricCuboid(face, 2, filled, False)
        assert set(cuboid) == {v(0, 0), v(0, 1), v(0, 2)}
        assert len(cuboid) == 3


def test_faces():
    """Test the top face is the bottom face moved up by the height."""
    face = IsometricRectangle(v(0, 0), v(7, 2), False)
    cuboid = IsometricCuboid(face, 4, False, False)
    assert cuboid.bottom_face == face
    assert cuboid.top_face == face + v(0, 4)
    assert cuboid.bounding_rect.max_y == face.bounding_rect.max_y + 4


def test_face_fill_is_ignored():
    """Test cuboids on filled and unfilled faces are the same cuboid."""
    for height in (4, -3):
        outline = IsometricCuboid(IsometricRectangle(v(0, 0), v(7, 2), False), height, True, False)
        solid = IsometricCuboid(IsometricRectangle(v(0, 0), v(7, 2), True), height, True, False)
        assert outline == solid
        assert hash(outline) == hash(solid)
        assert not solid.bottom_face.filled
        assert not solid.top_face.filled
        assert set(outline) == set(solid)


def test_negative_height():
    """Test a negative height makes the given face the top face."""
    face = IsometricRectangle(v(0, 0), v(7, 2), False)
    cuboid = IsometricCuboid(face, -3, True, False)
    assert cuboid.top_face == face
    assert cuboid.bottom_face == face - v(0, 3)
    assert cuboid.copy() == cuboid
    assert set(cuboid) == set(IsometricCuboid(face - v(0, 3), 3, True, False))


def test_with_height():
    """Test changing the height keeps the bottom face."""
    cuboid = IsometricCuboid(IsometricRectangle(v(0, 0), v(6, 3), False), 2, False, True)
    for height in (-4, 0, 5):
        changed = cuboid.with_height(height)
        assert changed.height == height
        assert changed.bottom_face == cuboid.bottom_face
        assert changed.top_face == cuboid.bottom_face + v(0, abs(height))
        assert changed.include_back_edges


def test_wireframe():
    """Test the edges shown with and without the back edges."""
    face = IsometricRectangle(v(0, 0), v(7, 2), False)
    front = IsometricCuboid(face, 4, False, False)
    back = IsometricCuboid(face, 4, False, True)
    assert len(front.wireframe) == 5
    assert len(back.wireframe) == 6
    assert front.wireframe[0] == face.lower_border
    assert back.wireframe[0] == face.border
    assert back.wireframe[-1] == Line(face.top_corner, face.top_corner + v(0, 4))
    assert set(front) <= set(back)
    # The back vertical edge is hidden
    assert not front.contains(face.top_corner + v(0, 1))
    assert back.contains(face.top_corner + v(0, 1))


def test_reflect():
    """Test reflecting across the vertical axis and refusing other axes."""
    face = IsometricRectangle(v(0, 0), v(7, 2), False)
    cuboid = IsometricCuboid(face, 4, False, False)
    assert cuboid.reflect(Axis.VERTICAL) == IsometricCuboid(face.reflect(Axis.VERTICAL), 4, False, False)
    for axis in (Axis.HORIZONTAL, Axis.DIAGONAL_45, Axis.MINUS_45):
        with pytest.raises(ValueError):
            cuboid.reflect(axis)


def test_repr():
    cuboid = IsometricCuboid(IsometricRectangle(v(0, 0), v(7, 2), False), 4, True, False)
    assert repr(cuboid) == "IsometricCuboid((0, 0), (7, 2), 4, filled, don't show back edges)"
