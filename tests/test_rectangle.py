"""Tests for rectangles."""

import pytest
from helpers import assert_connected, assert_shape_properties, assert_translates, random_rects, small_rects
from pixel_shapes.geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from pixel_shapes.shapes import Rectangle


def v(x, y):
    return IntVector2(x, y)


@pytest.mark.parametrize("filled", [False, True])
def test_shape_properties(filled):
    """Test enumeration, count, bounding rect and contains agree."""
    for rect in list(small_rects()) + list(random_rects(100)):
        rectangle = Rectangle(rect, filled)
        assert_shape_properties(rectangle)
        assert_connected(rectangle)


def test_single_point():
    """Test a 1x1 rectangle is one pixel."""
    for filled in (False, True):
        assert list(Rectangle(IntRect(v(2, 3), v(2, 3)), filled)) == [v(2, 3)]


def test_outline():
    """Test an outline leaves out the interior and goes round from the bottom-left."""
    rectangle = Rectangle(IntRect(v(0, 0), v(3, 2)), False)
    pixels = list(rectangle)
    assert pixels[0] == v(0, 0)
    assert set(pixels) == set(IntRect(v(0, 0), v(3, 2))) - {v(1, 1), v(2, 1)}
    assert len(rectangle) == 10


def test_filled_is_whole_rect():
    """Test a filled rectangle is every point in the rect."""
    rect = IntRect(v(-2, 1), v(3, 4))
    assert set(Rectangle(rect, True)) == set(rect)
    assert len(Rectangle(rect, True)) == rect.area


def test_transforms():
    """Test rotating and reflecting transform the pixels."""
    for rect in random_rects(30, seed=1):
        rectangle = Rectangle(rect, False)
        pixels = set(rectangle)
        for angle in QuadrantalAngle:
            assert set(rectangle.rotate(angle)) == {p.rotate(angle) for p in pixels}
        for axis in Axis:
            assert set(rectangle.reflect(axis)) == {p.reflect(axis) for p in pixels}
        assert set(-rectangle) == {-p for p in pixels}
        assert_translates(rectangle)


def test_equality_and_repr():
    """Test value semantics."""
    a = Rectangle(IntRect(v(0, 0), v(2, 3)), True)
    assert a == Rectangle(IntRect(v(2, 3), v(0, 0)), True)
    assert a != Rectangle(IntRect(v(0, 0), v(2, 3)), False)
    assert hash(a) == hash(a.copy())
    assert not a.is_square
    assert Rectangle(IntRect(v(0, 0), v(3, 3)), True).is_square
    assert repr(a) == "Rectangle(IntRect((0, 0), (2, 3)), filled)"
