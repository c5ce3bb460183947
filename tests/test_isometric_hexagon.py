"""Tests for isometric hexagons."""

import pytest
from helpers import assert_connected, assert_shape_properties, assert_translates, random_rects, small_rects
from pixel_shapes.geometry import Axis, IntRect, IntVector2
from pixel_shapes.shapes import IsometricHexagon


def v(x, y):
    return IntVector2(x, y)


@pytest.mark.parametrize("filled", [False, True])
def test_shape_properties(filled):
    """Test enumeration, count, bounding rect and contains agree."""
    for rect in list(small_rects(8)) + list(random_rects(60)):
        hexagon = IsometricHexagon(rect, filled)
        assert_shape_properties(hexagon)
        assert_connected(hexagon)
        assert_translates(hexagon)
        assert IntRect.bounding_rect(rect, hexagon.bounding_rect) == rect


def test_example():
    """Test a 10x6 hexagon against a drawing."""
    hexagon = IsometricHexagon(IntRect(v(0, 0), v(9, 5)), False)
    expected = {
        v(4, 0), v(5, 0), v(6, 1), v(7, 1), v(8, 2), v(9, 2), v(9, 3), v(8, 3), v(7, 4), v(6, 4),
        v(5, 5), v(4, 5), v(3, 4), v(2, 4), v(1, 3), v(0, 3), v(0, 2), v(1, 2), v(2, 1), v(3, 1),
    }
    assert set(hexagon) == expected
    assert len(hexagon) == 20
    assert hexagon.border.is_loop
    assert hexagon.bounding_rect == IntRect(v(0, 0), v(9, 5))

    filled = IsometricHexagon(IntRect(v(0, 0), v(9, 5)), True)
    assert len(filled) == 36
    assert filled.contains(v(4, 2))
    assert not filled.contains(v(0, 0))


def test_narrows_to_fit():
    """Test a rect too wide for its height gives a narrower hexagon."""
    hexagon = IsometricHexagon(IntRect(v(0, 0), v(9, 2)), False)
    assert set(hexagon) == {v(4, 0), v(5, 0), v(6, 1), v(5, 2), v(4, 2), v(3, 1)}
    assert hexagon.bounding_rect == IntRect(v(3, 0), v(6, 2))
    assert hexagon == IsometricHexagon(IntRect(v(3, 0), v(6, 2)), False)


def test_thin_rects():
    """Test rects one or two pixels across."""
    assert set(IsometricHexagon(IntRect(v(0, 0), v(0, 4)), False)) == set(IntRect(v(0, 0), v(0, 4)))
    assert set(IsometricHexagon(IntRect(v(0, 0), v(1, 4)), False)) == set(IntRect(v(0, 0), v(1, 4)))
    assert set(IsometricHexagon(IntRect(v(0, 0), v(6, 0)), False)) == {v(3, 0)}
    assert set(IsometricHexagon(IntRect(v(0, 0), v(7, 0)), False)) == {v(3, 0), v(4, 0)}


def test_symmetry():
    """Test hexagons are symmetric across their central axes."""
    for filled in (False, True):
        for rect in small_rects(10):
            hexagon = IsometricHexagon(rect, filled)
            pixels = set(hexagon)
            box = hexagon.bounding_rect
            assert {v(box.min_x + box.max_x - p.x, p.y) for p in pixels} == pixels, hexagon
            assert {v(p.x, box.min_y + box.max_y - p.y) for p in pixels} == pixels, hexagon


def test_reflect_and_negate():
    """Test reflections move the bounding rect and refuse diagonal axes."""
    hexagon = IsometricHexagon(IntRect(v(0, 0), v(9, 5)), True)
    assert hexagon.reflect(Axis.VERTICAL).bounding_rect == IntRect(v(-9, 0), v(0, 5))
    assert hexagon.reflect(Axis.HORIZONTAL).bounding_rect == IntRect(v(0, -5), v(9, 0))
    assert set(-hexagon) == {-p for p in hexagon}
    with pytest.raises(ValueError):
        hexagon.reflect(Axis.MINUS_45)


def test_repr():
    hexagon = IsometricHexagon(IntRect(v(0, 0), v(9, 5)), True)
    assert repr(hexagon) == "IsometricHexagon(IntRect((0, 0), (9, 5)), filled)"
    assert hexagon.copy() == hexagon
