"""Tests for ellipses."""

import pytest
from helpers import assert_connected, assert_shape_properties, assert_translates, random_rects, small_rects
from pixel_shapes.geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from pixel_shapes.shapes import Ellipse


def v(x, y):
    return IntVector2(x, y)


@pytest.mark.parametrize("filled", [False, True])
def test_shape_properties(filled):
    """Test enumeration, count, bounding rect and contains agree."""
    for rect in list(small_rects(8)) + list(random_rects(80)):
        ellipse = Ellipse(rect, filled)
        assert_shape_properties(ellipse)
        assert_connected(ellipse)


@pytest.mark.parametrize("filled", [False, True])
def test_thin_ellipses_fill_their_rect(filled):
    """Test ellipses one or two pixels across are their whole rect."""
    for length in range(1, 12):
        for thickness in (1, 2):
            rect = IntRect(v(0, 0), v(thickness - 1, length - 1))
            assert set(Ellipse(rect, filled)) == set(rect)
            rect = IntRect(v(0, 0), v(length - 1, thickness - 1))
            assert set(Ellipse(rect, filled)) == set(rect)


def test_three_thick_outlines_do_not_repeat():
    """Test the outline walk does not retrace pixels at the tips of thin ellipses."""
    for length in range(3, 16):
        for rect in (IntRect(v(0, 0), v(length - 1, 2)), IntRect(v(0, 0), v(2, length - 1))):
            ellipse = Ellipse(rect, False)
            assert_shape_properties(ellipse)
            assert_connected(ellipse)

    ellipse = Ellipse(IntRect(v(0, 0), v(11, 2)), False)
    pixels = list(ellipse)
    assert len(pixels) == len(set(pixels)) == 20
    assert len(ellipse) == 20


@pytest.mark.parametrize("filled", [False, True])
def test_three_by_three_is_a_plus(filled):
    """Test the 3x3 ellipse is a plus sign."""
    ellipse = Ellipse(IntRect(v(0, 0), v(2, 2)), filled)
    expected = {v(1, 0), v(0, 1), v(2, 1), v(1, 2)}
    if filled:
        expected.add(v(1, 1))
    assert set(ellipse) == expected


def test_five_by_five_circle():
    """Test a 5x5 circle loses only its corners, and its outline drops the middle."""
    rect = IntRect(v(0, 0), v(4, 4))
    corners = {v(0, 0), v(4, 0), v(0, 4), v(4, 4)}
    filled = Ellipse(rect, True)
    assert filled.is_circle
    assert set(filled) == set(rect) - corners
    unfilled = Ellipse(rect, False)
    assert set(unfilled) == set(rect) - corners - set(IntRect(v(1, 1), v(3, 3)))
    assert len(unfilled) == 12


def test_outline_starts_top_left():
    """Test the outline starts at the leftmost pixel of the top row."""
    ellipse = Ellipse(IntRect(v(0, 0), v(3, 2)), False)
    pixels = list(ellipse)
    assert pixels[0] == v(1, 2)
    assert set(pixels) == {v(1, 2), v(2, 2), v(3, 1), v(2, 0), v(1, 0), v(0, 1)}


def test_symmetry():
    """Test rotating and reflecting transform the pixels."""
    for rect in random_rects(30, seed=2):
        for filled in (False, True):
            ellipse = Ellipse(rect, filled)
            pixels = set(ellipse)
            for angle in QuadrantalAngle:
                assert set(ellipse.rotate(angle)) == {p.rotate(angle) for p in pixels}
            for axis in Axis:
                assert set(ellipse.reflect(axis)) == {p.reflect(axis) for p in pixels}
            assert set((-ellipse).rotate(QuadrantalAngle.HALF_TURN)) == pixels
            assert_translates(ellipse)


def test_is_inside_ignores_filled():
    """Test is_inside includes the interior even for an outline."""
    ellipse = Ellipse(IntRect(v(0, 0), v(6, 6)), False)
    assert ellipse.is_inside(v(3, 3))
    assert not ellipse.contains(v(3, 3))
    assert not ellipse.is_inside(v(0, 0))


def test_equality_and_repr():
    """Test value semantics."""
    a = Ellipse(IntRect(v(0, 0), v(4, 2)), True)
    assert a == Ellipse(IntRect(v(4, 2), v(0, 0)), True)
    assert a != Ellipse(IntRect(v(0, 0), v(4, 2)), False)
    assert a.copy() == a
    assert repr(a) == "Ellipse(IntRect((0, 0), (4, 2)), filled)"
