"""Tests for diamonds."""

import pytest
from helpers import assert_connected, assert_shape_properties, assert_translates, random_rects, small_rects
from pixel_shapes.geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from pixel_shapes.shapes import Diamond


def v(x, y):
    return IntVector2(x, y)


@pytest.mark.parametrize("filled", [False, True])
def test_shape_properties(filled):
    """Test enumeration, count, bounding rect and contains agree."""
    for rect in list(small_rects(7)) + list(random_rects(60)):
        diamond = Diamond(rect, filled)
        assert_shape_properties(diamond)
        assert_connected(diamond)


@pytest.mark.parametrize("filled", [False, True])
def test_thin_diamonds_fill_their_rect(filled):
    """Test diamonds one or two pixels wide are their whole rect."""
    for height in range(1, 12):
        for width in (1, 2):
            rect = IntRect(v(0, 0), v(width - 1, height - 1))
            assert set(Diamond(rect, filled)) == set(rect)


def test_perfect_six_by_three():
    """Test a 6x3 diamond is drawn with blocks of two."""
    diamond = Diamond(IntRect(v(0, 0), v(5, 2)), False)
    expected = {v(0, 1), v(1, 1), v(4, 1), v(5, 1), v(2, 0), v(3, 0), v(2, 2), v(3, 2)}
    assert set(diamond) == expected
    assert len(diamond) == 8


def test_perfect_diamonds():
    """Test diamonds that can be drawn with equal blocks are."""
    for num_blocks in range(1, 5):
        for block in range(1, 5):
            width = block * (2 * num_blocks - 1)
            height = 2 * num_blocks - 1
            diamond = Diamond(IntRect(v(0, 0), v(width - 1, height - 1)), False)

            expected = set()
            middle_y = height // 2
            y_offset = 0
            num_in_block = 0
            x_offset = 0
            while x_offset <= width - 1 - x_offset:
                num_in_block += 1
                for x in (x_offset, width - 1 - x_offset):
                    expected.add(v(x, middle_y + y_offset))
                    expected.add(v(x, middle_y - y_offset))
                if num_in_block == block:
                    num_in_block = 0
                    y_offset += 1
                x_offset += 1

            assert set(diamond) == expected, diamond


def test_ten_by_ten_outline():
    """Test a square diamond's edges are counted once each."""
    diamond = Diamond(IntRect(v(0, 0), v(9, 9)), False)
    pixels = list(diamond)
    assert len(pixels) == 20
    assert len(diamond) == 20
    assert diamond.is_square
    for axis in (Axis.VERTICAL, Axis.HORIZONTAL):
        reflected = {p.reflect(axis) + (v(9, 0) if axis is Axis.VERTICAL else v(0, 9)) for p in pixels}
        assert reflected == set(pixels)


def test_reflective_symmetry():
    """Test diamonds are symmetric across their central axes."""
    for filled in (False, True):
        for rect in small_rects(9):
            diamond = Diamond(rect, filled)
            pixels = set(diamond)
            width, height = rect.width, rect.height
            assert {v(width - 1 - p.x, p.y) for p in pixels} == pixels, diamond
            assert {v(p.x, height - 1 - p.y) for p in pixels} == pixels, diamond


def test_transforms():
    """Test reflections, the half turn and translation."""
    for rect in random_rects(30, seed=3):
        diamond = Diamond(rect, False)
        pixels = set(diamond)
        for axis in (Axis.VERTICAL, Axis.HORIZONTAL):
            assert set(diamond.reflect(axis)) == {p.reflect(axis) for p in pixels}
        assert set(-diamond) == {-p for p in pixels}
        assert set(diamond.rotate(QuadrantalAngle.HALF_TURN).rotate(QuadrantalAngle.HALF_TURN)) == pixels
        assert_translates(diamond)


def test_equality_and_repr():
    """Test value semantics."""
    a = Diamond(IntRect(v(0, 0), v(4, 2)), True)
    assert a == Diamond(IntRect(v(0, 2), v(4, 0)), True)
    assert a != Diamond(IntRect(v(0, 0), v(4, 2)), False)
    assert hash(a) == hash(a.copy())
    assert repr(a) == "Diamond(IntRect((0, 0), (4, 2)), filled)"
