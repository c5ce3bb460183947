"""Checks every shape should pass."""

import random

from pixel_shapes.geometry import IntRect, IntVector2


def random_rects(count, seed=0, region=IntRect(IntVector2(-12, -12), IntVector2(12, 12))):
    """Random sub-rects of a region, reproducible from the seed."""
    rng = random.Random(seed)
    for _ in range(count):
        a = IntVector2(rng.randint(region.min_x, region.max_x), rng.randint(region.min_y, region.max_y))
        b = IntVector2(rng.randint(region.min_x, region.max_x), rng.randint(region.min_y, region.max_y))
        yield IntRect(a, b)


def small_rects(max_size=6):
    """Every rect with its bottom-left at the origin, up to the given size."""
    for width in range(1, max_size + 1):
        for height in range(1, max_size + 1):
            yield IntRect(IntVector2(0, 0), IntVector2(width - 1, height - 1))


def assert_shape_properties(shape):
    """Check enumeration, count, bounding rect and membership agree."""
    pixels = list(shape)
    assert pixels, f"{shape} is empty"
    assert len(set(pixels)) == len(pixels), f"{shape} repeats pixels"
    assert len(shape) == len(pixels), f"Count of {shape}"
    assert IntRect.bounding_rect(*pixels) == shape.bounding_rect, f"Bounding rect of {shape}"

    points = set(pixels)
    rect = shape.bounding_rect
    region = IntRect(rect.bottom_left + IntVector2.DOWN_LEFT, rect.top_right + IntVector2.UP_RIGHT)
    for point in region:
        assert shape.contains(point) == (point in points), f"{shape} and {point}"


def assert_connected(shape):
    """Check the pixels form one piece under king moves."""
    points = set(shape)
    start = next(iter(points))
    seen = {start}
    stack = [start]
    while stack:
        point = stack.pop()
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                neighbour = point + IntVector2(dx, dy)
                if neighbour in points and neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    assert seen == points, f"{shape} is not connected"


def assert_translates(shape, translation=IntVector2(3, -2)):
    """Check translating the shape translates its pixels."""
    assert set(shape + translation) == {p + translation for p in shape}
    assert shape - translation + translation == shape
