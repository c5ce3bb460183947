#!/usr/bin/env python3
"""
Shapely comparison benchmark for filled loops.

Rasterizes closed shapes as pixel-art loops, fills them with pixel-shapes'
winding number and with Shapely's point-in-polygon test, and reports the
timings and how often the two fills agree. They are not expected to agree
exactly: pixel-shapes fills inside the rasterized outline, Shapely inside
the exact polygon through the vertices.

Usage:
    python benchmark_shapely.py [svg_file]
    python benchmark_shapely.py drawing.svg --scale 0.5

Without an SVG file, random star-shaped polygons are generated.
"""

import argparse
import math
import sys
import time
from pathlib import Path as FilePath

try:
    import numpy as np
    import shapely
    from shapely.geometry import Polygon
    from svgpathtools import svg2paths2
except ImportError as e:
    print(f"Missing dependency: {e}")
    print("Install with: pip install shapely svgpathtools numpy")
    sys.exit(1)

from pixel_shapes import IntVector2, Path


def svg_to_vertex_lists(svg_path: str, scale: float = 1.0) -> list[list[tuple[int, int]]]:
    """Sample each closed SVG path and round the samples to pixel coordinates."""
    paths, attributes, svg_attributes = svg2paths2(svg_path)
    vertex_lists = []

    for path in paths:
        if len(path) == 0 or not path.isclosed():
            continue

        num_samples = max(8, int(path.length() * scale / 4))
        vertices = []
        for t in np.linspace(0.0, 1.0, num_samples, endpoint=False):
            point = path.point(t)
            # SVG y points down
            vertex = (round(point.real * scale), -round(point.imag * scale))
            if not vertices or vertices[-1] != vertex:
                vertices.append(vertex)

        if len(vertices) >= 3:
            vertex_lists.append(vertices)

    return vertex_lists


def random_vertex_lists(count: int = 20, radius: int = 40, seed: int = 0) -> list[list[tuple[int, int]]]:
    """Generate random star-shaped polygons around the origin."""
    rng = np.random.default_rng(seed)
    vertex_lists = []
    for _ in range(count):
        num_vertices = int(rng.integers(5, 16))
        angles = np.sort(rng.uniform(0, 2 * math.pi, num_vertices))
        radii = rng.uniform(radius / 3, radius, num_vertices)
        xs = np.rint(radii * np.cos(angles)).astype(int)
        ys = np.rint(radii * np.sin(angles)).astype(int)
        vertices = []
        for vertex in zip(xs.tolist(), ys.tolist()):
            if not vertices or vertices[-1] != vertex:
                vertices.append(vertex)
        if len(vertices) >= 3:
            vertex_lists.append(vertices)
    return vertex_lists


def fill_with_winding_number(loop: Path) -> set:
    """Pixels on or inside the loop, by winding number."""
    filled = set(loop)
    for point in loop.bounding_rect:
        if point not in filled and loop.winding_number(point) != 0:
            filled.add(point)
    return filled


def fill_with_shapely(vertices: list[tuple[int, int]]) -> set:
    """Pixels whose centres Shapely puts inside or on the polygon."""
    polygon = Polygon(vertices)
    xs, ys = zip(*vertices)
    grid_x, grid_y = np.meshgrid(np.arange(min(xs), max(xs) + 1), np.arange(min(ys), max(ys) + 1))
    inside = shapely.intersects_xy(polygon, grid_x, grid_y)
    return {IntVector2(int(x), int(y)) for x, y in zip(grid_x[inside], grid_y[inside])}


def benchmark(vertex_lists: list[list[tuple[int, int]]]):
    """Run the comparison."""
    loops = [Path.from_points(*(IntVector2(x, y) for x, y in vertices + vertices[:1])) for vertices in vertex_lists]
    simple = [loop.is_simple_polygon for loop in loops]

    winding_start = time.perf_counter()
    winding_fills = [fill_with_winding_number(loop) for loop in loops]
    winding_time = time.perf_counter() - winding_start

    shapely_start = time.perf_counter()
    shapely_fills = [fill_with_shapely(vertices) for vertices in vertex_lists]
    shapely_time = time.perf_counter() - shapely_start

    total_pixels = 0
    differing_pixels = 0
    for ours, theirs in zip(winding_fills, shapely_fills):
        total_pixels += len(ours | theirs)
        differing_pixels += len(ours ^ theirs)

    print()
    print("=" * 50)
    print("RESULTS (pixel-shapes vs Shapely)")
    print("=" * 50)
    print(f"Loops:             {len(loops)} ({sum(simple)} simple)")
    print(f"Pixels compared:   {total_pixels}")
    print(f"Pixels differing:  {differing_pixels} ({100 * differing_pixels / max(total_pixels, 1):.2f}%)")
    print(f"Winding time:      {winding_time*1000:.1f}ms")
    print(f"Shapely time:      {shapely_time*1000:.1f}ms")
    print("=" * 50)

    return winding_time, shapely_time


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("svg_file", nargs="?", help="SVG file with closed paths")
    parser.add_argument("--scale", type=float, default=1.0, help="Pixels per SVG unit (default: 1.0)")
    args = parser.parse_args()

    if args.svg_file is None:
        print("Generating random polygons")
        vertex_lists = random_vertex_lists()
    elif not FilePath(args.svg_file).exists():
        print(f"Error: {args.svg_file} not found")
        print("Usage: python benchmark_shapely.py [svg_file]")
        sys.exit(1)
    else:
        print(f"Loading: {args.svg_file}")
        vertex_lists = svg_to_vertex_lists(args.svg_file, args.scale)

    benchmark(vertex_lists)
