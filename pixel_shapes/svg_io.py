"""SVG and text output utilities for pixel-shapes."""

import sys
from typing import Iterable, List, Optional

from .geometry import IntRect, IntVector2


def pixels_to_svg_rects(pixels: List[IntVector2], bounds: IntRect, pixel_size: int = 10, fill: str = 'black') -> str:
    """Convert pixels to SVG rect elements.

    SVG's y axis points down, so rows are flipped to keep up as up.
    """
    elements = []
    for pixel in pixels:
        x = (pixel.x - bounds.min_x) * pixel_size
        y = (bounds.max_y - pixel.y) * pixel_size
        elements.append(f'  <rect x="{x}" y="{y}" width="{pixel_size}" height="{pixel_size}" fill="{fill}"/>')
    return '\n'.join(elements)


def create_svg_from_pixels(pixels: Iterable[IntVector2], pixel_size: int = 10, fill: str = 'black') -> str:
    """Create a complete SVG document drawing each pixel as a square.

    Args:
        pixels: Pixels to draw; repeats are drawn once
        pixel_size: Side length of each square, in SVG units
        fill: Fill color

    Returns:
        Complete SVG document as string
    """
    unique = list(dict.fromkeys(pixels))
    if not unique:
        return '<?xml version="1.0" encoding="UTF-8"?>\n<svg xmlns="http://www.w3.org/2000/svg"/>\n'

    bounds = IntRect.bounding_rect(*unique)
    width = bounds.width * pixel_size
    height = bounds.height * pixel_size

    svg = f'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {width} {height}" width="{width}" height="{height}">
{pixels_to_svg_rects(unique, bounds, pixel_size, fill)}
</svg>
'''
    return svg


def render_ascii(pixels: Iterable[IntVector2], on: str = '#', off: str = '.') -> str:
    """Draw pixels as text, top row first."""
    points = set(pixels)
    if not points:
        return ''
    bounds = IntRect.bounding_rect(*points)
    rows = []
    for y in reversed(bounds.y_range):
        rows.append(''.join(on if IntVector2(x, y) in points else off for x in bounds.x_range))
    return '\n'.join(rows) + '\n'


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout.

    Args:
        content: SVG content
        path: File path, or None to write to stdout
    """
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
