"""Command-line interface for pixel-shapes."""

import logging
import sys
import time
from typing import Callable, Dict, List, Tuple

import click

from .geometry import IntRect, IntVector2
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
)
from .svg_io import create_svg_from_pixels, render_ascii, write_svg


def _points(ints: Tuple[int, ...]) -> List[IntVector2]:
    return [IntVector2(x, y) for x, y in zip(ints[::2], ints[1::2])]


def _rect(ints: Tuple[int, ...]) -> IntRect:
    first, second = _points(ints)
    return IntRect(first, second)


# kind: (argument names, whether the argument count is variable, builder)
ShapeBuilder = Callable[[Tuple[int, ...], bool, dict], AnyShape]
SHAPE_KINDS: Dict[str, Tuple[str, bool, ShapeBuilder]] = {
    'line': ('X1 Y1 X2 Y2', False,
             lambda ints, filled, opts: Line(*_points(ints))),
    'path': ('X1 Y1 [X2 Y2 ...]', True,
             lambda ints, filled, opts: Path.from_points(*_points(ints))),
    'bezier': ('X1 Y1 CX CY X2 Y2', False,
               lambda ints, filled, opts: QuadraticBezier(*_points(ints))),
    'rectangle': ('X1 Y1 X2 Y2', False,
                  lambda ints, filled, opts: Rectangle(_rect(ints), filled)),
    'ellipse': ('X1 Y1 X2 Y2', False,
                lambda ints, filled, opts: Ellipse(_rect(ints), filled)),
    'diamond': ('X1 Y1 X2 Y2', False,
                lambda ints, filled, opts: Diamond(_rect(ints), filled)),
    'right-triangle': ('X1 Y1 X2 Y2', False,
                       lambda ints, filled, opts: RightTriangle(
                           _rect(ints), RightAngleLocation[opts['right_angle'].upper().replace('-', '_')], filled)),
    'iso-rectangle': ('X1 Y1 X2 Y2', False,
                      lambda ints, filled, opts: IsometricRectangle(*_points(ints), filled)),
    'iso-cuboid': ('X1 Y1 X2 Y2 HEIGHT', False,
                   lambda ints, filled, opts: IsometricCuboid(
                       IsometricRectangle(*_points(ints[:4]), filled), ints[4], filled, opts['back_edges'])),
    'iso-hexagon': ('X1 Y1 X2 Y2', False,
                    lambda ints, filled, opts: IsometricHexagon(_rect(ints), filled)),
}


def build_shape(kind: str, ints: Tuple[int, ...], filled: bool = False, **opts) -> AnyShape:
    """Build a shape of the given kind from its integer arguments.

    Raises:
        ValueError: If the kind is unknown or the number of integers is wrong.
    """
    if kind not in SHAPE_KINDS:
        raise ValueError(f"Unknown shape kind: {kind}")
    arg_names, variable, builder = SHAPE_KINDS[kind]
    expected = len(arg_names.split())
    if variable:
        if not ints or len(ints) % 2 != 0:
            raise ValueError(f"{kind} takes an even number of integers, at least 2: {arg_names}")
    elif len(ints) != expected:
        raise ValueError(f"{kind} takes {expected} integers: {arg_names}; got {len(ints)}")
    opts.setdefault('right_angle', 'bottom-left')
    opts.setdefault('back_edges', False)
    return builder(tuple(ints), filled, opts)


@click.group()
@click.version_option()
def main():
    """pixel-shapes: Pixel-art rasterization of lines and shapes.

    Draw a shape as ASCII art or SVG, or query the winding number of a loop.

    Examples:

        pixel-shapes draw ellipse 0 0 9 6 --filled

        pixel-shapes draw line 0 0 8 3 --format svg -o line.svg
    """
    pass


@main.command(context_settings={'ignore_unknown_options': True})
@click.argument('kind', type=click.Choice(sorted(SHAPE_KINDS)))
@click.argument('ints', nargs=-1, type=int, required=True)
@click.option('--filled/--unfilled', default=False, help='Fill the shape (default: unfilled)')
@click.option('--right-angle', default='bottom-left',
              type=click.Choice(['bottom-left', 'bottom-right', 'top-left', 'top-right']),
              help='Right angle corner for right-triangle (default: bottom-left)')
@click.option('--back-edges', is_flag=True, help='Show hidden edges of iso-cuboid')
@click.option('--format', '-f', 'output_format', default='ascii',
              type=click.Choice(['ascii', 'svg']), help='Output format (default: ascii)')
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--pixel-size', default=10, type=int, help='SVG size of one pixel (default: 10)')
@click.option('--fill', default='black', help='SVG pixel color (default: black)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def draw(kind, ints, filled, right_angle, back_edges, output_format, output, pixel_size, fill, verbose):
    """Draw a shape.

    KIND: the shape to draw (see `pixel-shapes shapes`)

    INTS: the shape's integer arguments
    """
    start_time = time.time()
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        shape = build_shape(kind, ints, filled, right_angle=right_angle, back_edges=back_edges)
        pixels = list(shape)
    except (ValueError, RuntimeError) as e:
        click.echo(f"Error building shape: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Built {shape!r}", err=True)
        click.echo(f"Bounding rect {shape.bounding_rect}, {len(pixels)} pixels", err=True)

    if output_format == 'svg':
        content = create_svg_from_pixels(pixels, pixel_size=pixel_size, fill=fill)
    else:
        content = render_ascii(pixels)

    try:
        write_svg(content, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
def shapes():
    """List available shape kinds."""
    click.echo("Available shapes:")
    click.echo()
    for kind, (arg_names, _, _) in sorted(SHAPE_KINDS.items()):
        click.echo(f"  {kind:<15} {arg_names}")
    click.echo()
    click.echo("Use: pixel-shapes draw <kind> <ints...> [--filled]")


@main.command(context_settings={'ignore_unknown_options': True})
@click.argument('x', type=int)
@click.argument('y', type=int)
@click.argument('ints', nargs=-1, type=int, required=True)
def winding(x, y, ints):
    """Print the winding number of (X, Y) about a loop.

    INTS: the loop's points as X1 Y1 X2 Y2 ...; each is joined to the next by a line
    """
    if len(ints) % 2 != 0:
        click.echo("Error: points need an even number of integers", err=True)
        sys.exit(1)
    try:
        path = Path.from_points(*_points(ints))
        click.echo(path.winding_number(IntVector2(x, y)))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
