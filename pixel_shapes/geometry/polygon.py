"""Polygon operations on cyclic sequences of integer points.

A polygon here is the closed polyline through the given points in order,
with an implied edge from the last point back to the first.
"""

from typing import Sequence

from .types import IntVector2


def point_in_polygon(point: IntVector2, polygon: Sequence[IntVector2]) -> bool:
    """Check if a point is inside a polygon using ray casting (even-odd rule)."""
    if len(polygon) < 3:
        return False

    inside = False
    n = len(polygon)

    j = n - 1
    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y

        if ((yi > point.y) != (yj > point.y)) and \
           (point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def _cross(origin: IntVector2, a: IntVector2, b: IntVector2) -> int:
    """Positive when b is to the left of the directed edge origin -> a."""
    return (a.x - origin.x) * (b.y - origin.y) - (b.x - origin.x) * (a.y - origin.y)


def winding_number(point: IntVector2, polygon: Sequence[IntVector2]) -> int:
    """Count how many times the polygon winds anticlockwise around a point.

    Each edge that crosses the point's row is counted once, using a half-open
    rule on y (an edge covers the rows from its lower end inclusive to its
    upper end exclusive), so a vertex on the point's row is never counted
    twice and a local y-extremum is counted either twice or not at all.
    Horizontal edges never cross a row. The point must not lie on the polygon.

    Args:
        point: Point to test
        polygon: Vertices of the polygon, in order

    Returns:
        Number of anticlockwise turns minus clockwise turns
    """
    winding = 0
    n = len(polygon)
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        if a.y <= point.y:
            if b.y > point.y and _cross(a, b, point) > 0:
                winding += 1
        elif b.y <= point.y and _cross(a, b, point) < 0:
            winding -= 1
    return winding
