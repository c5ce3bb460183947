"""Paths: connected sequences of lines."""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Iterator, List, Sequence, Tuple

from ..geometry import Axis, Direction, IntRect, IntVector2, QuadrantalAngle
from ..geometry.polygon import winding_number
from .base import Shape
from .line import Line


@dataclass(frozen=True, repr=False)
class Path(Shape):
    """An ordered sequence of lines, each ending next to where the next begins.

    Consecutive lines must be within sup distance 1 of each other. A point
    shared by the end of one line and the start of the next is only
    enumerated once, and if the path is a loop whose last point is its first
    point, that point is only enumerated once too.
    """
    lines: Tuple[Line, ...]

    def __init__(self, *lines: Line):
        """Create a path from lines that already connect.

        Raises:
            ValueError: If no lines are given, or two consecutive lines are
                more than sup distance 1 apart.
        """
        if not lines:
            raise ValueError("Cannot create a Path from 0 lines.")
        for line, next_line in zip(lines, lines[1:]):
            if IntVector2.sup_distance(line.end, next_line.start) > 1:
                raise ValueError(f"{line} and {next_line} do not connect.")
        object.__setattr__(self, "lines", tuple(lines))

    @classmethod
    def from_points(cls, *points: IntVector2) -> "Path":
        """Create a path joining each point to the next with a line.

        Raises:
            ValueError: If no points are given.
        """
        if not points:
            raise ValueError("Cannot create a Path from 0 points.")
        if len(points) == 1:
            return cls(Line(points[0], points[0]))
        return cls(*(Line(point, next_point) for point, next_point in zip(points, points[1:])))

    @classmethod
    def concat(cls, *paths: "Path") -> "Path":
        """Join paths end to end.

        Raises:
            ValueError: If no paths are given, or a path does not connect to
                the next.
        """
        if not paths:
            raise ValueError("Cannot concat an empty collection of Paths.")
        for path, next_path in zip(paths, paths[1:]):
            if IntVector2.sup_distance(path.end, next_path.start) > 1:
                raise ValueError(f"{path} and {next_path} do not connect.")
        return cls(*(line for path in paths for line in path.lines))

    def __repr__(self) -> str:
        return f"Path({', '.join(repr(line) for line in self.lines)})"

    def copy(self) -> "Path":
        return Path(*self.lines)

    @property
    def start(self) -> IntVector2:
        return self.lines[0].start

    @property
    def end(self) -> IntVector2:
        return self.lines[-1].end

    @property
    def is_loop(self) -> bool:
        return IntVector2.sup_distance(self.start, self.end) <= 1

    @property
    def reverse(self) -> "Path":
        return Path(*(line.reverse for line in reversed(self.lines)))

    @property
    def bounding_rect(self) -> IntRect:
        return IntRect.bounding_rect(*(line.bounding_rect for line in self.lines))

    @property
    def is_point(self) -> bool:
        return self.bounding_rect.area == 1

    @property
    def is_vertical(self) -> bool:
        return self.bounding_rect.width == 1

    @property
    def is_horizontal(self) -> bool:
        return self.bounding_rect.height == 1

    def _count(self, count_line: Callable[[Line], int],
               is_counted: Callable[[IntVector2], bool]) -> int:
        """Sum per-line counts, removing junction points that would be counted twice.

        Args:
            count_line: Counts the relevant points of one line
            is_counted: Whether count_line counted a given junction point

        Returns:
            The count over the whole path
        """
        lines = self.lines
        count = count_line(lines[0])
        if len(lines) == 1:
            return count

        for previous, line in zip(lines, lines[1:-1]):
            count += count_line(line)
            if line.start == previous.end and is_counted(previous.end):
                count -= 1

        last = lines[-1]
        to_add = count_line(last)
        if last.start == lines[-2].end and is_counted(lines[-2].end):
            to_add -= 1
        if last.end == lines[0].start and is_counted(lines[0].start):
            to_add -= 1
        # Both checks can remove the same single point
        return count + max(to_add, 0)

    def __len__(self) -> int:
        return self._count(len, lambda point: True)

    def count_on_x(self, x: int) -> int:
        """Number of points enumerated in column x, counting repeats."""
        return self._count(lambda line: line.count_on_x(x), lambda point: point.x == x)

    def count_on_y(self, y: int) -> int:
        """Number of points enumerated in row y, counting repeats."""
        return self._count(lambda line: line.count_on_y(y), lambda point: point.y == y)

    def _iter_with_line_index(self) -> Iterator[Tuple[IntVector2, int]]:
        lines = self.lines
        for point in lines[0]:
            yield point, 0
        if len(lines) == 1:
            return

        previous_point = lines[0].end
        for index in range(1, len(lines) - 1):
            line = lines[index]
            start = 1 if line.start == previous_point else 0
            for point in line[start:]:
                yield point, index
            previous_point = line.end

        last = lines[-1]
        start = 1 if last.start == previous_point else 0
        end = len(last) - 1 if last.end == lines[0].start else len(last)
        for point in last[start:end]:
            yield point, len(lines) - 1

    def __iter__(self) -> Iterator[IntVector2]:
        for point, _ in self._iter_with_line_index():
            yield point

    def contains(self, point: IntVector2) -> bool:
        return any(line.contains(point) for line in self.lines)

    def _check_y(self, y: int):
        rect = self.bounding_rect
        if not rect.contains_y(y):
            raise ValueError(f"y must be within the y range of the Path. y: {y}; "
                             f"Path y range: [{rect.min_y}, {rect.max_y}].")

    def _check_x(self, x: int):
        rect = self.bounding_rect
        if not rect.contains_x(x):
            raise ValueError(f"x must be within the x range of the Path. x: {x}; "
                             f"Path x range: [{rect.min_x}, {rect.max_x}].")

    def min_x(self, y: int) -> int:
        self._check_y(y)
        return min(line.min_x(y) for line in self.lines if line.bounding_rect.contains_y(y))

    def max_x(self, y: int) -> int:
        self._check_y(y)
        return max(line.max_x(y) for line in self.lines if line.bounding_rect.contains_y(y))

    def min_y(self, x: int) -> int:
        self._check_x(x)
        return min(line.min_y(x) for line in self.lines if line.bounding_rect.contains_x(x))

    def max_y(self, x: int) -> int:
        self._check_x(x)
        return max(line.max_y(x) for line in self.lines if line.bounding_rect.contains_x(x))

    @property
    def self_intersects(self) -> bool:
        """Whether some point is enumerated more than once."""
        seen = set()
        for point in self:
            if point in seen:
                return True
            seen.add(point)
        return False

    def winding_number(self, point: IntVector2) -> int:
        """Net number of anticlockwise turns the loop makes around the point.

        The loop is treated as the polygon through the centres of its
        enumerated pixels. Consecutive pixels are king moves apart, so no edge
        passes through a pixel centre other than its own ends.

        Raises:
            ValueError: If the path is not a loop, or the point is on the path.
        """
        if not self.is_loop:
            raise ValueError(f"Winding number is only defined for loops. {self} is not a loop.")
        if self.contains(point):
            raise ValueError(f"Winding number is undefined for points on the path. Point: {point}; path: {self}.")
        return winding_number(point, list(self))

    @property
    def is_simple_polygon(self) -> bool:
        """Whether the path is a loop that never crosses itself.

        The path may touch itself, and may go back along itself, as long as
        at every revisited point the two visits stay on the same side of each
        other.
        """
        if not self.is_loop:
            return False
        points = _remove_spikes(_remove_repeats(list(self)))
        if len(points) <= 2:
            return True

        visits: Dict[IntVector2, List[int]] = defaultdict(list)
        for index, point in enumerate(points):
            visits[point].append(index)
        for indices in visits.values():
            for k, i in enumerate(indices):
                for j in indices[k + 1:]:
                    if _visits_cross(points, i, j):
                        return False
        return True

    def translate(self, translation: IntVector2) -> "Path":
        return Path(*(line.translate(translation) for line in self.lines))

    def rotate(self, angle: QuadrantalAngle) -> "Path":
        return Path(*(line.rotate(angle) for line in self.lines))

    def reflect(self, axis: Axis) -> "Path":
        return Path(*(line.reflect(axis) for line in self.lines))

    def __neg__(self) -> "Path":
        return self.rotate(QuadrantalAngle.HALF_TURN)


def _remove_repeats(points: List[IntVector2]) -> List[IntVector2]:
    """Drop points equal to their cyclic predecessor."""
    result = [point for i, point in enumerate(points) if point != points[i - 1]]
    return result or points[:1]


def _remove_spikes(points: List[IntVector2]) -> List[IntVector2]:
    """Repeatedly cut out places where the cycle steps out and straight back.

    a, b, a becomes a, for any run of such back-tracking.
    """
    points = list(points)
    changed = True
    while changed and len(points) > 2:
        changed = False
        n = len(points)
        for i in range(n):
            if points[i - 1] == points[(i + 1) % n]:
                for index in sorted({i, (i + 1) % n}, reverse=True):
                    del points[index]
                changed = True
                break
    return points


def _angle_from(centre: IntVector2, reference: IntVector2, point: IntVector2) -> int:
    """Anticlockwise angle, in eighths of a turn, from centre->reference to centre->point."""
    return (Direction.between(centre, point).index - Direction.between(centre, reference).index) % 8


def _visits_cross(points: Sequence[IntVector2], i: int, j: int) -> bool:
    """Whether the two visits to points[i] == points[j] cross each other.

    If the visits share no neighbours, they cross iff the neighbours of one
    visit separate the neighbours of the other around the shared point. If
    they run along each other (in the same or opposite direction), the shared
    stretch is followed to both of its ends, and they cross iff the second
    visit arrives on one side of the first and leaves on the other.
    """
    n = len(points)

    def at(k: int) -> IntVector2:
        return points[k % n]

    centre = at(i)
    a, b, c, d = at(i - 1), at(i + 1), at(j - 1), at(j + 1)

    if a == c or b == d:
        step = 1
    elif a == d or b == c:
        step = -1
    else:
        def between(point: IntVector2) -> bool:
            angle = _angle_from(centre, a, point)
            return 0 < angle < _angle_from(centre, a, b)
        return between(c) != between(d)

    # Second visit, walked in the same direction as the first
    def other(m: int) -> IntVector2:
        return at(j + step * m)

    back = 0
    while back < n and at(i - back - 1) == other(-back - 1):
        back += 1
    forward = 0
    while forward < n and at(i + forward + 1) == other(forward + 1):
        forward += 1
    if back >= n or forward >= n:
        return False

    entry = at(i - back)
    entry_reference = at(i - back + 1)
    arrives_first = (_angle_from(entry, entry_reference, at(i - back - 1))
                     < _angle_from(entry, entry_reference, other(-back - 1)))

    exit_ = at(i + forward)
    exit_reference = at(i + forward - 1)
    leaves_first = (_angle_from(exit_, exit_reference, at(i + forward + 1))
                    < _angle_from(exit_, exit_reference, other(forward + 1)))

    return arrives_first == leaves_first
