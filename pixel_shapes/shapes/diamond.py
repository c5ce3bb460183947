"""Diamonds: rhombi inscribed in a rect, drawn from four lines."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..exceptions import IterationLimitError
from ..geometry import Axis, IntRect, IntVector2, QuadrantalAngle
from .base import Shape
from .line import Line

logger = logging.getLogger(__name__)


@dataclass(frozen=True, repr=False)
class Diamond(Shape):
    """A filled or outlined diamond whose corners touch the middle of each side of a rect."""
    bounding_rect: IntRect
    filled: bool
    # Bottom-left, bottom-right, top-right, top-left.
    edges: Tuple[Line, Line, Line, Line] = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "edges", self._compute_edges())

    def __repr__(self) -> str:
        return f"Diamond({self.bounding_rect}, {'filled' if self.filled else 'unfilled'})"

    @property
    def is_square(self) -> bool:
        return self.bounding_rect.is_square

    def _compute_edges(self) -> Tuple[Line, Line, Line, Line]:
        rect = self.bounding_rect
        half_width = rect.width // 2
        half_height = rect.height // 2
        edges: List[Line] = [
            Line(rect.top_left + half_height * IntVector2.DOWN, rect.bottom_right + half_width * IntVector2.LEFT),
            Line(rect.top_right + half_height * IntVector2.DOWN, rect.bottom_left + half_width * IntVector2.RIGHT),
            Line(rect.bottom_right + half_height * IntVector2.UP, rect.top_left + half_width * IntVector2.RIGHT),
            Line(rect.bottom_left + half_height * IntVector2.UP, rect.top_right + half_width * IntVector2.LEFT),
        ]

        # Start the edges from the ends of the longer axis so the shape is stable under rotation and reflection
        if rect.width > rect.height:
            edges = [edge.reverse for edge in edges]

        # Push the edges to overlap as much as possible. Diamonds that can be
        # drawn with perfect lines then are.
        if rect.width > rect.height:
            shifts = (IntVector2.RIGHT, IntVector2.LEFT, IntVector2.LEFT, IntVector2.RIGHT)

            def overlapping(edges):
                return edges[0].bounding_rect.max_x <= edges[1].max_x(rect.min_y)
        elif rect.width < rect.height:
            shifts = (IntVector2.UP, IntVector2.UP, IntVector2.DOWN, IntVector2.DOWN)

            def overlapping(edges):
                return edges[0].bounding_rect.max_y <= edges[3].max_y(rect.min_x)
        else:
            return tuple(edges)

        limit = rect.width + rect.height
        steps = 0
        while overlapping(edges):
            steps += 1
            if steps > limit:
                raise IterationLimitError(f"Could not fit the edges of {self} within {limit} steps.")
            edges = [edge.with_start(edge.start + shift) for edge, shift in zip(edges, shifts)]
        edges = [edge.with_start(edge.start - shift) for edge, shift in zip(edges, shifts)]

        logger.debug("Fitted edges of %s after %d steps", self, steps)
        return tuple(edges)

    def __len__(self) -> int:
        rect = self.bounding_rect
        if rect.width == 1 or rect.height == 1:
            return max(rect.width, rect.height)

        bottom_left, bottom_right, top_right, top_left = self.edges
        lower_top = bottom_left.bounding_rect.max_y
        if self.filled:
            count = 0
            for y in range(rect.min_y, lower_top + 1):
                count += bottom_right.max_x(y) - bottom_left.min_x(y) + 1
            for y in range(lower_top + 1, rect.max_y + 1):
                count += top_right.max_x(y) - top_left.min_x(y) + 1
            return count

        if rect.width <= 2 or rect.height <= 2:
            return rect.area

        # Use the symmetry across both axes. The end blocks of each edge are
        # shared with the neighbouring edges, so count those separately.
        edge_right = bottom_left.bounding_rect.max_x
        left_block_height = bottom_left.count_on_x(rect.min_x)
        left_block_width = bottom_left.count_on_y(lower_top)
        bottom_block_width = bottom_left.count_on_y(rect.min_y)
        bottom_block_height = bottom_left.count_on_x(edge_right)

        count = len(bottom_left)
        count -= left_block_height * left_block_width
        count -= bottom_block_width * bottom_block_height
        count *= 4
        count += 2 * (top_left.max_y(rect.min_x) - bottom_left.min_y(rect.min_x) + 1) * left_block_width
        count += 2 * (bottom_right.max_x(rect.min_y) - bottom_left.min_x(rect.min_y) + 1) * bottom_block_height
        return count

    def contains(self, point: IntVector2) -> bool:
        bottom_left, bottom_right, top_right, top_left = self.edges
        if self.filled:
            return ((bottom_left.point_is_to_right(point) and bottom_right.point_is_to_left(point))
                    or (top_left.point_is_to_right(point) and top_right.point_is_to_left(point)))
        return any(edge.contains(point) for edge in self.edges)

    def __iter__(self) -> Iterator[IntVector2]:
        rect = self.bounding_rect
        bottom_left, bottom_right, top_right, top_left = self.edges
        lower_top = bottom_left.bounding_rect.max_y

        if self.filled:
            for y in range(rect.min_y, lower_top + 1):
                for x in range(bottom_left.min_x(y), bottom_right.max_x(y) + 1):
                    yield IntVector2(x, y)
            for y in range(lower_top + 1, rect.max_y + 1):
                for x in range(top_left.min_x(y), top_right.max_x(y) + 1):
                    yield IntVector2(x, y)
            return

        # Each edge skips the pixels the edges before it already gave
        yield from bottom_left
        for pixel in bottom_right:
            if pixel.x > bottom_left.bounding_rect.max_x:
                yield pixel
        for pixel in top_right:
            if pixel.y > bottom_right.bounding_rect.max_y:
                yield pixel
        for pixel in top_left:
            if pixel.x < top_right.bounding_rect.min_x and pixel.y > lower_top:
                yield pixel

    def translate(self, translation: IntVector2) -> "Diamond":
        return Diamond(self.bounding_rect + translation, self.filled)

    def rotate(self, angle: QuadrantalAngle) -> "Diamond":
        return Diamond(self.bounding_rect.rotate(angle), self.filled)

    def reflect(self, axis: Axis) -> "Diamond":
        return Diamond(self.bounding_rect.reflect(axis), self.filled)

    def __neg__(self) -> "Diamond":
        return self.rotate(QuadrantalAngle.HALF_TURN)
