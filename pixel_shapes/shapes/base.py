"""Common interface for pixel shapes."""

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterator

from ..geometry import IntRect, IntVector2


class Shape(ABC):
    """A finite set of pixels with a lazy, restartable enumeration.

    Concrete shapes are frozen dataclasses, so they are immutable, hashable
    and compare equal when their defining fields are equal. Derived geometry
    is computed once, on construction; use ``dataclasses.replace`` to get a
    copy with a field changed.

    Every shape also exposes ``bounding_rect``, the smallest IntRect
    containing all of its pixels. It is not declared here because several
    shapes store it as a dataclass field.
    """

    bounding_rect: IntRect

    @abstractmethod
    def contains(self, point: IntVector2) -> bool:
        """Whether the point is one of the shape's pixels."""

    @abstractmethod
    def __iter__(self) -> Iterator[IntVector2]:
        """Yield the shape's pixels."""

    @abstractmethod
    def translate(self, translation: IntVector2) -> "Shape":
        """Return the shape moved by the given vector."""

    def __contains__(self, point: IntVector2) -> bool:
        return self.contains(point)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __add__(self, translation: IntVector2) -> "Shape":
        if not isinstance(translation, IntVector2):
            return NotImplemented
        return self.translate(translation)

    __radd__ = __add__

    def __sub__(self, translation: IntVector2) -> "Shape":
        if not isinstance(translation, IntVector2):
            return NotImplemented
        return self.translate(-translation)

    def copy(self) -> "Shape":
        return replace(self)
