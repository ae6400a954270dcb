"""Axis-aligned rectangles in rendering space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class RectEdges(Protocol):
    """Anything exposing the four edges of a rectangle in rendering space."""

    @property
    def left(self) -> float: ...

    @property
    def right(self) -> float: ...

    @property
    def top(self) -> float: ...

    @property
    def bottom(self) -> float: ...


@dataclass(frozen=True)
class Rect:
    """Rectangle given by its top-left corner and size (y grows downward).

    Raises:
        ValueError: If width or height is negative.
    """

    left: float
    top: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f'width must be non-negative, got {self.width!r}')
        if self.height < 0:
            raise ValueError(f'height must be non-negative, got {self.height!r}')

    @classmethod
    def create(cls, x0: float, y0: float, x1: float, y1: float) -> Rect:
        """Build a rectangle from any two opposite corners."""
        left = min(x0, x1)
        top = min(y0, y1)
        return cls(left, top, max(x0, x1) - left, max(y0, y1) - top)

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def contains(self, x: float, y: float) -> bool:
        """Inclusive containment test."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom
