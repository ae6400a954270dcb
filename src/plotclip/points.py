"""Rendering-space and data-space points."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar

from plotclip._floats import float_code, float_key, same_float


@dataclass(frozen=True)
class ScreenPoint:
    """Point in rendering space (device/drawing units).

    No NaN semantics are enforced; the clipper tolerates any float.
    """

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        """Return (x, y)."""
        return (self.x, self.y)

    def distance_to_squared(self, other: ScreenPoint) -> float:
        """Squared Euclidean distance to other."""
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def distance_to(self, other: ScreenPoint) -> float:
        """Euclidean distance to other."""
        return math.sqrt(self.distance_to_squared(other))


@dataclass(frozen=True, eq=False)
class DataPoint:
    """Point in the data space of a series, before projection to rendering space.

    A point is undefined when either coordinate is NaN. Equality treats NaN as
    equal to NaN so that UNDEFINED compares equal to itself and can be used as
    a dict key.
    """

    UNDEFINED: ClassVar[DataPoint]

    x: float
    y: float

    def is_defined(self) -> bool:
        """Return True if neither coordinate is NaN."""
        return self.x == self.x and self.y == self.y

    def to_code(self) -> str:
        """Return Python source that rebuilds this point."""
        return f'DataPoint({float_code(self.x)}, {float_code(self.y)})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return same_float(self.x, other.x) and same_float(self.y, other.y)

    def __hash__(self) -> int:
        return hash((float_key(self.x), float_key(self.y)))

    def __str__(self) -> str:
        return f'{self.x} {self.y}'


UNDEFINED = DataPoint(math.nan, math.nan)
DataPoint.UNDEFINED = UNDEFINED
