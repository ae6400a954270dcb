"""Absolute or relative lengths in data or screen space."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from plotclip._floats import float_key, same_float


class PlotLengthUnit(Enum):
    """What a PlotLength value is measured against."""

    DATA = 'data'  # data-space units
    SCREEN_UNITS = 'screen_units'  # absolute rendering-space units
    RELATIVE_TO_VIEWPORT = 'relative_to_viewport'  # fraction of the viewport
    RELATIVE_TO_PLOT_AREA = 'relative_to_plot_area'  # fraction of the plot area


@dataclass(frozen=True, eq=False)
class PlotLength:
    """Scalar length paired with its unit. Carrier only, no conversion."""

    value: float
    unit: PlotLengthUnit

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlotLength):
            return NotImplemented
        return self.unit == other.unit and same_float(self.value, other.value)

    def __hash__(self) -> int:
        return hash((self.unit, float_key(self.value)))
