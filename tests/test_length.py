"""Tests for PlotLength and PlotLengthUnit."""

from __future__ import annotations

import dataclasses
import math

import pytest

from plotclip.length import PlotLength, PlotLengthUnit


def test_plot_length_carries_value_and_unit() -> None:
    """Value and unit are stored as given."""
    length = PlotLength(0.5, PlotLengthUnit.RELATIVE_TO_VIEWPORT)
    assert length.value == 0.5
    assert length.unit is PlotLengthUnit.RELATIVE_TO_VIEWPORT


def test_unit_kinds_are_closed() -> None:
    """Four unit kinds: data, absolute screen units, and two relative ones."""
    assert {u.name for u in PlotLengthUnit} == {
        'DATA',
        'SCREEN_UNITS',
        'RELATIVE_TO_VIEWPORT',
        'RELATIVE_TO_PLOT_AREA',
    }


def test_plot_length_equality() -> None:
    """Equal only when both value and unit match; NaN values compare equal."""
    a = PlotLength(10.0, PlotLengthUnit.SCREEN_UNITS)
    assert a == PlotLength(10.0, PlotLengthUnit.SCREEN_UNITS)
    assert a != PlotLength(10.0, PlotLengthUnit.DATA)
    assert a != PlotLength(11.0, PlotLengthUnit.SCREEN_UNITS)
    assert PlotLength(math.nan, PlotLengthUnit.DATA) == PlotLength(float('nan'), PlotLengthUnit.DATA)
    assert a != 10.0


def test_plot_length_hashable() -> None:
    """Equal lengths collapse in a set."""
    lengths = {
        PlotLength(1.0, PlotLengthUnit.RELATIVE_TO_PLOT_AREA),
        PlotLength(1.0, PlotLengthUnit.RELATIVE_TO_PLOT_AREA),
        PlotLength(math.nan, PlotLengthUnit.DATA),
        PlotLength(float('nan'), PlotLengthUnit.DATA),
    }
    assert len(lengths) == 2


def test_plot_length_is_frozen() -> None:
    """PlotLength cannot be changed after construction."""
    length = PlotLength(1.0, PlotLengthUnit.DATA)
    with pytest.raises(dataclasses.FrozenInstanceError):
        length.value = 2.0  # type: ignore[misc]
