"""Tests for ScreenPoint and DataPoint."""

from __future__ import annotations

import dataclasses
import math

import pytest

from plotclip.points import UNDEFINED, DataPoint, ScreenPoint


def test_screen_point_unpacks_and_measures() -> None:
    """ScreenPoint unpacks like a pair and knows distances."""
    p = ScreenPoint(3.0, 4.0)
    x, y = p
    assert (x, y) == (3.0, 4.0)
    assert p.as_tuple() == (3.0, 4.0)
    assert ScreenPoint(0.0, 0.0).distance_to(p) == pytest.approx(5.0)
    assert ScreenPoint(0.0, 0.0).distance_to_squared(p) == 25.0


def test_screen_point_is_frozen() -> None:
    """ScreenPoint cannot be changed after construction."""
    p = ScreenPoint(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 5.0  # type: ignore[misc]


def test_undefined_data_point() -> None:
    """UNDEFINED has NaN coordinates and is not defined."""
    assert math.isnan(UNDEFINED.x)
    assert math.isnan(UNDEFINED.y)
    assert not UNDEFINED.is_defined()
    assert DataPoint.UNDEFINED is UNDEFINED


def test_is_defined_requires_both_coordinates() -> None:
    """One NaN coordinate is enough to make a point undefined."""
    assert DataPoint(1.0, 2.0).is_defined()
    assert not DataPoint(math.nan, 2.0).is_defined()
    assert not DataPoint(1.0, math.nan).is_defined()
    assert DataPoint(math.inf, -math.inf).is_defined()


def test_data_point_equality_treats_nan_as_equal() -> None:
    """Structural equality where NaN equals NaN."""
    assert DataPoint(1.0, 2.0) == DataPoint(1.0, 2.0)
    assert DataPoint(1.0, 2.0) != DataPoint(1.0, 2.5)
    assert DataPoint(float('nan'), float('nan')) == UNDEFINED
    assert DataPoint(math.nan, 1.0) != DataPoint(1.0, math.nan)
    assert DataPoint(0.0, 0.0) == DataPoint(-0.0, 0.0)
    assert DataPoint(1.0, 2.0) != (1.0, 2.0)


def test_data_point_hash_consistent_with_equality() -> None:
    """Equal points hash alike, so UNDEFINED works as a dict key."""
    lookup = {UNDEFINED: 'missing', DataPoint(1.0, 2.0): 'a'}
    assert lookup[DataPoint(float('nan'), float('nan'))] == 'missing'
    assert lookup[DataPoint(1.0, 2.0)] == 'a'
    assert hash(DataPoint(0.0, 1.0)) == hash(DataPoint(-0.0, 1.0))
    assert len({DataPoint(math.nan, 1.0), DataPoint(float('nan'), 1.0)}) == 1


def test_data_point_str_and_code() -> None:
    """String form is 'x y'; to_code rebuilds the point."""
    p = DataPoint(1.5, -2.0)
    assert str(p) == '1.5 -2.0'
    assert p.to_code() == 'DataPoint(1.5, -2.0)'
    assert UNDEFINED.to_code() == 'DataPoint(math.nan, math.nan)'
    assert DataPoint(math.inf, -math.inf).to_code() == 'DataPoint(math.inf, -math.inf)'
    assert eval(p.to_code(), {'DataPoint': DataPoint, 'math': math}) == p


def test_data_point_is_frozen() -> None:
    """DataPoint cannot be changed after construction."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        UNDEFINED.x = 0.0  # type: ignore[misc]
