"""Float helpers shared by the value types and the clipper."""

from __future__ import annotations

import math


def same_float(a: float, b: float) -> bool:
    """Equality where NaN equals NaN and signed zeros are equal."""
    return a == b or (a != a and b != b)


def float_key(v: float) -> float | str:
    """Hash key consistent with same_float (all NaNs collapse to one key)."""
    if v != v:
        return 'nan'
    return v


def float_code(v: float) -> str:
    """Python source text for a float, spelling non-finite values via math."""
    if math.isnan(v):
        return 'math.nan'
    if math.isinf(v):
        return 'math.inf' if v > 0 else '-math.inf'
    return repr(float(v))


def ieee_div(num: float, den: float) -> float:
    """Divide with IEEE-754 semantics: x/0 is +-inf and 0/0 is nan."""
    if den == 0.0:
        if num == 0.0 or num != num:
            return math.nan
        # Sign of zero participates, as in hardware division.
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den
