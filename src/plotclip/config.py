"""Configuration: clipper defaults from environment."""

from __future__ import annotations

import logging
import os

from plotclip.constants import STRICT_ENV_VAR

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'', '0', 'false', 'no', 'off'})


def get_strict_default() -> bool:
    """Return whether clippers validate their inputs (PLOTCLIP_STRICT env var).

    Unset or empty means permissive. Unrecognised values are logged and
    treated as permissive.

    Returns:
        True if strict validation is enabled.
    """
    raw = os.environ.get(STRICT_ENV_VAR, '').strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw not in _FALSE_VALUES:
        logger.warning(
            'Ignoring unrecognised %s value %r; expected one of 1/0, true/false, yes/no, on/off',
            STRICT_ENV_VAR,
            raw,
        )
    return False
