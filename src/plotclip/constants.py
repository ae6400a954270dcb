"""Outcode bits and environment variable names."""

# Region outcode bits (one bit per rectangle half-plane).
INSIDE = 0  # 0000
LEFT = 1  # 0001
RIGHT = 2  # 0010
BOTTOM = 4  # 0100
TOP = 8  # 1000

# Order in which outside bits are resolved by the clipper.
EDGE_PRIORITY: tuple[int, ...] = (TOP, BOTTOM, RIGHT, LEFT)

OUTCODE_NAMES: dict[int, str] = {
    TOP: 'TOP',
    BOTTOM: 'BOTTOM',
    RIGHT: 'RIGHT',
    LEFT: 'LEFT',
}

# Environment variables
STRICT_ENV_VAR = 'PLOTCLIP_STRICT'
