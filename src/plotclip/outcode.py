"""Region classifier (Cohen-Sutherland outcodes)."""

from __future__ import annotations

from plotclip.constants import BOTTOM, EDGE_PRIORITY, INSIDE, LEFT, OUTCODE_NAMES, RIGHT, TOP


def compute_outcode(
    x: float,
    y: float,
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
) -> int:
    """Classify a point against the four half-planes of a rectangle.

    Each axis sets at most one bit. Comparisons are strict, so points on an
    edge are inside, and a NaN coordinate sets no bit for its axis.

    Parameters:
        x, y: Point to classify.
        xmin, xmax, ymin, ymax: Rectangle bounds.

    Returns:
        Bit mask of LEFT/RIGHT/BOTTOM/TOP; INSIDE (0) if within bounds.
    """
    code = INSIDE
    if x < xmin:
        code |= LEFT
    elif x > xmax:
        code |= RIGHT
    if y < ymin:
        code |= BOTTOM
    elif y > ymax:
        code |= TOP
    return code


def describe_outcode(code: int) -> str:
    """Readable form of an outcode, e.g. 'TOP|LEFT' or 'INSIDE'."""
    if code == INSIDE:
        return 'INSIDE'
    names = [OUTCODE_NAMES[bit] for bit in EDGE_PRIORITY if code & bit]
    unknown = code & ~(TOP | BOTTOM | RIGHT | LEFT)
    if unknown:
        names.append(hex(unknown))
    return '|'.join(names)
