"""Clip whole polylines and segment batches (the clipper's drawing-side callers)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Union

import numpy as np

from plotclip.clipping import CohenSutherlandClipping
from plotclip.points import ScreenPoint

logger = logging.getLogger(__name__)

PointsLike = Union[Sequence[ScreenPoint], Sequence[Sequence[float]], np.ndarray]


def _to_screen_points(points: PointsLike) -> list[ScreenPoint]:
    """Normalize ScreenPoints, (x, y) pairs or an (N, 2) array to ScreenPoints."""
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return []
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f'points array must have shape (N, 2), got {arr.shape}')
        return [ScreenPoint(x, y) for x, y in arr.tolist()]
    return [
        p if isinstance(p, ScreenPoint) else ScreenPoint(float(p[0]), float(p[1]))
        for p in points
    ]


def clip_polyline(
    points: PointsLike,
    clipping: CohenSutherlandClipping,
) -> list[list[ScreenPoint]]:
    """Clip a polyline to the clipper's rectangle.

    Each consecutive pair of points is clipped on its own. Visible pieces
    that continue from the previous piece extend the current run; a rejected
    or detached piece starts a new one.

    Parameters:
        points: Polyline vertices in rendering space.
        clipping: Clipper for the target rectangle.

    Returns:
        Visible runs, each a list of at least two points.
    """
    pts = _to_screen_points(points)
    runs: list[list[ScreenPoint]] = []
    current: list[ScreenPoint] = []
    for a, b in zip(pts, pts[1:]):
        accepted, p0, p1 = clipping.clip_line(a, b)
        if not accepted:
            if len(current) >= 2:
                runs.append(current)
            current = []
            continue
        if current and current[-1] == p0:
            if p1 != current[-1]:
                current.append(p1)
            continue
        if len(current) >= 2:
            runs.append(current)
        current = [p0]
        if p1 != p0:
            current.append(p1)
    if len(current) >= 2:
        runs.append(current)
    logger.debug('Clipped polyline of %d points into %d visible runs', len(pts), len(runs))
    return runs


def clip_segments(
    segments: np.ndarray | Sequence[Sequence[float]],
    clipping: CohenSutherlandClipping,
) -> np.ndarray:
    """Clip a batch of independent segments.

    Parameters:
        segments: Rows of (x0, y0, x1, y1).
        clipping: Clipper for the target rectangle.

    Returns:
        (M, 4) float array of the visible segments after clipping, in input
        order. Rejected segments are dropped.

    Raises:
        ValueError: If segments is not shaped (N, 4).
    """
    arr = np.asarray(segments, dtype=float)
    if arr.size == 0:
        return np.empty((0, 4), dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 4:
        raise ValueError(f'segments must have shape (N, 4), got {arr.shape}')
    kept: list[tuple[float, float, float, float]] = []
    for x0, y0, x1, y1 in arr.tolist():
        accepted, p0, p1 = clipping.clip_line(ScreenPoint(x0, y0), ScreenPoint(x1, y1))
        if accepted:
            kept.append((p0.x, p0.y, p1.x, p1.y))
    logger.debug('Kept %d of %d segments', len(kept), arr.shape[0])
    return np.array(kept, dtype=float).reshape(-1, 4)
