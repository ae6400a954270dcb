"""Cohen-Sutherland line clipping against an axis-aligned rectangle.

Bounds are resolved once from the rectangle's edges (xmin=left, xmax=right,
ymin=top, ymax=bottom). A clipper holds no mutable state after construction,
so one instance can serve any number of threads.

In the default permissive mode inputs are not validated: a NaN coordinate
sets no outcode bit for its axis, a zero denominator during intersection
yields inf or nan, and inverted rectangles are used as given. Strict mode
(``strict=True`` or PLOTCLIP_STRICT) raises ValueError for inverted or NaN
bounds and for NaN input coordinates.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from plotclip._floats import ieee_div
from plotclip.config import get_strict_default
from plotclip.constants import BOTTOM, INSIDE, LEFT, RIGHT, TOP
from plotclip.outcode import compute_outcode, describe_outcode
from plotclip.points import ScreenPoint
from plotclip.rect import RectEdges

logger = logging.getLogger(__name__)

# Guard on intersection passes only. A well-formed rectangle settles in at
# most 4; if the cap is ever hit the segment is rejected.
_MAX_ITERATIONS = 16


class ClipResult(NamedTuple):
    """Outcome of clip_line: visibility flag and the (possibly moved) endpoints."""

    accepted: bool
    p0: ScreenPoint
    p1: ScreenPoint


class CohenSutherlandClipping:
    """Clips line segments and tests points against a fixed rectangle."""

    def __init__(self, rect: RectEdges, strict: bool | None = None) -> None:
        """Resolve the clip bounds from rect.

        Parameters:
            rect: Object with left, right, top, bottom attributes.
            strict: Validate rectangle and inputs; None reads PLOTCLIP_STRICT.

        Raises:
            ValueError: In strict mode, if the rectangle is inverted or has a
                NaN edge.
        """
        self._xmin = float(rect.left)
        self._xmax = float(rect.right)
        self._ymin = float(rect.top)
        self._ymax = float(rect.bottom)
        self._strict = get_strict_default() if strict is None else bool(strict)

        bounds = (self._xmin, self._xmax, self._ymin, self._ymax)
        if any(math.isnan(b) for b in bounds):
            if self._strict:
                raise ValueError(f'clip rectangle has a NaN edge: {self._bounds_text()}')
            logger.warning('Clip rectangle has a NaN edge: %s', self._bounds_text())
        elif self._xmin > self._xmax or self._ymin > self._ymax:
            if self._strict:
                raise ValueError(f'clip rectangle is inverted: {self._bounds_text()}')
            logger.warning(
                'Clip rectangle is inverted (%s); outcodes will not describe a region',
                self._bounds_text(),
            )
        logger.debug('Clipper ready: %s, strict=%s', self._bounds_text(), self._strict)

    def _bounds_text(self) -> str:
        return (
            f'xmin={self._xmin!r}, xmax={self._xmax!r}, '
            f'ymin={self._ymin!r}, ymax={self._ymax!r}'
        )

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._bounds_text()}, strict={self._strict})'

    @property
    def xmin(self) -> float:
        return self._xmin

    @property
    def xmax(self) -> float:
        return self._xmax

    @property
    def ymin(self) -> float:
        return self._ymin

    @property
    def ymax(self) -> float:
        return self._ymax

    @property
    def strict(self) -> bool:
        return self._strict

    def _check_point(self, point: ScreenPoint, name: str) -> None:
        """Raise ValueError if point has a NaN coordinate (strict mode only)."""
        if math.isnan(point.x) or math.isnan(point.y):
            raise ValueError(f'{name} has a NaN coordinate: ({point.x!r}, {point.y!r})')

    def outcode(self, point: ScreenPoint) -> int:
        """Outcode of point against the stored bounds."""
        return compute_outcode(point.x, point.y, self._xmin, self._xmax, self._ymin, self._ymax)

    def clip_line(self, p0: ScreenPoint, p1: ScreenPoint) -> ClipResult:
        """Clip the segment p0-p1 to the rectangle.

        Intersections are resolved one edge at a time in the order TOP,
        BOTTOM, RIGHT, LEFT, re-classifying the moved endpoint after each
        step. The coordinate on the clipped edge is set to the bound exactly.

        Parameters:
            p0: First endpoint.
            p1: Second endpoint.

        Returns:
            ClipResult. If both points are inside, p0 and p1 are returned as
            given. If the segment is rejected the endpoints carry no meaning.
            Infinite or NaN coordinates never raise; they may come back as
            inf or nan in the clipped points. A segment still unresolved after
            _MAX_ITERATIONS passes is rejected.

        Raises:
            ValueError: In strict mode, if an endpoint has a NaN coordinate.
        """
        if self._strict:
            self._check_point(p0, 'p0')
            self._check_point(p1, 'p1')

        xmin = self._xmin
        xmax = self._xmax
        ymin = self._ymin
        ymax = self._ymax
        p0x, p0y = p0.x, p0.y
        p1x, p1y = p1.x, p1.y

        # compute_outcode, inlined for both endpoints
        outcode0 = INSIDE
        if p0x < xmin:
            outcode0 |= LEFT
        elif p0x > xmax:
            outcode0 |= RIGHT
        if p0y < ymin:
            outcode0 |= BOTTOM
        elif p0y > ymax:
            outcode0 |= TOP

        outcode1 = INSIDE
        if p1x < xmin:
            outcode1 |= LEFT
        elif p1x > xmax:
            outcode1 |= RIGHT
        if p1y < ymin:
            outcode1 |= BOTTOM
        elif p1y > ymax:
            outcode1 |= TOP

        if (outcode0 | outcode1) == 0:
            return ClipResult(True, p0, p1)
        if (outcode0 & outcode1) != 0:
            return ClipResult(False, p0, p1)

        accept = False
        for _ in range(_MAX_ITERATIONS):
            if (outcode0 | outcode1) == 0:
                accept = True
                break
            if (outcode0 & outcode1) != 0:
                break

            # Move whichever endpoint is outside, p0 first.
            if outcode0 != 0:
                outcode_out = outcode0
                xo, yo, xa, ya = p0x, p0y, p1x, p1y
            else:
                outcode_out = outcode1
                xo, yo, xa, ya = p1x, p1y, p0x, p0y

            if outcode_out & TOP:
                x = xo + ieee_div((xa - xo) * (ymax - yo), ya - yo)
                y = ymax
            elif outcode_out & BOTTOM:
                x = xo + ieee_div((xa - xo) * (ymin - yo), ya - yo)
                y = ymin
            elif outcode_out & RIGHT:
                y = yo + ieee_div((ya - yo) * (xmax - xo), xa - xo)
                x = xmax
            else:
                y = yo + ieee_div((ya - yo) * (xmin - xo), xa - xo)
                x = xmin

            if outcode0 != 0:
                p0x, p0y = x, y
                outcode0 = compute_outcode(p0x, p0y, xmin, xmax, ymin, ymax)
            else:
                p1x, p1y = x, y
                outcode1 = compute_outcode(p1x, p1y, xmin, xmax, ymin, ymax)
        else:
            accept = (outcode0 | outcode1) == 0
            if not accept:
                logger.debug(
                    'Gave up clipping after %d passes (outcodes %s, %s); rejecting',
                    _MAX_ITERATIONS,
                    describe_outcode(outcode0),
                    describe_outcode(outcode1),
                )

        return ClipResult(accept, ScreenPoint(p0x, p0y), ScreenPoint(p1x, p1y))

    def is_inside(self, point: ScreenPoint) -> bool:
        """Return True if point lies within the rectangle, edges included.

        Raises:
            ValueError: In strict mode, if point has a NaN coordinate.
        """
        if self._strict:
            self._check_point(point, 'point')
        return self._xmin <= point.x <= self._xmax and self._ymin <= point.y <= self._ymax
