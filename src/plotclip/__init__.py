"""Line clipping for plot rendering.

This package restricts straight line segments to an axis-aligned viewport
rectangle before they are drawn:
- CohenSutherlandClipping: clip_line / is_inside against a fixed rectangle
- clip_polyline / clip_segments: drive the clipper over paths and batches
- ScreenPoint, DataPoint, PlotLength: the value types these operate on
"""

from plotclip.clipping import ClipResult, CohenSutherlandClipping
from plotclip.constants import BOTTOM, INSIDE, LEFT, RIGHT, TOP
from plotclip.length import PlotLength, PlotLengthUnit
from plotclip.outcode import compute_outcode, describe_outcode
from plotclip.points import UNDEFINED, DataPoint, ScreenPoint
from plotclip.polyline import clip_polyline, clip_segments
from plotclip.rect import Rect, RectEdges

__all__: list[str] = [
    'BOTTOM',
    'INSIDE',
    'LEFT',
    'RIGHT',
    'TOP',
    'UNDEFINED',
    'ClipResult',
    'CohenSutherlandClipping',
    'DataPoint',
    'PlotLength',
    'PlotLengthUnit',
    'Rect',
    'RectEdges',
    'ScreenPoint',
    'clip_polyline',
    'clip_segments',
    'compute_outcode',
    'describe_outcode',
]
