"""
Marching-squares contouring: isolines, contour polygons and isobands.

Re-exports the public API so that ``from contours import build_contours``
works.
"""

from __future__ import annotations

from .builder import ContourBuilder as ContourBuilder
from .builder import build_contours as build_contours
from .builder import build_isobands as build_isobands
from .builder import build_lines as build_lines
from .errors import ContourError as ContourError
from .errors import EmptyThresholdsError as EmptyThresholdsError
from .errors import InvalidBandThresholdsError as InvalidBandThresholdsError
from .errors import InvalidDimensionsError as InvalidDimensionsError
from .models import Band as Band
from .models import Contour as Contour
from .models import Line as Line
from .models import Polygon as Polygon
from .tracer import contour_rings as contour_rings
