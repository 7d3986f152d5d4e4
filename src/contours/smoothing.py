"""Linear interpolation of ring crossings along their grid edge."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contours.grid import GridView
    from contours.models import Point, Ring


def _interpolate(v0: float, v1: float, threshold: float) -> float | None:
    """Offset of ``threshold`` from the ``v0`` sample towards ``v1``."""
    if v1 == v0:
        return None
    offset = (threshold - v0) / (v1 - v0)
    return offset if math.isfinite(offset) else None


def smooth_point(point: Point, grid: GridView, threshold: float) -> Point:
    """
    Move an edge-midpoint crossing to where the field equals ``threshold``.

    A crossing with integer ``x`` lies between samples ``(x - 1, row)`` and
    ``(x, row)``; one with integer ``y`` between ``(col, y - 1)`` and
    ``(col, y)``. Crossings on the outer frame have a single real sample
    and stay put, as do crossings whose interpolation is not finite.
    """
    x, y = point
    col, row = int(x), int(y)
    if x.is_integer() and 0 < x < grid.width:
        v0 = grid.value_at(col - 1, row)
        offset = _interpolate(v0, grid.value_at(col, row), threshold)
        if offset is not None:
            return (x - 0.5 + offset, y)
    elif y.is_integer() and 0 < y < grid.height:
        v0 = grid.value_at(col, row - 1)
        offset = _interpolate(v0, grid.value_at(col, row), threshold)
        if offset is not None:
            return (x, y - 0.5 + offset)
    return point


def smooth_ring(ring: Ring, grid: GridView, threshold: float) -> Ring:
    return [smooth_point(point, grid, threshold) for point in ring]
