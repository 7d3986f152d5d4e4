"""
Isobands: regions between two thresholds.

A single pass over the grid classifies every cell against both thresholds
at once. The ternary cell code splits into one binary case per threshold
and each case is stitched by its own ``RingStitcher``, with saddles
resolved per threshold. The two ring sets are then nested by
containment depth: even depth bounds the band from outside, odd depth
from inside.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contours.assembler import attach_holes, rank_rings
from contours.cases import classify_band_cells, split_band_code
from contours.saddle import cell_segments
from contours.tracer import RingStitcher, crossing_cells
from shared.constants import (
    BAND_NO_CONTOUR_CODES,
    MIN_RING_POINTS,
    MS_NO_CONTOUR_CASES,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from contours.assembler import RankedRing
    from contours.grid import GridView
    from contours.models import Polygon, Ring

logger = logging.getLogger(__name__)


def trace_band_rings(
    grid: GridView, lower: float, upper: float
) -> tuple[list[Ring], list[Ring]]:
    """
    Rings of ``lower`` and of ``upper`` traced in one pass.

    Each list equals what ``trace_rings`` returns for that threshold.
    """
    codes = classify_band_cells(grid.level_mask(lower, upper))
    lower_stitcher = RingStitcher(grid.width, grid.height)
    upper_stitcher = RingStitcher(grid.width, grid.height)
    for x, y in crossing_cells(codes, BAND_NO_CONTOUR_CODES):
        lower_case, upper_case = split_band_code(int(codes[y + 1, x + 1]))
        if lower_case not in MS_NO_CONTOUR_CASES:
            segments = cell_segments(grid, x, y, lower_case, lower)
            lower_stitcher.add_cell(x, y, segments)
        if upper_case not in MS_NO_CONTOUR_CASES:
            segments = cell_segments(grid, x, y, upper_case, upper)
            upper_stitcher.add_cell(x, y, segments)
    logger.debug(
        'Band [%s, %s): %d lower and %d upper rings traced',
        lower,
        upper,
        len(lower_stitcher.rings),
        len(upper_stitcher.rings),
    )
    return lower_stitcher.rings, upper_stitcher.rings


def clean_ring(ring: Ring) -> Ring | None:
    """Drop consecutive duplicate points; None if too few points remain."""
    cleaned = [ring[0]]
    for point in ring[1:]:
        if point != cleaned[-1]:
            cleaned.append(point)
    if len(cleaned) < MIN_RING_POINTS:
        return None
    return cleaned


def _nesting_depths(ranked: list[RankedRing]) -> list[int]:
    depths = [0] * len(ranked)
    for i, inner in enumerate(ranked):
        # largest first: nothing past a smaller ring can enclose this one
        for j, outer in enumerate(ranked):
            if outer.size < inner.size:
                break
            if j != i and outer.encloses(inner):
                depths[i] += 1
    return depths


def drop_coincident(
    lower: list[Ring], upper: list[Ring]
) -> tuple[list[Ring], list[Ring]]:
    """
    Remove lower/upper ring pairs running through the same crossings.

    Without smoothing a field that jumps straight from below ``lower`` to
    above ``upper`` yields identical rings for both thresholds; the band
    between them has no area.
    """
    upper_index = {frozenset(ring): i for i, ring in enumerate(upper)}
    matched: set[int] = set()
    kept_lower: list[Ring] = []
    for ring in lower:
        i = upper_index.get(frozenset(ring))
        if i is not None and i not in matched:
            matched.add(i)
            continue
        kept_lower.append(ring)
    if matched:
        logger.debug('Dropped %d coincident band ring pairs', len(matched))
    kept_upper = [ring for i, ring in enumerate(upper) if i not in matched]
    return kept_lower, kept_upper


def assemble_band(lower: Iterable[Ring], upper: Iterable[Ring]) -> list[Polygon]:
    """
    Build band polygons from the rings of the lower and upper threshold.

    Rings at even nesting depth become exteriors, odd ones holes, each
    re-wound to match its role. Polygons come out largest first.
    """
    lower_rings, upper_rings = drop_coincident(list(lower), list(upper))
    ranked = rank_rings([*lower_rings, *upper_rings])
    depths = _nesting_depths(ranked)
    exteriors = [
        r.oriented(exterior=True)
        for r, depth in zip(ranked, depths, strict=True)
        if depth % 2 == 0
    ]
    holes = [
        r.oriented(exterior=False)
        for r, depth in zip(ranked, depths, strict=True)
        if depth % 2 == 1
    ]
    polygons, orphans = attach_holes(exteriors, holes)
    if orphans:
        logger.debug('Dropped %d band holes without exterior', len(orphans))
    return polygons
