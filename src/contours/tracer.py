"""
Ring tracing: marching-squares segments stitched into closed rings.

Cells are visited in row-major order. Every crossing cell contributes one
or two directed segments; segments are chained head to tail through
fragment maps keyed by the grid edge their open ends sit on. Each edge
crossing is consumed exactly once, so the rings of one threshold never
share an edge, and a fragment whose head meets its own tail is emitted as
a closed ring.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from contours.cases import classify_cells
from contours.grid import GridView
from contours.saddle import cell_segments
from shared.constants import MS_MASK_EMPTY, MS_MASK_FULL

if TYPE_CHECKING:
    from collections.abc import Sequence

    from contours.cases import Segment
    from contours.models import Point, Ring

logger = logging.getLogger(__name__)


@dataclass
class _Fragment:
    start: int
    end: int
    points: list[Point]


class RingStitcher:
    """
    Chains directed segments of one threshold into closed rings.

    The fragment maps are the visited-edge record of a trace: an open
    fragment end is registered under the key of the edge it lies on and
    removed as soon as a segment continues from it.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.rings: list[Ring] = []
        self._by_start: dict[int, _Fragment] = {}
        self._by_end: dict[int, _Fragment] = {}

    def edge_key(self, point: Point) -> int:
        """Unique index of the cell edge a crossing point lies on."""
        return int(point[0] * 2 + point[1] * (self.width + 1) * 4)

    @property
    def open_fragments(self) -> int:
        return len(self._by_start)

    def add_cell(self, x: int, y: int, segments: tuple[Segment, ...]) -> None:
        for (sx, sy), (ex, ey) in segments:
            self.add_segment((sx + x, sy + y), (ex + x, ey + y))

    def add_segment(self, start: Point, end: Point) -> None:
        start_key = self.edge_key(start)
        end_key = self.edge_key(end)

        head = self._by_end.pop(start_key, None)
        if head is not None:
            tail = self._by_start.pop(end_key, None)
            if tail is None:
                head.points.append(end)
                head.end = end_key
                self._by_end[end_key] = head
            elif tail is head:
                head.points.append(end)
                self.rings.append(head.points)
            else:
                merged = _Fragment(head.start, tail.end, head.points + tail.points)
                self._by_start[merged.start] = merged
                self._by_end[merged.end] = merged
            return

        tail = self._by_start.pop(end_key, None)
        if tail is not None:
            tail.points.insert(0, start)
            tail.start = start_key
            self._by_start[start_key] = tail
            return

        fragment = _Fragment(start_key, end_key, [start, end])
        self._by_start[start_key] = fragment
        self._by_end[end_key] = fragment


def crossing_cells(codes: np.ndarray, uniform: Sequence[int]) -> list[tuple[int, int]]:
    """
    Cells ``(x, y)`` whose code is not in ``uniform``, in row-major order.

    ``codes`` is indexed like ``classify_cells`` output (offset by one).
    """
    crossing = np.isin(codes, list(uniform), invert=True)
    rows, cols = np.nonzero(crossing)
    return [(i - 1, j - 1) for j, i in zip(rows.tolist(), cols.tolist(), strict=True)]


def trace_rings(grid: GridView, threshold: float) -> list[Ring]:
    """
    Trace every closed ring of ``threshold`` in grid coordinates.

    The inside of a ring is where samples are ``>= threshold``. Exteriors
    have a positive ``ring_area``, holes a negative one.
    """
    cases = classify_cells(grid.above_mask(threshold))
    stitcher = RingStitcher(grid.width, grid.height)
    for x, y in crossing_cells(cases, (MS_MASK_EMPTY, MS_MASK_FULL)):
        case = int(cases[y + 1, x + 1])
        stitcher.add_cell(x, y, cell_segments(grid, x, y, case, threshold))
    if stitcher.open_fragments:
        # Unreachable for a consistent case table: the padded frame closes all rings
        logger.warning(
            'Threshold %s left %d unclosed fragments', threshold, stitcher.open_fragments
        )
    logger.debug('Threshold %s: %d rings traced', threshold, len(stitcher.rings))
    return stitcher.rings


def contour_rings(
    values: Sequence[float] | np.ndarray,
    width: int,
    height: int,
    threshold: float,
) -> list[Ring]:
    """
    Rings of a single threshold over a raw value buffer.

    Coordinates are grid coordinates, crossings sit on cell-edge midpoints
    (no smoothing, no transform).

    Raises:
        InvalidDimensionsError: if ``values`` does not match the dimensions.

    """
    grid = GridView.from_values(values, width, height)
    return trace_rings(grid, threshold)
