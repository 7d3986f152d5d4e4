"""Saddle cell disambiguation by the mean of the four corners."""

from __future__ import annotations

from typing import TYPE_CHECKING

from contours.cases import CASE_SEGMENTS, JOINED_SADDLE_SEGMENTS, Segment
from shared.constants import MARCHING_SQUARES_CENTER_WEIGHT, MS_SADDLE_CASES

if TYPE_CHECKING:
    from contours.grid import GridView


def resolve_saddle(corners: tuple[float, float, float, float], threshold: float) -> bool:
    """
    Decide whether the above corners of a saddle connect through the centre.

    The cell centre is estimated as the mean of the corners. A mean equal
    to the threshold counts as above, like any corner tie. A NaN mean fails
    the comparison and keeps the above corners apart.
    """
    center = sum(corners) * MARCHING_SQUARES_CENTER_WEIGHT
    return center >= threshold


def cell_segments(
    grid: GridView, x: int, y: int, case: int, threshold: float
) -> tuple[Segment, ...]:
    """Directed segments of cell ``(x, y)`` with saddles resolved."""
    if case in MS_SADDLE_CASES and resolve_saddle(grid.cell_corners(x, y), threshold):
        return JOINED_SADDLE_SEGMENTS[case]
    return CASE_SEGMENTS[case]
