"""Signed area and point-in-ring tests for closed rings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contours.models import Point, Ring

INSIDE = 1
ON_BOUNDARY = 0
OUTSIDE = -1

# (min_x, min_y, max_x, max_y)
Box = tuple[float, float, float, float]


def ring_area(ring: Ring) -> float:
    """
    Twice the signed area of a closed ring, positive for exteriors.

    Exteriors wind clockwise with x to the right and y upward, which is
    counter-clockwise on screen where grid rows grow downward.
    """
    area = 0.0
    for (x0, y0), (x1, y1) in zip(ring, ring[1:], strict=False):
        area += y0 * x1 - x0 * y1
    return area


def reversed_ring(ring: Ring) -> Ring:
    return ring[::-1]


def bounding_box(ring: Ring) -> Box:
    xs = [p[0] for p in ring]
    ys = [p[1] for p in ring]
    return min(xs), min(ys), max(xs), max(ys)


def _within(p: float, q: float, r: float) -> bool:
    return p <= q <= r or r <= q <= p


def _collinear(a: Point, b: Point, c: Point) -> bool:
    return (b[0] - a[0]) * (c[1] - a[1]) == (c[0] - a[0]) * (b[1] - a[1])


def _segment_contains(a: Point, b: Point, c: Point) -> bool:
    if not _collinear(a, b, c):
        return False
    if a[0] == b[0]:
        return _within(a[1], c[1], b[1])
    return _within(a[0], c[0], b[0])


def ring_contains(ring: Ring, point: Point) -> int:
    """``INSIDE``, ``OUTSIDE`` or ``ON_BOUNDARY`` of ``point`` against ``ring``."""
    x, y = point
    result = OUTSIDE
    xj, yj = ring[-1]
    for xi, yi in ring:
        if _segment_contains((xi, yi), (xj, yj), point):
            return ON_BOUNDARY
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            result = -result
        xj, yj = xi, yi
    return result


def contains(ring: Ring, other: Ring) -> int:
    """
    Position of ``other`` relative to ``ring``.

    Decided by the first vertex of ``other`` not on the boundary of ``ring``;
    ``ON_BOUNDARY`` when every vertex lies on it.
    """
    for point in other:
        position = ring_contains(ring, point)
        if position != ON_BOUNDARY:
            return position
    return ON_BOUNDARY


def box_contains(outer: Box, inner: Box) -> bool:
    return (
        outer[0] <= inner[0]
        and outer[1] <= inner[1]
        and outer[2] >= inner[2]
        and outer[3] >= inner[3]
    )
