"""
Polygon assembly: traced rings grouped into exteriors with their holes.

Rings are never modified in place. When a ring has to change role its
vertex order is reversed into a new list so that exteriors always have a
positive ``ring_area`` and holes a negative one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from contours.area import (
    OUTSIDE,
    Box,
    bounding_box,
    box_contains,
    contains,
    reversed_ring,
    ring_area,
)
from contours.models import Polygon

if TYPE_CHECKING:
    from collections.abc import Iterable

    from contours.models import Ring

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedRing:
    ring: Ring
    area: float
    box: Box

    @property
    def size(self) -> float:
        return abs(self.area)

    def encloses(self, other: RankedRing) -> bool:
        """True when ``other`` lies inside this ring (touching counts)."""
        if other.size > self.size or not box_contains(self.box, other.box):
            return False
        return contains(self.ring, other.ring) != OUTSIDE

    def oriented(self, *, exterior: bool) -> RankedRing:
        """This ring wound as an exterior (or as a hole)."""
        if (self.area > 0) == exterior:
            return self
        return RankedRing(reversed_ring(self.ring), -self.area, self.box)


def rank_rings(rings: Iterable[Ring]) -> list[RankedRing]:
    """Rings with their area and bounds, largest first (stable on ties)."""
    ranked = [RankedRing(ring, ring_area(ring), bounding_box(ring)) for ring in rings]
    ranked.sort(key=lambda r: r.size, reverse=True)
    return ranked


def attach_holes(
    exteriors: list[RankedRing], holes: list[RankedRing]
) -> tuple[list[Polygon], list[RankedRing]]:
    """
    Give each hole to the smallest exterior enclosing it.

    ``exteriors`` must be ordered largest first; the polygons come back in
    the same order. Holes no exterior encloses are returned separately.
    """
    assigned: list[list[Ring]] = [[] for _ in exteriors]
    orphans: list[RankedRing] = []
    for hole in holes:
        for index in range(len(exteriors) - 1, -1, -1):
            if exteriors[index].encloses(hole):
                assigned[index].append(hole.ring)
                break
        else:
            orphans.append(hole)
    polygons = [
        Polygon(exterior=ext.ring, holes=ring_holes)
        for ext, ring_holes in zip(exteriors, assigned, strict=True)
    ]
    return polygons, orphans


def assemble(rings: Iterable[Ring]) -> list[Polygon]:
    """
    Group the rings of one threshold into polygons.

    Winding tells exteriors (positive area) from holes. Polygons come out
    largest first. A hole without an enclosing exterior becomes an
    exterior of its own. Rings without area, where every crossing
    collapsed onto a single sample, are dropped.
    """
    ranked = [r for r in rank_rings(rings) if r.area != 0]
    exteriors = [r for r in ranked if r.area > 0]
    holes = [r for r in ranked if r.area < 0]
    polygons, orphans = attach_holes(exteriors, holes)
    if not orphans:
        return polygons

    logger.debug('Promoting %d holes without exterior to polygons', len(orphans))
    promoted = [
        (orphan.size, Polygon(exterior=orphan.oriented(exterior=True).ring))
        for orphan in orphans
    ]
    sized = [
        (ext.size, polygon)
        for ext, polygon in zip(exteriors, polygons, strict=True)
    ]
    sized.extend(promoted)
    sized.sort(key=lambda item: item[0], reverse=True)
    return [polygon for _, polygon in sized]
