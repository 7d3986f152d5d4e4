"""Geometry containers produced by the contouring engine."""

from __future__ import annotations

from dataclasses import dataclass, field

# (x, y) in grid or transformed coordinates
Point = tuple[float, float]
# Closed sequence of points (first == last)
Ring = list[Point]


@dataclass(frozen=True)
class Polygon:
    """One exterior ring plus the holes it directly encloses."""

    exterior: Ring
    holes: list[Ring] = field(default_factory=list)

    def rings(self) -> list[Ring]:
        return [self.exterior, *self.holes]


@dataclass(frozen=True)
class Contour:
    """Region where the field is at or above ``threshold``."""

    threshold: float
    geometry: list[Polygon]

    def is_empty(self) -> bool:
        return not self.geometry


@dataclass(frozen=True)
class Line:
    """Isolines of ``threshold`` as closed line strings."""

    threshold: float
    geometry: list[Ring]

    def is_empty(self) -> bool:
        return not self.geometry


@dataclass(frozen=True)
class Band:
    """Region where ``min_v <= value < max_v``."""

    min_v: float
    max_v: float
    geometry: list[Polygon]

    def is_empty(self) -> bool:
        return not self.geometry
