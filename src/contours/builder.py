"""
Contour orchestrator: thresholds in, Contour / Line / Band collections out.

Per threshold the pipeline is: trace rings in grid space, optionally
smooth them, assemble polygons (winding is read in grid space), then map
every point through the grid transform.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from contours.assembler import assemble
from contours.bands import assemble_band, clean_ring, trace_band_rings
from contours.errors import (
    EmptyThresholdsError,
    InvalidBandThresholdsError,
    InvalidDimensionsError,
)
from contours.grid import GridView
from contours.models import Band, Contour, Line, Polygon
from contours.smoothing import smooth_ring
from contours.tracer import trace_rings
from domain.models import GridSettings
from shared.constants import MIN_BAND_THRESHOLDS

if TYPE_CHECKING:
    from collections.abc import Sequence

    import numpy as np

    from contours.models import Ring

    Values = Sequence[float] | np.ndarray

logger = logging.getLogger(__name__)


def _check_thresholds(thresholds: Sequence[float]) -> list[float]:
    levels = [float(t) for t in thresholds]
    if not levels:
        msg = 'At least one threshold is required'
        raise EmptyThresholdsError(msg)
    return levels


def _check_band_thresholds(thresholds: Sequence[float]) -> list[float]:
    levels = [float(t) for t in thresholds]
    if len(levels) < MIN_BAND_THRESHOLDS:
        msg = (
            f'Isobands need at least {MIN_BAND_THRESHOLDS} thresholds, '
            f'got {len(levels)}'
        )
        raise InvalidBandThresholdsError(msg)
    for lower, upper in zip(levels, levels[1:], strict=False):
        if not lower < upper:
            msg = f'Isoband thresholds must be strictly increasing: {lower} >= {upper}'
            raise InvalidBandThresholdsError(msg)
    return levels


class ContourBuilder:
    """Computes isolines, contour polygons and isobands for one grid shape."""

    def __init__(self, settings: GridSettings) -> None:
        self.settings = settings

    @classmethod
    def create(cls, width: int, height: int, **options: object) -> ContourBuilder:
        """
        Builder for a ``width`` x ``height`` grid; ``options`` as in GridSettings.

        Raises:
            InvalidDimensionsError: if a dimension is not positive.

        """
        if width <= 0 or height <= 0:
            msg = f'Grid dimensions must be positive, got {width}x{height}'
            raise InvalidDimensionsError(msg)
        return cls(GridSettings(width=width, height=height, **options))

    def with_origin(self, x_origin: float, y_origin: float) -> ContourBuilder:
        update = {'x_origin': x_origin, 'y_origin': y_origin}
        return ContourBuilder(self.settings.model_copy(update=update))

    def with_step(self, x_step: float, y_step: float) -> ContourBuilder:
        update = {'x_step': x_step, 'y_step': y_step}
        return ContourBuilder(self.settings.model_copy(update=update))

    def _grid(self, values: Values) -> GridView:
        return GridView.from_values(values, self.settings.width, self.settings.height)

    def _prepare(self, ring: Ring, grid: GridView, threshold: float) -> Ring:
        if self.settings.smooth:
            return smooth_ring(ring, grid, threshold)
        return ring

    def _transform_ring(self, ring: Ring) -> Ring:
        if self.settings.is_identity_transform:
            return ring
        return [self.settings.transform_point(point) for point in ring]

    def _transform_polygon(self, polygon: Polygon) -> Polygon:
        if self.settings.is_identity_transform:
            return polygon
        return Polygon(
            exterior=self._transform_ring(polygon.exterior),
            holes=[self._transform_ring(hole) for hole in polygon.holes],
        )

    def lines(self, values: Values, thresholds: Sequence[float]) -> list[Line]:
        """
        Isolines for each threshold, as closed line strings.

        Raises:
            InvalidDimensionsError: if ``values`` does not fit the grid.
            EmptyThresholdsError: if ``thresholds`` is empty.

        """
        levels = _check_thresholds(thresholds)
        grid = self._grid(values)
        result = []
        for threshold in levels:
            rings = [
                self._transform_ring(self._prepare(ring, grid, threshold))
                for ring in trace_rings(grid, threshold)
            ]
            result.append(Line(threshold=threshold, geometry=rings))
        return result

    def contours(self, values: Values, thresholds: Sequence[float]) -> list[Contour]:
        """
        Polygons enclosing the samples at or above each threshold.

        Raises:
            InvalidDimensionsError: if ``values`` does not fit the grid.
            EmptyThresholdsError: if ``thresholds`` is empty.

        """
        levels = _check_thresholds(thresholds)
        grid = self._grid(values)
        result = []
        for threshold in levels:
            rings = [
                self._prepare(ring, grid, threshold)
                for ring in trace_rings(grid, threshold)
            ]
            polygons = [self._transform_polygon(p) for p in assemble(rings)]
            logger.debug('Threshold %s: %d polygons', threshold, len(polygons))
            result.append(Contour(threshold=threshold, geometry=polygons))
        return result

    def isobands(self, values: Values, thresholds: Sequence[float]) -> list[Band]:
        """
        Polygons enclosing the samples between consecutive thresholds.

        Band ``i`` covers ``thresholds[i] <= value < thresholds[i + 1]``.

        Raises:
            InvalidDimensionsError: if ``values`` does not fit the grid.
            InvalidBandThresholdsError: if fewer than two thresholds are given
                or they are not strictly increasing.

        """
        levels = _check_band_thresholds(thresholds)
        grid = self._grid(values)
        result = []
        for lower, upper in zip(levels, levels[1:], strict=False):
            lower_rings, upper_rings = trace_band_rings(grid, lower, upper)
            polygons = assemble_band(
                self._band_rings(lower_rings, grid, lower),
                self._band_rings(upper_rings, grid, upper),
            )
            polygons = [self._transform_polygon(p) for p in polygons]
            logger.debug('Band [%s, %s): %d polygons', lower, upper, len(polygons))
            result.append(Band(min_v=lower, max_v=upper, geometry=polygons))
        return result

    def _band_rings(self, rings: list[Ring], grid: GridView, threshold: float) -> list[Ring]:
        cleaned = (clean_ring(self._prepare(ring, grid, threshold)) for ring in rings)
        return [ring for ring in cleaned if ring is not None]


def build_contours(
    values: Values, thresholds: Sequence[float], settings: GridSettings
) -> list[Contour]:
    return ContourBuilder(settings).contours(values, thresholds)


def build_lines(
    values: Values, thresholds: Sequence[float], settings: GridSettings
) -> list[Line]:
    return ContourBuilder(settings).lines(values, thresholds)


def build_isobands(
    values: Values, thresholds: Sequence[float], settings: GridSettings
) -> list[Band]:
    return ContourBuilder(settings).isobands(values, thresholds)
