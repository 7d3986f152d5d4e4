"""GeoJSON mapping of contouring results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from contours.models import Band, Contour, Line

if TYPE_CHECKING:
    from collections.abc import Iterable

    from contours.models import Polygon, Ring


def _ring_coordinates(ring: Ring) -> list[list[float]]:
    return [[x, y] for x, y in ring]


def _polygon_coordinates(polygon: Polygon) -> list[list[list[float]]]:
    return [_ring_coordinates(ring) for ring in polygon.rings()]


def to_feature(item: Contour | Line | Band) -> dict[str, Any]:
    """
    GeoJSON Feature for one contour, isoline set or band.

    Contours and bands become MultiPolygon geometries, isolines a
    MultiLineString.
    """
    if isinstance(item, Line):
        geometry = {
            'type': 'MultiLineString',
            'coordinates': [_ring_coordinates(ring) for ring in item.geometry],
        }
        properties: dict[str, float] = {'threshold': item.threshold}
    elif isinstance(item, Contour):
        geometry = {
            'type': 'MultiPolygon',
            'coordinates': [_polygon_coordinates(p) for p in item.geometry],
        }
        properties = {'threshold': item.threshold}
    elif isinstance(item, Band):
        geometry = {
            'type': 'MultiPolygon',
            'coordinates': [_polygon_coordinates(p) for p in item.geometry],
        }
        properties = {'min': item.min_v, 'max': item.max_v}
    else:
        msg = f'Cannot convert {type(item).__name__} to a GeoJSON feature'
        raise TypeError(msg)
    return {'type': 'Feature', 'geometry': geometry, 'properties': properties}


def to_feature_collection(items: Iterable[Contour | Line | Band]) -> dict[str, Any]:
    return {
        'type': 'FeatureCollection',
        'features': [to_feature(item) for item in items],
    }
