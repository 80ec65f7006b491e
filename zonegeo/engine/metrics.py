"""Zone metrics: area in square meters and vertex centroid.

Polygon area uses the shoelace formula in degree space, converted to meters
with an equirectangular (locally flat) approximation:

    meters_per_deg_lat = 111000
    meters_per_deg_lng = 111000 * cos(mean vertex latitude)

The centroid of a polygon is the plain mean of its vertices, not the
area-weighted centroid.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from zonegeo.engine.config import DEFAULT_CONFIG, EngineConfig
from zonegeo.errors import GeometryError
from zonegeo.models.shapes import Circle, Point, Polygon, Shape
from zonegeo.utils.geometry import bbox, planar_area, vertex_mean


@dataclass(frozen=True)
class ShapeMetrics:
    area_m2: float
    centroid: Point


def ring_array(points: tuple[Point, ...] | list[Point]) -> NDArray[np.float64]:
    """Nx2 array of (lat, lng)."""
    return np.array([(p.lat, p.lng) for p in points], dtype=np.float64).reshape(-1, 2)


def polygon_area(polygon: Polygon, config: EngineConfig | None = None) -> float:
    cfg = config or DEFAULT_CONFIG
    pts = ring_array(polygon.ring)
    raw_area = planar_area(pts)
    avg_lat = float(np.mean(pts[:, 0]))
    meters_per_deg_lat = cfg.meters_per_degree
    meters_per_deg_lng = cfg.meters_per_degree * math.cos(math.radians(avg_lat))
    return raw_area * meters_per_deg_lat * meters_per_deg_lng


def bounding_box_area(polygon: Polygon, config: EngineConfig | None = None) -> float:
    """Axis-aligned rectangle area from the min/max of 4 corners.

    Matches shoelace only for axis-aligned rectangles; a rotated quadrilateral
    gets its bounding box area instead.
    """
    if not polygon.is_quadrilateral:
        raise GeometryError(f"Bounding box area needs exactly 4 vertices, got {len(polygon.ring)}")
    cfg = config or DEFAULT_CONFIG
    lat_min, lng_min, lat_max, lng_max = bbox(ring_array(polygon.ring))
    avg_lat = (lat_min + lat_max) / 2
    height_m = abs(lat_max - lat_min) * cfg.meters_per_degree
    width_m = abs(lng_max - lng_min) * cfg.meters_per_degree * math.cos(math.radians(avg_lat))
    return height_m * width_m


def area(shape: Shape, config: EngineConfig | None = None) -> float:
    """Area of ``shape`` in square meters."""
    if isinstance(shape, Circle):
        return math.pi * shape.radius_m * shape.radius_m
    if isinstance(shape, Polygon):
        return polygon_area(shape, config)
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def centroid(shape: Shape) -> Point:
    if isinstance(shape, Circle):
        return shape.center
    if isinstance(shape, Polygon):
        lat, lng = vertex_mean(ring_array(shape.ring))
        return Point(lat, lng)
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def metrics(shape: Shape, config: EngineConfig | None = None) -> ShapeMetrics:
    return ShapeMetrics(area_m2=area(shape, config), centroid=centroid(shape))
