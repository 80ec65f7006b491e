"""Drawing-session operations.

The in-progress ring belongs to the caller. Every function here takes it as
input and returns a new value; a rejection raises and leaves the caller's
ring as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from zonegeo.engine.config import DEFAULT_CONFIG, EngineConfig
from zonegeo.engine.guard import would_self_intersect
from zonegeo.engine.normalizer import normalize_point
from zonegeo.engine.overlap import ensure_no_overlap
from zonegeo.engine.zones import create_zone
from zonegeo.errors import InsufficientVertices, SelfIntersectionRejected
from zonegeo.models.shapes import Circle, Point, Polygon, Shape
from zonegeo.models.zone import Zone, ZoneColor

logger = logging.getLogger(__name__)


def add_point(ring: Sequence[Any], candidate: Any) -> tuple[Point, ...]:
    """Append ``candidate`` to the ring, or raise SelfIntersectionRejected."""
    points = tuple(normalize_point(p) for p in ring)
    point = normalize_point(candidate)
    if would_self_intersect(points, point):
        logger.info("Rejected point (%.6f, %.6f): would create crossing lines", point.lat, point.lng)
        raise SelfIntersectionRejected(point)
    return points + (point,)


def complete_polygon(ring: Sequence[Any], config: EngineConfig | None = None) -> Polygon:
    cfg = config or DEFAULT_CONFIG
    points = tuple(normalize_point(p) for p in ring)
    if len(points) < cfg.min_polygon_vertices:
        raise InsufficientVertices(len(points), cfg.min_polygon_vertices)
    return Polygon(ring=points)


def complete_drawing(
    shape: Shape,
    existing: Iterable[Zone | Mapping[str, Any]],
    *,
    name: str = "",
    color: str | ZoneColor = ZoneColor.BLUE,
    config: EngineConfig | None = None,
) -> Zone:
    """Overlap-check a finished shape and turn it into a new Zone.

    Raises OverlapRejected with the conflicting zone ids.
    """
    ensure_no_overlap(shape, existing, config)
    return create_zone(shape, name=name, color=color, config=config)


def circle_at(center: Any, radius_m: float | None = None, config: EngineConfig | None = None) -> Circle:
    cfg = config or DEFAULT_CONFIG
    radius = cfg.default_circle_radius_m if radius_m is None else radius_m
    return Circle(center=normalize_point(center), radius_m=radius)


def rectangle_at(center: Any, config: EngineConfig | None = None) -> Polygon:
    """Fixed-size rectangle centered on a tap: top-left, top-right, bottom-right, bottom-left."""
    cfg = config or DEFAULT_CONFIG
    c = normalize_point(center)
    dlat = cfg.rectangle_lat_offset
    dlng = cfg.rectangle_lng_offset
    return Polygon(
        ring=(
            Point(c.lat + dlat, c.lng - dlng),
            Point(c.lat + dlat, c.lng + dlng),
            Point(c.lat - dlat, c.lng + dlng),
            Point(c.lat - dlat, c.lng - dlng),
        )
    )
