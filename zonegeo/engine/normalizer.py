"""Coordinate normalization: the only place alternate point encodings are accepted.

Accepted point encodings (all equivalent):
    [lat, lng]                       ordered pair (list, tuple, 1-D array)
    {"lat": .., "lng": ..}           mapping
    {"latitude": .., "longitude": ..}
    obj.lat / obj.lng                attribute access (Point itself)
    [[lat, lng]], [[[lat, lng]]]     singleton wrappers around any of the above
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from zonegeo.errors import GeometryError, InvalidCoordinateFormat, InvalidRadius
from zonegeo.models.shapes import Circle, Point, Polygon, Shape, ShapeKind

logger = logging.getLogger(__name__)

_KEY_PAIRS = (("lat", "lng"), ("latitude", "longitude"))


@dataclass(frozen=True)
class DroppedPoint:
    index: int
    raw: Any
    reason: str


@dataclass(frozen=True)
class NormalizedRing:
    points: tuple[Point, ...]
    dropped: tuple[DroppedPoint, ...] = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        return len(self.dropped) > 0


def _is_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return True
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _coerce(value: Any, raw: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise InvalidCoordinateFormat(raw, f"non-numeric coordinate {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise InvalidCoordinateFormat(raw, "coordinate is not finite")
    return result


def normalize_point(raw: Any) -> Point:
    """Convert any accepted encoding to a canonical Point.

    Raises InvalidCoordinateFormat; never returns a partial result.
    """
    current = raw
    while True:
        if isinstance(current, Point):
            return current

        if isinstance(current, Mapping):
            for lat_key, lng_key in _KEY_PAIRS:
                if lat_key in current and lng_key in current:
                    return Point(_coerce(current[lat_key], raw), _coerce(current[lng_key], raw))
            raise InvalidCoordinateFormat(raw, "mapping lacks lat/lng or latitude/longitude")

        if _is_sequence(current):
            if len(current) == 2:
                return Point(_coerce(current[0], raw), _coerce(current[1], raw))
            if len(current) == 1:
                current = current[0]
                continue
            raise InvalidCoordinateFormat(raw, f"expected a pair, got {len(current)} items")

        if hasattr(current, "lat") and hasattr(current, "lng"):
            return Point(_coerce(current.lat, raw), _coerce(current.lng, raw))

        raise InvalidCoordinateFormat(raw)


def _unwrap_ring(raw_ring: Any) -> Any:
    # [[[p0, p1, ...]]] -> [p0, p1, ...] while the sole element is itself a ring
    ring = raw_ring
    while _is_sequence(ring) and len(ring) == 1:
        inner = ring[0]
        if not _is_sequence(inner) or len(inner) == 0:
            break
        head = inner[0]
        if not (_is_sequence(head) or isinstance(head, Mapping) or isinstance(head, Point)):
            break
        ring = inner
    return ring


def normalize_ring(raw_ring: Any) -> NormalizedRing:
    """Normalize every vertex of a ring, dropping the ones that cannot be read.

    Each dropped vertex is logged and recorded in ``NormalizedRing.dropped``.
    Raises InvalidCoordinateFormat when no vertex survives.
    """
    ring = _unwrap_ring(raw_ring)
    if not _is_sequence(ring):
        raise InvalidCoordinateFormat(raw_ring, "ring is not a sequence of points")

    points: list[Point] = []
    dropped: list[DroppedPoint] = []
    for i, raw in enumerate(ring):
        try:
            points.append(normalize_point(raw))
        except InvalidCoordinateFormat as e:
            logger.warning("Dropping ring point %d: %s", i, e.reason)
            dropped.append(DroppedPoint(index=i, raw=raw, reason=e.reason))

    if not points:
        raise InvalidCoordinateFormat(raw_ring, "ring has no valid points")

    return NormalizedRing(points=tuple(points), dropped=tuple(dropped))


def open_ring(points: Sequence[Point]) -> tuple[Point, ...]:
    """Strip an explicit closing vertex so closure stays implicit."""
    if len(points) > 1 and points[0] == points[-1]:
        return tuple(points[:-1])
    return tuple(points)


def shape_from_raw(kind: str | ShapeKind, coordinates: Any, radius: Any = None) -> Shape:
    """Ingest boundary data (record or drawing payload) into a canonical Shape.

    ``kind`` is ``circle``, ``polygon`` or ``rectangle``; rectangles become
    4-vertex polygons.
    """
    kind_value = kind.value if isinstance(kind, ShapeKind) else str(kind).lower()

    if kind_value == ShapeKind.CIRCLE.value:
        if radius is None:
            raise InvalidRadius(radius)
        try:
            center = normalize_point(coordinates)
        except InvalidCoordinateFormat:
            # Ring-shaped payload: the first readable vertex is the center
            center = normalize_ring(coordinates).points[0]
        return Circle(center=center, radius_m=radius)

    if kind_value in (ShapeKind.POLYGON.value, "rectangle"):
        normalized = normalize_ring(coordinates)
        return Polygon(ring=open_ring(normalized.points))

    raise GeometryError(f"Unknown shape type {kind!r}")
