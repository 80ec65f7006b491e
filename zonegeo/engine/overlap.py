"""Overlap detection between a candidate shape and existing zones.

Both shapes are reduced to closed rings in (lat, lng) degree space. Two rings
overlap when any pair of edges intersects, or when one ring lies entirely
inside the other (checked with a single representative vertex, which is
enough for simple rings with no crossing edges).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import ValidationError

from zonegeo.engine.config import DEFAULT_CONFIG, EngineConfig
from zonegeo.engine.metrics import ring_array
from zonegeo.engine.segments import segments_intersect
from zonegeo.errors import GeometryError, OverlapRejected
from zonegeo.models.shapes import Circle, Point, Polygon, Shape
from zonegeo.models.zone import Zone, ZoneRecord
from zonegeo.utils.geometry import bbox, bbox_intersects, circle_ring, close_ring, point_in_ring

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OverlapResult:
    overlapping: tuple[str, ...] = field(default_factory=tuple)
    # Zones whose stored geometry could not be read
    skipped: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_overlap(self) -> bool:
        return len(self.overlapping) > 0


def shape_to_ring(shape: Shape, config: EngineConfig | None = None) -> NDArray[np.float64]:
    """Closed Nx2 (lat, lng) ring for any shape. Circles become regular polygons."""
    cfg = config or DEFAULT_CONFIG
    if isinstance(shape, Circle):
        pts = circle_ring(
            (shape.center.lat, shape.center.lng),
            shape.radius_m,
            segments=cfg.circle_segments,
            meters_per_degree=cfg.meters_per_degree,
        )
    elif isinstance(shape, Polygon):
        pts = ring_array(shape.ring)
    else:
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")
    return close_ring(pts)


@dataclass(frozen=True)
class _PreparedRing:
    """Closed ring with its Point vertices and bbox computed once."""

    coords: NDArray[np.float64]
    points: tuple[Point, ...]
    box: tuple[float, float, float, float]


def _prepare(ring: NDArray[np.float64]) -> _PreparedRing:
    return _PreparedRing(
        coords=ring,
        points=tuple(Point(float(lat), float(lng)) for lat, lng in ring),
        box=bbox(ring),
    )


def _edges_intersect(a: Sequence[Point], b: Sequence[Point]) -> bool:
    for i in range(len(a) - 1):
        for j in range(len(b) - 1):
            if segments_intersect(a[i], a[i + 1], b[j], b[j + 1]):
                return True
    return False


def _prepared_overlap(a: _PreparedRing, b: _PreparedRing) -> bool:
    if not bbox_intersects(a.box, b.box):
        return False
    if _edges_intersect(a.points, b.points):
        return True
    return point_in_ring(tuple(a.coords[0]), b.coords) or point_in_ring(tuple(b.coords[0]), a.coords)


def rings_overlap(ring_a: NDArray[np.float64], ring_b: NDArray[np.float64]) -> bool:
    """Edge intersection OR containment of either ring in the other."""
    return _prepared_overlap(_prepare(ring_a), _prepare(ring_b))


def _existing_shape(entry: Zone | Mapping[str, Any]) -> tuple[str, Shape]:
    if isinstance(entry, Zone):
        return entry.id, entry.shape
    record = ZoneRecord.model_validate(entry)
    return record.id, record.to_shape()


def _entry_id(entry: Any) -> str:
    if isinstance(entry, Zone):
        return entry.id
    if isinstance(entry, Mapping):
        return str(entry.get("id", "<unknown>"))
    return "<unknown>"


def check_overlap(
    candidate: Shape,
    existing: Iterable[Zone | Mapping[str, Any]],
    config: EngineConfig | None = None,
) -> OverlapResult:
    """Check ``candidate`` against every existing zone.

    ``existing`` may hold Zone objects or raw persisted records. A zone whose
    geometry cannot be read is logged, listed in ``skipped`` and the scan goes on.
    """
    prepared = _prepare(shape_to_ring(candidate, config))

    overlapping: list[str] = []
    skipped: list[str] = []
    for entry in existing:
        try:
            zone_id, shape = _existing_shape(entry)
            zone_ring = shape_to_ring(shape, config)
        except (GeometryError, ValidationError, TypeError) as e:
            zone_id = _entry_id(entry)
            logger.warning("Skipping zone %s in overlap scan: %s", zone_id, e)
            skipped.append(zone_id)
            continue

        if _prepared_overlap(prepared, _prepare(zone_ring)):
            overlapping.append(zone_id)

    if overlapping:
        logger.debug("Candidate overlaps %d zone(s): %s", len(overlapping), overlapping)

    return OverlapResult(overlapping=tuple(overlapping), skipped=tuple(skipped))


def ensure_no_overlap(
    candidate: Shape,
    existing: Iterable[Zone | Mapping[str, Any]],
    config: EngineConfig | None = None,
) -> OverlapResult:
    """Like check_overlap, but raise OverlapRejected with the conflicting ids."""
    result = check_overlap(candidate, existing, config)
    if result.has_overlap:
        raise OverlapRejected(result.overlapping)
    return result
