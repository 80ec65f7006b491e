"""Zone lifecycle. Metrics are derived on create and reshape, never on detail edits."""

from __future__ import annotations

import dataclasses
import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from zonegeo.engine.config import EngineConfig
from zonegeo.engine.metrics import metrics
from zonegeo.models.shapes import Shape
from zonegeo.models.zone import Zone, ZoneColor

logger = logging.getLogger(__name__)


def create_zone(
    shape: Shape,
    *,
    name: str = "",
    color: str | ZoneColor = ZoneColor.BLUE,
    zone_id: str | None = None,
    created_at: datetime | None = None,
    config: EngineConfig | None = None,
) -> Zone:
    """New zone with derived metrics. Raises ValueError for a colour outside the palette."""
    m = metrics(shape, config)
    zone = Zone(
        id=zone_id or str(uuid.uuid4()),
        shape=shape,
        area_m2=m.area_m2,
        centroid=m.centroid,
        created_at=created_at or datetime.now(timezone.utc),
        color=ZoneColor(color),
        name=name,
    )
    logger.info("Created %s zone %s (%.0f m²)", shape.kind.value, zone.id, zone.area_m2)
    return zone


def update_details(
    zone: Zone,
    *,
    name: str | None = None,
    color: str | ZoneColor | None = None,
) -> Zone:
    """Rename or recolour. Geometry and metrics are left untouched."""
    changes: dict[str, Any] = {}
    if name is not None:
        changes["name"] = name
    if color is not None:
        changes["color"] = ZoneColor(color)
    return dataclasses.replace(zone, **changes)


def reshape(zone: Zone, shape: Shape, config: EngineConfig | None = None) -> Zone:
    """Replace the geometry and recompute area and centroid."""
    m = metrics(shape, config)
    return dataclasses.replace(zone, shape=shape, area_m2=m.area_m2, centroid=m.centroid)
