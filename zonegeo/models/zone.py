"""Zone entity, colour palette and the persisted record format."""

from __future__ import annotations

import enum
import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from zonegeo.errors import GeometryError
from zonegeo.models.shapes import Circle, Point, Shape

logger = logging.getLogger(__name__)


class ZoneColor(str, enum.Enum):
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"

    @property
    def hex(self) -> str:
        return _COLOR_HEX[self]

    @property
    def label(self) -> str:
        return _COLOR_LABELS[self]


_COLOR_HEX = {
    ZoneColor.RED: "#ef4444",
    ZoneColor.BLUE: "#3b82f6",
    ZoneColor.GREEN: "#10b981",
    ZoneColor.YELLOW: "#eab308",
    ZoneColor.PURPLE: "#a855f7",
}

_COLOR_LABELS = {
    ZoneColor.RED: "Crvena",
    ZoneColor.BLUE: "Plava",
    ZoneColor.GREEN: "Zelena",
    ZoneColor.YELLOW: "Žuta",
    ZoneColor.PURPLE: "Ljubičasta",
}


def color_hex(key: str | ZoneColor) -> str:
    """Hex value for a colour key. Unknown keys fall back to blue."""
    try:
        return ZoneColor(key).hex
    except ValueError:
        return ZoneColor.BLUE.hex


@dataclass(frozen=True)
class Zone:
    """A saved zone. ``area_m2`` and ``centroid`` are derived from ``shape``."""

    id: str
    shape: Shape
    area_m2: float
    centroid: Point
    created_at: datetime
    color: ZoneColor = ZoneColor.BLUE
    name: str = ""

    @property
    def color_hex(self) -> str:
        return color_hex(self.color)


class CenterModel(BaseModel):
    lat: float
    lng: float


class ZoneRecord(BaseModel):
    """Persisted zone as stored by the key-value collaborator (camelCase keys).

    ``coordinates`` is left loosely typed so legacy encodings survive
    validation and reach the normalizer. Unknown keys are kept as-is.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    name: str = ""
    type: Literal["circle", "polygon", "rectangle"]
    coordinates: list[Any]
    radius: float | None = None
    color: ZoneColor = ZoneColor.BLUE
    color_hex: str | None = Field(default=None, alias="colorHex")
    area: float | None = None
    center: CenterModel | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")

    @field_validator("color", mode="before")
    @classmethod
    def _known_color(cls, value: Any) -> Any:
        # stored colours outside the palette fall back to blue
        if isinstance(value, str) and value in {c.value for c in ZoneColor}:
            return value
        logger.warning("Unknown zone colour %r, using blue", value)
        return ZoneColor.BLUE

    def to_shape(self) -> Shape:
        from zonegeo.engine.normalizer import shape_from_raw

        return shape_from_raw(self.type, self.coordinates, self.radius)

    def to_zone(self) -> Zone:
        """Build a Zone. Stored metrics are kept; missing ones are computed."""
        from zonegeo.engine.metrics import area, centroid

        shape = self.to_shape()
        area_m2 = self.area if self.area is not None else area(shape)
        center = Point(self.center.lat, self.center.lng) if self.center else centroid(shape)
        created_at = self.created_at or datetime.fromtimestamp(0, tz=timezone.utc)
        return Zone(
            id=self.id,
            shape=shape,
            area_m2=area_m2,
            centroid=center,
            created_at=created_at,
            color=self.color,
            name=self.name,
        )

    @classmethod
    def from_zone(cls, zone: Zone) -> ZoneRecord:
        shape = zone.shape
        if isinstance(shape, Circle):
            coordinates = [shape.center.as_pair()]
            radius = shape.radius_m
        else:
            coordinates = [p.as_pair() for p in shape.ring]
            radius = None
        return cls(
            id=zone.id,
            name=zone.name,
            type=shape.kind.value,
            coordinates=coordinates,
            radius=radius,
            color=zone.color,
            color_hex=zone.color_hex,
            area=zone.area_m2,
            center=CenterModel(lat=zone.centroid.lat, lng=zone.centroid.lng),
            created_at=zone.created_at,
        )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_zones(zones: Iterable[Zone]) -> str:
    """Serialize zones to the persisted JSON array format."""
    return json.dumps([ZoneRecord.from_zone(z).to_json_dict() for z in zones])


def load_zones(text: str | bytes | None) -> list[Zone]:
    """Parse a persisted JSON array. Unreadable entries are skipped with a warning."""
    if not text:
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("Stored zones are not valid JSON, ignoring: %s", e)
        return []
    if not isinstance(data, list):
        logger.warning("Stored zones are not a list (%s), ignoring", type(data).__name__)
        return []

    zones: list[Zone] = []
    for i, entry in enumerate(data):
        try:
            zones.append(ZoneRecord.model_validate(entry).to_zone())
        except (ValidationError, GeometryError) as e:
            logger.warning("Skipping stored zone %d: %s", i, e)
    return zones
