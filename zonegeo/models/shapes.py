"""Canonical geometry types: Point and the Circle | Polygon shape variant."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import ClassVar

from zonegeo.errors import InsufficientVertices, InvalidRadius

MIN_POLYGON_VERTICES = 3


class ShapeKind(str, enum.Enum):
    CIRCLE = "circle"
    POLYGON = "polygon"


@dataclass(frozen=True)
class Point:
    """A (lat, lng) pair in decimal degrees."""

    lat: float
    lng: float

    def as_pair(self) -> list[float]:
        return [self.lat, self.lng]

    def as_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Circle:
    center: Point
    radius_m: float
    kind: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    def __post_init__(self) -> None:
        if isinstance(self.radius_m, bool) or not isinstance(self.radius_m, (int, float)):
            raise InvalidRadius(self.radius_m)
        if not math.isfinite(self.radius_m) or self.radius_m <= 0:
            raise InvalidRadius(self.radius_m)


@dataclass(frozen=True)
class Polygon:
    """Simple polygon. The ring is implicitly closed (first point not repeated)."""

    ring: tuple[Point, ...] = field(default_factory=tuple)
    kind: ClassVar[ShapeKind] = ShapeKind.POLYGON

    def __post_init__(self) -> None:
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "ring", tuple(self.ring))
        if len(self.ring) < MIN_POLYGON_VERTICES:
            raise InsufficientVertices(len(self.ring), MIN_POLYGON_VERTICES)

    @property
    def is_quadrilateral(self) -> bool:
        return len(self.ring) == 4


Shape = Circle | Polygon
