"""Geometry error taxonomy. Every error is recoverable; none is process-fatal."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class GeometryError(ValueError):
    """Base class for rejected geometry."""


class InvalidCoordinateFormat(GeometryError):
    def __init__(self, raw: Any, reason: str = "unrecognized coordinate encoding") -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid coordinate {raw!r}: {reason}")


class InsufficientVertices(GeometryError):
    def __init__(self, count: int, required: int = 3) -> None:
        self.count = count
        self.required = required
        super().__init__(f"Polygon needs at least {required} points, got {count}")


class InvalidRadius(GeometryError):
    def __init__(self, radius: Any) -> None:
        self.radius = radius
        super().__init__(f"Circle radius must be a positive number of meters, got {radius!r}")


class SelfIntersectionRejected(GeometryError):
    """Adding the candidate point would make the ring cross itself."""

    def __init__(self, candidate: Any) -> None:
        self.candidate = candidate
        super().__init__(f"Point {candidate!r} would create crossing lines")


class OverlapRejected(GeometryError):
    """Candidate shape overlaps one or more existing zones."""

    def __init__(self, zone_ids: Iterable[str]) -> None:
        self.zone_ids = tuple(zone_ids)
        n = len(self.zone_ids)
        super().__init__(f"Overlaps with {n} zone{'s' if n != 1 else ''}: {', '.join(self.zone_ids)}")
