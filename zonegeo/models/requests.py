"""API request models."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from zonegeo.models.shapes import Shape
from zonegeo.models.zone import ZoneColor


class ShapePayload(BaseModel):
    type: Literal["circle", "polygon", "rectangle"]
    coordinates: list[Any] = Field(..., description="Ring of points, or [center] for circles")
    radius: float | None = Field(default=None, description="Circle radius in meters")

    def to_shape(self) -> Shape:
        from zonegeo.engine.normalizer import shape_from_raw

        return shape_from_raw(self.type, self.coordinates, self.radius)


class NormalizePointRequest(BaseModel):
    point: Any = Field(..., description="Point in any accepted encoding")


class CheckPointRequest(BaseModel):
    ring: list[Any] = Field(default_factory=list, description="Points placed so far")
    candidate: Any = Field(..., description="Point the user wants to add")


class MetricsRequest(BaseModel):
    shape: ShapePayload


class OverlapRequest(BaseModel):
    shape: ShapePayload
    existing: list[Any] = Field(
        default_factory=list,
        description="Saved zone records to check against",
    )


class CompleteRequest(BaseModel):
    shape: ShapePayload
    existing: list[Any] = Field(default_factory=list)
    name: str = ""
    color: ZoneColor = ZoneColor.BLUE
