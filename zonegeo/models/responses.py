"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from zonegeo.models.zone import CenterModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str


class PointResponse(BaseModel):
    lat: float
    lng: float


class CheckPointResponse(BaseModel):
    accepted: bool
    ring: list[list[float]] = Field(default_factory=list)


class MetricsResponse(BaseModel):
    area: float
    center: CenterModel


class OverlapResponse(BaseModel):
    has_overlap: bool
    overlapping: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
