"""Zone endpoints: metrics, overlap scan and drawing completion."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from zonegeo.engine.drawing import complete_drawing
from zonegeo.engine.metrics import metrics
from zonegeo.engine.overlap import check_overlap
from zonegeo.errors import GeometryError, OverlapRejected
from zonegeo.models.requests import CompleteRequest, MetricsRequest, OverlapRequest, ShapePayload
from zonegeo.models.responses import MetricsResponse, OverlapResponse
from zonegeo.models.shapes import Shape
from zonegeo.models.zone import CenterModel, ZoneRecord

router = APIRouter(prefix="/zones")
logger = logging.getLogger(__name__)


def _shape_or_422(payload: ShapePayload) -> Shape:
    try:
        return payload.to_shape()
    except GeometryError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/metrics", response_model=MetricsResponse)
def zone_metrics(request: MetricsRequest) -> MetricsResponse:
    m = metrics(_shape_or_422(request.shape))
    return MetricsResponse(area=m.area_m2, center=CenterModel(lat=m.centroid.lat, lng=m.centroid.lng))


@router.post("/overlap", response_model=OverlapResponse)
def zone_overlap(request: OverlapRequest) -> OverlapResponse:
    result = check_overlap(_shape_or_422(request.shape), request.existing)
    return OverlapResponse(
        has_overlap=result.has_overlap,
        overlapping=list(result.overlapping),
        skipped=list(result.skipped),
    )


@router.post(
    "/complete",
    response_model=ZoneRecord,
    response_model_by_alias=True,
    response_model_exclude_none=True,
)
def complete(request: CompleteRequest) -> ZoneRecord:
    shape = _shape_or_422(request.shape)
    try:
        zone = complete_drawing(shape, request.existing, name=request.name, color=request.color)
    except OverlapRejected as e:
        logger.info("Completion rejected: %s", e)
        raise HTTPException(
            status_code=409,
            detail={"message": str(e), "zone_ids": list(e.zone_ids)},
        ) from e
    return ZoneRecord.from_zone(zone)
