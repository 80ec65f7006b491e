"""POST /api/points/normalize: canonicalize a raw point."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from zonegeo.engine.normalizer import normalize_point
from zonegeo.errors import InvalidCoordinateFormat
from zonegeo.models.requests import NormalizePointRequest
from zonegeo.models.responses import PointResponse

router = APIRouter(prefix="/points")


@router.post("/normalize", response_model=PointResponse)
def normalize(request: NormalizePointRequest) -> PointResponse:
    try:
        point = normalize_point(request.point)
    except InvalidCoordinateFormat as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return PointResponse(lat=point.lat, lng=point.lng)
