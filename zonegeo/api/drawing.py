"""POST /api/drawing/check-point: validate a point before it joins the ring."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from zonegeo.engine.drawing import add_point
from zonegeo.engine.normalizer import normalize_point
from zonegeo.errors import InvalidCoordinateFormat, SelfIntersectionRejected
from zonegeo.models.requests import CheckPointRequest
from zonegeo.models.responses import CheckPointResponse

router = APIRouter(prefix="/drawing")


@router.post("/check-point", response_model=CheckPointResponse)
def check_point(request: CheckPointRequest) -> CheckPointResponse:
    """Accepted: the extended ring. Rejected: the ring as it was."""
    try:
        ring = tuple(normalize_point(p) for p in request.ring)
        extended = add_point(ring, request.candidate)
    except SelfIntersectionRejected:
        return CheckPointResponse(accepted=False, ring=[p.as_pair() for p in ring])
    except InvalidCoordinateFormat as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return CheckPointResponse(accepted=True, ring=[p.as_pair() for p in extended])
