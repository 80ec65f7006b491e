"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from zonegeo.api import drawing, health, points, zones

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(points.router)
api_router.include_router(drawing.router)
api_router.include_router(zones.router)
