"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

# Zagreb-ish reference location used throughout the tests
REF_LAT = 45.8
REF_LNG = 16.0

METERS_PER_DEGREE = 111000.0


def offset(lat: float, lng: float, north_m: float, east_m: float) -> list[float]:
    """Move a point by meters using the same flat-earth scale as the engine."""
    dlat = north_m / METERS_PER_DEGREE
    dlng = east_m / (METERS_PER_DEGREE * math.cos(math.radians(lat)))
    return [lat + dlat, lng + dlng]


def square(lat: float, lng: float, side_m: float) -> list[list[float]]:
    """Axis-aligned square ring (open) centered on (lat, lng)."""
    h = side_m / 2
    return [
        offset(lat, lng, h, -h),
        offset(lat, lng, h, h),
        offset(lat, lng, -h, h),
        offset(lat, lng, -h, -h),
    ]


def rectangle(lat: float, lng: float, width_m: float, height_m: float) -> list[list[float]]:
    w = width_m / 2
    h = height_m / 2
    return [
        offset(lat, lng, h, -w),
        offset(lat, lng, h, w),
        offset(lat, lng, -h, w),
        offset(lat, lng, -h, -w),
    ]


def polygon_record(zone_id: str, ring: list[list[float]], **extra) -> dict:
    return {"id": zone_id, "type": "polygon", "coordinates": ring, **extra}


@pytest.fixture
def square_1km() -> list[list[float]]:
    return square(REF_LAT, REF_LNG, 1000)


@pytest.fixture
def square_100m() -> list[list[float]]:
    return square(REF_LAT, REF_LNG, 100)
