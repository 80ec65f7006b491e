"""Engine configuration: numeric conventions shared by all geometry operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Constants of the locally-flat (equirectangular) coordinate model."""

    # Meters per degree of latitude; longitude is scaled by cos(lat)
    meters_per_degree: float = 111000.0

    # Regular polygon approximating a circle during overlap checks
    circle_segments: int = 64

    min_polygon_vertices: int = 3

    # Creation shortcuts
    default_circle_radius_m: float = 300.0
    rectangle_lat_offset: float = 0.0015  # ~165m N-S
    rectangle_lng_offset: float = 0.002  # ~155m E-W at 45° lat


DEFAULT_CONFIG = EngineConfig()
