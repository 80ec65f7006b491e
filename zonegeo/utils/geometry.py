"""Leaf-node geometry helpers over Nx2 (lat, lng) arrays. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


def shoelace_sum(points: NDArray[np.float64]) -> float:
    """Wrap-around shoelace sum: Σ (lng_i · lat_{i+1} − lng_{i+1} · lat_i).

    The ring is treated as implicitly closed. Sign depends on winding.
    """
    if len(points) < 3:
        return 0.0
    lat = points[:, 0]
    lng = points[:, 1]
    lat_next = np.roll(lat, -1)
    lng_next = np.roll(lng, -1)
    return float(np.sum(lng * lat_next - lng_next * lat))


def planar_area(points: NDArray[np.float64]) -> float:
    """Unsigned shoelace area in degree² units."""
    return abs(shoelace_sum(points)) / 2


def vertex_mean(points: NDArray[np.float64]) -> tuple[float, float]:
    """Arithmetic mean of the vertices (not area-weighted)."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (lat_min, lng_min, lat_max, lng_max) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_intersects(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> bool:
    """Check if two bboxes intersect (touching edges count)."""
    return not (a[2] < b[0] or b[2] < a[0] or a[3] < b[1] or b[3] < a[1])


def close_ring(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Append the first vertex unless the ring already ends on it."""
    if len(points) == 0 or np.array_equal(points[0], points[-1]):
        return points
    return np.vstack([points, points[:1]])


def point_in_ring(point: tuple[float, float], ring: NDArray[np.float64]) -> bool:
    """Ray-casting (crossing number) containment test.

    ``ring`` may be open or closed; a closing duplicate adds a zero-length edge
    that never counts as a crossing. Points exactly on the boundary give an
    unspecified answer, callers detect boundary contact with segment tests.
    """
    px, py = point
    x = ring[:, 0]
    y = ring[:, 1]
    n = len(x)

    inside = False
    j = n - 1
    for i in range(n):
        if (y[i] > py) != (y[j] > py):
            x_cross = (x[j] - x[i]) * (py - y[i]) / (y[j] - y[i]) + x[i]
            if px < x_cross:
                inside = not inside
        j = i
    return inside


def circle_ring(
    center: tuple[float, float],
    radius_m: float,
    segments: int = 64,
    meters_per_degree: float = 111000.0,
) -> NDArray[np.float64]:
    """Regular ``segments``-gon around ``center`` in degree space (open ring).

    Latitude offsets use a fixed meters-per-degree; longitude offsets are
    widened by 1 / cos(lat) so the polygon stays round on the ground.
    """
    lat0, lng0 = center
    theta = np.arange(segments) * (2 * np.pi / segments)
    dlat = radius_m * np.cos(theta) / meters_per_degree
    dlng = radius_m * np.sin(theta) / (meters_per_degree * math.cos(math.radians(lat0)))
    return np.column_stack([lat0 + dlat, lng0 + dlng])
