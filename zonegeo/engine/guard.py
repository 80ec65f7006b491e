"""Self-intersection guard for polygons drawn point by point."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from zonegeo.engine.normalizer import normalize_point
from zonegeo.engine.segments import segments_intersect


def would_self_intersect(ring: Sequence[Any], candidate: Any) -> bool:
    """Return True if appending ``candidate`` to the open ``ring`` must be rejected.

    Two segments are checked against the existing edges ring[i] -> ring[i+1]:

    - the new edge ring[-1] -> candidate, against every edge except the one
      ending at ring[-1] (they share that vertex by construction);
    - the future closing edge candidate -> ring[0], against every edge except
      edge 0 (it shares ring[0]), so the user cannot place a point the polygon
      could never be closed from.

    Stateless: the whole ring is passed in on every call.
    """
    if len(ring) < 2:
        return False

    points = [normalize_point(p) for p in ring]
    new_point = normalize_point(candidate)
    last = points[-1]
    n = len(points)

    for i in range(n - 1):
        if i == n - 2:
            continue
        if segments_intersect(last, new_point, points[i], points[i + 1]):
            return True

    first = points[0]
    for i in range(1, n - 1):
        if segments_intersect(new_point, first, points[i], points[i + 1]):
            return True

    return False
