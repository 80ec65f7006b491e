"""Segment intersection via orientation (cross product) tests."""

from __future__ import annotations

from zonegeo.models.shapes import Point


def direction(p: Point, q: Point, r: Point) -> float:
    """Cross product of (q - p) and (r - p). 0 = collinear, sign = turning sense."""
    return (r.lng - p.lng) * (q.lat - p.lat) - (q.lng - p.lng) * (r.lat - p.lat)


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """True if ``q`` lies within the inclusive bounding box of segment p–r."""
    return (
        min(p.lat, r.lat) <= q.lat <= max(p.lat, r.lat)
        and min(p.lng, r.lng) <= q.lng <= max(p.lng, r.lng)
    )


def _opposite(a: float, b: float) -> bool:
    return (a > 0 and b < 0) or (a < 0 and b > 0)


def segments_intersect(a1: Point, a2: Point, b1: Point, b2: Point) -> bool:
    """True if segment a1–a2 and segment b1–b2 share any point.

    Collinear overlap and shared endpoints count. A zero orientation is always
    treated as collinear, never as a proper crossing.
    """
    d1 = direction(b1, b2, a1)
    d2 = direction(b1, b2, a2)
    d3 = direction(a1, a2, b1)
    d4 = direction(a1, a2, b2)

    if _opposite(d1, d2) and _opposite(d3, d4):
        return True

    if d1 == 0 and on_segment(b1, a1, b2):
        return True
    if d2 == 0 and on_segment(b1, a2, b2):
        return True
    if d3 == 0 and on_segment(a1, b1, a2):
        return True
    if d4 == 0 and on_segment(a1, b2, a2):
        return True

    return False
