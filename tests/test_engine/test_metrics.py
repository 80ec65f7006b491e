"""Tests for area and centroid computation."""

from __future__ import annotations

import math

import pytest

from zonegeo.engine.metrics import area, bounding_box_area, centroid, metrics
from zonegeo.errors import GeometryError
from zonegeo.models.shapes import Circle, Point, Polygon
from tests.conftest import REF_LAT, REF_LNG, rectangle, square


def _polygon(ring) -> Polygon:
    return Polygon(ring=tuple(Point(float(a), float(b)) for a, b in ring))


def test_circle_area():
    shape = Circle(center=Point(REF_LAT, REF_LNG), radius_m=300)
    assert area(shape) == pytest.approx(282743.34, abs=1.0)
    assert area(shape) == pytest.approx(math.pi * 300**2)


def test_circle_centroid_is_center():
    center = Point(REF_LAT, REF_LNG)
    assert centroid(Circle(center=center, radius_m=50)) == center


def test_rectangle_area_near_zagreb():
    shape = _polygon(rectangle(REF_LAT, REF_LNG, 300, 200))
    assert area(shape) == pytest.approx(60000, rel=0.05)


def test_square_km_area():
    shape = _polygon(square(REF_LAT, REF_LNG, 1000))
    assert area(shape) == pytest.approx(1_000_000, rel=1e-6)


def test_area_uses_cos_latitude_scaling():
    # Same degree footprint is smaller on the ground further north
    ring = [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01), (0.01, 0.0)]
    south = _polygon([(lat + 10, lng) for lat, lng in ring])
    north = _polygon([(lat + 60, lng) for lat, lng in ring])
    assert area(north) < area(south)
    ratio = math.cos(math.radians(60.005)) / math.cos(math.radians(10.005))
    assert area(north) / area(south) == pytest.approx(ratio, rel=1e-9)


def test_area_invariant_under_rotation_and_reversal():
    ring = [(45.80, 16.00), (45.81, 16.02), (45.805, 16.04), (45.79, 16.03), (45.795, 16.01)]
    base = area(_polygon(ring))
    for k in range(len(ring)):
        rotated = ring[k:] + ring[:k]
        assert area(_polygon(rotated)) == pytest.approx(base, rel=1e-7)
        assert area(_polygon(list(reversed(rotated)))) == pytest.approx(base, rel=1e-7)


def test_polygon_centroid_is_vertex_mean():
    assert centroid(_polygon([(0, 0), (0, 3), (3, 0)])) == Point(1.0, 1.0)


def test_polygon_centroid_is_not_area_weighted():
    # Extra vertex on the left edge pulls the vertex mean off the square's center
    c = centroid(_polygon([(0, 0), (0, 2), (0, 4), (4, 4), (4, 0)]))
    assert c.lat == pytest.approx(1.6)
    assert c.lng == pytest.approx(2.0)


def test_metrics_bundle():
    shape = _polygon(square(REF_LAT, REF_LNG, 100))
    m = metrics(shape)
    assert m.area_m2 == area(shape)
    assert m.centroid == centroid(shape)
    assert m.centroid.lat == pytest.approx(REF_LAT)
    assert m.centroid.lng == pytest.approx(REF_LNG)


def test_bounding_box_area_matches_shoelace_for_axis_aligned_rectangle():
    shape = _polygon(rectangle(REF_LAT, REF_LNG, 300, 200))
    assert bounding_box_area(shape) == pytest.approx(area(shape), rel=1e-6)


def test_bounding_box_area_diverges_for_rotated_quadrilateral():
    # Known discrepancy: rotated rectangles get their bounding box area on this path.
    d = 0.001
    diamond = _polygon(
        [(REF_LAT + d, REF_LNG), (REF_LAT, REF_LNG + d), (REF_LAT - d, REF_LNG), (REF_LAT, REF_LNG - d)]
    )
    assert bounding_box_area(diamond) == pytest.approx(2 * area(diamond), rel=1e-6)


def test_bounding_box_area_needs_four_vertices():
    with pytest.raises(GeometryError):
        bounding_box_area(_polygon([(0, 0), (0, 1), (1, 1)]))


def test_unsupported_shape():
    with pytest.raises(TypeError):
        area("circle")
