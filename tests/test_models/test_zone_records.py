"""Tests for the zone record format, colours and JSON persistence helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from zonegeo.engine.drawing import circle_at, rectangle_at
from zonegeo.engine.zones import create_zone
from zonegeo.models.shapes import Circle, Point, Polygon
from zonegeo.models.zone import ZoneColor, ZoneRecord, color_hex, dump_zones, load_zones
from tests.conftest import REF_LAT, REF_LNG, square

CREATED = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


def test_color_hex():
    assert color_hex("red") == "#ef4444"
    assert color_hex(ZoneColor.YELLOW) == "#eab308"
    assert color_hex("magenta") == "#3b82f6"
    assert ZoneColor.GREEN.label == "Zelena"


def test_record_uses_camel_case_keys():
    zone = create_zone(rectangle_at([REF_LAT, REF_LNG]), zone_id="r1", name="Garage", created_at=CREATED)
    data = ZoneRecord.from_zone(zone).to_json_dict()

    assert data["type"] == "polygon"
    assert data["colorHex"] == "#3b82f6"
    assert data["createdAt"].startswith("2025-03-14T09:30:00")
    assert data["center"] == {"lat": zone.centroid.lat, "lng": zone.centroid.lng}
    assert data["area"] == zone.area_m2
    assert len(data["coordinates"]) == 4
    assert "radius" not in data


def test_circle_record_has_single_center_coordinate():
    zone = create_zone(circle_at([REF_LAT, REF_LNG]), zone_id="c1", created_at=CREATED)
    data = ZoneRecord.from_zone(zone).to_json_dict()
    assert data["type"] == "circle"
    assert data["coordinates"] == [[REF_LAT, REF_LNG]]
    assert data["radius"] == 300.0


@pytest.mark.parametrize(
    "shape",
    [
        Circle(center=Point(REF_LAT, REF_LNG), radius_m=125.5),
        Polygon(ring=tuple(Point(*p) for p in square(REF_LAT, REF_LNG, 250))),
    ],
)
def test_record_round_trip(shape):
    zone = create_zone(shape, zone_id="z", name="n", color="yellow", created_at=CREATED)
    data = json.loads(json.dumps(ZoneRecord.from_zone(zone).to_json_dict()))
    assert ZoneRecord.model_validate(data).to_zone() == zone


def test_record_keeps_unknown_fields():
    raw = {
        "id": "x",
        "type": "polygon",
        "coordinates": [[0, 0], [0, 1], [1, 1]],
        "notes": "gate code 1234",
    }
    assert ZoneRecord.model_validate(raw).to_json_dict()["notes"] == "gate code 1234"


def test_legacy_record_without_metrics():
    raw = {
        "id": "legacy",
        "type": "rectangle",
        "coordinates": [[square(REF_LAT, REF_LNG, 100)]],
        "color": "red",
    }
    zone = ZoneRecord.model_validate(raw).to_zone()
    assert isinstance(zone.shape, Polygon)
    assert zone.area_m2 == pytest.approx(10_000, rel=1e-6)
    assert zone.centroid.lat == pytest.approx(REF_LAT)
    assert zone.created_at == datetime.fromtimestamp(0, tz=timezone.utc)


def test_record_requires_type():
    with pytest.raises(ValidationError):
        ZoneRecord.model_validate({"id": "x", "coordinates": []})


def test_dump_and_load_zones():
    zones = [
        create_zone(circle_at([REF_LAT, REF_LNG]), zone_id="a", created_at=CREATED),
        create_zone(rectangle_at([REF_LAT + 0.1, REF_LNG]), zone_id="b", color="purple", created_at=CREATED),
    ]
    assert load_zones(dump_zones(zones)) == zones


def test_load_zones_skips_bad_entries(caplog):
    good = ZoneRecord.from_zone(
        create_zone(circle_at([REF_LAT, REF_LNG]), zone_id="good", created_at=CREATED)
    ).to_json_dict()
    text = json.dumps([
        good,
        {"id": "bad-shape", "type": "polygon", "coordinates": [[0, 0]]},
        {"id": "bad-record"},
    ])
    with caplog.at_level(logging.WARNING, logger="zonegeo.models.zone"):
        zones = load_zones(text)
    assert [z.id for z in zones] == ["good"]
    assert len([r for r in caplog.records if r.name == "zonegeo.models.zone"]) == 2


def test_load_zones_empty_inputs():
    assert load_zones(None) == []
    assert load_zones("") == []
    assert load_zones('{"not": "a list"}') == []


def test_load_zones_truncated_json(caplog):
    with caplog.at_level(logging.WARNING, logger="zonegeo.models.zone"):
        zones = load_zones('[{"id": "a", "type": "polygon", "coor')
    assert zones == []
    assert any("not valid JSON" in r.getMessage() for r in caplog.records)


def test_record_color_is_palette_member():
    record = ZoneRecord.model_validate(
        {"id": "x", "type": "polygon", "coordinates": [[0, 0], [0, 1], [1, 1]], "color": "green"}
    )
    assert record.color is ZoneColor.GREEN
    assert record.to_zone().color is ZoneColor.GREEN


@pytest.mark.parametrize("stored", ["magenta", None, 7])
def test_record_unknown_color_falls_back_to_blue(stored):
    record = ZoneRecord.model_validate(
        {"id": "x", "type": "polygon", "coordinates": [[0, 0], [0, 1], [1, 1]], "color": stored}
    )
    assert record.color is ZoneColor.BLUE
    assert record.to_json_dict()["color"] == "blue"
