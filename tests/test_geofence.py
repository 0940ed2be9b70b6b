"""
tests/test_geofence.py
──────────────────────
Tests for geofence classification and the GPS view aggregates.
"""
import math

import pytest

from fleetview.analytics.geofence import (
    classify_geofence,
    is_geofence_violation,
    locate_ping,
    site_overview,
    type_violation_breakdown,
)
from fleetview.data.records import RecordStore

from conftest import make_equipment, make_ping, make_rental, make_site


def _store(now, pings, **overrides):
    data = {
        "equipment": [make_equipment(1)],
        "sites": [make_site(1)],
        "rentals": [make_rental(1, now)],
        "tracking": pings,
    }
    data.update(overrides)
    return RecordStore(**data)


class TestViolationRule:
    def test_strictly_greater(self):
        assert not is_geofence_violation(250.0, 100.0)
        assert is_geofence_violation(250.001, 100.0)

    def test_nan_never_violates(self):
        assert not is_geofence_violation(math.nan, 100.0)


class TestLocatePing:
    def test_distance_measured_from_site(self, now):
        store = _store(now, [make_ping(1, 200.0, now)])
        loc = locate_ping(store, store.tracking[0])
        assert loc.distance_m == pytest.approx(200.0, abs=1e-6)
        assert loc.meters_outside == pytest.approx(100.0, abs=1e-6)
        assert not loc.violation

    def test_no_active_rental(self, now):
        store = _store(now, [make_ping(1, 0.0, now)], rentals=[make_rental(1, now, status="completed")])
        assert locate_ping(store, store.tracking[0]) is None

    def test_missing_site_logged(self, now, caplog):
        store = _store(now, [make_ping(1, 0.0, now)], sites=[])
        with caplog.at_level("WARNING", logger="fleetview.analytics.geofence"):
            assert locate_ping(store, store.tracking[0]) is None
        assert "No site found for equipment 1" in caplog.text


class TestClassifyGeofence:
    def test_outside_tolerance(self, now):
        positions = classify_geofence(_store(now, [make_ping(1, 251.0, now)]))
        assert len(positions) == 1
        assert positions[0].violation

    def test_inside_tolerance(self, now):
        positions = classify_geofence(_store(now, [make_ping(1, 249.0, now)]))
        assert len(positions) == 1
        assert not positions[0].violation

    def test_skips_pings_without_rental_or_site(self, now):
        store = _store(
            now,
            [
                make_ping(1, 0.0, now),
                make_ping(2, 0.0, now, equipment_id=2),
                make_ping(3, 0.0, now, equipment_id=3),
            ],
            equipment=[make_equipment(1), make_equipment(2), make_equipment(3)],
            rentals=[make_rental(1, now), make_rental(2, now, equipment_id=3, site_id=99)],
        )
        assert [p.tracking_id for p in classify_geofence(store)] == [1]

    def test_keeps_order_and_duplicates(self, now):
        store = _store(now, [make_ping(5, 400.0, now), make_ping(2, 10.0, now), make_ping(9, 300.0, now)])
        positions = classify_geofence(store)
        assert [p.tracking_id for p in positions] == [5, 2, 9]
        assert [p.violation for p in positions] == [True, False, True]

    def test_enrichment_fields(self, records):
        pos = {p.tracking_id: p for p in classify_geofence(records)}
        assert set(pos) == {1, 2}
        assert pos[2].equipment_code == "EQ-002"
        assert pos[2].site_name == "Harbor"
        assert pos[2].client_id == 2
        assert pos[2].fuel_deviation == pytest.approx(16.0)

    def test_unknown_equipment_placeholder(self, now):
        store = _store(now, [make_ping(1, 0.0, now)], equipment=[])
        assert classify_geofence(store)[0].equipment_code == "Unknown"

    def test_invalid_coordinates_not_a_violation(self, now):
        store = _store(now, [make_ping(1, 0.0, now, latitude=500.0)])
        (pos,) = classify_geofence(store)
        assert math.isnan(pos.distance_m)
        assert not pos.violation

    def test_empty_store(self):
        assert classify_geofence(RecordStore()) == []


class TestGpsAggregates:
    def test_site_overview(self, records):
        overview = site_overview(records, classify_geofence(records)).set_index("site_name")
        assert overview.loc["Site 1", "active_equipment"] == 1
        assert overview.loc["Site 1", "violations"] == 0
        assert overview.loc["Harbor", "violations"] == 1
        assert overview.loc["Harbor", "weather_risk"] == pytest.approx(0.7)
        assert overview.loc["Harbor", "client_name"] == "Client 2"

    def test_type_breakdown(self, records):
        breakdown = type_violation_breakdown(classify_geofence(records)).set_index("type")
        assert breakdown.loc["Crane", "count"] == 1
        assert breakdown.loc["Crane", "violations"] == 1
        assert breakdown.loc["Excavator", "violations"] == 0

    def test_type_breakdown_empty(self):
        assert type_violation_breakdown([]).empty
