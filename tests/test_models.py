"""
tests/test_models.py
─────────────────────
Tests for Pydantic v2 record models and the record store.
"""
import pytest
from pydantic import ValidationError

from config.alerts import AlertSeverity, AlertType
from config.fleet import EquipmentStatus, RentalStatus
from fleetview.data.models import Alert, Client, Equipment, Rental
from fleetview.data.records import RecordStore

from conftest import make_client, make_equipment, make_rental, make_site


class TestEquipment:
    def test_valid_equipment(self):
        eq = make_equipment(7)
        assert eq.equipment_code == "EQ-007"
        assert eq.status == EquipmentStatus.RENTED

    def test_status_must_be_known(self):
        with pytest.raises(ValidationError):
            make_equipment(1, status="stolen")

    def test_negative_ideal_fuel_rejected(self):
        with pytest.raises(ValidationError):
            make_equipment(1, ideal_fuel_usage_per_hour=-1.0)

    def test_frozen(self):
        eq = make_equipment(1)
        with pytest.raises(ValidationError):
            eq.type = "Crane"

    def test_coerces_csv_strings(self):
        eq = Equipment.model_validate(
            {
                "equipment_id": "4",
                "equipment_code": "BLD-004",
                "type": "Bulldozer",
                "status": "maintenance",
                "ideal_fuel_usage_per_hour": "22.5",
                "recommended_service_period": "45",
            }
        )
        assert eq.equipment_id == 4
        assert eq.ideal_fuel_usage_per_hour == 22.5


class TestRental:
    def test_active_flag(self, now):
        assert make_rental(1, now).is_active
        assert not make_rental(1, now, status="completed").is_active

    def test_check_in_defaults_to_none(self, now):
        assert make_rental(1, now).check_in_date is None

    def test_status_enum(self, now):
        assert make_rental(1, now).status == RentalStatus.ACTIVE

    def test_parses_iso_dates(self):
        r = Rental.model_validate(
            {
                "rental_id": 1, "equipment_id": 1, "client_id": 1, "site_id": 1,
                "check_out_date": "2024-05-01", "expected_return_date": "2024-06-01T00:00:00",
                "engine_hours_per_day": 6, "idle_hours_per_day": 2,
                "status": "active", "fuel_usage_per_hour": 11.5,
            }
        )
        assert r.check_out_date.day == 1
        assert r.operating_days == 0


class TestClient:
    def test_defaults(self):
        c = Client(client_id=1, client_name="Acme")
        assert c.demand_trend == "stable"
        assert c.war_risk == 0.0

    def test_risk_bounds(self):
        with pytest.raises(ValidationError):
            make_client(1, forecasted_weather_risk=1.5)


class TestAlert:
    def test_valid_alert(self, now):
        alert = Alert(
            id="fuel-1",
            type="fuel",
            equipment_id=1,
            message="Equipment EQ-001 fuel usage deviation: 16.0L/hr",
            severity="high",
            timestamp=now,
        )
        assert alert.type == AlertType.FUEL
        assert alert.severity == AlertSeverity.HIGH
        assert alert.resolved is False
        assert alert.client_id is None

    def test_unknown_severity_rejected(self, now):
        with pytest.raises(ValidationError):
            Alert(id="x", type="fuel", message="m", severity="critical", timestamp=now)


class TestRecordStore:
    def test_first_match_wins(self):
        store = RecordStore(
            equipment=[make_equipment(1, equipment_code="FIRST"), make_equipment(1, equipment_code="SECOND")]
        )
        assert store.equipment_code(1) == "FIRST"

    def test_lookup_miss_returns_none(self):
        store = RecordStore(sites=[make_site(1)])
        assert store.site_by_id(99) is None
        assert store.equipment_code(99) == "Unknown"
        assert store.client_name(99) == "Unknown"

    def test_active_rental_ignores_completed(self, now):
        store = RecordStore(
            rentals=[
                make_rental(1, now, status="completed"),
                make_rental(2, now),
            ]
        )
        assert store.active_rental_for(1).rental_id == 2
        assert [r.rental_id for r in store.active_rentals()] == [2]

    def test_collections_become_tuples(self):
        store = RecordStore(equipment=[make_equipment(1)])
        assert isinstance(store.equipment, tuple)

    def test_empty_store(self):
        assert RecordStore().is_empty

    def test_maintenance_for(self, records):
        assert [m.maintenance_id for m in records.maintenance_for(1)] == [1, 2]
        assert records.maintenance_for(3) == []
