"""
tests/test_loader.py
────────────────────
Tests for CSV ingestion into the record store.
"""
from datetime import datetime
from pathlib import Path

import pytest

from fleetview.data.loader import CSV_FILES, RecordLoadError, load_records, read_model_csv, records_to_frame
from fleetview.data.models import Client, Equipment, Rental

_CSV = {
    "EQUIPMENT.csv": (
        "equipment_id,equipment_code,type,status,ideal_fuel_usage_per_hour,recommended_service_period\n"
        "1,EXC-001,Excavator,rented,18.5,30\n"
        "2,LDR-001,Loader,idle,12.5,30\n"
    ),
    "SITES.csv": (
        "site_id,site_name,location,client_id,latitude,longitude,geofence_radius_meters\n"
        "1,Riverside,,1,40.7128,-74.006,500\n"
    ),
    "RENTALS.csv": (
        "rental_id,equipment_id,client_id,site_id,check_out_date,expected_return_date,check_in_date,"
        "engine_hours_per_day,idle_hours_per_day,operating_days,status,fuel_usage_per_hour\n"
        "1,1,1,1,2024-05-01,2024-06-30,,6.5,1.5,30,active,19.2\n"
        "2,2,1,1,2024-01-01,2024-02-01,2024-02-02,5,3,31,completed,13\n"
    ),
    "CLIENT.csv": (
        "client_id,client_name,reliability_score,past_delays_count,historical_demand,avg_monthly_demand,"
        "delay_history,forecasted_weather_risk,war_risk,demand_trend,forecasted_demand\n"
        '1,Northbuild,92,1,"8,9,10",10,0.5,0.2,0,up,12.4\n'
    ),
    "EQUIPMENT_TRACKING.csv": (
        "tracking_id,equipment_id,timestamp,latitude,longitude\n"
        "1,1,2024-05-31T08:00:00,40.713,-74.0062\n"
    ),
    "MAINTENANCE.csv": (
        "maintenance_id,equipment_id,service_date,service_logs\n"
        "1,1,2024-04-15,Oil change\n"
    ),
}


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    for name, text in _CSV.items():
        (tmp_path / name).write_text(text)
    return tmp_path


class TestLoadRecords:
    def test_loads_all_sets(self, data_dir):
        store = load_records(data_dir)
        assert len(store.equipment) == 2
        assert len(store.sites) == 1
        assert len(store.rentals) == 2
        assert len(store.clients) == 1
        assert len(store.tracking) == 1
        assert len(store.maintenance) == 1

    def test_types_parsed(self, data_dir):
        store = load_records(data_dir)
        rental = store.rentals[0]
        assert rental.check_out_date == datetime(2024, 5, 1)
        assert rental.check_in_date is None
        assert rental.is_active
        assert store.rentals[1].check_in_date == datetime(2024, 2, 2)
        assert store.sites[0].location is None
        assert store.clients[0].historical_demand == "8,9,10"
        assert store.clients[0].demand_trend == "up"

    def test_missing_file(self, data_dir):
        (data_dir / "MAINTENANCE.csv").unlink()
        with pytest.raises(RecordLoadError, match="MAINTENANCE.csv"):
            load_records(data_dir)

    def test_invalid_row_reports_line(self, data_dir):
        (data_dir / "EQUIPMENT.csv").write_text(
            _CSV["EQUIPMENT.csv"] + "3,CRN-001,Crane,flying,15,60\n"
        )
        with pytest.raises(RecordLoadError, match="line 4"):
            load_records(data_dir)

    def test_header_only_file(self, data_dir):
        (data_dir / "EQUIPMENT_TRACKING.csv").write_text("tracking_id,equipment_id,timestamp,latitude,longitude\n")
        assert load_records(data_dir).tracking == ()

    def test_empty_file(self, data_dir):
        (data_dir / "SITES.csv").write_text("")
        with pytest.raises(RecordLoadError):
            load_records(data_dir)

    def test_file_table_covers_models(self):
        assert CSV_FILES["clients"] == ("CLIENT.csv", Client)
        assert CSV_FILES["rentals"][1] is Rental


class TestReadModelCsv:
    def test_whitespace_trimmed(self, tmp_path):
        path = tmp_path / "EQUIPMENT.csv"
        path.write_text(
            "equipment_id, equipment_code, type, status, ideal_fuel_usage_per_hour, recommended_service_period\n"
            "1, EXC-001 , Excavator, rented, 18.5, 30\n"
        )
        (eq,) = read_model_csv(path, Equipment)
        assert eq.equipment_code == "EXC-001"
        assert eq.type == "Excavator"

    def test_records_to_frame(self, data_dir):
        df = records_to_frame(load_records(data_dir).equipment)
        assert list(df["equipment_code"]) == ["EXC-001", "LDR-001"]
        assert records_to_frame([]).empty
