"""
fleetview/data/loader.py
────────────────────────
CSV ingestion for the fleet snapshot.

Provides:
  - load_records()    : Read the six CSV files into a RecordStore
  - read_model_csv()  : Read one CSV file into a list of validated models
  - records_to_frame(): Turn model records back into a DataFrame for charts

Loading happens once at startup; any missing file or invalid row aborts with
RecordLoadError.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TypeVar

import pandas as pd
from pydantic import BaseModel, ValidationError

from fleetview.data.models import (
    Client,
    Equipment,
    EquipmentTracking,
    Maintenance,
    Rental,
    Site,
)
from fleetview.data.records import RecordStore

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CSV_FILES: dict[str, tuple[str, type[BaseModel]]] = {
    "equipment": ("EQUIPMENT.csv", Equipment),
    "sites": ("SITES.csv", Site),
    "rentals": ("RENTALS.csv", Rental),
    "clients": ("CLIENT.csv", Client),
    "tracking": ("EQUIPMENT_TRACKING.csv", EquipmentTracking),
    "maintenance": ("MAINTENANCE.csv", Maintenance),
}


class RecordLoadError(Exception):
    """Raised when a record file is missing or holds an invalid row."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path.name}: {reason}")


def _clean_rows(df: pd.DataFrame) -> list[dict]:
    """Rows as dicts with empty cells dropped so model defaults apply."""
    df.columns = [str(c).strip() for c in df.columns]
    rows = df.astype(object).where(pd.notna(df), None).to_dict(orient="records")
    return [
        {k: (v.strip() if isinstance(v, str) else v) for k, v in row.items() if v is not None}
        for row in rows
    ]


def read_model_csv(path: Path, model: type[ModelT]) -> list[ModelT]:
    """Read a CSV file and validate every row into `model`."""
    try:
        df = pd.read_csv(path, skipinitialspace=True)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise RecordLoadError(path, str(exc)) from exc

    records: list[ModelT] = []
    for line_no, row in enumerate(_clean_rows(df), start=2):
        try:
            records.append(model.model_validate(row))
        except ValidationError as exc:
            raise RecordLoadError(path, f"line {line_no}: {exc}") from exc
    return records


def load_records(data_dir: str | Path) -> RecordStore:
    """Load the full fleet snapshot from `data_dir`."""
    data_dir = Path(data_dir)
    loaded = {}
    for name, (filename, model) in CSV_FILES.items():
        loaded[name] = read_model_csv(data_dir / filename, model)
        logger.info("Loaded %d %s records from %s", len(loaded[name]), name, filename)
    return RecordStore(**loaded)


def records_to_frame(records: Sequence[BaseModel]) -> pd.DataFrame:
    """DataFrame with one column per model field (empty frame for no records)."""
    if not records:
        return pd.DataFrame()
    return pd.DataFrame([r.model_dump(mode="python") for r in records])
