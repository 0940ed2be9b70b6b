"""
fleetview/data/records.py
─────────────────────────
In-memory record store.

The store is built once at startup from the CSV snapshot and never mutated.
Every analytics function receives it as an explicit argument.

Lookups mirror a linear "first match" scan over the source order: when ids
repeat, the earliest record wins. Referential integrity is not checked, so
every lookup may return None.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from fleetview.data.models import (
    Client,
    Equipment,
    EquipmentTracking,
    Maintenance,
    Rental,
    Site,
)


def _first_by(items, key) -> dict:
    index: dict = {}
    for item in items:
        index.setdefault(key(item), item)
    return index


@dataclass(frozen=True)
class RecordStore:
    equipment: tuple[Equipment, ...] = ()
    sites: tuple[Site, ...] = ()
    rentals: tuple[Rental, ...] = ()
    clients: tuple[Client, ...] = ()
    tracking: tuple[EquipmentTracking, ...] = ()
    maintenance: tuple[Maintenance, ...] = ()

    _equipment_idx: dict = field(init=False, repr=False, compare=False)
    _site_idx: dict = field(init=False, repr=False, compare=False)
    _client_idx: dict = field(init=False, repr=False, compare=False)
    _active_rental_idx: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples
        for name in ("equipment", "sites", "rentals", "clients", "tracking", "maintenance"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        object.__setattr__(self, "_equipment_idx", _first_by(self.equipment, lambda e: e.equipment_id))
        object.__setattr__(self, "_site_idx", _first_by(self.sites, lambda s: s.site_id))
        object.__setattr__(self, "_client_idx", _first_by(self.clients, lambda c: c.client_id))
        object.__setattr__(
            self,
            "_active_rental_idx",
            _first_by((r for r in self.rentals if r.is_active), lambda r: r.equipment_id),
        )

    # ── Lookups ───────────────────────────────────────────────────────────────

    def equipment_by_id(self, equipment_id: int) -> Equipment | None:
        return self._equipment_idx.get(equipment_id)

    def site_by_id(self, site_id: int) -> Site | None:
        return self._site_idx.get(site_id)

    def client_by_id(self, client_id: int) -> Client | None:
        return self._client_idx.get(client_id)

    def active_rental_for(self, equipment_id: int) -> Rental | None:
        """First active rental for the equipment, in source order."""
        return self._active_rental_idx.get(equipment_id)

    def active_rentals(self) -> list[Rental]:
        return [r for r in self.rentals if r.is_active]

    def maintenance_for(self, equipment_id: int) -> list[Maintenance]:
        return [m for m in self.maintenance if m.equipment_id == equipment_id]

    # ── Display helpers ───────────────────────────────────────────────────────

    def equipment_code(self, equipment_id: int, default: str = "Unknown") -> str:
        eq = self.equipment_by_id(equipment_id)
        return eq.equipment_code if eq is not None else default

    def client_name(self, client_id: int, default: str = "Unknown") -> str:
        client = self.client_by_id(client_id)
        return client.client_name if client is not None else default

    @property
    def is_empty(self) -> bool:
        return not (self.equipment or self.rentals or self.tracking)
