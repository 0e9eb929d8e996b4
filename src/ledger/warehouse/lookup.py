"""Warehouse lookups used by command handlers and read models."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ledger.exceptions import NotFound
from ledger.utils.queries import fetch_all
from ledger.warehouse.warehouse import Warehouse


def load_warehouse(warehouse_id, field="warehouse_id"):
    """Fetch a warehouse or raise ``NotFound`` keyed by ``field``."""
    try:
        return current_domain.repository_for(Warehouse).get(str(warehouse_id))
    except ObjectNotFoundError:
        raise NotFound({field: [f"Warehouse not found with id: {warehouse_id}"]}) from None


def all_warehouses():
    return fetch_all(Warehouse)


def name_taken(name, exclude_id=None) -> bool:
    """True if another warehouse already uses ``name`` (case-insensitive)."""
    wanted = (name or "").strip().lower()
    return any(
        (warehouse.name or "").strip().lower() == wanted and str(warehouse.id) != str(exclude_id)
        for warehouse in all_warehouses()
    )
