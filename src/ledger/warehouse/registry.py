"""Warehouse Registry — warehouse records and their capacity accounting.

Writes go through the management commands under the warehouse's lock;
reads return ``WarehouseView`` records whose occupancy fields are computed
from the Item Catalog when the view is built.
"""

from dataclasses import dataclass
from datetime import datetime

import structlog
from protean.exceptions import ValidationError

from ledger.activity.log import ActivityType, record_activity
from ledger.coordination import dispatch, warehouse_key, warehouse_name_key
from ledger.item.lookup import all_items
from ledger.warehouse.capacity import CapacitySnapshot, items_in_warehouse, occupancy_by_warehouse, snapshot_for
from ledger.warehouse.lookup import all_warehouses, load_warehouse
from ledger.warehouse.management import CreateWarehouse, DeleteWarehouse, UpdateWarehouse

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class WarehouseView:
    id: str
    name: str
    location: str
    max_capacity: int
    current_capacity: int
    available_capacity: int
    utilization_percentage: float
    item_count: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def build(cls, warehouse, occupancy: CapacitySnapshot):
        return cls(
            id=str(warehouse.id),
            name=warehouse.name,
            location=warehouse.location,
            max_capacity=warehouse.max_capacity,
            current_capacity=occupancy.current_capacity,
            available_capacity=occupancy.available_capacity,
            utilization_percentage=occupancy.utilization_percentage,
            item_count=occupancy.item_count,
            created_at=warehouse.created_at,
            updated_at=warehouse.updated_at,
        )


def _check_text(errors, field, value, message, required):
    if value is None:
        if required:
            errors[field] = [message]
        return None
    value = str(value).strip()
    if not value:
        errors[field] = [message]
    return value


def _clean_fields(name, location, max_capacity, required):
    errors = {}
    name = _check_text(errors, "name", name, "Warehouse name is required", required)
    location = _check_text(errors, "location", location, "Location is required", required)
    if max_capacity is None:
        if required:
            errors["max_capacity"] = ["Maximum capacity is required"]
    elif isinstance(max_capacity, bool) or not isinstance(max_capacity, int) or max_capacity < 1:
        errors["max_capacity"] = ["Maximum capacity must be at least 1"]
    if errors:
        raise ValidationError(errors)
    return name, location, max_capacity


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------
def view_of(warehouse) -> WarehouseView:
    return WarehouseView.build(warehouse, snapshot_for(warehouse, items_in_warehouse(warehouse.id)))


def get_warehouse(warehouse_id) -> WarehouseView:
    return view_of(load_warehouse(warehouse_id))


def views_from(warehouses, items) -> list[WarehouseView]:
    """Views for ``warehouses``, with occupancy computed from ``items``."""
    occupancy = occupancy_by_warehouse(items)
    views = []
    for warehouse in warehouses:
        current, count = occupancy.get(str(warehouse.id), (0, 0))
        snapshot = CapacitySnapshot(
            warehouse_id=str(warehouse.id),
            max_capacity=warehouse.max_capacity,
            current_capacity=current,
            item_count=count,
        )
        views.append(WarehouseView.build(warehouse, snapshot))
    return views


def list_warehouses() -> list[WarehouseView]:
    return views_from(all_warehouses(), all_items())


def search_warehouses(name=None) -> list[WarehouseView]:
    """Warehouses whose name contains ``name``, ignoring case."""
    term = (name or "").strip().lower()
    warehouses = [w for w in all_warehouses() if term in (w.name or "").lower()]
    return views_from(warehouses, all_items())


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------
def create_warehouse(name, location, max_capacity) -> WarehouseView:
    name, location, max_capacity = _clean_fields(name, location, max_capacity, required=True)
    command = CreateWarehouse(name=name, location=location, max_capacity=max_capacity)
    warehouse_id = dispatch(command, warehouse_name_key(name))

    view = get_warehouse(warehouse_id)
    logger.info("Warehouse created", warehouse_id=view.id, name=view.name, max_capacity=view.max_capacity)
    record_activity(
        ActivityType.WAREHOUSE_CREATED,
        f"Created warehouse {view.name} in {view.location} with capacity {view.max_capacity}",
        warehouse_name=view.name,
    )
    return view


def update_warehouse(warehouse_id, name=None, location=None, max_capacity=None) -> WarehouseView:
    name, location, max_capacity = _clean_fields(name, location, max_capacity, required=False)
    command = UpdateWarehouse(
        warehouse_id=str(warehouse_id),
        name=name,
        location=location,
        max_capacity=max_capacity,
    )
    keys = [warehouse_key(warehouse_id)]
    if name is not None:
        keys.append(warehouse_name_key(name))
    dispatch(command, *keys)

    view = get_warehouse(warehouse_id)
    logger.info("Warehouse updated", warehouse_id=view.id, name=view.name, max_capacity=view.max_capacity)
    record_activity(
        ActivityType.WAREHOUSE_UPDATED,
        f"Updated warehouse {view.name}",
        warehouse_name=view.name,
    )
    return view


def delete_warehouse(warehouse_id) -> None:
    removed = dispatch(DeleteWarehouse(warehouse_id=str(warehouse_id)), warehouse_key(warehouse_id))

    logger.info("Warehouse deleted", warehouse_id=str(warehouse_id))
    record_activity(
        ActivityType.WAREHOUSE_DELETED,
        f"Deleted warehouse {removed.get('name')}",
        warehouse_name=removed.get("name"),
    )
