"""Item Catalog — inventory item records and their warehouse assignment.

Reads return ``ItemView`` records that carry the owning warehouse's name.
Writes dispatch the management commands while holding the item and every
warehouse whose capacity the write is validated against.
"""

from dataclasses import dataclass
from datetime import datetime

import structlog
from protean.exceptions import ValidationError

from ledger.activity.log import ActivityType, record_activity
from ledger.coordination import dispatch, dispatch_stable, item_key, sku_key, warehouse_key
from ledger.item.lookup import all_items, load_item
from ledger.item.management import CreateItem, DeleteItem, UpdateItem
from ledger.warehouse.capacity import items_in_warehouse
from ledger.warehouse.lookup import all_warehouses, load_warehouse

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ItemView:
    id: str
    sku: str
    name: str
    description: str | None
    category: str | None
    quantity: int
    storage_location: str | None
    warehouse_id: str
    warehouse_name: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def build(cls, item, warehouse_name=None):
        return cls(
            id=str(item.id),
            sku=item.sku,
            name=item.name,
            description=item.description,
            category=item.category,
            quantity=item.quantity or 0,
            storage_location=item.storage_location,
            warehouse_id=str(item.warehouse_id),
            warehouse_name=warehouse_name,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


def _warehouse_names():
    return {str(warehouse.id): warehouse.name for warehouse in all_warehouses()}


def views_from(items, names=None) -> list[ItemView]:
    names = _warehouse_names() if names is None else names
    return [ItemView.build(item, names.get(str(item.warehouse_id))) for item in items]


def _matches(item, term):
    return any(term in (value or "").lower() for value in (item.name, item.sku, item.category))


def _clean_quantity(errors, quantity, required):
    if quantity is None:
        if required:
            errors["quantity"] = ["Quantity is required"]
        return None
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
        errors["quantity"] = ["Quantity cannot be negative"]
    return quantity


def _clean_create(sku, name, warehouse_id, quantity):
    errors = {}
    if not (sku or "").strip():
        errors["sku"] = ["SKU is required"]
    if not (name or "").strip():
        errors["name"] = ["Item name is required"]
    if not warehouse_id:
        errors["warehouse_id"] = ["Warehouse ID is required"]
    quantity = _clean_quantity(errors, quantity, required=True)
    if errors:
        raise ValidationError(errors)
    return sku.strip(), name.strip(), quantity


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------
def get_item(item_id) -> ItemView:
    item = load_item(item_id)
    return ItemView.build(item, _warehouse_names().get(str(item.warehouse_id)))


def list_items() -> list[ItemView]:
    return views_from(all_items())


def list_for_warehouse(warehouse_id) -> list[ItemView]:
    warehouse = load_warehouse(warehouse_id)
    return views_from(items_in_warehouse(warehouse.id), {str(warehouse.id): warehouse.name})


def search_items(term=None, warehouse_id=None) -> list[ItemView]:
    """Items whose name, SKU or category contains ``term``, ignoring case.

    A blank ``term`` matches everything. ``warehouse_id`` restricts the
    search to one warehouse.
    """
    items = items_in_warehouse(warehouse_id) if warehouse_id else all_items()
    needle = (term or "").strip().lower()
    if needle:
        items = [item for item in items if _matches(item, needle)]
    return views_from(items)


def list_categories() -> list[str]:
    return sorted({item.category for item in all_items() if item.category and item.category.strip()})


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------
def create_item(
    sku,
    name,
    warehouse_id,
    quantity=0,
    description=None,
    category=None,
    storage_location=None,
) -> ItemView:
    sku, name, quantity = _clean_create(sku, name, warehouse_id, quantity)
    command = CreateItem(
        sku=sku,
        name=name,
        description=description,
        category=category,
        quantity=quantity,
        storage_location=storage_location,
        warehouse_id=str(warehouse_id),
    )
    item_id = dispatch(command, sku_key(sku), warehouse_key(warehouse_id))

    view = get_item(item_id)
    logger.info("Item created", item_id=view.id, sku=view.sku, warehouse_id=view.warehouse_id, quantity=view.quantity)
    record_activity(
        ActivityType.CREATED,
        f"Added {view.quantity} units of {view.name} ({view.sku}) to {view.warehouse_name}",
        item_name=view.name,
        sku=view.sku,
        warehouse_name=view.warehouse_name,
        quantity=view.quantity,
    )
    return view


def update_item(item_id, **fields) -> ItemView:
    """Apply ``fields`` to an item; omitted or ``None`` fields stay as they are."""
    errors = {}
    _clean_quantity(errors, fields.get("quantity"), required=False)
    if "name" in fields and fields["name"] is not None and not str(fields["name"]).strip():
        errors["name"] = ["Item name is required"]
    if errors:
        raise ValidationError(errors)

    before = load_item(item_id)
    command = UpdateItem(item_id=str(item_id), **{k: v for k, v in fields.items() if v is not None})
    new_warehouse_id = fields.get("warehouse_id")

    def keys():
        current = load_item(item_id)
        resolved = {item_key(item_id), warehouse_key(current.warehouse_id)}
        if new_warehouse_id:
            resolved.add(warehouse_key(new_warehouse_id))
        return resolved

    dispatch_stable(command, keys)

    view = get_item(item_id)
    logger.info("Item updated", item_id=view.id, sku=view.sku, warehouse_id=view.warehouse_id, quantity=view.quantity)
    added = view.quantity - (before.quantity or 0)
    if added > 0 and view.warehouse_id == str(before.warehouse_id):
        record_activity(
            ActivityType.STOCK_ADDED,
            f"Added {added} units to {view.name} ({view.sku}) in {view.warehouse_name}",
            item_name=view.name,
            sku=view.sku,
            warehouse_name=view.warehouse_name,
            quantity=added,
        )
    else:
        record_activity(
            ActivityType.UPDATED,
            f"Updated {view.name} ({view.sku})",
            item_name=view.name,
            sku=view.sku,
            warehouse_name=view.warehouse_name,
            quantity=view.quantity,
        )
    return view


def delete_item(item_id) -> None:
    def keys():
        current = load_item(item_id)
        return {item_key(item_id), warehouse_key(current.warehouse_id)}

    removed = dispatch_stable(DeleteItem(item_id=str(item_id)), keys)

    warehouse_name = _warehouse_names().get(str(removed.get("warehouse_id")))
    logger.info("Item deleted", item_id=str(item_id), sku=removed.get("sku"))
    record_activity(
        ActivityType.DELETED,
        f"Removed {removed.get('name')} ({removed.get('sku')}) from {warehouse_name}",
        item_name=removed.get("name"),
        sku=removed.get("sku"),
        warehouse_name=warehouse_name,
        quantity=removed.get("quantity"),
    )
