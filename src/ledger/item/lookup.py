"""Item lookups used by command handlers and read models."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ledger.exceptions import NotFound
from ledger.item.item import InventoryItem
from ledger.utils.queries import fetch_all


def load_item(item_id, field="item_id"):
    """Fetch an item or raise ``NotFound`` keyed by ``field``."""
    try:
        return current_domain.repository_for(InventoryItem).get(str(item_id))
    except ObjectNotFoundError:
        raise NotFound({field: [f"Inventory item not found with id: {item_id}"]}) from None


def all_items():
    return fetch_all(InventoryItem)


def items_with_sku(sku):
    return fetch_all(InventoryItem, sku=sku)


def sku_exists(sku) -> bool:
    return bool(items_with_sku(sku))


def find_in_warehouse(sku, warehouse_id):
    """The first record of ``sku`` held in ``warehouse_id``, or ``None``."""
    for item in items_with_sku(sku):
        if str(item.warehouse_id) == str(warehouse_id):
            return item
    return None
