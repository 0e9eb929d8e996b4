"""Domain events for the InventoryItem aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ledger.domain import ledger


@ledger.event(part_of="InventoryItem")
class ItemCreated:
    """A new item record was added to a warehouse."""

    __version__ = 1

    item_id = Identifier(required=True)
    sku = String(required=True)
    name = String(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(default=0)
    created_at = DateTime(required=True)


@ledger.event(part_of="InventoryItem")
class ItemUpdated:
    """Item details, quantity or warehouse assignment changed."""

    __version__ = 1

    item_id = Identifier(required=True)
    sku = String(required=True)
    warehouse_id = Identifier(required=True)
    previous_warehouse_id = Identifier(required=True)
    previous_quantity = Integer(default=0)
    new_quantity = Integer(default=0)
    updated_at = DateTime(required=True)


@ledger.event(part_of="InventoryItem")
class ItemTransferred:
    """Some or all of an item's quantity left its warehouse for another one."""

    __version__ = 1

    item_id = Identifier(required=True)
    sku = String(required=True)
    source_warehouse_id = Identifier(required=True)
    destination_warehouse_id = Identifier(required=True)
    quantity = Integer(required=True)
    remaining_quantity = Integer(default=0)
    transferred_at = DateTime(required=True)


@ledger.event(part_of="InventoryItem")
class ItemStockReceived:
    """Quantity arriving from a transfer was merged into an existing record."""

    __version__ = 1

    item_id = Identifier(required=True)
    sku = String(required=True)
    warehouse_id = Identifier(required=True)
    quantity = Integer(required=True)
    new_quantity = Integer(default=0)
    received_at = DateTime(required=True)
