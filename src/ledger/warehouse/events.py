"""Domain events for the Warehouse aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ledger.domain import ledger


@ledger.event(part_of="Warehouse")
class WarehouseCreated:
    """A new warehouse was registered."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    name = String(required=True)
    location = String(required=True)
    max_capacity = Integer(required=True)
    created_at = DateTime(required=True)


@ledger.event(part_of="Warehouse")
class WarehouseUpdated:
    """Warehouse details were updated."""

    __version__ = 1

    warehouse_id = Identifier(required=True)
    name = String(required=True)
    location = String(required=True)
    max_capacity = Integer(required=True)
    updated_at = DateTime(required=True)
