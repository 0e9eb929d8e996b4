"""Item management — commands and handler.

Every change that adds quantity to a warehouse (a new item, a quantity
increase, a move to another warehouse) is checked against that warehouse's
available capacity before anything is written.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from ledger.domain import ledger
from ledger.exceptions import CapacityExceeded, Conflict, InvalidArgument
from ledger.item.item import InventoryItem
from ledger.item.lookup import load_item, sku_exists
from ledger.warehouse.capacity import claim, snapshot_for
from ledger.warehouse.lookup import load_warehouse

logger = structlog.get_logger(__name__)


@ledger.command(part_of="InventoryItem")
class CreateItem:
    """Add a new item record to a warehouse."""

    sku = String(required=True, max_length=50)
    name = String(required=True, max_length=255)
    description = Text()
    category = String(max_length=100)
    quantity = Integer(default=0, min_value=0)
    storage_location = String(max_length=100)
    warehouse_id = Identifier(required=True)


@ledger.command(part_of="InventoryItem")
class UpdateItem:
    """Update an item. Omitted fields are left unchanged; the SKU cannot change."""

    item_id = Identifier(required=True)
    sku = String(max_length=50)
    name = String(max_length=255)
    description = Text()
    category = String(max_length=100)
    quantity = Integer(min_value=0)
    storage_location = String(max_length=100)
    warehouse_id = Identifier()


@ledger.command(part_of="InventoryItem")
class DeleteItem:
    """Remove an item record, freeing its quantity from the warehouse."""

    item_id = Identifier(required=True)


def _insufficient_capacity(occupancy, required, field="quantity"):
    return CapacityExceeded(
        {
            field: [
                f"Insufficient warehouse capacity. Available: {occupancy.available_capacity}, Required: {required}"
            ]
        }
    )


@ledger.command_handler(part_of=InventoryItem)
class ItemManagementHandler:
    @handle(CreateItem)
    def create_item(self, command):
        if sku_exists(command.sku):
            raise Conflict({"sku": [f"Item with SKU '{command.sku}' already exists"]})

        warehouse = load_warehouse(command.warehouse_id)
        quantity = command.quantity or 0
        occupancy = snapshot_for(warehouse)
        if not occupancy.can_accept(quantity):
            raise _insufficient_capacity(occupancy, quantity)
        if quantity:
            claim(warehouse)

        item = InventoryItem.create(
            sku=command.sku,
            name=command.name,
            warehouse_id=str(warehouse.id),
            quantity=quantity,
            description=command.description,
            category=command.category,
            storage_location=command.storage_location,
        )
        current_domain.repository_for(InventoryItem).add(item)
        return str(item.id)

    @handle(UpdateItem)
    def update_item(self, command):
        repo = current_domain.repository_for(InventoryItem)
        item = load_item(command.item_id)

        if command.sku is not None and command.sku != item.sku:
            raise InvalidArgument({"sku": ["SKU cannot be changed after creation"]})

        current_warehouse_id = str(item.warehouse_id)
        target_warehouse_id = str(command.warehouse_id) if command.warehouse_id else current_warehouse_id
        new_quantity = item.quantity if command.quantity is None else command.quantity

        moving = target_warehouse_id != current_warehouse_id
        target = load_warehouse(target_warehouse_id)
        if moving or new_quantity > item.quantity:
            # The item's own prior quantity does not count against itself in place
            occupancy = snapshot_for(target, exclude_item_id=None if moving else item.id)
            if not occupancy.can_accept(new_quantity):
                raise _insufficient_capacity(occupancy, new_quantity)
            claim(target)

        item.update_details(
            name=command.name,
            description=command.description,
            category=command.category,
            storage_location=command.storage_location,
            quantity=command.quantity,
            warehouse_id=target_warehouse_id if moving else None,
        )
        repo.add(item)
        return str(item.id)

    @handle(DeleteItem)
    def delete_item(self, command):
        repo = current_domain.repository_for(InventoryItem)
        item = load_item(command.item_id)
        removed = item.to_dict()
        repo._dao.delete(item)
        return removed
