"""Warehouse management — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from ledger.domain import ledger
from ledger.exceptions import CapacityExceeded, Conflict
from ledger.warehouse.capacity import snapshot_for
from ledger.warehouse.lookup import load_warehouse, name_taken
from ledger.warehouse.warehouse import Warehouse


@ledger.command(part_of="Warehouse")
class CreateWarehouse:
    """Register a new warehouse."""

    name = String(required=True, max_length=255)
    location = String(required=True, max_length=255)
    max_capacity = Integer(required=True, min_value=1)


@ledger.command(part_of="Warehouse")
class UpdateWarehouse:
    """Update warehouse details. Omitted fields are left unchanged."""

    warehouse_id = Identifier(required=True)
    name = String(max_length=255)
    location = String(max_length=255)
    max_capacity = Integer(min_value=1)


@ledger.command(part_of="Warehouse")
class DeleteWarehouse:
    """Remove an empty warehouse."""

    warehouse_id = Identifier(required=True)


@ledger.command_handler(part_of=Warehouse)
class WarehouseManagementHandler:
    @handle(CreateWarehouse)
    def create_warehouse(self, command):
        if name_taken(command.name):
            raise Conflict({"name": [f"Warehouse with name '{command.name}' already exists"]})

        warehouse = Warehouse.create(
            name=command.name,
            location=command.location,
            max_capacity=command.max_capacity,
        )
        current_domain.repository_for(Warehouse).add(warehouse)
        return str(warehouse.id)

    @handle(UpdateWarehouse)
    def update_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        warehouse = load_warehouse(command.warehouse_id)

        if command.name is not None and name_taken(command.name, exclude_id=warehouse.id):
            raise Conflict({"name": [f"Warehouse with name '{command.name}' already exists"]})

        if command.max_capacity is not None:
            occupancy = snapshot_for(warehouse)
            if command.max_capacity < occupancy.current_capacity:
                raise CapacityExceeded(
                    {
                        "max_capacity": [
                            f"Cannot reduce capacity to {command.max_capacity}. "
                            f"Current usage is {occupancy.current_capacity} units."
                        ]
                    }
                )

        warehouse.update_details(
            name=command.name,
            location=command.location,
            max_capacity=command.max_capacity,
        )
        repo.add(warehouse)
        return str(warehouse.id)

    @handle(DeleteWarehouse)
    def delete_warehouse(self, command):
        repo = current_domain.repository_for(Warehouse)
        warehouse = load_warehouse(command.warehouse_id)

        occupancy = snapshot_for(warehouse)
        if occupancy.item_count > 0:
            raise Conflict(
                {
                    "warehouse_id": [
                        f"Cannot delete warehouse. It contains {occupancy.item_count} items. "
                        "Please remove or transfer all items before deleting."
                    ]
                }
            )

        removed = warehouse.to_dict()
        repo._dao.delete(warehouse)
        return removed
