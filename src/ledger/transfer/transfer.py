"""Transfer Coordinator — moving stock of one item between two warehouses.

A transfer of the whole quantity reassigns the item record itself. A partial
transfer lowers the source record and either merges into the destination's
record of the same SKU or splits off a new record there. Either way every
write happens in one unit of work, under the locks of the item and of both
warehouses.
"""

from dataclasses import dataclass

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ledger.activity.log import ActivityType, record_activity
from ledger.coordination import dispatch, item_key, warehouse_key
from ledger.domain import ledger
from ledger.exceptions import CapacityExceeded, InvalidArgument, InvalidState
from ledger.item.catalog import ItemView, get_item
from ledger.item.item import InventoryItem
from ledger.item.lookup import find_in_warehouse, load_item
from ledger.warehouse.capacity import claim, snapshot_for
from ledger.warehouse.lookup import all_warehouses, load_warehouse

logger = structlog.get_logger(__name__)

MOVE = "move"
MERGE = "merge"
SPLIT = "split"


@ledger.command(part_of="InventoryItem")
class TransferStock:
    item_id = Identifier(required=True)
    source_warehouse_id = Identifier(required=True)
    destination_warehouse_id = Identifier(required=True)
    # Not required: 0 and malformed quantities are rejected by the handler as InvalidArgument
    quantity = Integer()


@ledger.command_handler(part_of=InventoryItem)
class TransferHandler:
    @handle(TransferStock)
    def transfer_stock(self, command):
        repo = current_domain.repository_for(InventoryItem)
        item = load_item(command.item_id)

        source_id = str(command.source_warehouse_id)
        destination_id = str(command.destination_warehouse_id)
        if str(item.warehouse_id) != source_id:
            raise InvalidState(
                {"source_warehouse_id": ["Item is not currently in the stated source warehouse"]}
            )
        if source_id == destination_id:
            raise InvalidArgument(
                {"destination_warehouse_id": ["Source and destination warehouses must be different"]}
            )

        quantity = command.quantity
        if quantity is None or quantity < 1:
            raise InvalidArgument({"quantity": ["Transfer quantity must be a whole number of at least 1"]})
        if quantity > item.quantity:
            raise InvalidArgument(
                {"quantity": [f"Insufficient quantity at source. Available: {item.quantity}, Requested: {quantity}"]}
            )

        destination = load_warehouse(destination_id, field="destination_warehouse_id")
        occupancy = snapshot_for(destination)
        if not occupancy.can_accept(quantity):
            raise CapacityExceeded(
                {
                    "quantity": [
                        "Insufficient capacity in destination warehouse. "
                        f"Available: {occupancy.available_capacity}, Required: {quantity}"
                    ]
                }
            )

        claim(destination)
        item.dispatch_to(destination_id, quantity)
        repo.add(item)
        if str(item.warehouse_id) == destination_id:
            return {"mode": MOVE, "item_id": str(item.id), "destination_item_id": str(item.id)}

        existing = find_in_warehouse(item.sku, destination_id)
        if existing is not None:
            existing.receive(quantity)
            repo.add(existing)
            return {"mode": MERGE, "item_id": str(item.id), "destination_item_id": str(existing.id)}

        created = item.split_off(destination_id, quantity)
        repo.add(created)
        return {"mode": SPLIT, "item_id": str(item.id), "destination_item_id": str(created.id)}


@dataclass(frozen=True)
class TransferRequest:
    item_id: str
    source_warehouse_id: str
    destination_warehouse_id: str
    quantity: int


@dataclass(frozen=True)
class TransferResult:
    """Outcome of a transfer.

    ``destination_item`` is the record now holding the transferred units:
    the moved item itself, the merged destination record, or the new split
    record. ``source_item`` is the source record after the transfer; after a
    move it is the same record as ``destination_item``.
    """

    mode: str
    quantity: int
    source_item: ItemView
    destination_item: ItemView


def transfer(request: TransferRequest) -> TransferResult:
    quantity = request.quantity
    # Left for the handler to reject once the item and warehouses are checked
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        quantity = None

    command = TransferStock(
        item_id=str(request.item_id),
        source_warehouse_id=str(request.source_warehouse_id),
        destination_warehouse_id=str(request.destination_warehouse_id),
        quantity=quantity,
    )
    outcome = dispatch(
        command,
        item_key(request.item_id),
        warehouse_key(request.source_warehouse_id),
        warehouse_key(request.destination_warehouse_id),
    )

    source_item = get_item(outcome["item_id"])
    destination_item = get_item(outcome["destination_item_id"])
    source_name = {str(w.id): w.name for w in all_warehouses()}.get(str(request.source_warehouse_id))
    logger.info(
        "Stock transferred",
        item_id=source_item.id,
        sku=source_item.sku,
        mode=outcome["mode"],
        quantity=quantity,
        source_warehouse_id=str(request.source_warehouse_id),
        destination_warehouse_id=destination_item.warehouse_id,
    )
    record_activity(
        ActivityType.TRANSFERRED,
        f"Transferred {quantity} units of {source_item.name} ({source_item.sku}) "
        f"from {source_name} to {destination_item.warehouse_name}",
        item_name=source_item.name,
        sku=source_item.sku,
        warehouse_name=destination_item.warehouse_name,
        quantity=quantity,
    )
    return TransferResult(
        mode=outcome["mode"],
        quantity=quantity,
        source_item=source_item,
        destination_item=destination_item,
    )
