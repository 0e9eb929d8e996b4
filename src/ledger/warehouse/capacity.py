"""Warehouse occupancy, derived from the Item Catalog at read time.

Nothing here is stored. A warehouse's current capacity is always the sum of
the quantities of the items assigned to it, so it cannot drift from the
catalog.
"""

from collections import defaultdict
from dataclasses import dataclass

from protean.utils.globals import current_domain

from ledger.item.item import InventoryItem
from ledger.utils.queries import fetch_all
from ledger.warehouse.warehouse import Warehouse


@dataclass(frozen=True)
class CapacitySnapshot:
    """Occupancy of one warehouse at one point in time."""

    warehouse_id: str
    max_capacity: int
    current_capacity: int = 0
    item_count: int = 0

    @property
    def available_capacity(self) -> int:
        return self.max_capacity - self.current_capacity

    @property
    def utilization_percentage(self) -> float:
        if not self.max_capacity:
            return 0.0
        return self.current_capacity / self.max_capacity * 100

    def can_accept(self, quantity: int) -> bool:
        return quantity <= self.available_capacity


def occupancy_by_warehouse(items) -> dict[str, tuple[int, int]]:
    """Map warehouse id to ``(current_capacity, item_count)`` for ``items``."""
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for item in items:
        entry = totals[str(item.warehouse_id)]
        entry[0] += item.quantity or 0
        entry[1] += 1
    return {warehouse_id: (current, count) for warehouse_id, (current, count) in totals.items()}


def snapshot_for(warehouse, items=None, exclude_item_id=None) -> CapacitySnapshot:
    """Occupancy of ``warehouse``.

    ``items`` defaults to the items currently assigned to the warehouse.
    ``exclude_item_id`` leaves one item's contribution out, which is how an
    item's own prior quantity is discounted when it is re-validated in place.
    """
    warehouse_id = str(warehouse.id)
    if items is None:
        items = items_in_warehouse(warehouse_id)
    current = 0
    count = 0
    for item in items:
        if str(item.warehouse_id) != warehouse_id:
            continue
        if exclude_item_id is not None and str(item.id) == str(exclude_item_id):
            continue
        current += item.quantity or 0
        count += 1
    return CapacitySnapshot(
        warehouse_id=warehouse_id,
        max_capacity=warehouse.max_capacity,
        current_capacity=current,
        item_count=count,
    )


def items_in_warehouse(warehouse_id):
    return fetch_all(InventoryItem, warehouse_id=str(warehouse_id))


def claim(warehouse) -> None:
    """Write ``warehouse`` back in the current unit of work.

    Called after an occupancy check passes and before stock is added. The
    warehouse's version moves forward, so a concurrent unit of work that
    checked the same occupancy fails on commit with ``ExpectedVersionError``
    instead of overfilling the warehouse.
    """
    warehouse.record_stock_change()
    current_domain.repository_for(Warehouse).add(warehouse)
