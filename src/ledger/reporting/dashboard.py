"""Dashboard aggregates over the Warehouse Registry and the Item Catalog.

``LedgerSnapshot.capture()`` reads both collections once; every function
below is a pure computation over a snapshot, so all figures of one summary
agree with each other.
"""

from collections import defaultdict
from dataclasses import dataclass, field

from ledger.item.lookup import all_items
from ledger.settings import settings
from ledger.warehouse.lookup import all_warehouses
from ledger.warehouse.registry import WarehouseView, views_from

UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class LedgerSnapshot:
    warehouses: list[WarehouseView] = field(default_factory=list)
    items: list = field(default_factory=list)

    @classmethod
    def capture(cls):
        items = all_items()
        return cls(warehouses=views_from(all_warehouses(), items), items=items)


@dataclass(frozen=True)
class CapacityRow:
    warehouse_id: str
    name: str
    used: int
    available: int
    max_capacity: int
    utilization_percentage: float


@dataclass(frozen=True)
class DashboardSummary:
    total_warehouses: int
    total_items: int
    total_quantity: int
    overall_utilization: float
    threshold: float
    near_capacity: list[WarehouseView]
    quantity_by_category: dict[str, int]
    capacity: list[CapacityRow]


def total_warehouses(snapshot: LedgerSnapshot) -> int:
    return len(snapshot.warehouses)


def total_items(snapshot: LedgerSnapshot) -> int:
    return len(snapshot.items)


def total_quantity(snapshot: LedgerSnapshot) -> int:
    return sum(item.quantity or 0 for item in snapshot.items)


def overall_utilization(snapshot: LedgerSnapshot) -> float:
    """Occupied share of all capacity, as a percentage. ``0`` when there is no capacity."""
    total_capacity = sum(w.max_capacity for w in snapshot.warehouses)
    if not total_capacity:
        return 0.0
    used = sum(w.current_capacity for w in snapshot.warehouses)
    return used / total_capacity * 100


def warehouses_above(snapshot: LedgerSnapshot, threshold: float) -> list[WarehouseView]:
    """Warehouses whose utilization is strictly above ``threshold`` percent."""
    return [w for w in snapshot.warehouses if w.utilization_percentage > threshold]


def quantity_by_category(snapshot: LedgerSnapshot) -> dict[str, int]:
    totals: dict[str, int] = defaultdict(int)
    for item in snapshot.items:
        category = (item.category or "").strip() or UNCATEGORIZED
        totals[category] += item.quantity or 0
    return dict(totals)


def capacity_rows(snapshot: LedgerSnapshot) -> list[CapacityRow]:
    return [
        CapacityRow(
            warehouse_id=w.id,
            name=w.name,
            used=w.current_capacity,
            available=w.available_capacity,
            max_capacity=w.max_capacity,
            utilization_percentage=w.utilization_percentage,
        )
        for w in snapshot.warehouses
    ]


def summarize(snapshot: LedgerSnapshot | None = None, threshold: float | None = None) -> DashboardSummary:
    snapshot = LedgerSnapshot.capture() if snapshot is None else snapshot
    threshold = settings.near_capacity_threshold if threshold is None else threshold
    return DashboardSummary(
        total_warehouses=total_warehouses(snapshot),
        total_items=total_items(snapshot),
        total_quantity=total_quantity(snapshot),
        overall_utilization=overall_utilization(snapshot),
        threshold=threshold,
        near_capacity=warehouses_above(snapshot, threshold),
        quantity_by_category=quantity_by_category(snapshot),
        capacity=capacity_rows(snapshot),
    )
