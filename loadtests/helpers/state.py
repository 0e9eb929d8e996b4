"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks entity IDs returned by creation endpoints so follow-up
operations can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class TrackedItem:
    item_id: str
    warehouse_id: str
    quantity: int


@dataclass
class LedgerState:
    """Tracks the warehouses and items one simulated operator has created."""

    warehouse_ids: list[str] = field(default_factory=list)
    items: list[TrackedItem] = field(default_factory=list)

    def other_warehouse(self, warehouse_id: str) -> str | None:
        for candidate in self.warehouse_ids:
            if candidate != warehouse_id:
                return candidate
        return None
