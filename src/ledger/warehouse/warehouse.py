"""Warehouse aggregate (CQRS) — a physical location that holds inventory.

Only the static description of a warehouse is stored here: name, location
and maximum capacity. Occupancy (current/available capacity, utilization,
item count) is derived from the Item Catalog at read time.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from ledger.domain import ledger
from ledger.warehouse.events import WarehouseCreated, WarehouseUpdated


@ledger.aggregate
class Warehouse:
    """A physical location where inventory is stored."""

    name = String(required=True, max_length=255)
    location = String(required=True, max_length=255)
    max_capacity = Integer(required=True, min_value=1)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def name_and_location_must_not_be_blank(self):
        errors = {}
        if self.name is not None and not self.name.strip():
            errors["name"] = ["Warehouse name is required"]
        if self.location is not None and not self.location.strip():
            errors["location"] = ["Location is required"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def create(cls, name, location, max_capacity):
        """Register a new, empty warehouse."""
        now = datetime.now(UTC)
        warehouse = cls(
            name=name,
            location=location,
            max_capacity=max_capacity,
            created_at=now,
            updated_at=now,
        )
        warehouse.raise_(
            WarehouseCreated(
                warehouse_id=str(warehouse.id),
                name=warehouse.name,
                location=warehouse.location,
                max_capacity=warehouse.max_capacity,
                created_at=now,
            )
        )
        return warehouse

    def update_details(self, name=None, location=None, max_capacity=None):
        """Update name, location and/or maximum capacity.

        Occupancy is not known to the aggregate; callers check a capacity
        reduction against the current occupancy before calling this.
        """
        if name is not None:
            self.name = name
        if location is not None:
            self.location = location
        if max_capacity is not None:
            self.max_capacity = max_capacity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            WarehouseUpdated(
                warehouse_id=str(self.id),
                name=self.name,
                location=self.location,
                max_capacity=self.max_capacity,
                updated_at=self.updated_at,
            )
        )

    def record_stock_change(self):
        """Mark the warehouse as changed by stock entering it.

        No event is raised; the occupancy itself lives on the items.
        """
        self.updated_at = datetime.now(UTC)
