"""InventoryItem aggregate (CQRS) — a stock-keeping unit held in one warehouse.

An item belongs to exactly one warehouse at a time. Its quantity counts
against that warehouse's capacity; the capacity check itself needs the
other items of the warehouse and therefore lives in the command handlers.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from ledger.domain import ledger
from ledger.item.events import ItemCreated, ItemStockReceived, ItemTransferred, ItemUpdated


@ledger.aggregate
class InventoryItem:
    """A quantity of one SKU stored in one warehouse."""

    sku = String(required=True, max_length=50)
    name = String(required=True, max_length=255)
    description = Text()
    category = String(max_length=100)
    quantity = Integer(default=0, min_value=0)
    storage_location = String(max_length=100)
    warehouse_id = Identifier(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def sku_and_name_must_not_be_blank(self):
        errors = {}
        if self.sku is not None and not self.sku.strip():
            errors["sku"] = ["SKU is required"]
        if self.name is not None and not self.name.strip():
            errors["name"] = ["Item name is required"]
        if errors:
            raise ValidationError(errors)

    @classmethod
    def create(
        cls,
        sku,
        name,
        warehouse_id,
        quantity=0,
        description=None,
        category=None,
        storage_location=None,
    ):
        """Create a new item record in ``warehouse_id``."""
        now = datetime.now(UTC)
        item = cls(
            sku=sku,
            name=name,
            description=description,
            category=category,
            quantity=quantity,
            storage_location=storage_location,
            warehouse_id=warehouse_id,
            created_at=now,
            updated_at=now,
        )
        item.raise_(
            ItemCreated(
                item_id=str(item.id),
                sku=item.sku,
                name=item.name,
                warehouse_id=str(item.warehouse_id),
                quantity=item.quantity,
                created_at=now,
            )
        )
        return item

    def update_details(
        self,
        name=None,
        description=None,
        category=None,
        storage_location=None,
        quantity=None,
        warehouse_id=None,
    ):
        """Apply a partial update. ``None`` leaves a field unchanged.

        Empty strings clear the optional text fields.
        """
        previous_warehouse_id = str(self.warehouse_id)
        previous_quantity = self.quantity

        if name is not None:
            self.name = name
        if description is not None:
            self.description = description or None
        if category is not None:
            self.category = category or None
        if storage_location is not None:
            self.storage_location = storage_location or None
        if quantity is not None:
            self.quantity = quantity
        if warehouse_id is not None:
            self.warehouse_id = warehouse_id

        self.updated_at = datetime.now(UTC)
        self.raise_(
            ItemUpdated(
                item_id=str(self.id),
                sku=self.sku,
                warehouse_id=str(self.warehouse_id),
                previous_warehouse_id=previous_warehouse_id,
                previous_quantity=previous_quantity,
                new_quantity=self.quantity,
                updated_at=self.updated_at,
            )
        )

    def dispatch_to(self, destination_warehouse_id, quantity):
        """Send ``quantity`` units to another warehouse.

        When the whole quantity leaves, the record itself moves and keeps its
        id and SKU. Otherwise the record stays and its quantity drops.
        """
        if quantity <= 0:
            raise ValidationError({"quantity": ["Transfer quantity must be at least 1"]})
        if quantity > self.quantity:
            raise ValidationError(
                {"quantity": [f"Transfer quantity ({quantity}) exceeds available quantity ({self.quantity})"]}
            )

        source_warehouse_id = str(self.warehouse_id)
        remaining = self.quantity - quantity
        if remaining == 0:
            self.warehouse_id = destination_warehouse_id
        else:
            self.quantity = remaining

        self.updated_at = datetime.now(UTC)
        self.raise_(
            ItemTransferred(
                item_id=str(self.id),
                sku=self.sku,
                source_warehouse_id=source_warehouse_id,
                destination_warehouse_id=str(destination_warehouse_id),
                quantity=quantity,
                remaining_quantity=remaining,
                transferred_at=self.updated_at,
            )
        )

    def receive(self, quantity):
        """Merge ``quantity`` units arriving from another warehouse."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        self.quantity = self.quantity + quantity
        self.updated_at = datetime.now(UTC)
        self.raise_(
            ItemStockReceived(
                item_id=str(self.id),
                sku=self.sku,
                warehouse_id=str(self.warehouse_id),
                quantity=quantity,
                new_quantity=self.quantity,
                received_at=self.updated_at,
            )
        )

    def split_off(self, destination_warehouse_id, quantity):
        """A new record in another warehouse carrying this item's description."""
        return InventoryItem.create(
            sku=self.sku,
            name=self.name,
            warehouse_id=destination_warehouse_id,
            quantity=quantity,
            description=self.description,
            category=self.category,
            storage_location=self.storage_location,
        )
