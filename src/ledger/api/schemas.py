"""Pydantic request/response schemas for the Ledger API.

These are external contracts, separate from the internal protean commands
and the read views. JSON field names are camelCase; snake_case names are
accepted on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LedgerSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# ---------------------------------------------------------------------------
# Warehouse Schemas
# ---------------------------------------------------------------------------
class CreateWarehouseRequest(LedgerSchema):
    name: str | None = None
    location: str | None = None
    max_capacity: int | None = None


class UpdateWarehouseRequest(LedgerSchema):
    name: str | None = None
    location: str | None = None
    max_capacity: int | None = None


class WarehouseResponse(LedgerSchema):
    id: str
    name: str
    location: str
    max_capacity: int
    current_capacity: int
    available_capacity: int
    utilization_percentage: float
    item_count: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


# ---------------------------------------------------------------------------
# Item Schemas
# ---------------------------------------------------------------------------
class CreateItemRequest(LedgerSchema):
    sku: str | None = None
    name: str | None = None
    description: str | None = None
    category: str | None = None
    quantity: int | None = 0
    storage_location: str | None = None
    warehouse_id: str | None = None


class UpdateItemRequest(LedgerSchema):
    sku: str | None = None
    name: str | None = None
    description: str | None = None
    category: str | None = None
    quantity: int | None = None
    storage_location: str | None = None
    warehouse_id: str | None = None


class ItemResponse(LedgerSchema):
    id: str
    sku: str
    name: str
    description: str | None = None
    category: str | None = None
    quantity: int
    storage_location: str | None = None
    warehouse_id: str
    warehouse_name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TransferRequestBody(LedgerSchema):
    item_id: str
    source_warehouse_id: str
    destination_warehouse_id: str
    quantity: int | None = None


class TransferResponse(LedgerSchema):
    mode: str
    quantity: int
    source_item: ItemResponse
    destination_item: ItemResponse


# ---------------------------------------------------------------------------
# Dashboard / Activity Schemas
# ---------------------------------------------------------------------------
class CapacityRowResponse(LedgerSchema):
    warehouse_id: str
    name: str
    used: int
    available: int
    max_capacity: int
    utilization_percentage: float


class DashboardResponse(LedgerSchema):
    total_warehouses: int
    total_items: int
    total_quantity: int
    overall_utilization: float
    threshold: float
    near_capacity: list[WarehouseResponse] = Field(default_factory=list)
    quantity_by_category: dict[str, int] = Field(default_factory=dict)
    capacity: list[CapacityRowResponse] = Field(default_factory=list)


class ActivityResponse(LedgerSchema):
    id: str = Field(validation_alias="entry_id")
    activity_type: str
    description: str
    item_name: str | None = None
    sku: str | None = None
    warehouse_name: str | None = None
    quantity: int | None = None
    occurred_at: datetime


class ErrorResponse(LedgerSchema):
    error: str
    message: str
    errors: dict[str, list[str]] = Field(default_factory=dict)
    path: str
    timestamp: datetime
