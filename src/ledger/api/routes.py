"""FastAPI routes for the Ledger: warehouses, items, transfers and reports."""

from fastapi import APIRouter, Query, Response

from ledger.activity.log import recent_activity
from ledger.api.schemas import (
    ActivityResponse,
    CreateItemRequest,
    CreateWarehouseRequest,
    DashboardResponse,
    ItemResponse,
    TransferRequestBody,
    TransferResponse,
    UpdateItemRequest,
    UpdateWarehouseRequest,
    WarehouseResponse,
)
from ledger.item import catalog
from ledger.reporting.dashboard import summarize
from ledger.transfer.transfer import TransferRequest, transfer
from ledger.warehouse import registry


def _warehouses(views) -> list[WarehouseResponse]:
    return [WarehouseResponse.model_validate(view) for view in views]


def _items(views) -> list[ItemResponse]:
    return [ItemResponse.model_validate(view) for view in views]


# ---------------------------------------------------------------------------
# Warehouse Router
# ---------------------------------------------------------------------------
warehouse_router = APIRouter(prefix="/warehouses", tags=["warehouses"])


@warehouse_router.get("", response_model=list[WarehouseResponse])
async def list_warehouses() -> list[WarehouseResponse]:
    return _warehouses(registry.list_warehouses())


@warehouse_router.get("/search", response_model=list[WarehouseResponse])
async def search_warehouses(name: str | None = None) -> list[WarehouseResponse]:
    return _warehouses(registry.search_warehouses(name))


@warehouse_router.get("/{warehouse_id}", response_model=WarehouseResponse)
async def get_warehouse(warehouse_id: str) -> WarehouseResponse:
    return WarehouseResponse.model_validate(registry.get_warehouse(warehouse_id))


@warehouse_router.post("", status_code=201, response_model=WarehouseResponse)
async def create_warehouse(body: CreateWarehouseRequest) -> WarehouseResponse:
    view = registry.create_warehouse(name=body.name, location=body.location, max_capacity=body.max_capacity)
    return WarehouseResponse.model_validate(view)


@warehouse_router.put("/{warehouse_id}", response_model=WarehouseResponse)
async def update_warehouse(warehouse_id: str, body: UpdateWarehouseRequest) -> WarehouseResponse:
    view = registry.update_warehouse(
        warehouse_id,
        name=body.name,
        location=body.location,
        max_capacity=body.max_capacity,
    )
    return WarehouseResponse.model_validate(view)


@warehouse_router.delete("/{warehouse_id}", status_code=204)
async def delete_warehouse(warehouse_id: str) -> Response:
    registry.delete_warehouse(warehouse_id)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Item Router
# ---------------------------------------------------------------------------
# Fixed paths are declared before "/{item_id}" so they are not captured by it
item_router = APIRouter(prefix="/items", tags=["items"])


@item_router.get("", response_model=list[ItemResponse])
async def list_items() -> list[ItemResponse]:
    return _items(catalog.list_items())


@item_router.get("/search", response_model=list[ItemResponse])
async def search_items(
    search_term: str | None = Query(default=None, alias="searchTerm"),
    warehouse_id: str | None = Query(default=None, alias="warehouseId"),
) -> list[ItemResponse]:
    return _items(catalog.search_items(search_term, warehouse_id))


@item_router.get("/categories", response_model=list[str])
async def list_categories() -> list[str]:
    return catalog.list_categories()


@item_router.get("/warehouse/{warehouse_id}", response_model=list[ItemResponse])
async def list_items_for_warehouse(warehouse_id: str) -> list[ItemResponse]:
    return _items(catalog.list_for_warehouse(warehouse_id))


@item_router.post("/transfer", response_model=TransferResponse)
async def transfer_item(body: TransferRequestBody) -> TransferResponse:
    result = transfer(
        TransferRequest(
            item_id=body.item_id,
            source_warehouse_id=body.source_warehouse_id,
            destination_warehouse_id=body.destination_warehouse_id,
            quantity=body.quantity,
        )
    )
    return TransferResponse.model_validate(result)


@item_router.get("/{item_id}", response_model=ItemResponse)
async def get_item(item_id: str) -> ItemResponse:
    return ItemResponse.model_validate(catalog.get_item(item_id))


@item_router.post("", status_code=201, response_model=ItemResponse)
async def create_item(body: CreateItemRequest) -> ItemResponse:
    view = catalog.create_item(
        sku=body.sku,
        name=body.name,
        warehouse_id=body.warehouse_id,
        quantity=body.quantity,
        description=body.description,
        category=body.category,
        storage_location=body.storage_location,
    )
    return ItemResponse.model_validate(view)


@item_router.put("/{item_id}", response_model=ItemResponse)
async def update_item(item_id: str, body: UpdateItemRequest) -> ItemResponse:
    view = catalog.update_item(item_id, **body.model_dump(exclude_none=True))
    return ItemResponse.model_validate(view)


@item_router.delete("/{item_id}", status_code=204)
async def delete_item(item_id: str) -> Response:
    catalog.delete_item(item_id)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Reporting Routers
# ---------------------------------------------------------------------------
dashboard_router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@dashboard_router.get("", response_model=DashboardResponse)
async def dashboard(threshold: float | None = None) -> DashboardResponse:
    return DashboardResponse.model_validate(summarize(threshold=threshold))


activity_router = APIRouter(prefix="/activity", tags=["activity"])


@activity_router.get("", response_model=list[ActivityResponse])
async def activity(limit: int | None = Query(default=None, ge=1)) -> list[ActivityResponse]:
    return [ActivityResponse.model_validate(entry) for entry in recent_activity(limit)]
