import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from ledger.api import activity_router, dashboard_router, item_router, warehouse_router
from ledger.api.errors import register_ledger_exception_handlers
from ledger.domain import ledger


@pytest.fixture()
def client():
    app = FastAPI()

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        with ledger.domain_context():
            return await call_next(request)

    app.include_router(warehouse_router)
    app.include_router(item_router)
    app.include_router(dashboard_router)
    app.include_router(activity_router)
    register_ledger_exception_handlers(app)
    return TestClient(app)


@pytest.fixture()
def create_warehouse(client):
    """Helper: POST /warehouses and return the response body."""

    def _create(**overrides):
        body = {"name": "Main Distribution Center", "location": "New York, NY", "maxCapacity": 100}
        body.update(overrides)
        response = client.post("/warehouses", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def create_item(client):
    """Helper: POST /items and return the response body."""

    def _create(warehouse_id, **overrides):
        body = {"sku": "LAPTOP-001", "name": "Dell Latitude 5520", "quantity": 40, "warehouseId": warehouse_id}
        body.update(overrides)
        response = client.post("/items", json=body)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
