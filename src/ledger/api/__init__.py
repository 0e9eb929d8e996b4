from ledger.api.routes import activity_router, dashboard_router, item_router, warehouse_router

__all__ = ["activity_router", "dashboard_router", "item_router", "warehouse_router"]
