"""Warehouse Ledger FastAPI application.

Web server that processes ledger commands synchronously via HTTP. Each
request runs inside the ledger's domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay:
#   - "test"       → in-memory providers
#   - "production" → PostgreSQL via DATABASE_URL
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ledger.domain import ledger
from ledger.settings import settings
from ledger.utils.logging import configure_logging

configure_logging()
ledger.init()


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Warehouse Ledger API",
    description="Warehouses, inventory items and stock transfers",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the ledger domain context for each request."""
    with ledger.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers and error handlers
# ---------------------------------------------------------------------------
from ledger.api import activity_router, dashboard_router, item_router, warehouse_router  # noqa: E402
from ledger.api.errors import register_ledger_exception_handlers  # noqa: E402

app.include_router(warehouse_router)
app.include_router(item_router)
app.include_router(dashboard_router)
app.include_router(activity_router)
register_ledger_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": {"name": ledger.name}})
