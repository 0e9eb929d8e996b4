"""Ledger bounded context — Warehouse Registry, Item Catalog and Transfers.

Tracks warehouses and the inventory items stored in them. Warehouse
occupancy is never stored: it is projected at read time from the items
assigned to each warehouse (see ``ledger.warehouse.capacity``).
"""

import structlog
from protean.domain import Domain

ledger = Domain(name="ledger")

logger = structlog.get_logger(__name__)
