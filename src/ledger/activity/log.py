"""Activity log — append-only record of successful ledger mutations.

Entries are written after a mutation has committed. A failure to write an
entry is logged and otherwise ignored: the log never decides whether a
mutation succeeds.
"""

import uuid
from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from ledger.domain import ledger
from ledger.settings import settings

logger = structlog.get_logger(__name__)


class ActivityType(Enum):
    WAREHOUSE_CREATED = "WAREHOUSE_CREATED"
    WAREHOUSE_UPDATED = "WAREHOUSE_UPDATED"
    WAREHOUSE_DELETED = "WAREHOUSE_DELETED"
    CREATED = "CREATED"
    STOCK_ADDED = "STOCK_ADDED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
    TRANSFERRED = "TRANSFERRED"


@ledger.projection
class ActivityEntry:
    entry_id = Identifier(identifier=True, required=True)
    activity_type = String(required=True, max_length=30)
    description = String(required=True, max_length=500)
    item_name = String(max_length=255)
    sku = String(max_length=50)
    warehouse_name = String(max_length=255)
    quantity = Integer()
    occurred_at = DateTime(required=True)


def record_activity(
    activity_type,
    description,
    item_name=None,
    sku=None,
    warehouse_name=None,
    quantity=None,
):
    """Append an entry. Returns the entry, or ``None`` if it could not be written."""
    try:
        entry = ActivityEntry(
            entry_id=str(uuid.uuid4()),
            activity_type=ActivityType(activity_type).value,
            description=description,
            item_name=item_name,
            sku=sku,
            warehouse_name=warehouse_name,
            quantity=quantity,
            occurred_at=datetime.now(UTC),
        )
        current_domain.repository_for(ActivityEntry).add(entry)
    except Exception as exc:
        logger.warning(
            "Failed to record activity",
            activity_type=str(activity_type),
            description=description,
            error=str(exc),
        )
        return None
    return entry


def recent_activity(limit=None):
    """Most recent entries first."""
    limit = limit or settings.activity_limit
    repo = current_domain.repository_for(ActivityEntry)
    return repo._dao.query.order_by("-occurred_at").limit(limit).all().items
