"""Serialization of ledger writes.

Every mutating command runs while holding a set of string keys naming the
records it validates against and writes. Key sets are granted atomically
(all keys or none), so two writers can never each hold part of what the
other needs. Writers with disjoint key sets proceed in parallel.

The keys are held across the whole unit of work, including its commit.
The registry is process-local. Across processes, handlers that add stock
to a warehouse also write the warehouse back (see
``ledger.warehouse.capacity.claim``), so the second of two concurrent
writers fails on its version check and is reported as a ``Conflict``.
"""

import threading
from contextlib import contextmanager

import structlog
from protean.exceptions import (
    ExpectedVersionError,
    InvalidOperationError,
    InvalidStateError,
    ObjectNotFoundError,
    ValidationError,
)
from protean.utils.globals import current_domain

from ledger.exceptions import Conflict, error_kind

logger = structlog.get_logger(__name__)


def item_key(item_id):
    return f"item:{item_id}"


def warehouse_key(warehouse_id):
    return f"warehouse:{warehouse_id}"


def sku_key(sku):
    return f"sku:{sku}"


def warehouse_name_key(name):
    return f"warehouse-name:{(name or '').strip().lower()}"


class LockRegistry:
    """Grants sets of keys to one holder at a time."""

    def __init__(self):
        self._condition = threading.Condition()
        self._held: set[str] = set()

    @contextmanager
    def hold(self, *keys):
        wanted = frozenset(key for key in keys if key)
        with self._condition:
            while wanted & self._held:
                self._condition.wait()
            self._held |= wanted
        try:
            yield wanted
        finally:
            with self._condition:
                self._held -= wanted
                self._condition.notify_all()

    def is_held(self, key) -> bool:
        with self._condition:
            return key in self._held


locks = LockRegistry()


_REJECTIONS = (ValidationError, ObjectNotFoundError, InvalidOperationError, InvalidStateError)


def _process(command):
    try:
        return current_domain.process(command, asynchronous=False)
    except ExpectedVersionError as exc:
        logger.info("Command lost a concurrent write", command=type(command).__name__, error=str(exc))
        raise Conflict({"_entity": ["The warehouse was changed by a concurrent request, please retry"]}) from exc
    except _REJECTIONS as exc:
        logger.info(
            "Command rejected",
            command=type(command).__name__,
            error=error_kind(exc),
            messages=getattr(exc, "messages", None),
        )
        raise


def dispatch(command, *keys):
    """Process ``command`` synchronously while holding ``keys``."""
    with locks.hold(*keys):
        return _process(command)


def dispatch_stable(command, resolve_keys):
    """Process ``command`` under keys that depend on current record state.

    ``resolve_keys`` is called before locking and again once the keys are
    held. If a concurrent writer changed the answer in between (an item
    moved to another warehouse, say), the keys are released and resolved
    again.
    """
    while True:
        keys = frozenset(resolve_keys())
        with locks.hold(*keys):
            if frozenset(resolve_keys()) == keys:
                return _process(command)
        logger.debug("Lock keys changed while waiting, retrying", keys=sorted(keys))
