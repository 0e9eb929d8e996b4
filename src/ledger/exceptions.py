"""Error taxonomy for ledger operations.

Every error is an expected, caller-recoverable outcome. Each one carries
``messages``: a mapping of field name to a list of human-readable messages,
so callers can render several inline errors at once.

The classes extend protean's exception hierarchy, so code that already
handles ``ValidationError`` or ``ObjectNotFoundError`` keeps working.
"""

from protean.exceptions import (
    InvalidOperationError,
    InvalidStateError,
    ObjectNotFoundError,
    ValidationError,
)


class LedgerError:
    """Mixin that names the error kind reported to callers and keeps the field map."""

    kind = "LedgerError"

    def __init__(self, messages, **kwargs):
        self.messages = messages
        super().__init__(messages, **kwargs)

    @property
    def message(self) -> str:
        return first_message(self.messages)


class NotFound(LedgerError, ObjectNotFoundError):
    """A referenced warehouse or item does not exist."""

    kind = "NotFound"


class Conflict(LedgerError, InvalidOperationError):
    """Uniqueness violation, or a state precondition such as deleting a non-empty warehouse."""

    kind = "Conflict"


class InvalidArgument(LedgerError, ValidationError):
    """Malformed or out-of-range input: zero transfer quantity, same source and destination."""

    kind = "InvalidArgument"


class InvalidState(LedgerError, InvalidStateError):
    """Operation inconsistent with the current entity state."""

    kind = "InvalidState"


class CapacityExceeded(LedgerError, InvalidOperationError):
    """The operation would push a warehouse above its maximum capacity."""

    kind = "CapacityExceeded"


def first_message(messages) -> str:
    """Return the first human-readable message from an error payload."""
    if isinstance(messages, dict):
        for value in messages.values():
            if isinstance(value, (list, tuple)) and value:
                return str(value[0])
            if value:
                return str(value)
        return ""
    return str(messages or "")


def error_kind(exc: Exception) -> str:
    """Name reported to callers for ``exc``."""
    if isinstance(exc, LedgerError):
        return exc.kind
    if isinstance(exc, ValidationError):
        return "ValidationError"
    if isinstance(exc, ObjectNotFoundError):
        return "NotFound"
    return type(exc).__name__
