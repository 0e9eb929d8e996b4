"""Mapping of ledger errors onto HTTP responses.

Every error response has the same body:
``{"error", "message", "errors", "path", "timestamp"}``, where ``errors``
maps field names to lists of messages.
"""

from datetime import UTC, datetime

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError, InvalidStateError, ObjectNotFoundError, ValidationError

from ledger.api.schemas import ErrorResponse
from ledger.exceptions import error_kind, first_message

logger = structlog.get_logger(__name__)

STATUS_CODES = {
    ValidationError: 400,
    ObjectNotFoundError: 404,
    InvalidOperationError: 409,
    InvalidStateError: 409,
}


def _normalize(messages) -> dict[str, list[str]]:
    if not isinstance(messages, dict):
        return {"_entity": [str(messages)]} if messages else {}
    normalized = {}
    for field, value in messages.items():
        if isinstance(value, (list, tuple)):
            normalized[str(field)] = [str(v) for v in value]
        else:
            normalized[str(field)] = [str(value)]
    return normalized


def error_response(request: Request, status_code: int, kind: str, messages) -> JSONResponse:
    errors = _normalize(messages)
    body = ErrorResponse(
        error=kind,
        message=first_message(errors) or kind,
        errors=errors,
        path=request.url.path,
        timestamp=datetime.now(UTC),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", by_alias=True))


def _status_for(exc: Exception) -> int:
    for exc_cls in type(exc).__mro__:
        if exc_cls in STATUS_CODES:
            return STATUS_CODES[exc_cls]
    return 500


async def handle_ledger_error(request: Request, exc: Exception) -> JSONResponse:
    return error_response(request, _status_for(exc), error_kind(exc), getattr(exc, "messages", None) or str(exc))


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = location[-1] if location else "_entity"
        errors.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return error_response(request, 400, "ValidationError", errors)


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", path=request.url.path, error=str(exc))
    return error_response(request, 500, "InternalError", {"_entity": ["An unexpected error occurred"]})


def register_ledger_exception_handlers(app: FastAPI) -> None:
    for exc_cls in STATUS_CODES:
        app.add_exception_handler(exc_cls, handle_ledger_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(Exception, handle_unexpected)
