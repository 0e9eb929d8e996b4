"""Response error extraction for load test observability.

Parses Ledger API error responses into human-readable messages. Every error
has the shape ``{"error": kind, "message": str, "errors": {field: [msgs]}}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    Gracefully handles unparseable bodies and missing fields.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict) or "error" not in body:
        # Unknown shape, stringify and truncate
        return str(body)[:300]

    errors = body.get("errors") or {}
    if len(errors) > 1:
        detail = " | ".join(f"{field}: {'; '.join(messages)}" for field, messages in errors.items())
        return f"{body['error']}: {detail}"
    return f"{body['error']}: {body.get('message', '')}"
