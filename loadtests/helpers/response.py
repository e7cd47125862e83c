"""Readable failure messages for Delivery API responses.

The API answers errors in three shapes:

- FastAPI request validation (422): {"detail": [{"loc": [...], "msg": "..."}]}
- Missing caller identity (401): {"detail": "User is not authenticated."}
- Domain errors (400/403/404/409/500): {"error": "msg"} or
  {"error": {"field": ["msg", ...]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response

_MAX_LENGTH = 300


def _field_messages(errors: dict) -> str:
    parts = []
    for name, messages in errors.items():
        if isinstance(messages, list):
            messages = "; ".join(str(message) for message in messages)
        parts.append(f"{name}: {messages}")
    return " | ".join(parts)


def _validation_messages(details: list) -> str:
    # Drop the leading "query"/"body"/"path" segment of each location
    return " | ".join(
        f"{'.'.join(str(p) for p in err.get('loc', [])[1:])}: {err.get('msg', err)}" for err in details
    )


def extract_error_detail(response: Response) -> str:
    """Compact, one-line description of an error response for Locust logs."""
    try:
        body = response.json()
    except ValueError:
        return (response.text or "(empty response body)")[:_MAX_LENGTH]

    if not isinstance(body, dict):
        return str(body)[:_MAX_LENGTH]

    if "error" in body:
        error = body["error"]
        return _field_messages(error) if isinstance(error, dict) else str(error)

    detail = body.get("detail")
    if isinstance(detail, list):
        return _validation_messages(detail)
    if detail is not None:
        return str(detail)

    return str(body)[:_MAX_LENGTH]
