"""Caller identity for the API.

Credentials are resolved upstream; the API only receives the resolved user
id in the ``X-User-Id`` header.
"""

from fastapi import Header, HTTPException

from delivery.utils.logging import add_context


async def current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    if x_user_id is None or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="User is not authenticated.")

    user_id = x_user_id.strip()
    add_context(user_id=user_id)
    return user_id
