"""
User business logic: proxy the JSONPlaceholder user list.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import HTTPException, status
from pydantic import TypeAdapter, ValidationError

from core import placeholder

from . import schemas

logger = logging.getLogger(__name__)

_user_list = TypeAdapter(list[schemas.User])


async def list_users(client: httpx.AsyncClient) -> list[schemas.User]:
    try:
        payload = await placeholder.fetch_list(client, "/users")
    except placeholder.PlaceholderError as exc:
        logger.exception("Error fetching users from JSONPlaceholder API")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch users: {exc}",
        ) from exc

    try:
        return _user_list.validate_python(payload)
    except ValidationError as exc:
        logger.exception("Error deserializing users response")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Users response has an unexpected shape.",
        ) from exc


async def users_payload(client: httpx.AsyncClient, *, include_count: bool = False) -> dict:
    users = [user.model_dump() for user in await list_users(client)]
    if include_count:
        return {"count": len(users), "users": users}
    return {"users": users}
