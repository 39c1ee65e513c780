"""
Todo business logic: proxy the JSONPlaceholder todo list.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import HTTPException, status
from pydantic import TypeAdapter, ValidationError

from core import placeholder

from . import schemas

logger = logging.getLogger(__name__)

_todo_list = TypeAdapter(list[schemas.Todo])


async def list_todos(client: httpx.AsyncClient) -> list[schemas.Todo]:
    try:
        payload = await placeholder.fetch_list(client, "/todos")
    except placeholder.PlaceholderError as exc:
        logger.exception("Error fetching todos from JSONPlaceholder API")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to fetch todos: {exc}",
        ) from exc

    try:
        todos = _todo_list.validate_python(payload)
    except ValidationError as exc:
        logger.exception("Error deserializing todos response")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Todos response has an unexpected shape.",
        ) from exc

    logger.info("fetched_todos count=%s", len(todos))
    if logger.isEnabledFor(logging.DEBUG):
        for todo in todos:
            logger.debug("%s", todo.describe())
    return todos
