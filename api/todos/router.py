"""
Todo API endpoints.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends

from core import placeholder

from . import service

router = APIRouter()


@router.get("/todos")
async def get_todos(
    client: httpx.AsyncClient = Depends(placeholder.get_http_client),
) -> list[dict]:
    todos = await service.list_todos(client)
    return [todo.model_dump(by_alias=True) for todo in todos]
