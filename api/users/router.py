"""
User API endpoints.
"""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Query

from core import placeholder

from . import service

router = APIRouter()


@router.get("/users")
async def get_users(
    count: bool | None = Query(default=None),
    client: httpx.AsyncClient = Depends(placeholder.get_http_client),
) -> dict:
    return await service.users_payload(client, include_count=count is True)
