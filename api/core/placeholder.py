"""
JSONPlaceholder HTTP client helpers.

Used endpoints:
- GET /todos  -> [{"id", "userId", "title", "completed"}, ...]
- GET /users  -> [{"id", "name", "username", "email", ...}, ...]
"""

from __future__ import annotations

from typing import Any, AsyncIterator

import httpx

BASE_URL = "https://jsonplaceholder.typicode.com"


# Upstream failures are explicit and separable from other runtime errors.
class PlaceholderError(RuntimeError):
    pass


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """
    FastAPI dependency: one client per request, closed once the response is sent.
    """
    async with httpx.AsyncClient(base_url=BASE_URL) as client:
        yield client


async def fetch_list(client: httpx.AsyncClient, path: str) -> list[Any]:
    """
    GET `path` and return the decoded JSON array.
    """
    try:
        resp = await client.get(path)
    except httpx.HTTPError as exc:
        raise PlaceholderError(f"Request to {path} failed: {exc}") from exc

    if not resp.is_success:
        # Avoid dumping huge bodies; include a small snippet.
        body = resp.text[:300]
        raise PlaceholderError(f"Request to {path} failed with status {resp.status_code}: {body}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise PlaceholderError(f"Response from {path} is not valid JSON.") from exc

    if not isinstance(data, list):
        raise PlaceholderError(f"Response from {path} is not a JSON array.")
    return data
