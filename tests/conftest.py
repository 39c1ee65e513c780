"""Shared fixtures for API tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import httpx
import pytest
from fastapi.testclient import TestClient

from core import placeholder
from main import app

Handler = Callable[[httpx.Request], httpx.Response]

REQUIRED_ENV = {
    "DB_HOST": "localhost",
    "DB_PORT": "5432",
    "DB_NAME": "app",
    "DB_USER": "app_user",
    "DB_PASSWORD": "s3cret",
    "DB_SCHEMA": "boilerplate",
}


@pytest.fixture
def required_env() -> dict[str, str]:
    return dict(REQUIRED_ENV)


@pytest.fixture
def todo_records() -> list[dict]:
    return [
        {"id": 1, "userId": 1, "title": "delectus aut autem", "completed": False},
        {"id": 2, "userId": 1, "title": "quis ut nam facilis", "completed": True},
        {"id": 3, "userId": 2, "title": "fugiat veniam minus", "completed": False},
    ]


@pytest.fixture
def user_records() -> list[dict]:
    return [
        {"id": 1, "name": "Leanne Graham", "username": "Bret", "email": "Sincere@april.biz"},
        {"id": 2, "name": "Ervin Howell", "username": "Antonette", "email": "Shanna@melissa.tv"},
    ]


@pytest.fixture
def api_client() -> Iterator[Callable[[Handler], TestClient]]:
    """
    Build a TestClient whose outbound calls are answered by `handler`.

    The client is not entered as a context manager, so the lifespan (and the
    database) is never started.
    """

    def _build(handler: Handler) -> TestClient:
        async def _client():
            async with httpx.AsyncClient(
                base_url=placeholder.BASE_URL,
                transport=httpx.MockTransport(handler),
            ) as client:
                yield client

        app.dependency_overrides[placeholder.get_http_client] = _client
        return TestClient(app)

    yield _build
    app.dependency_overrides.clear()
