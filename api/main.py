from __future__ import annotations

import logging
import os
import sys
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI

from core import db
from core.logging import configure_logging
from core.settings import ConfigurationError, Settings, load_settings
from database import service as database_service
from todos import router as todos_router
from users import router as users_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings | None = getattr(app.state, "settings", None)
    if settings is None:
        settings = load_settings()
        app.state.settings = settings

    configure_logging(settings.log_level)

    # Open the pool and validate the database before accepting traffic.
    try:
        await db.init_pool(settings)
        await database_service.initialize(settings)
    except Exception:
        logger.exception("An error occurred while initializing the database.")
        await db.close_pool()
        raise

    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Boilerplate API", lifespan=lifespan)

app.include_router(todos_router.router, tags=["todos"])
app.include_router(users_router.router, tags=["users"])


@app.get("/health")
def health() -> dict:
    return {
        "status": "healthy",
        "database": "connected",
        "application": "running",
        "timestamp": datetime.now(timezone.utc),
    }


def run() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.state.settings = settings
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
        log_config=None,
    )


if __name__ == "__main__":
    run()
