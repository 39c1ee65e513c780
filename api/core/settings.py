"""
Environment-driven settings.

Settings are read once at startup and handed to the components that need them
(DB pool, startup validator). Nothing else should read `os.environ` directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping
from urllib.parse import quote

REQUIRED_ENV_VARS: tuple[str, ...] = (
    "DB_HOST",
    "DB_PORT",
    "DB_NAME",
    "DB_USER",
    "DB_PASSWORD",
    "DB_SCHEMA",
)


class ConfigurationError(RuntimeError):
    def __init__(self, message: str, *, missing: list[str] | None = None) -> None:
        super().__init__(message)
        self.missing = list(missing or [])


@dataclass(frozen=True)
class Settings:
    db_host: str
    db_port: int
    db_name: str
    db_user: str
    db_password: str
    db_schema: str
    environment: str = "production"
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def database_url(self) -> str:
        user = quote(self.db_user, safe="")
        password = quote(self.db_password, safe="")
        host = self.db_host
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        name = quote(self.db_name, safe="")
        return f"postgresql://{user}:{password}@{host}:{self.db_port}/{name}"

    def __repr__(self) -> str:
        # Keep the password out of logs and tracebacks.
        return (
            f"Settings(db_host={self.db_host!r}, db_port={self.db_port!r}, "
            f"db_name={self.db_name!r}, db_user={self.db_user!r}, "
            f"db_schema={self.db_schema!r}, environment={self.environment!r})"
        )


def _parse_port(raw: str) -> int:
    try:
        port = int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"DB_PORT must be an integer, got {raw!r}.") from exc
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"DB_PORT must be between 1 and 65535, got {port}.")
    return port


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build settings from the environment.

    Every missing required variable is reported in a single error, not just
    the first one found.
    """
    env = os.environ if environ is None else environ

    # Blank values count as missing, but values are kept exactly as given.
    values = {name: env.get(name) or "" for name in REQUIRED_ENV_VARS}
    missing = [name for name, value in values.items() if not value.strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Please ensure all required environment variables are set.",
            missing=missing,
        )

    return Settings(
        db_host=values["DB_HOST"],
        db_port=_parse_port(values["DB_PORT"]),
        db_name=values["DB_NAME"],
        db_user=values["DB_USER"],
        db_password=values["DB_PASSWORD"],
        db_schema=values["DB_SCHEMA"],
        environment=(env.get("APP_ENV") or "").strip().lower() or "production",
        log_level=(env.get("LOG_LEVEL") or "").strip().upper() or "INFO",
    )
