"""
Database initialization and validation run once at startup.

Verifies connectivity by listing the tables of the configured schema and logs
what it finds. In development mode the schema and its tables are created
first if they are missing.
"""

from __future__ import annotations

import logging

from core.settings import Settings

from . import repository

logger = logging.getLogger(__name__)


async def initialize(settings: Settings) -> list[str]:
    schema = settings.db_schema
    try:
        if settings.is_development:
            await repository.ensure_schema(schema)
            logger.info("ensured_schema schema=%s", schema)

        table_names = await repository.list_tables(schema)
    except Exception:
        logger.exception("Error while connecting to database")
        raise

    logger.info("Connected to database successfully!")
    if not table_names:
        # A missing schema and an empty one look the same from information_schema.
        logger.warning("Schema '%s' has no tables (or does not exist).", schema)
        return table_names

    logger.info("Available tables in schema '%s':", schema)
    for table_name in table_names:
        logger.info("- %s", table_name)
    return table_names
