"""
Startup diagnostics persistence (raw SQL).
"""

from __future__ import annotations

from core import db


def _quote_ident(name: str) -> str:
    # Identifiers cannot be bound as parameters; quote them instead.
    return '"' + name.replace('"', '""') + '"'


async def ensure_schema(schema: str) -> None:
    """
    Create the schema and entity tables if they do not exist yet.
    """
    ident = _quote_ident(schema)
    await db.execute(f"CREATE SCHEMA IF NOT EXISTS {ident}")
    await db.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {ident}.todos (
            id integer PRIMARY KEY,
            user_id integer NOT NULL,
            title text NOT NULL,
            completed boolean NOT NULL DEFAULT false
        )
        """
    )
    await db.execute(
        f"""
        CREATE TABLE IF NOT EXISTS {ident}.users (
            id integer PRIMARY KEY,
            name text,
            username text,
            email text
        )
        """
    )


async def list_tables(schema: str) -> list[str]:
    rows = await db.fetch_column(
        """
        SELECT table_name
        FROM information_schema.tables
        WHERE table_schema = $1
        ORDER BY table_name
        """,
        schema,
    )
    return [str(name) for name in rows]
