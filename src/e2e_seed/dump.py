"""SQL dump rendering and import for the e2e_users table.

A dump is plain SQL: the table DDL followed by one idempotent INSERT per
user. It can be checked into a test repository, reviewed, and replayed
against a fresh database before a UI test run.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncEngine

from e2e_seed.errors import DumpError

logger = logging.getLogger(__name__)

USERS_TABLE = "e2e_users"

USER_COLUMNS: tuple[str, ...] = (
    "id",
    "first_name",
    "last_name",
    "email",
    "password_hash",
    "created_at",
    "updated_at",
)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def create_table_sql(table: str = USERS_TABLE) -> str:
    """DDL for the users table, safe to run repeatedly."""
    _check_identifier(table)
    return (
        f"CREATE TABLE IF NOT EXISTS {table} (\n"
        "    id TEXT PRIMARY KEY,\n"
        "    first_name TEXT NOT NULL,\n"
        "    last_name TEXT NOT NULL,\n"
        "    email TEXT NOT NULL UNIQUE,\n"
        "    password_hash TEXT NOT NULL,\n"
        "    created_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,\n"
        "    updated_at TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP\n"
        ")"
    )


def _check_identifier(name: str) -> None:
    if not _IDENTIFIER.match(name):
        raise DumpError(f"Invalid table name {name!r}")


def sql_literal(value: object) -> str:
    """Render a Python value as a SQL literal."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, (int, float)):
        return repr(value)
    return "'" + str(value).replace("'", "''") + "'"


def render_sql_dump(users: list[dict[str, object]], table: str = USERS_TABLE) -> str:
    """Render users as a replayable SQL dump.

    Existing rows are left alone (``ON CONFLICT (id) DO NOTHING``) so the dump
    can be loaded on top of a partially seeded database.
    """
    lines = [
        f"-- e2e_seed dump: {len(users)} users",
        create_table_sql(table) + ";",
    ]
    columns = ", ".join(USER_COLUMNS)
    for user in users:
        values = ", ".join(sql_literal(user.get(column)) for column in USER_COLUMNS)
        lines.append(
            f"INSERT INTO {table} ({columns}) VALUES ({values}) ON CONFLICT (id) DO NOTHING;"
        )
    return "\n".join(lines) + "\n"


def split_sql_statements(sql: str) -> list[str]:
    """Split a SQL script into statements.

    Splits on ``;`` outside single-quoted strings and drops ``--`` comments.
    Dollar-quoted bodies are not supported.
    """
    statements: list[str] = []
    current: list[str] = []
    in_string = False
    i = 0
    length = len(sql)

    while i < length:
        char = sql[i]
        if in_string:
            current.append(char)
            if char == "'":
                # '' is an escaped quote and stays inside the string
                if i + 1 < length and sql[i + 1] == "'":
                    current.append("'")
                    i += 1
                else:
                    in_string = False
        elif char == "'":
            in_string = True
            current.append(char)
        elif char == "-" and sql.startswith("--", i):
            newline = sql.find("\n", i)
            i = length if newline == -1 else newline
            continue
        elif char == ";":
            statements.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    statements.append("".join(current))
    return [statement.strip() for statement in statements if statement.strip()]


async def load_dump(engine: AsyncEngine, path: str | Path) -> int:
    """Execute every statement in a dump file inside one transaction.

    Returns:
        Number of statements executed.
    """
    source = Path(path)
    try:
        sql = source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DumpError(f"Dump file not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise DumpError(f"Dump file {source} is not valid UTF-8: {exc}") from exc

    statements = split_sql_statements(sql)
    if not statements:
        raise DumpError(f"Dump file {source} contains no SQL statements")

    async with engine.begin() as conn:
        for statement in statements:
            # Driver-level execution keeps ':' inside literals from being read as bind params
            await conn.exec_driver_sql(statement)

    logger.info("Loaded %d statements from %s", len(statements), source)
    return len(statements)
