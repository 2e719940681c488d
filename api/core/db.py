"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Routers receive the pool through
the `pool` dependency and pass it explicitly into services.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import config

# Anything that can run a query: the pool itself or an acquired connection.
Executor = Union[asyncpg.Pool, asyncpg.Connection]

_pool: asyncpg.Pool | None = None


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=config.db_pool_min_size(),
        max_size=config.db_pool_max_size(),
        command_timeout=config.db_command_timeout_s(),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


@asynccontextmanager
async def transaction(executor: asyncpg.Pool) -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire a connection from `executor` and run the block in one transaction.
    """
    async with executor.acquire() as conn:  # type: asyncpg.Connection
        async with conn.transaction():
            yield conn


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any, conn: Executor | None = None) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    executor = conn if conn is not None else pool()
    row = await executor.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any, conn: Executor | None = None) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    executor = conn if conn is not None else pool()
    rows = await executor.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any, conn: Executor | None = None) -> str:
    """
    Run a statement (INSERT/UPDATE/DELETE/DDL) and return its status tag
    (e.g. "DELETE 1").
    """
    executor = conn if conn is not None else pool()
    return await executor.execute(sql, *args)
