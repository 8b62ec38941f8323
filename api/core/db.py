"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Repositories never touch the pool
directly; they receive a `Database` executor at construction.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

asyncpg exceptions never leave this module: integrity violations become
`ConstraintError`, everything else becomes `DataAccessError`.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import config
from .errors import ConstraintError, DataAccessError

_pool: asyncpg.Pool | None = None

_CONSTRAINT_KINDS: tuple[tuple[type[Exception], str], ...] = (
    (asyncpg.UniqueViolationError, "unique"),
    (asyncpg.ForeignKeyViolationError, "foreign_key"),
    (asyncpg.NotNullViolationError, "not_null"),
    (asyncpg.CheckViolationError, "check"),
)


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = config.env_str("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=config.env_int("DB_POOL_MIN_SIZE", 1),
        max_size=config.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=config.env_int("DB_COMMAND_TIMEOUT", 30),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def is_initialized() -> bool:
    return _pool is not None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def affected_rows(status: str | None) -> int:
    """
    Parse the row count out of a command tag such as "DELETE 1" or "INSERT 0 3".
    """
    if not status:
        return 0
    last = status.rsplit(" ", 1)[-1]
    return int(last) if last.isdigit() else 0


def constraint_kind(exc: Exception) -> str:
    for exc_type, kind in _CONSTRAINT_KINDS:
        if isinstance(exc, exc_type):
            return kind
    return "integrity"


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except asyncpg.IntegrityConstraintViolationError as exc:
        raise ConstraintError(
            str(exc),
            kind=constraint_kind(exc),
            constraint=getattr(exc, "constraint_name", None),
        ) from exc
    except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError) as exc:
        raise DataAccessError(f"{type(exc).__name__}: {exc}") from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    """
    Thin executor over an asyncpg pool (or a connection inside a transaction).
    """

    def __init__(self, executor: Any, *, in_transaction: bool = False) -> None:
        self._executor = executor
        self._in_transaction = in_transaction

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        with _translate_errors():
            row = await self._executor.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        with _translate_errors():
            rows = await self._executor.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def fetch_val(self, sql: str, *args: Any) -> Any:
        with _translate_errors():
            return await self._executor.fetchval(sql, *args)

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns affected rows.
        """
        with _translate_errors():
            status = await self._executor.execute(sql, *args)
        return affected_rows(status)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Database]:
        """
        Run a block on one pooled connection inside BEGIN/COMMIT. Yields a
        `Database` bound to that connection; it cannot open another transaction.
        """
        if self._in_transaction:
            raise RuntimeError("transaction already open on this connection")

        with _translate_errors():
            async with self._executor.acquire() as conn:
                async with conn.transaction():
                    yield Database(conn, in_transaction=True)


def database() -> Database:
    return Database(pool())
