"""
Servicios API — Storage Gateway
================================

What:  Async SQLAlchemy engine (connection pool) wrapped in a small gateway
       exposing `execute(statement, params)` and a `transaction()` scope.
How:   Every `execute` borrows a pooled connection, runs the statement inside
       its own short transaction and returns a `QueryResult`. Driver errors
       are translated into StorageConnectionError / QueryError /
       ConstraintViolation; nothing is retried.
Who:   Constructed once by `create_app()` and stored on `app.state.gateway`;
       services receive it through FastAPI dependencies (see dependencies.py).
When:  The engine is created with the app; connections are opened lazily on
       the first statement and closed by `dispose()` at shutdown.

Connection Pooling Strategy:
    pool_size=10:      Persistent connections (matches the MySQL pool limit)
    max_overflow=0:    Requests wait for a free connection instead of opening more
    pool_pre_ping:     Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour (MySQL wait_timeout)

    SQLite (used by the test-suite) keeps SQLAlchemy's default pool and gets
    `PRAGMA foreign_keys=ON` on every new connection so the users → roles
    foreign key is enforced like it is on MySQL.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union

from sqlalchemy import event, text
from sqlalchemy.engine import URL
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql import Executable

from app.config import Settings
from app.exceptions import (
    ConstraintViolation,
    QueryError,
    StorageConnectionError,
    StorageError,
)

logger = logging.getLogger(__name__)

Statement = Union[str, Executable]


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy table models.

    Every model registers its table on `Base.metadata`, which the schema
    initializer uses to create missing tables.
    """
    pass


@dataclass
class QueryResult:
    """
    Outcome of a single statement.

    Reads fill `rows` (one dict per row, keyed by column name).
    Writes fill `last_insert_id` (inserts) and `affected_rows`.
    """

    rows: List[Dict[str, Any]] = field(default_factory=list)
    last_insert_id: Optional[int] = None
    affected_rows: int = 0

    def first(self) -> Optional[Dict[str, Any]]:
        """First row, or None when the read matched nothing."""
        return self.rows[0] if self.rows else None


async def _run(
    conn: AsyncConnection,
    statement: Statement,
    params: Optional[Mapping[str, Any]] = None,
) -> QueryResult:
    """Execute one statement on an open connection and shape the result."""
    if isinstance(statement, str):
        statement = text(statement)

    try:
        result = await conn.execute(statement, dict(params or {}))
    except IntegrityError as e:
        raise ConstraintViolation(
            context={"driver_error": str(e.orig), "statement": str(statement)},
        ) from e
    except SQLAlchemyError as e:
        raise QueryError(
            context={"driver_error": str(e), "statement": str(statement)},
        ) from e

    if result.returns_rows:
        return QueryResult(rows=[dict(row._mapping) for row in result])

    last_insert_id = None
    if result.is_insert:
        # Core insert() constructs report the generated key portably
        primary_key = result.inserted_primary_key
        last_insert_id = primary_key[0] if primary_key else None
    elif str(statement).lstrip().upper().startswith("INSERT"):
        last_insert_id = result.lastrowid

    return QueryResult(last_insert_id=last_insert_id, affected_rows=result.rowcount)


class BoundGateway:
    """
    Gateway view bound to a single connection inside an open transaction.

    Yielded by `StorageGateway.transaction()`; offers the same `execute`
    contract so services can run several statements atomically.
    """

    def __init__(self, conn: AsyncConnection):
        self._conn = conn

    async def execute(
        self,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
    ) -> QueryResult:
        return await _run(self._conn, statement, params)


class StorageGateway:
    """
    Owns the connection pool and executes statements against it.

    Contract:
        execute(statement, params) → QueryResult
        transaction()             → async context manager yielding BoundGateway

    Failures:
        StorageConnectionError: the pool could not produce a connection
        QueryError:             the statement failed
        ConstraintViolation:    an integrity constraint rejected the statement
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @asynccontextmanager
    async def _connection(self) -> AsyncIterator[AsyncConnection]:
        try:
            conn = await self.engine.connect()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Could not obtain a database connection: %s", str(e))
            raise StorageConnectionError(context={"driver_error": str(e)}) from e
        try:
            yield conn
        finally:
            await conn.close()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[BoundGateway]:
        """
        Run several statements on one connection, atomically.

        Commits when the block exits normally; rolls back (and re-raises)
        when it raises, including our own ValidationError/NotFoundError.
        """
        async with self._connection() as conn:
            try:
                async with conn.begin():
                    yield BoundGateway(conn)
            except StorageError:
                raise
            except SQLAlchemyError as e:
                # Commit/rollback failures surface here
                raise QueryError(context={"driver_error": str(e)}) from e

    async def execute(
        self,
        statement: Statement,
        params: Optional[Mapping[str, Any]] = None,
    ) -> QueryResult:
        """
        Execute one statement in its own transaction (autocommit semantics).

        Args:
            statement: SQL text with named binds (":name") or a Core construct
            params:    Bind values for SQL text statements

        Returns:
            QueryResult with rows (reads) or insert/affected-row metadata (writes)
        """
        async with self.transaction() as tx:
            return await tx.execute(statement, params)

    async def ping(self) -> bool:
        """Lightweight connectivity probe (SELECT 1) for the health check."""
        result = await self.execute("SELECT 1 AS ok")
        return bool(result.rows)

    async def dispose(self) -> None:
        """
        What:  Closes all connections in the pool.
        When:  Called during application shutdown (lifespan handler).
        """
        await self.engine.dispose()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the async engine described by the settings.

    Pool sizing only applies to server databases; SQLite keeps its default pool.
    """
    url: URL = settings.sqlalchemy_url
    echo = settings.log_level == "DEBUG"

    if url.get_backend_name() == "sqlite":
        engine = create_async_engine(url, echo=echo)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
        echo=echo,
    )


def create_gateway(settings: Settings) -> StorageGateway:
    """Construct the gateway (and its pool) for the given settings."""
    return StorageGateway(create_engine_from_settings(settings))
