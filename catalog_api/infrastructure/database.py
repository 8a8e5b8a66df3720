"""Database engine and unit-of-work sessions.

The product table lives in whatever database CATALOG_DATABASE_URL points
at: SQLite through aiosqlite by default, PostgreSQL through asyncpg in
deployments.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from catalog_api.infrastructure.config import settings

Base = declarative_base()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for a database URL.

    An in-memory SQLite database exists only as long as its connection,
    so it gets a single shared connection instead of a pool.

    Args:
        url: SQLAlchemy async database URL.
        echo: Log every statement.

    Returns:
        Async engine.
    """
    if not url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, pool_pre_ping=True)

    if ":memory:" in url:
        sqlite_engine = create_async_engine(url, echo=echo, poolclass=StaticPool)
    else:
        sqlite_engine = create_async_engine(url, echo=echo)
    event.listen(sqlite_engine.sync_engine, "connect", _register_sqlite_functions)
    return sqlite_engine


def _casefold(value: str | None) -> str | None:
    return None if value is None else value.casefold()


def _register_sqlite_functions(dbapi_connection: Any, connection_record: Any) -> None:
    """Replace SQLite's ASCII-only lower() with full Unicode case folding.

    Name search compiles to lower(name) LIKE lower(:text), so this keeps
    it matching the in-memory store for non-ASCII names.
    """
    dbapi_connection.create_function("lower", 1, _casefold, deterministic=True)


engine = build_engine(settings.database_url, echo=settings.debug)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def create_tables(target: AsyncEngine | None = None) -> None:
    """Create the products table if it doesn't exist.

    Args:
        target: Engine to create tables on. Defaults to the app engine.
    """
    # Register the table on Base.metadata.
    from catalog_api.catalog import models  # noqa: F401

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Open a database session for one unit of work.

    Commits when the caller finishes normally, rolls back and re-raises
    otherwise.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
