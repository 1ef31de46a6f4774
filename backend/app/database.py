"""
Sycamore Backend — Database Connection Pool
=============================================

What:  Owned async SQLAlchemy engine + session factory, and the FastAPI
       dependency that hands a session to each request.
Why:   The pool is a resource with a lifecycle. The hosting process opens it
       at startup and closes it at shutdown; handlers never reach for a
       module-level global.
How:   `Database` wraps the engine and session factory. The application
       lifespan creates one instance and stores it on `app.state.database`;
       `get_db_session` pulls it from there for every request.
Who:   Created by app.main.lifespan; consumed by route handlers via Depends().

Lifecycle:
    startup   → Database(settings)           (engine created, no connections yet)
    request   → get_db_session(request)      (session checked out from pool)
    shutdown  → await database.dispose()     (all pooled connections closed)

    Connections are established lazily on first use, so repeated
    "connect" calls are free; the pool handles reuse.
"""

from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models (shared metadata for Alembic)."""
    pass


class Database:
    """
    Explicitly owned connection pool handle.

    Attributes:
        engine:          Async engine managing the connection pool
        session_factory: Produces one AsyncSession per request
    """

    def __init__(self, settings: Settings):
        engine_kwargs = {
            "pool_pre_ping": settings.db_pool_pre_ping,
            "echo": settings.log_level == "DEBUG",
        }
        # SQLite (tests, local runs) uses a pool class without sizing options
        if not settings.database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=settings.db_pool_size,
                max_overflow=settings.db_max_overflow,
                pool_recycle=1800,
            )

        self.engine: AsyncEngine = create_async_engine(settings.database_url, **engine_kwargs)

        # expire_on_commit=False: attributes stay readable after commit
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def ping(self) -> None:
        """Runs SELECT 1; raises whatever the driver raises if the store is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Closes all pooled connections."""
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the pool owned by the running application."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Checks a session out of the application's pool
        2. Yields it to the route handler
        3. On success: commits (no-op for read-only handlers)
        4. On error: rolls back and re-raises for the global handlers
        5. Always: closes the session (returns connection to pool)
    """
    database = get_database(request)
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
