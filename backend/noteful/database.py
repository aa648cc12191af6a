"""
Noteful Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine construction, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   The application factory builds one engine and session factory per app and
       stores them on `app.state`; `get_db_session` hands each request its own
       session from that factory.
Who:   Used by route handlers (through the service dependencies) and by tests.
When:  Engine is created with the app; sessions are created per-request.

Architecture Decision:
    The engine is NOT a module-level global. It belongs to the application
    instance, so a test can build an app against its own SQLite file without
    touching shared process state.

Connection Pooling Strategy (server databases):
    pool_size / max_overflow from settings, pool_pre_ping on, and
    pool_recycle=3600 to drop long-lived stale connections.
    SQLite URLs skip the pool options and use the driver's default pool.
"""

from typing import AsyncGenerator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from noteful.config import settings


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Every model registers with this metadata, which `create_tables()` uses
    to bootstrap the schema in development and tests.
    """
    pass


# ── Engine Configuration ──────────────────────────────────────────────────
def build_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create the async engine for the given URL (defaults to settings.database_url).

    Echoes SQL when LOG_LEVEL is DEBUG.
    """
    url = database_url or settings.database_url
    options = {
        "pool_pre_ping": settings.db_pool_pre_ping,
        "echo": settings.log_level == "DEBUG",
    }
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    return create_async_engine(url, **options)


# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: rows returned by a service stay readable after commit
def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the app's session factory
        2. Yields it to the services used by the route handler
        3. On success: commits anything the services left pending
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Services commit their own writes, so a write is visible to the next
    request as soon as the handler returns.

    Raises:
        Database exceptions propagate to the global error handler,
        which returns an opaque 500.
    """
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_tables(engine: AsyncEngine) -> None:
    """
    What:  Creates any missing tables registered on Base.metadata.
    When:  At startup when DB_CREATE_TABLES is set, and in the test suite.
    """
    # Import models so they register with Base.metadata
    from noteful.models import folder, note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine(engine: AsyncEngine) -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
