"""Async Session Factory — provides async DB sessions outside FastAPI.

Invariants:
    - Uses the same engine configuration as DatabaseSessionManager
    - Meant for scripts (seed) and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: the seed command needs an engine
      it can dispose of when it is done, without the request-scoped manager
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine,
)

from jukebox.infrastructure.database import enable_sqlite_foreign_keys


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and an async session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    enable_sqlite_foreign_keys(engine)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    return engine, factory
