"""Root conftest — shared async DB and FastAPI client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys enforced
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency; cascades and the membership
      uniqueness constraint behave as on PostgreSQL once foreign keys are on
    - Environment set before the app is imported: Settings reads it at import time
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from jukebox.db.base import Base  # noqa: E402
import jukebox.models  # noqa: E402,F401
from jukebox.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, enable_sqlite_foreign_keys, get_db,
)
import jukebox.infrastructure.database as db_module  # noqa: E402
from jukebox.main import app  # noqa: E402
from jukebox.models.playlist import Playlist  # noqa: E402
from jukebox.models.track import Track  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def tracks(test_db):
    """Three tracks inserted out of name order; ids are 1, 2, 3."""
    rows = [
        Track(name="Imagine", duration_ms=183_000),
        Track(name="Billie Jean", duration_ms=294_000),
        Track(name="Creep", duration_ms=238_000),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows


@pytest.fixture
async def playlist(test_db):
    row = Playlist(name="Chill Vibes", description="Relaxing tracks")
    test_db.add(row)
    await test_db.commit()
    await test_db.refresh(row)
    return row
