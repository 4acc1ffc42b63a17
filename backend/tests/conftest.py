"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh file-based SQLite database under tmp_path
    - The module-level db_manager points at that database for the duration of the test

Design Decisions:
    - File database over :memory:: same engine/pool behavior as production
    - db_manager swapped instead of overriding get_db: storage errors still pass
      through DatabaseSessionManager.session() and get mapped to DatabaseError
"""

import os

import pytest

# Never touch a developer's app.db
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

from app.infrastructure.database import DatabaseSessionManager  # noqa: E402
import app.infrastructure.database as db_module  # noqa: E402


@pytest.fixture
async def test_manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}",
    )
    await manager.create_tables()
    original = db_module.db_manager
    db_module.db_manager = manager
    yield manager
    db_module.db_manager = original
    await manager.close()


@pytest.fixture
async def test_db(test_manager):
    async with test_manager.session() as session:
        yield session
