"""DatabaseSessionManager — table creation, error mapping, health checks."""

import pytest
from sqlalchemy import text

from app.core.errors import DatabaseError
from app.infrastructure.database import DatabaseSessionManager, get_db
import app.infrastructure.database as db_module


async def test_create_tables_is_idempotent(test_manager):
    await test_manager.create_tables()
    async with test_manager.session() as db:
        result = await db.execute(text("SELECT COUNT(*) FROM tasks"))
        assert result.scalar_one() == 0


async def test_session_maps_operational_error(test_manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with test_manager.session() as db:
            await db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.operation == "execute"
    assert "no such table: missing_table" in exc_info.value.message


async def test_health_check(test_manager):
    assert await test_manager.health_check() is True


async def test_health_check_reports_unreachable_database(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nested' / 'x.db'}",
    )
    try:
        assert await manager.health_check() is False
    finally:
        await manager.close()


async def test_get_db_requires_initialization(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        async for _ in get_db():
            pass
