"""Settings — environment overrides and URL normalization."""

from app.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3001
    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.cors_origins == ["*"]


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


def test_postgres_url_rewritten_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/tasks")
    assert Settings(_env_file=None).database_url == (
        "postgresql+asyncpg://u:p@db:5432/tasks"
    )
