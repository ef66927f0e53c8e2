"""Settings — environment-driven configuration.

Tests cover:
    - postgresql:// URLs rewritten for asyncpg
    - other URLs left untouched
    - CORS origins parsed from JSON env value
"""

from app.config import Settings


def test_postgres_url_converted_for_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@host:5432/db")
    assert Settings().database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings().database_url == "sqlite+aiosqlite:///:memory:"


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://landing.example.com"]')
    assert Settings().cors_origins == ["https://landing.example.com"]
