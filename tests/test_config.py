"""Tests for Settings parsing."""
import pytest

from vaultkeep.app.core.config import Settings


@pytest.mark.parametrize("url,expected", [
    ("postgres://u:p@db/vault", "postgresql+asyncpg://u:p@db/vault"),
    ("postgresql://u:p@db/vault", "postgresql+asyncpg://u:p@db/vault"),
    ("postgresql+asyncpg://u:p@db/vault", "postgresql+asyncpg://u:p@db/vault"),
    ("sqlite:///./local.db", "sqlite+aiosqlite:///./local.db"),
    ("  sqlite+aiosqlite:///./local.db  ", "sqlite+aiosqlite:///./local.db"),
])
def test_database_url_is_normalized(url, expected):
    assert Settings(DATABASE_URL=url).DATABASE_URL == expected


def test_sqlite_detection():
    assert Settings(DATABASE_URL="sqlite:///./x.db").is_sqlite
    assert not Settings(DATABASE_URL="postgres://u:p@db/vault").is_sqlite


def test_cors_origins_are_split_and_trimmed():
    settings = Settings(CORS_ORIGINS=" http://a.test , ,http://b.test ")
    assert settings.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_empty_cors_means_no_origins():
    assert Settings(CORS_ORIGINS="").BACKEND_CORS_ORIGINS == []


def test_log_level_is_upper_cased():
    assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"
