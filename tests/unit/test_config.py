"""Settings tests: env parsing, validation and database URL construction."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Isolate from a developer .env and DB_* variables."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "DB_DRIVER",
        "DB_HOST",
        "DB_PORT",
        "DB_USER",
        "DB_PASSWORD",
        "DB_NAME",
        "SQLITE_PATH",
        "USER_REPOSITORY",
        "APP_PORT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_use_sqlite() -> None:
    settings = Settings()
    assert settings.db_driver == "sqlite"
    assert settings.app_port == 8080
    assert settings.user_repository == "orm"
    assert settings.database_url == "sqlite+aiosqlite:///./data/app.db"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("APP_PORT", "9000")
    monkeypatch.setenv("SQLITE_PATH", "/tmp/users.db")
    monkeypatch.setenv("USER_REPOSITORY", "SQL")
    settings = Settings()
    assert settings.app_port == 9000
    assert settings.user_repository == "sql"
    assert settings.database_url == "sqlite+aiosqlite:////tmp/users.db"


def test_mysql_url(monkeypatch) -> None:
    monkeypatch.setenv("DB_DRIVER", "mysql")
    monkeypatch.setenv("DB_HOST", "db")
    monkeypatch.setenv("DB_PORT", "3307")
    monkeypatch.setenv("DB_USER", "app")
    monkeypatch.setenv("DB_PASSWORD", "p@ss")
    monkeypatch.setenv("DB_NAME", "users")
    settings = Settings()
    assert settings.database_url == "mysql+aiomysql://app:p%40ss@db:3307/users?charset=utf8mb4"


def test_mysql_requires_db_name(monkeypatch) -> None:
    monkeypatch.setenv("DB_DRIVER", "mysql")
    with pytest.raises(ValidationError, match="DB_NAME"):
        Settings()


def test_unknown_driver_rejected(monkeypatch) -> None:
    monkeypatch.setenv("DB_DRIVER", "postgres")
    with pytest.raises(ValidationError, match="DB_DRIVER"):
        Settings()


def test_unknown_repository_rejected(monkeypatch) -> None:
    monkeypatch.setenv("USER_REPOSITORY", "redis")
    with pytest.raises(ValidationError, match="USER_REPOSITORY"):
        Settings()


def test_origins_split(monkeypatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, ,http://b.test")
    assert Settings().origins == ["http://a.test", "http://b.test"]
