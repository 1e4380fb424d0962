"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The database driver and repository backend are
validated at load time.
"""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_DB_DRIVERS = ("sqlite", "mysql")
SUPPORTED_USER_REPOSITORIES = ("orm", "sql")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    Database connection is described by DB_DRIVER plus either SQLITE_PATH
    (sqlite) or DB_HOST/DB_PORT/DB_USER/DB_PASSWORD/DB_NAME (mysql).
    """

    # App
    app_name: str = "user-service"
    app_version: str = "1.0.0"
    debug: bool = False
    app_host: str = "0.0.0.0"
    app_port: int = 8080

    # Database: "sqlite" (aiosqlite) or "mysql" (aiomysql)
    db_driver: str = "sqlite"
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: SecretStr = SecretStr("")
    db_name: str = ""
    sqlite_path: str = "./data/app.db"
    database_echo: bool = False
    # Pool sizing applies to mysql only (sqlite uses SQLAlchemy's default pool)
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # Persistence implementation behind IUserRepository: "orm" or "sql"
    user_repository: str = "orm"

    # CORS
    allowed_origins: str = "*"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database(self) -> "Settings":
        """Validate driver, repository backend and mysql connection fields."""
        self.db_driver = self.db_driver.strip().lower()
        self.user_repository = self.user_repository.strip().lower()
        if self.db_driver not in SUPPORTED_DB_DRIVERS:
            raise ValueError(
                f"DB_DRIVER must be one of {SUPPORTED_DB_DRIVERS}, got: {self.db_driver!r}"
            )
        if self.user_repository not in SUPPORTED_USER_REPOSITORIES:
            raise ValueError(
                f"USER_REPOSITORY must be one of {SUPPORTED_USER_REPOSITORIES}, "
                f"got: {self.user_repository!r}"
            )
        if self.db_driver == "mysql":
            missing = [
                name
                for name, value in (
                    ("DB_HOST", self.db_host),
                    ("DB_USER", self.db_user),
                    ("DB_NAME", self.db_name),
                )
                if not value
            ]
            if missing:
                raise ValueError(
                    f"{', '.join(missing)} required when DB_DRIVER is 'mysql'. "
                    "Set in environment or .env file."
                )
        elif not self.sqlite_path:
            raise ValueError("SQLITE_PATH is required when DB_DRIVER is 'sqlite'.")
        return self

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL built from the DB_* / SQLITE_PATH settings."""
        if self.db_driver == "mysql":
            password = quote_plus(self.db_password.get_secret_value())
            credentials = f"{quote_plus(self.db_user)}:{password}" if password else quote_plus(self.db_user)
            return (
                f"mysql+aiomysql://{credentials}@{self.db_host}:{self.db_port}/"
                f"{self.db_name}?charset=utf8mb4"
            )
        return f"sqlite+aiosqlite:///{self.sqlite_path}"

    @property
    def origins(self) -> list[str]:
        """ALLOWED_ORIGINS split on commas, blanks dropped."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
