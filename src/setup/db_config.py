from pydantic import ConfigDict
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

from src.tasks_api.infrastructure.database.orm import Database

_database: Database | None = None


class DatabaseSettings(BaseSettings):
    """Connection parameters for the task store."""
    DB_DRIVER: str = "postgresql+asyncpg"
    DB_HOST: str = "localhost"
    DB_PORT: int | None = None
    DB_USER: str | None = None
    DB_PASSWORD: str | None = None
    DB_NAME: str = "tasks"
    # Full URL; takes precedence over the individual DB_* fields when set.
    DATABASE_URL: str | None = None
    DB_ECHO: bool = False
    DB_POOL_RECYCLE_SECONDS: int = 1800

    model_config = ConfigDict(env_file=".env", extra="ignore")

    @property
    def url(self) -> str | URL:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


def get_database_settings() -> DatabaseSettings:
    return DatabaseSettings()


def get_database(settings: DatabaseSettings | None = None) -> Database:
    """Return the process-wide database holder, creating it on first use."""
    global _database
    if _database is None:
        if settings is None:
            settings = get_database_settings()
        _database = Database(
            settings.url,
            echo=settings.DB_ECHO,
            pool_pre_ping=True,
            pool_recycle=settings.DB_POOL_RECYCLE_SECONDS,
        )
    return _database


def reset_database() -> None:
    """Forget the process-wide holder; the caller disposes the engine if needed."""
    global _database
    _database = None
