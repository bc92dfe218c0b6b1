"""
Database configuration using pydantic-settings.

Handles environment variables and provides type-safe config access.
Persistence is optional: without DATABASE_URL the server keeps its action
log in memory.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.pool import StaticPool

SUPPORTED_SCHEMES = ("sqlite://", "postgresql+psycopg://")


class DatabaseSettings(BaseSettings):
    """
    Database configuration loaded from environment variables.

    Optional env vars:
    - DATABASE_URL: connection string (sqlite:///aqueren.db, postgresql+psycopg://...)
    - DB_ECHO: echo SQL statements
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: Optional[str] = Field(
        default=None,
        description="Connection URL; unset keeps the action log in memory",
    )

    # Connection pool settings (ignored by SQLite)
    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_pool_recycle: int = Field(default=3600, ge=60)

    # Echo SQL queries (debug)
    db_echo: bool = Field(default=False)

    @field_validator("database_url")
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        """Ensure the URL uses a synchronous driver we know how to configure."""
        if v is None or v == "":
            return None
        if not v.startswith(SUPPORTED_SCHEMES):
            raise ValueError(
                f"DATABASE_URL must start with one of {', '.join(SUPPORTED_SCHEMES)}"
            )
        return v

    @property
    def enabled(self) -> bool:
        return self.database_url is not None

    def get_engine_kwargs(self) -> dict:
        """Return SQLAlchemy engine configuration."""
        return engine_kwargs_for(self.database_url or "", echo=self.db_echo,
                                 pool_size=self.db_pool_size, pool_recycle=self.db_pool_recycle)


def engine_kwargs_for(url: str, *, echo: bool = False, pool_size: int = 5, pool_recycle: int = 3600) -> dict:
    """Engine keyword arguments suitable for `url`'s backend."""
    if url.startswith("sqlite://"):
        kwargs: dict = {"echo": echo, "connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every thread sees its own empty database
            kwargs["poolclass"] = StaticPool
        return kwargs
    return {
        "echo": echo,
        "pool_size": pool_size,
        "pool_recycle": pool_recycle,
        "pool_pre_ping": True,  # Verify connections before using
    }


@lru_cache
def get_settings() -> DatabaseSettings:
    """
    Cached settings singleton.

    Returns the same DatabaseSettings instance across the application.
    """
    return DatabaseSettings()
