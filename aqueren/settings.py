"""
Central application configuration using pydantic-settings.

This module provides typed access to environment-based configuration for:
- the game server (bind address, seed, game id, logging)
- the console client (server URL, timeouts)

Database configuration lives in `aqueren.data.config.DatabaseSettings`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """
    Configuration for the game server.

    Environment variables (prefix: AQUEREN_):
        AQUEREN_HOST      - Bind host (default: 127.0.0.1)
        AQUEREN_PORT      - Bind port (default: 3001)
        AQUEREN_SEED      - Seed for the deal and draws (default: random)
        AQUEREN_GAME_ID   - Identifier of the game this server runs (default: default)
        AQUEREN_LOG_LEVEL - Logging level (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="AQUEREN_",
    )

    host: str = Field(default="127.0.0.1", description="Host the HTTP server binds to.")
    port: int = Field(default=3001, ge=1, le=65535, description="Port the HTTP server binds to.")
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the initial deal and tile draws; None draws from OS entropy.",
    )
    game_id: str = Field(
        default="default",
        min_length=1,
        max_length=128,
        description="Game identifier, used to resume a persisted game.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ClientSettings(BaseSettings):
    """
    Configuration for the console client.

    Environment variables (prefix: AQUEREN_):
        AQUEREN_SERVER_URL      - Base URL of the game server
        AQUEREN_TIMEOUT_SECONDS - HTTP request timeout in seconds (default: 5)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="AQUEREN_",
    )

    server_url: str = Field(default="http://localhost:3001", description="Base URL of the game server.")
    timeout_seconds: float = Field(default=5.0, gt=0, description="HTTP request timeout in seconds.")


@lru_cache
def get_server_settings() -> ServerSettings:
    """Return cached server settings instance."""
    return ServerSettings()


@lru_cache
def get_client_settings() -> ClientSettings:
    """Return cached client settings instance."""
    return ClientSettings()
