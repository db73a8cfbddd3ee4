"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (the one holding pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Graphwalk"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Maze markers
    floor_char: str = "."
    start_char: str = "S"
    end_char: str = "E"

    # Relationship input
    connection_separator: str = ","

    # Largest grid (in cells) accepted over HTTP
    max_maze_cells: int = 250_000

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    # Rate limiting
    rate_limit_requests: int = 100  # requests per minute for search endpoints

    @field_validator("floor_char", "start_char", "end_char", "connection_separator")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Markers and separators must be exactly one character."""
        if len(v) != 1:
            raise ValueError("marker must be a single character")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
