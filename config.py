"""Configuration management for shortlink."""

from typing import Literal, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Store settings
    store_backend: Literal["memory", "redis", "postgres"] = Field(
        default="memory",
        description="Link store backend: memory, redis or postgres"
    )

    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL (STORE_BACKEND=redis)"
    )

    database_url: Optional[str] = Field(
        default=None,
        description="PostgreSQL connection URL (STORE_BACKEND=postgres)"
    )

    database_create_tables: bool = Field(
        default=False,
        description="Create the links table on first use"
    )

    database_pool_max_size: int = Field(
        default=10,
        ge=1,
        description="Maximum PostgreSQL pool size"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
