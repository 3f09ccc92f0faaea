"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port to listen on"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL for generating short URLs"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/0)"
    )

    trust_forwarded_headers: bool = Field(
        default=False,
        description="Build short URLs from X-Forwarded-Proto/Host when a proxy sends them"
    )

    atomic_keys: bool = Field(
        default=True,
        description="Generate and store keys in one critical section. "
                    "False keeps the two-step behaviour where concurrent requests may collide."
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
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
