"""Application configuration using Pydantic Settings.

Configuration is environment-aware:
- APP_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
APP_ENV = os.getenv("APP_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# Map environments to their respective .env files (relative to PROJECT_ROOT)
ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(APP_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (production might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


class LLMSettings(BaseSettings):
    """Inference provider configuration.

    Two models are addressed: a summarization model and a chat-style
    generative model. Provider-specific requirements are validated in the
    factory, not here.
    """

    provider: str = Field(
        "workers_ai",
        description="Inference provider name (workers_ai or openai)",
    )
    summarize_model: str = Field(
        "@cf/facebook/bart-large-cnn",
        description="Model used by POST /api/summarize",
    )
    generate_model: str = Field(
        "@cf/mistral/mistral-7b-instruct-v0.1",
        description="Chat model used by POST /api/generate",
    )
    api_key: str | None = Field(
        None,
        description="API token for the provider",
    )
    account_id: str | None = Field(
        None,
        description="Cloudflare account id (required for workers_ai)",
    )
    base_url: str | None = Field(
        None,
        description="Custom API endpoint overriding the provider default",
    )
    timeout_seconds: float = Field(
        45.0,
        description="Request timeout in seconds",
    )
    summary_max_length: int = Field(
        150,
        description="Maximum summary length hint passed to the summarization model",
        ge=1,
    )

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
    )


class AppSettings(BaseSettings):
    """Application-wide configuration."""

    debug: bool = Field(
        False,
        description="Enable debug mode with verbose logging",
    )
    user_id: int = Field(
        1,
        description="Owner id stamped on saved records until real identity exists",
    )
    retrieve_limit: int = Field(
        10,
        description="Number of records returned by GET /api/retrieve",
        ge=1,
    )
    rate_limit_enabled: bool = Field(
        True,
        description="Enable per-client rate limiting on inference endpoints",
    )
    rate_limit_requests: int = Field(
        10,
        description="Maximum number of requests allowed per window (per client)",
        ge=1,
    )
    rate_limit_window_seconds: int = Field(
        3600,
        description="Rate limit window size in seconds",
        ge=1,
    )
    client_ip_header: str = Field(
        "CF-Connecting-IP",
        description="Header carrying the original client address behind the edge proxy",
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
    )


class DatabaseSettings(BaseSettings):
    """Relational store configuration (SQLAlchemy async URL)."""

    url: str | None = Field(
        "sqlite+aiosqlite:///./content.db",
        description="SQLAlchemy async database URL",
    )
    echo: bool = Field(
        False,
        description="Echo SQL statements to the log",
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        case_sensitive=False,
    )


class KVSettings(BaseSettings):
    """Key-value store configuration used for rate limit counters."""

    redis_url: str | None = Field(
        "redis://localhost:6379/0",
        description="Redis connection URL",
    )
    key_prefix: str = Field(
        "rate_limit",
        description="Namespace prefix for rate limit keys",
    )

    model_config = SettingsConfigDict(
        env_prefix="KV_",
        case_sensitive=False,
    )


class LogSettings(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="json or plain")
    output: str = Field("stdout", description="stdout or file")
    file_path: str | None = Field(None, description="Log file path when output=file")
    max_bytes: int = Field(10 * 1024 * 1024, description="Rotate after this many bytes (0 disables)")
    backup_count: int = Field(5, description="Number of rotated files to keep")
    request_id_header: str = Field("X-Request-ID", description="Correlation id header")

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Main application settings container.

    Automatically loads from the appropriate .env.{APP_ENV} file.
    Nested settings are created via default_factory so env loading works.
    """

    app_env: str = APP_ENV
    llm: LLMSettings = Field(default_factory=LLMSettings)
    app: AppSettings = Field(default_factory=AppSettings)
    db: DatabaseSettings = Field(default_factory=DatabaseSettings)
    kv: KVSettings = Field(default_factory=KVSettings)
    log: LogSettings = Field(default_factory=LogSettings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


settings = Settings()
