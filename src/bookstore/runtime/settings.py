"""Environment variables loaded through pydantic-settings.

Only a handful of primitive values live here; everything structured is in
``config.yaml`` (see ``runtime.config``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    base_url: str = Field(default="http://localhost:8000", validation_alias="BASE_URL")
    config_file: str = Field(default="config.yaml", validation_alias="APP_CONFIG_FILE")
