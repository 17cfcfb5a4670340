"""Application configuration and settings management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TABLE_DATA_", extra="ignore")

    app_name: str = Field(default="Table Data API", description="Human readable application name.")
    environment: Literal["local", "development", "staging", "production"] = Field(
        default="local",
        description="Deployment environment name.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")
    auto_detect_blocks: bool = Field(
        default=True,
        description="Detect row-spanning block cells when a request does not say whether the table is multidimensional.",
    )
    default_direction: Literal["row", "column"] = Field(
        default="row",
        description="Direction used when a request does not specify one.",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


settings = get_settings()
