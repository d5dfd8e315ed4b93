"""Settings and configuration management for the DCP container model."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Resource framework identity
    api_group: str = Field(
        default="usvc-dev.developer.microsoft.com",
        description="API group of the orchestrator's custom resources",
    )

    api_version: str = Field(
        default="v1",
        description="API version of the orchestrator's custom resources",
    )

    container_kind: str = Field(
        default="Container",
        description="Kind string stamped on Container resources",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: str = Field(
        default="json",
        description="Log format (json or text)",
    )

    @property
    def group_version(self) -> str:
        """Combined apiVersion string, e.g. usvc-dev.developer.microsoft.com/v1."""
        return f"{self.api_group}/{self.api_version}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
