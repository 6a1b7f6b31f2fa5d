"""Configuration management with pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HarsnipSettings(BaseSettings):
    """harsnip application settings loaded from environment variables.

    All settings use the HARSNIP_ prefix for environment variables.
    """

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format: console or json",
    )

    # Preview configuration
    preview_theme: str = Field(
        default="monokai",
        description="Pygments theme used when previewing snippets",
    )
    line_numbers: bool = Field(
        default=False,
        description="Show line numbers in snippet previews",
    )

    # Request selection
    default_index: int = Field(
        default=0,
        ge=0,
        description="Request block used when --index is not given",
    )

    # Usage events
    telemetry: bool = Field(
        default=True,
        description="Record usage events (target/client picks) to the log",
    )

    model_config = SettingsConfigDict(
        env_prefix="HARSNIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
_settings: HarsnipSettings | None = None


def get_settings() -> HarsnipSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = HarsnipSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
