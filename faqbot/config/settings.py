"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Nothing here changes how messages are matched; the knobs cover the listener, the links
    embedded in replies, and the presentational reply delay.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    app_version: str = Field(default="phase-3-final-1.1.0", alias="APP_VERSION")

    site_base_url: str = Field(default="https://stimulus.org.in", alias="SITE_BASE_URL")
    contact_email: str = Field(default="founder@stimulus.org.in", alias="CONTACT_EMAIL")

    static_dir: str = Field(default="public", alias="STATIC_DIR")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    thinking_delay_enabled: bool = Field(default=True, alias="THINKING_DELAY_ENABLED")
    thinking_delay_base_ms: int = Field(default=900, alias="THINKING_DELAY_BASE_MS")
    thinking_delay_per_char_ms: int = Field(default=8, alias="THINKING_DELAY_PER_CHAR_MS")
    thinking_delay_cap_ms: int = Field(default=900, alias="THINKING_DELAY_CAP_MS")
    followup_delay_base_ms: int = Field(default=800, alias="FOLLOWUP_DELAY_BASE_MS")
    followup_delay_jitter_ms: int = Field(default=600, alias="FOLLOWUP_DELAY_JITTER_MS")

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 1 <= value <= 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return value

    @field_validator("site_base_url")
    @classmethod
    def validate_site_base_url(cls, value: str) -> str:
        """Links are rendered as absolute URLs, so the base must carry a scheme."""

        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("SITE_BASE_URL must start with http:// or https://")
        return value.rstrip("/")

    @model_validator(mode="after")
    def validate_delays(self) -> Settings:
        delays = (
            self.thinking_delay_base_ms,
            self.thinking_delay_per_char_ms,
            self.thinking_delay_cap_ms,
            self.followup_delay_base_ms,
            self.followup_delay_jitter_ms,
        )
        if any(value < 0 for value in delays):
            raise ValueError("delay settings must be >= 0")
        return self

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
