"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="dnsimple-strillone", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # HTTP server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=5000, alias="PORT")

    # Deduplication
    dedup_ttl: float = Field(default=300, alias="DEDUP_TTL")
    dedup_sweep_interval: float = Field(default=60, alias="DEDUP_SWEEP_INTERVAL")

    # Slack relay
    slack_webhook_url: str = Field(
        default="https://hooks.slack.com/services",
        alias="SLACK_WEBHOOK_URL",
    )
    slack_username: str = Field(default="DNSimple", alias="SLACK_USERNAME")
    relay_timeout: float = Field(default=10.0, alias="RELAY_TIMEOUT")

    # Links in formatted messages
    dnsimple_url: str = Field(default="https://dnsimple.com", alias="DNSIMPLE_URL")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
