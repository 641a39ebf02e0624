"""Configuration management for the RSS feed verifier."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Verifier settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RSS_VERIFY_", extra="ignore"
    )

    # Discovery
    feed_dir: Path = Path("./feed")
    feed_extensions: list[str] = Field(default_factory=lambda: [".xml", ".rss"])

    # Logging
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
