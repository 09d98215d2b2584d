"""feedview configuration management."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Fetcher
    feed_url: str = Field(default="https://www.vox.com/rss/index.xml")
    fetch_timeout: float = Field(default=10.0)
    user_agent: str = Field(default="RSS Parser/1.0 (+https://example.com)")

    # Normalization
    max_items: int = Field(default=50, ge=1, le=50)

    # Presentation
    display_limit: int = Field(default=20, ge=1)
    excerpt_length: int = Field(default=280, ge=4)
    display_timezone: str = Field(default="UTC")

    # API
    feedview_port: int = Field(default=8030)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
