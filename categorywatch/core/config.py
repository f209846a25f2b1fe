"""
Plugin configuration using Pydantic Settings.
"""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Wiki database configuration (replica used for read-only lookups)."""

    model_config = SettingsConfigDict(env_prefix="CATEGORYWATCH_DB_")

    url: str = Field(
        default="sqlite+aiosqlite:///./wiki.db",
        description="SQLAlchemy async URL of the wiki replica",
    )
    echo: bool = Field(default=False, description="Echo SQL queries")


class Settings(BaseSettings):
    """Main plugin settings."""

    model_config = SettingsConfigDict(
        env_prefix="CATEGORYWATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Plugin
    enabled: bool = Field(default=True, description="Master switch for emission")

    # Notification subsystem
    notifications_backend: str = Field(
        default="memory",
        description="Registered notification backend, or 'none' when absent",
    )
    watchlist_backend: str = Field(
        default="memory",
        description="Watch-list store backend: memory, database",
    )
    bundle_key: str = Field(default="categorywatch")
    notification_category: str = Field(default="categorywatch")
    notification_priority: int = Field(default=2, ge=1, le=10)
    icon_path: str = Field(default="CategoryWatch/assets/catwatch.svg")

    # User preference
    preference_key: str = Field(default="categorywatch-page-watch")
    preference_section: str = Field(default="watchlist/advancedwatchlist")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in {"json", "text"}:
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def notifications_available(self) -> bool:
        return self.enabled and self.notifications_backend != "none"

    def get_backends_config(self) -> dict:
        """Get configuration for DI container."""
        return {
            "backends": {
                "notifications": self.notifications_backend,
                "watchlist": self.watchlist_backend,
            },
            "watchlist": {
                "url": self.database.url,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
