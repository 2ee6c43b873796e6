"""Centralized configuration management using Pydantic Settings.

This module provides typed configuration for all application settings,
loaded from environment variables with sensible defaults.

Usage:
    from groupslot.config import get_settings
    settings = get_settings()
    limit = settings.scheduling.recommendation_limit
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseSettings):
    """Redis connection configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_", extra="ignore")

    host: str = Field(default="redis", description="Redis host")
    port: int = Field(default=6379, description="Redis port")
    password: str = Field(default="", description="Redis password")
    max_connections: int = Field(default=50, description="Maximum pool connections")
    pool_timeout_sec: float = Field(default=5.0, description="Pool timeout in seconds")
    health_check_interval: int = Field(default=30, description="Health check interval in seconds")
    retry_on_timeout: bool = Field(default=True, description="Retry on timeout")
    socket_timeout: float = Field(default=5.0, description="Socket timeout in seconds")
    socket_connect_timeout: float = Field(default=5.0, description="Socket connect timeout in seconds")


class StoreSettings(BaseSettings):
    """Opaque key/value store layout."""

    model_config = SettingsConfigDict(env_prefix="STORE_", extra="ignore")

    key_prefix: str = Field(default="groupslot", description="Prefix for every stored key")
    event_ttl_sec: int = Field(default=30 * 24 * 3600, description="Event lifetime, 0 keeps forever")
    schedule_ttl_sec: int = Field(default=0, description="Weekly template lifetime, 0 keeps forever")


class SchedulingSettings(BaseSettings):
    """Recommendation and confirmation defaults."""

    model_config = SettingsConfigDict(env_prefix="SCHEDULING_", extra="ignore")

    recommendation_limit: int = Field(default=5, description="Candidates kept per tier")
    default_duration: float = Field(default=2.0, description="Meeting length offered by default, hours")
    min_duration: float = Field(default=0.5)
    max_duration: float = Field(default=8.0)
    duration_step: float = Field(default=0.5)


class CorsSettings(BaseSettings):
    """CORS configuration."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    origins_raw: str = Field(
        default="http://localhost:3000",
        validation_alias="CORS_ORIGINS",
    )
    origins_regex: str = Field(
        default="",
        validation_alias="CORS_ORIGINS_REGEX",
        description="Regex pattern for origins",
    )

    @property
    def origins(self) -> list[str]:
        """Parse comma-separated origins into list."""
        return [o.strip() for o in self.origins_raw.split(",") if o.strip()]

    @property
    def allow_credentials(self) -> bool:
        """Credentials not allowed with wildcard origins."""
        return self.origins != ["*"] and not self.origins_regex


class DebugSettings(BaseSettings):
    """Debug flags configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    request: bool = Field(default=False, alias="request_debug")
    redis: bool = Field(default=False, alias="redis_debug")

    @field_validator("*", mode="before")
    @classmethod
    def parse_bool(cls, v):
        if isinstance(v, str):
            return v.lower() in ("1", "true", "yes")
        return bool(v)


class Settings:
    """Main application settings combining all configuration sections.

    Not a BaseSettings subclass; each section is loaded independently
    with its own prefix.
    """

    def __init__(self) -> None:
        self.redis = RedisSettings()
        self.store = StoreSettings()
        self.scheduling = SchedulingSettings()
        self.cors = CorsSettings()
        self.debug = DebugSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached Settings instance (singleton pattern)."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear cached settings (useful for testing)."""
    get_settings.cache_clear()
