"""
Settings for hearth-access.

Environment-driven configuration for the counting store connection, quota
overrides and logging. Services embed these settings or construct them
directly in tests.
"""
import logging
import logging.config
from functools import lru_cache
from typing import Optional

from pydantic import Field, RedisDsn, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import StoreDefaults
from .logging_config import LoggingConfig, LogFormat, LogVerbosity


class AccessSettings(BaseSettings):
    """Runtime settings, read from ``HEARTH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HEARTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Counting store
    redis_url: Optional[RedisDsn] = Field(default=None, description="Redis URL backing the counting store")
    redis_pool_size: int = Field(default=StoreDefaults.REDIS_POOL_SIZE, ge=1)
    redis_socket_timeout: float = Field(default=StoreDefaults.REDIS_SOCKET_TIMEOUT_SECONDS, gt=0)
    redis_key_prefix: str = Field(default=StoreDefaults.KEY_PREFIX)

    # Quotas (0 or unset keeps the instance default)
    quotas_unlimited: bool = Field(default=False, description="Disable every quota ceiling")
    quota_user_storage_mb: int = Field(default=0)
    quota_server_storage_mb: int = Field(default=0)
    quota_max_file_size_mb: int = Field(default=0)
    quota_message_rate_limit: int = Field(default=0)
    quota_max_servers_owned: int = Field(default=0)

    # Logging
    log_verbosity: LogVerbosity = Field(default=LogVerbosity.NORMAL)
    log_format: LogFormat = Field(default=LogFormat.SIMPLE)

    @field_validator("log_verbosity", mode="before")
    @classmethod
    def normalize_verbosity(cls, v):
        """Accept verbosity in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept log format in any case."""
        return v.lower() if isinstance(v, str) else v

    @property
    def is_store_configured(self) -> bool:
        """Whether a Redis counting store is configured."""
        return self.redis_url is not None

    def configure_logging(self) -> None:
        """Apply these settings to the stdlib logging tree."""
        logging.config.dictConfig(
            LoggingConfig.build(self.log_verbosity.value, self.log_format.value)
        )
        logging.getLogger(__name__).debug(
            f"Logging configured from settings: verbosity={self.log_verbosity.value}"
        )


@lru_cache()
def get_settings() -> AccessSettings:
    """Get cached settings instance."""
    return AccessSettings()
