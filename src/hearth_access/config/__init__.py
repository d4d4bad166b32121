"""Configuration module for hearth-access."""

from .constants import (
    RateLimitKeys,
    RateLimitHeaders,
    StoreDefaults,
    UPGRADE_URL,
    BYTES_PER_MB,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

from .settings import AccessSettings, get_settings

__all__ = [
    # Constants
    "RateLimitKeys",
    "RateLimitHeaders",
    "StoreDefaults",
    "UPGRADE_URL",
    "BYTES_PER_MB",

    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",

    # Settings
    "AccessSettings",
    "get_settings",
]
