"""Quota entities package.

Static quota configuration, typed quota errors and computed limit views.
"""

from .config import (
    QuotaConfig,
    StorageQuotaConfig,
    MessageQuotaConfig,
    ServerQuotaConfig,
    VoiceQuotaConfig,
    APIQuotaConfig,
    default_quota_config,
    unlimited_quota_config,
    load_quota_config,
    is_unlimited,
)
from .errors import (
    QuotaErrorKind,
    QuotaError,
    StorageQuotaExceededError,
    RateLimitedError,
    FileTooLargeError,
    MessageTooLongError,
    ResourceLimitReachedError,
    ExtensionBlockedError,
    StorageQuotaDetails,
    RateLimitDetails,
    FileSizeDetails,
    MessageLengthDetails,
    ResourceLimitDetails,
    ExtensionDetails,
    storage_quota_error,
    rate_limit_error,
    file_too_large_error,
    message_too_long_error,
    resource_limit_error,
    extension_blocked_error,
)
from .limits import EffectiveLimits, StorageInfo, UNLIMITED

__all__ = [
    # Configuration
    "QuotaConfig",
    "StorageQuotaConfig",
    "MessageQuotaConfig",
    "ServerQuotaConfig",
    "VoiceQuotaConfig",
    "APIQuotaConfig",
    "default_quota_config",
    "unlimited_quota_config",
    "load_quota_config",
    "is_unlimited",

    # Errors
    "QuotaErrorKind",
    "QuotaError",
    "StorageQuotaExceededError",
    "RateLimitedError",
    "FileTooLargeError",
    "MessageTooLongError",
    "ResourceLimitReachedError",
    "ExtensionBlockedError",
    "StorageQuotaDetails",
    "RateLimitDetails",
    "FileSizeDetails",
    "MessageLengthDetails",
    "ResourceLimitDetails",
    "ExtensionDetails",
    "storage_quota_error",
    "rate_limit_error",
    "file_too_large_error",
    "message_too_long_error",
    "resource_limit_error",
    "extension_blocked_error",

    # Computed views
    "EffectiveLimits",
    "StorageInfo",
    "UNLIMITED",
]
