"""Quotas feature for hearth-access.

Feature-First layout:
- entities/: quota configuration profiles, typed quota errors, computed views
- services/: upload, message and resource-count checks
"""

from .entities import (
    QuotaConfig,
    default_quota_config,
    unlimited_quota_config,
    load_quota_config,
    is_unlimited,
    QuotaErrorKind,
    QuotaError,
    StorageQuotaExceededError,
    RateLimitedError,
    FileTooLargeError,
    MessageTooLongError,
    ResourceLimitReachedError,
    ExtensionBlockedError,
    storage_quota_error,
    rate_limit_error,
    file_too_large_error,
    EffectiveLimits,
    StorageInfo,
)
from .services import QuotaService, create_quota_service

__all__ = [
    "QuotaConfig",
    "default_quota_config",
    "unlimited_quota_config",
    "load_quota_config",
    "is_unlimited",
    "QuotaErrorKind",
    "QuotaError",
    "StorageQuotaExceededError",
    "RateLimitedError",
    "FileTooLargeError",
    "MessageTooLongError",
    "ResourceLimitReachedError",
    "ExtensionBlockedError",
    "storage_quota_error",
    "rate_limit_error",
    "file_too_large_error",
    "EffectiveLimits",
    "StorageInfo",
    "QuotaService",
    "create_quota_service",
]
