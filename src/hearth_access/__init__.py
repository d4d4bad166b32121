"""hearth-access - access control and abuse prevention for Hearth chat servers.

This library resolves effective member permissions from roles and channel
overrides, rate limits actions over a pluggable counting store, and
enforces instance quota ceilings with typed, client-facing errors.
"""

from .__version__ import __version__

from .config import (
    AccessSettings,
    get_settings,
    setup_logging,
    get_logger,
)

from .core.exceptions import (
    # Base Exception
    HearthAccessError,

    # Common Exceptions
    ConfigurationError,
    ValidationError,
    AuthorizationError,
    PermissionDeniedError,
    RoleHierarchyError,
    CounterStoreError,
    CounterNotFoundError,

    # Utility Functions
    get_http_status_code,
    create_error_response,
)

from .features.permissions import (
    Permissions,
    PERMISSION_ALL,
    FULL_PERMISSIONS,
    DEFAULT_PERMISSIONS,
    has_permission,
    describe_permissions,
    Server,
    Role,
    Member,
    Channel,
    OverrideTarget,
    PermissionOverride,
    PermissionResolver,
    resolve_permissions,
)

from .features.rate_limiting import (
    CounterStore,
    RateLimitConfig,
    RateLimitInfo,
    RateLimitPolicies,
    RateLimiter,
    MemoryCounterStore,
    RedisCounterStore,
)

from .features.quotas import (
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
    QuotaService,
)

from .features.access import (
    AccessContext,
    AccessGuard,
    build_context,
    create_access_guard,
)

__all__ = [
    "__version__",

    # Configuration
    "AccessSettings",
    "get_settings",
    "setup_logging",
    "get_logger",

    # Exceptions
    "HearthAccessError",
    "ConfigurationError",
    "ValidationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "RoleHierarchyError",
    "CounterStoreError",
    "CounterNotFoundError",
    "get_http_status_code",
    "create_error_response",

    # Permissions
    "Permissions",
    "PERMISSION_ALL",
    "FULL_PERMISSIONS",
    "DEFAULT_PERMISSIONS",
    "has_permission",
    "describe_permissions",
    "Server",
    "Role",
    "Member",
    "Channel",
    "OverrideTarget",
    "PermissionOverride",
    "PermissionResolver",
    "resolve_permissions",

    # Rate limiting
    "CounterStore",
    "RateLimitConfig",
    "RateLimitInfo",
    "RateLimitPolicies",
    "RateLimiter",
    "MemoryCounterStore",
    "RedisCounterStore",

    # Quotas
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

    # Access
    "AccessContext",
    "AccessGuard",
    "build_context",
    "create_access_guard",
]
