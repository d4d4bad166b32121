"""Quota error taxonomy.

Every quota or rate violation is a ``QuotaError`` subclass tagged with a
``QuotaErrorKind`` and carrying a typed, immutable payload. Clients receive
``to_dict()``: ``{"error", "message", "details", "retry_after"?, "upgrade_url"?}``.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from ....config.constants import UPGRADE_URL
from ....core.exceptions import HearthAccessError


class QuotaErrorKind(str, Enum):
    """Wire tag of a quota error."""
    QUOTA_EXCEEDED = "quota_exceeded"
    RATE_LIMITED = "rate_limited"
    FILE_TOO_LARGE = "file_too_large"
    MESSAGE_TOO_LONG = "message_too_long"
    LIMIT_REACHED = "limit_reached"
    EXTENSION_BLOCKED = "extension_blocked"


@dataclass(frozen=True)
class StorageQuotaDetails:
    used_mb: int
    limit_mb: int
    file_size_mb: int
    would_be_mb: int


@dataclass(frozen=True)
class RateLimitDetails:
    limit: int
    window_seconds: int
    slowmode_seconds: int


@dataclass(frozen=True)
class FileSizeDetails:
    file_size_mb: int
    max_size_mb: int


@dataclass(frozen=True)
class MessageLengthDetails:
    length: int
    max_length: int


@dataclass(frozen=True)
class ResourceLimitDetails:
    resource: str
    current: int
    limit: int


@dataclass(frozen=True)
class ExtensionDetails:
    extension: str


class QuotaError(HearthAccessError):
    """Base class for user-facing quota and rate violations.

    Subclasses pin ``kind`` and ``status_code`` and narrow ``payload``.
    """

    kind: ClassVar[QuotaErrorKind]
    status_code: ClassVar[int] = 400

    def __init__(
        self,
        message: str,
        payload: Any,
        retry_after: Optional[int] = None,
        upgrade_url: Optional[str] = None,
    ):
        self.payload = payload
        self.retry_after = retry_after
        self.upgrade_url = upgrade_url
        super().__init__(message, error_code=self.kind.value, details=asdict(payload))

    def to_dict(self) -> Dict[str, Any]:
        """Client-facing payload; unset optional fields are omitted."""
        result: Dict[str, Any] = {
            "error": self.kind.value,
            "message": self.message,
            "details": asdict(self.payload),
        }
        if self.retry_after:
            result["retry_after"] = self.retry_after
        if self.upgrade_url:
            result["upgrade_url"] = self.upgrade_url
        return result


class StorageQuotaExceededError(QuotaError):
    """Upload would push the user over their storage quota."""

    kind = QuotaErrorKind.QUOTA_EXCEEDED
    status_code = 413
    payload: StorageQuotaDetails


class RateLimitedError(QuotaError):
    """Actor exceeded a rate limit or is inside a slowmode cooldown."""

    kind = QuotaErrorKind.RATE_LIMITED
    status_code = 429
    payload: RateLimitDetails


class FileTooLargeError(QuotaError):
    """Single file exceeds the maximum file size."""

    kind = QuotaErrorKind.FILE_TOO_LARGE
    status_code = 413
    payload: FileSizeDetails


class MessageTooLongError(QuotaError):
    kind = QuotaErrorKind.MESSAGE_TOO_LONG
    status_code = 400
    payload: MessageLengthDetails


class ResourceLimitReachedError(QuotaError):
    """A countable resource (servers, channels, roles...) is at its ceiling."""

    kind = QuotaErrorKind.LIMIT_REACHED
    status_code = 403
    payload: ResourceLimitDetails


class ExtensionBlockedError(QuotaError):
    kind = QuotaErrorKind.EXTENSION_BLOCKED
    status_code = 400
    payload: ExtensionDetails


def storage_quota_error(used_mb: int, limit_mb: int, file_size_mb: int) -> StorageQuotaExceededError:
    """Create a storage quota exceeded error."""
    return StorageQuotaExceededError(
        "You have exceeded your storage quota",
        StorageQuotaDetails(
            used_mb=used_mb,
            limit_mb=limit_mb,
            file_size_mb=file_size_mb,
            would_be_mb=used_mb + file_size_mb,
        ),
        upgrade_url=UPGRADE_URL,
    )


def rate_limit_error(
    retry_after: int,
    limit: int,
    window_seconds: int,
    slowmode_seconds: int = 0,
) -> RateLimitedError:
    """Create a rate limit error."""
    return RateLimitedError(
        "You are sending messages too quickly",
        RateLimitDetails(
            limit=limit,
            window_seconds=window_seconds,
            slowmode_seconds=slowmode_seconds,
        ),
        retry_after=retry_after,
    )


def file_too_large_error(file_size_mb: int, max_size_mb: int) -> FileTooLargeError:
    """Create a file size error."""
    return FileTooLargeError(
        "File exceeds maximum size",
        FileSizeDetails(file_size_mb=file_size_mb, max_size_mb=max_size_mb),
    )


def message_too_long_error(length: int, max_length: int) -> MessageTooLongError:
    return MessageTooLongError(
        f"Message exceeds maximum length of {max_length} characters",
        MessageLengthDetails(length=length, max_length=max_length),
    )


def resource_limit_error(resource: str, current: int, limit: int) -> ResourceLimitReachedError:
    return ResourceLimitReachedError(
        f"Maximum number of {resource} reached",
        ResourceLimitDetails(resource=resource, current=current, limit=limit),
        upgrade_url=UPGRADE_URL,
    )


def extension_blocked_error(extension: str) -> ExtensionBlockedError:
    return ExtensionBlockedError(
        f"Files with extension '{extension}' are not allowed",
        ExtensionDetails(extension=extension),
    )
