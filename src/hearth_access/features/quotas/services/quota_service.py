"""Quota service.

Checks uploads, messages and resource counts against the instance quota
configuration. Every limit uses the same convention: a value of 0 or less
means unlimited.
"""

import logging
from typing import Hashable, Optional

from ....config.constants import BYTES_PER_MB
from ...rate_limiting.entities.config import RateLimitConfig
from ..entities.config import QuotaConfig, default_quota_config, is_unlimited
from ..entities.errors import (
    extension_blocked_error,
    file_too_large_error,
    message_too_long_error,
    resource_limit_error,
    storage_quota_error,
)
from ..entities.limits import UNLIMITED, EffectiveLimits, StorageInfo

logger = logging.getLogger(__name__)

INSTANCE_SOURCE = "instance"


def _to_mb(size_bytes: int) -> int:
    return size_bytes // BYTES_PER_MB


def _file_extension(filename: str) -> str:
    _, dot, extension = filename.rpartition(".")
    return extension.lower() if dot else ""


def _normalize_extensions(extensions) -> set:
    return {extension.lower().lstrip(".") for extension in extensions}


class QuotaService:
    """Quota checks against a single instance-wide ``QuotaConfig``."""

    def __init__(self, config: Optional[QuotaConfig] = None):
        self._config = config or default_quota_config()

    @property
    def config(self) -> QuotaConfig:
        return self._config

    def get_effective_limits(
        self,
        user_id: Hashable,
        server_id: Optional[Hashable] = None,
    ) -> EffectiveLimits:
        """Calculate the limits that apply to ``user_id``.

        All values currently come from the instance level; ``sources``
        records that per field.
        """
        storage = self._config.storage
        messages = self._config.messages
        servers = self._config.servers

        limits = EffectiveLimits(
            storage_mb=UNLIMITED if is_unlimited(storage.user_storage_mb) else storage.user_storage_mb,
            max_file_size_mb=UNLIMITED if is_unlimited(storage.max_file_size_mb) else storage.max_file_size_mb,
            message_rate_limit=messages.rate_limit_messages,
            rate_limit_window_seconds=messages.rate_limit_window_seconds,
            slowmode_seconds=messages.default_slowmode_seconds,
            max_message_length=messages.max_message_length,
            max_servers_owned=servers.max_servers_owned,
            max_servers_joined=servers.max_servers_joined,
        )
        limits.sources = {name: INSTANCE_SOURCE for name in limits.to_dict() if name != "sources"}
        return limits

    def check_storage_quota(self, file_size_bytes: int, used_bytes: int = 0) -> None:
        """Check whether a file upload is allowed.

        Raises:
            FileTooLargeError: if the file alone exceeds the max file size
            StorageQuotaExceededError: if the upload would exceed user storage
        """
        storage = self._config.storage
        if not storage.enabled or file_size_bytes <= 0:
            return

        if not is_unlimited(storage.max_file_size_mb):
            max_bytes = storage.max_file_size_mb * BYTES_PER_MB
            if file_size_bytes > max_bytes:
                logger.debug(f"File of {file_size_bytes} bytes exceeds {storage.max_file_size_mb} MB")
                raise file_too_large_error(_to_mb(file_size_bytes), storage.max_file_size_mb)

        if not is_unlimited(storage.user_storage_mb):
            limit_bytes = storage.user_storage_mb * BYTES_PER_MB
            if used_bytes + file_size_bytes > limit_bytes:
                logger.debug(
                    f"Upload of {file_size_bytes} bytes exceeds storage quota "
                    f"({used_bytes}/{limit_bytes} bytes used)"
                )
                raise storage_quota_error(
                    _to_mb(used_bytes), storage.user_storage_mb, _to_mb(file_size_bytes)
                )

    def check_file_extension(self, filename: str) -> None:
        """Reject blocked extensions, and anything off a non-empty allow-list."""
        storage = self._config.storage
        extension = _file_extension(filename)

        if extension in _normalize_extensions(storage.blocked_extensions):
            raise extension_blocked_error(extension)

        allowed = _normalize_extensions(storage.allowed_extensions)
        if allowed and extension not in allowed:
            raise extension_blocked_error(extension)

    def check_message_length(self, length: int) -> None:
        max_length = self._config.messages.max_message_length
        if not is_unlimited(max_length) and length > max_length:
            raise message_too_long_error(length, max_length)

    def check_count_limit(self, resource: str, current: int, limit: int) -> None:
        """Raise ``ResourceLimitReachedError`` if creating one more would pass ``limit``."""
        if is_unlimited(limit):
            return
        if current >= limit:
            logger.info(f"Resource limit reached for {resource}: {current}/{limit}")
            raise resource_limit_error(resource, current, limit)

    def check_servers_owned(self, current: int) -> None:
        self.check_count_limit("servers", current, self._config.servers.max_servers_owned)

    def check_servers_joined(self, current: int) -> None:
        self.check_count_limit("joined servers", current, self._config.servers.max_servers_joined)

    def check_channels(self, current: int) -> None:
        self.check_count_limit("channels", current, self._config.servers.max_channels)

    def check_roles(self, current: int) -> None:
        self.check_count_limit("roles", current, self._config.servers.max_roles)

    def get_storage_info(self, user_id: Hashable, used_bytes: int, file_count: int = 0) -> StorageInfo:
        """Storage consumption of ``user_id`` against the user storage limit."""
        limit_mb = self._config.storage.user_storage_mb
        unlimited = is_unlimited(limit_mb)

        if unlimited:
            limit_bytes = UNLIMITED
            percentage = float(UNLIMITED)
        else:
            limit_bytes = limit_mb * BYTES_PER_MB
            percentage = round(used_bytes / limit_bytes * 100, 2)

        return StorageInfo(
            user_id=user_id,
            used_bytes=used_bytes,
            used_mb=round(used_bytes / BYTES_PER_MB, 2),
            limit_bytes=limit_bytes,
            limit_mb=UNLIMITED if unlimited else limit_mb,
            file_count=file_count,
            percentage=percentage,
            is_unlimited=unlimited,
        )

    def message_rate_config(self) -> Optional[RateLimitConfig]:
        """Message send rate from the messages section, None when unlimited."""
        messages = self._config.messages
        if is_unlimited(messages.rate_limit_messages) or messages.rate_limit_window_seconds <= 0:
            return None
        return RateLimitConfig.per_seconds(
            messages.rate_limit_messages, messages.rate_limit_window_seconds
        )


def create_quota_service(config: Optional[QuotaConfig] = None) -> QuotaService:
    """Create quota service."""
    return QuotaService(config)
