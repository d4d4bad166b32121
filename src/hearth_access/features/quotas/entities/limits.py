"""Computed quota views returned to callers."""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Hashable


# Wire encoding of "no limit" for byte-sized limits
UNLIMITED: int = -1


@dataclass
class EffectiveLimits:
    """Calculated limits for a user, with the level each value came from."""

    storage_mb: int                  # -1 = unlimited
    max_file_size_mb: int            # -1 = unlimited
    message_rate_limit: int          # 0 = unlimited
    rate_limit_window_seconds: int
    slowmode_seconds: int
    max_message_length: int          # 0 = unlimited
    max_servers_owned: int           # 0 = unlimited
    max_servers_joined: int          # 0 = unlimited
    sources: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class StorageInfo:
    """User storage consumption against the configured limit."""

    user_id: Hashable
    used_bytes: int
    used_mb: float
    limit_bytes: int                 # -1 = unlimited
    limit_mb: int                    # -1 = unlimited
    file_count: int
    percentage: float                # 0-100, -1 if unlimited
    is_unlimited: bool

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["user_id"] = str(self.user_id)
        return result
