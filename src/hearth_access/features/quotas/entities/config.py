"""Instance-wide quota configuration.

Two profiles ship with the library: ``default_quota_config()`` with concrete
ceilings and ``unlimited_quota_config()`` where every numeric limit is 0.
Any non-positive limit means "no limit"; see ``is_unlimited``.
"""

from typing import List, TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from ....config.settings import AccessSettings


def is_unlimited(value: int) -> bool:
    """Check if a limit value represents unlimited (0 or negative)."""
    return value <= 0


class StorageQuotaConfig(BaseModel):
    """Storage limits."""

    enabled: bool = True
    user_storage_mb: int = 500                # 0 = unlimited
    server_storage_mb: int = 5000             # 0 = unlimited
    max_file_size_mb: int = 25                # 0 = unlimited
    max_avatar_size_mb: int = 8
    max_emoji_size_mb: int = 1
    max_attachments_per_message: int = 10
    max_files_per_user: int = 0               # 0 = unlimited
    allowed_extensions: List[str] = Field(default_factory=list)  # empty = all
    blocked_extensions: List[str] = Field(
        default_factory=lambda: ["exe", "bat", "cmd", "sh", "ps1", "msi"]
    )


class MessageQuotaConfig(BaseModel):
    """Message limits."""

    rate_limit_messages: int = 5              # 0 = unlimited
    rate_limit_window_seconds: int = 5
    default_slowmode_seconds: int = 0
    max_slowmode_seconds: int = 21600
    max_message_length: int = 2000            # 0 = unlimited
    max_embed_count: int = 10
    max_mentions_per_message: int = 20        # 0 = unlimited
    max_reactions_per_message: int = 20


class ServerQuotaConfig(BaseModel):
    """Server limits."""

    max_servers_owned: int = 10               # 0 = unlimited
    max_servers_joined: int = 100             # 0 = unlimited
    max_channels: int = 500                   # 0 = unlimited
    max_roles: int = 250
    max_emoji: int = 50
    max_emoji_animated: int = 50
    max_members: int = 500000
    max_invites: int = 1000
    max_bans: int = 100000
    max_webhooks: int = 15


class VoiceQuotaConfig(BaseModel):
    """Voice/video limits."""

    enabled: bool = True
    max_bitrate_kbps: int = 384
    max_video_height: int = 1080
    max_screen_share_fps: int = 30
    max_voice_users_per_channel: int = 99
    max_video_users_per_channel: int = 25
    max_call_duration_minutes: int = 0        # 0 = unlimited


class APIQuotaConfig(BaseModel):
    """API rate limits."""

    requests_per_minute: int = 60
    requests_per_hour: int = 1000
    burst_limit: int = 10
    max_concurrent_connections: int = 5
    max_guilds_per_connection: int = 100
    bot_requests_per_minute: int = 120
    bot_burst_limit: int = 20


class QuotaConfig(BaseModel):
    """Instance-level quota defaults."""

    storage: StorageQuotaConfig = Field(default_factory=StorageQuotaConfig)
    messages: MessageQuotaConfig = Field(default_factory=MessageQuotaConfig)
    servers: ServerQuotaConfig = Field(default_factory=ServerQuotaConfig)
    voice: VoiceQuotaConfig = Field(default_factory=VoiceQuotaConfig)
    api: APIQuotaConfig = Field(default_factory=APIQuotaConfig)


def default_quota_config() -> QuotaConfig:
    """Return the default profile with concrete ceilings."""
    return QuotaConfig()


def unlimited_quota_config() -> QuotaConfig:
    """Return a config with all limits disabled."""
    return QuotaConfig(
        storage=StorageQuotaConfig(
            user_storage_mb=0,
            server_storage_mb=0,
            max_file_size_mb=0,
            max_avatar_size_mb=0,
            max_emoji_size_mb=0,
            max_attachments_per_message=0,
            max_files_per_user=0,
            allowed_extensions=[],
            blocked_extensions=[],
        ),
        messages=MessageQuotaConfig(
            rate_limit_messages=0,
            rate_limit_window_seconds=0,
            default_slowmode_seconds=0,
            max_slowmode_seconds=0,
            max_message_length=0,
            max_embed_count=0,
            max_mentions_per_message=0,
            max_reactions_per_message=0,
        ),
        servers=ServerQuotaConfig(
            max_servers_owned=0,
            max_servers_joined=0,
            max_channels=0,
            max_roles=0,
            max_emoji=0,
            max_emoji_animated=0,
            max_members=0,
            max_invites=0,
            max_bans=0,
            max_webhooks=0,
        ),
        voice=VoiceQuotaConfig(
            max_bitrate_kbps=0,
            max_video_height=0,
            max_screen_share_fps=0,
            max_voice_users_per_channel=0,
            max_video_users_per_channel=0,
            max_call_duration_minutes=0,
        ),
        api=APIQuotaConfig(
            requests_per_minute=0,
            requests_per_hour=0,
            burst_limit=0,
            max_concurrent_connections=0,
            max_guilds_per_connection=0,
            bot_requests_per_minute=0,
            bot_burst_limit=0,
        ),
    )


def load_quota_config(settings: "AccessSettings") -> QuotaConfig:
    """Build the quota config from settings.

    Non-zero overrides replace the defaults; unlimited mode replaces
    everything, overrides included.
    """
    if settings.quotas_unlimited:
        return unlimited_quota_config()

    config = default_quota_config()
    if settings.quota_user_storage_mb:
        config.storage.user_storage_mb = settings.quota_user_storage_mb
    if settings.quota_server_storage_mb:
        config.storage.server_storage_mb = settings.quota_server_storage_mb
    if settings.quota_max_file_size_mb:
        config.storage.max_file_size_mb = settings.quota_max_file_size_mb
    if settings.quota_message_rate_limit:
        config.messages.rate_limit_messages = settings.quota_message_rate_limit
    if settings.quota_max_servers_owned:
        config.servers.max_servers_owned = settings.quota_max_servers_owned
    return config
