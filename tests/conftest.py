"""Pytest configuration and fixtures for hearth-access tests."""

from datetime import timedelta
from uuid import uuid4

import pytest

from hearth_access.core.exceptions import CounterStoreConnectionError
from hearth_access.features.permissions.entities.flags import DEFAULT_PERMISSIONS, Permissions
from hearth_access.features.permissions.entities.models import Channel, Member, Role, Server
from hearth_access.features.permissions.services.resolver import PermissionResolver
from hearth_access.features.quotas.entities.config import default_quota_config
from hearth_access.features.quotas.services.quota_service import QuotaService
from hearth_access.features.rate_limiting.adapters.memory_adapter import MemoryCounterStore
from hearth_access.features.rate_limiting.services.rate_limiter import RateLimiter


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FailingCounterStore:
    """Counting store whose every call fails, as if Redis were down."""

    def __init__(self):
        self.calls = 0

    async def increment_with_expiry(self, key: str, ttl: timedelta) -> int:
        self.calls += 1
        raise CounterStoreConnectionError("connection refused")

    async def get(self, key: str):
        self.calls += 1
        raise CounterStoreConnectionError("connection refused")


@pytest.fixture
def server():
    """Server owned by a dedicated owner user."""
    return Server(id=uuid4(), owner_id=uuid4())


@pytest.fixture
def everyone_role(server):
    """@everyone role with the default permission set."""
    return Role(
        id=server.id,
        server_id=server.id,
        permissions=DEFAULT_PERMISSIONS,
        position=0,
        is_default=True,
        name="@everyone",
    )


@pytest.fixture
def moderator_role(server):
    """Moderator role able to manage messages and kick members."""
    return Role(
        id=uuid4(),
        server_id=server.id,
        permissions=Permissions.MANAGE_MESSAGES | Permissions.KICK_MEMBERS,
        position=5,
        name="Moderator",
    )


@pytest.fixture
def admin_role(server):
    """Role holding the administrator bit."""
    return Role(
        id=uuid4(),
        server_id=server.id,
        permissions=Permissions.ADMINISTRATOR,
        position=10,
        name="Admin",
    )


@pytest.fixture
def roles(everyone_role, moderator_role, admin_role):
    """Every role of the server, @everyone included."""
    return [everyone_role, moderator_role, admin_role]


@pytest.fixture
def member(server):
    """Member with no assigned roles."""
    return Member(user_id=uuid4(), server_id=server.id)


@pytest.fixture
def owner(server):
    """Membership of the server owner."""
    return Member(user_id=server.owner_id, server_id=server.id)


@pytest.fixture
def channel(server):
    """Channel without slowmode."""
    return Channel(id=uuid4(), server_id=server.id)


@pytest.fixture
def resolver():
    return PermissionResolver()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def memory_store(clock):
    """In-memory counting store driven by the fake clock."""
    return MemoryCounterStore(clock=clock)


@pytest.fixture
def failing_store():
    return FailingCounterStore()


@pytest.fixture
def rate_limiter(memory_store):
    return RateLimiter(memory_store)


@pytest.fixture
def quota_service():
    """Quota service over the default profile."""
    return QuotaService(default_quota_config())
