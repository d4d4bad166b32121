"""Tests for the fixed-window rate limiter."""

import asyncio
import logging
import time
from datetime import timedelta
from unittest.mock import AsyncMock

import pytest

from hearth_access.core.exceptions import CounterNotFoundError, ValidationError
from hearth_access.features.quotas.entities.errors import QuotaErrorKind, RateLimitedError
from hearth_access.features.rate_limiting.entities.config import RateLimitConfig, RateLimitPolicies
from hearth_access.features.rate_limiting.services.rate_limiter import RateLimiter


@pytest.fixture
def three_per_minute():
    return RateLimitConfig(limit=3, window=timedelta(minutes=1))


class TestCheck:
    """Test admission against a fixed window."""

    @pytest.mark.asyncio
    async def test_first_limit_calls_pass_then_denied(self, rate_limiter, three_per_minute):
        for _ in range(3):
            await rate_limiter.check("k", three_per_minute)

        with pytest.raises(RateLimitedError) as exc_info:
            await rate_limiter.check("k", three_per_minute)

        error = exc_info.value
        assert error.kind is QuotaErrorKind.RATE_LIMITED
        assert error.retry_after == 60
        assert error.payload.limit == 3
        assert error.payload.window_seconds == 60
        assert error.payload.slowmode_seconds == 0

    @pytest.mark.asyncio
    async def test_other_key_still_admitted(self, rate_limiter, three_per_minute):
        for _ in range(3):
            await rate_limiter.check("k", three_per_minute)
        with pytest.raises(RateLimitedError):
            await rate_limiter.check("k", three_per_minute)

        await rate_limiter.check("k2", three_per_minute)

    @pytest.mark.asyncio
    async def test_keeps_denying_inside_window(self, rate_limiter, three_per_minute):
        for _ in range(3):
            await rate_limiter.check("k", three_per_minute)
        for _ in range(5):
            with pytest.raises(RateLimitedError):
                await rate_limiter.check("k", three_per_minute)

    @pytest.mark.asyncio
    async def test_window_reset_admits_again(self, rate_limiter, clock, three_per_minute):
        for _ in range(3):
            await rate_limiter.check("k", three_per_minute)
        with pytest.raises(RateLimitedError):
            await rate_limiter.check("k", three_per_minute)

        clock.advance(60)
        await rate_limiter.check("k", three_per_minute)

    @pytest.mark.asyncio
    async def test_window_is_anchored_to_first_request(self, rate_limiter, clock, three_per_minute):
        await rate_limiter.check("k", three_per_minute)
        clock.advance(59)
        await rate_limiter.check("k", three_per_minute)
        await rate_limiter.check("k", three_per_minute)
        with pytest.raises(RateLimitedError):
            await rate_limiter.check("k", three_per_minute)

        clock.advance(1)
        await rate_limiter.check("k", three_per_minute)

    @pytest.mark.asyncio
    async def test_keys_are_namespaced(self, three_per_minute):
        store = AsyncMock()
        store.increment_with_expiry.return_value = 1
        await RateLimiter(store).check("user:42:send", three_per_minute)
        store.increment_with_expiry.assert_awaited_once_with(
            "ratelimit:user:42:send", timedelta(minutes=1)
        )

    @pytest.mark.asyncio
    async def test_retry_after_rounds_up(self, rate_limiter):
        config = RateLimitConfig(limit=1, window=timedelta(seconds=1.5))
        await rate_limiter.check("k", config)
        with pytest.raises(RateLimitedError) as exc_info:
            await rate_limiter.check("k", config)
        assert exc_info.value.retry_after == 2


class TestConcurrency:
    """Test admission under concurrent callers sharing one key."""

    @pytest.mark.asyncio
    async def test_gather_admits_exactly_limit(self, rate_limiter, memory_store):
        config = RateLimitConfig(limit=5, window=timedelta(minutes=1))

        results = await asyncio.gather(
            *(rate_limiter.check("burst", config) for _ in range(20)),
            return_exceptions=True,
        )

        admitted = [r for r in results if r is None]
        denied = [r for r in results if isinstance(r, RateLimitedError)]
        assert len(admitted) == 5
        assert len(denied) == 15
        assert await memory_store.get("ratelimit:burst") == "20"

    @pytest.mark.asyncio
    async def test_limiters_sharing_a_store_share_the_window(self, memory_store):
        config = RateLimitConfig(limit=4, window=timedelta(minutes=1))
        limiters = [RateLimiter(memory_store), RateLimiter(memory_store)]

        results = await asyncio.gather(
            *(limiters[i % 2].check_user("u1", "message", config) for i in range(10)),
            return_exceptions=True,
        )

        assert sum(1 for r in results if r is None) == 4
        assert all(isinstance(r, RateLimitedError) for r in results if r is not None)


class TestScopes:
    """Test per-user, per-channel and per-address keys."""

    @pytest.mark.asyncio
    async def test_users_do_not_share_quota(self, rate_limiter):
        config = RateLimitConfig(limit=1, window=60)
        await rate_limiter.check_user("alice", "send", config)
        with pytest.raises(RateLimitedError):
            await rate_limiter.check_user("alice", "send", config)
        await rate_limiter.check_user("bob", "send", config)

    @pytest.mark.asyncio
    async def test_actions_do_not_share_quota(self, rate_limiter):
        config = RateLimitConfig(limit=1, window=60)
        await rate_limiter.check_user("alice", "send", config)
        await rate_limiter.check_user("alice", "edit", config)

    @pytest.mark.asyncio
    async def test_channels_do_not_share_quota(self, rate_limiter):
        config = RateLimitConfig(limit=1, window=60)
        await rate_limiter.check_channel("alice", "c1", "send", config)
        with pytest.raises(RateLimitedError):
            await rate_limiter.check_channel("alice", "c1", "send", config)
        await rate_limiter.check_channel("alice", "c2", "send", config)

    @pytest.mark.asyncio
    async def test_addresses_do_not_share_quota(self, rate_limiter):
        config = RateLimitConfig(limit=1, window=60)
        await rate_limiter.check_ip("10.0.0.1", "login", config)
        with pytest.raises(RateLimitedError):
            await rate_limiter.check_ip("10.0.0.1", "login", config)
        await rate_limiter.check_ip("10.0.0.2", "login", config)

    @pytest.mark.asyncio
    async def test_scope_key_layout(self):
        store = AsyncMock()
        store.increment_with_expiry.return_value = 1
        limiter = RateLimiter(store)
        config = RateLimitConfig(limit=5, window=60)

        await limiter.check_user("u1", "send", config)
        await limiter.check_channel("u1", "c1", "send", config)
        await limiter.check_ip("1.2.3.4", "login", config)

        keys = [call.args[0] for call in store.increment_with_expiry.await_args_list]
        assert keys == [
            "ratelimit:user:u1:send",
            "ratelimit:channel:c1:u1:send",
            "ratelimit:ip:1.2.3.4:login",
        ]


class TestSlowmode:
    """Test channel slowmode cooldowns."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("seconds", [0, -5])
    async def test_disabled_slowmode_always_allows(self, rate_limiter, seconds):
        for _ in range(10):
            await rate_limiter.check_slowmode("alice", "c1", seconds)

    @pytest.mark.asyncio
    async def test_second_message_is_denied(self, rate_limiter):
        await rate_limiter.check_slowmode("alice", "c1", 10)
        with pytest.raises(RateLimitedError) as exc_info:
            await rate_limiter.check_slowmode("alice", "c1", 10)

        error = exc_info.value
        assert error.retry_after == 10
        assert error.payload.slowmode_seconds == 10

    @pytest.mark.asyncio
    async def test_cooldown_expires(self, rate_limiter, clock):
        await rate_limiter.check_slowmode("alice", "c1", 10)
        clock.advance(10)
        await rate_limiter.check_slowmode("alice", "c1", 10)

    @pytest.mark.asyncio
    async def test_cooldown_is_per_user_and_channel(self, rate_limiter):
        await rate_limiter.check_slowmode("alice", "c1", 10)
        await rate_limiter.check_slowmode("bob", "c1", 10)
        await rate_limiter.check_slowmode("alice", "c2", 10)

    @pytest.mark.asyncio
    async def test_marker_key(self):
        store = AsyncMock()
        store.get.side_effect = CounterNotFoundError("missing")
        store.increment_with_expiry.return_value = 1

        await RateLimiter(store).check_slowmode("u1", "c1", 30)

        store.get.assert_awaited_once_with("ratelimit:slowmode:c1:u1")
        store.increment_with_expiry.assert_awaited_once_with(
            "ratelimit:slowmode:c1:u1", timedelta(seconds=30)
        )


class TestFailOpen:
    """Test behavior when the counting store is unavailable."""

    @pytest.mark.asyncio
    async def test_check_allows_on_store_failure(self, failing_store, caplog):
        limiter = RateLimiter(failing_store)
        config = RateLimitConfig(limit=1, window=60)

        with caplog.at_level(logging.WARNING):
            for _ in range(5):
                await limiter.check("k", config)

        assert failing_store.calls == 5
        assert "allowing request" in caplog.text

    @pytest.mark.asyncio
    async def test_remaining_is_full_limit_on_store_failure(self, failing_store):
        limiter = RateLimiter(failing_store)
        config = RateLimitConfig(limit=7, window=60)
        assert await limiter.get_remaining_requests("k", config) == 7

    @pytest.mark.asyncio
    async def test_slowmode_allows_on_store_failure(self, failing_store):
        limiter = RateLimiter(failing_store)
        await limiter.check_slowmode("alice", "c1", 10)
        await limiter.check_slowmode("alice", "c1", 10)

    @pytest.mark.asyncio
    async def test_slowmode_allows_when_marker_write_fails(self):
        store = AsyncMock()
        store.get.side_effect = CounterNotFoundError("missing")
        store.increment_with_expiry.side_effect = TimeoutError("slow")
        await RateLimiter(store).check_slowmode("alice", "c1", 10)

    @pytest.mark.asyncio
    async def test_any_exception_fails_open(self):
        store = AsyncMock()
        store.increment_with_expiry.side_effect = RuntimeError("boom")
        await RateLimiter(store).check("k", RateLimitConfig(limit=1, window=60))


class TestIntrospection:
    """Test remaining-request and header reporting."""

    @pytest.mark.asyncio
    async def test_remaining_counts_as_a_request(self, rate_limiter, three_per_minute):
        assert await rate_limiter.get_remaining_requests("k", three_per_minute) == 3
        assert await rate_limiter.get_remaining_requests("k", three_per_minute) == 2
        assert await rate_limiter.get_remaining_requests("k", three_per_minute) == 1
        assert await rate_limiter.get_remaining_requests("k", three_per_minute) == 0
        assert await rate_limiter.get_remaining_requests("k", three_per_minute) == 0

    @pytest.mark.asyncio
    async def test_remaining_after_checks(self, rate_limiter, three_per_minute):
        await rate_limiter.check("k", three_per_minute)
        assert await rate_limiter.get_remaining_requests("k", three_per_minute) == 2

    @pytest.mark.asyncio
    async def test_get_info(self, rate_limiter, three_per_minute):
        before = int(time.time())
        info = await rate_limiter.get_info("k", three_per_minute)

        assert info.limit == 3
        assert info.remaining == 3
        assert before + 60 <= info.reset_at <= int(time.time()) + 61

    @pytest.mark.asyncio
    async def test_info_headers(self, rate_limiter, three_per_minute):
        info = await rate_limiter.get_info("k", three_per_minute)
        headers = info.to_headers()

        assert headers["X-RateLimit-Limit"] == "3"
        assert headers["X-RateLimit-Remaining"] == "3"
        assert headers["X-RateLimit-Reset"] == str(info.reset_at)


class TestRateLimitConfig:
    """Test configuration validation and predefined policies."""

    def test_accepts_seconds(self):
        config = RateLimitConfig(limit=5, window=5)
        assert config.window == timedelta(seconds=5)
        assert config.window_seconds == 5

    def test_per_seconds(self):
        assert RateLimitConfig.per_seconds(5, 5) == RateLimitConfig(limit=5, window=timedelta(seconds=5))

    @pytest.mark.parametrize("limit", [0, -1])
    def test_rejects_non_positive_limit(self, limit):
        with pytest.raises(ValidationError):
            RateLimitConfig(limit=limit, window=60)

    def test_rejects_empty_window(self):
        with pytest.raises(ValidationError):
            RateLimitConfig(limit=1, window=timedelta(0))

    @pytest.mark.parametrize(
        "policy,limit,window",
        [
            (RateLimitPolicies.API_DEFAULT, 100, timedelta(minutes=1)),
            (RateLimitPolicies.API_AUTH, 5, timedelta(minutes=1)),
            (RateLimitPolicies.API_UPLOAD, 10, timedelta(minutes=1)),
            (RateLimitPolicies.MESSAGE_SEND, 5, timedelta(seconds=5)),
            (RateLimitPolicies.MESSAGE_EDIT, 10, timedelta(minutes=1)),
            (RateLimitPolicies.MESSAGE_REACTION, 20, timedelta(minutes=1)),
            (RateLimitPolicies.SERVER_CREATE, 10, timedelta(hours=1)),
            (RateLimitPolicies.INVITE_CREATE, 10, timedelta(minutes=1)),
        ],
    )
    def test_predefined_policies(self, policy, limit, window):
        assert policy.limit == limit
        assert policy.window == window
