"""Unit tests for RedisResetTokenStore."""

import pytest
from redis.exceptions import RedisError

from tests.fakes import InMemoryRedis
from threadit_auth.persistence.redis import RedisResetTokenStore

THREE_DAYS = 3 * 24 * 60 * 60


class TestRedisResetTokenStore:
    def setup_method(self):
        self.redis = InMemoryRedis()
        self.store = RedisResetTokenStore(self.redis, prefix="forget-password:")

    async def test_issue_stores_user_id_under_prefixed_key(self):
        token = await self.store.issue(42, THREE_DAYS)

        assert self.redis.keys_with_prefix("forget-password:") == [
            f"forget-password:{token}",
        ]
        assert await self.redis.get(f"forget-password:{token}") == "42"
        assert self.redis.ttl_of(f"forget-password:{token}") == THREE_DAYS

    async def test_issue_returns_distinct_tokens(self):
        first = await self.store.issue(1, THREE_DAYS)
        second = await self.store.issue(1, THREE_DAYS)

        assert first != second
        assert len(first) >= 32

    async def test_resolve_returns_user_id(self):
        token = await self.store.issue(7, THREE_DAYS)

        assert await self.store.resolve(token) == 7

    async def test_resolve_unknown_token_returns_none(self):
        assert await self.store.resolve("never-issued") is None

    async def test_resolve_after_expiry_returns_none(self):
        token = await self.store.issue(7, THREE_DAYS)

        self.redis.advance(THREE_DAYS - 1)
        assert await self.store.resolve(token) == 7

        self.redis.advance(1)
        assert await self.store.resolve(token) is None

    async def test_consume_makes_token_unresolvable(self):
        token = await self.store.issue(7, THREE_DAYS)

        await self.store.consume(token)

        assert await self.store.resolve(token) is None

    async def test_consume_is_idempotent(self):
        token = await self.store.issue(7, THREE_DAYS)

        await self.store.consume(token)
        await self.store.consume(token)
        await self.store.consume("never-issued")

    async def test_malformed_payload_resolves_to_none(self):
        await self.redis.set("forget-password:broken", "not-a-number")

        assert await self.store.resolve("broken") is None

    async def test_store_errors_propagate(self):
        self.redis.failing.add("get")

        with pytest.raises(RedisError):
            await self.store.resolve("anything")
