"""Redis implementation of ResetTokenStore."""

import logging
import secrets

import redis.asyncio as redis

from threadit_auth.repositories import ResetTokenStore

logger = logging.getLogger(__name__)


class RedisResetTokenStore(ResetTokenStore):
    """Reset tokens stored as ``<prefix><token> -> user_id`` with an expiry.

    Expiry is left to Redis (``SET ... EX``), so an expired token simply
    resolves to None.
    """

    def __init__(self, client: redis.Redis, prefix: str = "forget-password:"):
        self._client = client
        self._prefix = prefix

    def _key(self, token: str) -> str:
        return f"{self._prefix}{token}"

    async def issue(self, user_id: int, ttl_seconds: int) -> str:
        token = secrets.token_urlsafe(32)
        await self._client.set(self._key(token), str(user_id), ex=ttl_seconds)
        logger.debug("Issued reset token for user %s (ttl=%ss)", user_id, ttl_seconds)
        return token

    async def resolve(self, token: str) -> int | None:
        value = await self._client.get(self._key(token))
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning("Malformed reset token payload under %s", self._prefix)
            return None

    async def consume(self, token: str) -> None:
        await self._client.delete(self._key(token))
