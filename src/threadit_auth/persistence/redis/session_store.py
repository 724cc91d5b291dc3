"""Redis implementation of SessionStore."""

import json
import logging
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from threadit_auth.exceptions import SessionStoreError
from threadit_auth.repositories import SessionStore

logger = logging.getLogger(__name__)


class RedisSessionStore(SessionStore):
    """Sessions stored as JSON under ``<prefix><session_id>``."""

    def __init__(self, client: redis.Redis, prefix: str = "sess:"):
        self._client = client
        self._prefix = prefix

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    async def load(self, session_id: str) -> dict[str, Any] | None:
        try:
            raw = await self._client.get(self._key(session_id))
        except RedisError as e:
            msg = f"Failed to load session: {e}"
            raise SessionStoreError(msg) from e

        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable session payload")
            return None
        return data if isinstance(data, dict) else None

    async def save(
        self,
        session_id: str,
        data: dict[str, Any],
        ttl_seconds: int,
    ) -> None:
        try:
            await self._client.set(
                self._key(session_id),
                json.dumps(data),
                ex=ttl_seconds,
            )
        except RedisError as e:
            msg = f"Failed to save session: {e}"
            raise SessionStoreError(msg) from e

    async def delete(self, session_id: str) -> None:
        try:
            await self._client.delete(self._key(session_id))
        except RedisError as e:
            msg = f"Failed to delete session: {e}"
            raise SessionStoreError(msg) from e
