"""Redis implementation for threadit_auth persistence.

Provides:
- create_redis_client: Configured asyncio Redis client
- RedisResetTokenStore: Reset tokens as expiring keys
- RedisSessionStore: Sessions as expiring JSON documents
"""

from threadit_auth.persistence.redis.client import create_redis_client
from threadit_auth.persistence.redis.reset_token_store import RedisResetTokenStore
from threadit_auth.persistence.redis.session_store import RedisSessionStore

__all__ = [
    "RedisResetTokenStore",
    "RedisSessionStore",
    "create_redis_client",
]
