"""Redis client construction."""

import logging
from urllib.parse import urlparse

import redis.asyncio as redis

logger = logging.getLogger(__name__)


def create_redis_client(
    redis_url: str,
    max_connections: int = 20,
    socket_connect_timeout: float = 5.0,
    socket_timeout: float = 10.0,
) -> redis.Redis:
    """Create an asyncio Redis client from a URL.

    Responses are decoded to ``str``. The client connects lazily, so
    creating it never touches the network.
    """
    client = redis.from_url(
        redis_url,
        decode_responses=True,
        max_connections=max_connections,
        socket_connect_timeout=socket_connect_timeout,
        socket_timeout=socket_timeout,
    )
    logger.info("Redis client created: %s", _mask_url(redis_url))
    return client


def _mask_url(url: str) -> str:
    """Hide the password part of a Redis URL for logging."""
    parsed = urlparse(url)
    if parsed.password:
        return url.replace(parsed.password, "***")
    return url
