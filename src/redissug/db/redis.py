"""
Redis Module

Redis connection for the suggestion client.
"""

from typing import Any

import redis.asyncio as redis
import structlog

from redissug.client import RedisSuggestionClient
from redissug.config import settings

logger = structlog.get_logger()

_redis_client: redis.Redis | None = None


def create_redis(url: str | None = None, **overrides: Any) -> redis.Redis:
    """Create a Redis client from settings, decoding replies as UTF-8."""
    options: dict[str, Any] = {
        "encoding": "utf-8",
        "decode_responses": True,
        "socket_timeout": settings.redis_socket_timeout,
    }
    if settings.redis_password:
        options["password"] = settings.redis_password
    options.update(overrides)

    return redis.from_url(url or str(settings.redis_url), **options)


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis_client

    _redis_client = create_redis()

    # Test connection
    await _redis_client.ping()
    logger.info("Redis connection initialized", url=str(settings.redis_url))


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis_client

    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None
        logger.info("Redis connection closed")


async def get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if not _redis_client:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis_client


async def get_suggestion_client() -> RedisSuggestionClient:
    """Get a suggestion client bound to the shared Redis connection."""
    return RedisSuggestionClient(await get_redis())


__all__ = [
    "create_redis",
    "init_redis",
    "close_redis",
    "get_redis",
    "get_suggestion_client",
]
