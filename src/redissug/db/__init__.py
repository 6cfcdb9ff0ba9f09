"""Connection management."""

from .redis import close_redis, create_redis, get_redis, get_suggestion_client, init_redis

__all__ = [
    "create_redis",
    "init_redis",
    "close_redis",
    "get_redis",
    "get_suggestion_client",
]
