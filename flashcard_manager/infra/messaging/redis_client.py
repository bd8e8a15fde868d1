"""
Redis client for the event stream.
"""

import redis.asyncio as redis

from flashcard_manager.infra.config.logging_config import get_logger
from flashcard_manager.infra.config.settings import get_settings


def get_redis_client() -> redis.Redis:
    """Build a Redis client from settings.

    The socket timeout is the only bound on a publish round trip.
    """
    settings = get_settings()
    logger = get_logger("infra.redis")
    client = redis.from_url(
        settings.redis_url,
        socket_timeout=settings.redis_socket_timeout,
        socket_connect_timeout=settings.redis_socket_timeout,
    )
    logger.info("redis.client.get", url=settings.redis_url)
    return client
