"""
Event consumer worker: tails the operation stream and logs every envelope.
"""

import asyncio
from typing import Optional

from flashcard_manager.infra.config.logging_config import get_logger, setup_logging
from flashcard_manager.infra.config.settings import get_settings
from flashcard_manager.infra.messaging.redis_client import get_redis_client
from flashcard_manager.infra.messaging.redis_streams import RedisStreamEventConsumer


async def run_consumer(since_id: str = "$", max_batches: Optional[int] = None) -> str:
    """Consume the configured stream; "$" starts from new messages only."""
    settings = get_settings()
    log = get_logger("worker.consumer")
    redis_client = get_redis_client()
    consumer = RedisStreamEventConsumer(redis_client, settings.events_stream)

    try:
        return await consumer.consume(since_id=since_id, max_batches=max_batches)
    finally:
        await redis_client.aclose()
        log.info("worker.closed", stream=settings.events_stream)


def main() -> None:
    setup_logging()
    try:
        asyncio.run(run_consumer())
    except KeyboardInterrupt:
        get_logger("worker.consumer").info("worker.interrupted")


if __name__ == "__main__":
    main()
