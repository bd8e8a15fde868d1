"""
Event notifier: wraps a request into an envelope and publishes it.
"""

from typing import Optional

from pydantic import BaseModel

from flashcard_manager.application.envelope import EventEnvelope, OperationType
from flashcard_manager.application.ports import EventPublisherPort
from flashcard_manager.infra.config.logging_config import get_logger


class EventNotifier:
    """Builds {timestamp, type, raw_query} envelopes for a single outbound channel.

    Publishing is awaited in the caller's path and is never retried. Errors
    from the publisher propagate to the caller, which decides what to do
    with them.
    """

    def __init__(self, publisher: EventPublisherPort, logger=None):
        self.publisher = publisher
        self._log = logger or get_logger("notifier")

    async def notify(
        self, operation: OperationType, request: Optional[BaseModel]
    ) -> EventEnvelope:
        raw_query = request.model_dump_json() if request is not None else ""
        envelope = EventEnvelope.build(operation, raw_query)
        await self.publisher.publish(envelope)
        self._log.debug("event.published", type=envelope.type)
        return envelope
