"""
Redis Streams publisher and consumer for operation events.
"""

import asyncio
from typing import Awaitable, Callable, Optional

import redis.asyncio as redis
from pydantic import ValidationError
from redis.exceptions import ResponseError

from flashcard_manager.application.envelope import EventEnvelope
from flashcard_manager.application.ports import EventPublisherPort
from flashcard_manager.infra.config.logging_config import get_logger

ENVELOPE_FIELD = "event"

EnvelopeHandler = Callable[[EventEnvelope], Awaitable[None]]


class RedisStreamEventPublisher(EventPublisherPort):
    """Appends every envelope to one stream as a JSON document."""

    def __init__(
        self,
        redis_client: redis.Redis,
        stream_name: str,
        max_length: Optional[int] = None,
    ):
        self.redis_client = redis_client
        self.stream_name = stream_name
        self.max_length = max_length
        self._log = get_logger("infra.events.publisher")

    async def publish(self, envelope: EventEnvelope) -> None:
        message_id = await self.redis_client.xadd(
            self.stream_name,
            {ENVELOPE_FIELD: envelope.model_dump_json()},
            maxlen=self.max_length,
            approximate=True,
        )
        self._log.info(
            "event.xadd",
            stream=self.stream_name,
            type=envelope.type,
            message_id=_decode(message_id),
        )


class DisabledEventPublisher(EventPublisherPort):
    """Used when EVENTS_ENABLED is off; envelopes are only logged."""

    def __init__(self):
        self._log = get_logger("infra.events.disabled")

    async def publish(self, envelope: EventEnvelope) -> None:
        self._log.debug("event.skipped", type=envelope.type)


class RedisStreamEventConsumer:
    """Tails the event stream and hands every envelope to a handler."""

    def __init__(
        self,
        redis_client: redis.Redis,
        stream_name: str,
        handler: Optional[EnvelopeHandler] = None,
        block_ms: int = 5000,
        batch_size: int = 100,
    ):
        self.redis_client = redis_client
        self.stream_name = stream_name
        self.handler = handler or self._log_envelope
        self.block_ms = block_ms
        self.batch_size = batch_size
        self._log = get_logger("infra.events.consumer")

    async def read_batch(self, since_id: str) -> tuple[list[EventEnvelope], str]:
        """Read one batch after since_id; returns envelopes and the last id seen."""
        result = await self.redis_client.xread(
            {self.stream_name: since_id},
            count=self.batch_size,
            block=self.block_ms,
        )

        envelopes = []
        last_id = since_id
        for _stream, messages in result or []:
            for message_id, fields in messages:
                last_id = _decode(message_id)
                envelope = self._parse(last_id, fields)
                if envelope is not None:
                    envelopes.append(envelope)
        return envelopes, last_id

    async def consume(self, since_id: str = "0-0", max_batches: Optional[int] = None) -> str:
        """Loop until cancelled (or max_batches reads); returns the last id seen."""
        batches = 0
        since_id = await self.resolve_start(since_id)
        self._log.info("consumer.start", stream=self.stream_name, since_id=since_id)
        try:
            while max_batches is None or batches < max_batches:
                envelopes, since_id = await self.read_batch(since_id)
                for envelope in envelopes:
                    await self.handler(envelope)
                batches += 1
        except asyncio.CancelledError:
            self._log.info("consumer.stop", last_id=since_id)
            raise
        return since_id

    async def resolve_start(self, since_id: str) -> str:
        """Turn "$" into the stream's current last id.

        Re-sending "$" on every XREAD would skip entries appended between
        two reads.
        """
        if since_id != "$":
            return since_id
        try:
            info = await self.redis_client.xinfo_stream(self.stream_name)
        except ResponseError:
            # Stream not created yet; everything appended later is new
            return "0-0"
        return _decode(info.get("last-generated-id") or "0-0")

    def _parse(self, message_id: str, fields: dict) -> Optional[EventEnvelope]:
        raw = None
        for key, value in fields.items():
            if _decode(key) == ENVELOPE_FIELD:
                raw = _decode(value)
        if raw is None:
            self._log.warning("event.malformed", message_id=message_id, reason="missing field")
            return None
        try:
            return EventEnvelope.model_validate_json(raw)
        except ValidationError as exc:
            self._log.warning("event.malformed", message_id=message_id, reason=str(exc))
            return None

    async def _log_envelope(self, envelope: EventEnvelope) -> None:
        self._log.info(
            "event.received",
            timestamp=envelope.timestamp.isoformat(),
            type=envelope.type,
            raw_query=envelope.raw_query,
        )


def _decode(value) -> str:
    return value.decode() if isinstance(value, bytes) else str(value)
