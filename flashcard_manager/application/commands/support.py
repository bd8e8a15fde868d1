"""
Pieces shared by the deck and card command handlers.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional, Protocol, runtime_checkable

from opentelemetry import trace
from pydantic import BaseModel

from flashcard_manager.api.schemas import EmptyResponse
from flashcard_manager.application.envelope import OperationType
from flashcard_manager.application.errors import CommandError
from flashcard_manager.application.event_notifier import EventNotifier
from flashcard_manager.infra.config.logging_config import operation_context
from flashcard_manager.infra.observability import metrics


@runtime_checkable
class ResourceCommands(Protocol):
    """Capability interface every resource handler satisfies."""

    async def create(self, request: Any) -> Any: ...

    async def get_by_id(self, request: Any) -> Any: ...

    async def update(self, request: Any) -> Any: ...

    async def delete(self, request: Any) -> EmptyResponse: ...


class NotificationPolicy:
    """Best-effort notification: publisher failures are logged and dropped.

    A successful operation stays successful whatever the bus does. There is
    no retry; an event lost here is lost for good.
    """

    def __init__(self, notifier: Optional[EventNotifier], logger):
        self.notifier = notifier
        self._log = logger

    async def notify(self, operation: OperationType, request: BaseModel) -> bool:
        """Returns True when the envelope reached the publisher without error."""
        if self.notifier is None:
            return False
        try:
            await self.notifier.notify(operation, request)
        except Exception as exc:
            metrics.record_publish_failure(operation.value)
            self._log.error(
                "event.publish.failed", operation=operation.value, error=str(exc)
            )
            return False
        return True


@asynccontextmanager
async def command_span(
    tracer: trace.Tracer, operation: OperationType, **attributes: Any
) -> AsyncIterator[trace.Span]:
    """Trace one command, count its outcome and tag its log lines."""
    with operation_context(operation.value, **attributes), tracer.start_as_current_span(
        operation.value, record_exception=False, set_status_on_exception=False
    ) as span:
        for key, value in attributes.items():
            span.set_attribute(key, value)
        try:
            yield span
        except CommandError as exc:
            span.set_attribute("error.kind", exc.kind.value)
            span.set_status(trace.Status(trace.StatusCode.ERROR, exc.message))
            metrics.record_command(operation.value, exc.kind.value)
            raise
        metrics.record_command(operation.value, "OK")
