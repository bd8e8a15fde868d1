from typing import Optional

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.redis import RedisInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from prometheus_client import Counter
from sqlalchemy.ext.asyncio import AsyncEngine

from flashcard_manager.infra.config.logging_config import get_logger
from flashcard_manager.infra.config.settings import get_settings

logger = get_logger("observability")

# Prometheus metrics
COMMAND_COUNT = Counter(
    "flashcard_commands_total",
    "Handled commands by operation and outcome",
    ["operation", "outcome"],
)

EVENT_PUBLISH_FAILURES = Counter(
    "flashcard_event_publish_failures_total",
    "Event envelopes that could not be published",
    ["operation"],
)


def setup_observability(engine: Optional[AsyncEngine] = None) -> None:
    """Setup OpenTelemetry tracing and library instrumentation."""
    settings = get_settings()

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.environment": settings.environment,
        }
    )
    provider = TracerProvider(resource=resource)

    if settings.otel_exporter_otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(
            endpoint=settings.otel_exporter_otlp_endpoint,
            insecure=settings.environment != "production",
        )
        provider.add_span_processor(BatchSpanProcessor(otlp_exporter))

    trace.set_tracer_provider(provider)

    if engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    RedisInstrumentor().instrument()
    logger.info(
        "observability.ready",
        service=settings.otel_service_name,
        otlp=bool(settings.otel_exporter_otlp_endpoint),
    )


def get_tracer(name: str = "flashcard_manager") -> trace.Tracer:
    """Get OpenTelemetry tracer."""
    return trace.get_tracer(name)


class MetricsCollector:
    """Helper class for collecting application metrics."""

    @staticmethod
    def record_command(operation: str, outcome: str) -> None:
        COMMAND_COUNT.labels(operation=operation, outcome=outcome).inc()

    @staticmethod
    def record_publish_failure(operation: str) -> None:
        EVENT_PUBLISH_FAILURES.labels(operation=operation).inc()


# Global metrics collector instance
metrics = MetricsCollector()
