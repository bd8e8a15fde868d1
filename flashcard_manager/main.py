"""
FastAPI application entry point for the Flashcard Manager API.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from flashcard_manager import __version__
from flashcard_manager.api.errors import setup_error_handlers
from flashcard_manager.api.v1 import v1_router
from flashcard_manager.infra.config.database import (
    dispose_engine,
    get_engine,
    init_db,
)
from flashcard_manager.infra.config.logging_config import get_logger, setup_logging
from flashcard_manager.infra.config.settings import get_settings
from flashcard_manager.infra.messaging.redis_client import get_redis_client
from flashcard_manager.infra.messaging.redis_streams import (
    DisabledEventPublisher,
    RedisStreamEventPublisher,
)
from flashcard_manager.infra.middleware.request_context import (
    RequestContextMiddleware,
)
from flashcard_manager.infra.observability import setup_observability

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging()
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    engine = get_engine()
    await init_db(engine)
    logger.info("database.initialized")

    if settings.tracing_enabled:
        setup_observability(engine)

    redis_client = None
    if settings.events_enabled:
        redis_client = get_redis_client()
        app.state.event_publisher = RedisStreamEventPublisher(
            redis_client,
            stream_name=settings.events_stream,
            max_length=settings.events_stream_maxlen,
        )
    else:
        app.state.event_publisher = DisabledEventPublisher()
    logger.info(
        "events.ready", enabled=settings.events_enabled, stream=settings.events_stream
    )

    yield

    # Shutdown
    if redis_client is not None:
        await redis_client.aclose()
    await dispose_engine()
    logger.info("app.shutdown", app_name=settings.app_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Deck and card management service",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)
    app.include_router(v1_router)

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": __version__,
        }

    @app.get("/metrics")
    async def metrics_endpoint():
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "flashcard_manager.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
