"""
FastAPI dependency injection for the command handlers.

Each request gets its own database session and repositories; the event
publisher is created once in the application lifespan and shared.
"""

from typing import Annotated, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from flashcard_manager.application.commands import CardCommands, DeckCommands
from flashcard_manager.application.event_notifier import EventNotifier
from flashcard_manager.application.ports import (
    CardRepositoryPort,
    DeckRepositoryPort,
    EventPublisherPort,
)
from flashcard_manager.data.repositories import CardRepository, DeckRepository
from flashcard_manager.infra.config.database import get_db_session
from flashcard_manager.infra.config.logging_config import get_logger
from flashcard_manager.infra.observability import get_tracer

DatabaseSession = Annotated[AsyncSession, Depends(get_db_session)]


async def get_event_publisher(request: Request) -> Optional[EventPublisherPort]:
    """Publisher attached to the application at startup."""
    return getattr(request.app.state, "event_publisher", None)


async def get_event_notifier(
    publisher: Optional[EventPublisherPort] = Depends(get_event_publisher),
) -> Optional[EventNotifier]:
    if publisher is None:
        return None
    return EventNotifier(publisher)


async def get_deck_repository(session: DatabaseSession) -> DeckRepositoryPort:
    return DeckRepository(session)


async def get_card_repository(session: DatabaseSession) -> CardRepositoryPort:
    return CardRepository(session)


async def get_deck_commands(
    repo: DeckRepositoryPort = Depends(get_deck_repository),
    notifier: Optional[EventNotifier] = Depends(get_event_notifier),
) -> DeckCommands:
    return DeckCommands(
        repo=repo,
        notifier=notifier,
        logger=get_logger("commands.deck"),
        tracer=get_tracer("flashcard_manager.commands"),
    )


async def get_card_commands(
    repo: CardRepositoryPort = Depends(get_card_repository),
    notifier: Optional[EventNotifier] = Depends(get_event_notifier),
) -> CardCommands:
    return CardCommands(
        repo=repo,
        notifier=notifier,
        logger=get_logger("commands.card"),
        tracer=get_tracer("flashcard_manager.commands"),
    )


# Type aliases for cleaner dependency injection
DeckCommandsDep = Annotated[DeckCommands, Depends(get_deck_commands)]
CardCommandsDep = Annotated[CardCommands, Depends(get_card_commands)]
