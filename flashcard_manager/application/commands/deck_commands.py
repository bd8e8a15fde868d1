"""
Deck command handler.

Validates deck requests, drives the deck repository, emits a notification
for every successful operation and classifies failures as CommandError.
"""

from typing import Optional

from opentelemetry import trace

from flashcard_manager.api.schemas import (
    CreateDeckRequest,
    DeckResponse,
    DeckWithCardsResponse,
    DeleteDeckRequest,
    EmptyResponse,
    GetDeckByIdRequest,
    UpdateDeckRequest,
)
from flashcard_manager.application.commands.support import (
    NotificationPolicy,
    command_span,
)
from flashcard_manager.application.envelope import OperationType
from flashcard_manager.application.errors import CommandError
from flashcard_manager.application.event_notifier import EventNotifier
from flashcard_manager.application.ports import DeckRepositoryPort
from flashcard_manager.domain.entities import Deck
from flashcard_manager.domain.exceptions import EntityNotFoundError
from flashcard_manager.domain.validators import DeckValidators, FieldValidators
from flashcard_manager.infra.config.logging_config import get_logger
from flashcard_manager.infra.observability import get_tracer


class DeckCommands:
    """
    Handles CreateDeck, GetDeckById, UpdateDeck and DeleteDeck.

    Holds no per-request state: repository, notifier, logger and tracer are
    injected once and every call is independent.
    """

    def __init__(
        self,
        repo: DeckRepositoryPort,
        notifier: Optional[EventNotifier] = None,
        logger=None,
        tracer: Optional[trace.Tracer] = None,
    ):
        self.repo = repo
        self._log = logger or get_logger("commands.deck")
        self._tracer = tracer or get_tracer(__name__)
        self.notifications = NotificationPolicy(notifier, self._log)

    async def create(self, request: CreateDeckRequest) -> DeckResponse:
        async with command_span(self._tracer, OperationType.CreateDeck):
            if DeckValidators.missing_fields(request.model_dump()):
                raise CommandError.invalid_argument(
                    "title, description, and author are required"
                )

            deck = Deck(
                title=request.title,
                description=request.description,
                author=request.author,
            )
            try:
                deck_id = await self.repo.add(deck)
            except Exception as exc:
                self._log.exception("deck.create.failed", error=str(exc))
                raise CommandError.internal("failed to add deck") from exc

            try:
                stored = await self.repo.get_by_id(deck_id)
            except Exception as exc:
                self._log.exception("deck.create.reread_failed", deck_id=deck_id)
                raise CommandError.internal(
                    "failed to retrieve deck after creation"
                ) from exc

            self._log.info("deck.created", deck_id=deck_id)
            await self.notifications.notify(OperationType.CreateDeck, request)
            return DeckResponse.from_entity(stored)

    async def get_by_id(self, request: GetDeckByIdRequest) -> DeckResponse:
        """Plain deck lookup, without cards."""
        async with command_span(
            self._tracer, OperationType.GetDeckById, deck_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id):
                raise CommandError.invalid_argument("invalid ID parameter")

            try:
                deck = await self.repo.get_by_id(request.id)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("deck not found") from exc
            except Exception as exc:
                self._log.exception("deck.get.failed", deck_id=request.id)
                raise CommandError.internal("failed to get deck") from exc

            await self.notifications.notify(OperationType.GetDeckById, request)
            return DeckResponse.from_entity(deck)

    async def get_with_cards(self, request: GetDeckByIdRequest) -> DeckWithCardsResponse:
        """Aggregate read served by the GetDeckById RPC."""
        async with command_span(
            self._tracer, OperationType.GetDeckById, deck_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id):
                raise CommandError.invalid_argument("invalid ID parameter")

            try:
                aggregate = await self.repo.get_with_cards_by_id(request.id)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("deck not found") from exc
            except Exception as exc:
                self._log.exception("deck.get_with_cards.failed", deck_id=request.id)
                raise CommandError.internal("failed to get deck") from exc

            if aggregate is None:
                raise CommandError.not_found("deck not found")

            await self.notifications.notify(OperationType.GetDeckById, request)
            return DeckWithCardsResponse.from_aggregate(aggregate)

    async def update(self, request: UpdateDeckRequest) -> DeckResponse:
        async with command_span(
            self._tracer, OperationType.UpdateDeck, deck_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id) or DeckValidators.missing_fields(
                request.model_dump()
            ):
                raise CommandError.invalid_argument("invalid request payload")

            deck = Deck(
                id=request.id,
                title=request.title,
                description=request.description,
                author=request.author,
            )
            try:
                updated_rows = await self.repo.update(deck)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("deck not found") from exc
            except Exception as exc:
                self._log.exception("deck.update.failed", deck_id=request.id)
                raise CommandError.internal("failed to update deck") from exc

            if updated_rows == 0:
                raise CommandError.not_found("deck not found")

            await self.notifications.notify(OperationType.UpdateDeck, request)
            return DeckResponse.from_entity(deck)

    async def delete(self, request: DeleteDeckRequest) -> EmptyResponse:
        async with command_span(
            self._tracer, OperationType.DeleteDeck, deck_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id):
                raise CommandError.invalid_argument("invalid ID format")

            try:
                await self.repo.delete(request.id)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("deck not found") from exc
            except Exception as exc:
                self._log.exception("deck.delete.failed", deck_id=request.id)
                raise CommandError.internal("failed to delete deck") from exc

            await self.notifications.notify(OperationType.DeleteDeck, request)
            return EmptyResponse()
