"""
Card command handler.
"""

from typing import Optional

from opentelemetry import trace

from flashcard_manager.api.schemas import (
    CardResponse,
    CreateCardRequest,
    DeleteCardRequest,
    EmptyResponse,
    GetCardByIdRequest,
    UpdateCardRequest,
)
from flashcard_manager.application.commands.support import (
    NotificationPolicy,
    command_span,
)
from flashcard_manager.application.envelope import OperationType
from flashcard_manager.application.errors import CommandError
from flashcard_manager.application.event_notifier import EventNotifier
from flashcard_manager.application.ports import CardRepositoryPort
from flashcard_manager.domain.entities import Card
from flashcard_manager.domain.exceptions import EntityNotFoundError
from flashcard_manager.domain.validators import CardValidators, FieldValidators
from flashcard_manager.infra.config.logging_config import get_logger
from flashcard_manager.infra.observability import get_tracer


class CardCommands:
    """Handles CreateCard, GetCardById, UpdateCard and DeleteCard.

    The deck a card points at is not checked here; the store's foreign key
    rejects dangling references and that surfaces as INTERNAL.
    """

    def __init__(
        self,
        repo: CardRepositoryPort,
        notifier: Optional[EventNotifier] = None,
        logger=None,
        tracer: Optional[trace.Tracer] = None,
    ):
        self.repo = repo
        self._log = logger or get_logger("commands.card")
        self._tracer = tracer or get_tracer(__name__)
        self.notifications = NotificationPolicy(notifier, self._log)

    async def create(self, request: CreateCardRequest) -> CardResponse:
        async with command_span(
            self._tracer, OperationType.CreateCard, deck_id=request.deck_id
        ):
            if CardValidators.missing_fields(request.model_dump()):
                raise CommandError.invalid_argument("missing required field")

            card = Card(
                front=request.front,
                back=request.back,
                deck_id=request.deck_id,
                author=request.author,
            )
            try:
                card_id = await self.repo.add(card)
            except Exception as exc:
                self._log.exception("card.create.failed", deck_id=request.deck_id)
                raise CommandError.internal("failed to add card") from exc

            try:
                stored = await self.repo.get_by_id(card_id)
            except Exception as exc:
                self._log.exception("card.create.reread_failed", card_id=card_id)
                raise CommandError.internal(
                    "failed to retrieve card after creation"
                ) from exc

            self._log.info("card.created", card_id=card_id, deck_id=stored.deck_id)
            await self.notifications.notify(OperationType.CreateCard, request)
            return CardResponse.from_entity(stored)

    async def get_by_id(self, request: GetCardByIdRequest) -> CardResponse:
        async with command_span(
            self._tracer, OperationType.GetCardById, card_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id):
                raise CommandError.invalid_argument("invalid ID format")

            try:
                card = await self.repo.get_by_id(request.id)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("card not found") from exc
            except Exception as exc:
                self._log.exception("card.get.failed", card_id=request.id)
                raise CommandError.internal("failed to get card") from exc

            await self.notifications.notify(OperationType.GetCardById, request)
            return CardResponse.from_entity(card)

    async def update(self, request: UpdateCardRequest) -> CardResponse:
        async with command_span(
            self._tracer, OperationType.UpdateCard, card_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id) or CardValidators.missing_fields(
                request.model_dump()
            ):
                raise CommandError.invalid_argument("invalid request payload")

            card = Card(
                id=request.id,
                front=request.front,
                back=request.back,
                deck_id=request.deck_id,
                author=request.author,
            )
            try:
                updated_rows = await self.repo.update(card)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("card not found") from exc
            except Exception as exc:
                self._log.exception("card.update.failed", card_id=request.id)
                raise CommandError.internal("failed to update card") from exc

            if updated_rows == 0:
                raise CommandError.not_found("card not found")

            if card.deck_id <= 0:
                # deck_id was left unchanged; report the one the row still holds
                try:
                    stored = await self.repo.get_by_id(request.id)
                except Exception as exc:
                    self._log.exception("card.update.reread_failed", card_id=request.id)
                    raise CommandError.internal(
                        "failed to retrieve card after update"
                    ) from exc
                card.deck_id = stored.deck_id

            await self.notifications.notify(OperationType.UpdateCard, request)
            return CardResponse.from_entity(card)

    async def delete(self, request: DeleteCardRequest) -> EmptyResponse:
        async with command_span(
            self._tracer, OperationType.DeleteCard, card_id=request.id
        ):
            if not FieldValidators.is_valid_id(request.id):
                raise CommandError.invalid_argument("invalid ID format")

            try:
                await self.repo.delete(request.id)
            except EntityNotFoundError as exc:
                raise CommandError.not_found("card not found") from exc
            except Exception as exc:
                self._log.exception("card.delete.failed", card_id=request.id)
                raise CommandError.internal("failed to delete card") from exc

            await self.notifications.notify(OperationType.DeleteCard, request)
            return EmptyResponse()
