"""
Card repository for data access operations.
"""

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from flashcard_manager.application.ports import CardRepositoryPort
from flashcard_manager.data.models import CardModel
from flashcard_manager.domain.entities import Card
from flashcard_manager.domain.exceptions import CardNotFoundError
from flashcard_manager.infra.config.logging_config import get_logger


class CardRepository(CardRepositoryPort):
    def __init__(self, session: AsyncSession, logger=None):
        self.session = session
        self._log = logger or get_logger("repo.card")

    async def add(self, card: Card) -> int:
        try:
            result = await self.session.execute(
                insert(CardModel)
                .values(
                    front=card.front,
                    back=card.back,
                    deck_id=card.deck_id,
                    author=card.author,
                )
                .returning(CardModel.id)
            )
            card_id = result.scalar_one()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        self._log.info("card.add", card_id=card_id, deck_id=card.deck_id)
        return card_id

    async def get_by_id(self, card_id: int) -> Card:
        result = await self.session.execute(
            select(CardModel).where(CardModel.id == card_id)
        )
        card_model = result.scalar_one_or_none()

        if card_model is None:
            self._log.info("card.get.not_found", card_id=card_id)
            raise CardNotFoundError(card_id)

        self._log.info("card.get", card_id=card_id)
        return self._to_entity(card_model)

    async def update(self, card: Card) -> int:
        """Overwrite the card; a zero deck_id keeps the current deck."""
        values = {"front": card.front, "back": card.back, "author": card.author}
        if card.deck_id > 0:
            values["deck_id"] = card.deck_id
        try:
            result = await self.session.execute(
                update(CardModel).where(CardModel.id == card.id).values(**values)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        self._log.info("card.update", card_id=card.id, rows=result.rowcount)
        return result.rowcount

    async def delete(self, card_id: int) -> None:
        try:
            result = await self.session.execute(
                delete(CardModel).where(CardModel.id == card_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        deleted = result.rowcount > 0
        self._log.info("card.delete", card_id=card_id, deleted=deleted)
        if not deleted:
            raise CardNotFoundError(card_id)

    @staticmethod
    def _to_entity(model: CardModel) -> Card:
        return Card(
            id=model.id,
            front=model.front,
            back=model.back,
            deck_id=model.deck_id,
            author=model.author,
            created_at=model.created_at,
        )
