"""
Deck repository for data access operations.
"""

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from flashcard_manager.application.ports import DeckRepositoryPort
from flashcard_manager.data.models import CardModel, DeckModel
from flashcard_manager.domain.entities import Card, Deck, DeckWithCards
from flashcard_manager.domain.exceptions import DeckNotFoundError
from flashcard_manager.infra.config.logging_config import get_logger


class DeckRepository(DeckRepositoryPort):
    def __init__(self, session: AsyncSession, logger=None):
        self.session = session
        self._log = logger or get_logger("repo.deck")

    async def add(self, deck: Deck) -> int:
        """Insert a deck; the store assigns id and created_at."""
        try:
            result = await self.session.execute(
                insert(DeckModel)
                .values(
                    title=deck.title,
                    description=deck.description,
                    author=deck.author,
                )
                .returning(DeckModel.id)
            )
            deck_id = result.scalar_one()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        self._log.info("deck.add", deck_id=deck_id)
        return deck_id

    async def get_by_id(self, deck_id: int) -> Deck:
        """Get deck by ID."""
        result = await self.session.execute(
            select(DeckModel).where(DeckModel.id == deck_id)
        )
        deck_model = result.scalar_one_or_none()

        if deck_model is None:
            self._log.info("deck.get.not_found", deck_id=deck_id)
            raise DeckNotFoundError(deck_id)

        self._log.info("deck.get", deck_id=deck_id)
        return self._to_entity(deck_model)

    async def update(self, deck: Deck) -> int:
        """Overwrite the text fields; id and created_at are left alone."""
        try:
            result = await self.session.execute(
                update(DeckModel)
                .where(DeckModel.id == deck.id)
                .values(
                    title=deck.title,
                    description=deck.description,
                    author=deck.author,
                )
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        self._log.info("deck.update", deck_id=deck.id, rows=result.rowcount)
        return result.rowcount

    async def delete(self, deck_id: int) -> None:
        """Hard delete; the cards of the deck go with it."""
        try:
            result = await self.session.execute(
                delete(DeckModel).where(DeckModel.id == deck_id)
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        deleted = result.rowcount > 0
        self._log.info("deck.delete", deck_id=deck_id, deleted=deleted)
        if not deleted:
            raise DeckNotFoundError(deck_id)

    async def get_with_cards_by_id(self, deck_id: int) -> DeckWithCards:
        """Deck plus cards from a single LEFT OUTER JOIN."""
        result = await self.session.execute(
            select(
                DeckModel.id,
                DeckModel.title,
                DeckModel.description,
                DeckModel.author,
                DeckModel.created_at,
                CardModel.id.label("card_id"),
                CardModel.front.label("card_front"),
                CardModel.back.label("card_back"),
                CardModel.deck_id.label("card_deck_id"),
                CardModel.author.label("card_author"),
                CardModel.created_at.label("card_created_at"),
            )
            .select_from(DeckModel)
            .outerjoin(CardModel, CardModel.deck_id == DeckModel.id)
            .where(DeckModel.id == deck_id)
        )
        rows = result.all()

        if not rows:
            self._log.info("deck.get_with_cards.not_found", deck_id=deck_id)
            raise DeckNotFoundError(deck_id)

        first = rows[0]
        aggregate = DeckWithCards(
            deck=Deck(
                id=first.id,
                title=first.title,
                description=first.description,
                author=first.author,
                created_at=first.created_at,
            )
        )
        for row in rows:
            aggregate.add_card(self._card_from_row(row))

        self._log.info(
            "deck.get_with_cards", deck_id=deck_id, card_count=len(aggregate.cards)
        )
        return aggregate

    @staticmethod
    def _card_from_row(row) -> Card | None:
        if row.card_id is None:
            return None
        return Card(
            id=row.card_id,
            front=row.card_front,
            back=row.card_back,
            deck_id=row.card_deck_id,
            author=row.card_author,
            created_at=row.card_created_at,
        )

    @staticmethod
    def _to_entity(model: DeckModel) -> Deck:
        """Convert SQLAlchemy model to domain entity."""
        return Deck(
            id=model.id,
            title=model.title,
            description=model.description,
            author=model.author,
            created_at=model.created_at,
        )
