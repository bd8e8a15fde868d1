"""Integration tests for the SQLAlchemy repositories against SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError

from flashcard_manager.data.repositories import CardRepository, DeckRepository
from flashcard_manager.domain.entities import Card, Deck, DeckWithCards
from flashcard_manager.domain.exceptions import CardNotFoundError, DeckNotFoundError

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]


@pytest.fixture
def deck_repository(db_session):
    return DeckRepository(db_session)


@pytest.fixture
def card_repository(db_session):
    return CardRepository(db_session)


async def _add_deck(repository, title="Algebra"):
    return await repository.add(Deck(title=title, description="Basics", author="Ana"))


class TestDeckRepositoryIntegration:
    async def test_deck_crud_operations(self, deck_repository):
        """Test complete CRUD operations for decks."""
        deck_id = await _add_deck(deck_repository)
        assert deck_id > 0

        stored = await deck_repository.get_by_id(deck_id)
        assert stored.title == "Algebra"
        assert stored.created_at is not None

        rows = await deck_repository.update(
            Deck(id=deck_id, title="Geometry", description="Shapes", author="Bo")
        )
        assert rows == 1
        stored = await deck_repository.get_by_id(deck_id)
        assert (stored.title, stored.description, stored.author) == ("Geometry", "Shapes", "Bo")

        await deck_repository.delete(deck_id)
        with pytest.raises(DeckNotFoundError):
            await deck_repository.get_by_id(deck_id)

    async def test_ids_are_distinct(self, deck_repository):
        first = await _add_deck(deck_repository, "One")
        second = await _add_deck(deck_repository, "Two")

        assert first != second

    async def test_update_missing_deck_touches_no_rows(self, deck_repository):
        rows = await deck_repository.update(
            Deck(id=999, title="x", description="y", author="z")
        )

        assert rows == 0

    async def test_delete_missing_deck_raises(self, deck_repository):
        with pytest.raises(DeckNotFoundError):
            await deck_repository.delete(999)

    async def test_empty_deck_aggregate_has_no_cards(self, deck_repository):
        deck_id = await _add_deck(deck_repository)

        aggregate = await deck_repository.get_with_cards_by_id(deck_id)

        assert isinstance(aggregate, DeckWithCards)
        assert aggregate.deck.id == deck_id
        assert aggregate.cards == []

    async def test_aggregate_lists_only_own_cards(self, deck_repository, card_repository):
        deck_id = await _add_deck(deck_repository, "Mine")
        other_id = await _add_deck(deck_repository, "Other")
        await card_repository.add(Card(front="2+2", back="4", deck_id=deck_id, author="Ana"))
        await card_repository.add(Card(front="3+3", back="6", deck_id=deck_id))
        await card_repository.add(Card(front="x", back="y", deck_id=other_id))

        aggregate = await deck_repository.get_with_cards_by_id(deck_id)

        assert aggregate.deck.title == "Mine"
        assert sorted(card.front for card in aggregate.cards) == ["2+2", "3+3"]
        assert all(card.deck_id == deck_id for card in aggregate.cards)
        assert all(card.created_at is not None for card in aggregate.cards)

    async def test_aggregate_of_missing_deck_raises(self, deck_repository):
        with pytest.raises(DeckNotFoundError):
            await deck_repository.get_with_cards_by_id(404)

    async def test_deleting_deck_removes_its_cards(self, deck_repository, card_repository):
        deck_id = await _add_deck(deck_repository)
        card_id = await card_repository.add(Card(front="a", back="b", deck_id=deck_id))

        await deck_repository.delete(deck_id)

        with pytest.raises(CardNotFoundError):
            await card_repository.get_by_id(card_id)


class TestCardRepositoryIntegration:
    async def test_card_crud_operations(self, deck_repository, card_repository):
        deck_id = await _add_deck(deck_repository)
        card_id = await card_repository.add(
            Card(front="2+2", back="4", deck_id=deck_id, author="Ana")
        )

        stored = await card_repository.get_by_id(card_id)
        assert (stored.front, stored.back, stored.deck_id) == ("2+2", "4", deck_id)
        assert stored.created_at is not None

        rows = await card_repository.update(
            Card(id=card_id, front="3+3", back="6", author="Bo")
        )
        assert rows == 1
        stored = await card_repository.get_by_id(card_id)
        assert (stored.front, stored.author, stored.deck_id) == ("3+3", "Bo", deck_id)

        await card_repository.delete(card_id)
        with pytest.raises(CardNotFoundError):
            await card_repository.get_by_id(card_id)

    async def test_update_moves_card_between_decks(self, deck_repository, card_repository):
        first = await _add_deck(deck_repository, "First")
        second = await _add_deck(deck_repository, "Second")
        card_id = await card_repository.add(Card(front="a", back="b", deck_id=first))

        await card_repository.update(Card(id=card_id, front="a", back="b", deck_id=second))

        assert (await card_repository.get_by_id(card_id)).deck_id == second

    async def test_update_missing_card_touches_no_rows(self, card_repository):
        rows = await card_repository.update(Card(id=999, front="x", back="y"))

        assert rows == 0

    async def test_delete_missing_card_raises(self, card_repository):
        with pytest.raises(CardNotFoundError):
            await card_repository.delete(999)

    async def test_card_for_unknown_deck_is_rejected(self, card_repository):
        with pytest.raises(IntegrityError):
            await card_repository.add(Card(front="a", back="b", deck_id=12345))
