"""
Application ports - abstract interfaces for external dependencies.

These interfaces define the contracts that the command layer needs
from the relational store and the message bus.
"""

from abc import ABC, abstractmethod

from flashcard_manager.domain.entities import Card, Deck, DeckWithCards
from flashcard_manager.application.envelope import EventEnvelope


class DeckRepositoryPort(ABC):
    """Abstract repository interface for Deck operations."""

    @abstractmethod
    async def add(self, deck: Deck) -> int:
        """Insert a deck and return the generated ID."""
        pass

    @abstractmethod
    async def get_by_id(self, deck_id: int) -> Deck:
        """Get deck by ID. Raises DeckNotFoundError when absent."""
        pass

    @abstractmethod
    async def update(self, deck: Deck) -> int:
        """Update an existing deck and return the affected row count."""
        pass

    @abstractmethod
    async def delete(self, deck_id: int) -> None:
        """Delete a deck. Raises DeckNotFoundError when nothing was deleted."""
        pass

    @abstractmethod
    async def get_with_cards_by_id(self, deck_id: int) -> DeckWithCards:
        """Get a deck together with its cards. Raises DeckNotFoundError when absent."""
        pass


class CardRepositoryPort(ABC):
    """Abstract repository interface for Card operations."""

    @abstractmethod
    async def add(self, card: Card) -> int:
        """Insert a card and return the generated ID."""
        pass

    @abstractmethod
    async def get_by_id(self, card_id: int) -> Card:
        """Get card by ID. Raises CardNotFoundError when absent."""
        pass

    @abstractmethod
    async def update(self, card: Card) -> int:
        """Update an existing card and return the affected row count."""
        pass

    @abstractmethod
    async def delete(self, card_id: int) -> None:
        """Delete a card. Raises CardNotFoundError when nothing was deleted."""
        pass


class EventPublisherPort(ABC):
    """Abstract interface for the outbound event channel."""

    @abstractmethod
    async def publish(self, envelope: EventEnvelope) -> None:
        """Publish an envelope. Raises on failure."""
        pass
