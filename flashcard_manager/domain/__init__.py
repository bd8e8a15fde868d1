"""
Domain layer - Core entities and rules.

This package contains the flashcard data model and the errors repositories
raise, independent of any external concerns like databases or APIs.
"""

from .entities import Card, Deck, DeckWithCards
from .exceptions import CardNotFoundError, DeckNotFoundError, EntityNotFoundError

__all__ = [
    "Card",
    "Deck",
    "DeckWithCards",
    "CardNotFoundError",
    "DeckNotFoundError",
    "EntityNotFoundError",
]
