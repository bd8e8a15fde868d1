"""Domain entities exports."""

from .card import Card
from .deck import Deck, DeckWithCards

__all__ = ["Card", "Deck", "DeckWithCards"]
