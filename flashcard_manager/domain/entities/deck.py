"""
Deck domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from flashcard_manager.domain.entities.card import Card


@dataclass
class Deck:
    title: str
    description: str
    author: str
    id: int = 0
    created_at: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        """The store assigns a positive id on insert."""
        return self.id > 0


@dataclass
class DeckWithCards:
    """Aggregate read view: one deck and the cards that reference it."""

    deck: Deck
    cards: List[Card] = field(default_factory=list)

    def add_card(self, card: Optional[Card]) -> None:
        """Attach a card row produced by an outer join.

        The join yields a card side with no id for a deck without cards;
        such rows are dropped.
        """
        if card is None or not card.id:
            return
        self.cards.append(card)
