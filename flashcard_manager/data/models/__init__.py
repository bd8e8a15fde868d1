from flashcard_manager.data.models.base import Base
from flashcard_manager.data.models.deck_model import DeckModel
from flashcard_manager.data.models.card_model import CardModel

__all__ = ["Base", "DeckModel", "CardModel"]
