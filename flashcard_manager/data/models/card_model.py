"""
SQLAlchemy model for Card entity.
"""

from sqlalchemy import Column, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import relationship

from flashcard_manager.data.models.base import Base
from flashcard_manager.data.models.deck_model import ID_TYPE


class CardModel(Base):
    __tablename__ = "cards"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    front = Column(Text, nullable=False)
    back = Column(Text, nullable=False)
    deck_id = Column(
        ID_TYPE, ForeignKey("decks.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author = Column(Text, nullable=False, default="")
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    deck = relationship("DeckModel", back_populates="cards")
