"""
SQLAlchemy model for Deck entity.
"""

from sqlalchemy import BigInteger, Column, DateTime, Integer, Text, func
from sqlalchemy.orm import relationship

from flashcard_manager.data.models.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns
ID_TYPE = BigInteger().with_variant(Integer, "sqlite")


class DeckModel(Base):
    __tablename__ = "decks"

    id = Column(ID_TYPE, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Relationships
    cards = relationship(
        "CardModel",
        back_populates="deck",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
