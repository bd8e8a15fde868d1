"""
Card domain entity.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Card:
    front: str
    back: str
    deck_id: int = 0
    author: str = ""
    id: int = 0
    created_at: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        return self.id > 0
