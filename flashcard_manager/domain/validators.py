"""
Domain validators for deck and card input rules.
"""

from typing import Iterable, Mapping


class FieldValidators:
    @staticmethod
    def missing_fields(values: Mapping[str, str], required: Iterable[str]) -> list[str]:
        """Return the required fields whose value is empty."""
        return [name for name in required if not values.get(name)]

    @staticmethod
    def is_valid_id(entity_id: int) -> bool:
        """Identifiers are assigned by the store and are always positive."""
        return entity_id > 0


DECK_REQUIRED_FIELDS = ("title", "description", "author")
CARD_REQUIRED_FIELDS = ("front", "back")


class DeckValidators:
    @staticmethod
    def missing_fields(values: Mapping[str, str]) -> list[str]:
        return FieldValidators.missing_fields(values, DECK_REQUIRED_FIELDS)


class CardValidators:
    @staticmethod
    def missing_fields(values: Mapping[str, str]) -> list[str]:
        return FieldValidators.missing_fields(values, CARD_REQUIRED_FIELDS)
