"""
Domain-level errors raised by repositories.

Command handlers branch on these types instead of inspecting
storage-specific exceptions.
"""


class DomainError(Exception):
    """Base class for domain-specific errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class EntityNotFoundError(DomainError):
    """Raised when a lookup, update or delete matches no rows."""

    entity_name = "entity"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(
            f"{self.entity_name} {entity_id} not found",
            f"{self.entity_name.upper()}_NOT_FOUND",
        )


class DeckNotFoundError(EntityNotFoundError):
    entity_name = "deck"


class CardNotFoundError(EntityNotFoundError):
    entity_name = "card"
