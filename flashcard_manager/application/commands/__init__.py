from .card_commands import CardCommands
from .deck_commands import DeckCommands
from .support import NotificationPolicy, ResourceCommands

__all__ = ["CardCommands", "DeckCommands", "NotificationPolicy", "ResourceCommands"]
