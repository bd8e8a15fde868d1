"""
Classified errors returned by the command layer.

Every failed operation surfaces exactly one CommandError; the protocol
boundary maps its kind onto a transport status.
"""

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class CommandError(Exception):
    """Raised by command handlers with a classified kind."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"CommandError({self.kind.value}, {self.message!r})"

    @classmethod
    def invalid_argument(cls, message: str) -> "CommandError":
        return cls(ErrorKind.INVALID_ARGUMENT, message)

    @classmethod
    def not_found(cls, message: str) -> "CommandError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str) -> "CommandError":
        return cls(ErrorKind.INTERNAL, message)
