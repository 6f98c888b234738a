"""Error kinds reported by the engine."""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Closed set of per-call failures. Values are stable wire codes."""

    GAME_NOT_FOUND = 1
    GAME_FULL = 2
    ALREADY_JOINED = 3
    NOT_IN_GAME = 4
    WRONG_PHASE = 5
    ALREADY_ACTED = 6
    INVALID_TARGET = 7
    NOT_ALIVE = 8
    GAME_ALREADY_OVER = 9
    NOT_CREATOR = 10
    SESSION_EXISTS = 11
    INVALID_REVEAL = 12
    NO_COMMITMENT = 13

    @property
    def label(self) -> str:
        """CamelCase name, e.g. GameNotFound."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class GameError(Exception):
    """Raised by engine and service operations. State is never mutated when raised."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind = kind
        super().__init__(message or kind.label)
