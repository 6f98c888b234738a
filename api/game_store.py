"""In-memory game store. Replace with a DB later if needed."""

import logging
import time
from typing import Callable, Optional

from game.state import Game

logger = logging.getLogger(__name__)


class InMemoryGameStore:
    """One record per session id. Every store() renews the record's expiry."""

    def __init__(self, ttl_seconds: int, clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        # session_id -> (game, expires_at)
        self._store: dict[int, tuple[Game, float]] = {}

    def _live(self, session_id: int) -> Optional[Game]:
        entry = self._store.get(session_id)
        if entry is None:
            return None
        game, expires_at = entry
        if self._clock() >= expires_at:
            logger.debug("Session %d expired", session_id)
            del self._store[session_id]
            return None
        return game

    def load(self, session_id: int) -> Optional[Game]:
        return self._live(session_id)

    def store(self, session_id: int, game: Game) -> None:
        self._store[session_id] = (game, self._clock() + self.ttl_seconds)

    def exists(self, session_id: int) -> bool:
        return self._live(session_id) is not None

    def delete(self, session_id: int) -> None:
        self._store.pop(session_id, None)

    def list_sessions(self) -> list[int]:
        return [sid for sid in list(self._store) if self._live(sid) is not None]

    def clear(self) -> None:
        self._store.clear()
