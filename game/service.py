"""One call per operation: load the game, run the engine, store the result.

A failed engine call raises before anything is stored or reported, so the
persisted game only ever moves between valid states.
"""

import logging
from typing import Optional, Protocol

from game import engine
from game.errors import ErrorKind, GameError
from game.rules import ActionMode, Team
from game.state import Game

logger = logging.getLogger(__name__)


class GameRepository(Protocol):
    """Persistence collaborator keyed by session id."""

    def load(self, session_id: int) -> Optional[Game]: ...

    def store(self, session_id: int, game: Game) -> None: ...

    def exists(self, session_id: int) -> bool: ...


class GameHub(Protocol):
    """Notification ledger told when games start and end."""

    def start_game(
        self,
        session_id: int,
        player1: str,
        player2: str,
        player1_points: int,
        player2_points: int,
    ) -> None: ...

    def end_game(self, session_id: int, player1_won: bool) -> None: ...


class GameService:
    """Public operations over persisted games."""

    def __init__(self, store: GameRepository, hub: GameHub):
        self.store = store
        self.hub = hub

    def _load(self, session_id: int) -> Game:
        game = self.store.load(session_id)
        if game is None:
            raise GameError(ErrorKind.GAME_NOT_FOUND)
        return game

    def get_game(self, session_id: int) -> Game:
        return self._load(session_id)

    def create_game(
        self,
        session_id: int,
        creator: str,
        wager: int = 0,
        mode: ActionMode = ActionMode.COMMIT_REVEAL,
    ) -> Game:
        if self.store.exists(session_id):
            raise GameError(ErrorKind.SESSION_EXISTS)
        game = engine.create_game(session_id, creator, wager=wager, mode=mode)
        self.store.store(session_id, game)
        logger.info("Session %d created by %s", session_id, creator)
        return game

    def join_game(self, session_id: int, player: str) -> Game:
        game = engine.join_game(self._load(session_id), player)
        self.store.store(session_id, game)
        return game

    def begin_game(self, session_id: int, caller: str) -> Game:
        game = engine.begin_game(self._load(session_id), caller)
        self.store.store(session_id, game)
        # The ledger tracks two participants; the creator stands in for both
        self.hub.start_game(session_id, game.creator, game.creator, game.wager, game.wager)
        return game

    def submit_commitment(self, session_id: int, player: str, commitment: bytes) -> Game:
        game = engine.submit_commitment(self._load(session_id), player, commitment)
        self.store.store(session_id, game)
        return game

    def reveal_action(self, session_id: int, player: str, target: int, nonce: int) -> Game:
        game = engine.reveal_action(self._load(session_id), player, target, nonce)
        self.store.store(session_id, game)
        return game

    def submit_vote(self, session_id: int, player: str, target: int) -> Game:
        game = engine.submit_vote(self._load(session_id), player, target)
        self.store.store(session_id, game)
        return game

    def submit_action(self, session_id: int, player: str, target: int) -> Game:
        game = engine.submit_action(self._load(session_id), player, target)
        self.store.store(session_id, game)
        return game

    def resolve(self, session_id: int) -> Game:
        game = engine.resolve(self._load(session_id))
        self.store.store(session_id, game)
        if game.winner is not None:
            self.hub.end_game(session_id, game.winner == Team.TOWN)
        return game
