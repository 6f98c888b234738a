"""Rules engine for 8-seat Mafia."""

from game.engine import (
    create_game,
    join_game,
    begin_game,
    submit_commitment,
    reveal_action,
    submit_vote,
    submit_action,
    resolve,
    evaluate_winner,
)
from game.commitment import compute_commitment, make_commitment, verify_commitment
from game.errors import ErrorKind, GameError
from game.rules import ActionMode, Phase, Role, Team, PASS_TARGET
from game.service import GameService
from game.state import Game, Seat

__all__ = [
    "create_game",
    "join_game",
    "begin_game",
    "submit_commitment",
    "reveal_action",
    "submit_vote",
    "submit_action",
    "resolve",
    "evaluate_winner",
    "compute_commitment",
    "make_commitment",
    "verify_commitment",
    "ErrorKind",
    "GameError",
    "ActionMode",
    "Phase",
    "Role",
    "Team",
    "PASS_TARGET",
    "GameService",
    "Game",
    "Seat",
]
