"""Notification ledger: told when a game starts and when it ends."""

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class HubCall:
    """One start_game or end_game notification."""

    kind: str  # "start" or "end"
    session_id: int
    player1: Optional[str] = None
    player2: Optional[str] = None
    player1_points: int = 0
    player2_points: int = 0
    player1_won: Optional[bool] = None


class LoggingGameHub:
    """Hub that logs notifications and keeps them for inspection."""

    def __init__(self):
        self.calls: list[HubCall] = []

    def start_game(
        self,
        session_id: int,
        player1: str,
        player2: str,
        player1_points: int,
        player2_points: int,
    ) -> None:
        logger.info("Hub: session %d started (%s vs %s, wager %d)", session_id, player1, player2, player1_points)
        self.calls.append(
            HubCall(
                kind="start",
                session_id=session_id,
                player1=player1,
                player2=player2,
                player1_points=player1_points,
                player2_points=player2_points,
            )
        )

    def end_game(self, session_id: int, player1_won: bool) -> None:
        logger.info("Hub: session %d ended, town won=%s", session_id, player1_won)
        self.calls.append(HubCall(kind="end", session_id=session_id, player1_won=player1_won))

    def calls_for(self, session_id: int) -> list[HubCall]:
        return [c for c in self.calls if c.session_id == session_id]
