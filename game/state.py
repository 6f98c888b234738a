"""Game state types for the Mafia engine."""

from dataclasses import dataclass, field
from typing import Optional

from game.rules import MAX_SEATS, ActionMode, Phase, Role, Team


@dataclass
class Seat:
    """One of the 8 fixed slots. No occupant means the seat is AI-controlled."""

    occupant: Optional[str] = None
    role: Optional[Role] = None
    alive: bool = True
    action: Optional[int] = None  # target seat index; None = pass/abstain
    submitted: bool = False
    commitment: Optional[bytes] = None

    @property
    def is_human(self) -> bool:
        return self.occupant is not None

    def clear_transient(self) -> None:
        """Forget this phase's action, submission and commitment."""
        self.action = None
        self.submitted = False
        self.commitment = None


def _empty_seats() -> list[Seat]:
    return [Seat() for _ in range(MAX_SEATS)]


@dataclass
class Game:
    """Full game state for one session."""

    session_id: int
    creator: str
    seats: list[Seat] = field(default_factory=_empty_seats)
    human_count: int = 1
    phase: Phase = Phase.LOBBY
    day: int = 0
    winner: Optional[Team] = None
    mode: ActionMode = ActionMode.COMMIT_REVEAL
    # Last-night results
    last_killed: Optional[int] = None
    last_saved: bool = False
    last_investigated: Optional[int] = None
    invest_is_mafia: bool = False
    # Last-day result
    last_voted_out: Optional[int] = None
    wager: int = 0

    def alive_indices(self) -> list[int]:
        """Return indices of living seats, in seat order."""
        return [i for i, s in enumerate(self.seats) if s.alive]

    def town_indices(self) -> list[int]:
        """Return indices of living non-Mafia seats."""
        return [i for i, s in enumerate(self.seats) if s.alive and s.role != Role.MAFIA]

    def living_humans(self) -> list[int]:
        return [i for i, s in enumerate(self.seats) if s.alive and s.is_human]

    def seat_of(self, player: str) -> Optional[int]:
        """Return the seat index occupied by player, or None."""
        for i, s in enumerate(self.seats):
            if s.occupant == player:
                return i
        return None

    def count_alive(self) -> tuple[int, int]:
        """Return (alive mafia, alive town)."""
        mafia = sum(1 for s in self.seats if s.alive and s.role == Role.MAFIA)
        town = sum(1 for s in self.seats if s.alive and s.role != Role.MAFIA)
        return mafia, town

    def is_over(self) -> bool:
        return self.winner is not None

    def clear_transient(self) -> None:
        for s in self.seats:
            s.clear_transient()
