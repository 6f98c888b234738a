"""Game rules and constants for the 8-seat Mafia engine."""

from enum import Enum


class Role(str, Enum):
    """Seat roles in the game."""

    MAFIA = "mafia"
    VILLAGER = "villager"
    DOCTOR = "doctor"
    SHERIFF = "sheriff"


class Team(str, Enum):
    """Winning side."""

    MAFIA = "mafia"
    TOWN = "town"


class Phase(str, Enum):
    """Current game phase."""

    LOBBY = "lobby"
    NIGHT_COMMIT = "night_commit"
    NIGHT_REVEAL = "night_reveal"
    NIGHT = "night"  # transparent mode: single night phase
    DAY = "day"
    OVER = "over"

    @property
    def code(self) -> int:
        return PHASE_CODES[self]


class ActionMode(str, Enum):
    """How night actions are submitted."""

    COMMIT_REVEAL = "commit_reveal"
    TRANSPARENT = "transparent"


# Used as the phase component of the RNG seed
PHASE_CODES = {
    Phase.LOBBY: 0,
    Phase.NIGHT_COMMIT: 1,
    Phase.NIGHT_REVEAL: 2,
    Phase.DAY: 3,
    Phase.OVER: 4,
    Phase.NIGHT: 1,
}

# Phases in which resolve may run
RESOLVABLE_PHASES = (Phase.NIGHT_REVEAL, Phase.NIGHT, Phase.DAY)

# Roles whose night target may not be the acting seat
NO_SELF_TARGET_ROLES = (Role.MAFIA, Role.SHERIFF)

MAX_SEATS = 8

# 2 Mafia, 1 Doctor, 1 Sheriff, 4 Villager; shuffled onto seats at game start
ROLE_TEMPLATE = (
    Role.MAFIA, Role.MAFIA,
    Role.DOCTOR, Role.SHERIFF,
    Role.VILLAGER, Role.VILLAGER, Role.VILLAGER, Role.VILLAGER,
)

# Reserved target meaning pass/abstain (u32 max)
PASS_TARGET = 2**32 - 1

# Session ids are u32; the seed preimage packs them in 4 bytes
MAX_SESSION_ID = 2**32 - 1
MAX_NONCE = 2**64 - 1

# Stored games expire unless rewritten within this window (30 days)
DEFAULT_GAME_TTL_SECONDS = 30 * 24 * 60 * 60


def night_phase_for(mode: ActionMode) -> Phase:
    """Return the phase a night starts in for the given action mode."""
    return Phase.NIGHT_COMMIT if mode == ActionMode.COMMIT_REVEAL else Phase.NIGHT
