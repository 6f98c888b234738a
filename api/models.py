"""Pydantic request/response models for the API."""

from pydantic import BaseModel, Field, field_validator

from game.rules import MAX_NONCE, MAX_SESSION_ID, PASS_TARGET, ActionMode, Role
from game.state import Game

# Validation constants (no magic numbers in validation)
MAX_PLAYER_ID_LENGTH = 100
COMMITMENT_HEX_LENGTH = 64


class GameCreateRequest(BaseModel):
    """Body for POST /games."""

    session_id: int = Field(..., ge=0, le=MAX_SESSION_ID)
    creator: str = Field(..., min_length=1, max_length=MAX_PLAYER_ID_LENGTH)
    wager: int = Field(default=0, ge=0, description="Informational; forwarded to the ledger on start")
    mode: ActionMode | None = Field(
        default=None,
        description="commit_reveal or transparent; server default when omitted",
    )


class PlayerRequest(BaseModel):
    """Body naming the calling player (join, begin)."""

    player: str = Field(..., min_length=1, max_length=MAX_PLAYER_ID_LENGTH)


class CommitRequest(PlayerRequest):
    """Body for POST /games/{id}/commit."""

    commitment: str = Field(..., description="Hex SHA-256(target_u32_be || nonce_u64_be), optional 0x prefix")

    @field_validator("commitment")
    @classmethod
    def commitment_is_hex_digest(cls, v: str) -> str:
        v = v.lower().removeprefix("0x")
        if len(v) != COMMITMENT_HEX_LENGTH:
            raise ValueError(f"commitment must be {COMMITMENT_HEX_LENGTH} hex characters")
        try:
            bytes.fromhex(v)
        except ValueError:
            raise ValueError("commitment must be hex") from None
        return v

    def commitment_bytes(self) -> bytes:
        return bytes.fromhex(self.commitment)


class TargetRequest(PlayerRequest):
    """Body for vote and transparent action: seat index or PASS_TARGET."""

    target: int = Field(..., ge=0, le=PASS_TARGET)


class RevealRequest(TargetRequest):
    """Body for POST /games/{id}/reveal."""

    nonce: int = Field(..., ge=0, le=MAX_NONCE)


class SeatPublic(BaseModel):
    """Seat as shown to clients: role only when revealed, pending action never."""

    index: int
    occupant: str | None = None
    is_human: bool
    alive: bool
    role: str | None = Field(default=None, description="Set when dead, game over, or the viewer's own seat")
    submitted: bool
    committed: bool


class GameStateResponse(BaseModel):
    """Public game state for GET /games/{id}."""

    session_id: int
    creator: str
    mode: str
    phase: str
    day: int
    human_count: int
    wager: int
    winner: str | None = Field(default=None, description="mafia or town when game over")
    seats: list[SeatPublic]
    last_killed: int | None = None
    last_saved: bool = False
    last_voted_out: int | None = None
    last_investigated: int | None = Field(default=None, description="Only shown to the sheriff or after game over")
    invest_is_mafia: bool | None = None
    viewer_seat: int | None = None


def game_state_to_public(game: Game, viewer: str | None = None) -> GameStateResponse:
    """Build public response; hide roles of living seats other than the viewer's."""
    viewer_seat = game.seat_of(viewer) if viewer else None
    over = game.is_over()
    seats_public = []
    for i, s in enumerate(game.seats):
        shown = s.role is not None and (over or not s.alive or i == viewer_seat)
        seats_public.append(
            SeatPublic(
                index=i,
                occupant=s.occupant,
                is_human=s.is_human,
                alive=s.alive,
                role=s.role.value if shown else None,
                submitted=s.submitted,
                committed=s.commitment is not None,
            )
        )

    sheriff_view = over or (
        viewer_seat is not None and game.seats[viewer_seat].role == Role.SHERIFF
    )
    return GameStateResponse(
        session_id=game.session_id,
        creator=game.creator,
        mode=game.mode.value,
        phase=game.phase.value,
        day=game.day,
        human_count=game.human_count,
        wager=game.wager,
        winner=game.winner.value if game.winner else None,
        seats=seats_public,
        last_killed=game.last_killed,
        last_saved=game.last_saved,
        last_voted_out=game.last_voted_out,
        last_investigated=game.last_investigated if sheriff_view else None,
        invest_is_mafia=game.invest_is_mafia if sheriff_view else None,
        viewer_seat=viewer_seat,
    )
