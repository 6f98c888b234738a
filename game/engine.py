"""Game engine: pure state transitions, no I/O.

Every public operation deep-copies the game it is given, validates against the
copy, mutates it and returns it. A raised GameError therefore leaves the
caller's game untouched.
"""

import copy
import logging
from typing import Optional, Sequence

from game.ai import fill_day_votes, fill_night_actions
from game.commitment import verify_commitment
from game.errors import ErrorKind, GameError
from game.rng import PhaseRng, shuffle_roles
from game.rules import (
    MAX_SEATS,
    MAX_SESSION_ID,
    NO_SELF_TARGET_ROLES,
    PASS_TARGET,
    RESOLVABLE_PHASES,
    ActionMode,
    Phase,
    Role,
    Team,
    night_phase_for,
)
from game.state import Game, Seat

logger = logging.getLogger(__name__)


def _require_active(game: Game) -> None:
    if game.is_over():
        raise GameError(ErrorKind.GAME_ALREADY_OVER)


def _require_phase(game: Game, *phases: Phase) -> None:
    if game.phase not in phases:
        raise GameError(
            ErrorKind.WRONG_PHASE,
            f"Expected phase {', '.join(p.value for p in phases)}; game is in {game.phase.value}",
        )


def _acting_seat(game: Game, player: str) -> int:
    """Return the seat index player acts from, after identity/alive/submitted checks."""
    idx = game.seat_of(player)
    if idx is None:
        raise GameError(ErrorKind.NOT_IN_GAME)
    seat = game.seats[idx]
    if not seat.alive:
        raise GameError(ErrorKind.NOT_ALIVE)
    if seat.submitted:
        raise GameError(ErrorKind.ALREADY_ACTED)
    return idx


def _enter_night(game: Game) -> None:
    """Move to the first night sub-phase; skip the commit step when no living human is left to commit."""
    game.phase = night_phase_for(game.mode)
    if game.phase == Phase.NIGHT_COMMIT and not game.living_humans():
        logger.debug("Session %d: no living humans, night %d skips commit", game.session_id, game.day)
        game.phase = Phase.NIGHT_REVEAL


def validate_target(game: Game, idx: int, target: int, night: bool) -> Optional[int]:
    """
    Check target for the seat at idx and return the action to store.
    Pass, and any night target from a Villager, become None.
    """
    role = game.seats[idx].role
    if night and role == Role.VILLAGER:
        return None
    if target == PASS_TARGET:
        return None
    if not 0 <= target < MAX_SEATS or not game.seats[target].alive:
        raise GameError(ErrorKind.INVALID_TARGET, f"Seat {target} is not a living seat")
    if night and target == idx and role in NO_SELF_TARGET_ROLES:
        raise GameError(ErrorKind.INVALID_TARGET, f"{role.value} cannot target itself")
    return target


def create_game(
    session_id: int,
    creator: str,
    wager: int = 0,
    mode: ActionMode = ActionMode.COMMIT_REVEAL,
) -> Game:
    """
    Create a lobby: creator takes seat 0, the other 7 seats are AI until humans join.
    Raises ValueError if session_id does not fit in a u32.
    """
    if not 0 <= session_id <= MAX_SESSION_ID:
        raise ValueError(f"session_id out of u32 range: {session_id}")
    game = Game(session_id=session_id, creator=creator, wager=wager, mode=mode)
    game.seats[0].occupant = creator
    return game


def join_game(game: Game, player: str) -> Game:
    """Seat player in the lowest unfilled slot. Returns new game."""
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, Phase.LOBBY)
    if game.human_count >= MAX_SEATS:
        raise GameError(ErrorKind.GAME_FULL)
    if game.seat_of(player) is not None:
        raise GameError(ErrorKind.ALREADY_JOINED)
    game.seats[game.human_count].occupant = player
    game.human_count += 1
    return game


def begin_game(game: Game, caller: str) -> Game:
    """Creator starts the game: shuffle roles onto all seats and enter night 1."""
    if caller != game.creator:
        raise GameError(ErrorKind.NOT_CREATOR)
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, Phase.LOBBY)
    for seat, role in zip(game.seats, shuffle_roles(game.session_id)):
        seat.role = role
    game.day = 1
    _enter_night(game)
    logger.info(
        "Session %d started with %d human(s), mode=%s",
        game.session_id, game.human_count, game.mode.value,
    )
    return game


def submit_commitment(game: Game, player: str, commitment: bytes) -> Game:
    """
    Store a hidden night action. Once every living human has committed the game
    moves to NIGHT_REVEAL; submitted flags are cleared and commitments kept.
    """
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, Phase.NIGHT_COMMIT)
    idx = _acting_seat(game, player)
    seat = game.seats[idx]
    seat.commitment = bytes(commitment)
    seat.submitted = True

    if all(game.seats[i].submitted for i in game.living_humans()):
        game.phase = Phase.NIGHT_REVEAL
        for s in game.seats:
            s.submitted = False
        logger.debug("Session %d: all humans committed, night %d reveal open", game.session_id, game.day)
    return game


def reveal_action(game: Game, player: str, target: int, nonce: int) -> Game:
    """Open a commitment. A mismatch is rejected and the seat may try again."""
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, Phase.NIGHT_REVEAL)
    idx = _acting_seat(game, player)
    seat = game.seats[idx]
    if seat.commitment is None:
        raise GameError(ErrorKind.NO_COMMITMENT)
    if not verify_commitment(seat.commitment, target, nonce):
        logger.warning("Session %d: reveal from seat %d does not match its commitment", game.session_id, idx)
        raise GameError(ErrorKind.INVALID_REVEAL)
    seat.action = validate_target(game, idx, target, night=True)
    seat.submitted = True
    return game


def submit_vote(game: Game, player: str, target: int) -> Game:
    """Day vote with a plaintext target (or PASS_TARGET to abstain)."""
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, Phase.DAY)
    idx = _acting_seat(game, player)
    _record(game.seats[idx], validate_target(game, idx, target, night=False))
    return game


def submit_action(game: Game, player: str, target: int) -> Game:
    """Plaintext action: night target in transparent mode, or a day vote."""
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, Phase.NIGHT, Phase.DAY)
    idx = _acting_seat(game, player)
    night = game.phase == Phase.NIGHT
    _record(game.seats[idx], validate_target(game, idx, target, night=night))
    return game


def _record(seat: Seat, action: Optional[int]) -> None:
    seat.action = action
    seat.submitted = True


def _first_action(game: Game, role: Role) -> Optional[int]:
    """Action of the first living seat of role (in seat order) that did not pass."""
    for seat in game.seats:
        if seat.alive and seat.role == role and seat.action is not None:
            return seat.action
    return None


def resolve_night(game: Game, rng: PhaseRng) -> None:
    """
    Resolve night (mutates game): AI fill, then kill unless saved, sheriff check.
    Only the first Mafia in seat order with a target decides the kill.
    """
    fill_night_actions(game, rng)

    kill_target = _first_action(game, Role.MAFIA)
    save_target = _first_action(game, Role.DOCTOR)
    invest_target = _first_action(game, Role.SHERIFF)

    game.last_killed = kill_target
    game.last_saved = False
    game.last_investigated = invest_target
    game.invest_is_mafia = (
        invest_target is not None and game.seats[invest_target].role == Role.MAFIA
    )
    game.last_voted_out = None

    if kill_target is not None:
        if save_target == kill_target:
            game.last_saved = True
        else:
            game.seats[kill_target].alive = False

    game.clear_transient()
    logger.info(
        "Session %d night %d: kill=%s saved=%s investigated=%s",
        game.session_id, game.day, kill_target, game.last_saved, invest_target,
    )


def tally_votes(game: Game) -> list[int]:
    """Votes received per seat, counting only living voters that did not abstain."""
    counts = [0] * MAX_SEATS
    for seat in game.seats:
        if seat.alive and seat.action is not None:
            counts[seat.action] += 1
    return counts


def pick_eliminated(counts: Sequence[int], alive: Sequence[bool]) -> Optional[int]:
    """
    Running-maximum scan in seat order. Only a strictly greater count replaces
    the leader, so ties go to the lowest index. No votes means no elimination.
    """
    max_votes = 0
    eliminated: Optional[int] = None
    for i in range(MAX_SEATS):
        if alive[i] and counts[i] > max_votes:
            max_votes = counts[i]
            eliminated = i
    return eliminated


def resolve_day(game: Game, rng: PhaseRng) -> None:
    """Resolve day vote (mutates game): AI fill, tally, eliminate the leader."""
    fill_day_votes(game, rng)
    counts = tally_votes(game)
    eliminated = pick_eliminated(counts, [s.alive for s in game.seats])

    game.last_voted_out = eliminated
    game.last_killed = None
    game.last_saved = False
    game.last_investigated = None
    game.invest_is_mafia = False
    if eliminated is not None:
        game.seats[eliminated].alive = False

    game.clear_transient()
    logger.info("Session %d day %d: votes=%s eliminated=%s", game.session_id, game.day, counts, eliminated)


def evaluate_winner(game: Game) -> Optional[Team]:
    """Town wins with no Mafia left; Mafia wins at parity or better."""
    mafia_alive, town_alive = game.count_alive()
    if mafia_alive == 0:
        return Team.TOWN
    if mafia_alive >= town_alive:
        return Team.MAFIA
    return None


def resolve(game: Game) -> Game:
    """
    Resolve the current night or day and advance the phase; sets the winner and
    moves to OVER when a side has won. Returns new game.
    """
    game = copy.deepcopy(game)
    _require_active(game)
    _require_phase(game, *RESOLVABLE_PHASES)

    rng = PhaseRng.for_phase(game.session_id, game.day, game.phase)
    if game.phase == Phase.DAY:
        resolve_day(game, rng)
        game.day += 1
        _enter_night(game)
    else:
        resolve_night(game, rng)
        game.phase = Phase.DAY

    winner = evaluate_winner(game)
    if winner is not None:
        game.winner = winner
        game.phase = Phase.OVER
        logger.info("Session %d over: %s wins", game.session_id, winner.value)
    return game
