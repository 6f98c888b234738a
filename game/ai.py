"""Deterministic actions for AI-controlled seats.

Only seats with no human occupant that are alive and have not submitted are
filled. Humans who did not act are left as pass.
"""

import logging

from game.rng import PhaseRng
from game.rules import Role
from game.state import Game

logger = logging.getLogger(__name__)


def fill_night_actions(game: Game, rng: PhaseRng) -> None:
    """Pick night targets for AI seats (mutates game)."""
    living_all = game.alive_indices()
    living_town = game.town_indices()
    for i, seat in enumerate(game.seats):
        if not seat.alive or seat.submitted or seat.is_human:
            continue
        if seat.role == Role.MAFIA:
            action = rng.pick(living_town)
        elif seat.role == Role.DOCTOR:
            action = rng.pick(living_all)
        elif seat.role == Role.SHERIFF:
            action = rng.pick_excluding(living_all, i)
        else:
            action = None
        seat.action = action
        seat.submitted = True
        logger.debug("AI seat %d (%s) night target: %s", i, seat.role.value if seat.role else None, action)


def fill_day_votes(game: Game, rng: PhaseRng) -> None:
    """Pick day votes for AI seats (mutates game)."""
    living = game.alive_indices()
    for i, seat in enumerate(game.seats):
        if not seat.alive or seat.submitted or seat.is_human:
            continue
        seat.action = rng.pick_excluding(living, i)
        seat.submitted = True
        logger.debug("AI seat %d votes for %s", i, seat.action)
