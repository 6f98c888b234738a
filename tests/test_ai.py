"""Tests for AI fallback actions."""

import copy

from game.ai import fill_day_votes, fill_night_actions
from game.rng import PhaseRng
from game.rules import Role
from game.state import Game, Seat

ROLES = [
    Role.MAFIA, Role.VILLAGER, Role.DOCTOR, Role.MAFIA,
    Role.SHERIFF, Role.VILLAGER, Role.VILLAGER, Role.VILLAGER,
]


def _game(human_seats=()) -> Game:
    seats = [Seat(role=r) for r in ROLES]
    for i in human_seats:
        seats[i].occupant = f"h{i}"
    return Game(session_id=1, creator="h0", seats=seats, day=1)


def _rng(day: int = 1) -> PhaseRng:
    return PhaseRng.for_phase(1, day, 2)


def test_night_policies_over_many_streams():
    for day in range(1, 60):
        game = _game()
        fill_night_actions(game, _rng(day))
        town = game.town_indices()
        assert game.seats[0].action in town
        assert game.seats[3].action in town
        assert game.seats[2].action in range(8)
        assert game.seats[4].action != 4
        assert game.seats[4].action in range(8)
        for i in (1, 5, 6, 7):
            assert game.seats[i].action is None
        assert all(s.submitted for s in game.seats)


def test_humans_are_not_filled():
    game = _game(human_seats=(0, 2))
    fill_night_actions(game, _rng())
    assert game.seats[0].action is None and not game.seats[0].submitted
    assert game.seats[2].action is None and not game.seats[2].submitted
    assert game.seats[3].submitted


def test_submitted_and_dead_seats_skipped():
    game = _game()
    game.seats[0].action = 5
    game.seats[0].submitted = True
    game.seats[4].alive = False
    fill_night_actions(game, _rng())
    assert game.seats[0].action == 5
    assert game.seats[4].action is None
    assert not game.seats[4].submitted


def test_mafia_passes_without_town():
    game = _game()
    for i, s in enumerate(game.seats):
        if s.role != Role.MAFIA:
            s.alive = False
    fill_night_actions(game, _rng())
    assert game.seats[0].action is None
    assert game.seats[3].action is None


def test_day_votes_never_self():
    for day in range(1, 60):
        game = _game()
        game.seats[6].alive = False
        fill_day_votes(game, _rng(day))
        for i, s in enumerate(game.seats):
            if i == 6:
                assert not s.submitted
                continue
            assert s.action != i
            assert s.action in game.alive_indices()


def test_same_stream_same_choices():
    a = _game(human_seats=(1,))
    b = copy.deepcopy(a)
    fill_night_actions(a, _rng(4))
    fill_night_actions(b, _rng(4))
    assert a == b
