"""FastAPI app: create, join, begin, commit, reveal, vote, resolve, get game."""

import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from api.config import get_cors_origins, get_default_mode, get_game_ttl_seconds, get_log_level
from api.game_hub import LoggingGameHub
from api.game_store import InMemoryGameStore
from api.models import (
    CommitRequest,
    GameCreateRequest,
    GameStateResponse,
    PlayerRequest,
    RevealRequest,
    TargetRequest,
    game_state_to_public,
)
from game.errors import ErrorKind, GameError
from game.service import GameService

logging.basicConfig(level=get_log_level())

app = FastAPI(title="Mafia Rules Engine API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

game_store = InMemoryGameStore(ttl_seconds=get_game_ttl_seconds())
game_hub = LoggingGameHub()
service = GameService(game_store, game_hub)

_STATUS_BY_KIND = {
    ErrorKind.GAME_NOT_FOUND: 404,
    ErrorKind.NOT_IN_GAME: 403,
    ErrorKind.NOT_CREATOR: 403,
    ErrorKind.GAME_FULL: 409,
    ErrorKind.ALREADY_JOINED: 409,
    ErrorKind.WRONG_PHASE: 409,
    ErrorKind.ALREADY_ACTED: 409,
    ErrorKind.GAME_ALREADY_OVER: 409,
    ErrorKind.SESSION_EXISTS: 409,
    ErrorKind.INVALID_TARGET: 400,
    ErrorKind.NOT_ALIVE: 400,
    ErrorKind.INVALID_REVEAL: 400,
    ErrorKind.NO_COMMITMENT: 400,
}


def _http_error(e: GameError) -> HTTPException:
    return HTTPException(
        _STATUS_BY_KIND[e.kind],
        {"error": e.kind.label, "code": int(e.kind), "message": str(e)},
    )


@app.post("/games", response_model=GameStateResponse, tags=["Games"], summary="Create game")
def create_game(body: GameCreateRequest):
    """Create a lobby. The creator takes seat 0; other seats are AI until humans join."""
    try:
        game = service.create_game(
            body.session_id,
            body.creator,
            wager=body.wager,
            mode=body.mode or get_default_mode(),
        )
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.creator)


@app.get("/games/{session_id}", response_model=GameStateResponse, tags=["Games"], summary="Get game state")
def get_game(session_id: int, viewer: str | None = None):
    """Get public game state; viewer sees their own role."""
    try:
        game = service.get_game(session_id)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=viewer)


@app.post("/games/{session_id}/join", response_model=GameStateResponse, tags=["Games"], summary="Join lobby")
def join_game(session_id: int, body: PlayerRequest):
    try:
        game = service.join_game(session_id, body.player)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.player)


@app.post("/games/{session_id}/begin", response_model=GameStateResponse, tags=["Games"], summary="Begin game")
def begin_game(session_id: int, body: PlayerRequest):
    """Creator only: assign roles and enter night 1."""
    try:
        game = service.begin_game(session_id, body.player)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.player)


@app.post("/games/{session_id}/commit", response_model=GameStateResponse, tags=["Actions"], summary="Commit night action")
def commit_action(session_id: int, body: CommitRequest):
    """Submit the hash of a hidden night target."""
    try:
        game = service.submit_commitment(session_id, body.player, body.commitment_bytes())
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.player)


@app.post("/games/{session_id}/reveal", response_model=GameStateResponse, tags=["Actions"], summary="Reveal night action")
def reveal_action(session_id: int, body: RevealRequest):
    """Open a commitment with its target and nonce."""
    try:
        game = service.reveal_action(session_id, body.player, body.target, body.nonce)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.player)


@app.post("/games/{session_id}/vote", response_model=GameStateResponse, tags=["Actions"], summary="Day vote")
def vote(session_id: int, body: TargetRequest):
    try:
        game = service.submit_vote(session_id, body.player, body.target)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.player)


@app.post("/games/{session_id}/action", response_model=GameStateResponse, tags=["Actions"], summary="Plaintext action")
def submit_action(session_id: int, body: TargetRequest):
    """Transparent-mode night action, or a day vote."""
    try:
        game = service.submit_action(session_id, body.player, body.target)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game, viewer=body.player)


@app.post("/games/{session_id}/resolve", response_model=GameStateResponse, tags=["Games"], summary="Resolve phase")
def resolve(session_id: int):
    """Resolve the current night or day. Anyone may call."""
    try:
        game = service.resolve(session_id)
    except GameError as e:
        raise _http_error(e)
    return game_state_to_public(game)


@app.get("/games", response_model=list[int], tags=["Games"], summary="List session IDs")
def list_games_route():
    """List all live session IDs."""
    return game_store.list_sessions()


@app.get("/health", tags=["System"], summary="Health check")
def health():
    return {"status": "ok"}
