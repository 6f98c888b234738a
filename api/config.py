"""Server configuration read from the environment."""

import os

from game.rules import DEFAULT_GAME_TTL_SECONDS, ActionMode

# Env var names
ENV_GAME_TTL_SECONDS = "MAFIA_GAME_TTL_SECONDS"
ENV_DEFAULT_MODE = "MAFIA_DEFAULT_MODE"
ENV_LOG_LEVEL = "MAFIA_LOG_LEVEL"
ENV_CORS_ORIGINS = "MAFIA_CORS_ORIGINS"


def get_game_ttl_seconds() -> int:
    """Store expiry, renewed on every write."""
    raw = os.environ.get(ENV_GAME_TTL_SECONDS)
    return int(raw) if raw else DEFAULT_GAME_TTL_SECONDS


def get_default_mode() -> ActionMode:
    """Action mode for games created without an explicit mode."""
    return ActionMode(os.environ.get(ENV_DEFAULT_MODE, ActionMode.COMMIT_REVEAL.value))


def get_log_level() -> str:
    return os.environ.get(ENV_LOG_LEVEL, "INFO").upper()


def get_cors_origins() -> list[str]:
    raw = os.environ.get(ENV_CORS_ORIGINS, "*")
    return [o.strip() for o in raw.split(",") if o.strip()]
