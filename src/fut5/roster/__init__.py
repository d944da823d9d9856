"""Roster helpers for the ten daily player slots."""

from .validation import (
    empty_players,
    ensure_ready,
    is_ready,
    named_players,
    new_player,
    normalize_players,
    rename_player,
    share_text,
)

__all__ = [
    "empty_players",
    "ensure_ready",
    "is_ready",
    "named_players",
    "new_player",
    "normalize_players",
    "rename_player",
    "share_text",
]
