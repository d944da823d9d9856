"""Roster slots for a day: readiness checks, renames and the share line."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence
from uuid import uuid4

from fut5.config import DEFAULT_RULES, DayRules
from fut5.errors import IncompleteRoster
from fut5.models import Player


def _name_key(name: str) -> str:
    return name.strip().lower()


def new_player(name: str = "") -> Player:
    return Player(id=uuid4().hex, name=name)


def empty_players(rules: DayRules = DEFAULT_RULES) -> List[Player]:
    """Return a fresh roster of blank slots."""

    return [new_player() for _ in range(rules.roster_size)]


def normalize_players(players: Sequence[Player], rules: DayRules = DEFAULT_RULES) -> List[Player]:
    """Pad a stored roster with blank slots, or cut it down, to the roster size."""

    fixed = list(players[: rules.roster_size])
    while len(fixed) < rules.roster_size:
        fixed.append(new_player())
    return fixed


def named_players(players: Iterable[Player]) -> List[Player]:
    return [player for player in players if player.name.strip()]


def _duplicate_names(players: Iterable[Player]) -> List[str]:
    counts = Counter(_name_key(player.name) for player in players)
    return sorted(name for name, count in counts.items() if count > 1)


def is_ready(players: Sequence[Player], rules: DayRules = DEFAULT_RULES) -> bool:
    named = named_players(players)
    if len(named) != rules.roster_size:
        return False
    return len({_name_key(player.name) for player in named}) == rules.roster_size


def ensure_ready(players: Sequence[Player], rules: DayRules = DEFAULT_RULES) -> List[Player]:
    """Return the named players, raising ``IncompleteRoster`` unless the roster is ready."""

    named = named_players(players)
    if len(named) != rules.roster_size:
        raise IncompleteRoster(
            f"Enter {rules.roster_size} unique player names ({len(named)}/{rules.roster_size} filled)"
        )
    duplicates = _duplicate_names(named)
    if duplicates:
        raise IncompleteRoster(f"Player names must be unique; repeated: {', '.join(duplicates)}")
    return named


def rename_player(players: Sequence[Player], player_id: str, name: str) -> List[Player]:
    """Return a copy of ``players`` with one slot renamed; names are stored trimmed."""

    if not any(player.id == player_id for player in players):
        raise KeyError(f"Player {player_id} not found")
    return [
        player.model_copy(update={"name": name.strip()}) if player.id == player_id else player
        for player in players
    ]


def share_text(day: str, players: Iterable[Player], rules: DayRules = DEFAULT_RULES) -> str:
    names = ", ".join(player.name.strip() for player in named_players(players))
    return f"{rules.share_label} {day}: {names}"
