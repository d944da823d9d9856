"""Build team splits from a selection and fingerprint them for comparison."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from fut5.models import Player, Split

TEAM_DELIMITER = ","
SIDE_DELIMITER = "__"


def build_split(selected_names: Iterable[str], named_players: Sequence[Player]) -> Split:
    """Partition ``named_players`` into the selected team A and the rest.

    Cardinality is the caller's concern: the roster must already be complete
    and the selection must hold a full team drawn from its names.
    """

    selected = set(selected_names)
    team_a = [player for player in named_players if player.name in selected]
    team_b = [player for player in named_players if player.name not in selected]
    return Split(team_a=team_a, team_b=team_b)


def swap_split(split: Split) -> Split:
    return Split(team_a=split.team_b, team_b=split.team_a)


def _joined(names: Iterable[str]) -> str:
    return TEAM_DELIMITER.join(sorted(names))


def canonical_key(split: Split) -> str:
    """Return a fingerprint independent of side labels and player order."""

    names_a, names_b = split.names()
    first, second = sorted((_joined(names_a), _joined(names_b)))
    return f"{first}{SIDE_DELIMITER}{second}"


def toggle_selection(selection: Sequence[str], name: str, limit: int = 5) -> List[str]:
    """Add or remove ``name``; past ``limit`` the oldest picks fall off."""

    updated = [item for item in selection if item != name]
    if len(updated) == len(selection):
        updated.append(name)
    if len(updated) > limit:
        updated = updated[len(updated) - limit :]
    return updated
