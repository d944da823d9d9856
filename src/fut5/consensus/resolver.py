"""Reduce a day's submissions to the most-voted split."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence

from fut5.models import ConsensusResult, Player, Split, Submission
from fut5.roster import named_players

from .codec import TEAM_DELIMITER, canonical_key


@dataclass(frozen=True)
class SplitTally:
    """Distinct split with the number of submissions proposing it."""

    key: str
    split: Split
    votes: int


def tally(submissions: Iterable[Submission]) -> List[SplitTally]:
    """Group submissions by canonical key, keeping first-seen order and split."""

    order: List[str] = []
    splits: Dict[str, Split] = {}
    votes: Dict[str, int] = {}
    for submission in submissions:
        key = canonical_key(submission.split)
        if key not in splits:
            order.append(key)
            splits[key] = submission.split
            votes[key] = 0
        votes[key] += 1
    return [SplitTally(key=key, split=splits[key], votes=votes[key]) for key in order]


def _team_sort_key(names: List[str]) -> tuple[str, str]:
    return (names[0] if names else "", TEAM_DELIMITER.join(names))


def resolve(
    submissions: Sequence[Submission],
    players: Sequence[Player],
) -> Optional[ConsensusResult]:
    """Return the most-voted split, or ``None`` while nobody has submitted.

    Ties go to the group seen first when scanning ``submissions`` in stored
    (most-recent-first) order. The winning split is relabelled so that team A
    is the team whose alphabetically first name sorts first, and players are
    re-read from the current roster by name; renamed players are dropped.
    """

    groups = tally(submissions)
    if not groups:
        return None

    top = groups[0]
    for group in groups[1:]:
        if group.votes > top.votes:
            top = group

    names_a, names_b = top.split.names()
    left, right = sorted((sorted(names_a), sorted(names_b)), key=_team_sort_key)

    by_name = {player.name: player for player in named_players(players)}

    def to_team(names: List[str]) -> List[Player]:
        return [by_name[name] for name in names if name in by_name]

    return ConsensusResult(
        split=Split(team_a=to_team(left), team_b=to_team(right)),
        votes=top.votes,
    )
