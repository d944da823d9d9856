"""Canonical day models shared across the roster, consensus and storage layers."""

from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Player(BaseModel):
    """One of the roster slots for a day; ``name`` may be blank while unfilled."""

    id: str = Field(..., min_length=1)
    name: str = ""

    model_config = ConfigDict(frozen=True)


class Split(BaseModel):
    """Two disjoint teams covering the named players of a day.

    Which side is ``team_a`` carries no meaning when splits are compared; use
    :func:`fut5.consensus.canonical_key` for equality.
    """

    team_a: List[Player]
    team_b: List[Player]

    model_config = ConfigDict(frozen=True)

    def names(self) -> tuple[list[str], list[str]]:
        return [p.name for p in self.team_a], [p.name for p in self.team_b]


class Submission(BaseModel):
    """One participant's proposed split for a day."""

    id: str = Field(..., min_length=1)
    author: str
    split: Split
    created_at: datetime

    model_config = ConfigDict(frozen=True)


class ConsensusResult(BaseModel):
    split: Split
    votes: int = Field(..., ge=1)

    model_config = ConfigDict(frozen=True)


class DayState(BaseModel):
    """Snapshot of a day as exchanged with the day-state provider."""

    players: List[Player]
    submissions: List[Submission] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
