"""Pydantic models for players, splits and submissions."""

from .player import ConsensusResult, DayState, Player, Split, Submission

__all__ = [
    "ConsensusResult",
    "DayState",
    "Player",
    "Split",
    "Submission",
]
