"""Pydantic models for API I/O."""

from .day import (
    ConsensusPayload,
    ConsensusResponse,
    DayResponse,
    PlayerNameRequest,
    PlayerResponse,
    ShareResponse,
    SplitResponse,
    SubmissionRequest,
    SubmissionResponse,
    TallyResponse,
)

__all__ = [
    "ConsensusPayload",
    "ConsensusResponse",
    "DayResponse",
    "PlayerNameRequest",
    "PlayerResponse",
    "ShareResponse",
    "SplitResponse",
    "SubmissionRequest",
    "SubmissionResponse",
    "TallyResponse",
]
