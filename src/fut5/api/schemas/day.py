from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class PlayerResponse(BaseModel):
    id: str
    name: str


class SplitResponse(BaseModel):
    team_a: List[PlayerResponse]
    team_b: List[PlayerResponse]


class SubmissionResponse(BaseModel):
    id: str
    author: str
    created_at: datetime
    split: SplitResponse


class TallyResponse(BaseModel):
    key: str
    votes: int
    split: SplitResponse


class ConsensusPayload(BaseModel):
    votes: int
    split: SplitResponse


class ConsensusResponse(BaseModel):
    day: str
    consensus: ConsensusPayload | None
    tallies: List[TallyResponse]


class DayResponse(BaseModel):
    day: str
    ready: bool
    players: List[PlayerResponse]
    submissions: List[SubmissionResponse]
    consensus: ConsensusPayload | None
    tallies: List[TallyResponse]
    share_text: str


class PlayerNameRequest(BaseModel):
    name: str = Field(default="", max_length=80)


class SubmissionRequest(BaseModel):
    author: str | None = Field(default=None, max_length=80)
    team_a: List[str] = Field(..., description="Names selected for team A")


class ShareResponse(BaseModel):
    day: str
    text: str
