"""REST API for proposing daily splits and reading the consensus."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from fastapi import FastAPI, HTTPException

from fut5.api.schemas import (
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
from fut5.consensus import SplitTally, resolve, tally
from fut5.day import DayService
from fut5.errors import DuplicateRecentSubmission, Fut5Error
from fut5.models import ConsensusResult, DayState, Player, Split, Submission
from fut5.persistence import DayStore
from fut5.roster import is_ready, share_text


def _player_response(player: Player) -> PlayerResponse:
    return PlayerResponse(id=player.id, name=player.name)


def _split_response(split: Split) -> SplitResponse:
    return SplitResponse(
        team_a=[_player_response(player) for player in split.team_a],
        team_b=[_player_response(player) for player in split.team_b],
    )


def _submission_response(submission: Submission) -> SubmissionResponse:
    return SubmissionResponse(
        id=submission.id,
        author=submission.author,
        created_at=submission.created_at,
        split=_split_response(submission.split),
    )


def _consensus_payload(result: Optional[ConsensusResult]) -> ConsensusPayload | None:
    if result is None:
        return None
    return ConsensusPayload(votes=result.votes, split=_split_response(result.split))


def _tally_responses(groups: Iterable[SplitTally]) -> list[TallyResponse]:
    return [
        TallyResponse(key=group.key, votes=group.votes, split=_split_response(group.split))
        for group in groups
    ]


def _raise_for_error(exc: Fut5Error) -> None:
    status = 409 if isinstance(exc, DuplicateRecentSubmission) else 400
    raise HTTPException(status_code=status, detail=exc.message) from exc


def create_app(db_path: Path | str | None = None) -> FastAPI:
    app = FastAPI(title="fut5 team splits")
    store = DayStore(db_path or Path(__file__).resolve().parent.parent / "fut5.sqlite")
    service = DayService(store)
    app.state.day_store = store
    app.state.day_service = service

    def day_response(day: str, state: DayState) -> DayResponse:
        return DayResponse(
            day=day,
            ready=is_ready(state.players, service.rules),
            players=[_player_response(player) for player in state.players],
            submissions=[_submission_response(submission) for submission in state.submissions],
            consensus=_consensus_payload(resolve(state.submissions, state.players)),
            tallies=_tally_responses(tally(state.submissions)),
            share_text=share_text(day, state.players, service.rules),
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/days")
    async def list_days(limit: int = 50) -> list[str]:
        return service.list_days(limit=limit)

    @app.get("/days/{day}", response_model=DayResponse)
    async def get_day(day: date):
        key = day.isoformat()
        return day_response(key, service.load(key))

    @app.put("/days/{day}/players/{player_id}", response_model=DayResponse)
    async def update_player(day: date, player_id: str, payload: PlayerNameRequest):
        key = day.isoformat()
        try:
            state = service.update_player_name(key, player_id, payload.name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail="Player not found") from exc
        return day_response(key, state)

    @app.post("/days/{day}/players/save", response_model=DayResponse)
    async def save_players(day: date):
        key = day.isoformat()
        try:
            state = service.save_players(key)
        except Fut5Error as exc:
            _raise_for_error(exc)
        return day_response(key, state)

    @app.post("/days/{day}/submissions", response_model=SubmissionResponse, status_code=201)
    async def add_submission(day: date, payload: SubmissionRequest):
        try:
            submission = service.add_submission(day.isoformat(), payload.author, payload.team_a)
        except Fut5Error as exc:
            _raise_for_error(exc)
        return _submission_response(submission)

    @app.delete("/days/{day}/submissions/{submission_id}")
    async def delete_submission(day: date, submission_id: str) -> dict[str, bool]:
        return {"deleted": service.delete_submission(day.isoformat(), submission_id)}

    @app.get("/days/{day}/consensus", response_model=ConsensusResponse)
    async def get_consensus(day: date):
        key = day.isoformat()
        state = service.load(key)
        return ConsensusResponse(
            day=key,
            consensus=_consensus_payload(resolve(state.submissions, state.players)),
            tallies=_tally_responses(tally(state.submissions)),
        )

    @app.post("/days/{day}/reset", response_model=DayResponse)
    async def reset_day(day: date):
        key = day.isoformat()
        return day_response(key, service.reset_day(key))

    @app.get("/days/{day}/share", response_model=ShareResponse)
    async def get_share(day: date):
        key = day.isoformat()
        return ShareResponse(day=key, text=service.share_text(key))

    return app
