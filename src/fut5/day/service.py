"""User intents for a single day: roster edits, submissions and consensus."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from fut5.config import DayRules, get_rules
from fut5.consensus import (
    SplitTally,
    SubmissionLog,
    build_split,
    canonical_key,
    make_submission,
    resolve,
    tally,
)
from fut5.errors import DuplicateRecentSubmission, InvalidSelectionSize, UnknownPlayerSelection
from fut5.models import ConsensusResult, DayState, Submission
from fut5.persistence import DayStore
from fut5.roster import empty_players, ensure_ready, normalize_players, rename_player, share_text

logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DayService:
    """Apply user intents to the day snapshots held by a :class:`DayStore`."""

    def __init__(
        self,
        store: DayStore,
        rules: Optional[DayRules] = None,
        clock: Optional[Clock] = None,
    ):
        self.store = store
        self.rules = rules or get_rules()
        self.clock = clock or _utcnow

    def load(self, day: str) -> DayState:
        record = self.store.get_day(day)
        if record is None:
            players = empty_players(self.rules)
            self.store.save_players(day, players)
            logger.info("Created day %s", day)
            return DayState(players=players, submissions=[])
        players = normalize_players(record.players, self.rules)
        if len(record.players) != len(players):
            self.store.save_players(day, players)
        return DayState(players=players, submissions=record.submissions)

    def list_days(self, limit: int = 50) -> List[str]:
        return self.store.list_days(limit=limit)

    def update_player_name(self, day: str, player_id: str, name: str) -> DayState:
        state = self.load(day)
        players = rename_player(state.players, player_id, name)
        self.store.save_players(day, players)
        return DayState(players=players, submissions=state.submissions)

    def save_players(self, day: str) -> DayState:
        state = self.load(day)
        ensure_ready(state.players, self.rules)
        self.store.save_players(day, state.players)
        return state

    def add_submission(
        self,
        day: str,
        author: Optional[str],
        selected_names: Iterable[str],
    ) -> Submission:
        state = self.load(day)
        named = ensure_ready(state.players, self.rules)

        selection = {name.strip() for name in selected_names}
        if len(selection) != self.rules.team_size:
            raise InvalidSelectionSize(len(selection), self.rules.team_size)
        unknown = selection - {player.name.strip() for player in named}
        if unknown:
            raise UnknownPlayerSelection(unknown)
        # Roster names may carry stray whitespace from older snapshots.
        selection = {player.name for player in named if player.name.strip() in selection}

        now = self.clock()
        split = build_split(selection, named)
        submission = make_submission(author, split, now, self.rules)
        log = SubmissionLog(state.submissions)
        try:
            log.submit(submission, now, self.rules.duplicate_window)
        except DuplicateRecentSubmission:
            logger.info(
                "Rejected repeat submission from %s on %s (%s)",
                submission.author,
                day,
                canonical_key(split),
            )
            raise
        self.store.save_submissions(day, log.entries)
        logger.info(
            "Accepted submission %s from %s on %s (%d total)",
            submission.id,
            submission.author,
            day,
            len(log),
        )
        return submission

    def delete_submission(self, day: str, submission_id: str) -> bool:
        state = self.load(day)
        log = SubmissionLog(state.submissions)
        if not log.remove(submission_id):
            return False
        self.store.save_submissions(day, log.entries)
        logger.info("Deleted submission %s on %s", submission_id, day)
        return True

    def reset_day(self, day: str) -> DayState:
        state = DayState(players=empty_players(self.rules), submissions=[])
        self.store.save_players(day, state.players)
        self.store.save_submissions(day, state.submissions)
        logger.info("Reset day %s", day)
        return state

    def consensus(self, day: str) -> Optional[ConsensusResult]:
        state = self.load(day)
        return resolve(state.submissions, state.players)

    def tally(self, day: str) -> List[SplitTally]:
        return tally(self.load(day).submissions)

    def share_text(self, day: str) -> str:
        return share_text(day, self.load(day).players, self.rules)
