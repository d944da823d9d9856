"""Per-day submission log with a soft guard against quick resubmits."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Iterator, List, Optional
from uuid import uuid4

from fut5.config import DEFAULT_RULES, DayRules
from fut5.errors import DuplicateRecentSubmission
from fut5.models import Split, Submission

from .codec import canonical_key


def make_submission(
    author: str | None,
    split: Split,
    now: datetime,
    rules: DayRules = DEFAULT_RULES,
) -> Submission:
    author = (author or "").strip() or rules.anonymous_author
    return Submission(id=uuid4().hex, author=author, split=split, created_at=now)


def is_recent_duplicate(
    existing: Submission,
    candidate: Submission,
    now: datetime,
    window: timedelta,
) -> bool:
    """True when ``existing`` is the same author and split, made within ``window`` of ``now``."""

    if existing.author != candidate.author:
        return False
    if canonical_key(existing.split) != canonical_key(candidate.split):
        return False
    return now - existing.created_at < window


class SubmissionLog:
    """Submissions for one day, most recent first."""

    def __init__(self, entries: Iterable[Submission] = ()):
        self._entries: List[Submission] = list(entries)

    def __iter__(self) -> Iterator[Submission]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[Submission]:
        return list(self._entries)

    def append(self, submission: Submission) -> None:
        self._entries.insert(0, submission)

    def remove(self, submission_id: str) -> bool:
        remaining = [entry for entry in self._entries if entry.id != submission_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        return removed

    def find_recent_duplicate(
        self,
        candidate: Submission,
        now: datetime,
        window: timedelta = DEFAULT_RULES.duplicate_window,
    ) -> Optional[Submission]:
        for entry in self._entries:
            if is_recent_duplicate(entry, candidate, now, window):
                return entry
        return None

    def submit(
        self,
        candidate: Submission,
        now: datetime,
        window: timedelta = DEFAULT_RULES.duplicate_window,
    ) -> None:
        """Append ``candidate`` unless the same author sent the same split within ``window``."""

        existing = self.find_recent_duplicate(candidate, now, window)
        if existing is not None:
            raise DuplicateRecentSubmission(existing)
        self.append(candidate)
