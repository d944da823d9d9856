"""User-facing validation errors raised by the roster and submission flow."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from fut5.models import Submission


class Fut5Error(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IncompleteRoster(Fut5Error):
    """Fewer than the required named players, or duplicate names among them."""


class InvalidSelectionSize(Fut5Error):
    def __init__(self, size: int, expected: int):
        super().__init__(f"Select exactly {expected} players for team A (got {size})")
        self.size = size
        self.expected = expected


class UnknownPlayerSelection(Fut5Error):
    def __init__(self, names: Iterable[str]):
        self.names = sorted(names)
        super().__init__(f"Selected players are not on the roster: {', '.join(self.names)}")


class DuplicateRecentSubmission(Fut5Error):
    def __init__(self, existing: "Submission"):
        super().__init__(f"{existing.author} already submitted this split a moment ago")
        self.existing = existing
