"""Split codec, submission log and consensus resolution."""

from .codec import build_split, canonical_key, swap_split, toggle_selection
from .resolver import SplitTally, resolve, tally
from .submissions import SubmissionLog, is_recent_duplicate, make_submission

__all__ = [
    "SplitTally",
    "SubmissionLog",
    "build_split",
    "canonical_key",
    "is_recent_duplicate",
    "make_submission",
    "resolve",
    "swap_split",
    "tally",
    "toggle_selection",
]
