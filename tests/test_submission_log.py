from datetime import datetime, timedelta, timezone

import pytest

from fut5.consensus import SubmissionLog, build_split, is_recent_duplicate, make_submission
from fut5.errors import DuplicateRecentSubmission
from fut5.models import Player

NAMES = ["Ana", "Bea", "Cid", "Dan", "Ema", "Fio", "Gil", "Hal", "Ivo", "Joe"]
PLAYERS = [Player(id=f"p{index}", name=name) for index, name in enumerate(NAMES)]
START = datetime(2024, 5, 1, 18, 0, tzinfo=timezone.utc)
WINDOW = timedelta(seconds=60)


def _split(*names: str):
    return build_split(set(names), PLAYERS)


def test_append_is_most_recent_first():
    log = SubmissionLog()
    first = make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Ema"), START)
    second = make_submission("Y", _split("Ana", "Bea", "Cid", "Dan", "Fio"), START)

    log.append(first)
    log.append(second)

    assert [entry.id for entry in log] == [second.id, first.id]
    assert len(log) == 2


def test_remove_missing_id_is_noop():
    submission = make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Ema"), START)
    log = SubmissionLog([submission])

    assert log.remove("missing") is False
    assert log.entries == [submission]
    assert log.remove(submission.id) is True
    assert log.entries == []


def test_blank_author_becomes_anonymous():
    submission = make_submission("   ", _split("Ana", "Bea", "Cid", "Dan", "Ema"), START)

    assert submission.author == "Anonymous"
    assert make_submission(None, submission.split, START).author == "Anonymous"
    assert make_submission(" Rui ", submission.split, START).author == "Rui"


def test_same_author_same_split_within_window_is_rejected():
    log = SubmissionLog()
    first = make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Ema"), START)
    log.submit(first, START, WINDOW)

    later = START + timedelta(seconds=59)
    # Opposite side selected; still the same partition.
    repeat = make_submission("X", _split("Fio", "Gil", "Hal", "Ivo", "Joe"), later)

    with pytest.raises(DuplicateRecentSubmission) as excinfo:
        log.submit(repeat, later, WINDOW)
    assert excinfo.value.existing == first
    assert len(log) == 1


def test_same_author_same_split_after_window_is_accepted():
    log = SubmissionLog()
    log.submit(make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Ema"), START), START, WINDOW)

    later = START + timedelta(seconds=61)
    log.submit(make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Ema"), later), later, WINDOW)

    assert len(log) == 2


def test_other_author_or_other_split_is_not_a_duplicate():
    existing = make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Ema"), START)
    other_author = make_submission("Y", existing.split, START)
    other_split = make_submission("X", _split("Ana", "Bea", "Cid", "Dan", "Fio"), START)

    assert not is_recent_duplicate(existing, other_author, START, WINDOW)
    assert not is_recent_duplicate(existing, other_split, START, WINDOW)
    assert is_recent_duplicate(existing, make_submission("X", existing.split, START), START, WINDOW)
