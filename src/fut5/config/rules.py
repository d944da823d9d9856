"""Day rules: roster size, team size and the duplicate-submission window."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from datetime import timedelta

logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_DUPLICATE_WINDOW_ENV = "FUT5_DUPLICATE_WINDOW"
_ANONYMOUS_AUTHOR_ENV = "FUT5_ANONYMOUS_AUTHOR"
_SHARE_LABEL_ENV = "FUT5_SHARE_LABEL"


@dataclass(frozen=True)
class DayRules:
    roster_size: int = 10
    team_size: int = 5
    duplicate_window: timedelta = timedelta(seconds=60)
    anonymous_author: str = "Anonymous"
    share_label: str = "Fut5"


DEFAULT_RULES = DayRules()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_rules() -> DayRules:
    """Return the default rules with any environment overrides applied."""

    window = _env_int(
        _DUPLICATE_WINDOW_ENV,
        int(DEFAULT_RULES.duplicate_window.total_seconds()),
        min_value=0,
    )
    return replace(
        DEFAULT_RULES,
        duplicate_window=timedelta(seconds=window),
        anonymous_author=_env_str(_ANONYMOUS_AUTHOR_ENV, DEFAULT_RULES.anonymous_author),
        share_label=_env_str(_SHARE_LABEL_ENV, DEFAULT_RULES.share_label),
    )
