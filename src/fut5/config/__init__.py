"""Configuration helpers for day rules."""

from .rules import DEFAULT_RULES, DayRules, get_rules

__all__ = [
    "DEFAULT_RULES",
    "DayRules",
    "get_rules",
]
