"""Severity levels and level-name parsing."""

from __future__ import annotations

from enum import IntEnum

from rapidfuzz import fuzz, process

from core.errors import InvalidLevel

SUGGESTION_MIN_SCORE = 60.0


class Level(IntEnum):
    """Log severities in ascending order."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    CRITICAL = 40

    @property
    def tag(self) -> str:
        return f"{self.name}: "


LEVEL_NAMES = tuple(level.name for level in Level)


def suggest_level(value: object) -> str | None:
    """Return the closest level name for a mistyped value, if any is close."""
    text = str(value).strip().upper()
    if not text:
        return None
    match = process.extractOne(text, LEVEL_NAMES, scorer=fuzz.WRatio)
    if match is None:
        return None
    name, score, _ = match
    if score < SUGGESTION_MIN_SCORE:
        return None
    return name


def parse_level(value: Level | str) -> Level:
    """Resolve a Level from a Level or an exact, case-sensitive level name.

    Raises:
        InvalidLevel: If the value is not one of the four levels.
    """
    if isinstance(value, Level):
        return value
    if isinstance(value, str) and value in LEVEL_NAMES:
        return Level[value]
    raise InvalidLevel(value, suggestion=suggest_level(value))
