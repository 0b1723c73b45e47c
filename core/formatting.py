"""Message templating and line layout."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from core.levels import Level

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def format_message(template: str, args: Sequence[Any] = ()) -> str:
    """Apply printf-style substitution to a template.

    With no arguments the template is returned untouched, so a literal ``%``
    does not need escaping and ``%%`` is kept as two characters; with
    arguments ``%%`` collapses to ``%`` as usual. When substitution fails the
    template is kept and the arguments are appended, separated by spaces.
    """
    template = str(template)
    if not args:
        return template
    try:
        return template % tuple(args)
    except (TypeError, ValueError, KeyError):
        return " ".join([template, *(str(arg) for arg in args)])


def format_line(level: Level, message: str, *, now: datetime | None = None, timestamps: bool = True) -> str:
    """Build one newline-terminated output line for a level."""
    if not timestamps:
        return f"{level.tag}{message}\n"
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return f"{level.tag}{stamp} {message}\n"
