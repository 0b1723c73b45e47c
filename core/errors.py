"""Exceptions raised by logger configuration."""

from __future__ import annotations

from pathlib import Path


class LoggerError(Exception):
    """Base class for logger errors."""


class InvalidLevel(LoggerError, ValueError):
    """Raised when a level name or value is not one of the known levels."""

    def __init__(self, value: object, suggestion: str | None = None) -> None:
        self.value = value
        self.suggestion = suggestion
        message = f"{value!r} is not a valid log level"
        if suggestion:
            message += f" (did you mean {suggestion!r}?)"
        super().__init__(message)


class LogFileError(LoggerError):
    """Raised when a log file cannot be opened for appending."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to open log file {path}: {reason}")
