"""Write destinations for log lines."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, TextIO


class Sink(Protocol):
    """Anything that accepts text writes."""

    def write(self, text: str) -> object:
        ...


def flush_sink(sink: Sink) -> None:
    flush = getattr(sink, "flush", None)
    if callable(flush):
        flush()


class FanoutSink:
    """Duplicate every write to each wrapped sink in order."""

    def __init__(self, *sinks: Sink) -> None:
        self.sinks = sinks

    def write(self, text: str) -> int:
        for sink in self.sinks:
            sink.write(text)
        return len(text)

    def flush(self) -> None:
        for sink in self.sinks:
            flush_sink(sink)


class LogFile:
    """Owned append-mode handle for an attached log file."""

    def __init__(self, path: Path, handle: TextIO) -> None:
        self.path = path
        self._handle: TextIO | None = handle

    @classmethod
    def open(cls, path: Path) -> "LogFile":
        """Open a file for appending, creating it if it does not exist.

        Raises:
            OSError: If the file cannot be opened or created.
        """
        handle = path.open("a", encoding="utf-8")
        return cls(path, handle)

    @property
    def closed(self) -> bool:
        return self._handle is None

    def write(self, text: str) -> int:
        if self._handle is None:
            return 0
        return self._handle.write(text)

    def flush(self) -> None:
        if self._handle is not None:
            self._handle.flush()

    def close(self) -> None:
        if self._handle is None:
            return
        handle = self._handle
        self._handle = None
        handle.close()
