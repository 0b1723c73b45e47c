"""Leveled logger with prefixing and file fan-out."""

from __future__ import annotations

import os
import sys
import threading
from pathlib import Path
from typing import Any, TYPE_CHECKING

from core.errors import LogFileError
from core.formatting import format_line, format_message
from core.levels import Level, parse_level
from core.sinks import FanoutSink, LogFile, Sink, flush_sink

if TYPE_CHECKING:
    from config.models import LoggerConfig

ERROR_CHECK_TEMPLATE = "Error check failed. Dev message: '%s' Error message: '%s'"


class Logger:
    """Severity-filtered logger writing one sink per level.

    Messages below the threshold are dropped, except CRITICAL which is always
    written. A critical message ends the process with status 1 unless the
    logger was created with ``for_testing``.
    """

    def __init__(
        self,
        debug_sink: Sink | None = None,
        info_sink: Sink | None = None,
        warning_sink: Sink | None = None,
        critical_sink: Sink | None = None,
        *,
        terminate_on_critical: bool = True,
        timestamps: bool = True,
    ) -> None:
        self._lock = threading.Lock()
        self._console: dict[Level, Sink] = {
            Level.DEBUG: sys.stdout if debug_sink is None else debug_sink,
            Level.INFO: sys.stdout if info_sink is None else info_sink,
            Level.WARNING: sys.stdout if warning_sink is None else warning_sink,
            Level.CRITICAL: sys.stderr if critical_sink is None else critical_sink,
        }
        self._sinks: dict[Level, Sink] = dict(self._console)
        self._threshold = Level.DEBUG
        self._prefix = ""
        self._file: LogFile | None = None
        self.terminate_on_critical = terminate_on_critical
        self.timestamps = timestamps

    @classmethod
    def for_testing(
        cls,
        debug_sink: Sink,
        info_sink: Sink,
        warning_sink: Sink,
        critical_sink: Sink,
        *,
        timestamps: bool = True,
    ) -> "Logger":
        """Create a logger on caller-supplied sinks that never exits on critical."""
        return cls(
            debug_sink,
            info_sink,
            warning_sink,
            critical_sink,
            terminate_on_critical=False,
            timestamps=timestamps,
        )

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    @property
    def threshold(self) -> Level:
        return self._threshold

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def file_path(self) -> Path | None:
        file = self._file
        return file.path if file else None

    def set_threshold(self, level: Level | str) -> None:
        """Set the minimum level that will be written.

        Raises:
            InvalidLevel: If ``level`` is not DEBUG, INFO, WARNING or CRITICAL.
                The current threshold is left unchanged.
        """
        new_level = parse_level(level)
        with self._lock:
            self._threshold = new_level

    def set_prefix(self, template: str, *args: Any) -> None:
        """Set a prefix for every message, formatted like a log message."""
        prefix = format_message(template, args) + " "
        with self._lock:
            self._prefix = prefix

    def attach_file(self, path: str | Path) -> None:
        """Also write every level to ``path``, appending to existing content.

        Raises:
            LogFileError: If the file cannot be opened. Sinks are left unchanged.
        """
        file_path = Path(path)
        try:
            new_file = LogFile.open(file_path)
        except OSError as exc:
            raise LogFileError(file_path, exc.strerror or str(exc)) from exc
        sinks = {level: FanoutSink(new_file, console) for level, console in self._console.items()}
        with self._lock:
            old_file = self._file
            self._sinks = sinks
            self._file = new_file
        if old_file is not None:
            old_file.close()

    def close(self) -> None:
        """Release the attached file and fall back to the console sinks."""
        with self._lock:
            old_file = self._file
            self._file = None
            self._sinks = dict(self._console)
        if old_file is not None:
            old_file.close()

    def _emit(self, level: Level, template: str, args: tuple[Any, ...] = ()) -> None:
        message = format_message(template, args)
        with self._lock:
            if level < self._threshold and level is not Level.CRITICAL:
                return
            line = format_line(level, self._prefix + message, timestamps=self.timestamps)
            sink = self._sinks[level]
            sink.write(line)
            flush_sink(sink)
        if level is Level.CRITICAL and self.terminate_on_critical:
            self._terminate()

    def _terminate(self) -> None:
        # SystemExit only ends the process from the main thread.
        if threading.current_thread() is threading.main_thread():
            raise SystemExit(1)
        with self._lock:
            if self._file is not None:
                self._file.close()
        os._exit(1)

    def log(self, level: Level | str, template: str, *args: Any) -> None:
        self._emit(parse_level(level), template, args)

    def debug(self, template: str, *args: Any) -> None:
        self._emit(Level.DEBUG, template, args)

    def info(self, template: str, *args: Any) -> None:
        self._emit(Level.INFO, template, args)

    def warning(self, template: str, *args: Any) -> None:
        self._emit(Level.WARNING, template, args)

    def critical(self, template: str, *args: Any) -> None:
        """Write a critical message, then exit with status 1.

        Only use this for errors the program cannot recover from.
        """
        self._emit(Level.CRITICAL, template, args)

    def log_if_error(self, err: BaseException | None, level: Level | str, template: str, *args: Any) -> None:
        """Log ``template`` together with ``err`` when ``err`` is not None.

        Raises:
            InvalidLevel: If ``level`` is not a known level, even when ``err`` is None.
        """
        log_level = parse_level(level)
        if err is None:
            return
        developer_message = format_message(template, args)
        message = ERROR_CHECK_TEMPLATE % (developer_message, err)
        self._emit(log_level, message)

    def debug_error(self, err: BaseException | None, template: str, *args: Any) -> None:
        self.log_if_error(err, Level.DEBUG, template, *args)

    def info_error(self, err: BaseException | None, template: str, *args: Any) -> None:
        self.log_if_error(err, Level.INFO, template, *args)

    def warning_error(self, err: BaseException | None, template: str, *args: Any) -> None:
        self.log_if_error(err, Level.WARNING, template, *args)

    def critical_error(self, err: BaseException | None, template: str, *args: Any) -> None:
        self.log_if_error(err, Level.CRITICAL, template, *args)


def create_logger(cfg: "LoggerConfig | None" = None) -> Logger:
    """Create a new logger, optionally configured from a LoggerConfig."""
    if cfg is None:
        return Logger()
    from config.loader import build_logger

    return build_logger(cfg)
