#!/usr/bin/env python3
"""CLI entrypoint for writing a single leveled log message."""

from __future__ import annotations

from cli import get_cli_options
from config.loader import build_logger
from core.errors import InvalidLevel, LogFileError
from core.levels import parse_level


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint.

    Returns:
        Process exit code. A CRITICAL message exits with status 1 instead.
    """
    options = get_cli_options(argv)
    try:
        level = parse_level(options.level)
        log = build_logger(options.config)
    except (InvalidLevel, LogFileError) as exc:
        print(exc)
        return 2
    with log:
        log.log(level, options.message, *options.args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
