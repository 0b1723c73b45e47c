"""Command-line parsing helpers."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Mapping

from config.loader import config_from_env
from config.models import LoggerConfig
from core.levels import LEVEL_NAMES


@dataclass
class CliOptions:
    """Parsed CLI options for emitting a single message."""

    config: LoggerConfig
    level: str
    message: str
    args: list[int | float | str]


def _coerce_arg(raw: str) -> int | float | str:
    """Convert a numeric CLI argument so %d and %f placeholders accept it."""
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    return raw


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    Args:
        argv: Optional argument list.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog="leveled-logger",
        description="Write one leveled log message to the console and an optional log file.",
    )
    parser.add_argument("--threshold", help=f"Minimum level to write ({', '.join(LEVEL_NAMES)})")
    parser.add_argument("--prefix", help="Prefix added to the message")
    parser.add_argument("--file", help="Append the message to this log file as well")
    parser.add_argument(
        "--no-timestamps",
        action="store_true",
        help="Omit the date and time from the output line",
    )
    parser.add_argument("level", help=f"Message level ({', '.join(LEVEL_NAMES)})")
    parser.add_argument("message", help="Message template, printf style")
    parser.add_argument("args", nargs="*", help="Values substituted into the template")
    return parser.parse_args(argv)


def get_cli_options(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> CliOptions:
    """Build CliOptions from CLI arguments layered over LEVELED_LOGGER_* variables.

    Args:
        argv: Optional argument list.
        environ: Optional environment mapping; defaults to ``os.environ``.

    Returns:
        CliOptions with the resolved logger configuration.
    """
    args = _parse_args(argv)
    cfg = config_from_env(environ)
    if args.threshold is not None:
        cfg.threshold = args.threshold
    if args.prefix is not None:
        cfg.prefix = args.prefix
    if args.file:
        cfg.log_file = args.file
    if args.no_timestamps:
        cfg.timestamps = False
    return CliOptions(
        config=cfg,
        level=args.level,
        message=args.message,
        args=[_coerce_arg(value) for value in args.args],
    )
