"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LoggerConfig:
    """Logger configuration settings."""

    threshold: str = "DEBUG"
    prefix: str = ""
    log_file: str | None = None
    timestamps: bool = True
    terminate_on_critical: bool = True
