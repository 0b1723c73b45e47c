"""Configuration normalization and logger construction."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping

from config.models import LoggerConfig
from core.sinks import Sink
from logger import Logger

ENV_PREFIX = "LEVELED_LOGGER_"
ENV_KEYS = {
    "LEVEL": "threshold",
    "PREFIX": "prefix",
    "FILE": "log_file",
    "TIMESTAMPS": "timestamps",
}
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    return default


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value)


def _as_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def config_from_dict(raw: Mapping[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig from a raw mapping.

    The threshold is kept as given; it is validated when applied to a logger.
    """
    return LoggerConfig(
        threshold=_as_str(raw.get("threshold"), "DEBUG").strip(),
        prefix=_as_str(raw.get("prefix"), ""),
        log_file=_as_optional_str(raw.get("log_file")),
        timestamps=_as_bool(raw.get("timestamps"), True),
        terminate_on_critical=_as_bool(raw.get("terminate_on_critical"), True),
    )


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for suffix, key in ENV_KEYS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is not None:
            overrides[key] = value
    return overrides


def config_from_env(
    environ: Mapping[str, str] | None = None,
    base: Dict[str, Any] | None = None,
) -> LoggerConfig:
    """Build a LoggerConfig from ``base`` with LEVELED_LOGGER_* variables on top."""
    env = os.environ if environ is None else environ
    raw = {**(base or {}), **_env_overrides(env)}
    return config_from_dict(raw)


def build_logger(cfg: LoggerConfig, sinks: tuple[Sink, Sink, Sink, Sink] | None = None) -> Logger:
    """Create a logger and apply the threshold, prefix and log file from ``cfg``.

    Raises:
        InvalidLevel: If the configured threshold is not a known level.
        LogFileError: If the configured log file cannot be opened.
    """
    debug_sink, info_sink, warning_sink, critical_sink = sinks or (None, None, None, None)
    log = Logger(
        debug_sink,
        info_sink,
        warning_sink,
        critical_sink,
        terminate_on_critical=cfg.terminate_on_critical,
        timestamps=cfg.timestamps,
    )
    log.set_threshold(cfg.threshold)
    if cfg.prefix:
        log.set_prefix(cfg.prefix)
    if cfg.log_file:
        log.attach_file(cfg.log_file)
    return log
