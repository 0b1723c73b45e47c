"""Config package facade."""

from config.loader import build_logger, config_from_dict, config_from_env
from config.models import LoggerConfig

__all__ = [
    "LoggerConfig",
    "build_logger",
    "config_from_dict",
    "config_from_env",
]
