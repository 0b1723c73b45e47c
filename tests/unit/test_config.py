import io
from pathlib import Path

import pytest

from config import LoggerConfig, build_logger, config_from_dict, config_from_env
from core.errors import InvalidLevel, LogFileError
from core.levels import Level
from logger import create_logger


def test_config_from_dict_defaults() -> None:
    assert config_from_dict({}) == LoggerConfig()


def test_config_from_dict_normalizes_values() -> None:
    cfg = config_from_dict(
        {
            "threshold": " INFO ",
            "prefix": "svc",
            "log_file": "  ",
            "timestamps": "off",
            "terminate_on_critical": "maybe",
            "unknown": 1,
        }
    )
    assert cfg.threshold == "INFO"
    assert cfg.prefix == "svc"
    assert cfg.log_file is None
    assert cfg.timestamps is False
    assert cfg.terminate_on_critical is True


def test_config_from_env_overrides_base() -> None:
    environ = {
        "LEVELED_LOGGER_LEVEL": "WARNING",
        "LEVELED_LOGGER_TIMESTAMPS": "0",
        "UNRELATED": "x",
    }
    cfg = config_from_env(environ, base={"prefix": "svc", "threshold": "DEBUG"})
    assert cfg.threshold == "WARNING"
    assert cfg.timestamps is False
    assert cfg.prefix == "svc"


def test_config_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("LEVELED_LOGGER_PREFIX", "[job]")
    monkeypatch.setenv("LEVELED_LOGGER_FILE", "/tmp/job.log")
    cfg = config_from_env()
    assert cfg.prefix == "[job]"
    assert cfg.log_file == "/tmp/job.log"


def test_build_logger_applies_config(tmp_path: Path) -> None:
    log_file = tmp_path / "svc.log"
    cfg = LoggerConfig(
        threshold="INFO",
        prefix="svc",
        log_file=str(log_file),
        timestamps=False,
        terminate_on_critical=False,
    )
    buffers = (io.StringIO(), io.StringIO(), io.StringIO(), io.StringIO())
    with build_logger(cfg, sinks=buffers) as log:
        assert log.threshold is Level.INFO
        assert log.file_path == log_file
        log.debug("hidden")
        log.info("hello")
        log.critical("bad")
    assert buffers[0].getvalue() == ""
    assert buffers[1].getvalue() == "INFO: svc hello\n"
    assert buffers[3].getvalue() == "CRITICAL: svc bad\n"
    assert log_file.read_text(encoding="utf-8") == "INFO: svc hello\nCRITICAL: svc bad\n"


def test_build_logger_rejects_bad_threshold() -> None:
    with pytest.raises(InvalidLevel) as excinfo:
        build_logger(LoggerConfig(threshold="WARN"))
    assert excinfo.value.suggestion == "WARNING"


def test_build_logger_rejects_unopenable_file(tmp_path: Path) -> None:
    cfg = LoggerConfig(log_file=str(tmp_path / "missing" / "svc.log"))
    with pytest.raises(LogFileError):
        build_logger(cfg)


def test_create_logger_with_config() -> None:
    log = create_logger(LoggerConfig(threshold="CRITICAL", terminate_on_critical=False))
    assert log.threshold is Level.CRITICAL
    assert log.terminate_on_critical is False
