import pytest

from core.errors import InvalidLevel
from core.levels import LEVEL_NAMES, Level, parse_level, suggest_level


def test_levels_are_ordered() -> None:
    assert Level.DEBUG < Level.INFO < Level.WARNING < Level.CRITICAL
    assert LEVEL_NAMES == ("DEBUG", "INFO", "WARNING", "CRITICAL")


def test_level_tag() -> None:
    assert Level.WARNING.tag == "WARNING: "


def test_parse_level_accepts_names_and_levels() -> None:
    assert parse_level("INFO") is Level.INFO
    assert parse_level(Level.CRITICAL) is Level.CRITICAL


@pytest.mark.parametrize("value", ["info", "Warning", "WARN", "", "ERROR", 20, None])
def test_parse_level_rejects_unknown_values(value) -> None:
    with pytest.raises(InvalidLevel) as excinfo:
        parse_level(value)
    assert excinfo.value.value == value
    assert "is not a valid log level" in str(excinfo.value)


def test_invalid_level_suggests_close_name() -> None:
    with pytest.raises(InvalidLevel) as excinfo:
        parse_level("WARN")
    assert excinfo.value.suggestion == "WARNING"
    assert "did you mean 'WARNING'" in str(excinfo.value)


def test_suggest_level_matches_wrong_case() -> None:
    assert suggest_level("debug") == "DEBUG"
    assert suggest_level("critical") == "CRITICAL"


def test_suggest_level_empty_value() -> None:
    assert suggest_level("   ") is None


def test_invalid_level_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_level("LOUD")
