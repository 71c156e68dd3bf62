import pytest

from config.settings import parse_log_level, parse_print_width


@pytest.mark.parametrize("raw, expected", [("INFO", "INFO"), ("debug", "DEBUG"), (" Warning ", "WARNING")])
def test_log_level_names_are_normalized(raw, expected):
    assert parse_log_level(raw) == expected


@pytest.mark.parametrize("raw", ["verbose", "", "10"])
def test_unknown_log_level_names_the_variable(raw):
    with pytest.raises(ValueError, match="SQLITE_TYPES_LOG_LEVEL"):
        parse_log_level(raw)


def test_print_width_is_parsed():
    assert parse_print_width("120") == 120


@pytest.mark.parametrize("raw", ["wide", "0", "-5", ""])
def test_invalid_print_width_names_the_variable(raw):
    with pytest.raises(ValueError, match="SQLITE_TYPES_PRINT_WIDTH"):
        parse_print_width(raw)
