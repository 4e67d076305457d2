import pytest

from bfstats.inputs import normalize_name, open_error, parse_count


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        (" 42 ", 42),
        ("1,024", 1024),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", None),
        ("1e3", None),
        ("5.0", None),
        ("+7", None),
        ("-5", None),
        ("", None),
        ("n/a", None),
    ],
)
def test_parse_count(text, expected):
    assert parse_count(text) == expected


def test_parse_count_without_thousands():
    assert parse_count("1,2", thousands=False) is None


def test_normalize_name():
    assert normalize_name("  Lab \t Machines ") == "Lab Machines"


def test_open_error_message_is_bare(capsys):
    open_error("missing.csv")
    assert capsys.readouterr().err == "Error: Could not open file missing.csv\n"
