import pytest

from msgversions import ALL, MAX_VERSION, NONE, VersionRange, parse
from msgversions.exceptions import ParseError
from msgversions.warnings import InvertedRange

valid_ranges = [
    ("none", NONE),
    ("5", VersionRange(5, 5)),
    ("0", VersionRange(0, 0)),
    ("2+", VersionRange(2, MAX_VERSION)),
    ("0+", ALL),
    ("2-7", VersionRange(2, 7)),
    ("3-3", VersionRange(3, 3)),
    (f"4-{MAX_VERSION}", VersionRange(4, MAX_VERSION)),
    ("  1-4\t", VersionRange(1, 4)),
    ("\n12+ ", VersionRange(12, MAX_VERSION)),
    ("007", VersionRange(7, 7)),
]


@pytest.mark.parametrize("text,expected", valid_ranges)
def test_parse(text, expected):
    assert parse(text, NONE) == expected
    assert VersionRange.parse(text, ALL) == expected


@pytest.mark.parametrize("text", [None, "", "   ", "\t\n"])
def test_blank_input_returns_default(text):
    assert parse(text, ALL) is ALL
    assert parse(text, NONE) is NONE
    assert parse(text) is None


@pytest.mark.parametrize(
    "text,default,expected",
    [("none", ALL, NONE), ("", ALL, ALL), (None, ALL, ALL), ("5", ALL, VersionRange(5, 5))],
)
def test_defaulting(text, default, expected):
    assert parse(text, default) == expected


def test_unbounded_literal_prints_canonically():
    assert str(parse(f"4-{MAX_VERSION}")) == "4+"
    assert parse(f"4-{MAX_VERSION}") == parse("4+")


invalid_ranges = [
    "abc",
    "None",
    "NONE",
    "1.5",
    "+",
    "-",
    "-3",
    "3-",
    "1-2-3",
    "1 - 2",
    "1-2+",
    "++1",
    "1 2",
    "0x10",
    "１２",  # full-width digits
    str(MAX_VERSION + 1),
    f"{MAX_VERSION + 1}+",
    f"1-{MAX_VERSION + 1}",
    "99999999999999999999",
]


@pytest.mark.parametrize("text", invalid_ranges)
def test_malformed_input_raises(text):
    with pytest.raises(ParseError):
        parse(text, ALL)


@pytest.mark.parametrize("value", [5, 1.0, b"1-2", ["1"]])
def test_non_string_input_raises(value):
    with pytest.raises(ParseError):
        parse(value, ALL)


def test_inverted_input_parses_to_none():
    with pytest.warns(InvertedRange):
        assert parse("5-2") == NONE


parse_error_locations = [
    ("x", 0),
    ("2-x", 2),
    ("1-2-3", 2),
    ("40000+", 0),
    ("3-", 2),
    ("  7-abc  ", 2),
]


@pytest.mark.parametrize("text,col_offset", parse_error_locations)
def test_parse_error_location(text, col_offset):
    with pytest.raises(ParseError) as excinfo:
        parse(text)

    assert excinfo.value.source == text.strip()
    assert excinfo.value.col_offset == col_offset


def test_parse_error_message():
    with pytest.raises(ParseError) as excinfo:
        parse("2-x")

    msg = str(excinfo.value)
    assert msg.startswith("Invalid version number 'x' in version range '2-x'")
    assert '(hint: expected "none", "A", "A+" or "A-B")' in msg
    assert "2-x\n  --^" in msg


def test_out_of_range_message():
    with pytest.raises(ParseError) as excinfo:
        parse("1-40000")

    assert f"versions must be between 0 and {MAX_VERSION}" in str(excinfo.value)
