import logging
import math
from unittest.mock import patch

from pytest import LogCaptureFixture, mark, raises

from msx import (
    UNITS,
    InvalidFormatError,
    InvalidTypeError,
    NonFiniteValueError,
    ParseResult,
    format_short,
    parse,
    parse_detailed,
    parse_or_raise,
)
from msx.units import UNIT_ALIASES


@mark.parametrize(
    "value,expected",
    [
        ("2h", 7_200_000),
        ("1.5 hours", 5_400_000),
        ("100", None),
        ("1ms", 1),
        ("100 msecs", 100),
        ("1s", 1_000),
        ("1m", 60_000),
        ("1d", 86_400_000),
        ("3 weeks", 1_814_400_000),
        ("1y", 31_557_600_000),
        ("2 yrs", 63_115_200_000),
        (".5m", 30_000),
        ("0.5m", 30_000),
        ("+5s", 5_000),
        ("-30m", -1_800_000),
        ("-1.5h", -5_400_000),
        ("  2h  ", 7_200_000),
        ("2\th", 7_200_000),
        ("0ms", 0),
    ],
)
def test_parse(value: str, expected: float) -> None:
    assert parse(value) == expected


@mark.parametrize(
    "value",
    [
        "",
        "   ",
        "abc",
        "5",
        "h",
        "-h",
        "5 fortnights",
        "2.",
        "2.h",
        "1e3ms",
        "1,000ms",
        "1h30m",
        "2h garbage",
        "- 5m",
        "--5m",
        "5h2",
        "5 m1n",
        "٣h",
        "1" * 100 + "h",
    ],
)
def test_parse_rejects(value: str) -> None:
    assert parse(value) is None
    assert parse_detailed(value) is None


def test_parse_rejects_long_input() -> None:
    value = "1" + " " * 98 + "h"
    assert len(value) == 100
    assert parse(value) == 3_600_000

    assert parse(" " + value) is None


@mark.parametrize("value", [None, 5, 1.5, b"2h", ["2h"]])
def test_parse_rejects_non_strings(value: object) -> None:
    assert parse(value) is None  # type: ignore[arg-type]


def test_parse_is_case_insensitive() -> None:
    assert parse("2H") == parse("2h")
    assert parse("2 HOURS") == parse("2 hours") == parse("2 Hours")


def test_parse_sign_applies_to_whole_value() -> None:
    for value in ("5m", "1.5h", "2 days", "250ms"):
        assert parse("-" + value) == -parse(value)  # type: ignore[operator]


def test_parse_alias_equivalence() -> None:
    for alias, unit in UNIT_ALIASES.items():
        assert parse("5" + alias) == 5 * UNITS[unit]
        assert parse("5 " + alias.upper()) == 5 * UNITS[unit]


@mark.parametrize(
    "unit,amounts",
    [
        ("ms", range(1, 1_000)),
        ("s", range(1, 60)),
        ("m", range(1, 60)),
        ("h", range(1, 24)),
        ("d", range(1, 1_000)),
        ("w", range(1, 100)),
    ],
)
def test_parse_round_trip(unit: str, amounts: range) -> None:
    for n in amounts:
        ms = UNITS[unit] * n  # type: ignore[index]
        assert parse(format_short(ms)) == ms


def test_parse_detailed() -> None:
    assert parse_detailed("-1.5 Hours") == ParseResult(
        value=-1.5, unit="h", milliseconds=-5_400_000
    )
    assert parse_detailed("10 msecs") == ParseResult(value=10, unit="ms", milliseconds=10)


def test_parse_detailed_is_frozen() -> None:
    result = parse_detailed("2h")
    assert result is not None

    with raises(AttributeError):
        result.value = 3  # type: ignore[misc]


def test_parse_detailed_invariant() -> None:
    for value in ("2h", ".25 weeks", "-7 yrs", "999 msec"):
        result = parse_detailed(value)
        assert result is not None
        assert result.milliseconds == result.value * UNITS[result.unit]


def test_parse_or_raise() -> None:
    assert parse_or_raise("2h") == ParseResult(value=2, unit="h", milliseconds=7_200_000)


@mark.parametrize("value", ["", "5", "5 fortnights", "2h garbage"])
def test_parse_or_raise_invalid_format(value: str) -> None:
    with raises(InvalidFormatError) as exception:
        parse_or_raise(value)

    assert exception.value.value == value
    assert repr(value) in str(exception.value)


def test_parse_or_raise_invalid_type() -> None:
    with raises(InvalidTypeError):
        parse_or_raise(42)  # type: ignore[arg-type]


def test_parse_logs_unknown_unit(caplog: LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="msx.parser"):
        assert parse("5 fortnights") is None

    assert "fortnights" in caplog.text


@mark.parametrize("value", ["-0ms", "-0.0 hours", "-.0s"])
def test_parse_negative_zero(value: str) -> None:
    result = parse_detailed(value)
    assert result is not None
    assert math.copysign(1, result.value) == 1
    assert math.copysign(1, result.milliseconds) == 1
    assert math.copysign(1, parse_or_raise(value).milliseconds) == 1


def test_parse_overflow() -> None:
    with patch("msx.parser.to_ms", side_effect=NonFiniteValueError("overflow", 1e308)):
        assert parse_detailed("2h") is None
        assert parse("2h") is None

        with raises(NonFiniteValueError):
            parse_or_raise("2h")
