import logging
import re
from typing import Any, Optional, Tuple

from msx.config import MAX_INPUT_LENGTH
from msx.exceptions import InvalidFormatError, InvalidTypeError, NonFiniteValueError
from msx.schema.result import ParseResult
from msx.typing import UnitT
from msx.units import resolve_unit
from msx.utils import to_ms

logger = logging.getLogger(__name__)

# Sign, one decimal number and one alphabetic unit, e.g. "-1.5 hours".
# A trailing dot without fraction digits ("2.") is not a number here.
DURATION_PATTERN = re.compile(
    r"(?P<sign>[+-])?(?P<number>[0-9]+(?:\.[0-9]+)?|\.[0-9]+)\s*(?P<unit>[a-z]+)",
    re.IGNORECASE | re.ASCII,
)

EXPECTED_FORMAT = "a number followed by a unit, like '2h', '-30m' or '1.5 hours'"


def _match(value: Any) -> Optional[Tuple[float, UnitT]]:
    """
    Runs the grammar over the input and returns the signed amount and the
    canonical unit, or `None` if the input is not a duration string.
    """

    if not isinstance(value, str) or len(value) > MAX_INPUT_LENGTH:
        return None

    match = DURATION_PATTERN.fullmatch(value.strip())
    if match is None:
        return None

    unit = resolve_unit(match.group("unit"))
    if unit is None:
        logger.debug("Unknown duration unit: %s", match.group("unit"))
        return None

    amount = float(match.group("number"))
    # "-0ms" is zero, not negative zero
    if match.group("sign") == "-" and amount:
        amount = -amount

    return amount, unit


def _to_result(amount: float, unit: UnitT) -> ParseResult:
    return ParseResult(value=amount, unit=unit, milliseconds=to_ms(amount, unit))


def parse_detailed(value: str) -> Optional[ParseResult]:
    """
    Parses a duration string like "2h" or "1.5 hours" and returns the
    amount, the resolved unit and the duration in milliseconds.

    Returns `None` for anything that is not a valid duration string;
    it never raises for malformed input.

    :param value: Duration string, at most 100 characters long.
    """

    matched = _match(value)
    if matched is None:
        return None

    try:
        return _to_result(*matched)
    except NonFiniteValueError:
        logger.debug("Duration overflowed: %s", value)
        return None


def parse(value: str) -> Optional[float]:
    """
    Parses a duration string into milliseconds.

    .. code-block:: python

        from msx import parse

        parse("2h")         # 7200000.0
        parse("-1.5 hours") # -5400000.0
        parse("5")          # None, the unit is mandatory

    :param value: Duration string, at most 100 characters long.
    """

    result = parse_detailed(value)
    if result is None:
        return None

    return result.milliseconds


def parse_or_raise(value: str) -> ParseResult:
    """
    Same as `parse_detailed`, but raises instead of returning `None`.

    :raises InvalidTypeError: if the value is not a string.
    :raises InvalidFormatError: if the string is not a duration.
    :raises NonFiniteValueError: if the duration overflows.
    """

    if not isinstance(value, str):
        raise InvalidTypeError(
            f"Expected a duration string, got {type(value).__name__}: {value!r}", value
        )

    matched = _match(value)
    if matched is None:
        raise InvalidFormatError(
            f"Invalid duration {value!r}, expected {EXPECTED_FORMAT}", value
        )

    return _to_result(*matched)
