import math
from typing import Any, Tuple

from msx.config import DEFAULT_LONG
from msx.exceptions import InvalidTypeError, NonFiniteValueError
from msx.typing import NumberT, UnitT
from msx.units import DAY, HOUR, MINUTE, SECOND, UNIT_NAMES
from msx.utils import is_number, round_half_up

# Largest first. Weeks and years are never picked, 10 days stay "10d".
_AUTO_UNITS: Tuple[Tuple[UnitT, int], ...] = (
    ("d", DAY),
    ("h", HOUR),
    ("m", MINUTE),
    ("s", SECOND),
)


def _split(ms: Any) -> Tuple[str, int, UnitT]:
    """
    Picks the unit for the given milliseconds and returns the sign prefix,
    the rounded amount in that unit and the unit.
    """

    if not is_number(ms):
        raise InvalidTypeError(
            f"Expected a number of milliseconds, got {type(ms).__name__}: {ms!r}", ms
        )

    if isinstance(ms, float) and not math.isfinite(ms):
        raise NonFiniteValueError(f"Cannot format {ms} milliseconds", ms)

    abs_ms = abs(ms)

    unit: UnitT = "ms"
    n = round_half_up(abs_ms, 1)
    for candidate, candidate_ms in _AUTO_UNITS:
        if abs_ms >= candidate_ms:
            unit = candidate
            n = round_half_up(abs_ms, candidate_ms)
            break

    # "-0ms" is never rendered
    sign = "-" if ms < 0 and n != 0 else ""
    return sign, n, unit


def format_short(ms: NumberT) -> str:
    """
    Formats milliseconds with an abbreviated unit, e.g. `"2h"` or `"-30m"`.

    :raises InvalidTypeError: if `ms` is not a number.
    :raises NonFiniteValueError: if `ms` is NaN or infinite.
    """

    sign, n, unit = _split(ms)
    return f"{sign}{n}{unit}"


def format_long(ms: NumberT) -> str:
    """
    Formats milliseconds with a spelled-out unit, e.g. `"1 minute"` or
    `"2 hours"`. Every amount other than one is plural.

    :raises InvalidTypeError: if `ms` is not a number.
    :raises NonFiniteValueError: if `ms` is NaN or infinite.
    """

    sign, n, unit = _split(ms)
    singular, plural = UNIT_NAMES[unit]
    return f"{sign}{n} {singular if n == 1 else plural}"


def format_ms(ms: NumberT, long: bool = DEFAULT_LONG) -> str:
    if long:
        return format_long(ms)

    return format_short(ms)
