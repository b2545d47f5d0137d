from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from msx.exceptions import InvalidFormatError
from msx.typing import UnitT

SECOND = 1_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = DAY * 365 + DAY // 4

UNITS: Mapping[UnitT, int] = MappingProxyType(
    {
        "ms": 1,
        "s": SECOND,
        "m": MINUTE,
        "h": HOUR,
        "d": DAY,
        "w": WEEK,
        "y": YEAR,
    }
)
"""
Milliseconds per unit, keyed by canonical symbol, smallest unit first.
"""

_ALIASES_BY_UNIT: Mapping[UnitT, Tuple[str, ...]] = {
    "ms": ("ms", "msec", "msecs", "millisecond", "milliseconds"),
    "s": ("s", "sec", "secs", "second", "seconds"),
    "m": ("m", "min", "mins", "minute", "minutes"),
    "h": ("h", "hr", "hrs", "hour", "hours"),
    "d": ("d", "day", "days"),
    "w": ("w", "week", "weeks"),
    "y": ("y", "yr", "yrs", "year", "years"),
}

UNIT_ALIASES: Mapping[str, UnitT] = MappingProxyType(
    {alias: unit for unit, aliases in _ALIASES_BY_UNIT.items() for alias in aliases}
)
"""
Lower-case alias to canonical symbol.
"""

UNIT_NAMES: Mapping[UnitT, Tuple[str, str]] = MappingProxyType(
    {
        "ms": ("millisecond", "milliseconds"),
        "s": ("second", "seconds"),
        "m": ("minute", "minutes"),
        "h": ("hour", "hours"),
        "d": ("day", "days"),
        "w": ("week", "weeks"),
        "y": ("year", "years"),
    }
)
"""
Singular and plural words used by the long format.
"""


def unit_ms(unit: UnitT) -> int:
    try:
        return UNITS[unit]
    except KeyError:
        raise InvalidFormatError(
            f"Unexpected unit {unit!r}, expected one of {', '.join(UNITS)}", unit
        ) from None


def resolve_unit(alias: str) -> Optional[UnitT]:
    """
    Returns the canonical symbol of the given alias, ignoring case,
    or `None` if the alias is not known.
    """

    return UNIT_ALIASES.get(alias.lower())
