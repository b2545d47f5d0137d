__version__ = "1.0.0"

from msx.dispatcher import msx
from msx.exceptions import (
    InvalidFormatError,
    InvalidTypeError,
    MsxError,
    NonFiniteValueError,
)
from msx.formatter import format_long, format_ms, format_short
from msx.parser import parse, parse_detailed, parse_or_raise
from msx.schema.result import ParseResult
from msx.typing import FormatOptions, UnitT
from msx.units import UNITS
from msx.utils import to_ms

__all__ = [
    "msx",
    "parse",
    "parse_detailed",
    "parse_or_raise",
    "format_short",
    "format_long",
    "format_ms",
    "to_ms",
    "UNITS",
    "ParseResult",
    "FormatOptions",
    "UnitT",
    "MsxError",
    "InvalidFormatError",
    "InvalidTypeError",
    "NonFiniteValueError",
]
