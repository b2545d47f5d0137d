from typing import Optional, Union

from msx.config import DEFAULT_LONG
from msx.exceptions import InvalidTypeError
from msx.formatter import format_ms
from msx.parser import parse_or_raise
from msx.typing import FormatOptions
from msx.utils import is_number


def msx(value: Union[str, float], options: Optional[FormatOptions] = None) -> Union[float, str]:
    """
    Converts between duration strings and milliseconds.

    Strings are parsed into milliseconds, numbers are formatted into
    strings. Unlike `parse`, this never returns `None` and raises
    for input it cannot handle.

    .. code-block:: python

        from msx import msx

        msx("-30m")                    # -1800000.0
        msx(-1000)                     # "-1s"
        msx(60000, {"long": True})     # "1 minute"

    :param value: A duration string, or a number of milliseconds.
    :param options: Formatting options, only used when `value` is a \
        number. Set `long` to spell out the unit.
    :raises InvalidFormatError: if the string is not a duration.
    :raises InvalidTypeError: if the value is neither a string nor a number.
    :raises NonFiniteValueError: if the number is NaN or infinite.
    """

    if isinstance(value, str):
        return parse_or_raise(value).milliseconds

    if is_number(value):
        long = DEFAULT_LONG if options is None else options.get("long", DEFAULT_LONG)
        return format_ms(value, long=bool(long))

    raise InvalidTypeError(
        f"Expected a duration string or a number of milliseconds, "
        f"got {type(value).__name__}: {value!r}",
        value,
    )
