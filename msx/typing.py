from typing import Literal, TypedDict, Union

UnitT = Literal["ms", "s", "m", "h", "d", "w", "y"]
"""
ms: milliseconds
s:  seconds
m:  minutes
h:  hours
d:  days
w:  weeks
y:  years (365.25 days)
"""

NumberT = Union[int, float]


class FormatOptions(TypedDict, total=False):
    long: bool
    """
    Render the word form ("2 hours") instead of the abbreviation ("2h").
    """
