import math
from typing import Any

from msx.exceptions import NonFiniteValueError
from msx.typing import NumberT, UnitT
from msx.units import unit_ms


def is_number(value: Any) -> bool:
    # bool is an int subclass, but True is not a duration
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def round_half_up(numerator: NumberT, denominator: int) -> int:
    """
    Rounds `numerator / denominator` to the nearest integer, halves
    rounding up. Both operands must be non-negative.

    Integer numerators are rounded exactly, without going through a float.
    """

    if isinstance(numerator, int):
        return (2 * numerator + denominator) // (2 * denominator)

    quotient = numerator / denominator
    whole = math.floor(quotient)
    # subtracting is exact, adding 0.5 is not
    return whole + 1 if quotient - whole >= 0.5 else whole


def to_ms(value: NumberT, unit: UnitT) -> NumberT:
    ms = value * unit_ms(unit)
    if isinstance(ms, float) and not math.isfinite(ms):
        raise NonFiniteValueError(f"{value}{unit} is not a finite number of milliseconds", value)

    return ms
