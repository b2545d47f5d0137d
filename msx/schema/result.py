import dataclasses

from msx.typing import UnitT


@dataclasses.dataclass(frozen=True)
class ParseResult:
    value: float
    """
    The signed amount as written, in `unit`.
    """

    unit: UnitT
    """
    Canonical symbol of the unit the alias resolved to.
    """

    milliseconds: float
    """
    `value` converted to milliseconds.
    """
