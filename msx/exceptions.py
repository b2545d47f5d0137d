from typing import Any


class MsxError(Exception):
    """
    Base class of the errors raised by the raising entry points.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidFormatError(MsxError, ValueError):
    """
    The string does not follow the duration grammar, or its unit is unknown.
    """


class InvalidTypeError(MsxError, TypeError):
    """
    The value is neither a duration string nor a number.
    """


class NonFiniteValueError(MsxError, ValueError):
    """
    The value is NaN or infinite, or a computation overflowed.
    """
