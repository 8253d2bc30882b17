"""Validation errors raised by transport settings."""

from typing import Any, Optional

TIMEOUT_NEGATIVE = (
    "Timeout must be greater than or equal to zero. "
    "To disable the timeout, use the infinite sentinel."
)
TIMEOUT_TOO_BIG = (
    "Timeouts larger than {max_ms} milliseconds cannot be honored. "
    "To disable the timeout, use the infinite sentinel."
)
VALUE_MUST_BE_NON_NEGATIVE = "The value of this argument must be non-negative."
INVALID_ENUM_VALUE = "The value {value!r} is not a valid {enum_name}."
SUBPROTOCOL_EMPTY = (
    "Empty string is not a valid subprotocol value. Use None to specify no value."
)
SUBPROTOCOL_MULTIPLE = (
    "The subprotocol '{value}' is invalid because it contains multiple subprotocols. "
    "Only one subprotocol can be negotiated."
)
SUBPROTOCOL_INVALID_CHAR = (
    "The subprotocol '{value}' is invalid because it contains the invalid character '{char}'."
)


class TransportSettingsError(ValueError):
    """
    Base class for rejected settings writes.

    Attributes:
        param_name: Name of the field that rejected the value
        actual_value: The value that was rejected
    """

    def __init__(self, message: str, param_name: str, actual_value: Any = None):
        super().__init__(message)
        self.param_name = param_name
        self.actual_value = actual_value


class InvalidEnumValueError(TransportSettingsError):
    """Raised when a value is not a member of the expected enumeration."""


class OutOfRangeError(TransportSettingsError):
    """Raised when a numeric or duration value falls outside its allowed range."""


class InvalidArgumentError(TransportSettingsError):
    """Raised when a value has the right type but an invalid shape."""

    def __init__(
        self,
        message: str,
        param_name: str,
        actual_value: Any = None,
        invalid_char: Optional[str] = None,
    ):
        super().__init__(message, param_name, actual_value)
        self.invalid_char = invalid_char


__all__ = [
    "TransportSettingsError",
    "InvalidEnumValueError",
    "OutOfRangeError",
    "InvalidArgumentError",
]
