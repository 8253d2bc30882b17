"""Transport usage policy."""

from enum import Enum
from typing import Any

from wstransport.errors import INVALID_ENUM_VALUE, InvalidEnumValueError


class TransportUsage(Enum):
    """When the WebSocket transport upgrade is attempted."""

    WHEN_DUPLEX = 0
    ALWAYS = 1
    NEVER = 2


def is_defined(value: Any) -> bool:
    """Return True if value is a TransportUsage member."""
    return isinstance(value, TransportUsage)


def validate_transport_usage(value: Any, param_name: str = "value") -> None:
    """
    Check that value is a TransportUsage member.

    Plain integers and strings are rejected even when they match a member's
    value or name.

    Raises:
        InvalidEnumValueError: If value is not a member
    """
    if not is_defined(value):
        raise InvalidEnumValueError(
            INVALID_ENUM_VALUE.format(value=value, enum_name=TransportUsage.__name__),
            param_name,
            value,
        )
