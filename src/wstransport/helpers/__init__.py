"""Validation policies used by transport settings."""

from wstransport.helpers.timeout import TimeoutPolicy, DEFAULT_TIMEOUT_POLICY
from wstransport.helpers.websocket import (
    SubProtocolValidator,
    DEFAULT_SUBPROTOCOL_VALIDATOR,
)

__all__ = [
    "TimeoutPolicy",
    "DEFAULT_TIMEOUT_POLICY",
    "SubProtocolValidator",
    "DEFAULT_SUBPROTOCOL_VALIDATOR",
]
