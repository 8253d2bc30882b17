"""WebSocket transport settings for channel-based transports."""

from wstransport.config.defaults import DEFAULTS, WebSocketDefaults
from wstransport.config.settings import TransportSettings
from wstransport.errors import (
    InvalidArgumentError,
    InvalidEnumValueError,
    OutOfRangeError,
    TransportSettingsError,
)
from wstransport.helpers.timeout import INFINITE_TIMEOUT, TimeoutPolicy
from wstransport.helpers.websocket import SubProtocolValidator
from wstransport.usage import TransportUsage

__version__ = "0.1.0"
__all__ = [
    "TransportSettings",
    "TransportUsage",
    "WebSocketDefaults",
    "DEFAULTS",
    "INFINITE_TIMEOUT",
    "TimeoutPolicy",
    "SubProtocolValidator",
    "TransportSettingsError",
    "InvalidEnumValueError",
    "OutOfRangeError",
    "InvalidArgumentError",
    "__version__",
]
