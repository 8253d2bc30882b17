"""Transport configuration."""

from wstransport.config.defaults import WebSocketDefaults, DEFAULTS
from wstransport.config.settings import TransportSettings

__all__ = ["WebSocketDefaults", "DEFAULTS", "TransportSettings"]
