"""Process-wide default values for transport settings."""

import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Mapping, Optional

from wstransport.helpers.timeout import INFINITE_TIMEOUT
from wstransport.usage import TransportUsage

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got '{raw}'.")


def _parse_usage(name: str, raw: str) -> TransportUsage:
    wanted = raw.strip().replace("_", "").replace("-", "").upper()
    for member in TransportUsage:
        if member.name.replace("_", "") == wanted:
            return member
    choices = ", ".join(member.name for member in TransportUsage)
    raise ValueError(f"{name} must be one of {choices}, got '{raw}'.")


def _parse_interval(name: str, raw: str) -> timedelta:
    value = raw.strip().lower()
    if value in ("infinite", "-1"):
        return INFINITE_TIMEOUT
    try:
        seconds = float(value)
        interval = timedelta(seconds=seconds)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"{name} must be a number of seconds, got '{raw}'.") from exc
    if seconds < 0:
        raise ValueError(f"{name} must be non-negative or 'infinite', got '{raw}'.")
    return interval


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'.") from exc


@dataclass(frozen=True)
class WebSocketDefaults:
    """Default values applied to newly constructed transport settings."""

    transport_usage: TransportUsage = TransportUsage.NEVER
    create_notification_on_connection: bool = False
    keep_alive_interval: timedelta = timedelta(0)
    sub_protocol: Optional[str] = None
    disable_payload_masking: bool = False
    max_pending_connections: int = 0

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WebSocketDefaults":
        """
        Build a defaults table from environment variables.

        Unset variables keep the built-in default. Values are parsed here but
        range checks are left to TransportSettings.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Raises:
            ValueError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        base = cls()

        def read(name, parser, fallback):
            raw = env.get(name)
            if raw is None:
                return fallback
            return parser(name, raw)

        sub_protocol = env.get("WS_SUB_PROTOCOL", base.sub_protocol)
        return cls(
            transport_usage=read("WS_TRANSPORT_USAGE", _parse_usage, base.transport_usage),
            create_notification_on_connection=read(
                "WS_CREATE_NOTIFICATION_ON_CONNECTION",
                _parse_bool,
                base.create_notification_on_connection,
            ),
            keep_alive_interval=read(
                "WS_KEEP_ALIVE_INTERVAL_S", _parse_interval, base.keep_alive_interval
            ),
            sub_protocol=sub_protocol or None,
            disable_payload_masking=read(
                "WS_DISABLE_PAYLOAD_MASKING", _parse_bool, base.disable_payload_masking
            ),
            max_pending_connections=read(
                "WS_MAX_PENDING_CONNECTIONS", _parse_int, base.max_pending_connections
            ),
        )


DEFAULTS = WebSocketDefaults()
