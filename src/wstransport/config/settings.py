"""WebSocket transport settings."""

import logging
from datetime import timedelta
from typing import Any, Mapping, Optional

from wstransport.config.defaults import DEFAULTS, WebSocketDefaults
from wstransport.errors import (
    SUBPROTOCOL_EMPTY,
    SUBPROTOCOL_INVALID_CHAR,
    SUBPROTOCOL_MULTIPLE,
    TIMEOUT_NEGATIVE,
    TIMEOUT_TOO_BIG,
    VALUE_MUST_BE_NON_NEGATIVE,
    InvalidArgumentError,
    OutOfRangeError,
    TransportSettingsError,
)
from wstransport.helpers.timeout import DEFAULT_TIMEOUT_POLICY, TimeoutPolicy
from wstransport.helpers.websocket import (
    DEFAULT_SUBPROTOCOL_VALIDATOR,
    SubProtocolValidator,
)
from wstransport.usage import TransportUsage, validate_transport_usage

logger = logging.getLogger(__name__)

_UNSET: Any = object()


class TransportSettings:
    """
    How a channel negotiates and operates a WebSocket connection.

    Every field is exposed as a property whose setter validates before
    assigning, so a rejected write leaves the previous value in place.

    Instances compare by value (sub-protocols case-insensitively) and are
    hashable. They are still mutable: hand consumers a clone() rather than a
    shared instance, and do not mutate an instance used as a dict key.

    Usage:
        settings = TransportSettings(transport_usage=TransportUsage.ALWAYS)
        settings.sub_protocol = "chat"
        snapshot = settings.clone()
    """

    def __init__(
        self,
        *,
        transport_usage: TransportUsage = _UNSET,
        create_notification_on_connection: bool = _UNSET,
        keep_alive_interval: timedelta = _UNSET,
        sub_protocol: Optional[str] = _UNSET,
        disable_payload_masking: bool = _UNSET,
        max_pending_connections: int = _UNSET,
        defaults: Optional[WebSocketDefaults] = None,
        timeout_policy: Optional[TimeoutPolicy] = None,
        subprotocol_validator: Optional[SubProtocolValidator] = None,
    ):
        """
        Initialize settings from the defaults table.

        Args:
            transport_usage: When the WebSocket upgrade is attempted
            create_notification_on_connection: Raise a message when a connection opens
            keep_alive_interval: Ping period; the infinite sentinel disables pings
            sub_protocol: Single sub-protocol to negotiate, or None
            disable_payload_masking: Skip per-frame masking
            max_pending_connections: Backlog of accepted, unprocessed connections
            defaults: Table supplying omitted fields (defaults to DEFAULTS)
            timeout_policy: Bounds for keep_alive_interval
            subprotocol_validator: Token rules for sub_protocol

        Raises:
            TransportSettingsError: If a supplied or default value is invalid
        """
        self._timeout_policy = timeout_policy or DEFAULT_TIMEOUT_POLICY
        self._subprotocol_validator = subprotocol_validator or DEFAULT_SUBPROTOCOL_VALIDATOR

        table = defaults if defaults is not None else DEFAULTS
        self.transport_usage = table.transport_usage
        self.create_notification_on_connection = table.create_notification_on_connection
        self.keep_alive_interval = table.keep_alive_interval
        self.sub_protocol = table.sub_protocol
        self.disable_payload_masking = table.disable_payload_masking
        self.max_pending_connections = table.max_pending_connections

        if transport_usage is not _UNSET:
            self.transport_usage = transport_usage
        if create_notification_on_connection is not _UNSET:
            self.create_notification_on_connection = create_notification_on_connection
        if keep_alive_interval is not _UNSET:
            self.keep_alive_interval = keep_alive_interval
        if sub_protocol is not _UNSET:
            self.sub_protocol = sub_protocol
        if disable_payload_masking is not _UNSET:
            self.disable_payload_masking = disable_payload_masking
        if max_pending_connections is not _UNSET:
            self.max_pending_connections = max_pending_connections

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TransportSettings":
        """Build settings from a defaults table read from the environment."""
        return cls(defaults=WebSocketDefaults.from_env(environ))

    @staticmethod
    def _rejected(error: TransportSettingsError) -> TransportSettingsError:
        logger.debug("Rejected %s=%r: %s", error.param_name, error.actual_value, error)
        return error

    @staticmethod
    def _wrong_type(param_name: str, value: Any, expected: str) -> TypeError:
        error = TypeError(f"{param_name} must be {expected}, got {type(value).__name__}")
        logger.debug("Rejected %s=%r: %s", param_name, value, error)
        return error

    @property
    def transport_usage(self) -> TransportUsage:
        return self._transport_usage

    @transport_usage.setter
    def transport_usage(self, value: TransportUsage) -> None:
        try:
            validate_transport_usage(value, "transport_usage")
        except TransportSettingsError as e:
            self._rejected(e)
            raise
        self._transport_usage = value

    @property
    def create_notification_on_connection(self) -> bool:
        return self._create_notification_on_connection

    @create_notification_on_connection.setter
    def create_notification_on_connection(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise self._wrong_type("create_notification_on_connection", value, "a bool")
        self._create_notification_on_connection = value

    @property
    def keep_alive_interval(self) -> timedelta:
        return self._keep_alive_interval

    @keep_alive_interval.setter
    def keep_alive_interval(self, value: timedelta) -> None:
        if not isinstance(value, timedelta):
            raise self._wrong_type("keep_alive_interval", value, "a timedelta")

        policy = self._timeout_policy
        if policy.is_negative(value):
            raise self._rejected(
                OutOfRangeError(TIMEOUT_NEGATIVE, "keep_alive_interval", value)
            )
        if policy.is_too_large(value):
            raise self._rejected(
                OutOfRangeError(
                    TIMEOUT_TOO_BIG.format(max_ms=policy.max_wait_ms),
                    "keep_alive_interval",
                    value,
                )
            )

        self._keep_alive_interval = value

    @property
    def sub_protocol(self) -> Optional[str]:
        return self._sub_protocol

    @sub_protocol.setter
    def sub_protocol(self, value: Optional[str]) -> None:
        if value is not None:
            if not isinstance(value, str):
                raise self._wrong_type("sub_protocol", value, "a string or None")

            if value == "":
                raise self._rejected(
                    InvalidArgumentError(SUBPROTOCOL_EMPTY, "sub_protocol", value)
                )

            validator = self._subprotocol_validator
            if validator.contains_multiple(value):
                raise self._rejected(
                    InvalidArgumentError(
                        SUBPROTOCOL_MULTIPLE.format(value=value), "sub_protocol", value
                    )
                )

            invalid_char = validator.find_invalid_char(value)
            if invalid_char is not None:
                raise self._rejected(
                    InvalidArgumentError(
                        SUBPROTOCOL_INVALID_CHAR.format(value=value, char=invalid_char),
                        "sub_protocol",
                        value,
                        invalid_char=invalid_char,
                    )
                )

        self._sub_protocol = value

    @property
    def disable_payload_masking(self) -> bool:
        return self._disable_payload_masking

    @disable_payload_masking.setter
    def disable_payload_masking(self, value: bool) -> None:
        if not isinstance(value, bool):
            raise self._wrong_type("disable_payload_masking", value, "a bool")
        self._disable_payload_masking = value

    @property
    def max_pending_connections(self) -> int:
        return self._max_pending_connections

    @max_pending_connections.setter
    def max_pending_connections(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._wrong_type("max_pending_connections", value, "an int")
        if value < 0:
            raise self._rejected(
                OutOfRangeError(VALUE_MUST_BE_NON_NEGATIVE, "max_pending_connections", value)
            )

        self._max_pending_connections = value

    @property
    def timeout_policy(self) -> TimeoutPolicy:
        return self._timeout_policy

    @property
    def subprotocol_validator(self) -> SubProtocolValidator:
        return self._subprotocol_validator

    def clone(self) -> "TransportSettings":
        """
        Return an independent copy.

        Fields are copied through the validating setters, so the copy holds
        only values that pass validation under this instance's policies.
        """
        duplicate = TransportSettings.__new__(type(self))
        duplicate._timeout_policy = self._timeout_policy
        duplicate._subprotocol_validator = self._subprotocol_validator
        duplicate.transport_usage = self.transport_usage
        duplicate.sub_protocol = self.sub_protocol
        duplicate.keep_alive_interval = self.keep_alive_interval
        duplicate.disable_payload_masking = self.disable_payload_masking
        duplicate.create_notification_on_connection = self.create_notification_on_connection
        duplicate.max_pending_connections = self.max_pending_connections
        return duplicate

    def __copy__(self) -> "TransportSettings":
        return self.clone()

    def __deepcopy__(self, memo) -> "TransportSettings":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransportSettings):
            return NotImplemented

        return (
            self.transport_usage == other.transport_usage
            and self.create_notification_on_connection
            == other.create_notification_on_connection
            and self.keep_alive_interval == other.keep_alive_interval
            and self.disable_payload_masking == other.disable_payload_masking
            and _fold(self.sub_protocol) == _fold(other.sub_protocol)
            and self.max_pending_connections == other.max_pending_connections
        )

    def __hash__(self) -> int:
        hashcode = (
            hash(self.transport_usage)
            ^ hash(self.create_notification_on_connection)
            ^ hash(self.keep_alive_interval)
            ^ hash(self.disable_payload_masking)
            ^ hash(self.max_pending_connections)
        )
        if self.sub_protocol is not None:
            hashcode ^= hash(self.sub_protocol.lower())
        return hashcode

    def __repr__(self) -> str:
        return (
            f"TransportSettings(transport_usage={self.transport_usage.name}, "
            f"create_notification_on_connection={self.create_notification_on_connection}, "
            f"keep_alive_interval={self.keep_alive_interval!r}, "
            f"sub_protocol={self.sub_protocol!r}, "
            f"disable_payload_masking={self.disable_payload_masking}, "
            f"max_pending_connections={self.max_pending_connections})"
        )


def _fold(value: Optional[str]) -> Optional[str]:
    return value.lower() if value is not None else None
