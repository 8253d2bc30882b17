"""Unit tests for helpers.timeout and helpers.websocket modules."""

from datetime import timedelta

import pytest

from wstransport.helpers.timeout import (
    DEFAULT_TIMEOUT_POLICY,
    INFINITE_TIMEOUT,
    MAX_WAIT,
    TimeoutPolicy,
)
from wstransport.helpers.websocket import (
    DEFAULT_SUBPROTOCOL_VALIDATOR,
    SubProtocolValidator,
)


class TestTimeoutPolicy:
    """Test suite for TimeoutPolicy."""

    def test_constants(self):
        """Test the sentinel and maximum wait."""
        assert INFINITE_TIMEOUT == timedelta(milliseconds=-1)
        assert MAX_WAIT == timedelta(milliseconds=2147483647)
        assert DEFAULT_TIMEOUT_POLICY.max_wait_ms == 2147483647

    def test_is_negative(self):
        """Test negative detection excludes the sentinel."""
        policy = TimeoutPolicy()

        assert policy.is_negative(timedelta(seconds=-1)) is True
        assert policy.is_negative(INFINITE_TIMEOUT) is False
        assert policy.is_negative(timedelta(0)) is False

    def test_is_too_large(self):
        """Test the upper bound excludes timedelta.max."""
        policy = TimeoutPolicy()

        assert policy.is_too_large(MAX_WAIT) is False
        assert policy.is_too_large(MAX_WAIT + timedelta(milliseconds=1)) is True
        assert policy.is_too_large(timedelta.max) is False


class TestSubProtocolValidator:
    """Test suite for SubProtocolValidator."""

    @pytest.mark.parametrize("value", ["chat", "soap", "v2.json", "x-custom_proto~1"])
    def test_valid_tokens(self, value):
        """Test ordinary tokens pass."""
        assert DEFAULT_SUBPROTOCOL_VALIDATOR.contains_multiple(value) is False
        assert DEFAULT_SUBPROTOCOL_VALIDATOR.find_invalid_char(value) is None

    def test_split(self):
        """Test splitting on every separator."""
        validator = SubProtocolValidator(separators=(",", ";"))

        assert validator.split("a,b;c") == ["a", "b", "c"]
        assert validator.contains_multiple("a;b") is True

    @pytest.mark.parametrize(
        "value, char",
        [("a(b", "("), ("a=b", "="), ("a\\b", "\\"), ("a\x7fb", "[127]"), ("\x00", "[0]")],
    )
    def test_find_invalid_char(self, value, char):
        """Test the first offending character is returned."""
        assert DEFAULT_SUBPROTOCOL_VALIDATOR.find_invalid_char(value) == char

    def test_first_invalid_char_wins(self):
        """Test scanning stops at the first invalid character."""
        assert DEFAULT_SUBPROTOCOL_VALIDATOR.find_invalid_char("ok/then space") == "/"
