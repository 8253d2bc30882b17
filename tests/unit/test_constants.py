"""Unit tests for constants module."""

from wstransport import constants


def test_action_uris():
    """Test message action URIs are unchanged."""
    assert constants.CONNECTION_OPENED_ACTION == "http://schemas.microsoft.com/2011/02/session/onopen"
    assert (
        constants.BINARY_MESSAGE_RECEIVED_ACTION
        == "http://schemas.microsoft.com/2011/02/websockets/onbinarymessage"
    )
    assert (
        constants.TEXT_MESSAGE_RECEIVED_ACTION
        == "http://schemas.microsoft.com/2011/02/websockets/ontextmessage"
    )


def test_header_names():
    """Test header names are unchanged."""
    assert constants.SOAP_CONTENT_TYPE_HEADER == "soap-content-type"
    assert constants.BINARY_ENCODER_TRANSFER_MODE_HEADER == "microsoft-binary-transfer-mode"


def test_internal_tokens():
    """Test internal method and sub-protocol tokens."""
    assert constants.WEBSOCKET_METHOD == "WEBSOCKET"
    assert constants.SOAP_SUB_PROTOCOL == "soap"
    assert constants.TRANSPORT_USAGE_METHOD_NAME == "TransportUsage"


def test_soap_sub_protocol_is_valid_setting():
    """Test the default sub-protocol tag passes settings validation."""
    from wstransport import TransportSettings

    settings = TransportSettings(sub_protocol=constants.SOAP_SUB_PROTOCOL)

    assert settings.sub_protocol == "soap"
