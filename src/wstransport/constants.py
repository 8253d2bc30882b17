"""String tokens shared with the channel and listener layers.

Remote peers and co-located components key on these values, so they must
stay byte-for-byte stable.
"""

# Message actions
CONNECTION_OPENED_ACTION = "http://schemas.microsoft.com/2011/02/session/onopen"
BINARY_MESSAGE_RECEIVED_ACTION = "http://schemas.microsoft.com/2011/02/websockets/onbinarymessage"
TEXT_MESSAGE_RECEIVED_ACTION = "http://schemas.microsoft.com/2011/02/websockets/ontextmessage"

# Header names
SOAP_CONTENT_TYPE_HEADER = "soap-content-type"
BINARY_ENCODER_TRANSFER_MODE_HEADER = "microsoft-binary-transfer-mode"

# Internal tokens used by the connection/listener implementation
WEBSOCKET_METHOD = "WEBSOCKET"
SOAP_SUB_PROTOCOL = "soap"
TRANSPORT_USAGE_METHOD_NAME = "TransportUsage"

__all__ = [
    "CONNECTION_OPENED_ACTION",
    "BINARY_MESSAGE_RECEIVED_ACTION",
    "TEXT_MESSAGE_RECEIVED_ACTION",
    "SOAP_CONTENT_TYPE_HEADER",
    "BINARY_ENCODER_TRANSFER_MODE_HEADER",
    "WEBSOCKET_METHOD",
    "SOAP_SUB_PROTOCOL",
    "TRANSPORT_USAGE_METHOD_NAME",
]
