"""chatwire - typed decoding of chat message payloads."""

from chatwire.config import DecodePolicy, Settings, load_settings
from chatwire.decoding import (
    DEFAULT_CATALOG,
    MessageDecoder,
    VariantCatalog,
    decode_message,
    decode_messages,
    encode_message,
)
from chatwire.errors import (
    ComponentError,
    DecodeError,
    MalformedComponentError,
    MalformedPayloadError,
    UnrecognizedComponentError,
)
from chatwire.models import Component, ComponentType, Message, MessageType

__version__ = "0.1.0"

__all__ = [
    "DecodePolicy",
    "Settings",
    "load_settings",
    "DEFAULT_CATALOG",
    "MessageDecoder",
    "VariantCatalog",
    "decode_message",
    "decode_messages",
    "encode_message",
    "ComponentError",
    "DecodeError",
    "MalformedComponentError",
    "MalformedPayloadError",
    "UnrecognizedComponentError",
    "Component",
    "ComponentType",
    "Message",
    "MessageType",
]
