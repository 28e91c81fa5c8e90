"""Payload decoding: variant catalog, component decoders, message assembler."""

from chatwire.decoding.catalog import DEFAULT_CATALOG, DecodeRule, VariantCatalog, model_rule
from chatwire.decoding.components import (
    ComponentDecoder,
    ComponentListDecoder,
    ComponentListResult,
    read_discriminator,
)
from chatwire.decoding.message import (
    MessageDecoder,
    decode_message,
    decode_messages,
    encode_message,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DecodeRule",
    "VariantCatalog",
    "model_rule",
    "ComponentDecoder",
    "ComponentListDecoder",
    "ComponentListResult",
    "read_discriminator",
    "MessageDecoder",
    "decode_message",
    "decode_messages",
    "encode_message",
]
