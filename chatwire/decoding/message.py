"""Message assembly: JSON payload -> :class:`Message`.

Flat fields are validated by the pydantic model with JSON typing rules.
``components`` is split off and handed to the component list decoder, and
``referenced_message`` is decoded by recursing into the same assembler.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from chatwire.config import DecodePolicy, Settings
from chatwire.decoding.catalog import VariantCatalog, validate_wire
from chatwire.decoding.components import ComponentDecoder, ComponentListDecoder
from chatwire.errors import DecodeError, MalformedPayloadError
from chatwire.models.message import Message
from chatwire.utils.logging import get_logger

log = get_logger(__name__)

Payload = bytes | bytearray | str | dict[str, Any]


def _parse(data: Payload | list[Any]) -> Any:
    if isinstance(data, (dict, list)):
        return data
    try:
        return json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MalformedPayloadError(f"invalid JSON: {exc}") from exc


def _first_error(exc: ValidationError, prefix: str = "") -> MalformedPayloadError:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err["loc"])
    return MalformedPayloadError(err["msg"], field=f"{prefix}{loc}" if prefix else loc)


class MessageDecoder:
    def __init__(
        self,
        policy: DecodePolicy = DecodePolicy.LENIENT,
        catalog: VariantCatalog | None = None,
        log_placeholders: bool = True,
    ) -> None:
        self.components = ComponentListDecoder(
            ComponentDecoder(catalog, policy, log_placeholders)
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, catalog: VariantCatalog | None = None
    ) -> MessageDecoder:
        return cls(
            policy=settings.decoder.policy,
            catalog=catalog,
            log_placeholders=settings.decoder.log_placeholders,
        )

    @property
    def policy(self) -> DecodePolicy:
        return self.components.decoder.policy

    def decode(self, data: Payload) -> Message:
        """Decode one message payload.

        Raises MalformedPayloadError for bad JSON or flat fields, and in
        strict mode MalformedComponentError / UnrecognizedComponentError.
        """
        try:
            return self._assemble(_parse(data), prefix="")
        except DecodeError as exc:
            log.warning("message_decode_failed", error=str(exc), policy=self.policy.value)
            raise

    def decode_many(self, data: bytes | str | list[Any]) -> list[Message]:
        """Decode a JSON array of message objects, as returned by history listings."""
        raw = _parse(data)
        if not isinstance(raw, list):
            raise MalformedPayloadError(f"expected an array of messages, got {type(raw).__name__}")
        return [self.decode(item) for item in raw]

    def _assemble(self, raw: Any, prefix: str) -> Message:
        if not isinstance(raw, dict):
            raise MalformedPayloadError(
                f"expected a JSON object, got {type(raw).__name__}",
                field=prefix.rstrip(".") or None,
            )

        # null means "no value", same as the key being absent
        flat = {key: value for key, value in raw.items() if value is not None}
        raw_components = flat.pop("components", None)
        raw_referenced = flat.pop("referenced_message", None)

        try:
            message = validate_wire(Message, flat)
        except ValidationError as exc:
            raise _first_error(exc, prefix) from exc

        try:
            components = self.components.decode(raw_components)
        except MalformedPayloadError as exc:
            raise MalformedPayloadError(exc.detail, field=f"{prefix}components") from exc

        referenced = None
        if raw_referenced is not None:
            referenced = self._assemble(raw_referenced, prefix=f"{prefix}referenced_message.")

        return message.model_copy(
            update={"components": tuple(components), "referenced_message": referenced}
        )


def decode_message(
    data: Payload,
    *,
    strict: bool = False,
    catalog: VariantCatalog | None = None,
) -> Message:
    """Decode one message payload with the given component policy."""
    policy = DecodePolicy.STRICT if strict else DecodePolicy.LENIENT
    return MessageDecoder(policy=policy, catalog=catalog).decode(data)


def decode_messages(
    data: bytes | str | list[Any],
    *,
    strict: bool = False,
    catalog: VariantCatalog | None = None,
) -> list[Message]:
    policy = DecodePolicy.STRICT if strict else DecodePolicy.LENIENT
    return MessageDecoder(policy=policy, catalog=catalog).decode_many(data)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _to_payload(message: Message) -> dict[str, Any]:
    payload = message.model_dump(
        mode="json",
        exclude={"components", "referenced_message", "mentions"},
        exclude_none=True,
        exclude_defaults=True,
    )
    # mentions is always present on the wire, even when empty
    payload["mentions"] = [
        user.model_dump(mode="json", exclude_none=True, exclude_defaults=True)
        for user in message.mentions
    ]
    if message.referenced_message is not None:
        payload["referenced_message"] = _to_payload(message.referenced_message)
    return payload


def encode_message(message: Message) -> bytes:
    """Serialise a message's flat fields, embeds and referenced message.

    Components are not serialised. Fields holding their zero value are
    omitted, so decoding the output yields the same flat values.
    """
    return json.dumps(_to_payload(message), separators=(",", ":")).encode("utf-8")
