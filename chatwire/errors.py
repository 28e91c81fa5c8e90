"""Decode error taxonomy."""

from __future__ import annotations


class DecodeError(Exception):
    """Base class for every failure raised while decoding a payload."""


class MalformedPayloadError(DecodeError):
    """The payload is not a JSON object, or a flat field has the wrong JSON type.

    ``field`` is the dotted path of the first offending field, or None when
    the payload as a whole is unusable.
    """

    def __init__(self, detail: str, field: str | None = None) -> None:
        self.detail = detail
        self.field = field
        if field:
            super().__init__(f"malformed payload at '{field}': {detail}")
        else:
            super().__init__(f"malformed payload: {detail}")


class ComponentError(DecodeError):
    """A single component element could not be decoded.

    ``path`` holds the element's position: one index per array level,
    outermost first, so a button inside the second action row is ``[1, 0]``.
    """

    def __init__(self, message: str, discriminator: int | None) -> None:
        self.discriminator = discriminator
        self.path: list[int] = []
        super().__init__(message)

    @property
    def index(self) -> int | None:
        return self.path[0] if self.path else None

    def locate(self, index: int) -> ComponentError:
        """Prefix the element's index within the enclosing array."""
        self.path.insert(0, index)
        return self


class MalformedComponentError(ComponentError):
    """A recognized discriminator whose object does not fit the variant's shape."""

    def __init__(self, discriminator: int | None, cause: Exception | str) -> None:
        self.cause = cause
        super().__init__(
            f"malformed component (type={discriminator}): {cause}",
            discriminator,
        )


class UnrecognizedComponentError(ComponentError):
    """A discriminator with no entry in the variant catalog."""

    def __init__(self, discriminator: int) -> None:
        super().__init__(
            f"unrecognized component type {discriminator}",
            discriminator,
        )
