"""Component and component-list decoding."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from chatwire.config import DecodePolicy
from chatwire.decoding.catalog import DEFAULT_CATALOG, VariantCatalog
from chatwire.errors import (
    ComponentError,
    MalformedComponentError,
    MalformedPayloadError,
    UnrecognizedComponentError,
)
from chatwire.models.components import (
    Component,
    MalformedComponent,
    UnrecognizedComponent,
)
from chatwire.utils.logging import get_logger

log = get_logger(__name__)

DISCRIMINATOR_FIELD = "type"


def read_discriminator(raw: Any) -> int:
    """Read the discriminator without looking at the rest of the object."""
    if not isinstance(raw, dict):
        raise MalformedComponentError(
            None, f"component must be a JSON object, got {type(raw).__name__}"
        )
    value = raw.get(DISCRIMINATOR_FIELD)
    # bool is an int subclass; JSON true/false is not a discriminator
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedComponentError(
            None, f"'{DISCRIMINATOR_FIELD}' must be an integer, got {value!r}"
        )
    return value


class ComponentDecoder:
    """Turns one raw component object into one typed component.

    :meth:`decode` always raises on failure. Deciding whether a failure
    aborts the message or becomes a placeholder is up to
    :class:`ComponentListDecoder`, driven by ``policy``.
    """

    def __init__(
        self,
        catalog: VariantCatalog | None = None,
        policy: DecodePolicy = DecodePolicy.LENIENT,
        log_placeholders: bool = True,
    ) -> None:
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG
        self.policy = policy
        self.log_placeholders = log_placeholders

    @property
    def strict(self) -> bool:
        return self.policy == DecodePolicy.STRICT

    def decode(
        self, raw: Any, children: ComponentListDecoder | None = None
    ) -> Component:
        discriminator = read_discriminator(raw)
        rule = self.catalog.lookup(discriminator)
        if rule is None:
            raise UnrecognizedComponentError(discriminator)

        try:
            return rule(raw, children or ComponentListDecoder(self))
        except ValidationError as exc:
            raise MalformedComponentError(discriminator, exc) from exc

    def placeholder(self, raw: Any, error: ComponentError) -> Component:
        """Build the stand-in for an element that failed with ``error``.

        The placeholder holds its own copy of ``raw``.
        """
        raw = copy.deepcopy(raw)
        if isinstance(error, UnrecognizedComponentError):
            return UnrecognizedComponent(type=error.discriminator, raw=raw)
        cause = error.cause if isinstance(error, MalformedComponentError) else error
        return MalformedComponent(type=error.discriminator, raw=raw, error=str(cause))


@dataclass
class ComponentListResult:
    """Decoded components plus every element that degraded to a placeholder.

    ``errors`` includes failures inside action rows, each carrying its
    full ``path``.
    """

    components: list[Component] = field(default_factory=list)
    errors: list[ComponentError] = field(default_factory=list)


class ComponentListDecoder:
    """Decodes a JSON array of components, element by element, in order.

    Lenient policy: a failing element is replaced by a placeholder at its
    index, so the output always has the input's length. Strict policy: the
    first failing element raises and the rest are not decoded.
    """

    def __init__(self, decoder: ComponentDecoder | None = None) -> None:
        self.decoder = decoder or ComponentDecoder()
        # Only set on the scoped decoders handed to container rules
        self._path: tuple[int, ...] = ()
        self._errors: list[ComponentError] | None = None

    def decode(self, raw: Any) -> list[Component]:
        return self.decode_with_errors(raw).components

    def decode_with_errors(self, raw: Any) -> ComponentListResult:
        result = ComponentListResult()
        if raw is None:
            return result
        if not isinstance(raw, list):
            raise MalformedPayloadError(
                f"expected an array, got {type(raw).__name__}", field="components"
            )

        # Nested failures are reported on the outermost result
        errors = result.errors if self._errors is None else self._errors
        for index, item in enumerate(raw):
            mark = len(errors)
            try:
                component = self.decoder.decode(item, self._scoped(index, errors))
            except ComponentError as exc:
                exc.locate(index)
                if self.decoder.strict:
                    raise
                # The placeholder replaces the element and everything inside it
                del errors[mark:]
                exc.path[:0] = self._path
                component = self.decoder.placeholder(item, exc)
                errors.append(exc)
                self._log_failure(exc, item)
            result.components.append(component)

        if self._errors is None and result.errors and self.decoder.log_placeholders:
            log.info(
                "components_degraded",
                total=len(raw),
                degraded=len(result.errors),
            )
        return result

    def _scoped(self, index: int, errors: list[ComponentError]) -> ComponentListDecoder:
        """List decoder for the children of the element at ``index``."""
        scoped = ComponentListDecoder(self.decoder)
        scoped._path = (*self._path, index)
        scoped._errors = errors
        return scoped

    def _log_failure(self, error: ComponentError, raw: Any) -> None:
        if not self.decoder.log_placeholders:
            return
        if isinstance(error, UnrecognizedComponentError):
            log.debug(
                "component_unrecognized",
                discriminator=error.discriminator,
                path=error.path,
                raw=raw,
            )
        else:
            log.warning(
                "component_malformed",
                discriminator=error.discriminator,
                path=error.path,
                error=str(error.cause if isinstance(error, MalformedComponentError) else error),
                raw=raw,
            )
