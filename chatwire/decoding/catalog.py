"""Variant catalog: component discriminator -> decode rule.

A decode rule turns one raw component object into a typed component. Rules
receive the list decoder that is decoding them, so container variants can
decode their children with the same catalog and policy.

Catalogs are immutable. Supporting a new discriminator means building a new
catalog with :meth:`VariantCatalog.with_variant`; existing rules are never
touched.
"""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Iterator, Mapping, TypeVar

from pydantic import BaseModel

from chatwire.errors import MalformedComponentError
from chatwire.models.components import (
    ActionRow,
    Button,
    ChannelSelect,
    Component,
    ComponentType,
    MentionableSelect,
    RoleSelect,
    SelectMenu,
    TextInput,
    UserSelect,
)

if TYPE_CHECKING:
    from chatwire.decoding.components import ComponentListDecoder


DecodeRule = Callable[[dict[str, Any], "ComponentListDecoder"], Component]

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_wire(model_cls: type[ModelT], raw: dict[str, Any]) -> ModelT:
    """Validate a decoded JSON object with JSON typing rules.

    Strict mode: "19" is not an int, 1 is not a bool and a number is not a
    timestamp. Timestamps are accepted as ISO 8601 strings only.
    """
    return model_cls.model_validate_json(json.dumps(raw), strict=True)


def model_rule(model_cls: type[Component]) -> DecodeRule:
    """Build a rule that validates the whole object against ``model_cls``."""

    def rule(raw: dict[str, Any], _children: ComponentListDecoder) -> Component:
        return validate_wire(model_cls, raw)

    rule.__qualname__ = f"model_rule({model_cls.__name__})"
    return rule


def _action_row_rule(raw: dict[str, Any], children: ComponentListDecoder) -> Component:
    nested = raw.get("components")
    if not isinstance(nested, list):
        raise MalformedComponentError(
            raw.get("type"),
            f"'components' must be an array, got {type(nested).__name__}",
        )
    # The shell is validated on its own; children go through the list decoder
    shell = {k: v for k, v in raw.items() if k != "components"}
    row = validate_wire(ActionRow, shell)
    return row.model_copy(update={"components": tuple(children.decode(nested))})


class VariantCatalog:
    def __init__(self, rules: Mapping[int, DecodeRule]) -> None:
        self._rules: Mapping[int, DecodeRule] = MappingProxyType(dict(rules))

    def lookup(self, discriminator: int) -> DecodeRule | None:
        return self._rules.get(discriminator)

    def with_variant(self, discriminator: int, rule: DecodeRule) -> VariantCatalog:
        """Return a new catalog with one more entry.

        Raises ValueError if the discriminator already has a rule.
        """
        if discriminator in self._rules:
            raise ValueError(f"component type {discriminator} is already registered")
        return VariantCatalog({**self._rules, discriminator: rule})

    def discriminators(self) -> list[int]:
        return sorted(self._rules)

    def __contains__(self, discriminator: object) -> bool:
        return discriminator in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[int]:
        return iter(self.discriminators())


DEFAULT_CATALOG = VariantCatalog({
    ComponentType.ACTION_ROW: _action_row_rule,
    ComponentType.BUTTON: model_rule(Button),
    ComponentType.STRING_SELECT: model_rule(SelectMenu),
    ComponentType.TEXT_INPUT: model_rule(TextInput),
    ComponentType.USER_SELECT: model_rule(UserSelect),
    ComponentType.ROLE_SELECT: model_rule(RoleSelect),
    ComponentType.MENTIONABLE_SELECT: model_rule(MentionableSelect),
    ComponentType.CHANNEL_SELECT: model_rule(ChannelSelect),
})
