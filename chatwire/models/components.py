"""Interactive message components.

Every component carries the integer ``type`` discriminator it was decoded
from. ``kind`` maps it onto :class:`ComponentType` for dispatch and is None
for discriminators this package does not know about.

Two placeholder shapes stand in for elements that could not be decoded:
:class:`UnrecognizedComponent` (no variant for the discriminator) and
:class:`MalformedComponent` (known discriminator, unusable body). Both keep
the raw payload so nothing from the wire is lost.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny


class ComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3
    TEXT_INPUT = 4
    USER_SELECT = 5
    ROLE_SELECT = 6
    MENTIONABLE_SELECT = 7
    CHANNEL_SELECT = 8


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2
    SUCCESS = 3
    DANGER = 4
    LINK = 5


class TextInputStyle(IntEnum):
    SHORT = 1
    PARAGRAPH = 2


class Component(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_placeholder: ClassVar[bool] = False

    type: int

    @property
    def kind(self) -> ComponentType | None:
        if self.type is None:
            return None
        try:
            return ComponentType(self.type)
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Shared sub-records
# ---------------------------------------------------------------------------

class PartialEmoji(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    animated: bool = False


class SelectOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str
    description: str = ""
    emoji: PartialEmoji | None = None
    default: bool = False


class SelectDefaultValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str  # "user", "role" or "channel"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class ActionRow(Component):
    """Container for other components; children are decoded like top-level ones."""

    components: tuple[SerializeAsAny[Component], ...] = ()


class Button(Component):
    style: int
    label: str = ""
    emoji: PartialEmoji | None = None
    custom_id: str = ""
    url: str = ""
    disabled: bool = False


class SelectMenu(Component):
    custom_id: str
    options: tuple[SelectOption, ...]
    placeholder: str = ""
    min_values: int = 1
    max_values: int = 1
    disabled: bool = False


class TextInput(Component):
    custom_id: str
    style: int
    label: str
    min_length: int | None = None
    max_length: int | None = None
    required: bool = True
    value: str = ""
    placeholder: str = ""


class _AutoPopulatedSelect(Component):
    custom_id: str
    placeholder: str = ""
    default_values: tuple[SelectDefaultValue, ...] = ()
    min_values: int = 1
    max_values: int = 1
    disabled: bool = False


class UserSelect(_AutoPopulatedSelect):
    pass


class RoleSelect(_AutoPopulatedSelect):
    pass


class MentionableSelect(_AutoPopulatedSelect):
    pass


class ChannelSelect(_AutoPopulatedSelect):
    channel_types: tuple[int, ...] = ()


# ---------------------------------------------------------------------------
# Placeholders
# ---------------------------------------------------------------------------

class UnrecognizedComponent(Component):
    """A component whose discriminator has no registered variant."""

    is_placeholder: ClassVar[bool] = True

    raw: dict[str, Any] = Field(default_factory=dict)


class MalformedComponent(Component):
    """A component that failed to decode into its variant.

    ``type`` is None when the element had no usable discriminator at all.
    """

    is_placeholder: ClassVar[bool] = True

    type: int | None = None
    raw: Any = None
    error: str = ""
