"""Typed message models."""

from chatwire.models.components import (
    ActionRow,
    Button,
    ButtonStyle,
    ChannelSelect,
    Component,
    ComponentType,
    MalformedComponent,
    MentionableSelect,
    PartialEmoji,
    RoleSelect,
    SelectDefaultValue,
    SelectMenu,
    SelectOption,
    TextInput,
    TextInputStyle,
    UnrecognizedComponent,
    UserSelect,
)
from chatwire.models.embed import (
    Embed,
    EmbedAuthor,
    EmbedField,
    EmbedFooter,
    EmbedProvider,
    EmbedType,
)
from chatwire.models.message import Message, MessageType
from chatwire.models.user import User

__all__ = [
    "ActionRow",
    "Button",
    "ButtonStyle",
    "ChannelSelect",
    "Component",
    "ComponentType",
    "Embed",
    "EmbedAuthor",
    "EmbedField",
    "EmbedFooter",
    "EmbedProvider",
    "EmbedType",
    "MalformedComponent",
    "MentionableSelect",
    "Message",
    "MessageType",
    "PartialEmoji",
    "RoleSelect",
    "SelectDefaultValue",
    "SelectMenu",
    "SelectOption",
    "TextInput",
    "TextInputStyle",
    "UnrecognizedComponent",
    "User",
    "UserSelect",
]
