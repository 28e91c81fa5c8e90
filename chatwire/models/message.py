"""Typed chat message model."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from chatwire.models.components import Component
from chatwire.models.embed import Embed
from chatwire.models.user import User


class MessageType(IntEnum):
    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    GUILD_MEMBER_JOIN = 7
    USER_PREMIUM_GUILD_SUBSCRIPTION = 8
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_1 = 9
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_2 = 10
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15
    REPLY = 19
    APPLICATION_COMMAND = 20


class Message(BaseModel):
    """One decoded chat message.

    ``components`` and ``referenced_message`` are filled in by the message
    decoder after the flat fields are validated; constructing a Message from
    a raw dict directly leaves them empty.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    channel_id: str = ""
    guild_id: str = ""
    author: User = Field(default_factory=User)
    content: str = ""
    timestamp: datetime | None = None
    edited_timestamp: datetime | None = None
    tts: bool = False
    mention_everyone: bool = False
    mentions: tuple[User, ...] = ()
    type: int = MessageType.DEFAULT
    pinned: bool = False
    embeds: tuple[Embed, ...] = ()
    webhook_id: str | None = None
    components: tuple[SerializeAsAny[Component], ...] = ()

    # Only set on replies. A reply without it means the service did not fetch
    # the original, or the original was deleted.
    referenced_message: Message | None = None

    @property
    def is_reply(self) -> bool:
        return self.type == MessageType.REPLY

    @property
    def is_webhook(self) -> bool:
        return bool(self.webhook_id)

    @property
    def was_edited(self) -> bool:
        return self.edited_timestamp is not None
