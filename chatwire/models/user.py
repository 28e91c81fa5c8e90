"""User record as it appears on message payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user-shaped record.

    On webhook messages the author carries the webhook's id, name and avatar
    rather than a real account.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    username: str = ""
    discriminator: str = ""
    avatar: str | None = None
    bot: bool = False
    system: bool = False
    public_flags: int = 0
