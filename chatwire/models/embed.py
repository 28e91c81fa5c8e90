"""Embed records attached to a message."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class EmbedType:
    RICH = "rich"
    IMAGE = "image"
    VIDEO = "video"
    GIF_VIDEO = "gifv"
    ARTICLE = "article"
    LINK = "link"


class EmbedField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = False


class EmbedFooter(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    icon_url: str = ""
    proxy_icon_url: str = ""


class EmbedAuthor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""
    icon_url: str = ""
    proxy_icon_url: str = ""


class EmbedProvider(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""


class Embed(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    type: str = ""  # always EmbedType.RICH for webhook embeds
    description: str = ""
    url: str = ""
    timestamp: datetime | None = None
    color: int = 0
    footer: EmbedFooter | None = None
    provider: EmbedProvider | None = None
    author: EmbedAuthor | None = None
    fields: tuple[EmbedField, ...] = ()
