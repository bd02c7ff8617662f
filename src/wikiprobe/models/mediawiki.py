"""MediaWiki ``action=parse`` response models."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Section(BaseModel):
    """An entry of ``parse.sections``."""

    toclevel: int = 0
    level: str = ""
    line: str = ""
    number: str = ""
    index: str = ""
    fromtitle: str = ""
    byteoffset: int | None = None
    anchor: str = ""


class TextContent(BaseModel):
    """Rendered HTML wrapper; the API stores it under the ``*`` key."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = Field("", alias="*")


class ParseResult(BaseModel):
    """The ``parse`` object of an ``action=parse`` response."""

    title: str = ""
    pageid: int = 0
    sections: list[Section] | None = None
    text: TextContent | None = None


class MediaWikiResponse(BaseModel):
    """Top-level ``action=parse`` response."""

    parse: ParseResult | None = None
