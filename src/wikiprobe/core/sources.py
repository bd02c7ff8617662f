"""Section sources: where raw section text comes from."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wikiprobe.clients.mediawiki import MediaWikiClient


@runtime_checkable
class SectionSource(Protocol):
    """Anything that can return the raw text of a named page section."""

    def extract_section(self, name: str) -> str:
        ...


class ApiSectionSource:
    """Section source backed by the MediaWiki ``action=parse`` API."""

    def __init__(self, client: "MediaWikiClient", page_title: str) -> None:
        self.client = client
        self.page_title = page_title

    def extract_section(self, name: str) -> str:
        return self.client.get_page_section(self.page_title, name)


class StaticSectionSource:
    """Section source over an in-memory ``{name: text}`` mapping.

    Missing sections read as empty text so a comparison can still run and
    report the gap.
    """

    def __init__(self, sections: dict[str, str]) -> None:
        self.sections = dict(sections)

    def extract_section(self, name: str) -> str:
        return self.sections.get(name, "")
