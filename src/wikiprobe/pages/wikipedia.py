"""Page object for a Wikipedia article."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from wikiprobe.pages.base import DEFAULT_TIMEOUT_MS, BasePage
from wikiprobe.utils.logging import get_logger

if TYPE_CHECKING:
    from playwright.sync_api import Page

logger = get_logger("pages.wikipedia")

DEFAULT_ARTICLE = "Playwright_(software)"

# Walks the siblings after a heading and collects paragraph and list text
# until the next h2/h3. Handles both the legacy ``h2 > span#Anchor`` markup
# and the current ``div.mw-heading > h2#Anchor`` wrapper.
_SECTION_TEXT_JS = """
(anchor) => {
  const target = document.getElementById(anchor);
  if (!target) return null;
  const heading = target.closest('h1, h2, h3, h4, h5, h6') || target;
  const parent = heading.parentElement;
  const start = parent && parent.classList.contains('mw-heading') ? parent : heading;
  const isBoundary = (el) => {
    const tag = el.tagName.toLowerCase();
    return tag === 'h2' || tag === 'h3'
      || el.classList.contains('mw-heading2') || el.classList.contains('mw-heading3');
  };
  const parts = [];
  for (let el = start.nextElementSibling; el; el = el.nextElementSibling) {
    if (isBoundary(el)) break;
    const tag = el.tagName.toLowerCase();
    if (tag === 'p' || tag === 'ul' || tag === 'ol') {
      const text = el.textContent;
      if (text && text.trim()) parts.push(text);
    }
  }
  return parts;
}
"""

# Items of the first list following a heading, with whether each holds a link
_LIST_ITEMS_JS = """
(anchor) => {
  const target = document.getElementById(anchor);
  if (!target) return null;
  const heading = target.closest('h1, h2, h3, h4, h5, h6') || target;
  const parent = heading.parentElement;
  const start = parent && parent.classList.contains('mw-heading') ? parent : heading;
  for (let el = start.nextElementSibling; el; el = el.nextElementSibling) {
    if (el.tagName.toLowerCase() === 'ul') {
      return Array.from(el.children)
        .filter((li) => li.tagName.toLowerCase() === 'li')
        .map((li) => ({ text: li.textContent || '', linked: li.querySelector('a') !== null }));
    }
  }
  return [];
}
"""


def section_anchor(name: str) -> str:
    """Return the heading id MediaWiki generates for a section title."""
    return "_".join(name.strip().split())


def item_name(text: str) -> str:
    """Return the leading name of a list item (its first line)."""
    stripped = text.strip()
    if not stripped:
        return ""
    return stripped.split("\n")[0].strip()


def _anchor_selector(anchor: str) -> str:
    escaped = anchor.replace("\\", "\\\\").replace('"', '\\"')
    return f'[id="{escaped}"]'


class WikipediaArticlePage(BasePage):
    """A Wikipedia article, Playwright (software) by default.

    Implements ``extract_section`` so it can be used as a section source.
    """

    TOOLS_BUTTON = "[aria-label='Tools']"

    def __init__(
        self,
        page: "Page",
        base_url: str,
        article: str = DEFAULT_ARTICLE,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
    ) -> None:
        super().__init__(page, base_url, timeout_ms)
        self.article = article

    @property
    def url(self) -> str:
        return f"{self.base_url}/wiki/{quote(self.article, safe='()_,:')}"

    def navigate(self) -> None:
        """Open the article and wait for the network to settle."""
        logger.info("Navigating to %s", self.url)
        self.page.goto(self.url, wait_until="networkidle", timeout=self.timeout_ms)

    def extract_section(self, name: str) -> str:
        """Return the text of the paragraphs and lists under a section heading.

        Element texts are joined with a single space; an empty string means
        the heading exists but holds no prose.
        """
        anchor = section_anchor(name)
        self.wait_for_selector(_anchor_selector(anchor))

        parts: Any = self.page.evaluate(_SECTION_TEXT_JS, anchor)
        if not parts:
            logger.warning("Section '%s' has no paragraph or list content", name)
            return ""

        text = " ".join(parts)
        logger.debug("Extracted %d elements (%d characters) from '%s'", len(parts), len(text), name)
        return text

    def _list_items(self, section_name: str) -> list[dict[str, Any]]:
        anchor = section_anchor(section_name)
        self.wait_for_selector(_anchor_selector(anchor))
        return self.page.evaluate(_LIST_ITEMS_JS, anchor) or []

    def get_list_items(self, section_name: str) -> list[str]:
        """Return the item names of the first list under a (sub)section."""
        names = []
        for item in self._list_items(section_name):
            name = item_name(item.get("text", ""))
            if name:
                names.append(name)
        return names

    def validate_links(self, section_name: str) -> dict[str, bool]:
        """Map each list item name under a (sub)section to whether it is a link."""
        results: dict[str, bool] = {}
        for item in self._list_items(section_name):
            name = item_name(item.get("text", ""))
            if not name:
                continue
            results[name] = bool(item.get("linked"))
        return results

    def open_tools_panel(self) -> None:
        """Open the side panel that hosts the appearance settings."""
        self.click_element(self.TOOLS_BUTTON)
        # Panel slides in
        self.page.wait_for_timeout(500)
