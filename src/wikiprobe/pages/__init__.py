"""Playwright page objects for Wikipedia."""
from wikiprobe.pages.base import BasePage
from wikiprobe.pages.theme_panel import ThemePanel, is_dark_color
from wikiprobe.pages.wikipedia import WikipediaArticlePage, section_anchor

__all__ = [
    "BasePage",
    "ThemePanel",
    "WikipediaArticlePage",
    "is_dark_color",
    "section_anchor",
]
