"""Collaborators handed to each scenario."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wikiprobe.core.sources import ApiSectionSource, SectionSource
from wikiprobe.pages.theme_panel import ThemePanel
from wikiprobe.pages.wikipedia import DEFAULT_ARTICLE, WikipediaArticlePage

if TYPE_CHECKING:
    from playwright.sync_api import Page

    from wikiprobe.clients.mediawiki import MediaWikiClient
    from wikiprobe.models.config import HarnessConfig
    from wikiprobe.reporting.console import ConsoleReporter


@dataclass
class ScenarioContext:
    """Everything a scenario may use.

    ``page`` is None for API-only runs. ``ui_source`` and ``api_source``
    replace the live browser and API extractions when set.
    """

    config: "HarnessConfig"
    reporter: "ConsoleReporter"
    api_client: "MediaWikiClient | None" = None
    page: "Page | None" = None
    article: str = DEFAULT_ARTICLE
    section: str = "Debugging features"
    tools_subsection: str = "Microsoft development tools"
    ui_source: SectionSource | None = None
    api_source: SectionSource | None = None

    def article_page(self) -> WikipediaArticlePage:
        if self.page is None:
            raise RuntimeError("This scenario needs a browser page")
        return WikipediaArticlePage(
            self.page,
            self.config.base_url,
            article=self.article,
            timeout_ms=self.config.browser.timeout,
        )

    def theme_panel(self) -> ThemePanel:
        if self.page is None:
            raise RuntimeError("This scenario needs a browser page")
        return ThemePanel(self.page)

    def section_source_ui(self) -> SectionSource:
        """The UI source, navigating the browser to the article if needed."""
        if self.ui_source is not None:
            return self.ui_source
        article_page = self.article_page()
        article_page.navigate()
        return article_page

    def section_source_api(self) -> SectionSource:
        if self.api_source is not None:
            return self.api_source
        if self.api_client is None:
            raise RuntimeError("This scenario needs a MediaWiki client")
        return ApiSectionSource(self.api_client, self.article)
