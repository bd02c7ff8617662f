"""Base page object."""
from __future__ import annotations

from typing import TYPE_CHECKING

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from wikiprobe.exceptions import PageInteractionError

if TYPE_CHECKING:
    from playwright.sync_api import Locator, Page

DEFAULT_TIMEOUT_MS = 30000


class BasePage:
    """Common element waiting and interaction helpers for page objects."""

    def __init__(self, page: "Page", base_url: str, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
        if page is None:
            raise ValueError("page is required")
        if not base_url:
            raise ValueError("base_url is required")
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.timeout_ms = timeout_ms

    def wait_for_selector(self, selector: str, timeout_ms: int | None = None) -> "Locator":
        """Wait until ``selector`` is visible and return its locator.

        Raises:
            PageInteractionError: The element did not become visible in time.
        """
        timeout_ms = timeout_ms or self.timeout_ms
        locator = self.page.locator(selector)
        try:
            locator.first.wait_for(state="visible", timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise PageInteractionError(
                f"Element with selector '{selector}' was not found within {timeout_ms}ms",
                selector=selector,
            ) from e
        return locator

    def get_text_content(self, selector: str) -> str:
        locator = self.wait_for_selector(selector)
        return locator.first.text_content() or ""

    def click_element(self, selector: str) -> None:
        locator = self.wait_for_selector(selector)
        locator.first.click()

    def is_element_visible(self, selector: str, timeout_ms: int = 5000) -> bool:
        """Return True if ``selector`` becomes visible within ``timeout_ms``."""
        try:
            self.wait_for_selector(selector, timeout_ms)
        except PageInteractionError:
            return False
        return self.page.locator(selector).first.is_visible()
