"""Wikipedia theme (appearance) panel component."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from wikiprobe.exceptions import PageInteractionError

if TYPE_CHECKING:
    from playwright.sync_api import Page

_RGB_RE = re.compile(r"rgba?\(\s*([^)]*)\)", re.IGNORECASE)

_BACKGROUND_JS = "element => window.getComputedStyle(element).backgroundColor"


def is_dark_color(rgb_color: str | None) -> bool:
    """Return True if a CSS ``rgb()``/``rgba()`` color is dark.

    Uses perceived luminance ``0.299r + 0.587g + 0.114b`` below 128.
    Anything unparseable counts as not dark.
    """
    if not rgb_color or not rgb_color.strip():
        return False

    match = _RGB_RE.search(rgb_color)
    if not match:
        return False

    channels = [c.strip() for c in match.group(1).split(",")]
    if len(channels) < 3:
        return False
    try:
        r, g, b = (int(c) for c in channels[:3])
    except ValueError:
        return False

    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return luminance < 128


class ThemePanel:
    """Switches and inspects the page color theme."""

    COLOR_OPTION = "text=Color (beta)"
    DARK_THEME_BUTTON = "[data-event-name='dark']"
    PANEL_TIMEOUT_MS = 10000

    def __init__(self, page: "Page") -> None:
        if page is None:
            raise ValueError("page is required")
        self.page = page

    def _click(self, selector: str, failure: str, settle_ms: int) -> None:
        locator = self.page.locator(selector)
        try:
            locator.first.wait_for(state="visible", timeout=self.PANEL_TIMEOUT_MS)
            locator.first.click()
        except PlaywrightTimeoutError as e:
            raise PageInteractionError(failure, selector=selector) from e
        self.page.wait_for_timeout(settle_ms)

    def open_color_settings(self) -> None:
        self._click(self.COLOR_OPTION, "Failed to open Color (beta) settings in theme panel", 500)

    def select_dark_theme(self) -> None:
        self._click(self.DARK_THEME_BUTTON, "Failed to select dark theme", 1000)

    def get_current_theme(self) -> str:
        """Return the ``data-theme`` attribute of the root element ("" if unset)."""
        return self.page.locator("html").get_attribute("data-theme") or ""

    def is_dark_mode_active(self) -> bool:
        """Check dark mode by attribute, root/body classes, then background color."""
        try:
            if "dark" in self.get_current_theme().lower():
                return True

            html_class = self.page.locator("html").get_attribute("class") or ""
            body = self.page.locator("body")
            body_class = body.get_attribute("class") or ""
            if "dark" in html_class.lower() or "dark" in body_class.lower():
                return True

            return is_dark_color(body.evaluate(_BACKGROUND_JS))
        except PlaywrightError as e:
            raise PageInteractionError("Failed to verify dark mode status") from e
