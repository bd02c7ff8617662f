"""Suite runner: owns the browser and API client for a harness run."""
from __future__ import annotations

import time
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from playwright.sync_api import sync_playwright

from wikiprobe.clients.mediawiki import MediaWikiClient
from wikiprobe.exceptions import ScenarioFailure
from wikiprobe.models.result import ScenarioOutcome
from wikiprobe.reporting.console import ConsoleReporter
from wikiprobe.scenarios.context import ScenarioContext
from wikiprobe.scenarios.registry import Scenario, ScenarioRegistry
from wikiprobe.utils.logging import get_logger

if TYPE_CHECKING:
    from playwright.sync_api import Browser

    from wikiprobe.models.config import HarnessConfig

logger = get_logger("runner")


class SuiteRunner:
    """Runs registered scenarios and reports each outcome.

    A scenario fails when it raises; the exception is logged with its
    traceback and the run continues with the next scenario.
    """

    def __init__(
        self,
        config: "HarnessConfig",
        reporter: ConsoleReporter | None = None,
        playwright_factory: Callable[[], Any] = sync_playwright,
        client_factory: Callable[[], MediaWikiClient] | None = None,
    ) -> None:
        self.config = config
        self.reporter = reporter or ConsoleReporter(output_path=config.reporting.output_path)
        self._playwright_factory = playwright_factory
        self._client_factory = client_factory or (lambda: MediaWikiClient(config.media_wiki))

    def run(self, names: list[str] | None = None, api_only: bool = False) -> list[ScenarioOutcome]:
        """Run the selected scenarios and print the suite summary."""
        import wikiprobe.scenarios.checks  # noqa: F401 - trigger registration

        scenarios = ScenarioRegistry.select(names, api_only=api_only)
        logger.info("Test suite initialization started")
        logger.info("Base URL: %s", self.config.base_url)
        logger.info(
            "Browser: %s, Headless: %s",
            self.config.browser.browser_type,
            self.config.browser.headless,
        )
        self.reporter.initialize_suite()

        outcomes: list[ScenarioOutcome] = []
        with ExitStack() as stack:
            client = stack.enter_context(self._client_factory())
            browser = None
            if any(s.requires_browser for s in scenarios):
                playwright = stack.enter_context(self._playwright_factory())
                browser = self._launch(playwright)
                stack.callback(browser.close)

            for scenario in scenarios:
                outcomes.append(self._run_scenario(scenario, client, browser))

        self.reporter.display_breakdown()
        stats = self.reporter.display_summary()
        logger.info(
            "Test suite execution completed: %d total, %d passed, %d failed, %.2fs",
            stats.total,
            stats.passed,
            stats.failed,
            stats.duration,
        )
        return outcomes

    def _launch(self, playwright: Any) -> "Browser":
        browser_type = getattr(playwright, self.config.browser.browser_type)
        return browser_type.launch(headless=self.config.browser.headless)

    def _new_context_options(self) -> dict[str, Any]:
        viewport = self.config.browser.viewport
        options: dict[str, Any] = {"viewport": {"width": viewport.width, "height": viewport.height}}
        if self.config.reporting.capture_video:
            options["record_video_dir"] = str(Path(self.config.reporting.output_path) / "videos")
        return options

    def _run_scenario(
        self,
        scenario: Scenario,
        client: MediaWikiClient,
        browser: "Browser | None",
    ) -> ScenarioOutcome:
        self.reporter.test_start(scenario.name)
        logger.info("Starting test: %s", scenario.name)
        start = time.perf_counter()

        browser_context = None
        page = None
        passed = False
        message = None
        details: dict[str, Any] = {}
        try:
            if scenario.requires_browser and browser is not None:
                browser_context = browser.new_context(**self._new_context_options())
                browser_context.set_default_timeout(self.config.browser.timeout)
                page = browser_context.new_page()

            ctx = ScenarioContext(
                config=self.config,
                reporter=self.reporter,
                api_client=client,
                page=page,
            )
            details = scenario.func(ctx) or {}
            passed = True
        except ScenarioFailure as e:
            message = str(e)
            details = e.details
            logger.error("Failure message: %s", message)
        except Exception as e:
            message = f"{type(e).__name__}: {e}"
            self.reporter.error(message)
            logger.error("Scenario %s raised", scenario.name, exc_info=True)
        finally:
            if page is not None and not passed:
                self._capture_screenshot(page, scenario.name)
            if browser_context is not None:
                browser_context.close()

        duration = time.perf_counter() - start
        self.reporter.test_end(scenario.name, passed, duration)
        if passed:
            logger.info("Test passed: %s in %.2fs", scenario.name, duration)
        else:
            logger.error("Test failed: %s after %.2fs", scenario.name, duration)

        return ScenarioOutcome(
            name=scenario.name,
            passed=passed,
            duration=duration,
            message=message,
            details=details,
        )

    def _capture_screenshot(self, page: Any, name: str) -> None:
        if not self.config.reporting.capture_screenshots:
            return
        path = Path(self.config.reporting.output_path) / "screenshots" / f"{name}.png"
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            page.screenshot(path=str(path), full_page=True)
            logger.info("Failure screenshot saved to %s", path)
        except Exception:
            logger.warning("Could not capture screenshot for %s", name, exc_info=True)
