"""Wikipedia checks run by the harness."""
from __future__ import annotations

from typing import Any

from wikiprobe.core.comparison import compare_sections
from wikiprobe.core.diff import format_diff_results
from wikiprobe.core.normalizer import count_unique_words, normalize
from wikiprobe.exceptions import ScenarioFailure
from wikiprobe.scenarios.context import ScenarioContext
from wikiprobe.scenarios.registry import ScenarioRegistry
from wikiprobe.utils.logging import get_logger

logger = get_logger("scenarios")


@ScenarioRegistry.register("api-section", requires_browser=False)
def api_section(ctx: ScenarioContext) -> dict[str, Any]:
    """Fetch a section through the MediaWiki API and check it has text."""
    reporter = ctx.reporter
    reporter.info(f"Retrieving section '{ctx.section}' from page '{ctx.article}' via MediaWiki API...")
    api_text = ctx.section_source_api().extract_section(ctx.section)
    reporter.success(f"API text retrieved: {len(api_text)} characters")
    reporter.detail(f"Raw content length: {len(api_text)} characters")

    reporter.info("Normalizing retrieved text...")
    normalized = normalize(api_text)
    unique_words = count_unique_words(normalized)
    reporter.detail(f"Normalized length: {len(normalized)} characters")
    reporter.detail(f"Unique words: {unique_words}")
    logger.info(
        "Normalized text - Length: %d, Unique Words: %d", len(normalized), unique_words
    )

    details = {
        "raw_length": len(api_text),
        "normalized_length": len(normalized),
        "unique_words": unique_words,
    }
    if not normalized:
        raise ScenarioFailure(
            f"The MediaWiki API returned no text for section '{ctx.section}'", details
        )

    reporter.success(
        f"Section content validated: {len(normalized)} characters, {unique_words} unique words"
    )
    return details


@ScenarioRegistry.register("debugging-features")
def debugging_features(ctx: ScenarioContext) -> dict[str, Any]:
    """Compare a section's text between the rendered page and the API."""
    reporter = ctx.reporter

    reporter.info("Extracting section text from UI...")
    ui_text = ctx.section_source_ui().extract_section(ctx.section)
    reporter.success(f"UI text extracted: {len(ui_text)} characters")

    reporter.info("Retrieving section text from MediaWiki API...")
    api_text = ctx.section_source_api().extract_section(ctx.section)
    reporter.success(f"API text retrieved: {len(api_text)} characters")

    reporter.info("Normalizing texts and counting unique words...")
    result = compare_sections(ui_text, api_text)
    reporter.detail(
        f"UI unique words: {result.ui_unique_words}, API unique words: {result.api_unique_words}"
    )

    details: dict[str, Any] = {
        "ui_unique_words": result.ui_unique_words,
        "api_unique_words": result.api_unique_words,
    }
    if result.matched:
        reporter.success(f"Unique word counts match: {result.ui_unique_words} words")
        return details

    reporter.error(
        f"Unique word count mismatch: UI={result.ui_unique_words}, API={result.api_unique_words}"
    )
    if result.only_in_ui:
        reporter.detail(f"Only in UI: {', '.join(result.only_in_ui)}")
    if result.only_in_api:
        reporter.detail(f"Only in API: {', '.join(result.only_in_api)}")

    diff_output = format_diff_results(result.diff) if result.diff else ""
    logger.error("Text comparison failed.%s", diff_output)
    details.update(
        only_in_ui=result.only_in_ui,
        only_in_api=result.only_in_api,
        diff=diff_output,
    )
    raise ScenarioFailure(
        "UI and API should extract the same content with identical unique word counts "
        f"(UI={result.ui_unique_words}, API={result.api_unique_words})",
        details,
    )


@ScenarioRegistry.register("hyperlink-validation")
def hyperlink_validation(ctx: ScenarioContext) -> dict[str, Any]:
    """Check every technology in a tools subsection is a hyperlink."""
    reporter = ctx.reporter
    article_page = ctx.article_page()

    reporter.info("Navigating to article...")
    article_page.navigate()
    reporter.success("Navigation completed")

    reporter.info("Extracting technologies and validating hyperlinks...")
    links = article_page.validate_links(ctx.tools_subsection)
    reporter.success(f"Extracted {len(links)} technology items")

    for name, linked in links.items():
        if linked:
            reporter.detail(f"✓ {name} - is linked")
        else:
            reporter.warning(f"✗ {name} - NOT linked")

    unlinked = [name for name, linked in links.items() if not linked]
    details = {"items": len(links), "unlinked": unlinked}
    if not links:
        raise ScenarioFailure(f"No list items found under '{ctx.tools_subsection}'", details)
    if unlinked:
        names = ", ".join(unlinked)
        reporter.error(f"Found {len(unlinked)} non-linked items: {names}")
        raise ScenarioFailure(
            "Expected all technology items to be hyperlinks, but found "
            f"{len(unlinked)} non-linked items: {names}",
            details,
        )

    reporter.success(f"All {len(links)} technology items are properly linked")
    return details


@ScenarioRegistry.register("dark-mode")
def dark_mode(ctx: ScenarioContext) -> dict[str, Any]:
    """Switch the article to the dark theme and verify it applied."""
    reporter = ctx.reporter
    article_page = ctx.article_page()
    panel = ctx.theme_panel()

    reporter.info("Navigating to article...")
    article_page.navigate()
    reporter.success("Navigation completed")

    reporter.info("Opening theme panel...")
    article_page.open_tools_panel()
    panel.open_color_settings()
    reporter.info("Selecting dark theme...")
    panel.select_dark_theme()
    reporter.success("Dark theme selected")

    theme = panel.get_current_theme()
    active = panel.is_dark_mode_active()
    reporter.detail(f"Current theme attribute: '{theme}'")
    reporter.detail(f"Dark mode active (comprehensive check): {active}")

    details = {"theme": theme, "dark_mode_active": active}
    if "dark" not in theme.lower() or not active:
        reporter.error(f"Expected: dark mode active, Actual: theme='{theme}', isDarkModeActive={active}")
        raise ScenarioFailure("Dark mode should be active after selecting the dark theme", details)

    reporter.success("Dark mode successfully activated and verified")
    return details
