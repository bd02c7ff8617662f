"""UI versus API section comparison."""
from __future__ import annotations

from wikiprobe.core.diff import compare_words
from wikiprobe.core.normalizer import get_unique_words, normalize
from wikiprobe.models.result import ComparisonResult
from wikiprobe.utils.logging import get_logger

logger = get_logger("comparison")


def compare_sections(ui_text: str | None, api_text: str | None) -> ComparisonResult:
    """Compare two raw extractions of the same section.

    The sections match when their normalized texts have the same number of
    unique words. On mismatch a word-level diff (old = UI, new = API) and
    the words unique to each side are attached for reporting.
    """
    ui_normalized = normalize(ui_text)
    api_normalized = normalize(api_text)
    ui_words = get_unique_words(ui_normalized)
    api_words = get_unique_words(api_normalized)

    result = ComparisonResult(
        ui_normalized=ui_normalized,
        api_normalized=api_normalized,
        ui_unique_words=len(ui_words),
        api_unique_words=len(api_words),
        matched=len(ui_words) == len(api_words),
    )

    if result.matched:
        logger.debug("Unique word counts match: %d", result.ui_unique_words)
        return result

    logger.debug(
        "Unique word count mismatch: UI=%d, API=%d",
        result.ui_unique_words,
        result.api_unique_words,
    )
    result.only_in_ui = sorted(ui_words - api_words)
    result.only_in_api = sorted(api_words - ui_words)
    result.diff = compare_words(ui_normalized, api_normalized)
    return result
