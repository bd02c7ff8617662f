"""Text normalization and comparison."""
from wikiprobe.core.comparison import compare_sections
from wikiprobe.core.diff import compare_texts, compare_words, format_diff_results
from wikiprobe.core.normalizer import (
    count_unique_words,
    decompose_unicode,
    get_unique_words,
    lowercase_invariant,
    normalize,
    remove_excessive_whitespace,
    remove_punctuation,
    strip_html,
)

__all__ = [
    "compare_sections",
    "compare_texts",
    "compare_words",
    "count_unique_words",
    "decompose_unicode",
    "format_diff_results",
    "get_unique_words",
    "lowercase_invariant",
    "normalize",
    "remove_excessive_whitespace",
    "remove_punctuation",
    "strip_html",
]
