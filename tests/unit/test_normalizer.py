"""Tests for wikiprobe.core.normalizer."""
from __future__ import annotations

import unicodedata

import pytest

from wikiprobe.core.normalizer import (
    compute_statistics,
    count_unique_words,
    decompose_unicode,
    get_unique_words,
    lowercase_invariant,
    normalize,
    remove_excessive_whitespace,
    remove_punctuation,
    strip_html,
)

SAMPLES = [
    "Debugging features are <b>great</b>!!",
    "Playwright supports   Chromium,\tFirefox and WebKit.",
    "<p>Unclosed <i>markup",
    "Café, naïve, résumé",
    "  \n  ",
    "",
]


# ---------------------------------------------------------------------------
# strip_html
# ---------------------------------------------------------------------------


class TestStripHtml:

    def test_removes_tags(self):
        assert strip_html("<p>Hello <b>World</b></p>") == "Hello World"

    def test_plain_text_unchanged(self):
        assert strip_html("no markup here") == "no markup here"

    def test_recovers_malformed_markup(self):
        assert strip_html("<p>Unclosed <b>bold") == "Unclosed bold"

    def test_decodes_entities(self):
        assert strip_html("Fish &amp; Chips") == "Fish & Chips"

    def test_keeps_script_and_style_text(self):
        html = "<style>p{}</style><p>Text</p><script>var x;</script>"
        assert strip_html(html) == "p{}Textvar x;"

    def test_keeps_every_text_node(self):
        html = '<p>A<script>B</script><span class="mw-editsection">C</span></p>'
        assert strip_html(html) == "ABC"

    def test_template_and_noscript_text(self):
        html = "<template>T</template><noscript>N</noscript>"
        assert strip_html(html) == "TN"

    def test_skips_comments(self):
        assert strip_html("<p>A<!-- hidden -->B</p>") == "AB"

    @pytest.mark.parametrize("value", ["", "   ", "\n\t", None])
    def test_empty_input(self, value):
        assert strip_html(value) == ""


# ---------------------------------------------------------------------------
# Individual steps
# ---------------------------------------------------------------------------


class TestSteps:

    def test_decompose_unicode(self):
        assert decompose_unicode("\u00e9") == "e\u0301"

    def test_decompose_unicode_empty(self):
        assert decompose_unicode(None) == ""

    def test_lowercase_invariant(self):
        assert lowercase_invariant("ISTANBUL Title") == "istanbul title"

    def test_remove_punctuation(self):
        assert remove_punctuation("Hello, World!") == "Hello World"

    def test_remove_punctuation_keeps_underscore_and_digits(self):
        assert remove_punctuation("snake_case v2.0") == "snake_case v20"

    def test_remove_punctuation_keeps_combining_marks(self):
        assert remove_punctuation("cafe\u0301!") == "cafe\u0301"

    def test_remove_punctuation_blank(self):
        assert remove_punctuation("   ") == ""

    def test_remove_excessive_whitespace(self):
        assert remove_excessive_whitespace("  a \t\n  b  ") == "a b"

    def test_punctuation_only_collapses_to_empty(self):
        assert remove_excessive_whitespace(remove_punctuation("!!! ...")) == ""


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------


class TestNormalize:

    def test_debugging_features_example(self):
        assert normalize("Debugging features are <b>great</b>!!") == "debugging features are great"

    def test_ui_and_api_extractions_agree(self):
        ui = "Debugging features are great!!"
        api = "<p>Debugging features are <b>great</b>.</p>"
        assert normalize(ui) == normalize(api)

    def test_accents_kept(self):
        assert normalize("Caf\u00e9") == normalize("caf\u00e9") == "cafe\u0301"

    def test_accented_word_distinct_from_plain(self):
        text = normalize("r\u00e9sum\u00e9 resume")
        assert count_unique_words(text) == 2

    def test_composed_and_decomposed_input_agree(self):
        assert normalize("caf\u00e9") == normalize("cafe\u0301")

    def test_punctuation_only(self):
        assert normalize("!!! ... ???") == ""

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_input(self, value):
        assert normalize(value) == ""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    @pytest.mark.parametrize("text", SAMPLES)
    def test_case_invariant(self, text):
        assert normalize(text.upper()) == normalize(text.lower())

    @pytest.mark.parametrize("text", SAMPLES)
    def test_whitespace_collapsed(self, text):
        result = normalize(text)
        assert "  " not in result
        assert result == result.strip()
        assert "\n" not in result and "\t" not in result

    @pytest.mark.parametrize("text", SAMPLES)
    def test_no_punctuation_left(self, text):
        result = normalize(text)
        assert all(
            ch.isalnum() or ch in " _" or unicodedata.category(ch) == "Mn"
            for ch in result
        )


# ---------------------------------------------------------------------------
# Unique words
# ---------------------------------------------------------------------------


class TestUniqueWords:

    def test_count_repeated_words(self):
        text = normalize("The quick brown fox the Quick BROWN fox")
        assert count_unique_words(text) == 4

    def test_get_unique_words(self):
        assert get_unique_words("debugging features are great") == {
            "debugging", "features", "are", "great",
        }

    def test_ignores_empty_tokens(self):
        assert get_unique_words("a  b") == {"a", "b"}

    def test_case_insensitive(self):
        assert count_unique_words("Word word WORD") == 1

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_empty_input(self, value):
        assert get_unique_words(value) == set()
        assert count_unique_words(value) == 0

    def test_compute_statistics(self):
        stats = compute_statistics("a b a")
        assert stats == {"char_count": 5, "word_count": 3, "unique_word_count": 2}

    def test_compute_statistics_empty(self):
        assert compute_statistics(None) == {
            "char_count": 0, "word_count": 0, "unique_word_count": 0,
        }
