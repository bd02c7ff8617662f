"""Text normalization for comparing UI and API extractions.

The pipeline is::

    strip_html -> decompose_unicode -> lowercase_invariant
        -> remove_punctuation -> remove_excessive_whitespace

Every function is total over ``str`` (and None): empty or whitespace-only
input yields ``""`` or an empty set, never an exception.
"""
from __future__ import annotations

import re
import unicodedata
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.element import (
    CData,
    NavigableString,
    RubyParenthesisString,
    RubyTextString,
    Script,
    Stylesheet,
    TemplateString,
)

_PUNCTUATION_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")

# get_text() skips script and style bodies unless their string types are listed
_TEXT_TYPES = (
    NavigableString,
    CData,
    Script,
    Stylesheet,
    TemplateString,
    RubyTextString,
    RubyParenthesisString,
)


def strip_html(html: str | None) -> str:
    """Return the concatenated text nodes of ``html`` in document order.

    Malformed or unclosed markup is recovered by the parser. Every text
    node counts, including script and style bodies; comments do not.
    """
    if not html or not html.strip():
        return ""

    with warnings.catch_warnings():
        # Plain text that looks like a URL or filename is still valid input
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(html, "html.parser")

    return soup.get_text(types=_TEXT_TYPES)


def decompose_unicode(text: str | None) -> str:
    """Apply canonical decomposition (NFD)."""
    if not text:
        return ""
    return unicodedata.normalize("NFD", text)


def lowercase_invariant(text: str | None) -> str:
    """Lowercase using the Unicode default case mapping.

    ``str.lower`` never consults the process locale, so a Turkish locale
    cannot turn "I" into a dotless "ı".
    """
    if not text:
        return ""
    return text.lower()


def _drop_unless_mark(match: re.Match) -> str:
    char = match.group()
    return char if unicodedata.category(char) == "Mn" else ""


def remove_punctuation(text: str | None) -> str:
    """Delete every character that is neither a word character nor whitespace.

    Nonspacing marks (category Mn) count as word characters, so the accents
    split off by NFD survive and an accented word stays distinct from its
    unaccented spelling.
    """
    if not text or not text.strip():
        return ""
    return _PUNCTUATION_RE.sub(_drop_unless_mark, text)


def remove_excessive_whitespace(text: str | None) -> str:
    """Collapse whitespace runs into a single space and trim the ends."""
    if not text or not text.strip():
        return ""
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: str | None) -> str:
    """Normalize raw UI or API text for content comparison.

    Order matters: markup goes first so tag delimiters are never seen as
    punctuation, and whitespace is collapsed last because every earlier
    step can open new gaps.
    """
    if not text or not text.strip():
        return ""

    cleaned = strip_html(text)
    cleaned = decompose_unicode(cleaned)
    cleaned = lowercase_invariant(cleaned)
    cleaned = remove_punctuation(cleaned)
    return remove_excessive_whitespace(cleaned)


def get_unique_words(text: str | None) -> set[str]:
    """Return the distinct tokens of already-normalized text."""
    if not text or not text.strip():
        return set()
    return {word.lower() for word in text.split(" ") if word}


def count_unique_words(text: str | None) -> int:
    """Return the number of distinct tokens in already-normalized text."""
    return len(get_unique_words(text))


def compute_statistics(text: str | None) -> dict[str, int]:
    """Character, word and unique-word counts of normalized text."""
    text = text or ""
    return {
        "char_count": len(text),
        "word_count": len(text.split()),
        "unique_word_count": count_unique_words(text),
    }
