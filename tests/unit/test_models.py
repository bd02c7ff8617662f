"""Tests for Pydantic models in src/wikiprobe/models/."""
from __future__ import annotations

from wikiprobe.exceptions import (
    ConfigurationError,
    MediaWikiError,
    MediaWikiHTTPError,
    SectionNotFoundError,
    WikiProbeError,
)
from wikiprobe.models.mediawiki import MediaWikiResponse
from wikiprobe.models.result import (
    MIRRORED_CHANGE,
    ChangeType,
    DiffLine,
    DiffPane,
    ScenarioOutcome,
    SuiteStatistics,
)


# ---------------------------------------------------------------------------
# ChangeType
# ---------------------------------------------------------------------------


class TestChangeType:

    def test_values(self):
        assert ChangeType.UNCHANGED == "unchanged"
        assert ChangeType.IMAGINARY == "imaginary"

    def test_is_string_enum(self):
        assert isinstance(ChangeType.DELETED, str)

    def test_mirror_swaps_inserted_and_deleted(self):
        assert MIRRORED_CHANGE[ChangeType.INSERTED] == ChangeType.DELETED
        assert MIRRORED_CHANGE[ChangeType.DELETED] == ChangeType.INSERTED
        assert MIRRORED_CHANGE[ChangeType.MODIFIED] == ChangeType.MODIFIED


# ---------------------------------------------------------------------------
# DiffPane
# ---------------------------------------------------------------------------


class TestDiffPane:

    def test_empty_pane_has_no_differences(self):
        assert not DiffPane().has_differences

    def test_has_differences(self):
        pane = DiffPane(lines=[
            DiffLine(text="a", type=ChangeType.UNCHANGED, position=1),
            DiffLine(type=ChangeType.IMAGINARY),
        ])
        assert pane.has_differences
        assert pane.texts_of(ChangeType.UNCHANGED) == ["a"]


# ---------------------------------------------------------------------------
# Scenario results
# ---------------------------------------------------------------------------


class TestSuiteStatistics:

    def test_success_rate(self):
        stats = SuiteStatistics(total=4, passed=3, failed=1)
        assert stats.success_rate == 75.0

    def test_success_rate_no_tests(self):
        assert SuiteStatistics().success_rate == 0.0

    def test_outcome_defaults(self):
        outcome = ScenarioOutcome(name="api-section", passed=True)
        assert outcome.message is None
        assert outcome.details == {}


# ---------------------------------------------------------------------------
# MediaWiki response models
# ---------------------------------------------------------------------------


class TestMediaWikiResponse:

    def test_sections(self):
        response = MediaWikiResponse.model_validate({
            "parse": {
                "title": "Playwright (software)",
                "pageid": 64270011,
                "sections": [
                    {"toclevel": 1, "level": "2", "line": "History", "number": "1",
                     "index": "1", "fromtitle": "Playwright_(software)",
                     "byteoffset": 812, "anchor": "History"},
                ],
            },
        })
        section = response.parse.sections[0]
        assert section.line == "History"
        assert section.index == "1"
        assert response.parse.text is None

    def test_text_star_key(self):
        response = MediaWikiResponse.model_validate({
            "parse": {"title": "T", "pageid": 1, "text": {"*": "<p>Body</p>"}},
        })
        assert response.parse.text.content == "<p>Body</p>"

    def test_missing_parse(self):
        assert MediaWikiResponse.model_validate({}).parse is None


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(MediaWikiHTTPError, MediaWikiError)
        assert issubclass(MediaWikiError, WikiProbeError)
        assert issubclass(ConfigurationError, WikiProbeError)

    def test_configuration_error_lists_errors(self):
        error = ConfigurationError("Configuration validation failed", errors=["a: bad", "b: worse"])
        assert str(error) == "Configuration validation failed:\n- a: bad\n- b: worse"

    def test_section_not_found_message(self):
        error = SectionNotFoundError("Page", "Missing", available=["History"])
        assert str(error) == "Section 'Missing' not found in page 'Page'"
        assert error.available == ["History"]
