"""Comparison, diff and scenario result models."""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ChangeType(str, Enum):
    """Classification of a single line in a side-by-side diff."""
    UNCHANGED = "unchanged"
    INSERTED = "inserted"
    DELETED = "deleted"
    MODIFIED = "modified"
    IMAGINARY = "imaginary"


# Mapping applied when the two sides of a comparison are swapped.
MIRRORED_CHANGE = {
    ChangeType.UNCHANGED: ChangeType.UNCHANGED,
    ChangeType.INSERTED: ChangeType.DELETED,
    ChangeType.DELETED: ChangeType.INSERTED,
    ChangeType.MODIFIED: ChangeType.MODIFIED,
    ChangeType.IMAGINARY: ChangeType.IMAGINARY,
}


class DiffLine(BaseModel):
    """A line in one pane of a side-by-side diff.

    ``position`` is the 1-based line number in the source text, or None for
    imaginary padding lines that only keep the panes aligned.
    """

    text: str = ""
    type: ChangeType
    position: int | None = None


class DiffPane(BaseModel):
    """One side (old or new) of a side-by-side diff."""

    lines: list[DiffLine] = Field(default_factory=list)

    @property
    def has_differences(self) -> bool:
        return any(line.type != ChangeType.UNCHANGED for line in self.lines)

    def texts_of(self, change_type: ChangeType) -> list[str]:
        """Return the text of every line with the given classification."""
        return [line.text for line in self.lines if line.type == change_type]


class DiffResult(BaseModel):
    """Aligned old/new panes produced by ``compare_texts``."""

    old_text: DiffPane = Field(default_factory=DiffPane)
    new_text: DiffPane = Field(default_factory=DiffPane)

    @property
    def has_differences(self) -> bool:
        return self.old_text.has_differences or self.new_text.has_differences

    def mirrored(self) -> "DiffResult":
        """Return the diff as it reads with the two inputs swapped."""
        def _flip(pane: DiffPane) -> DiffPane:
            return DiffPane(lines=[
                DiffLine(
                    text=line.text,
                    type=MIRRORED_CHANGE[line.type],
                    position=line.position,
                )
                for line in pane.lines
            ])

        return DiffResult(old_text=_flip(self.new_text), new_text=_flip(self.old_text))

    def to_dict(self) -> dict[str, Any]:
        """Return the diff as ``{side: [{text, type, position}, ...]}``."""
        return self.model_dump(mode="json")


class ComparisonResult(BaseModel):
    """Outcome of comparing a UI extraction against an API extraction."""

    ui_normalized: str = ""
    api_normalized: str = ""
    ui_unique_words: int = 0
    api_unique_words: int = 0
    matched: bool

    # Diagnostics, populated only when the counts disagree
    only_in_ui: list[str] = Field(default_factory=list)
    only_in_api: list[str] = Field(default_factory=list)
    diff: DiffResult | None = None


class ScenarioOutcome(BaseModel):
    """Result of running one harness scenario."""

    name: str
    passed: bool
    duration: float = 0.0
    message: str | None = None
    details: dict[str, Any] = Field(default_factory=dict)


class SuiteStatistics(BaseModel):
    """Aggregate pass/fail counters for a suite run."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    duration: float = 0.0

    @property
    def success_rate(self) -> float:
        """Percentage of passed scenarios (0.0 when nothing ran)."""
        if self.total == 0:
            return 0.0
        return self.passed * 100.0 / self.total
