"""Side-by-side diff of two texts for failure diagnostics.

Lines are aligned with ``difflib.SequenceMatcher``. Each changed block is
laid out pairwise: lines present on both sides are ``modified``, surplus
old lines are ``deleted`` and surplus new lines are ``inserted``, with
``imaginary`` padding on the opposite pane so both panes stay aligned.
"""
from __future__ import annotations

import difflib

from wikiprobe.models.result import ChangeType, DiffLine, DiffPane, DiffResult

_OLD_PREFIX = {
    ChangeType.DELETED: "- ",
    ChangeType.MODIFIED: "~ ",
}
_NEW_PREFIX = {
    ChangeType.INSERTED: "+ ",
    ChangeType.MODIFIED: "~ ",
}


def _split_lines(text: str | None) -> list[str]:
    if not text:
        return []
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _diff_sequences(old: list[str], new: list[str]) -> DiffResult:
    # SequenceMatcher breaks ties by argument order; always align in one
    # direction so swapped inputs give exactly the mirrored layout.
    if old > new:
        return _diff_sequences(new, old).mirrored()

    old_pane: list[DiffLine] = []
    new_pane: list[DiffLine] = []

    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for offset in range(i2 - i1):
                old_pane.append(DiffLine(
                    text=old[i1 + offset], type=ChangeType.UNCHANGED, position=i1 + offset + 1,
                ))
                new_pane.append(DiffLine(
                    text=new[j1 + offset], type=ChangeType.UNCHANGED, position=j1 + offset + 1,
                ))
            continue

        deleted = i2 - i1
        inserted = j2 - j1
        for offset in range(max(deleted, inserted)):
            if offset < deleted and offset < inserted:
                old_type = new_type = ChangeType.MODIFIED
            elif offset < deleted:
                old_type, new_type = ChangeType.DELETED, ChangeType.IMAGINARY
            else:
                old_type, new_type = ChangeType.IMAGINARY, ChangeType.INSERTED

            if old_type == ChangeType.IMAGINARY:
                old_pane.append(DiffLine(type=old_type))
            else:
                old_pane.append(DiffLine(
                    text=old[i1 + offset], type=old_type, position=i1 + offset + 1,
                ))

            if new_type == ChangeType.IMAGINARY:
                new_pane.append(DiffLine(type=new_type))
            else:
                new_pane.append(DiffLine(
                    text=new[j1 + offset], type=new_type, position=j1 + offset + 1,
                ))

    return DiffResult(old_text=DiffPane(lines=old_pane), new_text=DiffPane(lines=new_pane))


def compare_texts(old: str | None, new: str | None) -> DiffResult:
    """Build a line-aligned diff of ``old`` against ``new``.

    None is treated as an empty string. Swapping the arguments always gives
    ``compare_texts(old, new).mirrored()``, even when lines are reordered or
    repeated.
    """
    return _diff_sequences(_split_lines(old), _split_lines(new))


def compare_words(old: str | None, new: str | None) -> DiffResult:
    """Diff two texts treating every whitespace-separated word as a line.

    Normalized text is a single line, so a word-level layout is what makes
    the diagnostic readable.
    """
    return _diff_sequences((old or "").split(), (new or "").split())


def format_diff_results(diff: DiffResult) -> str:
    """Render a diff as plain text for logs and test output."""
    parts = ["", "=== TEXT COMPARISON RESULTS ===", "", "--- OLD TEXT ---"]
    for line in diff.old_text.lines:
        if line.type == ChangeType.IMAGINARY:
            continue
        parts.append(f"{_OLD_PREFIX.get(line.type, '  ')}{line.text}")

    parts.extend(["", "--- NEW TEXT ---"])
    for line in diff.new_text.lines:
        if line.type == ChangeType.IMAGINARY:
            continue
        parts.append(f"{_NEW_PREFIX.get(line.type, '  ')}{line.text}")

    return "\n".join(parts) + "\n"
