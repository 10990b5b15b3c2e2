"""Offset-addressed text helpers.

Edits are plain values applied in one pass to produce a new string, so offsets
computed against one snapshot of the text are never reused after it changes.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

_BLANK_LINE = re.compile(r"\n[^\S\n]*\n")


@dataclass(frozen=True)
class Edit:
    offset: int
    delete_length: int = 0
    text: str = ""

    @property
    def end(self) -> int:
        return self.offset + self.delete_length


def apply_edits(text: str, edits: Iterable[Edit]) -> str:
    """Apply a batch of non-overlapping edits to ``text``.

    Offsets refer to the original ``text``. Raises ``ValueError`` when an edit
    falls outside the text or overlaps another edit of the batch.
    """
    ordered = sorted(edits, key=lambda e: (e.offset, e.end))
    parts: list[str] = []
    cursor = 0
    for edit in ordered:
        if edit.offset < cursor:
            raise ValueError(f"Overlapping edit at offset {edit.offset}")
        if edit.delete_length < 0 or edit.end > len(text):
            raise ValueError(f"Edit out of range: offset={edit.offset} delete_length={edit.delete_length}")
        parts.append(text[cursor : edit.offset])
        parts.append(edit.text)
        cursor = edit.end
    parts.append(text[cursor:])
    return "".join(parts)


def line_start(text: str, offset: int) -> int:
    return text.rfind("\n", 0, offset) + 1


def contains_blank_line(text: str, start: int, end: int) -> bool:
    """Whether a whitespace-only line lies strictly between ``start`` and ``end``."""
    if end <= start:
        return False
    return _BLANK_LINE.search(text, start, end) is not None


def offset_at(text: str, line: int, column: int = 0) -> int:
    """Offset of 1-based ``line`` and 0-based ``column``, clamped to the line."""
    if line < 1:
        raise ValueError(f"Line numbers start at 1, got {line}")
    start = 0
    for _ in range(line - 1):
        newline = text.find("\n", start)
        if newline == -1:
            raise ValueError(f"Line {line} is past the end of the text")
        start = newline + 1
    end = text.find("\n", start)
    if end == -1:
        end = len(text)
    return min(start + max(column, 0), end)
