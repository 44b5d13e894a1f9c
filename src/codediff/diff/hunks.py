#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/hunks.py
"""Consolidation of edit scripts into classified hunks.

Every hunk spans at most one line on each side. Equal edits map one to one
onto ``equal`` hunks. A run of deletes immediately followed by a run of
inserts is a changed block: its lines are paired by position into
``changed`` hunks, and whatever one side has left over becomes ``removed``
or ``added`` hunks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from codediff.constants import HunkKind
from codediff.diff.myers import Edit


@dataclass(frozen=True, slots=True)
class Hunk:
    """A classified comparison unit.

    ``equal`` and ``changed`` hunks carry both sides, ``removed`` only the
    left side and ``added`` only the right side. Line numbers are one-based
    and absent exactly when the corresponding line is.
    """

    kind: HunkKind
    left_line: str | None
    right_line: str | None
    left_line_number: int | None = None
    right_line_number: int | None = None

    @property
    def is_change(self) -> bool:
        return self.kind != "equal"

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used by interactive hosts."""
        return {
            "kind": self.kind,
            "leftLine": self.left_line,
            "rightLine": self.right_line,
            "leftLineNumber": self.left_line_number,
            "rightLineNumber": self.right_line_number,
        }


class _HunkNumberer:
    """Assign per-side line numbers while hunks are emitted in order."""

    def __init__(self) -> None:
        self.left = 0
        self.right = 0
        self.hunks: list[Hunk] = []

    def emit(self, kind: HunkKind, left_line: str | None, right_line: str | None) -> None:
        left_number = right_number = None
        if left_line is not None:
            self.left += 1
            left_number = self.left
        if right_line is not None:
            self.right += 1
            right_number = self.right
        self.hunks.append(Hunk(kind, left_line, right_line, left_number, right_number))


def _take_run(edits: Sequence[Edit], start: int, tag: str) -> list[Edit]:
    end = start
    while end < len(edits) and edits[end].tag == tag:
        end += 1
    return list(edits[start:end])


def consolidate(
    edits: Sequence[Edit],
    left_lines: Sequence[str],
    right_lines: Sequence[str],
) -> list[Hunk]:
    """Group an edit script into typed hunks.

    Parameters
    ----------
    edits : Sequence[Edit]
        Edit script in document order
    left_lines : Sequence[str]
        Lines the ``left_index`` of each edit refers to
    right_lines : Sequence[str]
        Lines the ``right_index`` of each edit refers to

    Returns
    -------
    list of Hunk
        Hunks in document order with line numbers assigned

    """
    numberer = _HunkNumberer()
    i = 0

    while i < len(edits):
        edit = edits[i]
        if edit.tag == "equal":
            numberer.emit("equal", left_lines[edit.left_index], right_lines[edit.right_index])  # type: ignore[index]
            i += 1
            continue

        deletes = _take_run(edits, i, "delete")
        i += len(deletes)
        inserts = _take_run(edits, i, "insert")
        i += len(inserts)

        paired = min(len(deletes), len(inserts))
        for d, ins in zip(deletes[:paired], inserts[:paired]):
            numberer.emit("changed", left_lines[d.left_index], right_lines[ins.right_index])  # type: ignore[index]
        for d in deletes[paired:]:
            numberer.emit("removed", left_lines[d.left_index], None)  # type: ignore[index]
        for ins in inserts[paired:]:
            numberer.emit("added", None, right_lines[ins.right_index])  # type: ignore[index]

    return numberer.hunks


def iter_changes(hunks: Sequence[Hunk]) -> Iterator[Hunk]:
    """Yield the hunks that are not ``equal``."""
    return (hunk for hunk in hunks if hunk.is_change)


def has_changes(hunks: Sequence[Hunk]) -> bool:
    """Whether any hunk differs between the two sides."""
    return any(hunk.is_change for hunk in hunks)
