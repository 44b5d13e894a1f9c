#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/stats.py
"""Aggregate statistics and the plain-text export form of a comparison."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from io import StringIO
from typing import Sequence

from codediff.constants import PLAIN_TEXT_PREFIXES
from codediff.diff.hunks import Hunk


@dataclass(frozen=True)
class DiffStats:
    """Counts of non-equal hunks by kind."""

    added: int = 0
    removed: int = 0
    changed: int = 0

    @property
    def total_changes(self) -> int:
        return self.added + self.removed + self.changed

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def summary(self) -> str:
        """Short form such as ``+2 -1 ~3``."""
        return f"+{self.added} -{self.removed} ~{self.changed}"


def compute_stats(hunks: Sequence[Hunk]) -> DiffStats:
    """Count ``added``, ``removed`` and ``changed`` hunks."""
    counts = {"added": 0, "removed": 0, "changed": 0}
    for hunk in hunks:
        if hunk.kind in counts:
            counts[hunk.kind] += 1
    return DiffStats(**counts)


def to_plain_text(hunks: Sequence[Hunk]) -> str:
    """Render hunks in the unified copy/export form.

    Equal lines are prefixed with two spaces, removed lines with ``- `` and
    added lines with ``+ ``. A changed hunk is a removed line followed by an
    added line. Every line ends with a newline; the output does not depend on
    the view mode.

    Examples
    --------
    >>> to_plain_text([Hunk("changed", "b", "x", 1, 1)])
    '- b\\n+ x\\n'

    """
    output = StringIO()
    for hunk in hunks:
        if hunk.kind == "equal":
            output.write(f"{PLAIN_TEXT_PREFIXES['equal']}{hunk.left_line}\n")
        elif hunk.kind == "removed":
            output.write(f"{PLAIN_TEXT_PREFIXES['removed']}{hunk.left_line}\n")
        elif hunk.kind == "added":
            output.write(f"{PLAIN_TEXT_PREFIXES['added']}{hunk.right_line}\n")
        else:
            output.write(f"{PLAIN_TEXT_PREFIXES['removed']}{hunk.left_line}\n")
            output.write(f"{PLAIN_TEXT_PREFIXES['added']}{hunk.right_line}\n")
    return output.getvalue()
