#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/renderers/view.py
"""Presentation-ready view model built from hunks.

The view model is what a host draws: rows with line-number labels and
pre-escaped markup, and collapsed-run markers standing in for long unchanged
stretches. Any non-equal hunk keeps itself and ``context_window`` hunks on
either side visible; overlapping windows merge into a single visible region.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape
from typing import Iterator, Sequence, Union

from codediff.constants import DEFAULT_CONTEXT_WINDOW, DEFAULT_WORD_DIFF_CELL_LIMIT, HunkKind, ViewMode
from codediff.diff.hunks import Hunk, has_changes
from codediff.diff.word_diff import word_diff


@dataclass(frozen=True)
class SideBySideRow:
    """One hunk drawn as two parallel columns.

    ``left_html``/``right_html`` are escaped markup; an absent side is an
    empty string.
    """

    kind: HunkKind
    left_number: int | None
    right_number: int | None
    left_html: str
    right_html: str


@dataclass(frozen=True)
class InlineRow:
    """One line of the linear layout.

    ``kind`` is ``equal``, ``removed`` or ``added``; a changed hunk becomes a
    removed row followed by an added row.
    """

    kind: HunkKind
    left_number: int | None
    right_number: int | None
    html: str

    @property
    def sign(self) -> str:
        return {"removed": "-", "added": "+"}.get(self.kind, " ")


@dataclass(frozen=True)
class CollapsedRun:
    """Marker for ``hidden`` consecutive unchanged hunks."""

    hidden: int

    @property
    def label(self) -> str:
        return f"{self.hidden} unchanged line{'s' if self.hidden != 1 else ''}"


ViewRow = Union[SideBySideRow, InlineRow, CollapsedRun]


@dataclass(frozen=True)
class ViewModel:
    """Rows to draw for one comparison.

    When ``identical`` is True there are no rows and the host shows the
    "no differences" placeholder instead of a table.
    """

    view_mode: ViewMode
    rows: tuple[ViewRow, ...]
    identical: bool

    @property
    def hidden_count(self) -> int:
        return sum(row.hidden for row in self.rows if isinstance(row, CollapsedRun))


def visible_mask(hunks: Sequence[Hunk], context_window: int = DEFAULT_CONTEXT_WINDOW) -> list[bool]:
    """Flag the hunks within ``context_window`` of a change."""
    total = len(hunks)
    visible = [False] * total
    for i, hunk in enumerate(hunks):
        if hunk.is_change:
            for j in range(max(0, i - context_window), min(total, i + context_window + 1)):
                visible[j] = True
    return visible


def _segments(hunks: Sequence[Hunk], context_window: int) -> Iterator[Hunk | CollapsedRun]:
    """Yield visible hunks, replacing each hidden stretch with one marker."""
    visible = visible_mask(hunks, context_window)
    hidden = 0
    for hunk, shown in zip(hunks, visible):
        if not shown:
            hidden += 1
            continue
        if hidden:
            yield CollapsedRun(hidden)
            hidden = 0
        yield hunk
    if hidden:
        yield CollapsedRun(hidden)


def _escaped(line: str | None) -> str:
    return escape(line) if line else ""


def _side_by_side_row(hunk: Hunk, cell_limit: int) -> SideBySideRow:
    if hunk.kind == "changed":
        marked = word_diff(hunk.left_line or "", hunk.right_line or "", cell_limit)
        left_html, right_html = marked.left_html(), marked.right_html()
    else:
        left_html, right_html = _escaped(hunk.left_line), _escaped(hunk.right_line)
    return SideBySideRow(hunk.kind, hunk.left_line_number, hunk.right_line_number, left_html, right_html)


def _inline_rows(hunk: Hunk, cell_limit: int) -> list[InlineRow]:
    if hunk.kind == "equal":
        return [InlineRow("equal", hunk.left_line_number, hunk.right_line_number, _escaped(hunk.left_line))]
    if hunk.kind == "removed":
        return [InlineRow("removed", hunk.left_line_number, None, _escaped(hunk.left_line))]
    if hunk.kind == "added":
        return [InlineRow("added", None, hunk.right_line_number, _escaped(hunk.right_line))]

    marked = word_diff(hunk.left_line or "", hunk.right_line or "", cell_limit)
    return [
        InlineRow("removed", hunk.left_line_number, None, marked.left_html()),
        InlineRow("added", None, hunk.right_line_number, marked.right_html()),
    ]


def build_view_model(
    hunks: Sequence[Hunk],
    view_mode: ViewMode,
    context_window: int = DEFAULT_CONTEXT_WINDOW,
    word_diff_cell_limit: int = DEFAULT_WORD_DIFF_CELL_LIMIT,
) -> ViewModel:
    """Project hunks onto rows for the requested layout.

    Parameters
    ----------
    hunks : Sequence[Hunk]
        Consolidated hunks with line numbers
    view_mode : {'side_by_side', 'inline'}
        Target layout
    context_window : int, default 4
        Unchanged hunks kept visible on each side of a change
    word_diff_cell_limit : int, default 100000
        Token-pair budget for highlighting changed pairs

    Returns
    -------
    ViewModel
        Rows for the layout, or an empty identical model

    """
    if not has_changes(hunks):
        return ViewModel(view_mode, (), True)

    rows: list[ViewRow] = []
    for segment in _segments(hunks, context_window):
        if isinstance(segment, CollapsedRun):
            rows.append(segment)
        elif view_mode == "side_by_side":
            rows.append(_side_by_side_row(segment, word_diff_cell_limit))
        else:
            rows.extend(_inline_rows(segment, word_diff_cell_limit))
    return ViewModel(view_mode, tuple(rows), False)
