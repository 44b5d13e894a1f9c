#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codediff/cli/output.py
"""Terminal output helpers for the codediff CLI.

Rich is optional: ``--rich`` draws a colored table and a summary panel when
the library is installed, and the CLI falls back to plain output otherwise.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING, Sequence, TextIO

from codediff.api import ComparisonResult
from codediff.diff.hunks import Hunk
from codediff.diff.renderers.view import visible_mask
from codediff.diff.word_diff import MarkedToken, word_diff

if TYPE_CHECKING:
    from rich.text import Text


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def is_tty(stream: TextIO | None = None) -> bool:
    """Whether ``stream`` (stdout by default) is attached to a terminal."""
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def should_use_color(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Resolve ``--color`` against the output destination.

    Colors are never written to files.
    """
    if args.output:
        return False
    if args.color == "always":
        return True
    if args.color == "never":
        return False
    return is_tty(stream)


def _marked_text(tokens: Sequence[MarkedToken], style: str) -> "Text":
    from rich.text import Text

    text = Text()
    for token in tokens:
        text.append(token.text, style=style if token.marked else None)
    return text


def _row_cells(hunk: Hunk, cell_limit: int) -> tuple["Text", "Text"]:
    from rich.text import Text

    if hunk.kind == "changed":
        marked = word_diff(hunk.left_line or "", hunk.right_line or "", cell_limit)
        return _marked_text(marked.left, "bold white on red"), _marked_text(marked.right, "bold white on green")
    return Text(hunk.left_line or ""), Text(hunk.right_line or "")


_ROW_STYLES = {"equal": None, "added": "green", "removed": "red", "changed": "yellow"}


def render_rich(result: ComparisonResult, stream: TextIO | None = None) -> None:
    """Print a side-by-side table and a summary panel with Rich.

    Parameters
    ----------
    result : ComparisonResult
        Comparison to display
    stream : TextIO, optional
        Destination, stdout by default

    """
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    console = Console(file=stream or sys.stdout)
    stats = result.stats

    if not result.has_changes:
        console.print("[green]No differences found.[/green]")
        return

    table = Table(show_header=True, header_style="bold", expand=True)
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Original", ratio=1)
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Modified", ratio=1)

    hunks = result.hunks
    visible = visible_mask(hunks, result.options.context_window)
    hidden = 0
    for hunk, shown in zip(hunks, visible):
        if not shown:
            hidden += 1
            continue
        if hidden:
            table.add_row("", f"[dim]... {hidden} unchanged ...[/dim]", "", "")
            hidden = 0
        left, right = _row_cells(hunk, result.options.word_diff_cell_limit)
        table.add_row(
            str(hunk.left_line_number or ""),
            left,
            str(hunk.right_line_number or ""),
            right,
            style=_ROW_STYLES[hunk.kind],
        )
    if hidden:
        table.add_row("", f"[dim]... {hidden} unchanged ...[/dim]", "", "")

    console.print(table)
    console.print(
        Panel(
            f"[green]+{stats.added} added[/green]  [red]-{stats.removed} removed[/red]  "
            f"[yellow]~{stats.changed} changed[/yellow]",
            title="Summary",
            expand=False,
        )
    )
