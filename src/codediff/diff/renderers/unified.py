#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/renderers/unified.py
"""Terminal rendering of the plain-text form with optional ANSI colors."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from codediff.diff.hunks import Hunk
from codediff.diff.renderers.view import visible_mask
from codediff.diff.stats import to_plain_text

RED = "\033[31m"
GREEN = "\033[32m"
CYAN = "\033[36m"
RESET = "\033[0m"


def _split(text: str) -> list[str]:
    # every line of the plain-text form ends with "\n"
    return text.split("\n")[:-1]


class UnifiedDiffRenderer:
    """Render the two-character-prefix text form, colorized for terminals.

    - Red for removed lines (``- ``)
    - Green for added lines (``+ ``)
    - Cyan for collapsed-context markers when ``context_window`` is set

    Parameters
    ----------
    use_color : bool, default = True
        If True, add ANSI color codes to output
    context_window : int, optional
        If given, unchanged runs further than this from a change are
        replaced by a ``@@ N unchanged lines @@`` marker. The default keeps
        every line, matching the export form.

    """

    def __init__(
        self,
        use_color: bool = True,
        context_window: int | None = None,
    ):
        """Initialize the unified diff renderer."""
        self.use_color = use_color
        self.context_window = context_window

    def render(self, hunks: Sequence[Hunk]) -> Iterator[str]:
        """Yield display lines without trailing newlines.

        Parameters
        ----------
        hunks : Sequence[Hunk]
            Consolidated hunks

        Yields
        ------
        str
            Rendered lines

        """
        yield from self.colorize(self._lines(hunks))

    def colorize(self, lines: Iterable[str]) -> Iterator[str]:
        """Add color codes to already rendered plain-text lines."""
        if not self.use_color:
            yield from lines
            return

        for line in lines:
            if line.startswith("@@"):
                yield f"{CYAN}{line}{RESET}"
            elif line.startswith("+ "):
                yield f"{GREEN}{line}{RESET}"
            elif line.startswith("- "):
                yield f"{RED}{line}{RESET}"
            else:
                yield line

    def _lines(self, hunks: Sequence[Hunk]) -> Iterator[str]:
        if self.context_window is None:
            yield from _split(to_plain_text(hunks))
            return

        visible = visible_mask(hunks, self.context_window)
        hidden = 0
        for hunk, shown in zip(hunks, visible):
            if not shown:
                hidden += 1
                continue
            if hidden:
                yield f"@@ {hidden} unchanged line{'s' if hidden != 1 else ''} @@"
                hidden = 0
            yield from _split(to_plain_text([hunk]))
        if hidden:
            yield f"@@ {hidden} unchanged line{'s' if hidden != 1 else ''} @@"
