#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/api.py
"""Python API for comparing two texts.

:func:`run` is the entry point for interactive hosts: it never raises for bad
input and returns either a :class:`ComparisonResult` or a
:class:`ComparisonError`. :func:`compare_texts` is the same pipeline for
library callers who prefer exceptions, and :func:`compare_files` adds file
loading on top.

Every call builds its own intermediate values and shares nothing with other
calls, so comparisons can run concurrently on worker threads or processes.
A host wanting cancellation or debouncing discards results of superseded
calls.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from codediff.constants import EXPORT_FILENAME_TEMPLATE, Side
from codediff.diff.hunks import Hunk, consolidate
from codediff.diff.myers import shortest_edit_script
from codediff.diff.normalize import normalize, split_lines
from codediff.diff.renderers.html import HtmlDiffRenderer
from codediff.diff.renderers.view import ViewModel, build_view_model
from codediff.diff.stats import DiffStats, compute_stats, to_plain_text
from codediff.exceptions import FileAccessError, FileNotFoundError, MalformedStructuredInputError
from codediff.options import DiffOptions

logger = logging.getLogger(__name__)

OptionsLike = Union[DiffOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class ComparisonResult:
    """Successful comparison.

    Attributes
    ----------
    html : str
        Serialized view model (table markup or the "no differences" placeholder)
    stats : DiffStats
        Counts of added, removed and changed hunks
    plain_text : str
        Unified plain-text form for copy/export
    hunks : tuple of Hunk
        All hunks in document order
    view : ViewModel
        The view model ``html`` was serialized from
    options : DiffOptions
        Options the comparison ran with

    """

    html: str
    stats: DiffStats
    plain_text: str
    hunks: tuple[Hunk, ...]
    view: ViewModel
    options: DiffOptions = field(default_factory=DiffOptions)

    @property
    def has_changes(self) -> bool:
        return self.stats.total_changes > 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the keys used by interactive hosts."""
        return {
            "html": self.html,
            "stats": self.stats.to_dict(),
            "plainText": self.plain_text,
            "hunks": [hunk.to_dict() for hunk in self.hunks],
        }


@dataclass(frozen=True)
class ComparisonError:
    """Failed comparison.

    Attributes
    ----------
    error : str
        Display message naming the side and the parser's message
    side : {'left', 'right'}
        The input that failed
    char_offset : int or None
        Offset of the failure within that input, when known

    """

    error: str
    side: Side
    char_offset: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error}


def resolve_options(options: OptionsLike) -> DiffOptions:
    """Accept a :class:`DiffOptions`, a mapping of wire/snake_case keys, or None."""
    if options is None:
        return DiffOptions()
    if isinstance(options, DiffOptions):
        return options
    return DiffOptions.from_mapping(options)


def _normalize_side(text: str, side: Side, options: DiffOptions) -> str:
    try:
        return normalize(text, options)
    except MalformedStructuredInputError as e:
        raise e.with_side(side) from e


def compare_texts(left_text: str, right_text: str, options: OptionsLike = None) -> ComparisonResult:
    """Compare two texts.

    Parameters
    ----------
    left_text : str
        Original text
    right_text : str
        Modified text
    options : DiffOptions or mapping, optional
        Comparison options; a mapping may use ``ignoreWhitespace``,
        ``structuredMode`` and ``viewMode`` (``"sideBySide"``/``"inline"``)

    Returns
    -------
    ComparisonResult
        Hunks, statistics, plain text and rendered view

    Raises
    ------
    MalformedStructuredInputError
        In structured mode, when either side does not parse; ``side`` names it
    ValidationError
        If ``options`` is an invalid mapping

    Examples
    --------
    >>> result = compare_texts("a\\nb\\nc", "a\\nx\\nc")
    >>> result.stats
    DiffStats(added=0, removed=0, changed=1)
    >>> print(result.plain_text, end="")
      a
    - b
    + x
      c

    """
    resolved = resolve_options(options)

    if left_text == "" and right_text == "":
        hunks: list[Hunk] = []
    else:
        left = _normalize_side(left_text, "left", resolved)
        right = _normalize_side(right_text, "right", resolved)
        left_lines = split_lines(left)
        right_lines = split_lines(right)
        edits = shortest_edit_script(left_lines, right_lines, resolved.ignore_whitespace)
        hunks = consolidate(edits, left_lines, right_lines)

    stats = compute_stats(hunks)
    view = build_view_model(
        hunks,
        resolved.view_mode,
        context_window=resolved.context_window,
        word_diff_cell_limit=resolved.word_diff_cell_limit,
    )
    logger.debug("Compared %d hunks: %s", len(hunks), stats.summary())

    return ComparisonResult(
        html=HtmlDiffRenderer().render(view),
        stats=stats,
        plain_text=to_plain_text(hunks),
        hunks=tuple(hunks),
        view=view,
        options=resolved,
    )


def run(
    left_text: str,
    right_text: str,
    options: OptionsLike = None,
) -> ComparisonResult | ComparisonError:
    """Compare two texts, reporting malformed input as a value.

    Parameters
    ----------
    left_text : str
        Original text
    right_text : str
        Modified text
    options : DiffOptions or mapping, optional
        Comparison options

    Returns
    -------
    ComparisonResult or ComparisonError
        The error value names the failing side and carries the parser message

    Examples
    --------
    >>> outcome = run("{", "{}", {"structuredMode": True})
    >>> outcome.error.startswith("Left pane: Invalid JSON")
    True

    """
    try:
        return compare_texts(left_text, right_text, options)
    except MalformedStructuredInputError as e:
        side: Side = e.side or "left"
        logger.warning("%s input is not valid JSON: %s", side.capitalize(), e.message)
        return ComparisonError(error=e.describe(), side=side, char_offset=e.char_offset)


def read_text_file(path: Path, encoding: str = "utf-8") -> str:
    """Read a text file, raising the package file errors."""
    if not path.exists():
        raise FileNotFoundError(str(path))
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileAccessError(str(path), f"File is not valid {encoding} text: {path}", original_error=e) from e
    except OSError as e:
        raise FileAccessError(str(path), original_error=e) from e


def compare_files(
    left_path: str | Path,
    right_path: str | Path,
    options: OptionsLike = None,
    encoding: str = "utf-8",
) -> ComparisonResult:
    """Read two text files and compare them.

    Parameters
    ----------
    left_path : str or Path
        Path to the original file
    right_path : str or Path
        Path to the modified file
    options : DiffOptions or mapping, optional
        Comparison options
    encoding : str, default "utf-8"
        Text encoding of both files

    Returns
    -------
    ComparisonResult
        Comparison of the file contents

    Raises
    ------
    FileNotFoundError
        If either file does not exist
    FileAccessError
        If a file cannot be read or decoded
    MalformedStructuredInputError
        In structured mode, when either file does not parse

    """
    left_text = read_text_file(Path(left_path), encoding)
    right_text = read_text_file(Path(right_path), encoding)
    return compare_texts(left_text, right_text, options)


def export_filename(timestamp_ms: int | None = None) -> str:
    """Name for an exported diff, ``codediff-<epoch milliseconds>.diff``."""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return EXPORT_FILENAME_TEMPLATE.format(timestamp=timestamp_ms)


__all__ = [
    "ComparisonError",
    "ComparisonResult",
    "compare_files",
    "compare_texts",
    "export_filename",
    "read_text_file",
    "resolve_options",
    "run",
]
