#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/word_diff.py
"""Word-level highlighting for a changed pair of lines.

Lines are split into tokens (word runs, whitespace runs and single
symbols) and aligned with a longest common subsequence. Tokens outside the
common subsequence are marked. The dynamic program is quadratic, so it only
runs when the token-pair product stays within a cell limit; beyond that
every token is marked and the result is flagged as degraded.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from html import escape
from typing import Sequence

from codediff.constants import DEFAULT_WORD_DIFF_CELL_LIMIT, WORD_ADDED_CLASS, WORD_REMOVED_CLASS

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\w+|\s+|[^\w\s]")


@dataclass(frozen=True, slots=True)
class MarkedToken:
    """A token and whether it is highlighted as changed."""

    text: str
    marked: bool


@dataclass(frozen=True)
class WordDiff:
    """Marked token sequences for both lines of a changed pair.

    Attributes
    ----------
    left : tuple of MarkedToken
        Tokens of the left line; marked tokens were removed
    right : tuple of MarkedToken
        Tokens of the right line; marked tokens were added
    degraded : bool
        True when the cell limit was exceeded. Every token is then marked,
        which means "no word-level detail", not "nothing in common".

    """

    left: tuple[MarkedToken, ...]
    right: tuple[MarkedToken, ...]
    degraded: bool = False

    def left_html(self) -> str:
        return tokens_to_html(self.left, WORD_REMOVED_CLASS)

    def right_html(self) -> str:
        return tokens_to_html(self.right, WORD_ADDED_CLASS)


def tokenize(line: str) -> list[str]:
    """Split a line into word runs, whitespace runs and single symbols.

    Joining the tokens always gives back ``line``.

    Examples
    --------
    >>> tokenize("foo(bar,  1)")
    ['foo', '(', 'bar', ',', '  ', '1', ')']

    """
    return _TOKEN_RE.findall(line)


def longest_common_subsequence(
    a: Sequence[str],
    b: Sequence[str],
    cell_limit: int = DEFAULT_WORD_DIFF_CELL_LIMIT,
) -> list[str] | None:
    """Return a longest common subsequence of two token sequences.

    Parameters
    ----------
    a, b : Sequence[str]
        Token sequences
    cell_limit : int, default 100000
        Largest ``len(a) * len(b)`` for which the table is built

    Returns
    -------
    list of str or None
        The subsequence, or None when the cell limit is exceeded

    """
    n, m = len(a), len(b)
    if n == 0 or m == 0:
        return []
    if n * m > cell_limit:
        return None

    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        row, above = table[i], table[i - 1]
        token = a[i - 1]
        for j in range(1, m + 1):
            if token == b[j - 1]:
                row[j] = above[j - 1] + 1
            else:
                row[j] = above[j] if above[j] >= row[j - 1] else row[j - 1]

    result: list[str] = []
    i, j = n, m
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            result.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    result.reverse()
    return result


def word_diff(
    left_line: str,
    right_line: str,
    cell_limit: int = DEFAULT_WORD_DIFF_CELL_LIMIT,
) -> WordDiff:
    """Mark the tokens that differ between two lines.

    Both token sequences are walked against the common subsequence. A pair
    of tokens equal to its next element is kept. Otherwise a right token
    that is not the next element is marked added, and failing that the left
    token is marked removed. Unmarked tokens on each side therefore spell
    out the common subsequence.

    Parameters
    ----------
    left_line : str
        Line from the original document
    right_line : str
        Line from the modified document
    cell_limit : int, default 100000
        Token-pair budget for the alignment

    Returns
    -------
    WordDiff
        Marked tokens for both sides

    """
    left_tokens = tokenize(left_line)
    right_tokens = tokenize(right_line)
    common = longest_common_subsequence(left_tokens, right_tokens, cell_limit)

    degraded = common is None
    if common is None:
        logger.debug(
            "Word alignment skipped: %d x %d tokens exceeds limit of %d",
            len(left_tokens),
            len(right_tokens),
            cell_limit,
        )
        common = []

    left: list[MarkedToken] = []
    right: list[MarkedToken] = []
    ai = bi = ci = 0
    n, m = len(left_tokens), len(right_tokens)

    while ai < n or bi < m:
        expected = common[ci] if ci < len(common) else None
        if ai < n and bi < m and left_tokens[ai] == expected and right_tokens[bi] == expected:
            left.append(MarkedToken(left_tokens[ai], False))
            right.append(MarkedToken(right_tokens[bi], False))
            ai += 1
            bi += 1
            ci += 1
        elif bi < m and (ai >= n or right_tokens[bi] != expected):
            right.append(MarkedToken(right_tokens[bi], True))
            bi += 1
        else:
            left.append(MarkedToken(left_tokens[ai], True))
            ai += 1

    return WordDiff(tuple(left), tuple(right), degraded)


def tokens_to_html(tokens: Sequence[MarkedToken], css_class: str) -> str:
    """Escape tokens for markup, wrapping marked ones in a classed span."""
    parts: list[str] = []
    for token in tokens:
        text = escape(token.text)
        if token.marked:
            parts.append(f'<span class="{css_class}">{text}</span>')
        else:
            parts.append(text)
    return "".join(parts)
