#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/__init__.py
"""The comparison pipeline.

Raw texts flow through these stages, each a pure function of its arguments:

- normalize: optional JSON canonicalization, then line splitting
- myers: shortest edit script between the two line sequences
- hunks: consolidation of edits into equal/added/removed/changed hunks
- word_diff: token-level highlighting of changed line pairs
- stats: counts by kind and the plain-text export form
- renderers: view model, HTML, JSON and terminal output

Examples
--------
    >>> from codediff.diff import consolidate, shortest_edit_script
    >>> left, right = ["a", "b", "c"], ["a", "x", "c"]
    >>> [h.kind for h in consolidate(shortest_edit_script(left, right), left, right)]
    ['equal', 'changed', 'equal']

"""

from codediff.diff.hunks import Hunk, consolidate, has_changes
from codediff.diff.myers import Edit, shortest_edit_script
from codediff.diff.normalize import canonicalize_json, fold_whitespace, normalize, split_lines
from codediff.diff.stats import DiffStats, compute_stats, to_plain_text
from codediff.diff.word_diff import MarkedToken, WordDiff, longest_common_subsequence, tokenize, word_diff

__all__ = [
    "DiffStats",
    "Edit",
    "Hunk",
    "MarkedToken",
    "WordDiff",
    "canonicalize_json",
    "compute_stats",
    "consolidate",
    "fold_whitespace",
    "has_changes",
    "longest_common_subsequence",
    "normalize",
    "shortest_edit_script",
    "split_lines",
    "to_plain_text",
    "tokenize",
    "word_diff",
]
