"""codediff - line and word level comparison of two texts.

codediff computes a minimal line edit script between two documents with
Myers' algorithm, classifies the result into equal, added, removed and
changed hunks, highlights changed words inside paired lines, and renders
the outcome as a side-by-side or inline view, a unified plain-text form,
JSON, or colored terminal output.

Key Features
------------
- Shortest edit script at line granularity
- Word-level highlighting of changed lines, bounded for long lines
- Optional whitespace-insensitive comparison that keeps original text for display
- Optional JSON canonicalization so formatting differences disappear
- Context collapsing around changes
- Pure functions throughout: safe to run from worker threads

Examples
--------
Compare two texts:

    >>> from codediff import run
    >>> result = run("a\\nb\\nc", "a\\nx\\nc", {"viewMode": "sideBySide"})
    >>> result.stats.changed
    1

Compare two files, ignoring whitespace:

    >>> from codediff import compare_files
    >>> result = compare_files("old.py", "new.py", {"ignoreWhitespace": True})  # doctest: +SKIP

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from codediff.api import (
    ComparisonError,
    ComparisonResult,
    compare_files,
    compare_texts,
    export_filename,
    run,
)
from codediff.diff import DiffStats, Edit, Hunk, WordDiff
from codediff.exceptions import (
    CodediffError,
    MalformedStructuredInputError,
    NormalizationError,
    ValidationError,
)
from codediff.options import DiffOptions

__version__ = "1.0.0"

__all__ = [
    "CodediffError",
    "ComparisonError",
    "ComparisonResult",
    "DiffOptions",
    "DiffStats",
    "Edit",
    "Hunk",
    "MalformedStructuredInputError",
    "NormalizationError",
    "ValidationError",
    "WordDiff",
    "__version__",
    "compare_files",
    "compare_texts",
    "export_filename",
    "run",
]
