#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/renderers/__init__.py
"""Renderers for comparison output.

Available Renderers
-------------------
- build_view_model: Rows for side-by-side or inline display with collapsed context
- HtmlDiffRenderer: Markup fragment or standalone page from a view model
- JsonDiffRenderer: Structured JSON output for programmatic access
- UnifiedDiffRenderer: Colorized plain-text output for terminals

Examples
--------
Render a comparison as a standalone page:
    >>> from codediff import compare_texts
    >>> from codediff.diff.renderers import HtmlDiffRenderer
    >>> result = compare_texts("a\\nb\\n", "a\\nc\\n", {"viewMode": "sideBySide"})
    >>> html = HtmlDiffRenderer(standalone=True).render(result.view, result.stats)

"""

from codediff.diff.renderers.html import HtmlDiffRenderer
from codediff.diff.renderers.json import JsonDiffRenderer
from codediff.diff.renderers.unified import UnifiedDiffRenderer
from codediff.diff.renderers.view import (
    CollapsedRun,
    InlineRow,
    SideBySideRow,
    ViewModel,
    ViewRow,
    build_view_model,
    visible_mask,
)

__all__ = [
    "CollapsedRun",
    "HtmlDiffRenderer",
    "InlineRow",
    "JsonDiffRenderer",
    "SideBySideRow",
    "UnifiedDiffRenderer",
    "ViewModel",
    "ViewRow",
    "build_view_model",
    "visible_mask",
]
