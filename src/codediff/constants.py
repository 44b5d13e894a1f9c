#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/constants.py
"""Constants and default values for the codediff engine.

This module centralizes the literal types shared across the pipeline and the
tunable defaults used by the aligners and renderers.

Constants are organized by category:
1. Type Definitions - All Literal types
2. Alignment Limits - Word-level alignment bounds
3. Rendering Defaults - Context collapsing and markup classes
4. Normalization Defaults - Structured-data canonicalization
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types
# =============================================================================

EditTag = Literal["equal", "delete", "insert"]
HunkKind = Literal["equal", "added", "removed", "changed"]
ViewMode = Literal["side_by_side", "inline"]
Side = Literal["left", "right"]
OutputFormat = Literal["unified", "html", "json"]
ColorMode = Literal["auto", "always", "never"]

VIEW_MODES: tuple[str, ...] = ("side_by_side", "inline")

# Wire names used by interactive hosts, mapped onto ViewMode values
VIEW_MODE_ALIASES: dict[str, str] = {
    "sideBySide": "side_by_side",
    "sidebyside": "side_by_side",
    "side-by-side": "side_by_side",
    "side_by_side": "side_by_side",
    "inline": "inline",
}

# =============================================================================
# Alignment Limits
# =============================================================================

# Word-level LCS is skipped when len(left_tokens) * len(right_tokens) exceeds this
DEFAULT_WORD_DIFF_CELL_LIMIT = 100_000

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_VIEW_MODE: ViewMode = "inline"

# Unchanged hunks kept visible before and after every change
DEFAULT_CONTEXT_WINDOW = 4

WORD_ADDED_CLASS = "word-added"
WORD_REMOVED_CLASS = "word-removed"

NO_DIFFERENCES_MESSAGE = "No differences found. Files are identical."

PLAIN_TEXT_PREFIXES: dict[str, str] = {
    "equal": "  ",
    "removed": "- ",
    "added": "+ ",
}

# =============================================================================
# Normalization Defaults
# =============================================================================

DEFAULT_JSON_INDENT = 2
DEFAULT_SORT_KEYS = False

# Download name used when exporting into a directory
EXPORT_FILENAME_TEMPLATE = "codediff-{timestamp}.diff"
