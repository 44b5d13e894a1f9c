#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/options.py
"""Comparison options.

A :class:`DiffOptions` instance is created once per comparison and never
mutated while the pipeline runs. Hosts that speak the camelCase wire format
(``ignoreWhitespace``, ``structuredMode``, ``viewMode``) can build one with
:meth:`DiffOptions.from_mapping`.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from codediff.constants import (
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_JSON_INDENT,
    DEFAULT_SORT_KEYS,
    DEFAULT_VIEW_MODE,
    DEFAULT_WORD_DIFF_CELL_LIMIT,
    VIEW_MODE_ALIASES,
    VIEW_MODES,
    ViewMode,
)
from codediff.exceptions import ValidationError

_WIRE_KEYS = {
    "ignoreWhitespace": "ignore_whitespace",
    "structuredMode": "structured_mode",
    "jsonMode": "structured_mode",
    "viewMode": "view_mode",
    "contextWindow": "context_window",
    "wordDiffCellLimit": "word_diff_cell_limit",
    "jsonIndent": "json_indent",
    "sortKeys": "sort_keys",
}


_BOOL_FIELDS = frozenset({"ignore_whitespace", "structured_mode", "sort_keys"})
_INT_FIELDS = frozenset({"context_window", "word_diff_cell_limit", "json_indent"})
_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _coerce_wire_value(key: str, name: str, value: Any) -> Any:
    """Convert a wire value to the field's type, accepting string spellings."""
    if name in _BOOL_FIELDS:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in _TRUE_VALUES + _FALSE_VALUES:
            return value.strip().lower() in _TRUE_VALUES
        raise ValidationError(
            f"Option {key} must be a boolean, got {value!r}", parameter_name=key, parameter_value=value
        )
    if name in _INT_FIELDS:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        message = f"Option {key} must be an integer, got {value!r}"
        if not isinstance(value, str):
            raise ValidationError(message, parameter_name=key, parameter_value=value)
        try:
            return int(value)
        except ValueError as e:
            raise ValidationError(message, parameter_name=key, parameter_value=value, original_error=e) from e
    return value


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class DiffOptions(CloneFrozenMixin):
    """Options controlling a single comparison.

    Parameters
    ----------
    ignore_whitespace : bool, default False
        Compare lines with runs of whitespace folded to one space and the
        ends trimmed. Displayed text is never altered.
    structured_mode : bool, default False
        Parse both inputs as JSON and compare their canonical serialization.
    view_mode : {'side_by_side', 'inline'}, default 'inline'
        Layout of the rendered view model.
    context_window : int, default 4
        Unchanged hunks kept visible before and after each change.
    word_diff_cell_limit : int, default 100000
        Largest token-pair product for which word-level alignment runs.
    json_indent : int, default 2
        Indentation used when canonicalizing structured input.
    sort_keys : bool, default False
        Also sort object keys when canonicalizing structured input.

    """

    ignore_whitespace: bool = field(
        default=False,
        metadata={"help": "Ignore whitespace differences when comparing lines", "importance": "core"},
    )
    structured_mode: bool = field(
        default=False,
        metadata={"help": "Parse both inputs as JSON and compare canonical forms", "importance": "core"},
    )
    view_mode: ViewMode = field(
        default=DEFAULT_VIEW_MODE,
        metadata={"help": "Rendered layout: side_by_side or inline", "importance": "core"},
    )
    context_window: int = field(
        default=DEFAULT_CONTEXT_WINDOW,
        metadata={"help": "Unchanged lines kept visible around each change", "importance": "advanced"},
    )
    word_diff_cell_limit: int = field(
        default=DEFAULT_WORD_DIFF_CELL_LIMIT,
        metadata={"help": "Token-pair budget for word-level highlighting", "importance": "advanced"},
    )
    json_indent: int = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "Indentation of canonical JSON", "importance": "advanced"},
    )
    sort_keys: bool = field(
        default=DEFAULT_SORT_KEYS,
        metadata={"help": "Sort object keys when canonicalizing JSON", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate enumerated and numeric fields.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.view_mode not in VIEW_MODES:
            raise ValueError(f"view_mode must be one of {', '.join(VIEW_MODES)}, got {self.view_mode!r}")
        if self.context_window < 0:
            raise ValueError(f"context_window must be non-negative, got {self.context_window}")
        if self.word_diff_cell_limit < 0:
            raise ValueError(f"word_diff_cell_limit must be non-negative, got {self.word_diff_cell_limit}")
        if self.json_indent < 0:
            raise ValueError(f"json_indent must be non-negative, got {self.json_indent}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DiffOptions":
        """Build options from a mapping of wire or snake_case keys.

        Unknown keys are rejected so that typos do not silently fall back
        to defaults.

        Parameters
        ----------
        values : Mapping[str, Any]
            Keys such as ``ignoreWhitespace``/``ignore_whitespace``,
            ``structuredMode``/``structured_mode`` and ``viewMode``/``view_mode``.
            ``viewMode`` also accepts ``"sideBySide"`` and ``"side-by-side"``.
            Boolean fields accept ``"true"``/``"false"`` style strings and
            integer fields accept numeric strings.

        Returns
        -------
        DiffOptions
            Validated options

        Raises
        ------
        ValidationError
            If a key is unknown or a value is invalid

        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _WIRE_KEYS.get(key, key.replace("-", "_"))
            if name not in known:
                raise ValidationError(f"Unknown option: {key}", parameter_name=key, parameter_value=value)
            if name == "view_mode":
                value = normalize_view_mode(value)
            else:
                value = _coerce_wire_value(key, name, value)
            kwargs[name] = value

        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as e:
            raise ValidationError(str(e), original_error=e) from e


def normalize_view_mode(value: Any) -> ViewMode:
    """Map a view mode name or alias onto a :data:`ViewMode` value.

    Raises
    ------
    ValidationError
        If the name is not a known view mode

    """
    mode = VIEW_MODE_ALIASES.get(str(value))
    if mode is None:
        raise ValidationError(
            f"Invalid view mode: {value}. Must be one of: sideBySide, inline",
            parameter_name="view_mode",
            parameter_value=value,
        )
    return mode  # type: ignore[return-value]
