#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/normalize.py
"""Input preparation: structured canonicalization and line splitting.

Structured mode rewrites a JSON document into a canonical serialization so
that documents differing only in formatting compare equal. Whitespace
folding is not applied here: it only affects how lines are compared by the
aligner, so the original text is what gets displayed.
"""

from __future__ import annotations

import json
import re
from typing import Any

from codediff.constants import DEFAULT_JSON_INDENT, DEFAULT_SORT_KEYS
from codediff.exceptions import MalformedStructuredInputError
from codediff.options import DiffOptions

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_TOO_DEEP_MESSAGE = "Document nested too deeply"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid literal {name}")


def canonicalize_json(
    text: str,
    indent: int = DEFAULT_JSON_INDENT,
    sort_keys: bool = DEFAULT_SORT_KEYS,
) -> str:
    """Parse ``text`` as JSON and serialize it deterministically.

    Parameters
    ----------
    text : str
        JSON document
    indent : int, default 2
        Spaces per nesting level
    sort_keys : bool, default False
        Sort object keys; when False keys keep document order

    Returns
    -------
    str
        Canonical serialization without a trailing newline

    Raises
    ------
    MalformedStructuredInputError
        If ``text`` is not a valid JSON document or is nested too deeply
        to parse or serialize. ``NaN`` and ``Infinity`` are rejected.

    """
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise MalformedStructuredInputError(
            e.msg,
            char_offset=e.pos,
            line=e.lineno,
            column=e.colno,
            original_error=e,
        ) from e
    except ValueError as e:
        raise MalformedStructuredInputError(str(e), original_error=e) from e
    except RecursionError as e:
        raise MalformedStructuredInputError(_TOO_DEEP_MESSAGE, original_error=e) from e

    # the indenting encoder recurses in Python, so it can fail on documents the parser accepted
    try:
        return json.dumps(parsed, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    except RecursionError as e:
        raise MalformedStructuredInputError(_TOO_DEEP_MESSAGE, original_error=e) from e


def normalize(text: str, options: DiffOptions) -> str:
    """Prepare one raw input for comparison.

    Parameters
    ----------
    text : str
        Raw input
    options : DiffOptions
        Comparison options; only ``structured_mode``, ``json_indent`` and
        ``sort_keys`` matter here

    Returns
    -------
    str
        Canonical JSON in structured mode, otherwise ``text`` unchanged

    Raises
    ------
    MalformedStructuredInputError
        In structured mode, when ``text`` does not parse

    """
    if not options.structured_mode:
        return text
    return canonicalize_json(text, indent=options.json_indent, sort_keys=options.sort_keys)


def split_lines(text: str) -> list[str]:
    r"""Split text into lines on ``\r\n``, ``\n`` or ``\r``.

    Empty lines are preserved, and a text ending in a line terminator yields
    a final empty line. The empty string is one empty line.

    Examples
    --------
    >>> split_lines("a\r\nb\n")
    ['a', 'b', '']

    """
    return _LINE_BREAK_RE.split(text)


def fold_whitespace(line: str) -> str:
    """Collapse whitespace runs to one space and trim both ends.

    Parameters
    ----------
    line : str
        Text to normalize

    Returns
    -------
    str
        Normalized text with consistent whitespace

    """
    return _WHITESPACE_RUN_RE.sub(" ", line).strip()
