#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/renderers/json.py
"""JSON renderer for structured output.

The payload carries the hunks with their line numbers, the statistics and
the plain-text form, so that programmatic consumers do not need to parse
either the markup or the unified text.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Sequence

from codediff.diff.hunks import Hunk
from codediff.diff.stats import DiffStats, compute_stats, to_plain_text
from codediff.exceptions import OutputWriteError
from codediff.options import DiffOptions


class JsonDiffRenderer:
    """Render hunks as structured JSON.

    Parameters
    ----------
    pretty_print : bool, default = True
        If True, format JSON with indentation
    indent : int, default = 2
        Number of spaces for indentation (if pretty_print=True)
    include_equal : bool, default = True
        If False, only non-equal hunks are listed

    """

    def __init__(
        self,
        pretty_print: bool = True,
        indent: int = 2,
        include_equal: bool = True,
    ):
        """Initialize the JSON diff renderer."""
        self.pretty_print = pretty_print
        self.indent = indent
        self.include_equal = include_equal

    def build(
        self,
        hunks: Sequence[Hunk],
        stats: DiffStats | None = None,
        options: DiffOptions | None = None,
    ) -> Dict[str, Any]:
        """Build the JSON-ready payload.

        Returns
        -------
        dict
            Keys ``type``, ``stats``, ``hunks``, ``plainText`` and, when
            options are given, ``options``

        """
        if stats is None:
            stats = compute_stats(hunks)

        listed = hunks if self.include_equal else [h for h in hunks if h.is_change]
        data: Dict[str, Any] = {
            "type": "codediff",
            "stats": stats.to_dict(),
            "hunks": [hunk.to_dict() for hunk in listed],
            "plainText": to_plain_text(hunks),
        }
        if options is not None:
            data["options"] = asdict(options)
        return data

    def render(
        self,
        hunks: Sequence[Hunk],
        stats: DiffStats | None = None,
        options: DiffOptions | None = None,
    ) -> str:
        """Render hunks to a JSON string.

        Parameters
        ----------
        hunks : Sequence[Hunk]
            Consolidated hunks
        stats : DiffStats, optional
            Precomputed statistics
        options : DiffOptions, optional
            Options to echo into the payload

        Returns
        -------
        str
            JSON-formatted diff output

        """
        data = self.build(hunks, stats, options)
        if self.pretty_print:
            return json.dumps(data, indent=self.indent, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)


def render_to_file(hunks: Sequence[Hunk], output_path: str | Path, **kwargs: Any) -> None:
    """Render hunks to a JSON file.

    Parameters
    ----------
    hunks : Sequence[Hunk]
        Hunks to serialize
    output_path : str or Path
        Destination path for the generated JSON file.
    **kwargs
        Additional keyword arguments forwarded to :class:`JsonDiffRenderer`.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    renderer = JsonDiffRenderer(**kwargs)
    json_output = renderer.render(hunks)

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(json_output)
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e
