#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/codediff/diff/renderers/html.py
"""HTML serialization of the view model.

By default the renderer emits a fragment (a table, or the "no differences"
placeholder) meant to be embedded by a host page. With ``standalone=True``
it wraps the fragment in a complete document with a summary block and,
optionally, inline CSS. Row text in the view model is already escaped; only
labels produced here are escaped on the way out.
"""

from __future__ import annotations

from html import escape
from io import StringIO
from pathlib import Path
from typing import Any

from codediff.constants import NO_DIFFERENCES_MESSAGE
from codediff.diff.renderers.view import CollapsedRun, InlineRow, SideBySideRow, ViewModel
from codediff.diff.stats import DiffStats
from codediff.exceptions import OutputWriteError, RenderingError

_ROW_CLASSES = {
    "equal": "line-equal",
    "removed": "line-removed",
    "added": "line-added",
    "changed": "line-changed",
}


def _number(value: int | None) -> str:
    return "" if value is None else str(value)


class HtmlDiffRenderer:
    """Render a :class:`ViewModel` as HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the table in a full HTML document
    inline_styles : bool, default True
        Include CSS in standalone documents
    title : str, default "Diff"
        Document title for standalone output

    Examples
    --------
    >>> from codediff import compare_texts
    >>> result = compare_texts("a\\nb", "a\\nc")
    >>> page = HtmlDiffRenderer(standalone=True).render(result.view, result.stats)

    """

    def __init__(
        self,
        standalone: bool = False,
        inline_styles: bool = True,
        title: str = "Diff",
    ):
        """Initialize the HTML diff renderer."""
        self.standalone = standalone
        self.inline_styles = inline_styles
        self.title = title

    def render(self, view: ViewModel, stats: DiffStats | None = None) -> str:
        """Render the view model.

        Parameters
        ----------
        view : ViewModel
            Rows to draw
        stats : DiffStats, optional
            Counts shown in the summary of standalone documents

        Returns
        -------
        str
            HTML fragment, or a full document when ``standalone`` is set

        """
        output = StringIO()
        if self.standalone:
            self._write_html_prefix(output)
            if stats is not None:
                self._write_summary(stats, output)

        if view.identical:
            output.write(f'<div class="diff-empty">{escape(NO_DIFFERENCES_MESSAGE)}</div>')
        elif view.view_mode == "side_by_side":
            self._write_side_by_side(view, output)
        else:
            self._write_inline(view, output)

        if self.standalone:
            self._write_html_suffix(output)
        return output.getvalue()

    def _write_side_by_side(self, view: ViewModel, output: StringIO) -> None:
        output.write('<table class="diff-table" role="table"><colgroup>')
        output.write("<col/>" * 5)
        output.write("</colgroup><tbody>")
        for row in view.rows:
            if isinstance(row, CollapsedRun):
                output.write(f'<tr class="diff-separator"><td colspan="5">{escape(row.label)}</td></tr>')
                continue
            if not isinstance(row, SideBySideRow):
                raise RenderingError(f"Unexpected row in side-by-side view: {type(row).__name__}", "html")
            output.write(f'\n<tr class="diff-row {_ROW_CLASSES[row.kind]}" role="row">')
            output.write(f'<td class="gutter-cell" role="cell">{_number(row.left_number)}</td>')
            output.write(f'<td class="diff-cell" role="cell">{row.left_html}</td>')
            output.write('<td class="diff-divider" role="presentation"></td>')
            output.write(f'<td class="gutter-cell" role="cell">{_number(row.right_number)}</td>')
            output.write(f'<td class="diff-cell" role="cell">{row.right_html}</td>')
            output.write("</tr>")
        output.write("</tbody></table>")

    def _write_inline(self, view: ViewModel, output: StringIO) -> None:
        output.write('<table class="inline-table" role="table"><colgroup>')
        output.write("<col/>" * 4)
        output.write("</colgroup><tbody>")
        for row in view.rows:
            if isinstance(row, CollapsedRun):
                output.write(f'<tr class="diff-separator"><td colspan="4">{escape(row.label)}</td></tr>')
                continue
            if not isinstance(row, InlineRow):
                raise RenderingError(f"Unexpected row in inline view: {type(row).__name__}", "html")
            output.write(f'\n<tr class="inline-{row.kind}">')
            output.write(f'<td class="inline-gutter">{_number(row.left_number)}</td>')
            output.write(f'<td class="inline-gutter">{_number(row.right_number)}</td>')
            output.write(f'<td class="inline-sign">{row.sign}</td>')
            output.write(f'<td class="inline-code">{row.html}</td>')
            output.write("</tr>")
        output.write("</tbody></table>")

    def _write_summary(self, stats: DiffStats, output: StringIO) -> None:
        output.write("<div class='diff-summary'>\n")
        output.write("  <h2>Summary</h2>\n")
        output.write("  <dl>\n")
        output.write(f"    <dt>Lines added</dt><dd>{stats.added}</dd>\n")
        output.write(f"    <dt>Lines removed</dt><dd>{stats.removed}</dd>\n")
        output.write(f"    <dt>Lines changed</dt><dd>{stats.changed}</dd>\n")
        output.write("  </dl>\n")
        output.write("</div>\n")

    def _write_html_prefix(self, output: StringIO) -> None:
        output.write("<!DOCTYPE html>\n")
        output.write("<html lang='en'>\n")
        output.write("<head>\n")
        output.write("  <meta charset='UTF-8'>\n")
        output.write("  <meta name='viewport' content='width=device-width, initial-scale=1.0'>\n")
        output.write(f"  <title>{escape(self.title)}</title>\n")

        if self.inline_styles:
            output.write("  <style>\n")
            output.write(self._get_css())
            output.write("  </style>\n")

        output.write("</head>\n")
        output.write("<body>\n")
        output.write(f"<h1>{escape(self.title)}</h1>\n")

    def _write_html_suffix(self, output: StringIO) -> None:
        output.write("\n</body>\n")
        output.write("</html>\n")

    def _get_css(self) -> str:
        return """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
            color: #24292f;
            margin: 0 auto;
            max-width: 1400px;
            padding: 20px;
        }
        .diff-summary dl {
            display: grid;
            grid-template-columns: max-content 1fr;
            gap: 4px 16px;
        }
        table {
            border-collapse: collapse;
            width: 100%;
            font-family: 'Courier New', Courier, monospace;
            font-size: 13px;
        }
        td {
            padding: 1px 8px;
            vertical-align: top;
            white-space: pre-wrap;
            word-break: break-word;
        }
        .gutter-cell, .inline-gutter {
            color: #7a8699;
            text-align: right;
            width: 1%;
            user-select: none;
        }
        .inline-sign {
            width: 1%;
            user-select: none;
        }
        .diff-divider {
            width: 1px;
            padding: 0;
            background-color: #d0d7de;
        }
        .line-added td.diff-cell:last-child, .inline-added {
            background-color: #e6ffed;
        }
        .line-removed td.diff-cell:nth-child(2), .inline-removed {
            background-color: #ffeef0;
        }
        .line-changed td.diff-cell {
            background-color: #fff8c5;
        }
        .word-added {
            background-color: #acf2bd;
        }
        .word-removed {
            background-color: #fdb8c0;
            text-decoration: line-through;
        }
        .diff-separator td {
            text-align: center;
            color: #5b6b7f;
            background-color: #f6f8fa;
            font-style: italic;
        }
        .diff-empty {
            padding: 20px;
            text-align: center;
            color: #57606a;
        }
        """


def render_to_file(view: ViewModel, output_path: str | Path, stats: DiffStats | None = None, **kwargs: Any) -> None:
    """Render a view model to a standalone HTML file.

    Parameters
    ----------
    view : ViewModel
        Rows to draw
    output_path : str or Path
        Destination path for the generated HTML file.
    stats : DiffStats, optional
        Counts for the summary block
    **kwargs
        Additional keyword arguments forwarded to :class:`HtmlDiffRenderer`.

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    kwargs.setdefault("standalone", True)
    renderer = HtmlDiffRenderer(**kwargs)
    html = renderer.render(view, stats)

    try:
        Path(output_path).write_text(html, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e
