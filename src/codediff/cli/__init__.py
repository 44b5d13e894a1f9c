#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/codediff/cli/__init__.py
"""Command-line interface for codediff.

Compares two text files (either may be ``-`` for stdin) and prints the
unified plain-text form, HTML, or JSON. Exit status follows ``diff(1)``:
0 when the inputs match, 1 when they differ, 2 on error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from codediff.api import ComparisonResult, compare_texts, export_filename, read_text_file
from codediff.cli.config import apply_defaults, load_config_with_priority
from codediff.cli.output import check_rich_available, render_rich, should_use_color
from codediff.constants import DEFAULT_CONTEXT_WINDOW
from codediff.diff.renderers.html import HtmlDiffRenderer
from codediff.diff.renderers.json import JsonDiffRenderer
from codediff.diff.renderers.unified import UnifiedDiffRenderer
from codediff.exceptions import CodediffError, OutputWriteError
from codediff.logging_utils import configure_logging
from codediff.options import DiffOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_DIFFERENCES = 1
EXIT_ERROR = 2


def _get_version() -> str:
    """Get the version of the codediff package."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("codediff")
    except PackageNotFoundError:
        from codediff import __version__

        return __version__


def _validate_context_lines(value: str) -> int:
    """Validate the context window is a non-negative integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a non-negative integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"context lines must be an integer, got '{value}'") from e

    if ivalue < 0:
        raise argparse.ArgumentTypeError(f"context lines must be non-negative, got {ivalue}")

    return ivalue


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="codediff",
        description="Compare two texts line by line, highlighting changed words",
    )

    parser.add_argument("left", help="Original file (use '-' for stdin)")
    parser.add_argument("right", help="Modified file (use '-' for stdin)")

    parser.add_argument(
        "--format",
        "-f",
        choices=["unified", "html", "json"],
        default="unified",
        help="Output format: unified (default, '  '/'- '/'+ ' prefixed lines), html, json",
    )
    parser.add_argument(
        "--view",
        choices=["side-by-side", "inline"],
        default="inline",
        help="HTML layout (default: inline)",
    )
    parser.add_argument("--output", "-o", help="Write to file, or into a directory as codediff-<time>.diff")
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize unified output: auto (default, if terminal), always, never",
    )
    parser.add_argument("--rich", action="store_true", help="Draw a colored table with Rich when available")

    parser.add_argument(
        "--ignore-whitespace",
        "-w",
        action="store_true",
        help="Ignore whitespace changes (like diff -w)",
    )
    parser.add_argument(
        "--json",
        "--structured",
        dest="structured",
        action="store_true",
        help="Parse both inputs as JSON and compare the canonical forms",
    )
    parser.add_argument("--sort-keys", action="store_true", help="Sort JSON object keys when canonicalizing")
    parser.add_argument(
        "--context",
        "-C",
        type=_validate_context_lines,
        default=None,
        help=(
            "Unchanged lines kept around each change; others are collapsed "
            f"(default: every line in unified output, {DEFAULT_CONTEXT_WINDOW} in html and --rich)"
        ),
    )
    parser.add_argument("--standalone", action="store_true", help="Emit a complete HTML page with styles")

    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json)")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--version", action="version", version=f"codediff {_get_version()}")

    return parser


def _read_input(source: str) -> str:
    """Read a file, or stdin when ``source`` is ``-``."""
    if source == "-":
        return sys.stdin.read()

    return read_text_file(Path(source), "utf-8")


def _options_from_args(parsed: argparse.Namespace) -> DiffOptions:
    return DiffOptions(
        ignore_whitespace=parsed.ignore_whitespace,
        structured_mode=parsed.structured,
        view_mode="side_by_side" if parsed.view == "side-by-side" else "inline",
        context_window=DEFAULT_CONTEXT_WINDOW if parsed.context is None else parsed.context,
        sort_keys=parsed.sort_keys,
    )


def _render(result: ComparisonResult, parsed: argparse.Namespace) -> str:
    if parsed.format == "html":
        return HtmlDiffRenderer(standalone=parsed.standalone).render(result.view, result.stats)
    if parsed.format == "json":
        return JsonDiffRenderer().render(result.hunks, result.stats, result.options)
    return result.plain_text


def _resolve_output_path(output: str) -> Path:
    path = Path(output)
    if path.is_dir():
        return path / export_filename()
    return path


def _write_output(content: str, output: str) -> Path:
    path = _resolve_output_path(output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(str(path), original_error=e) from e
    return path


def main(args: Optional[list[str]] = None) -> int:
    """Run the codediff command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments, ``sys.argv[1:]`` by default

    Returns
    -------
    int
        0 when the inputs match, 1 when they differ, 2 on error

    """
    parser = create_parser()

    try:
        pre_args, _ = parser.parse_known_args(args)
    except SystemExit as e:
        return EXIT_SUCCESS if e.code in (0, None) else EXIT_ERROR

    try:
        config = load_config_with_priority(getattr(pre_args, "config", None))
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    apply_defaults(parser, config)

    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        if e.code in (0, None):
            return EXIT_SUCCESS
        return EXIT_ERROR

    configure_logging(parsed.log_level, log_file=parsed.log_file)

    if parsed.left == "-" and parsed.right == "-":
        print("Error: Cannot read both original and modified from stdin", file=sys.stderr)
        return EXIT_ERROR

    try:
        left_text = _read_input(parsed.left)
        right_text = _read_input(parsed.right)
        result = compare_texts(left_text, right_text, _options_from_args(parsed))
    except CodediffError as e:
        describe = getattr(e, "describe", None)
        print(f"Error: {describe() if callable(describe) else e.message}", file=sys.stderr)
        return EXIT_ERROR

    exit_code = EXIT_DIFFERENCES if result.has_changes else EXIT_SUCCESS

    if parsed.output:
        try:
            written = _write_output(_render(result, parsed), parsed.output)
        except OutputWriteError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return EXIT_ERROR
        print(f"Diff written to: {written}", file=sys.stderr)
    elif parsed.rich and parsed.format == "unified" and check_rich_available():
        render_rich(result)
    elif parsed.format == "unified":
        renderer = UnifiedDiffRenderer(use_color=should_use_color(parsed), context_window=parsed.context)
        for line in renderer.render(result.hunks):
            print(line)
    else:
        print(_render(result, parsed))

    if parsed.rich and not check_rich_available():
        logger.warning("--rich requested but Rich is not installed; install with: pip install codediff[rich]")

    print(result.stats.summary() if result.has_changes else "No differences found.", file=sys.stderr)
    return exit_code


__all__ = ["create_parser", "main", "EXIT_SUCCESS", "EXIT_DIFFERENCES", "EXIT_ERROR"]
