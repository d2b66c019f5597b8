#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for fencelight.

Converts a markdown document to an HTML fragment with highlighted fenced
code blocks, optionally writing the style sheet for the chosen style.

Configuration files are discovered as described in
:mod:`fencelight.cli.config`; command-line flags override them.

Examples
--------
Highlight with inline styles::

    $ fencelight README.md --out README.html

Use CSS classes and write the style sheet separately::

    $ fencelight README.md --classes --style monokai --css-out highlight.css

List available styles::

    $ fencelight --list-styles

"""

from __future__ import annotations

import argparse
import logging
import sys
from io import StringIO
from pathlib import Path
from typing import Any, Optional, Sequence

from fencelight.cli.config import discover_config_file, load_config_file
from fencelight.exceptions import (
    ConfigError,
    DependencyError,
    FencelightError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from fencelight.logging_utils import configure_logging
from fencelight.options import HighlightingOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, ConfigError)):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, OSError):
        return EXIT_FILE_ERROR
    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``fencelight`` command."""
    parser = argparse.ArgumentParser(
        prog="fencelight",
        description="Render markdown to HTML with syntax-highlighted fenced code blocks.",
    )
    parser.add_argument("input", nargs="?", help="Markdown file to convert, or '-' for stdin")
    parser.add_argument("-o", "--out", help="Write HTML to this file instead of stdout")
    parser.add_argument(
        "--style", help=f"{HighlightingOptions.field_help('style')} (unknown names fall back to 'default')"
    )
    parser.add_argument(
        "--classes", action="store_true", default=None, help="Emit CSS classes instead of inline styles"
    )
    parser.add_argument("--line-numbers", choices=["inline", "table"], help="Show line numbers")
    parser.add_argument(
        "--guess-language",
        action="store_true",
        default=None,
        help=HighlightingOptions.field_help("guess_language"),
    )
    parser.add_argument("--css-out", help="Write the style sheet for highlighted blocks to this file")
    parser.add_argument(
        "--wrap-div",
        action="store_true",
        help='Wrap blocks in <div class="highlight"><pre><code class="language-..."> markup',
    )
    parser.add_argument("--config", help="Configuration file (default: discovered automatically)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument("--list-styles", action="store_true", help="List available styles and exit")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log output to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    return parser


def _load_config(args: argparse.Namespace) -> dict[str, Any]:
    if args.no_config:
        return {}
    config_path = Path(args.config) if args.config else discover_config_file()
    if config_path is None:
        return {}
    logger.info("Using configuration file: %s", config_path)
    return load_config_file(config_path)


def _merge_cli_arguments(config: dict[str, Any], args: argparse.Namespace) -> dict[str, Any]:
    merged = dict(config)
    if args.style is not None:
        merged["style"] = args.style
    if args.classes is not None:
        merged["classes"] = args.classes
    if args.line_numbers is not None:
        merged["line_numbers"] = args.line_numbers
    if args.guess_language is not None:
        merged["guess_language"] = args.guess_language
    return merged


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def run(args: argparse.Namespace) -> int:
    """Run a conversion for parsed arguments and return the exit code."""
    from fencelight.highlighting.formatter import available_styles
    from fencelight.highlighting.wrappers import DivWrapperRenderer
    from fencelight.renderers.markdown import render_markdown

    if args.list_styles:
        for name in available_styles():
            print(name)
        return EXIT_SUCCESS

    if not args.input:
        print("Error: an input file is required (use '-' for stdin)", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    config = _merge_cli_arguments(_load_config(args), args)
    css_buffer = StringIO() if args.css_out else None
    overrides: dict[str, Any] = {"css_writer": css_buffer}
    if args.wrap_div:
        overrides["wrapper_renderer"] = DivWrapperRenderer()
    options = HighlightingOptions.from_mapping(config, **overrides)

    html = render_markdown(_read_input(args.input), options)

    if args.out:
        try:
            Path(args.out).write_text(html, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError("output", original_error=e) from e
        logger.info("Wrote %s", args.out)
    else:
        sys.stdout.write(html)

    if css_buffer is not None:
        try:
            Path(args.css_out).write_text(css_buffer.getvalue(), encoding="utf-8")
        except OSError as e:
            raise OutputWriteError("css", original_error=e) from e
        logger.info("Wrote style sheet %s", args.css_out)

    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``fencelight`` command.

    Parameters
    ----------
    argv : sequence of str, optional
        Command-line arguments, defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    try:
        return run(args)
    except (FencelightError, OSError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
