"""fencelight - Syntax highlighting for fenced code blocks in markdown-to-HTML pipelines.

fencelight renders fenced code blocks as syntax-highlighted HTML using
pygments lexers, styles and formatters. It plugs into a host document
pipeline as the renderer for code block nodes; a ready-made integration
with mistune is included.

Blocks may carry attributes, either parsed by the host or embedded in the
info string as a brace block::

    ```go {hl_lines=["2-3", 5], linenostart=10, hl_style="monokai"}

Recognized attributes are ``hl_lines``, ``hl_style``, ``nohl``,
``linenos`` and ``linenostart``. A block that cannot be highlighted, for
whatever reason, is rendered plain and escaped; it never fails the
conversion.

Requirements
------------
- Python 3.10+
- pygments
- mistune 3 for the markdown integration (``pip install fencelight[markdown]``)

Examples
--------
Render a single block:

    >>> from fencelight import CodeBlock, CodeBlockRenderer
    >>> html = CodeBlockRenderer().render_to_string(CodeBlock.from_text("x = 1\\n", info="python"))

Render a markdown document with classes and an external style sheet:

    >>> import io
    >>> from fencelight import HighlightingOptions, render_markdown, with_classes
    >>> css = io.StringIO()
    >>> options = HighlightingOptions(style="monokai", format_options=(with_classes(),), css_writer=css)
    >>> html = render_markdown("```python\\nprint('hi')\\n```\\n", options)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "fencelight requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from typing import Any, Iterable, Optional

from fencelight.constants import DEFAULT_HIGHLIGHT_STYLE, FALLBACK_STYLE
from fencelight.exceptions import (
    ConfigError,
    DependencyError,
    FencelightError,
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from fencelight.highlighting.formatter import (
    available_styles,
    base_line_number,
    highlight_lines,
    line_numbers_in_table,
    prevent_surrounding_pre,
    tab_width,
    with_classes,
    with_css_class,
    with_line_numbers,
)
from fencelight.highlighting.wrappers import DivWrapperRenderer, WrapperRenderer
from fencelight.nodes import CodeBlock, CodeBlockContext
from fencelight.options import HighlightingOptions
from fencelight.renderers.code_block import CodeBlockRenderer


def render_markdown(
    text: str,
    options: Optional[HighlightingOptions] = None,
    plugins: Optional[Iterable[str]] = None,
) -> str:
    """Convert markdown text to HTML with highlighted code blocks.

    Requires mistune; see :func:`fencelight.renderers.markdown.render_markdown`.
    """
    from fencelight.renderers.markdown import render_markdown as _render_markdown

    return _render_markdown(text, options, plugins=plugins)


def create_markdown(options: Optional[HighlightingOptions] = None, plugins: Optional[Iterable[Any]] = None) -> Any:
    """Create a reusable mistune Markdown instance that highlights code blocks."""
    from fencelight.renderers.markdown import create_markdown as _create_markdown

    return _create_markdown(options, plugins=plugins)


__all__ = [
    "__version__",
    # Rendering
    "CodeBlock",
    "CodeBlockContext",
    "CodeBlockRenderer",
    "create_markdown",
    "render_markdown",
    # Options
    "HighlightingOptions",
    "DEFAULT_HIGHLIGHT_STYLE",
    "FALLBACK_STYLE",
    "available_styles",
    "base_line_number",
    "highlight_lines",
    "line_numbers_in_table",
    "prevent_surrounding_pre",
    "tab_width",
    "with_classes",
    "with_css_class",
    "with_line_numbers",
    # Wrappers
    "WrapperRenderer",
    "DivWrapperRenderer",
    # Exceptions
    "FencelightError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigError",
    "RenderingError",
    "OutputWriteError",
    "DependencyError",
]
