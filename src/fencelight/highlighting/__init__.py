#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Per-block highlighting pipeline.

The pipeline runs in four steps:

1. :func:`resolve_attributes` extracts the language and attributes
2. :func:`build_highlight_config` resolves style, line ranges and options
3. :func:`highlight_block` tokenizes and formats the block
4. :func:`render_plain` writes the block verbatim when step 3 cannot

"""

from fencelight.highlighting.attributes import HighlightAttributes, parse_attribute_block, resolve_attributes
from fencelight.highlighting.config import HighlightConfig, LineRange, build_highlight_config, parse_line_ranges
from fencelight.highlighting.executor import highlight_block
from fencelight.highlighting.fallback import render_plain
from fencelight.highlighting.formatter import (
    CodeHtmlFormatter,
    available_styles,
    base_line_number,
    highlight_lines,
    line_numbers_in_table,
    lookup_lexer,
    lookup_style,
    prevent_surrounding_pre,
    style_exists,
    tab_width,
    with_classes,
    with_css_class,
    with_line_numbers,
)
from fencelight.highlighting.wrappers import DivWrapperRenderer, WrapperRenderer

__all__ = [
    "CodeHtmlFormatter",
    "DivWrapperRenderer",
    "HighlightAttributes",
    "HighlightConfig",
    "LineRange",
    "WrapperRenderer",
    "available_styles",
    "base_line_number",
    "build_highlight_config",
    "highlight_block",
    "highlight_lines",
    "line_numbers_in_table",
    "lookup_lexer",
    "lookup_style",
    "parse_attribute_block",
    "parse_line_ranges",
    "prevent_surrounding_pre",
    "render_plain",
    "resolve_attributes",
    "style_exists",
    "tab_width",
    "with_classes",
    "with_css_class",
    "with_line_numbers",
]
