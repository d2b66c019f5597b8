#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/renderers/code_block.py
"""Fenced code block renderer.

:class:`CodeBlockRenderer` is the node renderer a host document pipeline
calls for each fenced code block. It resolves the block's language and
attributes, builds the highlighting configuration, and writes either the
highlighted block or a plain, escaped fallback.

A block that cannot be highlighted for any lookup or configuration reason
never fails the conversion; only errors writing to the output or CSS sink
are raised.

"""

from __future__ import annotations

import logging
from io import StringIO
from typing import IO, Optional

from fencelight.exceptions import InvalidOptionsError, OutputWriteError
from fencelight.highlighting.attributes import resolve_attributes
from fencelight.highlighting.config import build_highlight_config
from fencelight.highlighting.executor import highlight_block
from fencelight.highlighting.fallback import render_plain
from fencelight.nodes import CodeBlock, CodeBlockContext
from fencelight.options import HighlightingOptions
from fencelight.utils.html_utils import TextEscaper, escape_html

logger = logging.getLogger(__name__)


class CodeBlockRenderer:
    """Render fenced code blocks to syntax-highlighted HTML.

    The renderer holds no per-block state, so one instance can be shared by
    every block of a conversion and reused across conversions.

    Parameters
    ----------
    options : HighlightingOptions or None, default = None
        Highlighting options. If None, default options are used.
    escape : callable, default escape_html
        The host's text escaping function, used on the plain fallback path

    Examples
    --------
        >>> from fencelight import CodeBlock, CodeBlockRenderer
        >>> renderer = CodeBlockRenderer()
        >>> html = renderer.render_to_string(CodeBlock.from_text("x = 1\\n", info="python"))

    """

    def __init__(self, options: Optional[HighlightingOptions] = None, escape: TextEscaper = escape_html):
        """Initialize the renderer with options."""
        if options is not None and not isinstance(options, HighlightingOptions):
            raise InvalidOptionsError("code_block", HighlightingOptions, type(options))
        self.options: HighlightingOptions = options or HighlightingOptions()
        self.escape = escape

    def render(self, writer: IO[str], block: CodeBlock) -> None:
        """Render one code block to ``writer``.

        Parameters
        ----------
        writer : IO[str]
            Output sink of the host pipeline
        block : CodeBlock
            Block to render

        Raises
        ------
        OutputWriteError
            If the output or CSS sink cannot be written

        """
        attributes = resolve_attributes(block)
        config = build_highlight_config(self.options, attributes, line_count=len(block.lines))

        try:
            if highlight_block(writer, block.text, attributes, config, self.options):
                return
            logger.debug("Rendering %s block without highlighting", attributes.language or "unlabelled")
            context = CodeBlockContext(language=attributes.language, attributes=attributes.attributes)
            render_plain(writer, block.lines, context, self.options, self.escape)
        except OSError as e:
            raise OutputWriteError("output", original_error=e) from e

    def render_to_string(self, block: CodeBlock) -> str:
        """Render one code block and return the markup.

        Parameters
        ----------
        block : CodeBlock
            Block to render

        Returns
        -------
        str
            Rendered HTML

        """
        buffer = StringIO()
        self.render(buffer, block)
        return buffer.getvalue()
