#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Plain rendering for blocks that cannot be highlighted."""

from __future__ import annotations

from typing import IO, Iterable

from fencelight.nodes import CodeBlockContext
from fencelight.options import HighlightingOptions
from fencelight.utils.html_utils import TextEscaper, escape_html, language_class


def render_plain(
    writer: IO[str],
    lines: Iterable[str],
    context: CodeBlockContext,
    options: HighlightingOptions,
    escape: TextEscaper = escape_html,
) -> None:
    """Write a block verbatim, escaped, inside its wrapper markup.

    Without a wrapper renderer the block becomes
    ``<pre><code class="language-<lang>">...</code></pre>``, the class being
    omitted when the block has no language.

    Parameters
    ----------
    writer : IO[str]
        Output sink of the host pipeline
    lines : iterable of str
        Raw block lines
    context : CodeBlockContext
        Block language and attributes; ``highlighted`` is False
    options : HighlightingOptions
        Renderer options
    escape : callable, default escape_html
        The host's text escaping function

    """
    wrapper = options.wrapper_renderer
    if wrapper is not None:
        wrapper.render(writer, context, True)
    else:
        annotation = language_class(context.language, escape) if context.language else ""
        writer.write(f"<pre><code{annotation}>")

    for line in lines:
        writer.write(escape(line))

    if wrapper is not None:
        wrapper.render(writer, context, False)
    else:
        writer.write("</code></pre>\n")
