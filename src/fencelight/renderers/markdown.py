#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/renderers/markdown.py
"""Markdown to HTML conversion with highlighted code blocks.

The document pipeline itself is mistune's; fencelight only replaces the
rendering of code blocks.

Examples
--------
    >>> from fencelight.renderers.markdown import render_markdown
    >>> html = render_markdown("```python {hl_lines=[1]}\\nprint('hi')\\n```\\n")

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional

from fencelight.constants import DEPS_MARKDOWN
from fencelight.options import HighlightingOptions
from fencelight.utils.decorators import requires_dependencies

if TYPE_CHECKING:
    import mistune

logger = logging.getLogger(__name__)


@requires_dependencies("markdown", DEPS_MARKDOWN)
def create_markdown(
    options: Optional[HighlightingOptions] = None,
    plugins: Optional[Iterable[Any]] = None,
    escape: bool = True,
) -> mistune.Markdown:
    """Create a mistune Markdown instance that highlights code blocks.

    Parameters
    ----------
    options : HighlightingOptions or None, default = None
        Highlighting options shared by every code block
    plugins : iterable or None, default = None
        mistune plugins to enable (e.g. ``["table", "strikethrough"]``)
    escape : bool, default True
        Escape raw HTML in the document

    Returns
    -------
    mistune.Markdown
        Callable converting markdown text to HTML

    Raises
    ------
    DependencyError
        If mistune is not installed

    """
    import mistune

    from fencelight.renderers.mistune_renderer import HighlightingHTMLRenderer

    renderer = HighlightingHTMLRenderer(options, escape=escape)
    return mistune.create_markdown(escape=escape, renderer=renderer, plugins=list(plugins or []))


def render_markdown(
    text: str,
    options: Optional[HighlightingOptions] = None,
    plugins: Optional[Iterable[str]] = None,
) -> str:
    """Convert markdown text to HTML with highlighted code blocks.

    Parameters
    ----------
    text : str
        Markdown source
    options : HighlightingOptions or None, default = None
        Highlighting options
    plugins : iterable of str or None, default = None
        mistune plugins to enable

    Returns
    -------
    str
        HTML fragment

    """
    markdown = create_markdown(options, plugins=plugins)
    html = markdown(text)
    logger.debug("Rendered %d characters of markdown", len(text))
    return str(html)
