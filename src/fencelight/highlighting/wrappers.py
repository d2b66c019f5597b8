#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/highlighting/wrappers.py
"""Wrapper renderers controlling the markup around each code block.

A wrapper renderer is called exactly twice per block, once with
``entering=True`` before the content and once with ``entering=False``
after it, on both the highlighted and the plain path. While a wrapper is
configured the formatter writes no container of its own.

Example
-------
    >>> class FigureWrapper(WrapperRenderer):
    ...     def render(self, writer, context, entering):
    ...         writer.write("<figure><pre><code>" if entering else "</code></pre></figure>\\n")

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from html import escape
from typing import IO

from fencelight.constants import DEFAULT_CSS_CLASS, LANGUAGE_CLASS_PREFIX
from fencelight.nodes import CodeBlockContext


class WrapperRenderer(ABC):
    """Strategy that writes the markup surrounding a code block."""

    @abstractmethod
    def render(self, writer: IO[str], context: CodeBlockContext, entering: bool) -> None:
        """Write the opening or closing wrapper markup.

        Parameters
        ----------
        writer : IO[str]
            Output sink of the host pipeline
        context : CodeBlockContext
            Language, attributes and path (highlighted or plain) of the block;
            ``context.language`` is None when the block names no language
        entering : bool
            True before the block content, False after it

        """


class DivWrapperRenderer(WrapperRenderer):
    """Wrap blocks in ``<div class="highlight"><pre><code ...>``.

    Blocks with a language get ``class="language-<lang>"`` and
    ``data-lang="<lang>"`` on the code element; blocks without one get a bare
    ``<pre><code>``.

    Parameters
    ----------
    css_class : str, default "highlight"
        Class of the outer ``<div>``
    pre_class : str, default "chroma"
        Class of the ``<pre>`` element

    """

    def __init__(self, css_class: str = DEFAULT_CSS_CLASS, pre_class: str = "chroma"):
        self.css_class = css_class
        self.pre_class = pre_class

    def render(self, writer: IO[str], context: CodeBlockContext, entering: bool) -> None:
        if not context.has_language:
            writer.write("<pre><code>" if entering else "</code></pre>\n")
            return
        if entering:
            language = escape(context.language or "")
            writer.write(
                f'<div class="{escape(self.css_class)}"><pre class="{escape(self.pre_class)}">'
                f'<code class="{LANGUAGE_CLASS_PREFIX}{language}" data-lang="{language}">'
            )
        else:
            writer.write("</code></pre></div>\n")
