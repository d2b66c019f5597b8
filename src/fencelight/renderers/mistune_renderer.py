#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/renderers/mistune_renderer.py
"""mistune HTML renderer with highlighted fenced code blocks.

Importing this module requires mistune. Use the functions in
:mod:`fencelight.renderers.markdown` for a dependency-checked entry point.

"""

from __future__ import annotations

from typing import Any, Optional

import mistune
from mistune.util import escape as mistune_escape

from fencelight.nodes import CodeBlock
from fencelight.options import HighlightingOptions
from fencelight.renderers.code_block import CodeBlockRenderer


class HighlightingHTMLRenderer(mistune.HTMLRenderer):
    """mistune HTML renderer delegating code blocks to :class:`CodeBlockRenderer`.

    Parameters
    ----------
    options : HighlightingOptions or None, default = None
        Highlighting options
    escape : bool, default True
        Escape raw HTML in the document, as in :class:`mistune.HTMLRenderer`
    allow_harmful_protocols : bool or None, default None
        Passed through to :class:`mistune.HTMLRenderer`

    """

    NAME = "html"

    def __init__(
        self,
        options: Optional[HighlightingOptions] = None,
        escape: bool = True,
        allow_harmful_protocols: Optional[bool] = None,
    ):
        super().__init__(escape=escape, allow_harmful_protocols=allow_harmful_protocols)
        self.code_renderer = CodeBlockRenderer(options, escape=mistune_escape)

    def block_code(self, code: str, info: Optional[str] = None, **attrs: Any) -> str:
        """Render a fenced or indented code block.

        Token attributes other than ``info`` (added by plugins) are passed on
        as host-parsed block attributes.
        """
        block = CodeBlock.from_text(code, info=info, attributes=attrs or None)
        return self.code_renderer.render_to_string(block)
