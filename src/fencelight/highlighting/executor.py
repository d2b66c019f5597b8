#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/highlighting/executor.py
"""Tokenize and format one code block.

:func:`highlight_block` either writes the complete highlighted block and
returns True, or writes nothing and returns False so the caller can fall
back to plain output. A missing lexer, an opt-out, a tokenizer failure
and a formatter failure all take the second route. Only failures writing
to the output or CSS sink propagate.

"""

from __future__ import annotations

import logging
from io import StringIO
from typing import IO, Optional

from pygments.lexer import Lexer

from fencelight.constants import FormatOption
from fencelight.exceptions import OutputWriteError
from fencelight.highlighting.attributes import HighlightAttributes
from fencelight.highlighting.config import HighlightConfig
from fencelight.highlighting.formatter import (
    CodeHtmlFormatter,
    guess_language_lexer,
    lookup_lexer,
    merge_format_options,
    prevent_surrounding_pre,
)
from fencelight.nodes import CodeBlockContext
from fencelight.options import HighlightingOptions

logger = logging.getLogger(__name__)


def _select_lexer(
    language: Optional[str], text: str, options: HighlightingOptions
) -> tuple[Optional[str], Optional[Lexer]]:
    lexer = lookup_lexer(language)
    if lexer is None and not language and options.guess_language:
        lexer = guess_language_lexer(text)
        if lexer is not None:
            language = lexer.aliases[0]
            logger.debug("Guessed language %r for block without a language", language)
    return language, lexer


def highlight_block(
    writer: IO[str],
    text: str,
    attributes: HighlightAttributes,
    config: HighlightConfig,
    options: HighlightingOptions,
) -> bool:
    """Write the highlighted form of a block, if highlighting is available.

    Parameters
    ----------
    writer : IO[str]
        Output sink of the host pipeline
    text : str
        Full block text, newline-preserving
    attributes : HighlightAttributes
        Language and attributes resolved for the block
    config : HighlightConfig
        Per-block highlighting configuration
    options : HighlightingOptions
        Renderer options (wrapper renderer, CSS writer, hooks)

    Returns
    -------
    bool
        True if the block was written highlighted, False if nothing was
        written and the plain fallback should be used

    Raises
    ------
    OutputWriteError
        If the CSS sink cannot be written

    """
    if config.nohl:
        logger.debug("Highlighting disabled for block by attribute")
        return False

    language, lexer = _select_lexer(attributes.language, text, options)
    if lexer is None:
        return False

    try:
        # Materialize so tokenizer failures surface before anything is written
        tokens = list(lexer.get_tokens(text))
    except Exception as e:
        logger.debug("Tokenizing %r block failed, rendering plain: %s", language, e)
        return False

    context = CodeBlockContext(language=language, attributes=attributes.attributes, highlighted=True)

    format_options: list[FormatOption] = list(config.format_options)
    if options.code_block_options is not None:
        format_options.extend(options.code_block_options(context) or ())
    if options.wrapper_renderer is not None:
        format_options.append(prevent_surrounding_pre())

    kwargs = merge_format_options(format_options)
    kwargs["style"] = config.style

    buffer = StringIO()
    try:
        formatter = CodeHtmlFormatter(language=language, **kwargs)
        formatter.format(tokens, buffer)
    except Exception as e:
        logger.debug("Formatting %r block failed, rendering plain: %s", language, e)
        return False

    wrapper = options.wrapper_renderer
    if wrapper is not None:
        wrapper.render(writer, context, True)
    writer.write(buffer.getvalue())
    if wrapper is not None:
        wrapper.render(writer, context, False)

    if options.css_writer is not None:
        try:
            options.css_writer.write(formatter.get_style_defs(formatter.css_selector()) + "\n")
        except OSError as e:
            raise OutputWriteError("css", original_error=e) from e

    return True
