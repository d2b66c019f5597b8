#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/highlighting/formatter.py
"""Formatter options and access to the pygments registries.

Formatter options are ordered ``(name, value)`` pairs that map onto
:class:`pygments.formatters.HtmlFormatter` keyword arguments. The helper
functions below build them so callers do not need to remember the
formatter's option names::

    >>> options = HighlightingOptions(format_options=(with_classes(), with_line_numbers()))

"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Optional, Sequence

from pygments.formatters.html import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound

from fencelight.constants import (
    DEFAULT_CSS_CLASS,
    FALLBACK_STYLE,
    LANGUAGE_CLASS_PREFIX,
    FormatOption,
    LineNumbersMode,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Formatter option helpers
# =============================================================================


def with_classes(enabled: bool = True) -> FormatOption:
    """Emit CSS classes instead of inline styles."""
    return ("noclasses", not enabled)


def highlight_lines(ranges: Iterable[Sequence[int]]) -> FormatOption:
    """Emphasize the given 1-based, inclusive ``(lo, hi)`` line ranges.

    Line numbers are relative to the first line of the block, independent of
    any line number offset. A range with ``lo > hi`` covers no lines.
    """
    lines: list[int] = []
    for lo, hi in ranges:
        lines.extend(range(lo, hi + 1))
    return ("hl_lines", lines)


def prevent_surrounding_pre(enabled: bool = True) -> FormatOption:
    """Suppress the ``<div>``/``<pre>``/``<code>`` container around the tokens."""
    return ("nowrap", enabled)


def with_line_numbers(mode: LineNumbersMode = "inline") -> FormatOption:
    """Render line numbers inline with the code."""
    return ("linenos", mode)


def line_numbers_in_table() -> FormatOption:
    """Render line numbers in a separate table column."""
    return ("linenos", "table")


def base_line_number(number: int) -> FormatOption:
    """Start line numbering at ``number``."""
    return ("linenostart", number)


def with_css_class(css_class: str) -> FormatOption:
    """Set the class of the wrapping ``<div>``, also used to scope CSS rules."""
    return ("cssclass", css_class)


def tab_width(width: int) -> FormatOption:
    """Expand tabs to ``width`` spaces."""
    return ("tabsize", width)


def merge_format_options(options: Iterable[FormatOption]) -> dict[str, Any]:
    """Fold ordered options into keyword arguments; later entries win."""
    merged: dict[str, Any] = {}
    for name, value in options:
        merged[name] = value
    return merged


# =============================================================================
# Formatter
# =============================================================================


class CodeHtmlFormatter(HtmlFormatter):
    """HTML formatter that annotates the ``<code>`` element with the language.

    Parameters
    ----------
    language : str or None, default = None
        Language name written as ``class="language-<name>"`` on the code
        element when the ``wrapcode`` option is enabled
    **options
        Keyword options understood by :class:`HtmlFormatter`

    """

    def __init__(self, language: Optional[str] = None, **options: Any):
        """Initialize the formatter with a language annotation."""
        super().__init__(**options)
        self.language = language

    def _wrap_code(self, inner: Iterator[tuple[int, str]]) -> Iterator[tuple[int, str]]:
        if self.language:
            yield 0, f'<code class="{LANGUAGE_CLASS_PREFIX}{self.language}">'
        else:
            yield 0, "<code>"
        yield from inner
        yield 0, "</code>"

    def css_selector(self) -> str:
        """Return the selector that scopes this formatter's CSS rules."""
        return f".{self.cssclass}" if self.cssclass else f".{DEFAULT_CSS_CLASS}"


# =============================================================================
# Registry lookups
# =============================================================================


def lookup_lexer(language: Optional[str]) -> Optional[Lexer]:
    """Return a lexer registered under exactly ``language``, or None.

    The lexer registry matches aliases without regard to case; a lexer is
    only returned when ``language`` is one of its aliases verbatim.
    Lexers keep leading and trailing newlines so formatter line numbers
    match the source lines.
    """
    if not language:
        return None
    try:
        lexer = get_lexer_by_name(language, stripnl=False)
    except ClassNotFound:
        logger.debug("No lexer registered for %r", language)
        return None
    if language not in lexer.aliases:
        logger.debug("Lexer alias match for %r is not exact, ignoring %s", language, lexer.name)
        return None
    return lexer


def guess_language_lexer(text: str) -> Optional[Lexer]:
    """Guess a lexer from the block content, or return None."""
    if not text.strip():
        return None
    try:
        lexer = guess_lexer(text, stripnl=False)
    except ClassNotFound:
        return None
    if not lexer.aliases:
        return None
    return lexer


def style_exists(name: Optional[str]) -> bool:
    """Return True if ``name`` is a registered style."""
    if not name:
        return False
    try:
        get_style_by_name(name)
    except ClassNotFound:
        return False
    return True


def lookup_style(name: Optional[str]) -> tuple[str, type[Style]]:
    """Return ``(name, style)``, substituting the fallback style for unknown names."""
    if name:
        try:
            return name, get_style_by_name(name)
        except ClassNotFound:
            logger.debug("Unknown highlighting style %r, using %r", name, FALLBACK_STYLE)
    return FALLBACK_STYLE, get_style_by_name(FALLBACK_STYLE)


def available_styles() -> list[str]:
    """Return the sorted names of all registered styles."""
    return sorted(get_all_styles())
