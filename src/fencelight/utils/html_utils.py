#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML helpers shared by the fallback renderer and host integrations."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Callable

from fencelight.constants import LANGUAGE_CLASS_PREFIX

TextEscaper = Callable[[str], str]


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def language_class(language: str, escape: TextEscaper = escape_html) -> str:
    """Return the ``class`` attribute annotating a block with its language."""
    return f' class="{LANGUAGE_CLASS_PREFIX}{escape(language)}"'
