#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/highlighting/attributes.py
"""Language and attribute resolution for fenced code blocks.

Two historical syntaxes supply block attributes:

1. Attributes already parsed by the host and attached to the node.
2. A legacy brace block embedded in the info string, e.g.
   ``go {hl_lines=["2-3"], linenostart=5}``.

Both produce a single :class:`HighlightAttributes` value. Node attributes
always win; the embedded block is only parsed when the node has none.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from fencelight.nodes import CodeBlock

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[A-Za-z_:][A-Za-z0-9_.:\-]*")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_BAREWORD_RE = re.compile(r"[^\s,\]}\"'=\[{]+")
_KEYWORDS = {"true": True, "false": False, "null": None}
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


@dataclass(frozen=True)
class HighlightAttributes:
    """Language and attributes resolved for one block.

    Parameters
    ----------
    language : str or None
        Language name, or None when the block names none
    attributes : Mapping or None
        Read-only attribute mapping, or None when the block has no attributes

    """

    language: Optional[str] = None
    attributes: Optional[Mapping[str, Any]] = None

    def get(self, name: str, default: Any = None) -> Any:
        """Return an attribute value, or ``default`` when it is absent."""
        if self.attributes is None:
            return default
        return self.attributes.get(name, default)

    def has(self, name: str) -> bool:
        """Return True if the attribute is present, whatever its value."""
        return self.attributes is not None and name in self.attributes


class _AttributeParseError(Exception):
    """Raised internally when the embedded attribute block is malformed."""


class _AttributeBlockParser:
    """Recursive descent parser for ``{name=value, ...}`` blocks."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip_spaces(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _skip_separators(self) -> None:
        while self.pos < len(self.text) and (self.text[self.pos].isspace() or self.text[self.pos] == ","):
            self.pos += 1

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise _AttributeParseError(f"expected {char!r} at offset {self.pos}")
        self.pos += 1

    def parse(self) -> dict[str, Any]:
        attrs = self._parse_block()
        self._skip_spaces()
        if self.pos != len(self.text):
            raise _AttributeParseError(f"unexpected trailing text at offset {self.pos}")
        return attrs

    def _parse_block(self) -> dict[str, Any]:
        self._expect("{")
        attrs: dict[str, Any] = {}
        while True:
            self._skip_separators()
            char = self._peek()
            if char == "":
                raise _AttributeParseError("unclosed attribute block")
            if char == "}":
                self.pos += 1
                return attrs
            self._parse_attribute(attrs)

    def _parse_attribute(self, attrs: dict[str, Any]) -> None:
        char = self._peek()
        if char in ("#", "."):
            self.pos += 1
            match = _NAME_RE.match(self.text, self.pos)
            if not match:
                raise _AttributeParseError(f"expected identifier after {char!r} at offset {self.pos}")
            self.pos = match.end()
            if char == "#":
                attrs["id"] = match.group(0)
            elif "class" in attrs:
                attrs["class"] = f"{attrs['class']} {match.group(0)}"
            else:
                attrs["class"] = match.group(0)
            return

        match = _NAME_RE.match(self.text, self.pos)
        if not match:
            raise _AttributeParseError(f"invalid attribute name at offset {self.pos}")
        name = match.group(0)
        self.pos = match.end()
        self._skip_spaces()
        if self._peek() != "=":
            # Presence-only attribute such as ``nohl``
            attrs[name] = True
            return
        self.pos += 1
        self._skip_spaces()
        attrs[name] = self._parse_value()

    def _parse_value(self) -> Any:
        char = self._peek()
        if char == "":
            raise _AttributeParseError("missing attribute value")
        if char == "[":
            return self._parse_array()
        if char == "{":
            return self._parse_block()
        if char in ('"', "'"):
            return self._parse_string(char)

        number = _NUMBER_RE.match(self.text, self.pos)
        if number:
            end = number.end()
            # Reject things like "3px" so they are read as bare words
            if end >= len(self.text) or not _BAREWORD_RE.match(self.text[end]):
                self.pos = end
                literal = number.group(0)
                if any(c in literal for c in ".eE"):
                    return float(literal)
                return int(literal)

        word = _BAREWORD_RE.match(self.text, self.pos)
        if not word:
            raise _AttributeParseError(f"invalid attribute value at offset {self.pos}")
        self.pos = word.end()
        value = word.group(0)
        if value in _KEYWORDS:
            return _KEYWORDS[value]
        return value

    def _parse_array(self) -> list[Any]:
        self._expect("[")
        values: list[Any] = []
        while True:
            self._skip_separators()
            char = self._peek()
            if char == "":
                raise _AttributeParseError("unclosed array")
            if char == "]":
                self.pos += 1
                return values
            values.append(self._parse_value())

    def _parse_string(self, quote: str) -> str:
        self._expect(quote)
        chars: list[str] = []
        while True:
            char = self._peek()
            if char == "":
                raise _AttributeParseError("unterminated string")
            self.pos += 1
            if char == quote:
                return "".join(chars)
            if char == "\\":
                escaped = self._peek()
                if escaped == "":
                    raise _AttributeParseError("unterminated escape")
                self.pos += 1
                chars.append(_ESCAPES.get(escaped, escaped))
            else:
                chars.append(char)


def parse_attribute_block(text: str) -> Optional[dict[str, Any]]:
    """Parse a legacy ``{...}`` attribute block.

    The block holds attributes separated by whitespace and/or commas.
    Each attribute is one of ``#id``, ``.class``, ``name=value`` or a bare
    ``name`` (stored as ``True``). Values may be quoted strings, numbers,
    ``true``/``false``/``null``, arrays, nested blocks or bare words.

    Parameters
    ----------
    text : str
        Text starting with ``{``

    Returns
    -------
    dict or None
        Parsed attributes, or None when the text is not a well-formed block

    Examples
    --------
        >>> parse_attribute_block('{hl_lines=["2-3", 5], linenostart=5}')
        {'hl_lines': ['2-3', 5], 'linenostart': 5}
        >>> parse_attribute_block("{hl_lines=[") is None
        True

    """
    if not text or not text.startswith("{"):
        return None
    try:
        return _AttributeBlockParser(text).parse()
    except _AttributeParseError as e:
        logger.debug("Ignoring malformed attribute block %r: %s", text, e)
        return None


def _language_from(info: str) -> Optional[str]:
    parts = info.split(maxsplit=1)
    return parts[0] if parts else None


def resolve_attributes(block: CodeBlock) -> HighlightAttributes:
    """Resolve the language and attributes of a code block.

    Parameters
    ----------
    block : CodeBlock
        Block supplied by the host pipeline

    Returns
    -------
    HighlightAttributes
        Language and read-only attributes for the block

    Notes
    -----
    Host attributes take precedence. When they are absent, the info string
    is searched for ``{``; the brace block is only read when a language name
    precedes it.

    """
    info = block.info
    if block.attributes is not None:
        language = _language_from(info) if info else None
        return HighlightAttributes(language=language, attributes=MappingProxyType(dict(block.attributes)))

    if info is None:
        return HighlightAttributes()

    brace = info.find("{")
    language = _language_from(info[:brace]) if brace > 0 else None
    if language is not None:
        attrs = parse_attribute_block(info[brace:].strip())
        if attrs is not None:
            return HighlightAttributes(language=language, attributes=MappingProxyType(attrs))

    return HighlightAttributes(language=_language_from(info))
