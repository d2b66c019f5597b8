#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/nodes.py
"""Block-level data passed between the host pipeline and the renderer.

A :class:`CodeBlock` is the read-only view of one fenced block as produced
by the host document parser. A :class:`CodeBlockContext` is what wrapper
renderers and per-block option hooks receive while a block is rendered.

"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class CodeBlock:
    """Fenced code block node supplied by the host pipeline.

    Parameters
    ----------
    lines : tuple of str
        Raw source lines in order, each keeping its trailing newline
    info : str or None, default = None
        Raw text following the opening fence marker
    attributes : Mapping or None, default = None
        Attributes already parsed by the host. When present they take
        precedence over any attribute block embedded in the info string.

    Examples
    --------
        >>> block = CodeBlock.from_text("print('hi')\\n", info="python")
        >>> block.lines
        ("print('hi')\\n",)

    """

    lines: tuple[str, ...] = ()
    info: Optional[str] = None
    attributes: Optional[Mapping[str, Any]] = None

    @classmethod
    def from_text(
        cls, text: str, info: Optional[str] = None, attributes: Optional[Mapping[str, Any]] = None
    ) -> CodeBlock:
        """Build a code block from its full text.

        Parameters
        ----------
        text : str
            Block content; split into newline-preserving lines
        info : str or None, default = None
            Info string following the fence marker
        attributes : Mapping or None, default = None
            Host-parsed attributes

        Returns
        -------
        CodeBlock
            New code block node

        """
        return cls(lines=tuple(text.splitlines(keepends=True)), info=info, attributes=attributes)

    @property
    def text(self) -> str:
        """Return the block content with all lines concatenated in order."""
        return "".join(self.lines)


@dataclass(frozen=True)
class CodeBlockContext:
    """Information about the block being rendered.

    Parameters
    ----------
    language : str or None
        Resolved language name; None signals a block without a language
    attributes : Mapping or None
        Resolved block attributes, if any
    highlighted : bool
        True when the block content is produced by the highlighter, False on
        the plain fallback path

    """

    language: Optional[str] = None
    attributes: Optional[Mapping[str, Any]] = None
    highlighted: bool = False

    def __post_init__(self) -> None:
        if self.attributes is not None and not isinstance(self.attributes, MappingProxyType):
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def has_language(self) -> bool:
        """Return True when the block names a language."""
        return bool(self.language)

    def get_attribute(self, name: str, default: Any = None) -> Any:
        """Look up a block attribute by name."""
        if self.attributes is None:
            return default
        return self.attributes.get(name, default)
