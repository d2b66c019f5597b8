#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for code block highlighting.

This module defines :class:`HighlightingOptions`, the construction-time
configuration shared read-only by every block a renderer processes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING, Any, Callable, Iterable, Mapping, Optional

from fencelight.constants import (
    DEFAULT_GUESS_LANGUAGE,
    DEFAULT_HIGHLIGHT_STYLE,
    FormatOption,
)
from fencelight.exceptions import ValidationError
from fencelight.options.base import CloneFrozenMixin

if TYPE_CHECKING:
    from fencelight.highlighting.wrappers import WrapperRenderer
    from fencelight.nodes import CodeBlockContext

CodeBlockOptionsHook = Callable[["CodeBlockContext"], Optional[Iterable[FormatOption]]]


@dataclass(frozen=True)
class HighlightingOptions(CloneFrozenMixin):
    """Configuration options for rendering fenced code blocks.

    Parameters
    ----------
    style : str, default "github-dark"
        Name of the highlighting style. Unknown names fall back to the
        ``default`` style instead of raising.
    format_options : tuple of (str, Any), default ()
        Formatter options appended after the built-in defaults. Later
        entries override earlier entries with the same name.
    css_writer : IO[str] or None, default None
        Stream receiving the style's CSS rules once per highlighted block.
        Only useful together with ``with_classes()``. Writes are not
        deduplicated and the stream must not be shared between concurrent
        conversions.
    wrapper_renderer : WrapperRenderer or None, default None
        Strategy that writes the markup surrounding every block. When set,
        the formatter emits no container of its own.
    guess_language : bool, default False
        Guess the language of blocks that do not name one.
    code_block_options : callable or None, default None
        Called with the block's ``CodeBlockContext``; returns extra formatter
        options appended after all others.

    Examples
    --------
    Classes plus an external style sheet:

        >>> import io
        >>> from fencelight.highlighting.formatter import with_classes
        >>> css = io.StringIO()
        >>> options = HighlightingOptions(
        ...     style="monokai",
        ...     format_options=(with_classes(),),
        ...     css_writer=css,
        ... )

    """

    style: str = field(
        default=DEFAULT_HIGHLIGHT_STYLE,
        metadata={"help": "Highlighting style name", "importance": "core"},
    )
    format_options: tuple[FormatOption, ...] = field(
        default=(),
        metadata={"help": "Extra formatter options as (name, value) pairs", "importance": "advanced"},
    )
    css_writer: Optional[IO[str]] = field(
        default=None,
        metadata={"help": "Stream receiving CSS rules for highlighted blocks", "exclude_from_cli": True},
    )
    wrapper_renderer: Optional[WrapperRenderer] = field(
        default=None,
        metadata={"help": "Strategy writing the markup around each block", "exclude_from_cli": True},
    )
    guess_language: bool = field(
        default=DEFAULT_GUESS_LANGUAGE,
        metadata={"help": "Guess the language of blocks without one", "importance": "core"},
    )
    code_block_options: Optional[CodeBlockOptionsHook] = field(
        default=None,
        metadata={"help": "Callable returning per-block formatter options", "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValidationError
            If any field has an invalid value.

        """
        from fencelight.highlighting.wrappers import WrapperRenderer

        if not isinstance(self.style, str) or not self.style.strip():
            raise ValidationError("style must be a non-empty string", "style", self.style)

        if not isinstance(self.format_options, tuple):
            object.__setattr__(self, "format_options", tuple(self.format_options))
        for option in self.format_options:
            if not (isinstance(option, tuple) and len(option) == 2 and isinstance(option[0], str)):
                raise ValidationError(
                    f"format_options entries must be (name, value) pairs, got {option!r}",
                    "format_options",
                    option,
                )

        if self.css_writer is not None and not callable(getattr(self.css_writer, "write", None)):
            raise ValidationError("css_writer must have a write() method", "css_writer", self.css_writer)

        if self.wrapper_renderer is not None and not isinstance(self.wrapper_renderer, WrapperRenderer):
            raise ValidationError(
                f"wrapper_renderer must be a WrapperRenderer, got {type(self.wrapper_renderer).__name__}",
                "wrapper_renderer",
                self.wrapper_renderer,
            )

        if self.code_block_options is not None and not callable(self.code_block_options):
            raise ValidationError("code_block_options must be callable", "code_block_options", self.code_block_options)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], **overrides: Any) -> HighlightingOptions:
        """Build options from a plain configuration mapping.

        Recognized keys are ``style``, ``classes`` (bool), ``line_numbers``
        (``"inline"``/``"table"``), ``css_class``, ``tab_width``,
        ``guess_language`` and ``format_options`` (a table of formatter
        option names to values). Unknown keys are rejected.

        Parameters
        ----------
        data : Mapping
            Configuration values, e.g. loaded from a TOML file
        **overrides
            Field values applied on top of the mapping

        Returns
        -------
        HighlightingOptions
            Options built from the mapping

        Raises
        ------
        ValidationError
            If the mapping contains unknown keys or invalid values

        """
        from fencelight.highlighting import formatter

        known = {"style", "classes", "line_numbers", "css_class", "tab_width", "guess_language", "format_options"}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValidationError(f"Unknown configuration keys: {', '.join(unknown)}", "config", unknown)

        format_options: list[FormatOption] = []
        if data.get("classes"):
            format_options.append(formatter.with_classes())
        line_numbers = data.get("line_numbers")
        if line_numbers:
            if line_numbers not in ("inline", "table"):
                raise ValidationError(
                    f"line_numbers must be 'inline' or 'table', got {line_numbers!r}", "line_numbers", line_numbers
                )
            format_options.append(formatter.with_line_numbers(line_numbers))
        if data.get("css_class"):
            format_options.append(formatter.with_css_class(str(data["css_class"])))
        if data.get("tab_width") is not None:
            try:
                width = int(data["tab_width"])
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"tab_width must be an integer, got {data['tab_width']!r}", "tab_width", data["tab_width"], e
                ) from e
            format_options.append(formatter.tab_width(width))

        extra = data.get("format_options") or {}
        if not isinstance(extra, Mapping):
            raise ValidationError("format_options must be a table of option names to values", "format_options", extra)
        format_options.extend((str(name), value) for name, value in extra.items())

        kwargs: dict[str, Any] = {"format_options": tuple(format_options)}
        if "style" in data:
            kwargs["style"] = data["style"]
        if "guess_language" in data:
            kwargs["guess_language"] = bool(data["guess_language"])
        kwargs.update(overrides)
        return cls(**kwargs)
