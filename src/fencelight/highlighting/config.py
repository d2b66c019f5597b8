#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/fencelight/highlighting/config.py
"""Per-block highlighting configuration.

:func:`build_highlight_config` combines the renderer options with the
attributes resolved for one block. Every problem found here (an unknown
style, an unparsable line range) resolves silently to a safe default.

"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterator, NamedTuple, Optional

from pygments.style import Style

from fencelight.constants import (
    DEFAULT_FORMAT_OPTIONS,
    HL_LINES_ATTR,
    HL_STYLE_ATTR,
    LINENOS_ATTR,
    LINENOSTART_ATTR,
    NOHL_ATTR,
    FormatOption,
)
from fencelight.highlighting.attributes import HighlightAttributes
from fencelight.highlighting.formatter import base_line_number, highlight_lines, lookup_style
from fencelight.options import HighlightingOptions

logger = logging.getLogger(__name__)


class LineRange(NamedTuple):
    """Closed, 1-based range of source lines to emphasize."""

    lo: int
    hi: int

    def lines(self) -> Iterator[int]:
        """Yield each line number in the range."""
        return iter(range(self.lo, self.hi + 1))

    def clamp(self, line_count: int) -> LineRange:
        """Restrict the range to lines 1 through ``line_count``."""
        return LineRange(max(self.lo, 1), min(self.hi, line_count))


@dataclass(frozen=True)
class HighlightConfig:
    """Resolved highlighting configuration for one block.

    Parameters
    ----------
    style_name : str
        Name of the effective style, after any fallback
    style : type[Style]
        The pygments style class
    line_ranges : tuple of LineRange
        Lines to emphasize, in input order
    nohl : bool
        True when the block opted out of highlighting
    format_options : tuple of (str, Any)
        Ordered formatter options; later entries win

    """

    style_name: str
    style: type[Style]
    line_ranges: tuple[LineRange, ...] = ()
    nohl: bool = False
    format_options: tuple[FormatOption, ...] = ()


def _parse_line_number(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _whole_number(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    return None


def _parse_line_range(entry: Any) -> Optional[LineRange]:
    if isinstance(entry, (int, float)):
        line = _whole_number(entry)
        return LineRange(line, line) if line is not None else None
    if isinstance(entry, str):
        if "-" not in entry:
            line = _parse_line_number(entry)
            return LineRange(line, line) if line is not None else None
        lhs, rhs = entry.split("-", 1)
        lo = _parse_line_number(lhs)
        hi = _parse_line_number(rhs)
        if lo is None or hi is None:
            return None
        return LineRange(lo, hi)
    return None


def parse_line_ranges(value: Any) -> tuple[LineRange, ...]:
    """Parse a line-highlight attribute value.

    Parameters
    ----------
    value : Any
        A sequence mixing numbers (single lines) and ``"lo-hi"`` strings.
        A scalar is treated as a one-element sequence.

    Returns
    -------
    tuple of LineRange
        Successfully parsed ranges in input order. Malformed entries are
        skipped without affecting the others. Inverted ranges are kept as
        given.

    Examples
    --------
        >>> parse_line_ranges(["2-3", 5, "x-y"])
        (LineRange(lo=2, hi=3), LineRange(lo=5, hi=5))

    """
    if value is None:
        return ()
    entries = value if isinstance(value, (list, tuple)) else [value]

    ranges: list[LineRange] = []
    for entry in entries:
        parsed = _parse_line_range(entry)
        if parsed is None:
            logger.debug("Skipping malformed line range %r", entry)
            continue
        ranges.append(parsed)
    return tuple(ranges)


def _line_number_options(attributes: HighlightAttributes) -> list[FormatOption]:
    options: list[FormatOption] = []
    if attributes.has(LINENOS_ATTR):
        linenos = attributes.get(LINENOS_ATTR)
        if linenos is True or (isinstance(linenos, str) and linenos.lower() in ("true", "inline")):
            options.append(("linenos", "inline"))
        elif isinstance(linenos, str) and linenos.lower() == "table":
            options.append(("linenos", "table"))
        elif linenos is False or (isinstance(linenos, str) and linenos.lower() == "false"):
            options.append(("linenos", False))
    if attributes.has(LINENOSTART_ATTR):
        start = attributes.get(LINENOSTART_ATTR)
        number = _parse_line_number(start) if isinstance(start, str) else _whole_number(start)
        if number is not None:
            options.append(base_line_number(number))
        else:
            logger.debug("Ignoring invalid line number start %r", start)
    return options


def build_highlight_config(
    options: HighlightingOptions,
    attributes: Optional[HighlightAttributes],
    line_count: Optional[int] = None,
) -> HighlightConfig:
    """Build the highlighting configuration for one block.

    Parameters
    ----------
    options : HighlightingOptions
        Renderer-wide defaults
    attributes : HighlightAttributes or None
        Attributes resolved for the block
    line_count : int or None, default = None
        Number of lines in the block. When given, highlighted line ranges
        are clipped to the lines that exist.

    Returns
    -------
    HighlightConfig
        Fresh configuration for this block

    """
    attributes = attributes or HighlightAttributes()

    requested_style = options.style
    style_override = attributes.get(HL_STYLE_ATTR)
    if isinstance(style_override, str) and style_override:
        requested_style = style_override
    style_name, style = lookup_style(requested_style)

    format_options: list[FormatOption] = [*DEFAULT_FORMAT_OPTIONS, *options.format_options]

    line_ranges: tuple[LineRange, ...] = ()
    if attributes.has(HL_LINES_ATTR):
        line_ranges = parse_line_ranges(attributes.get(HL_LINES_ATTR))
        emphasized = line_ranges if line_count is None else tuple(r.clamp(line_count) for r in line_ranges)
        format_options.append(highlight_lines(emphasized))

    format_options.extend(_line_number_options(attributes))

    return HighlightConfig(
        style_name=style_name,
        style=style,
        line_ranges=line_ranges,
        nohl=attributes.has(NOHL_ATTR),
        format_options=tuple(format_options),
    )
