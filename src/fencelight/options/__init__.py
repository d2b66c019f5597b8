#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for fencelight."""

from fencelight.options.base import CloneFrozenMixin
from fencelight.options.highlighting import CodeBlockOptionsHook, HighlightingOptions

__all__ = [
    "CloneFrozenMixin",
    "CodeBlockOptionsHook",
    "HighlightingOptions",
]
