#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers for fenced code blocks and host pipeline integrations."""

from fencelight.renderers.code_block import CodeBlockRenderer

__all__ = ["CodeBlockRenderer"]
