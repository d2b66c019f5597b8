#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for fencelight.

This module centralizes the default configuration values, recognized
attribute names and dependency specifications used across the package.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Highlighting Defaults - Style and formatter defaults
3. Code Block Attributes - Attribute names recognized on fenced blocks
4. Dependencies - Optional package requirements
5. Configuration Files - Names searched during config discovery
"""

from __future__ import annotations

from typing import Any, Literal, Tuple

# =============================================================================
# Type Definitions
# =============================================================================

LineNumbersMode = Literal["inline", "table"]

# A single formatter option, as a (name, value) pair. Options are applied in
# order, so a later pair overrides an earlier pair with the same name.
FormatOption = Tuple[str, Any]

# =============================================================================
# Highlighting Defaults
# =============================================================================

DEFAULT_HIGHLIGHT_STYLE = "github-dark"

# Always registered with pygments; used whenever a requested style is unknown
FALLBACK_STYLE = "default"

DEFAULT_CSS_CLASS = "highlight"
DEFAULT_GUESS_LANGUAGE = False

# Built-in formatter options, applied before any user supplied options.
# Inline styles match the output of a formatter without a style sheet, and
# the code element carries the language-* annotation.
DEFAULT_FORMAT_OPTIONS: tuple[FormatOption, ...] = (
    ("noclasses", True),
    ("wrapcode", True),
)

LANGUAGE_CLASS_PREFIX = "language-"

# =============================================================================
# Code Block Attributes
# =============================================================================

HL_LINES_ATTR = "hl_lines"
HL_STYLE_ATTR = "hl_style"
NOHL_ATTR = "nohl"
LINENOS_ATTR = "linenos"
LINENOSTART_ATTR = "linenostart"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "FENCELIGHT_CONFIG"
CONFIG_FILENAMES = [".fencelight.toml", ".fencelight.yaml", ".fencelight.yml", ".fencelight.json"]
PYPROJECT_TOOL_SECTION = "fencelight"
