#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared behaviour of the frozen option dataclasses.

Option fields carry ``metadata`` describing them (``help``, ``importance``,
``exclude_from_cli``); the CLI reads its help text from there.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced; validation runs again."""
        return replace(self, **kwargs)

    @classmethod
    def field_help(cls, name: str) -> str:
        """Return the help text recorded in a field's metadata.

        Raises
        ------
        KeyError
            If the class has no field called ``name``

        """
        for f in fields(cls):
            if f.name == name:
                return str(f.metadata.get("help", ""))
        raise KeyError(name)

