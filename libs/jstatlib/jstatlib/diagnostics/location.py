"""Locations inside captured tool output."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextLocation:
    """A position in a block of tool output, e.g. ``<jstat>:2:17``."""

    source: str
    line: int  # 1-indexed
    column: int | None = None  # 1-indexed

    def __str__(self) -> str:
        if self.column is None:
            return f"{self.source}:{self.line}"
        return f"{self.source}:{self.line}:{self.column}"
