"""Core utilities: capability types, constants, message rendering."""

from __future__ import annotations

__all__ = [
    "patterns",
    "types",
    "validation",
]
