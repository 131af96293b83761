"""CLI command modules for hop.

This package contains the user-facing commands:
    - shortcuts: jump, add, list, remove and fuzzy pick
    - init: Shell integration snippets
"""

from __future__ import annotations

from . import init, shortcuts

__all__ = [
    "init",
    "shortcuts",
]
