"""hop - jump between bookmarked directories from the shell.

This package provides the `hop` command-line tool: a persistent set of
named directory shortcuts, direct and fuzzy lookup, and the shell
integration snippets that turn a resolved path into a `cd`.

Exports:
    __version__: Package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.3.0"
