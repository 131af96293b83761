"""Core shared infrastructure for hop.

This package contains the pieces the CLI commands are built on:
    - paths: Home-relative path normalization and config dir resolution
    - store: CSV-backed shortcut store
    - select: Direct lookup and fuzzy-pick selection
    - finder: External fuzzy finder integration
    - shell: Shell initialization snippets
    - config: Application configuration management
    - console: Rich console output and logging
    - result: Error handling patterns
"""

from __future__ import annotations

from . import config, console

__all__ = ["config", "console"]
