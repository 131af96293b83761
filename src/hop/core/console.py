"""Console output and logging configuration.

Provides Rich-based console output and logging setup:
    - make_console(): Console factory that leaves `:emoji:` codes alone
    - console: Main Rich console for stdout
    - stderr_console: Rich console for stderr
    - setup_logging(): Configure logging with Rich handler

stdout is reserved for command output and the jump protocol, so log
records always go to the stderr console.
"""

from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


def make_console(*, stderr: bool = False, **kwargs: Any) -> Console:
    """Build a console that prints user text as-is (no `:emoji:` codes)."""
    return Console(stderr=stderr, soft_wrap=True, emoji=False, **kwargs)


console = make_console()
stderr_console = make_console(stderr=True)


def _normalize_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return int(level)


def setup_logging(level: str | int = logging.WARNING, verbose: bool = False) -> logging.Logger:
    """Configure logging with a Rich handler and return the app logger."""
    numeric_level = logging.DEBUG if verbose else _normalize_level(level)

    handler = RichHandler(
        console=stderr_console,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(numeric_level)

    logger = logging.getLogger("hop")
    logger.handlers.clear()
    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False

    return logger
