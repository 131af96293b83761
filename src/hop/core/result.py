"""
Result types and error hierarchy for hop.

This module provides:
1. Result[T, E] type for explicit error handling
2. Domain-specific exception hierarchy

Lower layers (store, finder, selection) never raise for expected
failures; they return Err(...) and the command handlers decide how to
report it and which exit code to use.

Usage:
    from hop.core.result import Ok, Err, Result, ShortcutNotFound

    def resolve(shortcuts, name) -> Result[str, ShortcutNotFound]:
        if name not in shortcuts:
            return Err(ShortcutNotFound(f"Shortcut `{name}` not found"))
        return Ok(shortcuts[name])
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raise the contained error."""
        raise self.error


# Type alias for Result
Result = Ok[T] | Err[E]


# ---------------------------------------------------------------------------
# Domain-specific error hierarchy
# ---------------------------------------------------------------------------


class HopError(Exception):
    """Base exception for all hop errors.

    Carries a human-readable message plus optional context (file paths,
    underlying causes) that is appended when the error is rendered.
    """

    def __init__(self, message: str, *, context: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigDirUnavailable(HopError):
    """Raised when the platform gives no per-user configuration directory.

    Fatal: without it there is nowhere to persist shortcuts.
    """


class LoadError(HopError):
    """The shortcut file exists but could not be read or parsed."""


class SaveError(HopError):
    """The shortcut file could not be written."""


class ShortcutNotFound(HopError):
    """No shortcut with the requested name."""


class EmptyStore(HopError):
    """Fuzzy pick requested while no shortcuts are stored."""


class FinderUnavailable(HopError):
    """The external fuzzy finder could not be launched."""


class FinderParseError(HopError):
    """The fuzzy finder returned a line without the ` -> ` separator."""


class UnsupportedShell(HopError):
    """No initialization snippet exists for the requested shell."""


__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    # Error hierarchy
    "HopError",
    "ConfigDirUnavailable",
    "LoadError",
    "SaveError",
    "ShortcutNotFound",
    "EmptyStore",
    "FinderUnavailable",
    "FinderParseError",
    "UnsupportedShell",
]
