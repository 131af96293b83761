"""CSV-backed shortcut store.

The store is a flat name -> portable path mapping, loaded fresh on every
invocation and rewritten as a full snapshot after a mutation. The file is
plain CSV: two unheaded columns, one shortcut per row.
"""

from __future__ import annotations

import contextlib
import csv
import logging
import os
from collections.abc import Mapping
from pathlib import Path

from hop.core.config import HopConfig
from hop.core.result import Err, LoadError, Ok, Result, SaveError

logger = logging.getLogger(__name__)

Shortcuts = dict[str, str]

# Paths are bytes on POSIX; surrogateescape keeps non-UTF-8 names intact.
_TEXT_MODE: dict[str, str] = {"encoding": "utf-8", "errors": "surrogateescape", "newline": ""}


class _ShortcutDialect(csv.excel):
    lineterminator = "\n"
    strict = True


class ShortcutStore:
    """Reads and writes the shortcut file at a fixed location."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @classmethod
    def default(cls, config: HopConfig) -> ShortcutStore:
        """Build the store at the configured location.

        Raises:
            ConfigDirUnavailable: If the platform config directory is unknown.
        """
        return cls(config.shortcuts_path())

    def load(self) -> Result[Shortcuts, LoadError]:
        """Read every shortcut from disk. A missing file is an empty store."""
        if not self.path.exists():
            logger.debug("No shortcut file at %s", self.path)
            return Ok({})

        shortcuts: Shortcuts = {}
        try:
            with self.path.open("r", **_TEXT_MODE) as handle:
                reader = csv.reader(handle, dialect=_ShortcutDialect)
                for row in reader:
                    if not row:
                        continue
                    if len(row) != 2:
                        return Err(
                            LoadError(
                                f"Expected 2 fields, found {len(row)}",
                                context={"path": str(self.path), "line": reader.line_num},
                            )
                        )
                    name, path = row
                    shortcuts[name] = path
        except (OSError, ValueError, csv.Error) as exc:
            return Err(LoadError(str(exc), context={"path": str(self.path)}))

        logger.debug("Loaded %d shortcuts from %s", len(shortcuts), self.path)
        return Ok(shortcuts)

    def save(self, shortcuts: Mapping[str, str]) -> Result[None, SaveError]:
        """Write the full mapping, replacing any previous content."""
        temp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", **_TEXT_MODE) as handle:
                writer = csv.writer(handle, dialect=_ShortcutDialect)
                for name in sorted(shortcuts):
                    writer.writerow([name, shortcuts[name]])
            os.replace(temp_path, self.path)
        except (OSError, ValueError, csv.Error) as exc:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            return Err(SaveError(str(exc), context={"path": str(self.path)}))

        logger.debug("Saved %d shortcuts to %s", len(shortcuts), self.path)
        return Ok(None)


__all__ = ["Shortcuts", "ShortcutStore"]
