"""External interactive fuzzy finder integration.

The selection engine only depends on the InteractiveFinder protocol, so
tests can substitute a fake. FzfFinder is the real implementation and
talks to an fzf-compatible executable over piped stdin/stdout.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from typing import Protocol

from hop.core.result import Err, FinderUnavailable, Ok, Result

logger = logging.getLogger(__name__)


class InteractiveFinder(Protocol):
    def pick(self, lines: Sequence[str]) -> Result[str | None, FinderUnavailable]:
        """Let the user pick one line. Ok(None) means the pick was cancelled."""
        ...


class FzfFinder:
    """Run fzf (or a compatible finder) and return the selected line."""

    def __init__(self, command: str = "fzf", args: Sequence[str] = ()) -> None:
        self.command = command
        self.args = list(args)

    def _unavailable(self, **context: object) -> Err[FinderUnavailable]:
        return Err(
            FinderUnavailable(
                f"Failed to start `{self.command}`. Check if it is installed.",
                context=context,
            )
        )

    def pick(self, lines: Sequence[str]) -> Result[str | None, FinderUnavailable]:
        executable = shutil.which(self.command)
        if not executable:
            return self._unavailable()

        cmd = [executable, *self.args]
        logger.debug("Running finder: %s (%d entries)", cmd, len(lines))

        # run() feeds stdin and drains stdout concurrently, so a long entry
        # list cannot block on a full pipe.
        try:
            proc = subprocess.run(
                cmd,
                input="\n".join(lines),
                encoding="utf-8",
                errors="surrogateescape",
                stdout=subprocess.PIPE,
            )
        except OSError as exc:
            return self._unavailable(error=str(exc))

        if proc.returncode != 0:
            logger.debug("Finder exited with %s; treating as cancelled", proc.returncode)
            return Ok(None)

        return Ok(proc.stdout)


__all__ = ["FzfFinder", "InteractiveFinder"]
