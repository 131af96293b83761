"""Tests for the fzf integration, driven by stub finder scripts."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from hop.core.finder import FzfFinder
from hop.core.result import Err, FinderUnavailable, Ok

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh stub scripts")


def _stub(tmp_path: Path, body: str) -> str:
    script = tmp_path / "fake-fzf"
    script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    script.chmod(0o755)
    return str(script)


def test_missing_executable_is_unavailable() -> None:
    result = FzfFinder("definitely-not-a-real-finder-binary").pick(["a"])

    assert isinstance(result, Err)
    assert isinstance(result.error, FinderUnavailable)
    assert "Check if it is installed" in result.error.message
    assert "definitely-not-a-real-finder-binary" in result.error.message


@posix_only
def test_selected_line_is_returned(tmp_path: Path) -> None:
    finder = FzfFinder(_stub(tmp_path, "sed -n 2p"))

    result = finder.pick(["1. a -> /a", "2. b -> /b"])

    assert result.unwrap().strip() == "2. b -> /b"


@posix_only
def test_extra_args_are_passed_through(tmp_path: Path) -> None:
    finder = FzfFinder(_stub(tmp_path, 'cat >/dev/null; echo "$@"'), ["--height", "40%"])

    assert finder.pick(["x"]) == Ok("--height 40%\n")


@posix_only
def test_non_zero_exit_is_cancel(tmp_path: Path) -> None:
    finder = FzfFinder(_stub(tmp_path, "cat >/dev/null; exit 130"))

    assert finder.pick(["1. a -> /a"]) == Ok(None)


@posix_only
def test_large_input_does_not_deadlock(tmp_path: Path) -> None:
    """More input than a pipe buffer holds, with the finder reading it all first."""
    lines = [f"{i}. shortcut{i} -> /some/fairly/long/path/number/{i}" for i in range(1, 20001)]
    finder = FzfFinder(_stub(tmp_path, "tail -n 1"))

    assert finder.pick(lines).unwrap().strip() == lines[-1]
