from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

_HOP_ENV_VARS = ("HOP_CONFIG", "HOP_STORE_DIR", "HOP_FINDER", "HOP_FINDER_ARGS", "HOP_LOG_LEVEL")


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """The fake home directory HOME points at."""
    return (tmp_path / "home").resolve()


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    """The fake XDG config base; hop keeps its files under config_root / "hop"."""
    return (tmp_path / "config").resolve()


@pytest.fixture(autouse=True)
def isolate_env(home: Path, config_root: Path, monkeypatch: Any) -> None:
    """Point HOME and the config dir at temp paths so tests never touch user state."""
    home.mkdir(parents=True, exist_ok=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_root))
    for name in _HOP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def shortcuts_file(config_root: Path) -> Path:
    return config_root / "hop" / "paths.csv"


@pytest.fixture(autouse=True)
def capture_console(monkeypatch: Any) -> Console:
    """Use plain (colorless) Rich consoles so CliRunner output is easy to assert on."""
    import hop.commands.init as init_cmd
    import hop.commands.shortcuts as shortcuts_cmd
    import hop.core.console as core_console
    import hop.main as hop_main
    from hop.core.console import make_console

    test_console = make_console(force_terminal=False)
    test_stderr = make_console(stderr=True, force_terminal=False)

    for module in (core_console, init_cmd, shortcuts_cmd, hop_main):
        monkeypatch.setattr(module, "console", test_console, raising=False)
        monkeypatch.setattr(module, "stderr_console", test_stderr, raising=False)
    return test_console
