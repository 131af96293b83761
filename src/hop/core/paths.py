"""Home-relative path handling and config directory resolution.

Shortcut paths are stored in a portable form where the user's home
directory prefix is collapsed to `~`, so the file stays readable and
survives a home directory move. Both directions silently degrade to the
identity when no home directory can be determined.
"""

from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import user_config_dir

from hop.core.result import ConfigDirUnavailable

APP_NAME = "hop"
HOME_MARKER = "~"


def home_dir() -> str | None:
    """Return the current user's home directory, or None if unknown."""
    try:
        home = str(Path.home())
    except RuntimeError:
        return None
    # expanduser() hands back "~" untouched when nothing resolves
    if not home or home == HOME_MARKER:
        return None
    return home


def normalize(path: str) -> str:
    """Collapse a leading home directory prefix to `~`.

    Plain string-prefix match: no trailing-slash, case or component
    normalization is applied.
    """
    home = home_dir()
    if home and path.startswith(home):
        return path.replace(home, HOME_MARKER, 1)
    return path


def expand(path: str) -> str:
    """Inverse of normalize(): turn `~` and `~/...` back into absolute paths."""
    if path == HOME_MARKER or path.startswith(HOME_MARKER + "/"):
        home = home_dir()
        if home:
            return path.replace(HOME_MARKER, home, 1)
    return path


def app_config_dir() -> Path:
    """Return the per-user configuration directory for hop.

    Windows: %APPDATA%\\hop. macOS: ~/Library/Application Support/hop.
    Elsewhere: $XDG_CONFIG_HOME/hop, else ~/.config/hop.

    Raises:
        ConfigDirUnavailable: If the platform gives no absolute config location.
    """
    path = Path(user_config_dir(APP_NAME, appauthor=False, roaming=True))
    if not path.is_absolute():
        raise ConfigDirUnavailable(
            "Could not find config directory",
            context={"platform": sys.platform, "resolved": str(path)},
        )
    return path


__all__ = [
    "APP_NAME",
    "HOME_MARKER",
    "app_config_dir",
    "expand",
    "home_dir",
    "normalize",
]
