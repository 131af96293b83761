from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class CommandSpec:
    name: str
    handler: Callable[..., None]
    hidden: bool = False


# command name -> handler attribute, per module in hop.commands
_FUNCTION_COMMANDS: dict[str, dict[str, str]] = {
    "shortcuts": {
        "jump": "jump",
        "add": "add",
        "list": "list_shortcuts",
        "remove": "remove",
        "fuzzy": "fuzzy",
    },
    "init": {"init": "init"},
}

# short spellings registered as hidden duplicates
ALIASES: dict[str, str] = {"a": "add", "ls": "list", "rm": "remove", "f": "fuzzy"}

# commands that exist for routing only and stay out of --help
_HIDDEN = {"jump"}


def _build_function_commands(module_name: str, module: object) -> list[CommandSpec]:
    specs: list[CommandSpec] = []
    mapping = _FUNCTION_COMMANDS.get(module_name, {})
    for cmd_name, attr in mapping.items():
        handler = getattr(module, attr)
        specs.append(CommandSpec(name=cmd_name, handler=handler, hidden=cmd_name in _HIDDEN))

    for alias, target in ALIASES.items():
        for spec in list(specs):
            if spec.name == target:
                specs.append(CommandSpec(name=alias, handler=spec.handler, hidden=True))
    return specs


def discover_commands(package_path: Path, package: str = "hop.commands") -> list[CommandSpec]:
    """Discover standalone command callables in the commands package."""
    function_commands: list[CommandSpec] = []

    for file in sorted(package_path.glob("*.py")):
        if file.name.startswith("_"):
            continue
        module_name = file.stem
        if module_name not in _FUNCTION_COMMANDS:
            continue
        module = importlib.import_module(f"{package}.{module_name}")
        function_commands.extend(_build_function_commands(module_name, module))

    logger.debug("Discovered %d commands", len(function_commands))
    return function_commands
