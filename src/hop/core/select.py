"""Shortcut selection: direct lookup and interactive fuzzy pick.

Both paths end in at most one resolved absolute path. Fuzzy pick speaks a
small line protocol with the finder: each entry goes in as
`<index>. <name> -> <portable path>` and the chosen line comes back
unchanged, so everything after the first ` -> ` is the path.
"""

from __future__ import annotations

from collections.abc import Mapping

from hop.core.finder import InteractiveFinder
from hop.core.paths import expand
from hop.core.result import (
    EmptyStore,
    Err,
    FinderParseError,
    HopError,
    Ok,
    Result,
    ShortcutNotFound,
)

SEPARATOR = " -> "
INDEX_WIDTH_BASE = 2


def resolve(shortcuts: Mapping[str, str], name: str) -> Result[str, ShortcutNotFound]:
    """Exact, case-sensitive lookup returning the expanded path."""
    if name not in shortcuts:
        return Err(ShortcutNotFound(f"Shortcut `{name}` not found"))
    return Ok(expand(shortcuts[name]))


def render_entries(shortcuts: Mapping[str, str]) -> list[str]:
    """Format shortcuts as numbered finder lines, sorted by name."""
    index_width = len(str(len(shortcuts))) + INDEX_WIDTH_BASE
    return [
        f"{f'{index}.':<{index_width}}{name}{SEPARATOR}{shortcuts[name]}"
        for index, name in enumerate(sorted(shortcuts), start=1)
    ]


def parse_selection(output: str) -> Result[str, FinderParseError]:
    """Extract and expand the path from a line echoed back by the finder."""
    selection = output.strip()
    _, found, path = selection.partition(SEPARATOR)
    if not found:
        return Err(FinderParseError("Failed to parse selection", context={"output": selection}))
    return Ok(expand(path))


def fuzzy_pick(
    shortcuts: Mapping[str, str], finder: InteractiveFinder
) -> Result[str | None, HopError]:
    """Let the user choose a shortcut interactively.

    Returns:
        Ok(path) on a selection, Ok(None) when the user cancelled,
        Err(EmptyStore) without launching the finder when there is nothing
        to pick, Err(FinderUnavailable) or Err(FinderParseError) otherwise.
    """
    if not shortcuts:
        return Err(EmptyStore("No shortcuts yet."))

    match finder.pick(render_entries(shortcuts)):
        case Err(err):
            return Err(err)
        case Ok(None):
            return Ok(None)
        case Ok(output):
            return parse_selection(output)


__all__ = [
    "INDEX_WIDTH_BASE",
    "SEPARATOR",
    "fuzzy_pick",
    "parse_selection",
    "render_entries",
    "resolve",
]
