"""Shortcut commands: jump, add, list, remove and fuzzy pick.

Jumping speaks to the shell wrapper: the resolved path is printed as the
only line on stdout and the process exits with EXIT_CD. Every other
outcome prints human-readable text and exits 0 (nothing to do) or 1
(failure).
"""

from __future__ import annotations

import logging
import os

import typer
from rich.markup import escape

from hop.core.console import console, stderr_console
from hop.core.finder import FzfFinder, InteractiveFinder
from hop.core.paths import normalize
from hop.core.result import ConfigDirUnavailable, EmptyStore, Err, Ok
from hop.core.select import SEPARATOR, fuzzy_pick, resolve
from hop.core.shell import EXIT_CD
from hop.core.store import Shortcuts, ShortcutStore

logger = logging.getLogger(__name__)


def _open_store(ctx: typer.Context) -> ShortcutStore:
    state = ctx.obj
    try:
        return ShortcutStore.default(state.config)
    except ConfigDirUnavailable as exc:
        stderr_console.print(f"[red]{_text(exc.message)}[/red]")
        raise typer.Exit(code=1)


def _load(store: ShortcutStore) -> Shortcuts:
    match store.load():
        case Err(err):
            stderr_console.print(f"[red]Error loading shortcuts: {_text(str(err))}[/red]")
            raise typer.Exit(code=1)
        case Ok(shortcuts):
            return shortcuts


def _save(store: ShortcutStore, shortcuts: Shortcuts) -> None:
    match store.save(shortcuts):
        case Err(err):
            stderr_console.print(f"[red]Could not save shortcuts: {_text(str(err))}[/red]")
            raise typer.Exit(code=1)
        case Ok(_):
            pass


def _finder(ctx: typer.Context) -> InteractiveFinder:
    config = ctx.obj.config
    return FzfFinder(config.finder, config.finder_args)


def _text(value: str) -> str:
    """Markup-safe display form; undecodable path bytes show as `?`."""
    return escape(value.encode("utf-8", "replace").decode("utf-8"))


def _entry(name: str, path: str) -> str:
    return f"[bold green]{_text(name)}[/bold green]{SEPARATOR}[blue]{_text(path)}[/blue]"


def _hop_to(path: str) -> None:
    """Hand a directory to the shell wrapper and exit with EXIT_CD."""
    logger.debug("Resolved %s", path)
    # bytes so undecodable directory names reach the shell unchanged
    typer.echo(os.fsencode(path))
    raise typer.Exit(code=EXIT_CD)


def jump(
    ctx: typer.Context,
    name: str = typer.Argument(..., metavar="SHORTCUT", help="Shortcut to jump to."),
) -> None:
    """Print the directory saved under SHORTCUT for the shell wrapper."""
    shortcuts = _load(_open_store(ctx))

    match resolve(shortcuts, name):
        case Err(err):
            stderr_console.print(f"[red]{_text(err.message)}[/red]")
            raise typer.Exit(code=1)
        case Ok(path):
            _hop_to(path)


def add(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Name for the current directory."),
) -> None:
    """Save the current directory under NAME."""
    if not name:
        stderr_console.print("[red]Shortcut name cannot be empty[/red]")
        raise typer.Exit(code=1)

    store = _open_store(ctx)
    shortcuts = _load(store)

    if name in shortcuts:
        console.print(f"[yellow]Shortcut `{_text(name)}` already exists[/yellow]")
        return

    try:
        current_dir = os.getcwd()
    except OSError:
        current_dir = ""
    if not current_dir or not os.path.isdir(current_dir):
        stderr_console.print("[red]Current directory is not valid[/red]")
        raise typer.Exit(code=1)

    path = normalize(current_dir)
    shortcuts[name] = path
    _save(store, shortcuts)

    console.print(f"Added: {_entry(name, path)}")


def list_shortcuts(ctx: typer.Context) -> None:
    """List saved shortcuts."""
    shortcuts = _load(_open_store(ctx))

    if not shortcuts:
        console.print("No shortcuts yet. Use `hop add <name>` to add one.")
        return

    width = max(len(name) for name in shortcuts)
    for name in sorted(shortcuts):
        console.print(_entry(name.ljust(width), shortcuts[name]))


def remove(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Shortcut to remove."),
) -> None:
    """Remove the shortcut NAME."""
    store = _open_store(ctx)
    shortcuts = _load(store)

    if name not in shortcuts:
        console.print(f"[yellow]Shortcut `{_text(name)}` does not exist[/yellow]")
        return

    path = shortcuts.pop(name)
    _save(store, shortcuts)

    console.print(f"Removed: {_entry(name, path)}")


def fuzzy(ctx: typer.Context) -> None:
    """Pick a shortcut interactively with fzf and go to its directory."""
    shortcuts = _load(_open_store(ctx))

    match fuzzy_pick(shortcuts, _finder(ctx)):
        case Err(EmptyStore() as err):
            stderr_console.print(f"[yellow]{_text(err.message)}[/yellow]")
        case Err(err):
            stderr_console.print(f"[red]{_text(err.message)}[/red]")
            raise typer.Exit(code=1)
        case Ok(None):
            logger.debug("Fuzzy pick cancelled")
        case Ok(path):
            _hop_to(path)
