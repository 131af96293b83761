from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter

import click
import typer
from rich.markup import escape
from typer.core import TyperGroup

from . import __version__
from .commands.shortcuts import list_shortcuts
from .core.config import HopConfig, load_config
from .core.console import console, setup_logging, stderr_console
from .core.registry import discover_commands

JUMP_COMMAND = "jump"

logger = logging.getLogger(__name__)


class ShortcutGroup(TyperGroup):
    """Command group that treats an unknown first word as a shortcut name.

    `hop proj` runs the hidden jump command with `proj`, while `hop add proj`
    still runs `add`. The routing command itself is not addressable, so
    `hop jump` looks up a shortcut called `jump`.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and not args[0].startswith("-"):
            if args[0] == JUMP_COMMAND or self.get_command(ctx, args[0]) is None:
                args = [JUMP_COMMAND, *args]
        return super().resolve_command(ctx, args)


app = typer.Typer(
    cls=ShortcutGroup,
    help="hop: quickly hop between saved directories.",
    invoke_without_command=True,
    add_completion=False,
)


@dataclass
class AppState:
    config: HopConfig


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a hop config file (TOML)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    loaded_config, meta = load_config(config_path=config)
    logger = setup_logging(level=loaded_config.log_level, verbose=verbose)

    ctx.obj = AppState(config=loaded_config)

    if meta.error:
        # Safe mode: keep going on defaults, but never on stdout.
        stderr_console.print(
            f"[yellow]Ignoring invalid configuration {escape(str(meta.path))}: "
            f"{escape(meta.error)}[/yellow]"
        )
    else:
        logger.debug(
            "Loaded configuration from %s (file loaded: %s, env overrides: %s)",
            meta.path,
            meta.file_loaded,
            sorted(meta.env_overrides),
        )

    if ctx.invoked_subcommand is None:
        list_shortcuts(ctx)


@app.command("version")
def show_version() -> None:
    """Print the hop version."""
    console.print(__version__)


def _register_commands() -> None:
    commands_path = Path(__file__).resolve().parent / "commands"
    for spec in discover_commands(commands_path):
        app.command(spec.name, hidden=spec.hidden)(spec.handler)


def _register_commands_with_timing() -> None:
    start = perf_counter()
    _register_commands()
    elapsed = perf_counter() - start
    logger.debug("Command registry initialized in %.3f seconds", elapsed)


_register_commands_with_timing()


def cli() -> None:
    app()


if __name__ == "__main__":
    cli()
