"""Shell integration setup.

Provides the `hop init` command, which prints (or installs) the wrapper
function that turns hop's jump exit code into a directory change.
"""

from __future__ import annotations

import re

import typer
from rich.markup import escape

from hop.core.console import console, stderr_console
from hop.core.paths import APP_NAME, app_config_dir
from hop.core.result import ConfigDirUnavailable, Err, Ok
from hop.core.shell import (
    DEFAULT_SHELL,
    SUPPORTED_SHELLS,
    install_init_script,
    render_init_script,
    shell_spec,
)

_FUNCTION_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


def init(
    shell: str = typer.Option(
        DEFAULT_SHELL, "--shell", "-s", metavar="SHELL", help="bash, zsh, fish or powershell."
    ),
    install: bool = typer.Option(
        False, "--install", help="Write the script to the config directory instead of printing it."
    ),
    cmd: str = typer.Option(APP_NAME, "--cmd", help="Name of the shell function to define."),
) -> None:
    """Print the shell integration script for SHELL."""
    if shell_spec(shell).is_err():
        stderr_console.print(f"[red]Unsupported shell: {escape(shell)}[/red]")
        stderr_console.print(f"Supported shells: {', '.join(SUPPORTED_SHELLS)}")
        raise typer.Exit(code=1)

    if not _FUNCTION_NAME.fullmatch(cmd):
        stderr_console.print(f"[red]Invalid function name: {escape(cmd)}[/red]")
        raise typer.Exit(code=1)

    if not install:
        typer.echo(render_init_script(shell, cmd).unwrap(), nl=False)
        return

    try:
        config_dir = app_config_dir()
    except ConfigDirUnavailable:
        stderr_console.print(
            "[red]Could not determine config directory. "
            "Remove --install to print the script instead.[/red]"
        )
        raise typer.Exit(code=1)

    match install_init_script(shell, config_dir, cmd):
        case Err(err):
            stderr_console.print(f"[red]{escape(str(err))}[/red]")
            raise typer.Exit(code=1)
        case Ok(path):
            console.print(f"Wrote initialization script to {escape(str(path))}")
