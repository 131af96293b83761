"""Shell initialization snippets.

Each supported shell gets a wrapper function that runs the `hop` binary,
captures its stdout and changes directory when the binary exits with
EXIT_CD. The snippets are Jinja2 templates shipped in hop/templates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from hop.core.paths import APP_NAME
from hop.core.result import Err, HopError, Ok, Result, UnsupportedShell

logger = logging.getLogger(__name__)

EXIT_CD = 42
DEFAULT_SHELL = "bash"


@dataclass(frozen=True)
class ShellSpec:
    template: str
    filename: str


_SHELLS: dict[str, ShellSpec] = {
    "bash": ShellSpec("init.bash.j2", "hop.sh"),
    "zsh": ShellSpec("init.bash.j2", "hop.sh"),
    "fish": ShellSpec("init.fish.j2", "hop.fish"),
    "powershell": ShellSpec("init.ps1.j2", "hop.ps1"),
    "pwsh": ShellSpec("init.ps1.j2", "hop.ps1"),
    "ps1": ShellSpec("init.ps1.j2", "hop.ps1"),
}

SUPPORTED_SHELLS = ("bash", "zsh", "fish", "powershell")


def resolve_template_root() -> Path:
    """Return the packaged templates directory."""
    package_templates = Path(__file__).parent.parent / "templates"
    if package_templates.is_dir():
        return package_templates.resolve()
    raise FileNotFoundError("No templates directory found")


@lru_cache(maxsize=2)
def get_template_environment(template_root: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_root)),
        autoescape=False,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def shell_spec(shell: str) -> Result[ShellSpec, UnsupportedShell]:
    spec = _SHELLS.get(shell.lower())
    if spec is None:
        return Err(
            UnsupportedShell(
                f"Unsupported shell: {shell}",
                context={"supported": ", ".join(SUPPORTED_SHELLS)},
            )
        )
    return Ok(spec)


def render_init_script(
    shell: str = DEFAULT_SHELL, function: str = APP_NAME
) -> Result[str, UnsupportedShell]:
    """Render the wrapper snippet for a shell.

    Args:
        shell: Shell name (bash, zsh, fish, powershell/pwsh/ps1).
        function: Name of the wrapper function the snippet defines.
    """
    match shell_spec(shell):
        case Err(err):
            return Err(err)
        case Ok(spec):
            pass

    env = get_template_environment(resolve_template_root())
    try:
        template = env.get_template(spec.template)
    except TemplateNotFound as exc:
        raise FileNotFoundError(f"Template {spec.template} not found") from exc
    return Ok(template.render(function=function, binary=APP_NAME, exit_code=EXIT_CD))


def install_init_script(
    shell: str, config_dir: Path, function: str = APP_NAME
) -> Result[Path, HopError]:
    """Write the rendered snippet into the config directory.

    Returns:
        Ok(path) of the written file.
    """
    match shell_spec(shell):
        case Err(err):
            return Err(err)
        case Ok(spec):
            pass

    script = render_init_script(shell, function).unwrap()
    target = config_dir / spec.filename
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(script, encoding="utf-8")
    except OSError as exc:
        return Err(
            HopError(f"Failed to write init script: {exc}", context={"path": str(target)})
        )

    logger.debug("Wrote %s init script to %s", shell, target)
    return Ok(target)


__all__ = [
    "DEFAULT_SHELL",
    "EXIT_CD",
    "SUPPORTED_SHELLS",
    "install_init_script",
    "render_init_script",
    "shell_spec",
]
