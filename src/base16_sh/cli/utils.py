"""
Shared CLI helpers: version reporting, configuration and catalog loading.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass, replace
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from base16_sh.core.catalogs import Catalogs
from base16_sh.core.config import ServerConfig, load_config
from base16_sh.core.errors import Base16Error

console = Console()
err_console = Console(stderr=True)


def get_version() -> str:
    """Get the installed package version."""
    from base16_sh import __version__

    return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"base16-sh version {get_version()}")
        typer.echo(
            f"Python {platform.python_implementation()} {platform.python_version()} "
            f"on {platform.system()} {platform.machine()}"
        )
        raise typer.Exit()


@dataclass
class CliState:
    """Options from the top-level callback, shared by all commands."""

    config_path: Path | None = None
    data_dir: Path | None = None

    def config(self) -> ServerConfig:
        """Resolved configuration with the ``--data-dir`` override applied."""
        config = load_config(self.config_path)
        if self.data_dir is not None:
            config = replace(config, data_dir=self.data_dir)
        return config

    def catalogs(self) -> Catalogs:
        config = self.config()
        return Catalogs.build(
            config.schemes_dir,
            config.templates_dir,
            fuzzy_threshold=config.fuzzy_threshold,
        )


def get_state(ctx: typer.Context) -> CliState:
    """State object set up by the top-level callback (empty when run standalone)."""
    if not isinstance(ctx.obj, CliState):
        ctx.obj = CliState()
    return ctx.obj


def fail(error: Base16Error | str) -> typer.Exit:
    """Print an error in red and return an Exit(1) for the caller to raise."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}")
    return typer.Exit(code=1)
