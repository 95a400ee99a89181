"""
base16-sh command line.

    base16-sh serve                     run the HTTP server
    base16-sh schemes [--order color]   list scheme names
    base16-sh templates                 list template keys
    base16-sh show NAME                 print a scheme (raw YAML or --json)
    base16-sh variables NAME            print the template variables of a scheme
    base16-sh render SCHEME TEMPLATE    render a template to stdout
    base16-sh neighbors NAME            previous/next scheme in an ordering
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from base16_sh.core.errors import Base16Error
from base16_sh.core.models import SchemeOrder
from base16_sh.core.scheme_loader import read_scheme_source

from .utils import CliState, console, err_console, fail, get_state, version_callback

app = typer.Typer(
    name="base16-sh",
    help="Color scheme index and template renderer.",
    no_args_is_help=True,
)

OrderOption = Annotated[
    SchemeOrder,
    typer.Option("--order", "-o", help="alpha (by name) or color (by visual similarity)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output as JSON")]


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to base16.toml (default: ./base16.toml)"),
    ] = None,
    data_dir: Annotated[
        Path | None,
        typer.Option(
            "--data-dir",
            "-d",
            envvar="BASE16_DATA_DIR",
            help="Directory holding schemes/ and templates/",
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Color scheme index and template renderer."""
    ctx.obj = CliState(config_path=config, data_dir=data_dir)


@app.command()
def serve(
    ctx: typer.Context,
    host: Annotated[str | None, typer.Option("--host", help="Bind address")] = None,
    port: Annotated[int | None, typer.Option("--port", "-p", help="Bind port")] = None,
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    ] = None,
    no_log_file: Annotated[
        bool, typer.Option("--no-log-file", help="Log to the console only")
    ] = False,
) -> None:
    """Build the catalogs and start the HTTP server."""
    from base16_sh.runtime.logging import setup_logging
    from base16_sh.runtime.server import run_server

    state = get_state(ctx)
    try:
        config = state.config()
        overrides = {
            key: value
            for key, value in (("host", host), ("port", port), ("log_level", log_level))
            if value is not None
        }
        config = replace(config, **overrides).validate()
        setup_logging(None if no_log_file else config.log_dir, config.log_level)
        run_server(config)
    except Base16Error as e:
        raise fail(e) from e


@app.command()
def schemes(
    ctx: typer.Context,
    order: OrderOption = SchemeOrder.ALPHA,
    output_json: JsonOption = False,
) -> None:
    """List scheme names."""
    try:
        names = get_state(ctx).catalogs().list_scheme_names(order)
    except Base16Error as e:
        raise fail(e) from e

    if output_json:
        typer.echo(json.dumps(list(names)))
        return
    for name in names:
        typer.echo(name)


@app.command()
def templates(ctx: typer.Context, output_json: JsonOption = False) -> None:
    """List template keys."""
    try:
        catalogs = get_state(ctx).catalogs()
    except Base16Error as e:
        raise fail(e) from e

    if output_json:
        typer.echo(
            json.dumps(
                {
                    key: {"repo": record.source_repo, "path": record.path}
                    for key, record in sorted(catalogs.templates.records.items())
                }
            )
        )
        return

    if not len(catalogs.templates):
        console.print("[dim]No templates found.[/dim]")
        return

    table = Table(title="Templates")
    table.add_column("Key")
    table.add_column("Repository", style="dim")
    for key in catalogs.list_template_names():
        table.add_row(key, catalogs.templates.records[key].source_repo)
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Scheme name (fuzzy matched)")],
    output_json: JsonOption = False,
) -> None:
    """Print a scheme definition."""
    try:
        catalogs = get_state(ctx).catalogs()
        resolution = catalogs.resolve_scheme(name)
        if resolution.redirect:
            err_console.print(f"[dim]Resolved '{escape(name)}' to '{resolution.name}'[/dim]")
        if output_json:
            definition = catalogs.load_definition(resolution.record)
            typer.echo(json.dumps(definition.model_dump(mode="json"), indent=2))
        else:
            # Raw bytes: indexed files need not be UTF-8
            typer.echo(read_scheme_source(resolution.record), nl=False)
    except Base16Error as e:
        raise fail(e) from e


@app.command()
def variables(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Scheme name (fuzzy matched)")],
    output_json: JsonOption = False,
) -> None:
    """Print the template variables derived from a scheme."""
    try:
        catalogs = get_state(ctx).catalogs()
        record = catalogs.resolve_scheme(name).record
        bag = catalogs.derive_variables(record)
    except Base16Error as e:
        raise fail(e) from e

    if output_json:
        typer.echo(json.dumps(bag, indent=2, sort_keys=True))
        return

    table = Table(title=record.name)
    table.add_column("Variable")
    table.add_column("Value")
    for key in sorted(bag):
        table.add_row(key, bag[key])
    console.print(table)


@app.command()
def render(
    ctx: typer.Context,
    scheme: Annotated[str, typer.Argument(help="Scheme name (fuzzy matched)")],
    template: Annotated[str, typer.Argument(help="Template key, e.g. 'vim'")],
    order: OrderOption = SchemeOrder.ALPHA,
) -> None:
    """Render a template for a scheme to stdout."""
    from base16_sh.runtime.rendering import render_template

    try:
        catalogs = get_state(ctx).catalogs()
        record = catalogs.resolve_scheme(scheme).record
        template_record = catalogs.resolve_template(template)
        prev_name, next_name = catalogs.neighbors(record.name, order)
        output = render_template(
            template_record,
            catalogs.derive_variables(record),
            extra={"scheme-prev": prev_name, "scheme-next": next_name},
        )
    except Base16Error as e:
        raise fail(e) from e

    typer.echo(output, nl=False)


@app.command()
def neighbors(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Scheme name (fuzzy matched)")],
    order: OrderOption = SchemeOrder.ALPHA,
    output_json: JsonOption = False,
) -> None:
    """Show the previous and next scheme around NAME."""
    try:
        catalogs = get_state(ctx).catalogs()
        record = catalogs.resolve_scheme(name).record
    except Base16Error as e:
        raise fail(e) from e

    prev_name, next_name = catalogs.neighbors(record.name, order)
    if output_json:
        typer.echo(json.dumps({"name": record.name, "prev": prev_name, "next": next_name}))
        return
    console.print(f"  prev: {prev_name or '[dim]-[/dim]'}")
    console.print(f"  name: [bold]{record.name}[/bold]")
    console.print(f"  next: {next_name or '[dim]-[/dim]'}")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
