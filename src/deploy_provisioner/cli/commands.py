"""CLI command implementations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from deploy_provisioner.cli import app
from deploy_provisioner.cli.errors import handle_error

ConfigPath = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the configuration file."),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


@app.command()
def validate(
    config: ConfigPath = Path("deploy.yaml"),
    no_color: NoColor = False,
) -> None:
    """Validate the configuration file and its SCM provider selections."""
    from deploy_provisioner.cli.formatting import format_validation_summary
    from deploy_provisioner.config import load, resolve

    color = _use_color(no_color)
    try:
        cfg = load(config)
        snapshots = resolve(cfg)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(format_validation_summary(len(snapshots), color=color))


@app.command()
def show(
    config: ConfigPath = Path("deploy.yaml"),
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print resolved deploys as JSON."),
    ] = False,
    no_color: NoColor = False,
) -> None:
    """Show every deploy with its derived paths, provider and hooks."""
    from deploy_provisioner.cli.formatting import format_snapshots
    from deploy_provisioner.config import load, resolve

    color = _use_color(no_color)
    try:
        cfg = load(config)
        snapshots = resolve(cfg)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    if as_json:
        from rich.console import Console

        console = Console(no_color=not color, highlight=color)
        console.print_json(data=[s.model_dump(mode="json") for s in snapshots])
        return

    typer.echo(format_snapshots(snapshots, color=color))
