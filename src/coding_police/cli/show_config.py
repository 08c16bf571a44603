"""Config command: show the effective thresholds."""

from dataclasses import fields
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..config import PROJECT_CONFIG_NAME, global_config_path
from . import app
from ._common import console, resolve_thresholds


@app.command("config")
def show_config(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Explicit TOML config file", exists=True, dir_okay=False
    ),
):
    """Show the thresholds a scan would use, after merging all sources."""
    thresholds = resolve_thresholds(config)

    table = Table(title="Coding Police Thresholds", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value", justify="right")

    for f in fields(thresholds):
        value = getattr(thresholds, f.name)
        if f.name == "exclude_patterns":
            value = ", ".join(value) if value else "(none)"
        table.add_row(f.name.replace("_", "-"), str(value))

    console.print(table)
    console.print(f"[dim]Global config: {global_config_path()}[/dim]")
    console.print(f"[dim]Project config: {Path.cwd() / PROJECT_CONFIG_NAME}[/dim]")
