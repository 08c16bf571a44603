"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import Thresholds, load_config
from ..exceptions import ConfigurationError

console = Console()
err_console = Console(stderr=True)


def resolve_thresholds(
    config: Optional[Path] = None,
    max_file_lines: Optional[int] = None,
    max_function_lines: Optional[int] = None,
    min_duplicate_lines: Optional[int] = None,
    max_exports: Optional[int] = None,
) -> Thresholds:
    """Build thresholds from config files and CLI options."""
    try:
        return load_config(
            config_file=config,
            max_file_lines=max_file_lines,
            max_function_lines=max_function_lines,
            min_duplicate_lines=min_duplicate_lines,
            max_exports_per_file=max_exports,
        )
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}", markup=True, highlight=False)
        raise typer.Exit(2)
