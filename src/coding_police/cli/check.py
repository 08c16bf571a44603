"""Check command: scan files on disk and report violations."""

import logging
from pathlib import Path
from typing import List, Optional

import typer

from ..engine import scan_content
from ..exceptions import FileAccessError
from ..formatters import FileReport, get_formatter
from ..hook import read_source, should_scan
from ..logging_config import setup_logging
from . import app
from ._common import err_console, resolve_thresholds

logger = logging.getLogger(__name__)


@app.command()
def check(
    paths: List[Path] = typer.Argument(..., help="Files to scan", show_default=False),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Output format: text, json or github",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Explicit TOML config file",
        exists=True,
        dir_okay=False,
    ),
    max_file_lines: Optional[int] = typer.Option(
        None, "--max-file-lines", help="Override file length limit"
    ),
    max_function_lines: Optional[int] = typer.Option(
        None, "--max-function-lines", help="Override function length limit"
    ),
    min_duplicate_lines: Optional[int] = typer.Option(
        None, "--min-duplicate-lines", help="Override minimum duplicate block size"
    ),
    max_exports: Optional[int] = typer.Option(None, "--max-exports", help="Override export limit"),
    strict: bool = typer.Option(False, "--strict", help="Exit with code 1 when violations are found"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Scan source files for hygiene violations.

    Non-code files, lockfiles and generated files are skipped, as are paths
    matching the configured exclude patterns.

    [bold cyan]Examples:[/bold cyan]

      coding-police check src/app.ts

      coding-police check --format github --strict $(git diff --name-only)
    """
    setup_logging(verbose=verbose, quiet=quiet)

    try:
        formatter = get_formatter(output_format)
    except ValueError as e:
        err_console.print(f"[red]{e}[/red]", highlight=False)
        raise typer.Exit(2)

    thresholds = resolve_thresholds(
        config, max_file_lines, max_function_lines, min_duplicate_lines, max_exports
    )

    reports: list[FileReport] = []
    for path in paths:
        if not should_scan(str(path), thresholds):
            continue
        try:
            content = read_source(path)
        except FileAccessError as e:
            logger.warning("%s", e)
            continue

        violations = scan_content(path, content, thresholds)
        if violations is not None:
            reports.append(FileReport(path=str(path), violations=violations))

    formatter.render(reports, thresholds)

    if strict and reports:
        raise typer.Exit(1)
