"""Hook command: post-edit entry point for editing pipelines."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from ..hook import handle_tool_after, load_thresholds
from ..logging_config import setup_logging
from . import app

logger = logging.getLogger(__name__)


@app.command()
def hook(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit TOML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Read a tool-result payload from stdin and print the tool output.

    The payload is a JSON object with [bold]tool[/bold], [bold]path[/bold]
    (or [bold]title[/bold]), [bold]output[/bold] and an optional
    [bold]worktree[/bold]. Violations are appended to the output; the
    command always exits 0 so the edit is never blocked.
    """
    setup_logging(verbose=verbose)

    raw = sys.stdin.read()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Ignoring malformed hook payload: %s", e)
        return
    if not isinstance(payload, dict):
        logger.warning("Ignoring hook payload that is not a JSON object")
        return

    output = payload.get("output")
    if output is None:
        output = ""
    elif not isinstance(output, str):
        output = json.dumps(output)

    result = handle_tool_after(
        tool=payload.get("tool"),
        path=payload.get("path") or payload.get("title"),
        output=output,
        worktree=payload.get("worktree"),
        thresholds=load_thresholds(config),
    )
    typer.echo(result)
