"""CLI entry point — registers all subcommands."""

import typer

from .. import __version__

app = typer.Typer(
    name="coding-police",
    help="Coding Police - post-edit code hygiene scanner",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"coding-police {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Coding Police - post-edit code hygiene scanner."""


def main() -> None:
    app()


# Import subcommands to register them
from .check import check as _check  # noqa: F401, E402
from .hook import hook as _hook  # noqa: F401, E402
from .show_config import show_config as _show_config  # noqa: F401, E402
