"""Tailor CLI entrypoint.

Composes the Typer apps:
- `tailor ter ...` (TER REST API, incl. `tailor ter token ...`)
- `tailor set-version`
- `tailor version`
"""

from __future__ import annotations

import typer

from cli import set_version, ter
from cli.logging_setup import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="tailor",
    add_completion=False,
    no_args_is_help=True,
    help="Publish and manage TYPO3 extensions in the TYPO3 Extension Repository (TER).",
)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests and diagnostics to stderr."),
) -> None:
    """Tailor CLI."""
    configure_logging(verbose)


@app.command("version")
def version() -> None:
    """Print the installed Tailor version."""

    typer.echo(__version__)


app.add_typer(ter.app, name="ter")
app.command("set-version")(set_version.set_version)


def run() -> None:
    app()
