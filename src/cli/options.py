"""Options and helpers shared by the request subcommands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.extension_files import read_composer_extension_key
from core.config import AppSettings

_console = Console()

RawOption = typer.Option(False, "--raw", "-r", help="Return result as raw object (e.g. json).")
ForceOption = typer.Option(False, "--force", "-f", help="Force execution, skipping confirmation questions.")
PathOption = typer.Option(
    None,
    "--path",
    help="Path to the extension directory (defaults to the current directory).",
    file_okay=False,
    dir_okay=True,
)


def resolve_extension_key(
    extension_key: str | None,
    *,
    settings: AppSettings,
    path: Path | None = None,
) -> str:
    """Argument first, then TYPO3_EXTENSION_KEY, then composer.json."""

    for candidate in (extension_key, settings.extension_key):
        if candidate and candidate.strip():
            return candidate.strip()

    key = read_composer_extension_key(path or Path.cwd())
    if key:
        return key
    raise typer.BadParameter(
        "No extension key given. Pass it as argument, set TYPO3_EXTENSION_KEY "
        "or add extra.typo3/cms.extension-key to composer.json.",
        param_hint="'EXTENSION_KEY'",
    )


def fail(reason: str, details: str, *, raw: bool = False) -> NoReturn:
    """Report a failure that happened before any request was sent and exit with 1."""

    if raw:
        _console.out(json.dumps({"error": reason, "error_description": details}), highlight=False)
    else:
        _console.print(f"[red]{escape(details)}[/red]")
    raise typer.Exit(code=1)


def load_settings(*, raw: bool = False) -> AppSettings:
    """AppSettings from env and .env files; invalid values end the command with exit 1."""

    try:
        return AppSettings()
    except ValidationError as exc:
        fail("error_settings", f"Invalid configuration: {exc}", raw=raw)
