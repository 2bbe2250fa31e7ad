"""`tailor set-version`: write a new version into the extension's files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from adapters.extension_files import EMCONF_FILENAME, update_documentation_version, update_emconf_version
from cli.options import PathOption, load_settings
from core.errors import MetadataError
from core.services.version_validator import is_valid_version_syntax

_console = Console()


def set_version(
    version: str = typer.Argument(..., help="New version, e.g. 1.2.3."),
    path: Optional[Path] = PathOption,
    no_docs: bool = typer.Option(False, "--no-docs", help="Do not update Documentation/Settings.cfg and guides.xml."),
) -> None:
    """Update the version in ext_emconf.php and the documentation settings."""

    if not is_valid_version_syntax(version):
        raise typer.BadParameter(
            f"{version!r} is not a valid version. Use the format major.minor.patch (e.g. 1.2.3).",
            param_hint="'VERSION'",
        )

    settings = load_settings()
    extension_dir = path or Path.cwd()

    try:
        updated = [update_emconf_version(extension_dir / EMCONF_FILENAME, version)]
    except MetadataError as exc:
        _console.print(f"[red]Could not update {EMCONF_FILENAME}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    if not (no_docs or settings.disable_docs_version_update):
        updated.extend(update_documentation_version(extension_dir / "Documentation", version))

    for p in updated:
        _console.print(f"[green]Updated[/green] {p}")
    _console.print(f"[green]Version set to {version}.[/green]")
