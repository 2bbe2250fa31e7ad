"""`tailor ter ...`: commands talking to the TER REST API."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from adapters.extension_files import EMCONF_FILENAME
from cli import token
from cli.command_runner import execute_client_request
from cli.options import ForceOption, PathOption, RawOption, fail, load_settings, resolve_extension_key
from core.commands import (
    DeleteExtension,
    ExtensionDetails,
    ExtensionVersions,
    FindExtensions,
    PublishVersion,
    RegisterExtension,
    TransferExtension,
    UpdateExtension,
    VersionDetails,
)
from core.commands.extension import MAX_PER_PAGE
from core.config import AppSettings
from core.interfaces.command import ClientRequestCommand
from core.services.version_validator import VersionValidator, is_valid_version_syntax

app = typer.Typer(no_args_is_help=True, help="Manage extensions in the TYPO3 Extension Repository (TER).")
app.add_typer(token.app, name="token")


def _run(command: ClientRequestCommand, *, raw: bool, force: bool = False, settings: AppSettings | None = None) -> None:
    code = execute_client_request(command, raw=raw, force=force, app_settings=settings)
    if code:
        raise typer.Exit(code=code)


def _check_version(version: str) -> str:
    if not is_valid_version_syntax(version):
        raise typer.BadParameter(
            f"{version!r} is not a valid version. Use the format major.minor.patch (e.g. 1.2.3).",
            param_hint="'VERSION'",
        )
    return version


@app.command()
def register(
    extension_key: str = typer.Argument(..., help="Extension key to register."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Register a new extension key in the TER."""

    _run(RegisterExtension(extension_key=extension_key), raw=raw, force=force)


@app.command()
def details(
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Fetch details about an extension."""

    settings = load_settings(raw=raw)
    key = resolve_extension_key(extension_key, settings=settings)
    _run(ExtensionDetails(extension_key=key), raw=raw, force=force, settings=settings)


@app.command()
def versions(
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """List all published versions of an extension."""

    settings = load_settings(raw=raw)
    key = resolve_extension_key(extension_key, settings=settings)
    _run(ExtensionVersions(extension_key=key), raw=raw, force=force, settings=settings)


@app.command("version-details")
def version_details(
    version: str = typer.Argument(..., help="Version to fetch, e.g. 1.2.3."),
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Fetch details about a specific version of an extension."""

    settings = load_settings(raw=raw)
    key = resolve_extension_key(extension_key, settings=settings)
    _run(VersionDetails(extension_key=key, version=_check_version(version)), raw=raw, force=force, settings=settings)


@app.command()
def find(
    page: int = typer.Option(1, "--page", min=1, help="Page number."),
    per_page: int = typer.Option(30, "--per-page", min=1, max=MAX_PER_PAGE, help="Results per page."),
    author: str = typer.Option("", "--author", help="Only extensions of this TYPO3 username."),
    typo3_version: str = typer.Option("", "--typo3-version", help="Only extensions supporting this TYPO3 major version."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Search extensions in the TER."""

    command = FindExtensions(page=page, per_page=per_page, author=author, typo3_version=typo3_version)
    _run(command, raw=raw, force=force)


@app.command()
def update(
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    composer: str = typer.Option("", "--composer", help="Composer package name, e.g. vendor/my-ext."),
    issues: str = typer.Option("", "--issues", help="Link to the issue tracker."),
    repository: str = typer.Option("", "--repository", help="Link to the source repository."),
    manual: str = typer.Option("", "--manual", help="Link to an external manual."),
    paypal: str = typer.Option("", "--paypal", help="PayPal donation link."),
    tags: str = typer.Option("", "--tags", help="Comma-separated list of tags."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Update the meta information of an extension."""

    settings = load_settings(raw=raw)
    key = resolve_extension_key(extension_key, settings=settings)
    command = UpdateExtension(
        extension_key=key,
        composer=composer,
        issues=issues,
        repository=repository,
        manual=manual,
        paypal=paypal,
        tags=tags,
    )
    _run(command, raw=raw, force=force, settings=settings)


@app.command()
def delete(
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Delete an extension and all its versions."""

    settings = load_settings(raw=raw)
    key = resolve_extension_key(extension_key, settings=settings)
    _run(DeleteExtension(extension_key=key), raw=raw, force=force, settings=settings)


@app.command()
def transfer(
    username: str = typer.Argument(..., help="TYPO3 username of the new owner."),
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Transfer ownership of an extension to another user."""

    settings = load_settings(raw=raw)
    key = resolve_extension_key(extension_key, settings=settings)
    _run(TransferExtension(extension_key=key, username=username), raw=raw, force=force, settings=settings)


@app.command()
def publish(
    version: str = typer.Argument(..., help="Version to publish, e.g. 1.2.3."),
    extension_key: Optional[str] = typer.Argument(None, help="Extension key (defaults to TYPO3_EXTENSION_KEY)."),
    artefact: Path = typer.Option(
        ...,
        "--artefact",
        help="ZIP archive of the extension to upload.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    path: Optional[Path] = PathOption,
    comment: str = typer.Option("", "--comment", help="Upload comment (defaults to 'Updated extension to <version>')."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Publish a new version of an extension."""

    settings = load_settings(raw=raw)
    extension_dir = path or Path.cwd()
    key = resolve_extension_key(extension_key, settings=settings, path=extension_dir)
    _check_version(version)

    if not VersionValidator(extension_dir / EMCONF_FILENAME).is_valid(version):
        fail(
            "error_version_mismatch",
            f"The version in {EMCONF_FILENAME} does not match {version}. Run `tailor set-version` first.",
            raw=raw,
        )

    command = PublishVersion(extension_key=key, version=version, artefact=artefact, comment=comment)
    _run(command, raw=raw, force=force, settings=settings)
