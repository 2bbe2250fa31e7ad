"""`tailor ter token ...`: access token management."""

from __future__ import annotations

from typing import Optional

import typer

from cli.command_runner import execute_client_request
from cli.options import ForceOption, RawOption
from core.commands import CreateToken, RefreshToken, RevokeToken
from core.interfaces.command import ClientRequestCommand

app = typer.Typer(no_args_is_help=True, help="Create, refresh and revoke TER access tokens.")


def _run(command: ClientRequestCommand, *, raw: bool, force: bool) -> None:
    code = execute_client_request(command, raw=raw, force=force)
    if code:
        raise typer.Exit(code=code)


@app.command()
def create(
    name: str = typer.Option("", "--name", help="Name of the access token."),
    expires: Optional[int] = typer.Option(None, "--expires", min=1, help="Lifetime of the token in seconds."),
    scope: str = typer.Option("", "--scope", help="Comma-separated scopes, e.g. extension:read,extension:write."),
    extensions: str = typer.Option("", "--extensions", help="Comma-separated extension keys the token is limited to."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Create an access token (uses TYPO3_API_USERNAME / TYPO3_API_PASSWORD)."""

    _run(CreateToken(name=name, expires=expires, scope=scope, extensions=extensions), raw=raw, force=force)


@app.command()
def refresh(
    token: str = typer.Argument(..., help="Refresh token returned by `token create`."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Refresh an access token."""

    _run(RefreshToken(token=token), raw=raw, force=force)


@app.command()
def revoke(
    token: str = typer.Argument(..., help="Access token to revoke."),
    raw: bool = RawOption,
    force: bool = ForceOption,
) -> None:
    """Revoke an access token."""

    _run(RevokeToken(token=token), raw=raw, force=force)
