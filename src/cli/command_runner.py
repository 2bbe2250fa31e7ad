"""Shared execution skeleton of every TER request command.

Order of operations:
1. Ask for confirmation when the command requires it and `--force` is not set.
   Declining aborts cleanly with exit code 0.
2. Build the command's request configuration, stamped with raw output and the
   command's auth method.
3. Run it through `RequestService` with a fresh `FormatService`.
4. Return the service's exit code.
"""

from __future__ import annotations

import logging

import httpx
import typer
from rich.console import Console

from cli.format_service import FormatService
from core.config import AppSettings
from core.interfaces.command import ClientRequestCommand, Confirm
from core.services.request_service import EXIT_SUCCESS, RequestService

logger = logging.getLogger(__name__)


def default_confirm(prompt: str) -> bool:
    return typer.confirm(prompt, default=False)


def execute_client_request(
    command: ClientRequestCommand,
    *,
    raw: bool = False,
    force: bool = False,
    confirm: Confirm | None = None,
    console: Console | None = None,
    app_settings: AppSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    settings = command.settings
    messages = command.messages()
    console = console or Console()

    if settings.confirmation_required and not force:
        ask = confirm or default_confirm
        if not ask(messages.confirmation):
            console.print("[green]Execution aborted.[/green]")
            logger.debug("%s declined by user", type(command).__name__)
            return EXIT_SUCCESS

    configuration = (
        command.build_request_configuration()
        .with_raw(raw or settings.raw)
        .with_auth_method(settings.auth_method)
    )

    return RequestService(
        configuration,
        FormatService(console, messages, settings.result_format),
        settings=app_settings,
        transport=transport,
    ).run()
