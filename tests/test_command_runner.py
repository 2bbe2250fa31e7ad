from __future__ import annotations

import io
import json
from dataclasses import dataclass
from typing import ClassVar

import pytest
from rich.console import Console

from cli.command_runner import execute_client_request
from core.config import AppSettings
from core.domain.models import Messages, RequestConfiguration
from core.domain.options import AuthMethod, ResultFormat
from core.interfaces.command import CommandSettings


@dataclass(frozen=True)
class DangerousCommand:
    settings: ClassVar[CommandSettings] = CommandSettings(
        auth_method=AuthMethod.TOKEN,
        result_format=ResultFormat.KEY_VALUE,
        confirmation_required=True,
    )

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(method="DELETE", endpoint="extension/news")

    def messages(self) -> Messages:
        return Messages(
            title="Deleting",
            success="Deleted.",
            failure="Not deleted.",
            confirmation="Really delete news?",
        )


@dataclass(frozen=True)
class RawByDefaultCommand:
    settings: ClassVar[CommandSettings] = CommandSettings(raw=True, auth_method=AuthMethod.NONE)

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(endpoint="find")

    def messages(self) -> Messages:
        return Messages(title="Find", success="Found.", failure="Nothing.")


class Prompt:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer


@pytest.fixture
def console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api_token="secret")


def test_declined_confirmation_aborts_without_request(console, settings, make_transport) -> None:
    con, out = console
    transport = make_transport(200, {})
    prompt = Prompt(False)

    code = execute_client_request(
        DangerousCommand(), confirm=prompt, console=con, app_settings=settings, transport=transport
    )

    assert code == 0
    assert prompt.questions == ["Really delete news?"]
    assert transport.requests == []
    assert "Execution aborted." in out.getvalue()


def test_accepted_confirmation_runs_request(console, settings, make_transport) -> None:
    con, out = console
    transport = make_transport(200, {"deleted": True})
    prompt = Prompt(True)

    code = execute_client_request(
        DangerousCommand(), confirm=prompt, console=con, app_settings=settings, transport=transport
    )

    assert code == 0
    assert len(prompt.questions) == 1
    assert transport.requests[0].method == "DELETE"
    assert transport.requests[0].headers["Authorization"] == "Bearer secret"
    assert "Deleted." in out.getvalue()


def test_force_skips_prompt(console, settings, make_transport) -> None:
    con, _ = console
    transport = make_transport(200, {})
    prompt = Prompt(False)

    code = execute_client_request(
        DangerousCommand(), force=True, confirm=prompt, console=con, app_settings=settings, transport=transport
    )

    assert code == 0
    assert prompt.questions == []
    assert len(transport.requests) == 1


def test_raw_flag_overrides_result_format(console, settings, make_transport) -> None:
    con, out = console
    transport = make_transport(200, {"deleted": True})

    code = execute_client_request(
        DangerousCommand(), raw=True, force=True, console=con, app_settings=settings, transport=transport
    )

    assert code == 0
    assert json.loads(out.getvalue()) == {"deleted": True}


def test_raw_default_from_command_settings(console, settings, make_transport) -> None:
    con, out = console
    transport = make_transport(200, {"results": 0})

    code = execute_client_request(RawByDefaultCommand(), console=con, app_settings=settings, transport=transport)

    assert code == 0
    assert json.loads(out.getvalue()) == {"results": 0}
    assert "Authorization" not in transport.requests[0].headers


def test_failure_exit_code_is_propagated(console, settings, make_transport) -> None:
    con, out = console
    transport = make_transport(500, {"error": "server_error"})

    code = execute_client_request(DangerousCommand(), force=True, console=con, app_settings=settings, transport=transport)

    assert code == 1
    assert "Not deleted." in out.getvalue()
