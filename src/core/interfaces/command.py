"""Contract of a TER request command.

A command is a small immutable struct: it knows how to describe its request
and which texts to show. Shared behavior (confirmation, raw/auth stamping,
execution) lives in one function in the CLI layer instead of a base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Protocol

from core.domain.models import Messages, RequestConfiguration
from core.domain.options import AuthMethod, ResultFormat

Confirm = Callable[[str], bool]


@dataclass(frozen=True)
class CommandSettings:
    """Per-command defaults, fixed when the command type is defined."""

    raw: bool = False
    auth_method: AuthMethod = AuthMethod.ALL
    result_format: ResultFormat = ResultFormat.KEY_VALUE
    confirmation_required: bool = False


class ClientRequestCommand(Protocol):
    settings: ClassVar[CommandSettings]

    def build_request_configuration(self) -> RequestConfiguration:
        ...

    def messages(self) -> Messages:
        ...
