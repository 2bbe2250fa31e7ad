"""Access token commands (`auth/token` endpoints).

Tokens are created with username and password; the token itself is then used
for every other authenticated command.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from core.domain.models import Messages, RequestConfiguration
from core.domain.options import AuthMethod, ResultFormat
from core.interfaces.command import CommandSettings


@dataclass(frozen=True)
class CreateToken:
    name: str = ""
    expires: int | None = None
    scope: str = ""
    extensions: str = ""

    settings: ClassVar[CommandSettings] = CommandSettings(auth_method=AuthMethod.BASIC)

    def build_request_configuration(self) -> RequestConfiguration:
        form: dict[str, str] = {}
        if self.name:
            form["name"] = self.name
        if self.expires is not None:
            form["expires"] = str(self.expires)
        if self.scope:
            form["scope"] = self.scope
        if self.extensions:
            form["extensions"] = self.extensions
        return RequestConfiguration(method="POST", endpoint="auth/token", form=form)

    def messages(self) -> Messages:
        return Messages(
            title="Creating an access token",
            success="Access token was successfully created.",
            failure="Access token could not be created.",
        )


@dataclass(frozen=True)
class RefreshToken:
    token: str

    settings: ClassVar[CommandSettings] = CommandSettings(auth_method=AuthMethod.BASIC)

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(method="POST", endpoint="auth/token/refresh", form={"token": self.token})

    def messages(self) -> Messages:
        return Messages(
            title="Refreshing an access token",
            success="Access token was successfully refreshed.",
            failure="Access token could not be refreshed.",
        )


@dataclass(frozen=True)
class RevokeToken:
    token: str

    settings: ClassVar[CommandSettings] = CommandSettings(
        auth_method=AuthMethod.BASIC,
        result_format=ResultFormat.NONE,
        confirmation_required=True,
    )

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(method="POST", endpoint="auth/token/revoke", form={"token": self.token})

    def messages(self) -> Messages:
        return Messages(
            title="Revoking an access token",
            success="Access token was successfully revoked.",
            failure="Access token could not be revoked.",
            confirmation="Are you sure you want to revoke the access token?",
        )
