"""Enumerations shared by the request layer and the CLI.

Keeping them in the domain layer lets the HTTP adapter, the services and the
CLI agree on the same values without importing each other.
"""

from __future__ import annotations

from enum import Enum


class AuthMethod(str, Enum):
    """Authentication strategy attached to a TER request."""

    NONE = "none"
    BASIC = "basic"
    TOKEN = "token"
    ALL = "all"

    def label(self) -> str:
        """Human readable label for prompts and logging."""

        return {
            AuthMethod.NONE: "anonymous",
            AuthMethod.BASIC: "username/password",
            AuthMethod.TOKEN: "bearer token",
            AuthMethod.ALL: "token or username/password",
        }[self]


class ResultFormat(str, Enum):
    """How a successful response is rendered for humans."""

    NONE = "none"
    KEY_VALUE = "key-value"
    DETAIL = "detail"
    TABLE = "table"
