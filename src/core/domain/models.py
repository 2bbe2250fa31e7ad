"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to I/O libraries.
- Immutable request descriptions: a command builds one configuration and
  nothing mutates it once it is handed to the request service.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.options import AuthMethod


class ExtensionMetadata(BaseModel):
    """Metadata declared by an extension in its `ext_emconf.php`.

    A missing version means the file does not declare one.
    """

    model_config = ConfigDict(frozen=True)

    version: str | None = Field(
        default=None,
        description="Version declared under the 'version' key, if any.",
    )


class Messages(BaseModel):
    """Static text bundle of a command."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        min_length=1,
        description="Heading printed before a formatted result.",
    )
    success: str = Field(
        ...,
        min_length=1,
        description="Printed when the API accepted the request.",
    )
    failure: str = Field(
        ...,
        min_length=1,
        description="Printed when the request failed or was rejected.",
    )
    confirmation: str = Field(
        default="",
        description="Question asked before a confirmation-required command runs.",
    )


class RequestConfiguration(BaseModel):
    """Describes exactly one call against the TER API.

    The `with_*` helpers return modified copies so callers can still chain:

        config.with_raw(True).with_auth_method(AuthMethod.TOKEN)
    """

    model_config = ConfigDict(frozen=True)

    method: str = Field(
        default="GET",
        pattern=r"^(GET|POST|PUT|DELETE)$",
        description="HTTP method.",
    )
    endpoint: str = Field(
        ...,
        min_length=1,
        description="Path relative to the API base URL (e.g. 'extension/news').",
    )
    query: dict[str, Any] = Field(
        default_factory=dict,
        description="Query string parameters.",
    )
    form: dict[str, Any] = Field(
        default_factory=dict,
        description="Form fields (urlencoded, or multipart when files are sent).",
    )
    files: dict[str, Path] = Field(
        default_factory=dict,
        description="Multipart upload fields mapped to local file paths.",
    )
    raw: bool = Field(
        default=False,
        description="Emit the decoded response as JSON instead of formatting it.",
    )
    auth_method: AuthMethod = Field(
        default=AuthMethod.ALL,
        description="Authentication strategy used for the request.",
    )

    def with_raw(self, raw: bool) -> "RequestConfiguration":
        return self.model_copy(update={"raw": raw})

    def with_auth_method(self, auth_method: AuthMethod) -> "RequestConfiguration":
        return self.model_copy(update={"auth_method": auth_method})
