"""Publishing a new extension version.

The artefact is a ready-made ZIP; building it is outside this tool.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from core.domain.models import Messages, RequestConfiguration
from core.interfaces.command import CommandSettings


@dataclass(frozen=True)
class PublishVersion:
    extension_key: str
    version: str
    artefact: Path
    comment: str = ""

    settings: ClassVar[CommandSettings] = CommandSettings()

    @property
    def description(self) -> str:
        return self.comment.strip() or f"Updated extension to {self.version}"

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(
            method="POST",
            endpoint=f"extension/{self.extension_key}/{self.version}",
            form={"description": self.description, "gplCompliant": "1"},
            files={"file": self.artefact},
        )

    def messages(self) -> Messages:
        return Messages(
            title=f"Publishing version {self.version} of extension {self.extension_key}",
            success=f"Version {self.version} of extension {self.extension_key} was successfully published.",
            failure=f"Version {self.version} of extension {self.extension_key} could not be published.",
        )
