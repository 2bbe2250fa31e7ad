"""Extension commands (`extension/...` and `find` endpoints)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from core.domain.models import Messages, RequestConfiguration
from core.domain.options import AuthMethod, ResultFormat
from core.interfaces.command import CommandSettings

MAX_PER_PAGE = 100


@dataclass(frozen=True)
class RegisterExtension:
    extension_key: str

    settings: ClassVar[CommandSettings] = CommandSettings()

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(method="POST", endpoint=f"extension/{self.extension_key}")

    def messages(self) -> Messages:
        return Messages(
            title=f"Registering the extension key {self.extension_key}",
            success=f"Extension key {self.extension_key} was successfully registered.",
            failure=f"Extension key {self.extension_key} could not be registered.",
        )


@dataclass(frozen=True)
class ExtensionDetails:
    extension_key: str

    settings: ClassVar[CommandSettings] = CommandSettings(
        auth_method=AuthMethod.NONE,
        result_format=ResultFormat.DETAIL,
    )

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(endpoint=f"extension/{self.extension_key}")

    def messages(self) -> Messages:
        return Messages(
            title=f"Details of extension {self.extension_key}",
            success=f"Successfully fetched details of extension {self.extension_key}.",
            failure=f"Could not fetch details of extension {self.extension_key}.",
        )


@dataclass(frozen=True)
class ExtensionVersions:
    extension_key: str

    settings: ClassVar[CommandSettings] = CommandSettings(
        auth_method=AuthMethod.NONE,
        result_format=ResultFormat.TABLE,
    )

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(endpoint=f"extension/{self.extension_key}/versions")

    def messages(self) -> Messages:
        return Messages(
            title=f"Versions of extension {self.extension_key}",
            success=f"Successfully fetched versions of extension {self.extension_key}.",
            failure=f"Could not fetch versions of extension {self.extension_key}.",
        )


@dataclass(frozen=True)
class VersionDetails:
    extension_key: str
    version: str

    settings: ClassVar[CommandSettings] = CommandSettings(
        auth_method=AuthMethod.NONE,
        result_format=ResultFormat.DETAIL,
    )

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(endpoint=f"extension/{self.extension_key}/{self.version}")

    def messages(self) -> Messages:
        return Messages(
            title=f"Details of version {self.version} of extension {self.extension_key}",
            success=f"Successfully fetched version {self.version} of extension {self.extension_key}.",
            failure=f"Could not fetch version {self.version} of extension {self.extension_key}.",
        )


@dataclass(frozen=True)
class FindExtensions:
    page: int = 1
    per_page: int = 30
    author: str = ""
    typo3_version: str = ""

    settings: ClassVar[CommandSettings] = CommandSettings(
        auth_method=AuthMethod.NONE,
        result_format=ResultFormat.TABLE,
    )

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be 1 or greater")
        if not 1 <= self.per_page <= MAX_PER_PAGE:
            raise ValueError(f"per page must be between 1 and {MAX_PER_PAGE}")

    def build_request_configuration(self) -> RequestConfiguration:
        query: dict[str, str | int] = {"page": self.page, "per_page": self.per_page}
        if self.author:
            query["filter[username]"] = self.author
        if self.typo3_version:
            query["filter[typo3_version]"] = self.typo3_version
        return RequestConfiguration(endpoint="find", query=query)

    def messages(self) -> Messages:
        return Messages(
            title="Extensions in the TER",
            success="Successfully fetched extensions.",
            failure="Could not fetch extensions.",
        )


@dataclass(frozen=True)
class UpdateExtension:
    extension_key: str
    composer: str = ""
    issues: str = ""
    repository: str = ""
    manual: str = ""
    paypal: str = ""
    tags: str = ""

    settings: ClassVar[CommandSettings] = CommandSettings()

    def build_request_configuration(self) -> RequestConfiguration:
        fields = {
            "composer_name": self.composer,
            "forge_link": self.issues,
            "repository_url": self.repository,
            "external_manual": self.manual,
            "paypal_url": self.paypal,
            "tags": self.tags,
        }
        form = {k: v for k, v in fields.items() if v}
        return RequestConfiguration(method="PUT", endpoint=f"extension/{self.extension_key}", form=form)

    def messages(self) -> Messages:
        return Messages(
            title=f"Updating meta information of extension {self.extension_key}",
            success=f"Meta information of extension {self.extension_key} was successfully updated.",
            failure=f"Meta information of extension {self.extension_key} could not be updated.",
        )


@dataclass(frozen=True)
class DeleteExtension:
    extension_key: str

    settings: ClassVar[CommandSettings] = CommandSettings(
        result_format=ResultFormat.NONE,
        confirmation_required=True,
    )

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(method="DELETE", endpoint=f"extension/{self.extension_key}")

    def messages(self) -> Messages:
        return Messages(
            title=f"Deleting extension {self.extension_key}",
            success=f"Extension {self.extension_key} was successfully deleted.",
            failure=f"Extension {self.extension_key} could not be deleted.",
            confirmation=f"Are you sure you want to delete the extension {self.extension_key}?",
        )


@dataclass(frozen=True)
class TransferExtension:
    extension_key: str
    username: str

    settings: ClassVar[CommandSettings] = CommandSettings(confirmation_required=True)

    def build_request_configuration(self) -> RequestConfiguration:
        return RequestConfiguration(
            method="POST",
            endpoint=f"extension/{self.extension_key}/transfer/{self.username}",
        )

    def messages(self) -> Messages:
        return Messages(
            title=f"Transferring extension {self.extension_key} to {self.username}",
            success=f"Extension {self.extension_key} was successfully transferred to {self.username}.",
            failure=f"Extension {self.extension_key} could not be transferred to {self.username}.",
            confirmation=(
                f"Are you sure you want to transfer the extension {self.extension_key} to {self.username}? "
                "You will lose access to it."
            ),
        )
