"""TER request commands.

Why a package:
- One immutable struct per TER operation, grouped by resource.
- Each one satisfies `core.interfaces.command.ClientRequestCommand`.
"""

from core.commands.extension import (
    DeleteExtension,
    ExtensionDetails,
    ExtensionVersions,
    FindExtensions,
    RegisterExtension,
    TransferExtension,
    UpdateExtension,
    VersionDetails,
)
from core.commands.publish import PublishVersion
from core.commands.token import CreateToken, RefreshToken, RevokeToken

__all__ = [
    "CreateToken",
    "DeleteExtension",
    "ExtensionDetails",
    "ExtensionVersions",
    "FindExtensions",
    "PublishVersion",
    "RefreshToken",
    "RegisterExtension",
    "RevokeToken",
    "TransferExtension",
    "UpdateExtension",
    "VersionDetails",
]
