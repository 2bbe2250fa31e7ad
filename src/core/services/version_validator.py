"""Checks a version string against the one declared in ext_emconf.php.

`ter publish` uses it to refuse uploading a version that the extension's own
metadata does not declare. The check is equality-based: the candidate is valid
when it is well-formed and equal to the declared version.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from adapters.extension_files import read_declared_version
from core.errors import MetadataError

logger = logging.getLogger(__name__)

VERSION_RE = re.compile(r"^\d{1,3}\.\d{1,3}\.\d{1,3}$")


def is_valid_version_syntax(version: str) -> bool:
    """TER versions are `major.minor.patch`, each with 1-3 digits."""

    return bool(VERSION_RE.match(version or ""))


def _version_key(version: str) -> tuple[int, ...]:
    return tuple(int(part) for part in version.split("."))


class VersionValidator:
    def __init__(self, file_path: Path | str) -> None:
        self._file_path = Path(file_path)

    def is_valid(self, version: str) -> bool:
        try:
            declared = read_declared_version(self._file_path)
        except MetadataError as exc:
            logger.debug("No declared version available: %s", exc)
            return False

        if not is_valid_version_syntax(version) or not is_valid_version_syntax(declared):
            return False
        return _version_key(declared) == _version_key(version)
