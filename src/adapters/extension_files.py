"""Reads and rewrites the files of a TYPO3 extension on disk.

Covers:
- `ext_emconf.php`: the `$EM_CONF[$_EXTKEY] = [...]` array (declared version).
- `composer.json`: `extra.typo3/cms.extension-key`.
- `Documentation/Settings.cfg` and `Documentation/guides.xml`: release/version.

PHP is never executed; the array is inspected textually, which is enough for
the flat key/value layout TYPO3 expects in ext_emconf.php.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from core.domain.models import ExtensionMetadata
from core.errors import MetadataMalformed, MetadataUnreadable, MetadataVersionMissing

logger = logging.getLogger(__name__)

EMCONF_FILENAME = "ext_emconf.php"

_EMCONF_ASSIGNMENT_RE = re.compile(r"\$EM_CONF\s*\[[^\]]+\]\s*=\s*(?:\[|array\s*\()", re.IGNORECASE)
_EMCONF_ENTRY_RE = r"""(['"]){key}\1\s*=>\s*(['"])(?P<value>.*?)\2"""
_SETTINGS_RELEASE_RE = re.compile(r"(?m)^([ \t]*release[ \t]*=[ \t]*).*$")
_SETTINGS_VERSION_RE = re.compile(r"(?m)^([ \t]*version[ \t]*=[ \t]*).*$")
_GUIDES_RELEASE_RE = re.compile(r'(<project\b[^>]*?\brelease=")[^"]*(")')
_GUIDES_VERSION_RE = re.compile(r'(<project\b[^>]*?\bversion=")[^"]*(")')


def _entry_re(key: str) -> re.Pattern[str]:
    return re.compile(_EMCONF_ENTRY_RE.format(key=re.escape(key)), re.DOTALL)


def _read_emconf(path: Path) -> str:
    if not path.is_file():
        raise MetadataUnreadable(f"{path} does not exist")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MetadataUnreadable(f"{path} could not be read: {exc}") from exc
    match = _EMCONF_ASSIGNMENT_RE.search(text)
    if match is None:
        raise MetadataMalformed(f"{path} does not assign an $EM_CONF array")
    return text


def load_extension_metadata(path: Path) -> ExtensionMetadata:
    """Parse `ext_emconf.php` into `ExtensionMetadata`.

    Raises `MetadataUnreadable` or `MetadataMalformed`. An absent or empty
    version yields `ExtensionMetadata(version=None)`.
    """

    text = _read_emconf(path)
    body = text[_EMCONF_ASSIGNMENT_RE.search(text).end() :]  # type: ignore[union-attr]

    m = _entry_re("version").search(body)
    version = m.group("value").strip() if m else ""
    return ExtensionMetadata(version=version or None)


def read_declared_version(path: Path) -> str:
    metadata = load_extension_metadata(path)
    if metadata.version is None:
        raise MetadataVersionMissing(f"{path} does not declare a version")
    return metadata.version


def update_emconf_version(path: Path, version: str) -> Path:
    """Rewrite the `'version' => '...'` entry of `ext_emconf.php`."""

    text = _read_emconf(path)
    m = _entry_re("version").search(text)
    if m is None:
        raise MetadataVersionMissing(f"{path} does not declare a version")

    path.write_text(text[: m.start("value")] + version + text[m.end("value") :], encoding="utf-8")
    logger.debug("Set version %s in %s", version, path)
    return path


def update_documentation_version(docs_dir: Path, version: str) -> list[Path]:
    """Update release/version in Settings.cfg and guides.xml when present.

    `release` receives the full version, `version` only `major.minor`.
    """

    short = ".".join(version.split(".")[:2])
    updated: list[Path] = []

    settings_cfg = docs_dir / "Settings.cfg"
    if settings_cfg.is_file():
        text = settings_cfg.read_text(encoding="utf-8")
        text = _SETTINGS_RELEASE_RE.sub(lambda m: f"{m.group(1)}{version}", text)
        text = _SETTINGS_VERSION_RE.sub(lambda m: f"{m.group(1)}{short}", text)
        settings_cfg.write_text(text, encoding="utf-8")
        updated.append(settings_cfg)

    guides_xml = docs_dir / "guides.xml"
    if guides_xml.is_file():
        text = guides_xml.read_text(encoding="utf-8")
        text = _GUIDES_RELEASE_RE.sub(lambda m: f"{m.group(1)}{version}{m.group(2)}", text)
        text = _GUIDES_VERSION_RE.sub(lambda m: f"{m.group(1)}{short}{m.group(2)}", text)
        guides_xml.write_text(text, encoding="utf-8")
        updated.append(guides_xml)

    for p in updated:
        logger.debug("Set version %s in %s", version, p)
    return updated


def read_composer_extension_key(extension_dir: Path) -> str | None:
    """Extension key from `composer.json` (`extra.typo3/cms.extension-key`)."""

    composer = extension_dir / "composer.json"
    if not composer.is_file():
        return None
    try:
        data = json.loads(composer.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable %s: %s", composer, exc)
        return None
    if not isinstance(data, dict):
        return None
    extra = data.get("extra")
    if not isinstance(extra, dict):
        return None
    typo3 = extra.get("typo3/cms")
    if not isinstance(typo3, dict):
        return None
    key = typo3.get("extension-key")
    if isinstance(key, str) and key.strip():
        return key.strip()
    return None
