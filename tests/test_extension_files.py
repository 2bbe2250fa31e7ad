from __future__ import annotations

import json
from pathlib import Path

import pytest

from adapters.extension_files import (
    load_extension_metadata,
    read_composer_extension_key,
    read_declared_version,
    update_documentation_version,
    update_emconf_version,
)
from core.domain.models import ExtensionMetadata
from core.errors import MetadataMalformed, MetadataUnreadable, MetadataVersionMissing


def test_load_metadata_from_short_array_syntax(emconf_dir: Path) -> None:
    metadata = load_extension_metadata(emconf_dir / "emconf_valid.php")
    assert metadata == ExtensionMetadata(version="1.0.0")


def test_load_metadata_from_long_array_syntax(emconf_dir: Path) -> None:
    metadata = load_extension_metadata(emconf_dir / "emconf_no_version.php")
    assert metadata == ExtensionMetadata(version=None)


def test_missing_file_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(MetadataUnreadable):
        load_extension_metadata(tmp_path / "ext_emconf.php")


def test_foreign_structure_is_malformed(emconf_dir: Path) -> None:
    with pytest.raises(MetadataMalformed):
        load_extension_metadata(emconf_dir / "emconf_invalid.php")


def test_read_declared_version_requires_version(emconf_dir: Path) -> None:
    with pytest.raises(MetadataVersionMissing):
        read_declared_version(emconf_dir / "emconf_no_version.php")


def test_update_emconf_version_only_touches_version(tmp_path: Path, emconf_dir: Path) -> None:
    target = tmp_path / "ext_emconf.php"
    original = (emconf_dir / "emconf_valid.php").read_text(encoding="utf-8")
    target.write_text(original, encoding="utf-8")

    update_emconf_version(target, "2.3.4")

    updated = target.read_text(encoding="utf-8")
    assert "'version' => '2.3.4'," in updated
    assert updated.replace("2.3.4", "1.0.0") == original
    assert load_extension_metadata(target).version == "2.3.4"


def test_update_emconf_version_without_version_entry(tmp_path: Path, emconf_dir: Path) -> None:
    target = tmp_path / "ext_emconf.php"
    target.write_text((emconf_dir / "emconf_no_version.php").read_text(encoding="utf-8"), encoding="utf-8")
    with pytest.raises(MetadataVersionMissing):
        update_emconf_version(target, "2.0.0")


def test_update_documentation_version(tmp_path: Path) -> None:
    docs = tmp_path / "Documentation"
    docs.mkdir()
    (docs / "Settings.cfg").write_text(
        "[general]\nproject = Demo\nversion = 1.0\nrelease = 1.0.0\n",
        encoding="utf-8",
    )
    (docs / "guides.xml").write_text(
        '<?xml version="1.0" encoding="UTF-8"?>\n<guides>\n  <project title="Demo" release="1.0.0" version="1.0" copyright="2024"/>\n</guides>\n',
        encoding="utf-8",
    )

    updated = update_documentation_version(docs, "2.1.3")

    assert updated == [docs / "Settings.cfg", docs / "guides.xml"]
    settings = (docs / "Settings.cfg").read_text(encoding="utf-8")
    assert "version = 2.1\n" in settings
    assert "release = 2.1.3\n" in settings
    guides = (docs / "guides.xml").read_text(encoding="utf-8")
    assert 'release="2.1.3" version="2.1"' in guides
    assert guides.startswith('<?xml version="1.0"')


def test_update_documentation_version_without_files(tmp_path: Path) -> None:
    assert update_documentation_version(tmp_path / "Documentation", "1.0.0") == []


def test_composer_extension_key(tmp_path: Path) -> None:
    (tmp_path / "composer.json").write_text(
        json.dumps({"extra": {"typo3/cms": {"extension-key": "my_ext"}}}),
        encoding="utf-8",
    )
    assert read_composer_extension_key(tmp_path) == "my_ext"


@pytest.mark.parametrize("content", ["not json", "[]", '{"extra": []}', '{"extra": {"typo3/cms": {}}}'])
def test_composer_extension_key_missing(tmp_path: Path, content: str) -> None:
    (tmp_path / "composer.json").write_text(content, encoding="utf-8")
    assert read_composer_extension_key(tmp_path) is None
