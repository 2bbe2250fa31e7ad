"""Pytest configuration.

The repo follows the `src/` layout with top-level packages `cli`, `core` and
`adapters`. `src/` is put on `sys.path` so tests also run without an editable
install.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep real TYPO3_* variables and .env files out of the tests."""

    for name in list(os.environ):
        if name.upper().startswith("TYPO3_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def emconf_dir() -> Path:
    return FIXTURES_DIR / "emconf"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)


def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    def _make(status_code: int = 200, payload: Any = None) -> RecordingTransport:
        return RecordingTransport(lambda request: json_response(status_code, payload if payload is not None else {}))

    return _make


def write_extension(root: Path, *, version: str = "1.0.0", key: str | None = None) -> Path:
    """Create a minimal extension directory (ext_emconf.php, optional composer.json)."""

    root.mkdir(parents=True, exist_ok=True)
    (root / "ext_emconf.php").write_text(
        "<?php\n\n$EM_CONF[$_EXTKEY] = [\n"
        "    'title' => 'Demo',\n"
        f"    'version' => '{version}',\n"
        "];\n",
        encoding="utf-8",
    )
    if key:
        composer = {"name": f"vendor/{key}", "extra": {"typo3/cms": {"extension-key": key}}}
        (root / "composer.json").write_text(json.dumps(composer), encoding="utf-8")
    return root
