"""Run `tailor` from a checkout: `python -m main ter details news`.

Puts `src/` on `sys.path` so `cli`, `core` and `adapters` import without
`pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
