"""`python -m main` from `src/`: runs the `tailor` CLI without the installed script."""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
