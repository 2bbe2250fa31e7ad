"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets the format service reuse grids/tables for every TER resource.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (str, int, float, bool))


def stringify(value: Any) -> str:
    """Flatten a JSON value for a single table cell."""

    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, list) and all(is_scalar(v) for v in value):
        return ", ".join(stringify(v) for v in value) or "-"
    if is_scalar(value):
        return str(value)
    return json.dumps(value, ensure_ascii=False, sort_keys=True)


def humanize_key(key: str) -> str:
    return key.replace("_", " ").strip().capitalize()


def print_title(console: Console, title: str) -> None:
    console.print(Text(title, style="bold cyan"))
    console.print(Text("=" * len(title), style="cyan"))


def build_key_value_grid(items: Iterable[tuple[str, Any]]) -> Table:
    """Aligned `key: value` rows (keys right-padded by the grid)."""

    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bright_green", no_wrap=True)
    grid.add_column(style="white")
    for key, value in items:
        grid.add_row(f"{key}:", stringify(value))
    return grid


def build_records_table(records: list[Mapping[str, Any]], *, title: str | None = None) -> Table:
    """Table whose columns are the union of scalar keys, in first-seen order."""

    columns: list[str] = []
    for record in records:
        for key, value in record.items():
            if key not in columns and (is_scalar(value) or isinstance(value, list)):
                columns.append(key)

    table = Table(title=title)
    for i, column in enumerate(columns):
        table.add_column(humanize_key(column), style="cyan" if i == 0 else "white", no_wrap=i == 0)
    for record in records:
        table.add_row(*(stringify(record.get(c)) for c in columns))
    return table


def build_error_panel(message: str, details: str | None = None, status_code: int | None = None) -> Panel:
    body = Text(message, style="bold")
    if details:
        body.append(f"\n{details}", style="none")
    if status_code is not None:
        body.append(f"\nHTTP status: {status_code}", style="dim")
    return Panel(body, title=Text("Error", style="bold red"), border_style="red")
