"""Rich rendering of TER responses.

Implements `core.interfaces.formatter.ResultFormatter` for the terminal:
- key/value, detail and table views for humans;
- one-line JSON for scripts (`--raw`).
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from rich.console import Console
from rich.text import Text

from cli.ui_components import (
    build_error_panel,
    build_key_value_grid,
    build_records_table,
    humanize_key,
    is_scalar,
    print_title,
)
from core.domain.models import Messages
from core.domain.options import ResultFormat


def _records(value: Any) -> list[Mapping[str, Any]] | None:
    if isinstance(value, list) and value and all(isinstance(v, Mapping) for v in value):
        return value
    return None


class FormatService:
    def __init__(
        self,
        console: Console,
        messages: Messages,
        result_format: ResultFormat = ResultFormat.KEY_VALUE,
    ) -> None:
        self._console = console
        self._messages = messages
        self._format = result_format

    @property
    def messages(self) -> Messages:
        return self._messages

    def write_result(self, content: Any) -> None:
        if self._format is ResultFormat.NONE:
            self._success()
        elif self._format is ResultFormat.KEY_VALUE:
            self._success()
            self._key_value(content)
        elif self._format is ResultFormat.DETAIL:
            self._detail(content)
        else:
            self._table(content)

    def write_raw(self, content: Any) -> None:
        self._console.out(json.dumps(content, ensure_ascii=False), highlight=False)

    def write_error(self, message: str, details: str | None = None, status_code: int | None = None) -> None:
        self._console.print(build_error_panel(message, details, status_code))

    def _success(self) -> None:
        self._console.print(Text(self._messages.success, style="green"))

    def _key_value(self, content: Any) -> None:
        if isinstance(content, Mapping) and content:
            self._console.print(build_key_value_grid((humanize_key(str(k)), v) for k, v in content.items()))
        elif isinstance(content, list) and content:
            self._table(content)

    def _detail(self, content: Any) -> None:
        print_title(self._console, self._messages.title)
        if not isinstance(content, Mapping):
            self._key_value(content)
            return

        scalars = [(humanize_key(str(k)), v) for k, v in content.items() if is_scalar(v) or _is_flat_list(v)]
        if scalars:
            self._console.print(build_key_value_grid(scalars))

        for key, value in content.items():
            if is_scalar(value) or _is_flat_list(value):
                continue
            self._console.print()
            self._console.print(f"[bold]{humanize_key(str(key))}[/bold]")
            records = _records(value)
            if records is not None:
                self._console.print(build_records_table(records))
            elif isinstance(value, Mapping):
                self._console.print(build_key_value_grid((humanize_key(str(k)), v) for k, v in value.items()))
            else:
                self._console.print("-")

    def _table(self, content: Any) -> None:
        print_title(self._console, self._messages.title)
        records = _records(content)
        if records is not None:
            self._console.print(build_records_table(records))
            return
        if not isinstance(content, Mapping):
            self._console.print("No results.")
            return

        meta = [(humanize_key(str(k)), v) for k, v in content.items() if is_scalar(v)]
        if meta:
            self._console.print(build_key_value_grid(meta))

        printed = False
        for key, value in content.items():
            records = _records(value)
            if records is not None:
                self._console.print(build_records_table(records, title=humanize_key(str(key))))
                printed = True
        if not printed and not meta:
            self._console.print("No results.")


def _is_flat_list(value: Any) -> bool:
    return isinstance(value, list) and all(is_scalar(v) for v in value)
