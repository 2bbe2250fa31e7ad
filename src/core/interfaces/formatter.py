"""Output contract used by the request service.

Why Protocol:
- The core decides *what* to report (result, raw payload, error); the CLI
  decides *how* it looks. The request service never imports Rich.
- Tests can pass a recording stub instead of a real console.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from core.domain.models import Messages


@runtime_checkable
class ResultFormatter(Protocol):
    """Minimal contract for rendering the outcome of one API call."""

    @property
    def messages(self) -> Messages:
        ...

    def write_result(self, content: Any) -> None:
        """Render a successful, decoded response for humans."""

        ...

    def write_raw(self, content: Any) -> None:
        """Emit the decoded response unmodified, for scripts."""

        ...

    def write_error(self, message: str, details: str | None = None, status_code: int | None = None) -> None:
        ...
