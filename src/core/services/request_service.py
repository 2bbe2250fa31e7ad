"""Executes one TER API call and reports the outcome.

This is the only place that talks to the network. Every failure (transport,
missing credentials, invalid settings, rejected request) is reported through
the formatter and turned into a non-zero exit code; `run()` never raises.
With raw output every outcome, failures included, is a single JSON document.
"""

from __future__ import annotations

import json
import logging
from contextlib import ExitStack
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import RequestConfiguration
from core.errors import MissingCredentials, RequestRejectedByServer, RequestTransportFailure, TailorError
from core.interfaces.formatter import ResultFormatter

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def decode_content(response: httpx.Response) -> Any:
    """Decode a response body; empty → `{}`, non-JSON → `{"content": text}`."""

    text = response.text
    if not text.strip():
        return {}
    try:
        return json.loads(text)
    except ValueError:
        return {"content": text}


def error_details(content: Any) -> str | None:
    """Human readable reason from a TER error payload."""

    if not isinstance(content, dict):
        return None
    for key in ("error_description", "message", "error", "content"):
        value = content.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


class RequestService:
    def __init__(
        self,
        configuration: RequestConfiguration,
        formatter: ResultFormatter,
        *,
        settings: AppSettings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._configuration = configuration
        self._formatter = formatter
        self._settings = settings
        self._transport = transport

    def run(self) -> int:
        config = self._configuration
        try:
            content = self._send()
        except RequestRejectedByServer as exc:
            logger.info("Request rejected with HTTP %s", exc.status_code)
            if config.raw:
                self._formatter.write_raw(exc.content)
            else:
                self._formatter.write_error(
                    self._formatter.messages.failure,
                    error_details(exc.content),
                    exc.status_code,
                )
            return EXIT_FAILURE
        except (TailorError, ValidationError) as exc:
            logger.info("Request not completed: %s", exc)
            self._report_local_failure(exc)
            return EXIT_FAILURE

        if config.raw:
            self._formatter.write_raw(content)
        else:
            self._formatter.write_result(content)
        return EXIT_SUCCESS

    def _report_local_failure(self, exc: Exception) -> None:
        """Failures that happen before the server answered."""

        if isinstance(exc, ValidationError):
            reason = "error_settings"
            details = f"Invalid configuration: {exc}"
        elif isinstance(exc, MissingCredentials):
            reason, details = "error_credentials", str(exc)
        elif isinstance(exc, RequestTransportFailure):
            reason, details = "error_transport", str(exc)
        else:
            reason, details = "error_request", str(exc)

        if self._configuration.raw:
            self._formatter.write_raw({"error": reason, "error_description": details})
        else:
            self._formatter.write_error(self._formatter.messages.failure, details)

    def _send(self) -> Any:
        config = self._configuration
        settings = self._settings or AppSettings()

        with ExitStack() as stack:
            files: dict[str, tuple[str, Any, str]] = {}
            for field_name, path in config.files.items():
                try:
                    handle = stack.enter_context(path.open("rb"))
                except OSError as exc:
                    raise TailorError(f"Could not open {path}: {exc}") from exc
                files[field_name] = (path.name, handle, "application/octet-stream")

            client = stack.enter_context(
                build_client(settings, auth_method=config.auth_method, transport=self._transport)
            )
            logger.debug("%s %s%s", config.method, client.base_url, config.endpoint)
            try:
                response = client.request(
                    config.method,
                    config.endpoint,
                    params=config.query or None,
                    data=config.form or None,
                    files=files or None,
                )
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise RequestTransportFailure(f"Request to {config.endpoint} failed: {exc}") from exc

        logger.debug("HTTP %s from %s", response.status_code, config.endpoint)
        content = decode_content(response)
        if not response.is_success:
            raise RequestRejectedByServer(
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                content=content,
            )
        return content
