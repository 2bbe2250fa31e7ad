"""httpx wrapper for the TER API.

Why a wrapper:
- Standardizes base URL, timeouts, headers and authentication for every command.
- Eases testing: a `httpx.MockTransport` can be injected instead of the network.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.options import AuthMethod
from core.errors import MissingCredentials

logger = logging.getLogger(__name__)


class BearerAuth(httpx.Auth):
    def __init__(self, token: str) -> None:
        self._token = token

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


def _basic_auth(settings: AppSettings) -> httpx.BasicAuth | None:
    if settings.api_username and settings.api_password:
        return httpx.BasicAuth(settings.api_username, settings.api_password)
    return None


def resolve_auth(settings: AppSettings, auth_method: AuthMethod) -> httpx.Auth | None:
    """Pick the authentication strategy for a request.

    - NONE: anonymous.
    - BASIC: username and password are required.
    - TOKEN: a bearer token is required.
    - ALL: token when set, otherwise username and password.
    """

    if auth_method is AuthMethod.NONE:
        return None

    if auth_method in (AuthMethod.TOKEN, AuthMethod.ALL) and settings.api_token:
        return BearerAuth(settings.api_token)
    if auth_method is AuthMethod.TOKEN:
        raise MissingCredentials("No access token configured. Set TYPO3_API_TOKEN.")

    basic = _basic_auth(settings)
    if basic is not None:
        return basic
    if auth_method is AuthMethod.BASIC:
        raise MissingCredentials("Username and password are required. Set TYPO3_API_USERNAME and TYPO3_API_PASSWORD.")
    raise MissingCredentials(
        "No credentials configured. Set TYPO3_API_TOKEN or TYPO3_API_USERNAME and TYPO3_API_PASSWORD."
    )


def build_client(
    settings: AppSettings | None = None,
    *,
    auth_method: AuthMethod = AuthMethod.ALL,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` bound to the TER API base URL.

    Raises `MissingCredentials` when the selected strategy cannot be satisfied.
    """

    settings = settings or AppSettings()
    auth = resolve_auth(settings, auth_method)
    logger.debug("Using %s authentication against %s", auth_method.label(), settings.api_base_url)

    return httpx.Client(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        },
        auth=auth,
        transport=transport,
    )
