"""Base HTTP client holding the session and authentication headers."""

import logging
from typing import Any, Optional

import httpx

from .config import BETTING_URL, DEFAULT_TIMEOUT, IDENTITY_URL, Config
from .exceptions import LoginError

logger = logging.getLogger(__name__)


class BaseClient:
    """Base HTTP client that sends the app key and session token."""

    def __init__(
        self,
        app_key: str,
        *,
        session_token: Optional[str] = None,
        locale: str = "",
        betting_url: Optional[str] = None,
        identity_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            app_key: Application key sent as X-Application
            session_token: Existing session token (skip login())
            locale: Locale injected into betting requests, e.g. "en"
            betting_url: Override BETTING_URL
            identity_url: Override IDENTITY_URL
            timeout: Request timeout in seconds
            transport: Custom httpx transport (mocking, proxies)
        """
        self.config = Config(
            app_key=app_key,
            locale=locale,
            timeout=timeout,
            betting_url=(betting_url or BETTING_URL).rstrip("/"),
            identity_url=(identity_url or IDENTITY_URL).rstrip("/"),
        )
        self.session_token = session_token
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={"X-Application": app_key, "Accept": "application/json"},
        )

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def logged_in(self) -> bool:
        return bool(self.session_token)

    def _auth_headers(self) -> dict[str, str]:
        if not self.session_token:
            return {}
        return {"X-Authentication": self.session_token}

    def _post(
        self,
        url: str,
        *,
        json: Optional[Any] = None,
        data: Optional[dict[str, str]] = None,
        **kwargs,
    ) -> httpx.Response:
        """
        Make a POST request with the session headers.

        Args:
            url: Absolute URL
            json: JSON body
            data: Form body
        """
        headers = {**self._auth_headers(), **kwargs.pop("headers", {})}
        return self._client.post(url, json=json, data=data, headers=headers, **kwargs)

    # -----------------------------
    # Identity: login / keep-alive / logout
    # -----------------------------

    def login(self, username: str, password: str) -> str:
        """Interactive login. Stores and returns the session token."""
        result = self._identity_call("login", data={"username": username, "password": password})
        self.session_token = result["token"]
        logger.info("Logged in as %s", username)
        return self.session_token

    def keep_alive(self) -> str:
        """Extend the current session. Returns the (possibly new) token."""
        result = self._identity_call("keepAlive")
        self.session_token = result.get("token") or self.session_token
        logger.debug("Session kept alive")
        return self.session_token

    def logout(self) -> None:
        """End the current session."""
        self._identity_call("logout")
        self.session_token = None
        logger.info("Logged out")

    def _identity_call(self, endpoint: str, *, data: Optional[dict[str, str]] = None) -> dict:
        resp = self._post(f"{self.config.identity_url}/{endpoint}", data=data)
        resp.raise_for_status()
        result = resp.json()
        status = result.get("status", "")
        if status != "SUCCESS":
            raise LoginError(status, result.get("error"))
        return result
