"""Exceptions raised by the client itself.

Transport and HTTP status errors are not wrapped: they surface as the
``httpx`` exceptions raised by the underlying request.
"""

from typing import Optional


class BetfairError(Exception):
    """Base class for client errors."""


class NotLoggedInError(BetfairError):
    """A betting request was attempted without a session token."""

    def __init__(self, message: str = "No session token. Call login() or pass session_token."):
        super().__init__(message)


class LoginError(BetfairError):
    """The identity endpoint rejected a login, keep-alive or logout."""

    def __init__(self, status: str, error: Optional[str] = None):
        self.status = status
        self.error = error
        super().__init__(f"{status}: {error}" if error else status)
