"""
Custom exceptions for Mashov client operations.

Every failure surfaces as a subclass of MashovException. Nothing is retried
internally; callers inspect the exception type, kind and status to decide.
"""
from enum import Enum
from typing import Optional


class MashovException(Exception):
    """Base exception for all Mashov-related errors."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status: HTTP status code of the failing response (if available)
        """
        self.message = message
        self.status = status
        super().__init__(message)


class AuthErrorKind(Enum):
    """Reasons a login handshake can fail."""

    EMPTY_RESPONSE = "empty_response"
    HTTP_STATUS = "http_status"
    MISSING_CREDENTIAL = "missing_credential"
    MISSING_USER_ID = "missing_user_id"
    MISSING_TOKEN = "missing_token"
    MISSING_COOKIE = "missing_cookie"
    COOKIE_PARSE_FAILED = "cookie_parse_failed"


_AUTH_MESSAGES = {
    AuthErrorKind.EMPTY_RESPONSE: "Login failed. Empty response body",
    AuthErrorKind.HTTP_STATUS: "Login failed with status {status}",
    AuthErrorKind.MISSING_CREDENTIAL: "Login failed. No credential in response",
    AuthErrorKind.MISSING_USER_ID: "Login failed. No credential.userId in response",
    AuthErrorKind.MISSING_TOKEN: "Login failed. No x-csrf-token header",
    AuthErrorKind.MISSING_COOKIE: "Login failed. No set-cookie header",
    AuthErrorKind.COOKIE_PARSE_FAILED: "Login failed. Failed to parse cookie",
}


class AuthError(MashovException):
    """Exception raised when the login handshake fails."""

    def __init__(self, kind: AuthErrorKind, status: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            kind: Which step of the handshake failed
            status: HTTP status code of the login response
        """
        self.kind = kind
        super().__init__(_AUTH_MESSAGES[kind].format(status=status), status)


class NotAuthenticatedError(MashovException):
    """Exception raised when a data request is issued before login."""

    def __init__(self, message: str = "Not logged in. Call login() first.") -> None:
        super().__init__(message)


class RequestFailedError(MashovException):
    """Exception raised when a data request returns a non-2xx status."""

    def __init__(self, status: int, url: Optional[str] = None) -> None:
        self.url = url
        super().__init__(f"Request failed with status {status}", status)


class DecodeError(MashovException):
    """Exception raised when a response body does not decode to JSON."""
    pass


class MashovConnectionError(MashovException):
    """Exception raised when the transport fails before a response arrives."""
    pass
