"""
Async authentication service.

Handles the Mashov login handshake.
"""
from typing import Optional

from .async_client import AsyncAPIClient
from .request import APIResponse, ResponseHandler
from ..exceptions import AuthError, AuthErrorKind
from ..logging import get_logger
from ..session.models import LoginRequest, SessionCredentials, SessionData


CSRF_HEADER = 'x-csrf-token'
SET_COOKIE_HEADER = 'set-cookie'


def parse_raw_cookie(raw_cookie: str) -> str:
    """
    Reduce a Set-Cookie header to a Cookie header value.

    Several Set-Cookie entries may arrive folded into one comma-separated
    header. Each entry keeps only its name=value pair; attributes such as
    Path, Domain or Expires are dropped. Empty entries are kept
    as empty pairs. A cookie value that itself contains a comma is split
    incorrectly.

    >>> parse_raw_cookie('a=1; Path=/, b=2; Domain=x; Secure')
    'a=1; b=2'
    >>> parse_raw_cookie('a=1, , b=2')
    'a=1; ; b=2'
    """
    return '; '.join(part.split(';', 1)[0].strip() for part in raw_cookie.split(','))


class AsyncAuthService:
    """
    Asynchronous authentication service.

    Performs the login request and extracts the session artifacts. Nothing
    is stored here; the caller commits the returned SessionData.
    """

    def __init__(self, client: AsyncAPIClient):
        """
        Initialize auth service.

        Args:
            client: Async API client
        """
        self._client = client
        self._logger = get_logger('mashovpy.auth')

    async def login(self, login: LoginRequest) -> SessionData:
        """
        Login to Mashov.

        Args:
            login: Account credentials

        Returns:
            SessionData with the decoded session and its credentials

        Raises:
            AuthError: If the response lacks any required part
        """
        builder = self._client.builder

        self._logger.debug(
            f"Logging in {login.username!r} (semel={login.semel}, year={login.year})"
        )
        response = await self._client.post_json(
            builder.LOGIN_PATH,
            builder.build_login_data(login),
            headers=builder.build_login_headers()
        )

        return self.parse_login_response(response)

    def parse_login_response(self, response: APIResponse) -> SessionData:
        """
        Extract session artifacts from a login response.

        Raises:
            AuthError: On the first missing or malformed part
        """
        status = response.status

        if not response.ok:
            raise AuthError(AuthErrorKind.HTTP_STATUS, status)

        info = ResponseHandler.parse_json(response.body)
        if info is None:
            raise AuthError(AuthErrorKind.EMPTY_RESPONSE, status)

        credential = info.get('credential') if isinstance(info, dict) else None
        if not credential or not isinstance(credential, dict):
            raise AuthError(AuthErrorKind.MISSING_CREDENTIAL, status)

        user_id = credential.get('userId')
        if not user_id:
            raise AuthError(AuthErrorKind.MISSING_USER_ID, status)
        credentials = SessionCredentials().with_user_id(str(user_id))

        token = ResponseHandler.header(response, CSRF_HEADER)
        if not token:
            raise AuthError(AuthErrorKind.MISSING_TOKEN, status)
        credentials = credentials.with_csrf_token(token)

        raw_cookie = ResponseHandler.header(response, SET_COOKIE_HEADER)
        if not raw_cookie:
            raise AuthError(AuthErrorKind.MISSING_COOKIE, status)

        cookie = parse_raw_cookie(raw_cookie)
        if not cookie:
            raise AuthError(AuthErrorKind.COOKIE_PARSE_FAILED, status)
        credentials = credentials.with_cookie(cookie)

        return SessionData(credentials=credentials, info=info)

    def describe(self, data: Optional[SessionData]) -> str:
        """Display name of a logged-in user, for log lines."""
        if data is None:
            return ''
        credential = data.info.get('credential') or {}
        return credential.get('displayName') or data.credentials.user_id
