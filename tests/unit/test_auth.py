"""Tests for the login handshake."""
import json

import pytest

from mashovpy import AsyncAuthService, AuthError, AuthErrorKind, SessionState


class TestAsyncAuthService:
    """Test suite for AsyncAuthService."""

    @pytest.fixture
    def auth(self, api):
        """Create auth service bound to the mock session."""
        return AsyncAuthService(api)

    @pytest.mark.asyncio
    async def test_login_extracts_credentials(self, auth, http_session, make_response, login_request, login_response, login_body):
        """Test a complete response yields all three artifacts."""
        http_session.request.side_effect = [login_response]

        data = await auth.login(login_request)

        assert data.credentials.user_id == 'user-123'
        assert data.credentials.csrf_token == 'csrf-abc'
        assert data.credentials.cookie == 'MashovAuthToken=tok1; Csrf-Token=csrf-abc'
        assert data.credentials.state is SessionState.AUTHENTICATED
        assert data.info == login_body

    @pytest.mark.asyncio
    async def test_login_request_shape(self, auth, http_session, make_response, login_request, login_response):
        """Test the login is one JSON POST to /login."""
        http_session.request.side_effect = [login_response]

        await auth.login(login_request)

        assert http_session.request.call_count == 1
        args, kwargs = http_session.request.call_args
        assert args == ('POST', 'https://web.mashov.info/api/login')
        assert kwargs['headers']['Content-Type'] == 'application/json'
        body = json.loads(kwargs['data'])
        assert body['username'] == 'dana'
        assert body['password'] == 's3cret'
        assert body['semel'] == 123456
        assert body['year'] == 2025
        assert body['appName'] == 'info.mashov.students'

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 401, 403, 500])
    async def test_http_status(self, auth, http_session, make_response, login_request, login_body, login_headers, status):
        http_session.request.side_effect = [make_response(status, login_body, login_headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.HTTP_STATUS
        assert exc_info.value.status == status
        assert str(status) in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_http_status_with_html_body(self, auth, http_session, make_response, login_request):
        """Test a failed status wins over an undecodable body."""
        http_session.request.side_effect = [make_response(502, '<html>Bad gateway</html>')]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.HTTP_STATUS
        assert exc_info.value.status == 502

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [None, 'null', 'not json', b'\xff\xfe\xfa'])
    async def test_empty_response(self, auth, http_session, make_response, login_request, login_headers, body):
        http_session.request.side_effect = [make_response(200, body, login_headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.EMPTY_RESPONSE

    @pytest.mark.asyncio
    async def test_missing_credential(self, auth, http_session, make_response, login_request, login_body, login_headers):
        del login_body['credential']
        http_session.request.side_effect = [make_response(200, login_body, login_headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.MISSING_CREDENTIAL

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", [None, ''])
    async def test_missing_user_id(self, auth, http_session, make_response, login_request, login_body, login_headers, user_id):
        if user_id is None:
            del login_body['credential']['userId']
        else:
            login_body['credential']['userId'] = user_id
        http_session.request.side_effect = [make_response(200, login_body, login_headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.MISSING_USER_ID

    @pytest.mark.asyncio
    async def test_missing_token(self, auth, http_session, make_response, login_request, login_body):
        headers = [('Set-Cookie', 'MashovAuthToken=tok1; path=/')]
        http_session.request.side_effect = [make_response(200, login_body, headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.MISSING_TOKEN

    @pytest.mark.asyncio
    async def test_missing_cookie(self, auth, http_session, make_response, login_request, login_body):
        headers = [('x-csrf-token', 'csrf-abc')]
        http_session.request.side_effect = [make_response(200, login_body, headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.MISSING_COOKIE

    @pytest.mark.asyncio
    async def test_cookie_parse_failed(self, auth, http_session, make_response, login_request, login_body):
        headers = [('x-csrf-token', 'csrf-abc'), ('Set-Cookie', ' ; Path=/')]
        http_session.request.side_effect = [make_response(200, login_body, headers)]

        with pytest.raises(AuthError) as exc_info:
            await auth.login(login_request)

        assert exc_info.value.kind is AuthErrorKind.COOKIE_PARSE_FAILED

    @pytest.mark.asyncio
    async def test_empty_cookie_entries_are_kept(self, auth, http_session, make_response, login_request, login_body):
        headers = [('x-csrf-token', 'csrf-abc'), ('Set-Cookie', ' , ; Path=/')]
        http_session.request.side_effect = [make_response(200, login_body, headers)]

        data = await auth.login(login_request)

        assert data.credentials.cookie == '; '

    def test_describe(self, auth):
        assert auth.describe(None) == ''


class TestLoginResponseShapes:
    """Login bodies that decode but lack a credential block."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ['{}', '[]', '"text"', '{"credential": null}'])
    async def test_missing_credential(self, api, http_session, make_response, login_request, login_headers, body):
        http_session.request.side_effect = [make_response(200, body, login_headers)]

        with pytest.raises(AuthError) as exc_info:
            await AsyncAuthService(api).login(login_request)

        assert exc_info.value.kind is AuthErrorKind.MISSING_CREDENTIAL
