"""Tests for the transport client."""
import aiohttp
import pytest

from mashovpy import APIConfig, AsyncAPIClient, DecodeError, MashovConnectionError, ProxyConfig, RequestFailedError


class TestSessionLifecycle:
    """Test suite for aiohttp session ownership."""

    @pytest.mark.asyncio
    async def test_creates_session_without_cookie_jar(self):
        api = AsyncAPIClient()

        session = await api._ensure_session()
        try:
            assert isinstance(session.cookie_jar, aiohttp.DummyCookieJar)
            assert session.headers['Sec-Fetch-Mode'] == 'cors'
        finally:
            await api.close()

        assert session.closed is True

    @pytest.mark.asyncio
    async def test_context_manager_closes_own_session(self):
        async with AsyncAPIClient() as api:
            session = await api._ensure_session()

        assert session.closed is True

    @pytest.mark.asyncio
    async def test_reuses_session(self, api, http_session):
        assert await api._ensure_session() is http_session
        assert await api._ensure_session() is http_session


class TestRequests:
    """Test suite for single requests."""

    @pytest.mark.asyncio
    async def test_request_returns_response(self, api, http_session, make_response):
        http_session.request.side_effect = [make_response(201, '{"ok": true}', [('X-Test', '1')])]

        response = await api.request('GET', '/ping')

        assert response.status == 201
        assert response.ok is True
        assert response.body == b'{"ok": true}'
        assert response.headers['x-test'] == '1'
        assert response.url == 'https://web.mashov.info/api/ping'

    @pytest.mark.asyncio
    async def test_proxy_is_passed(self, http_session, make_response):
        api = AsyncAPIClient(
            APIConfig(proxy=ProxyConfig(url='http://proxy:8080')),
            session=http_session
        )
        http_session.request.side_effect = [make_response(200, '[]')]

        await api.request('GET', '/ping')

        assert http_session.request.call_args.kwargs['proxy'] == 'http://proxy:8080'

    @pytest.mark.asyncio
    async def test_post_json_serializes_dict(self, api, http_session, make_response):
        http_session.request.side_effect = [make_response(200, '{}')]

        await api.post_json('/login', {'a': 'b"c'}, headers={})

        assert http_session.request.call_args.kwargs['data'] == '{"a": "b\\"c"}'

    @pytest.mark.asyncio
    async def test_get_json(self, api, http_session, make_response):
        http_session.request.side_effect = [make_response(200, [{'id': 1}])]

        assert await api.get_json('/students/u/grades', headers={}) == [{'id': 1}]

    @pytest.mark.asyncio
    async def test_get_json_status(self, api, http_session, make_response):
        http_session.request.side_effect = [make_response(401, '[]')]

        with pytest.raises(RequestFailedError) as exc_info:
            await api.get_json('/students/u/grades', headers={})

        assert exc_info.value.status == 401
        assert exc_info.value.url == 'https://web.mashov.info/api/students/u/grades'

    @pytest.mark.asyncio
    async def test_get_json_decode_error(self, api, http_session, make_response):
        http_session.request.side_effect = [make_response(200, '')]

        with pytest.raises(DecodeError):
            await api.get_json('/students/u/grades', headers={})

    @pytest.mark.asyncio
    async def test_get_json_non_utf8_body(self, api, http_session, make_response):
        http_session.request.side_effect = [make_response(200, b'\xff\xfe\xfa')]

        with pytest.raises(DecodeError) as exc_info:
            await api.get_json('/students/u/grades', headers={})

        assert exc_info.value.status == 200

    @pytest.mark.asyncio
    async def test_client_error_is_wrapped(self, api, http_session):
        http_session.request.side_effect = aiohttp.ClientConnectionError('boom')

        with pytest.raises(MashovConnectionError) as exc_info:
            await api.request('GET', '/ping')

        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)
