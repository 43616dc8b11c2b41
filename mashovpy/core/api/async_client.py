"""
Async Mashov API client.

Transport layer: owns the aiohttp session and performs single requests.
"""
import json
import logging
from typing import Any, Dict, Optional, Union

import aiohttp

from .config import APIConfig
from .request import APIResponse, RequestBuilder, ResponseHandler
from ..exceptions import DecodeError, MashovConnectionError, RequestFailedError
from ..logging import get_logger


class AsyncAPIClient:
    """
    Asynchronous Mashov API client.

    Features:
    - Full async/await support
    - Configurable proxy, SSL, timeouts
    - One round trip per call, no retries

    Cookies are never stored by the session; the caller passes the Cookie
    header explicitly on every authenticated request.

    Example:
        >>> async with AsyncAPIClient() as client:
        ...     groups = await client.get_json('/students/abc/groups', headers)
    """

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize async API client.

        Args:
            config: API configuration (uses defaults if not provided)
            session: Externally managed aiohttp session. The client will not
                close a session it did not create.
        """
        self._config = config or APIConfig.default()
        self._session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None
        self._builder = RequestBuilder(self._config)
        self._logger = get_logger('mashovpy.api')
        # Only set level if root logger has no handlers (basicConfig not called)
        if not logging.getLogger().handlers:
            self._logger.setLevel(self._config.log_level)

    @property
    def config(self) -> APIConfig:
        """Get current configuration."""
        return self._config

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    async def __aenter__(self) -> 'AsyncAPIClient':
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure session is created and open."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(**self._config.get_connector_kwargs())
            self._session = aiohttp.ClientSession(
                connector=connector,
                cookie_jar=aiohttp.DummyCookieJar(),
                **self._config.get_session_kwargs()
            )
            self._owns_session = True
        return self._session

    async def close(self):
        """Close client and release resources."""
        if self._session and self._owns_session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    async def request(
        self,
        method: str,
        path: str,
        headers: Optional[Dict[str, str]] = None,
        data: Optional[str] = None
    ) -> APIResponse:
        """
        Perform one HTTP request against the API.

        Args:
            method: HTTP method
            path: API path relative to the base URL
            headers: Request headers
            data: Serialized request body

        Returns:
            APIResponse with status, headers and raw body bytes

        Raises:
            MashovConnectionError: If no response could be obtained
        """
        session = await self._ensure_session()
        url = self._builder.build_url(path)
        proxy = self._config.proxy.to_aiohttp_proxy() if self._config.proxy else None

        self._logger.debug(f"{method} {url}")

        try:
            async with session.request(
                method,
                url,
                headers=headers,
                data=data,
                proxy=proxy
            ) as response:
                body = await response.read()
                self._logger.debug(f"{method} {url} -> {response.status} ({len(body)} bytes)")
                return APIResponse(
                    status=response.status,
                    headers=response.headers,
                    body=body,
                    url=url
                )
        except aiohttp.ClientError as e:
            self._logger.error(f"Network error: {e}")
            raise MashovConnectionError(f"Network error: {e}") from e

    async def get_json(self, path: str, headers: Dict[str, str]) -> Any:
        """
        GET a path and decode its JSON body.

        Raises:
            RequestFailedError: If the status is not 2xx
            DecodeError: If the body is not UTF-8 JSON with a value
        """
        response = await self.request('GET', path, headers=headers)

        if not response.ok:
            raise RequestFailedError(response.status, response.url)

        result = ResponseHandler.parse_json(response.body)
        if result is None:
            raise DecodeError(
                f"Failed to decode response from {response.url}",
                response.status
            )

        return result

    async def post_json(
        self,
        path: str,
        payload: Union[str, Dict[str, Any]],
        headers: Dict[str, str]
    ) -> APIResponse:
        """POST a serialized JSON body and return the raw response."""
        if not isinstance(payload, str):
            payload = json.dumps(payload)
        return await self.request('POST', path, headers=headers, data=payload)
