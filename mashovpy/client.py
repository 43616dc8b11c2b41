"""
MashovClient - High-level async client for the Mashov student portal.

Example:
    >>> login = LoginRequest("username", "password", semel=123456, year=2025)
    >>> async with MashovClient(login) as mashov:
    ...     grades = await mashov.get_grades()
"""
from typing import Any, Dict, List, Optional, Union

from .core.api import (
    AsyncAPIClient,
    AsyncAuthService,
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig
)
from .core.exceptions import NotAuthenticatedError
from .core.logging import get_logger
from .core.models import (
    AttendanceList,
    GradeList,
    GroupList,
    MashovSession,
    Resource
)
from .core.session import LoginRequest, MemorySession, SessionState


class MashovClient:
    """
    High-level async client for Mashov.

    Owns one HTTP session and the artifacts of the last successful login.
    Data requests before a successful login raise NotAuthenticatedError.

    With a LoginRequest:
        >>> client = MashovClient(LoginRequest("user", "pass", 123456, 2025))
        >>> await client.login()
        >>> groups = await client.get_groups()
        >>> await client.close()

    With keyword credentials and a context manager (logs in on enter):
        >>> async with MashovClient(username="user", password="pass",
        ...                         semel=123456, year=2025) as mashov:
        ...     behavior = await mashov.get_behavior()
    """

    def __init__(
        self,
        credentials: Optional[LoginRequest] = None,
        *,
        username: Optional[str] = None,
        password: Optional[str] = None,
        semel: Optional[int] = None,
        year: Optional[int] = None,
        config: Optional[APIConfig] = None,
        api: Optional[AsyncAPIClient] = None
    ):
        """
        Initialize Mashov client.

        Args:
            credentials: Login credentials
            username: Portal username (when credentials is not given)
            password: Portal password (when credentials is not given)
            semel: Institution code (when credentials is not given)
            year: School year (when credentials is not given)
            config: Optional API configuration
            api: Optional preconfigured transport client
        """
        if credentials is None:
            if username is None or password is None or semel is None or year is None:
                raise ValueError(
                    "Provide a LoginRequest or all of username, password, semel and year"
                )
            credentials = LoginRequest(
                username=username,
                password=password,
                semel=int(semel),
                year=int(year)
            )

        self._credentials = credentials
        self._config = (api.config if api else None) or config or APIConfig.default()
        self._api = api or AsyncAPIClient(self._config)
        self._auth = AsyncAuthService(self._api)
        self._session = MemorySession()
        self._logger = get_logger('mashovpy.client')

    # =========================================================================
    # Configuration helpers
    # =========================================================================

    @staticmethod
    def create_config(
        proxy: Optional[str] = None,
        proxy_user: Optional[str] = None,
        proxy_pass: Optional[str] = None,
        timeout: Optional[float] = None,
        verify_ssl: bool = True,
        user_agent: Optional[str] = None,
        base_url: Optional[str] = None
    ) -> APIConfig:
        """
        Create API configuration with common options.

        Args:
            proxy: Proxy URL (e.g., "http://proxy:8080")
            proxy_user: Proxy username
            proxy_pass: Proxy password
            timeout: Total request timeout in seconds (None keeps aiohttp's default)
            verify_ssl: Whether to verify SSL certificates
            user_agent: Custom user agent string
            base_url: Alternative API root

        Returns:
            APIConfig instance
        """
        proxy_config = None
        if proxy:
            proxy_config = ProxyConfig(
                url=proxy,
                username=proxy_user,
                password=proxy_pass
            )

        config = APIConfig(
            proxy=proxy_config,
            timeout=TimeoutConfig(total=timeout),
            ssl=SSLConfig(verify=verify_ssl, check_hostname=verify_ssl)
        )
        if user_agent:
            config.user_agent = user_agent
        if base_url:
            config.base_url = base_url
        return config

    # =========================================================================
    # Session management
    # =========================================================================

    async def login(self) -> MashovSession:
        """
        Authenticate with the credentials given at construction.

        The session info and credentials are replaced together, and only
        once every part of the response has been validated. A failed login
        leaves any previous session in place.

        Returns:
            Decoded login response

        Raises:
            AuthError: If the portal rejects the login or the response is incomplete
            MashovConnectionError: If the portal cannot be reached
        """
        data = await self._auth.login(self._credentials)
        self._session.save(data)
        self._logger.info(f"Logged in as {self._auth.describe(data)}")
        return self._session.info()

    def get_session(self) -> Union[MashovSession, Dict[str, Any]]:
        """Decoded login response of the current session, or {} before login."""
        return self._session.info()

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def is_logged_in(self) -> bool:
        """Check if logged in."""
        return self.state is SessionState.AUTHENTICATED

    @property
    def user_id(self) -> str:
        """Student identifier of the current session ('' before login)."""
        return self._session.credentials.user_id

    @property
    def config(self) -> APIConfig:
        return self._config

    # =========================================================================
    # Context manager
    # =========================================================================

    async def __aenter__(self) -> 'MashovClient':
        """Enter async context - opens the HTTP session and logs in."""
        await self._api.__aenter__()
        try:
            await self.login()
        except Exception:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context - cleanup."""
        await self.close()

    async def close(self):
        """Close the client and release resources."""
        await self._api.close()

    # =========================================================================
    # Student data
    # =========================================================================

    async def fetch_resource(self, resource: Union[Resource, str]) -> List[Any]:
        """
        Fetch one per-student resource.

        Args:
            resource: Resource member, its name ("behavior") or its path ("behave")

        Returns:
            Decoded JSON array, unmodified

        Raises:
            NotAuthenticatedError: If login() has not succeeded
            RequestFailedError: If the portal answers with a non-2xx status
            DecodeError: If the body is not JSON
        """
        resource = Resource.parse(resource)
        credentials = self._ensure_logged_in()

        builder = self._api.builder
        return await self._api.get_json(
            builder.resource_path(credentials.user_id, resource),
            headers=builder.build_auth_headers(credentials)
        )

    async def get_grades(self) -> GradeList:
        """Retrieve the student's grades."""
        return await self.fetch_resource(Resource.GRADES)

    async def get_groups(self) -> GroupList:
        """Retrieve the student's study groups."""
        return await self.fetch_resource(Resource.GROUPS)

    async def get_behavior(self) -> AttendanceList:
        """Retrieve the student's attendance and behavior records."""
        return await self.fetch_resource(Resource.BEHAVIOR)

    # =========================================================================
    # Private helpers
    # =========================================================================

    def _ensure_logged_in(self):
        """Return the current credentials, or raise if not logged in."""
        credentials = self._session.credentials
        if not credentials.is_valid():
            raise NotAuthenticatedError()
        return credentials
