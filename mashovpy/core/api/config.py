"""
API configuration module.

Provides configuration for the Mashov API client: endpoint, browser-like
headers, transport settings and the device fingerprint sent on login.
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import ssl


BASE_API_URL = 'https://web.mashov.info/api'

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (X11; Linux x86_64; rv:147.0) Gecko/20100101 Firefox/147.0'
)


@dataclass
class ProxyConfig:
    """
    Proxy configuration.

    Supports HTTP and HTTPS proxies.
    """
    url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    def to_aiohttp_proxy(self) -> Optional[str]:
        """Convert to aiohttp proxy format."""
        if not self.url:
            return None

        if self.username and self.password:
            if '://' in self.url:
                protocol, rest = self.url.split('://', 1)
                return f"{protocol}://{self.username}:{self.password}@{rest}"

        return self.url


@dataclass
class SSLConfig:
    """SSL/TLS configuration."""
    verify: bool = True
    ca_file: Optional[str] = None
    check_hostname: bool = True

    def create_ssl_context(self):
        """Create SSL context from configuration (False disables verification)."""
        if not self.verify:
            return False

        context = ssl.create_default_context()

        if self.ca_file:
            context.load_verify_locations(self.ca_file)

        context.check_hostname = self.check_hostname

        return context


@dataclass
class TimeoutConfig:
    """
    Timeout configuration.

    Every field defaults to None, which leaves aiohttp's own defaults in
    charge. Set a value to opt into a stricter limit.
    """
    total: Optional[float] = None
    connect: Optional[float] = None
    sock_read: Optional[float] = None

    def to_aiohttp_timeout(self):
        """Convert to aiohttp ClientTimeout, or None when nothing is set."""
        if self.total is None and self.connect is None and self.sock_read is None:
            return None

        import aiohttp
        return aiohttp.ClientTimeout(
            total=self.total,
            connect=self.connect,
            sock_read=self.sock_read
        )


@dataclass(frozen=True)
class DeviceInfo:
    """
    Device fingerprint sent with every login.

    The portal checks these against its list of known web clients, so the
    defaults mirror a desktop Firefox session of the students app.
    """
    app_name: str = 'info.mashov.students'
    api_version: str = '3.20210425'
    app_version: float = 3.20210425
    app_build: float = 3.20210425
    device_uuid: str = 'mozilla'
    device_platform: str = 'mozilla'
    device_manufacturer: str = 'linux'
    device_model: str = 'desktop'
    device_version: str = '147.0'

    def to_payload(self) -> Dict[str, Any]:
        """Login body fields, keyed the way the portal expects them."""
        return {
            'IsBiometric': False,
            'appName': self.app_name,
            'apiVersion': self.api_version,
            'appVersion': self.app_version,
            'appBuild': self.app_build,
            'deviceUuid': self.device_uuid,
            'devicePlatform': self.device_platform,
            'deviceManufacturer': self.device_manufacturer,
            'deviceModel': self.device_model,
            'deviceVersion': self.device_version,
        }


@dataclass
class APIConfig:
    """
    Complete API configuration.

    Centralizes all configuration options for the Mashov API client.
    """
    base_url: str = BASE_API_URL

    # Browser identity
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = 'en-US,en;q=0.9'

    # Sub-configurations
    proxy: Optional[ProxyConfig] = None
    ssl: SSLConfig = field(default_factory=SSLConfig)
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    device: DeviceInfo = field(default_factory=DeviceInfo)

    # Additional headers
    extra_headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_level: int = 30  # logging.WARNING

    @classmethod
    def default(cls) -> 'APIConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def with_proxy(cls, proxy_url: str, **kwargs) -> 'APIConfig':
        """Create configuration with proxy."""
        return cls(
            proxy=ProxyConfig(url=proxy_url),
            **kwargs
        )

    @classmethod
    def insecure(cls, **kwargs) -> 'APIConfig':
        """Create configuration with SSL verification disabled."""
        return cls(
            ssl=SSLConfig(verify=False, check_hostname=False),
            **kwargs
        )

    def common_headers(self) -> Dict[str, str]:
        """Headers sent with every request, authenticated or not."""
        return {
            'User-Agent': self.user_agent,
            'Accept': 'application/json, text/plain, */*',
            'Accept-Language': self.accept_language,
            'Sec-GPC': '1',
            'Sec-Fetch-Dest': 'empty',
            'Sec-Fetch-Mode': 'cors',
            'Sec-Fetch-Site': 'same-origin',
            **self.extra_headers
        }

    def get_connector_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp TCPConnector."""
        return {
            'ssl': self.ssl.create_ssl_context(),
        }

    def get_session_kwargs(self) -> Dict[str, Any]:
        """Get kwargs for aiohttp ClientSession."""
        kwargs: Dict[str, Any] = {'headers': self.common_headers()}

        timeout = self.timeout.to_aiohttp_timeout()
        if timeout is not None:
            kwargs['timeout'] = timeout

        return kwargs
