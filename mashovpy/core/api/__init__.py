"""Mashov API module."""
from .config import APIConfig, ProxyConfig, SSLConfig, TimeoutConfig, DeviceInfo
from .async_client import AsyncAPIClient
from .async_auth import AsyncAuthService, parse_raw_cookie
from .request import APIResponse, RequestBuilder, ResponseHandler

__all__ = [
    # Async client
    'AsyncAPIClient',
    'AsyncAuthService',
    'parse_raw_cookie',

    # Requests
    'APIResponse',
    'RequestBuilder',
    'ResponseHandler',

    # Configuration
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DeviceInfo',
]
