"""Request builder for API requests."""
import json
from typing import Dict
from urllib.parse import quote

from ..config import APIConfig
from ...models import Resource
from ...session.models import LoginRequest, SessionCredentials


class RequestBuilder:
    """Builds URLs, headers and bodies for Mashov API requests."""

    LOGIN_PATH = '/login'

    def __init__(self, config: APIConfig):
        """Initializes request builder."""
        self.config = config

    def build_url(self, path: str) -> str:
        """Joins the configured base URL and an API path."""
        return f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def resource_path(self, user_id: str, resource: Resource) -> str:
        """Path of a per-student resource."""
        return f"/students/{quote(user_id, safe='')}/{resource.value}"

    def build_headers(self) -> Dict[str, str]:
        """Common headers for every request."""
        return self.config.common_headers()

    def build_login_headers(self) -> Dict[str, str]:
        headers = self.build_headers()
        headers['Content-Type'] = 'application/json'
        return headers

    def build_auth_headers(self, credentials: SessionCredentials) -> Dict[str, str]:
        """Common headers plus the anti-forgery token and session cookie."""
        headers = self.build_headers()
        headers['X-Csrf-Token'] = credentials.csrf_token
        headers['Cookie'] = credentials.cookie
        return headers

    def build_login_data(self, login: LoginRequest) -> str:
        """Serializes the login body."""
        return json.dumps({
            **login.to_payload(),
            **self.config.device.to_payload()
        })
