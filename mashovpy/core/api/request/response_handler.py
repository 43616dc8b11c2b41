"""Response handler for API responses."""
import json
from dataclasses import dataclass
from typing import Any, Optional, Union

from multidict import CIMultiDictProxy


@dataclass
class APIResponse:
    """Status, headers and raw body of a completed request."""
    status: int
    headers: CIMultiDictProxy
    body: bytes
    url: str = ''

    @property
    def ok(self) -> bool:
        return ResponseHandler.is_success(self.status)


class ResponseHandler:
    """Handles API responses."""

    @staticmethod
    def is_success(status: int) -> bool:
        return 200 <= status < 300

    @staticmethod
    def parse_json(body: Union[bytes, str]) -> Optional[Any]:
        """
        Decodes a JSON body.

        Bytes are decoded as UTF-8 first.

        Returns:
            Decoded value, or None for an empty, undecodable, invalid or null body
        """
        if isinstance(body, bytes):
            try:
                body = body.decode('utf-8')
            except UnicodeDecodeError:
                return None
        if not body or not body.strip():
            return None
        try:
            return json.loads(body)
        except ValueError:
            return None

    @staticmethod
    def header(response: APIResponse, name: str) -> Optional[str]:
        """Case-insensitive header lookup; repeated headers are comma-joined."""
        values = response.headers.getall(name, [])
        if not values:
            return None
        return ', '.join(values)
