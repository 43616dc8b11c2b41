"""
Session data models.

Contains the login input and the artifacts extracted from a login.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict


@dataclass(frozen=True)
class LoginRequest:
    """
    Credentials for one student account.

    Attributes:
        username: Portal username
        password: Portal password
        semel: Institution code of the school
        year: School year (e.g. 2025)
    """
    username: str
    password: str
    semel: int
    year: int

    def to_payload(self) -> Dict[str, Any]:
        """Credential part of the login body."""
        return {
            'semel': self.semel,
            'year': self.year,
            'username': self.username,
            'password': self.password,
        }

    def __repr__(self) -> str:
        return (
            f"LoginRequest(username={self.username!r}, password='***', "
            f"semel={self.semel!r}, year={self.year!r})"
        )


class SessionState(Enum):
    """Lifecycle state of a client."""

    UNAUTHENTICATED = 'unauthenticated'
    AUTHENTICATED = 'authenticated'


@dataclass(frozen=True)
class SessionCredentials:
    """
    Artifacts replayed as headers on every authenticated request.

    Attributes:
        csrf_token: Anti-forgery token from the x-csrf-token header
        cookie: Normalized Cookie header value
        user_id: Student identifier from credential.userId
    """
    csrf_token: str = ''
    cookie: str = ''
    user_id: str = ''

    def is_valid(self) -> bool:
        """True only when all three artifacts are present."""
        return bool(self.csrf_token and self.cookie and self.user_id)

    @property
    def state(self) -> SessionState:
        if self.is_valid():
            return SessionState.AUTHENTICATED
        return SessionState.UNAUTHENTICATED

    def with_user_id(self, user_id: str) -> 'SessionCredentials':
        return replace(self, user_id=user_id)

    def with_csrf_token(self, csrf_token: str) -> 'SessionCredentials':
        return replace(self, csrf_token=csrf_token)

    def with_cookie(self, cookie: str) -> 'SessionCredentials':
        return replace(self, cookie=cookie)

    def __repr__(self) -> str:
        return (
            f"SessionCredentials(user_id={self.user_id!r}, "
            f"csrf_token={'***' if self.csrf_token else ''!r}, "
            f"cookie={'***' if self.cookie else ''!r})"
        )


@dataclass
class SessionData:
    """
    Result of one successful login.

    Attributes:
        credentials: Artifacts for authenticated requests
        info: Raw decoded login response
    """
    credentials: SessionCredentials = field(default_factory=SessionCredentials)
    info: Dict[str, Any] = field(default_factory=dict)
