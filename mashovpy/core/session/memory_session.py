"""
In-memory session storage.

Holds the artifacts of the last successful login for one client.
"""
import copy
from typing import Any, Dict, Optional

from .models import SessionCredentials, SessionData, SessionState


class MemorySession:
    """
    In-memory session storage.

    Data lives only as long as the owning client. A login result is stored
    with a single save() call, so readers see either the previous session
    or the new one, never a mix.

    Example:
        >>> session = MemorySession()
        >>> session.save(session_data)
        >>> session.state
        <SessionState.AUTHENTICATED: 'authenticated'>
    """

    def __init__(self):
        """Initialize memory session storage."""
        self._data: Optional[SessionData] = None

    def save(self, data: SessionData) -> None:
        """
        Replace the stored session wholesale.

        Args:
            data: Session data to save
        """
        self._data = data

    @property
    def credentials(self) -> SessionCredentials:
        """Stored credentials, or empty ones before any login."""
        if self._data is None:
            return SessionCredentials()
        return self._data.credentials

    @property
    def state(self) -> SessionState:
        return self.credentials.state

    def info(self) -> Dict[str, Any]:
        """Copy of the decoded login response, or {} before any login."""
        if self._data is None:
            return {}
        return copy.deepcopy(self._data.info)
