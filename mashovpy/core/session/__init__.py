"""
Session management module.

Holds login input, extracted session artifacts and their in-memory storage.
"""
from .models import LoginRequest, SessionCredentials, SessionData, SessionState
from .memory_session import MemorySession

__all__ = [
    'LoginRequest',
    'SessionCredentials',
    'SessionData',
    'SessionState',
    'MemorySession',
]
