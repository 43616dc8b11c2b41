"""
mashovpy - Async Python client for the Mashov student portal.

Usage:
    >>> from mashovpy import MashovClient, LoginRequest
    >>>
    >>> login = LoginRequest("username", "password", semel=123456, year=2025)
    >>> async with MashovClient(login) as mashov:
    ...     for grade in await mashov.get_grades():
    ...         print(grade["subjectName"], grade["grade"])
"""
import logging
from .client import MashovClient

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    DeviceInfo,
    AsyncAPIClient,
    AsyncAuthService,
    parse_raw_cookie
)

# Session management
from .core.session import (
    LoginRequest,
    SessionCredentials,
    SessionData,
    SessionState,
    MemorySession
)

# Records
from .core.models import (
    Resource,
    MashovSession,
    GradeEntry,
    AttendanceEvent,
    StudyGroup,
    GroupTeacher,
    GradeList,
    AttendanceList,
    GroupList
)

# Errors
from .core.exceptions import (
    MashovException,
    AuthError,
    AuthErrorKind,
    NotAuthenticatedError,
    RequestFailedError,
    DecodeError,
    MashovConnectionError
)

__version__ = '0.1.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for mashovpy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'mashovpy',
        'mashovpy.client',
        'mashovpy.api',
        'mashovpy.auth',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'MashovClient',
    'LoginRequest',
    'SessionCredentials',
    'SessionData',
    'SessionState',
    'MemorySession',
    'Resource',
    'MashovSession',
    'GradeEntry',
    'AttendanceEvent',
    'StudyGroup',
    'GroupTeacher',
    'GradeList',
    'AttendanceList',
    'GroupList',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'DeviceInfo',
    'AsyncAPIClient',
    'AsyncAuthService',
    'parse_raw_cookie',
    'MashovException',
    'AuthError',
    'AuthErrorKind',
    'NotAuthenticatedError',
    'RequestFailedError',
    'DecodeError',
    'MashovConnectionError',
    'setup_logging',
]
