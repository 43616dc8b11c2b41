"""Pytest fixtures for mashovpy tests."""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from mashovpy import AsyncAPIClient, LoginRequest, MashovClient


def _make_response(status=200, body=None, headers=None):
    """
    Build an async context manager standing in for an aiohttp request.

    Args:
        status: HTTP status code
        body: bytes or str used verbatim, anything else JSON-encoded, None for empty
        headers: list of (name, value) pairs; names may repeat
    """
    if body is None:
        raw = b''
    elif isinstance(body, bytes):
        raw = body
    elif isinstance(body, str):
        raw = body.encode('utf-8')
    else:
        raw = json.dumps(body).encode('utf-8')

    response = MagicMock()
    response.status = status
    response.headers = CIMultiDictProxy(CIMultiDict(headers or []))
    response.read = AsyncMock(return_value=raw)

    request_ctx = MagicMock()
    request_ctx.__aenter__ = AsyncMock(return_value=response)
    request_ctx.__aexit__ = AsyncMock(return_value=None)
    return request_ctx


@pytest.fixture
def login_request():
    """Returns test credentials."""
    return LoginRequest(username="dana", password="s3cret", semel=123456, year=2025)


@pytest.fixture
def login_body():
    """Returns a decoded login response like the portal sends."""
    return {
        'sessionId': 'session-1',
        'credential': {
            'sessionId': 'session-1',
            'userId': 'user-123',
            'idNumber': 123456789,
            'userType': 0,
            'semel': 123456,
            'year': 2025,
            'displayName': 'Dana Levi',
        },
        'accessToken': {
            'username': 'dana',
            'displayName': 'Dana Levi',
            'schoolSettings': {'schoolName': 'Test High School', 'schoolYear': 2025},
            'userSchoolYears': [2024, 2025],
        },
    }


@pytest.fixture
def login_headers():
    """Returns the headers of a successful login response."""
    return [
        ('X-Csrf-Token', 'csrf-abc'),
        ('Set-Cookie', 'MashovAuthToken=tok1; path=/; secure; HttpOnly'),
        ('Set-Cookie', 'Csrf-Token=csrf-abc; path=/'),
    ]


@pytest.fixture
def login_response(login_body, login_headers):
    """Returns a successful login response."""
    return _make_response(200, login_body, login_headers)


@pytest.fixture
def sample_grades():
    """Returns a one-element grades array."""
    return [{
        'id': 1,
        'year': 2025,
        'studentGuid': 'user-123',
        'gradingEventId': 77,
        'grade': 95,
        'rate': 100,
        'timestamp': '2025-03-01T10:00:00',
        'teacherName': 'Ruth Cohen',
        'groupId': 42,
        'groupName': 'Math 10-1',
        'subjectName': 'Math',
        'groupLevel': '10',
        'eventDate': '2025-02-27T00:00:00',
        'gradingPeriod': 1,
        'gradingEvent': 'Quiz 3',
        'gradeRate': 10,
        'gradeTypeId': 1,
        'gradeType': 'Quiz',
    }]


@pytest.fixture
def http_session():
    """Returns a mock aiohttp session; set request.side_effect per test."""
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    return session


@pytest.fixture
def api(http_session):
    """Returns an API client bound to the mock session."""
    return AsyncAPIClient(session=http_session)


@pytest.fixture
def client(login_request, api):
    """Returns a MashovClient bound to the mock session."""
    return MashovClient(login_request, api=api)


@pytest.fixture
def make_response():
    """Returns a factory for mock request contexts."""
    return _make_response
