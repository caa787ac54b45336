"""Pytest configuration and fixtures for the search proxy tests.

This module provides API Gateway events, upstream record samples, and
in-memory stand-ins for the credential provider and upstream client.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


# --- Collaborator Fakes ---


class FakeCredentials:
    """Credential provider that returns a fixed token and counts lookups."""

    def __init__(self, token: str = 'test-token', error: Exception | None = None):
        self.token = token
        self.error = error
        self.calls = 0

    def get_token(self) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.token


class FakeUpstream:
    """Record source that returns canned records and remembers requests."""

    def __init__(self, records: list[Any] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.requests: list[tuple[str, str, str]] = []

    def fetch(self, resource_name: str, q: str, token: str) -> list[Any]:
        self.requests.append((resource_name, q, token))
        if self.error is not None:
            raise self.error
        return self.records


@pytest.fixture
def fake_credentials() -> FakeCredentials:
    return FakeCredentials()


@pytest.fixture
def fake_upstream() -> FakeUpstream:
    return FakeUpstream()


# --- API Event Fixtures ---


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway proxy event for a location search."""
    return {
        'httpMethod': 'GET',
        'path': '/locations',
        'queryStringParameters': {'q': 'library'},
        'headers': {},
        'requestContext': {
            'requestId': str(uuid4()),
        },
        'body': None,
        'isBase64Encoded': False,
    }


# --- Upstream Record Samples ---


@pytest.fixture
def location_record() -> dict:
    return {
        'id': 'loc-1',
        'type': 'locations',
        'attributes': {
            'name': 'Valley Library',
            'abbreviation': 'VLib',
            'thumbnails': ['valley-1.jpg', 'valley-2.jpg'],
            'website': 'https://library.oregonstate.edu',
            'latitude': '44.5650',
        },
    }


@pytest.fixture
def person_record() -> dict:
    return {
        'id': 'person-1',
        'type': 'directory',
        'attributes': {
            'firstName': 'Benny',
            'lastName': 'Beaver',
            'department': 'Athletics',
            'primaryPhone': '541-555-0100',
            'emailAddress': 'benny@oregonstate.edu',
        },
    }
