"""
Shared fixtures: a client wired to a mocked requests session. Responses are
real requests.Response objects so decoding runs through requests itself.
"""

from unittest.mock import MagicMock

import pytest
import requests

from docubot.api.client import ApiClient

from tests.helpers import BASE_URL, PREVIEW_URL, make_response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def respond(session):
    """Queue the response the mocked session will return for the next request."""

    def _respond(status: int = 200, body=b"", headers: dict | None = None) -> requests.Response:
        resp = make_response(status, body, headers)
        session.request.return_value = resp
        return resp

    return _respond


@pytest.fixture
def client(session):
    return ApiClient(BASE_URL, "key", "secret", session=session)


@pytest.fixture
def preview_client(session):
    return ApiClient(BASE_URL, "key", "secret", preview_url=PREVIEW_URL, session=session)
