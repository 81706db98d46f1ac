"""Pytest fixtures for netrequest tests."""
import pytest
from unittest.mock import AsyncMock
from yarl import URL

from netrequest import HTTPResponse, Requester
from netrequest.core.models import RequestDraft


SOME_URL = 'https://someurl.com'


@pytest.fixture
def some_url():
    """Returns a valid absolute URL string."""
    return SOME_URL


@pytest.fixture
def draft():
    """Returns an empty in-progress request."""
    return RequestDraft(url=URL(SOME_URL))


@pytest.fixture
def transport():
    """Returns a transport answering 200 with an empty JSON object."""
    mock = AsyncMock()
    mock.send = AsyncMock(return_value=HTTPResponse(status_code=200, body=b'{}'))
    return mock


@pytest.fixture
def requester(transport):
    """Returns a requester without header policy over the mock transport."""
    return Requester(transport=transport)
