"""Root pytest configuration for all tests."""

import logging
from unittest.mock import Mock

import pytest

from umbraco_builder.management_client.auth import ClientCredentials

# urllib3 logs every connection at DEBUG; keep test output to our own loggers.
logging.getLogger("urllib3").setLevel(logging.WARNING)


@pytest.fixture
def credentials():
    """Client credentials for a local Umbraco instance."""
    return ClientCredentials(
        host="https://umbraco.test",
        client_id="umbraco-back-office-builder",
        client_secret="s3cr3t-value",
    )


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


def make_response(status_code=200, payload=None, content=None):
    """Build a Mock shaped like requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    if payload is None:
        response.json.side_effect = ValueError("No JSON")
        response.content = content if content is not None else b""
    else:
        response.json.return_value = payload
        response.content = content if content is not None else b"{...}"
    return response


@pytest.fixture
def response_factory():
    return make_response
