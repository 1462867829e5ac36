from unittest.mock import MagicMock

import pytest
import requests

from mollie_client.core.client import create_http_client
from mollie_client.core.config import ClientConfig

from tests.helpers import API_KEY, make_response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MOLLIE_* variables from the developer's shell out of the tests"""
    for key in ("MOLLIE_API_KEY", "MOLLIE_API_ENDPOINT", "MOLLIE_TIMEOUT_SECONDS",
                "MOLLIE_CA_BUNDLE", "MOLLIE_USER_AGENT_SUFFIX"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config():
    return ClientConfig(api_key=API_KEY)


@pytest.fixture
def session():
    """A real session whose transport is replaced by a mock."""
    session = requests.Session()
    session.request = MagicMock()
    return session


@pytest.fixture
def http(config, session):
    return create_http_client(config, session=session)


@pytest.fixture
def reply(session):
    """Queue the response returned by the next request(s)."""

    def _reply(status_code, payload=None, *, content=None):
        session.request.return_value = make_response(status_code, payload, content=content)
        return session.request

    return _reply
