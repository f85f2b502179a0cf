import json
from unittest.mock import MagicMock

import pytest
import requests

from huebridge.api.http_client import HttpClient
from huebridge.bridge import HueBridge

BRIDGE_IP = "192.168.1.10"


def reply(body, status_code: int = 200) -> MagicMock:
    """Fake requests.Response with the given JSON (or raw text) body."""
    response = MagicMock()
    response.status_code = status_code
    response.text = body if isinstance(body, str) else json.dumps(body)
    return response


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.request.return_value = reply({})
    return session


@pytest.fixture
def make_bridge(session):
    def _make(username=None):
        http = HttpClient(f"http://{BRIDGE_IP}/api", session=session)
        return HueBridge(BRIDGE_IP, username, http=http)

    return _make


def sent(session) -> tuple:
    """(method, url, body) of the last request sent through the mocked session."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs.get("data")
