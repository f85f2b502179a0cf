import json

import pytest
import requests

from conftest import reply, sent
from huebridge.api.errors import TransportError
from huebridge.api.http_client import HttpClient, HttpResponse


@pytest.fixture
def client(session):
    return HttpClient("http://10.0.0.1/api/", timeout=3, session=session)


def test_get(client, session):
    session.request.return_value = reply({"a": 1})
    response = client.get("config")

    assert response == HttpResponse(200, '{"a": 1}')
    assert response.ok
    assert sent(session) == ("GET", "http://10.0.0.1/api/config", None)
    assert session.request.call_args.kwargs["timeout"] == 3


def test_post_sends_json(client, session):
    client.post("", {"devicetype": "myapp"})
    method, url, body = sent(session)

    assert (method, url) == ("POST", "http://10.0.0.1/api/")
    assert json.loads(body) == {"devicetype": "myapp"}


def test_delete(client, session):
    client.delete("u/config/whitelist/u")
    assert sent(session)[:2] == ("DELETE", "http://10.0.0.1/api/u/config/whitelist/u")


def test_status_is_passed_through(client, session):
    session.request.return_value = reply("Not Found", status_code=404)
    response = client.get("nothing")
    assert response.status_code == 404
    assert not response.ok


@pytest.mark.parametrize("exc", [requests.ConnectionError, requests.Timeout])
def test_request_errors_become_transport_errors(client, session, exc):
    session.request.side_effect = exc("boom")
    with pytest.raises(TransportError) as excinfo:
        client.get("config")
    assert excinfo.value.status_code is None
