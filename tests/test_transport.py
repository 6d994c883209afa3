import pytest
import requests

from hnapi import NotFound, Transport, TransportError
from conftest import FakeResp

URL = "https://hn.test/v0/item/1.json"


@pytest.fixture
def transport():
    return Transport(session=requests.Session(), timeout=2.5)


@pytest.mark.positive
def test_request_returns_body_and_closes(monkeypatch, transport):
    resp = FakeResp(b'{"id": 1}')
    seen = {}

    def fake_get(url, timeout=None):
        seen["url"], seen["timeout"] = url, timeout
        return resp

    monkeypatch.setattr(transport.session, "get", fake_get)

    assert transport.request(URL) == b'{"id": 1}'
    assert seen == {"url": URL, "timeout": 2.5}
    assert resp.closed


@pytest.mark.positive
def test_default_session_is_created():
    t = Transport()
    assert isinstance(t.session, requests.Session)


@pytest.mark.negative
def test_404_raises_not_found_even_with_body(monkeypatch, transport):
    resp = FakeResp(b"<html>Not Found</html>", status_code=404)
    monkeypatch.setattr(transport.session, "get", lambda url, timeout=None: resp)

    with pytest.raises(NotFound) as exc:
        transport.request(URL)
    assert exc.value.url == URL
    assert resp.closed


@pytest.mark.negative
def test_server_error_raises_transport_error(monkeypatch, transport):
    resp = FakeResp(b"oops", status_code=503)
    monkeypatch.setattr(transport.session, "get", lambda url, timeout=None: resp)

    with pytest.raises(TransportError) as exc:
        transport.request(URL)
    assert isinstance(exc.value.cause, requests.HTTPError)
    assert resp.closed


@pytest.mark.negative
@pytest.mark.parametrize("error", [
    requests.ConnectionError("connection refused"),
    requests.Timeout("read timed out"),
    requests.exceptions.InvalidURL("bad url"),
])
def test_request_failure_wrapped_with_cause(monkeypatch, transport, error):
    def fake_get(url, timeout=None):
        raise error

    monkeypatch.setattr(transport.session, "get", fake_get)

    with pytest.raises(TransportError) as exc:
        transport.request(URL)
    assert exc.value.cause is error
    assert exc.value.__cause__ is error


@pytest.mark.negative
def test_body_read_failure_still_closes(monkeypatch, transport):
    class BrokenResp(FakeResp):
        @property
        def content(self):
            raise requests.exceptions.ChunkedEncodingError("connection broken")

    resp = BrokenResp()
    monkeypatch.setattr(transport.session, "get", lambda url, timeout=None: resp)

    with pytest.raises(TransportError, match="connection broken"):
        transport.request(URL)
    assert resp.closed
