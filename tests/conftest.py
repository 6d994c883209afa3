import json

import pytest
import requests

from hnapi import HackerNewsClient

BASE_URI = "https://hn.test/"


class FakeResp:
    """Stand-in for requests.Response; records whether it was closed."""

    def __init__(self, payload=None, status_code=200):
        if isinstance(payload, bytes):
            self._body = payload
        else:
            self._body = json.dumps(payload).encode()
        self.status_code = status_code
        self.closed = False

    @property
    def content(self):
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def close(self):
        self.closed = True


@pytest.fixture
def client():
    return HackerNewsClient(base_uri=BASE_URI)


@pytest.fixture
def serve(monkeypatch, client):
    """Route the client's GETs from a {"item/1": payload} map.

    Unrouted paths answer 404. Returns the list of requested URLs.
    """
    requested = []

    def install(routes):
        prefix = f"{BASE_URI}{client.version}/"

        def fake_get(url, timeout=None):
            requested.append(url)
            path = url[len(prefix):-len(client.suffix)]
            if path not in routes:
                return FakeResp(b"not found", status_code=404)
            resp = routes[path]
            return resp if isinstance(resp, FakeResp) else FakeResp(resp)

        monkeypatch.setattr(client.http.session, "get", fake_get)
        return requested

    return install
