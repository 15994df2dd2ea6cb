# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for AWQL driver tests.

This module provides a scripted HTTP double and helpers to plug it into a
connection, so that no test reaches the network.
"""

import json

import pytest
import requests

from awql.connection import Connection
from awql.core.config import AwqlConfig
from awql.models.credentials import RefreshableToken, StaticToken
from awql.models.options import Identity


class FakeResponse:
    def __init__(self, status_code, body=b""):
        self.status_code = status_code
        self.headers = {}
        if isinstance(body, (dict, list)):
            self.text = json.dumps(body)
        elif isinstance(body, bytes):
            self.text = body.decode("utf-8", errors="replace")
        else:
            self.text = body or ""
        self.content = self.text.encode("utf-8") if not isinstance(body, bytes) else body

    def json(self):
        return json.loads(self.text)


class FakeHTTP:
    """Replays scripted responses and records every request."""

    def __init__(self, responses=None):
        self._responses = list(responses or [])
        self.calls = []

    def _request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("No more responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        status, body = item
        return FakeResponse(status, body)

    def close(self):
        pass

    def urls(self):
        return [c[1] for c in self.calls]


def install_http(conn, fake):
    """Route every request of ``conn`` (report and token) through ``fake``."""
    conn._http = fake
    conn._auth._refresher._http = fake
    return fake


@pytest.fixture
def test_config():
    """Configuration with the default endpoints and no cache."""
    return AwqlConfig()


@pytest.fixture
def identity():
    return Identity(account_id="123-456-7890", developer_token="dEve1op3er7okeN", api_version="v201607")


@pytest.fixture
def refreshable_token():
    return RefreshableToken(client_id="c1i3n7iD", client_secret="c1ien753cr37", refresh_token="1/R3Fr35h-70k3n")


@pytest.fixture
def static_token():
    return StaticToken.issue("ya29.AcC3s57okeN")


@pytest.fixture
def make_connection(identity, test_config):
    """Build a connection wired to a FakeHTTP replaying ``responses``."""

    def _make(responses=None, credential=None, config=None):
        conn = Connection(identity, credential=credential, config=config or test_config)
        fake = install_http(conn, FakeHTTP(responses))
        return conn, fake

    return _make


@pytest.fixture
def token_body():
    return {"access_token": "ya29.ExaMple", "token_type": "Bearer", "expires_in": 3600}


@pytest.fixture
def network_error():
    return requests.exceptions.ConnectionError("Network error")
