# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from unittest.mock import MagicMock, Mock, patch

import pytest
import requests

from awql.core._http import _HttpClient


class TestHttpClient:
    def test_default_timeout(self):
        assert _HttpClient().default_timeout == 30.0
        assert _HttpClient(timeout=4).default_timeout == 4

    @patch("requests.request")
    def test_applies_default_timeout(self, mock_request):
        mock_request.return_value = Mock(status_code=200)
        _HttpClient(timeout=12)._request("post", "https://test.example.com", data={"a": "b"})
        _, kwargs = mock_request.call_args
        assert kwargs["timeout"] == 12
        assert kwargs["data"] == {"a": "b"}

    @patch("requests.request")
    def test_explicit_timeout_wins(self, mock_request):
        mock_request.return_value = Mock(status_code=200)
        _HttpClient(timeout=30)._request("post", "https://test.example.com", timeout=4)
        assert mock_request.call_args[1]["timeout"] == 4

    @patch("requests.request")
    def test_network_error_not_retried(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("Network error")
        with pytest.raises(requests.exceptions.ConnectionError):
            _HttpClient()._request("get", "https://test.example.com")
        assert mock_request.call_count == 1

    @patch("requests.request")
    def test_error_status_returned(self, mock_request):
        mock_request.return_value = Mock(status_code=503)
        r = _HttpClient()._request("get", "https://test.example.com")
        assert r.status_code == 503
        assert mock_request.call_count == 1

    def test_uses_session(self):
        session = MagicMock(spec=requests.Session)
        session.request.return_value = Mock(status_code=200)
        client = _HttpClient(session=session)
        client._request("post", "https://test.example.com")
        session.request.assert_called_once()

    def test_close_idempotent(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)
        client.close()
        client.close()
        session.close.assert_called_once()
