# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client with timeout handling and optional session support.

This module provides :class:`~awql.core._http._HttpClient`, a thin wrapper
around the requests library that applies a default timeout to every request,
logs requests and responses, and optionally reuses a :class:`requests.Session`.
No request is ever retried: transport errors propagate to the caller.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class _HttpClient:
    """
    HTTP client with timeout handling and optional session support.

    :param timeout: Default request timeout in seconds. If None, a 30 second timeout is used.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session for connection reuse. If provided,
        all requests use this session.
    :type session: :class:`requests.Session` | None
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.default_timeout: float = timeout if timeout is not None else 30.0
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute a single HTTP request.

        :param method: HTTP method (GET, POST, ...).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, data, timeout.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If no response is obtained.
        """
        kwargs.setdefault("timeout", self.default_timeout)

        logger.debug("%s %s (timeout=%ss)", method.upper(), url, kwargs["timeout"])
        start = time.perf_counter()
        if self._session is not None:
            response = self._session.request(method, url, **kwargs)
        else:
            response = requests.request(method, url, **kwargs)
        duration_ms = (time.perf_counter() - start) * 1000

        level = logging.WARNING if response.status_code >= 400 else logging.DEBUG
        logger.log(level, "%s %s %s %.1fms", method.upper(), url, response.status_code, duration_ms)
        return response

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
