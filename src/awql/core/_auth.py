# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Authentication helpers for report downloads.

:class:`_TokenRefresher` exchanges a refresh token for a new access token
against the Google OAuth2 endpoint. :class:`_AuthManager` owns the
connection credential and decides, per request, whether a refresh is needed.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from ..models.credentials import Credential, RefreshableToken, StaticToken
from ._http import _HttpClient
from .errors import InvalidTokenError, NetworkUnreachableError, ServiceUnavailableError

logger = logging.getLogger(__name__)


class _TokenRefresher:
    """
    Refresh OAuth2 access tokens with the ``refresh_token`` grant.

    :param http: HTTP client used to reach the token endpoint.
    :type http: ~awql.core._http._HttpClient
    :param token_url: OAuth2 token endpoint.
    :type token_url: str
    :param timeout: Request timeout in seconds.
    :type timeout: float
    """

    def __init__(self, http: _HttpClient, token_url: str, timeout: float) -> None:
        self._http = http
        self.token_url = token_url
        self.timeout = timeout

    def refresh(self, token: RefreshableToken) -> None:
        """
        Fetch a new access token and store it on ``token``.

        Example token endpoint response::

            {
                "access_token": "ya29.ExaMple",
                "token_type": "Bearer",
                "expires_in": 3600
            }

        :raises InvalidTokenError: If the credential cannot be refreshed, the endpoint
            answers 400, or the response does not carry a live token.
        :raises NetworkUnreachableError: If the endpoint cannot be reached.
        :raises ServiceUnavailableError: On any other non-200 status.
        """
        if not token.refreshable:
            raise InvalidTokenError(details={"reason": "missing client id, client secret or refresh token"})

        data = {
            "client_id": token.client_id,
            "client_secret": token.client_secret,
            "refresh_token": token.refresh_token,
            "grant_type": "refresh_token",
        }
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        try:
            r = self._http._request("post", self.token_url, data=data, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise NetworkUnreachableError(url=self.token_url) from exc

        if r.status_code == 400:
            raise InvalidTokenError(status_code=400)
        if r.status_code != 200:
            raise ServiceUnavailableError(r.status_code, url=self.token_url)

        try:
            body = r.json()
        except ValueError as exc:
            raise InvalidTokenError(details={"reason": "token response is not JSON"}) from exc
        if not isinstance(body, dict):
            raise InvalidTokenError(details={"reason": "token response is not a JSON object"})

        access_token = body.get("access_token")
        expires_in = body.get("expires_in")
        if not isinstance(access_token, str) or not access_token:
            raise InvalidTokenError(details={"reason": "empty access_token"})
        if isinstance(expires_in, bool) or not isinstance(expires_in, (int, float)) or expires_in <= 0:
            raise InvalidTokenError(details={"reason": "expires_in must be a positive number"})

        token.access_token = access_token
        token.token_type = body.get("token_type") or token.token_type
        token.expiry = time.time() + expires_in
        logger.debug("Access token refreshed, expires in %ss", expires_in)


class _AuthManager:
    """
    Credential owner for a single connection.

    Dispatches on the credential variant:

    - no credential: requests are sent without ``Authorization`` header;
    - :class:`~awql.models.credentials.StaticToken`: used as-is, never refreshed;
    - :class:`~awql.models.credentials.RefreshableToken`: refreshed when not valid;
    - any other :class:`azure.core.credentials.TokenCredential`: ``get_token()``
      is called on each authentication.
    """

    def __init__(self, credential: Optional[Credential], refresher: _TokenRefresher) -> None:
        if credential is not None and not callable(getattr(credential, "get_token", None)):
            raise TypeError("credential must implement azure.core.credentials.TokenCredential.")
        self.credential = credential
        self._refresher = refresher
        self._external_token: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self.credential is not None

    def authenticate(self) -> None:
        """
        Make sure the credential holds a usable access token.

        Performs no I/O when the credential is absent, static, or still valid.
        """
        cred = self.credential
        if cred is None or isinstance(cred, StaticToken):
            return
        if isinstance(cred, RefreshableToken):
            if cred.valid:
                return
            self._refresher.refresh(cred)
            return
        token = cred.get_token()
        if not token.token:
            raise InvalidTokenError(details={"reason": "credential returned an empty token"})
        self._external_token = token.token

    def authorization(self) -> Optional[str]:
        """Value of the ``Authorization`` header, or None when unauthenticated."""
        cred = self.credential
        if cred is None:
            return None
        if isinstance(cred, (StaticToken, RefreshableToken)):
            return cred.authorization()
        return f"Bearer {self._external_token}"
