# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
OAuth2 credential variants used to authorize report downloads.

A connection carries at most one credential, either a :class:`StaticToken`
(an access token given as-is, never refreshed) or a :class:`RefreshableToken`
(a client id / secret / refresh token triple exchanged for access tokens on
demand). Both satisfy the :class:`azure.core.credentials.TokenCredential`
protocol.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Union

from azure.core.credentials import AccessToken, TokenCredential

from ..common.constants import STATIC_TOKEN_LIFETIME, TOKEN_EXPIRY_DELTA, TOKEN_TYPE_BEARER


def _is_valid(access_token: str, expiry: float) -> bool:
    # A zero expiry means the token has never been fetched
    if not expiry or not access_token:
        return False
    return expiry - TOKEN_EXPIRY_DELTA > time.time()


@dataclass
class StaticToken:
    """
    Access token supplied directly by the caller.

    :param access_token: The bearer token.
    :type access_token: str
    :param token_type: Token type used in the ``Authorization`` header.
    :type token_type: str
    :param expiry: POSIX timestamp after which the token is no longer used.
    :type expiry: float
    """

    access_token: str
    token_type: str = TOKEN_TYPE_BEARER
    expiry: float = 0.0

    @classmethod
    def issue(cls, access_token: str, lifetime: float = STATIC_TOKEN_LIFETIME) -> "StaticToken":
        """Build a bearer token expiring ``lifetime`` seconds from now."""
        return cls(access_token=access_token, token_type=TOKEN_TYPE_BEARER, expiry=time.time() + lifetime)

    @property
    def valid(self) -> bool:
        return _is_valid(self.access_token, self.expiry)

    def authorization(self) -> str:
        """Value of the ``Authorization`` header."""
        return f"{self.token_type} {self.access_token}"

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return AccessToken(self.access_token, int(self.expiry))


@dataclass
class RefreshableToken:
    """
    OAuth2 client credentials able to obtain fresh access tokens.

    The token fields start empty with a zero expiry, so the first
    authentication always performs a refresh. They are updated in place by
    :class:`~awql.core._auth._TokenRefresher`.
    """

    client_id: str
    client_secret: str
    refresh_token: str
    access_token: str = ""
    token_type: str = TOKEN_TYPE_BEARER
    expiry: float = 0.0

    @property
    def refreshable(self) -> bool:
        return bool(self.client_id and self.client_secret and self.refresh_token)

    @property
    def valid(self) -> bool:
        return _is_valid(self.access_token, self.expiry)

    def authorization(self) -> str:
        """Value of the ``Authorization`` header."""
        return f"{self.token_type} {self.access_token}"

    def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        return AccessToken(self.access_token, int(self.expiry))


Credential = Union[StaticToken, RefreshableToken, TokenCredential]
"""Any credential accepted by a connection."""

__all__ = ["StaticToken", "RefreshableToken", "Credential"]
