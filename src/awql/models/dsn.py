# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data source name (DSN) parsing.

A DSN is a single ``|``-separated string::

    AccountId[:ApiVersion]|DeveloperToken
    AccountId[:ApiVersion]|DeveloperToken|AccessToken
    AccountId[:ApiVersion]|DeveloperToken|ClientId|ClientSecret|RefreshToken

for example ``123-456-7890:v201607|dEve1op3er7okeN|1/R3Fr35h-70k3n``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from ..common.constants import API_VERSION, DSN_OPT_SEP, DSN_SEP, STATIC_TOKEN_LIFETIME
from ..core.errors import (
    InvalidTokenError,
    MalformedConfigError,
    MissingAccountIdError,
    MissingDeveloperTokenError,
)
from .credentials import RefreshableToken, StaticToken
from .options import Identity, ReportOptions


@dataclass(frozen=True)
class Dsn:
    """
    Decoded data source name.

    Use :meth:`parse` to build one from its string form; ``str(dsn)`` renders it back.
    """

    account_id: str
    developer_token: str
    api_version: str = API_VERSION
    access_token: Optional[str] = None
    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    refresh_token: Optional[str] = None

    @classmethod
    def parse(cls, dsn: str, *, default_version: str = API_VERSION) -> "Dsn":
        """
        Parse a data source name.

        :param dsn: The ``|``-separated connection string.
        :type dsn: str
        :param default_version: API version used when the first segment has none.
        :type default_version: str
        :return: The decoded DSN.
        :rtype: Dsn
        :raises MalformedConfigError: If the DSN does not have 2, 3 or 5 segments.
        :raises MissingAccountIdError: If the account id is empty.
        :raises MissingDeveloperTokenError: If the developer token is empty.
        :raises InvalidTokenError: If a 3-segment DSN carries an empty access token.
        """
        if not dsn:
            raise MalformedConfigError(details={"segments": 0})
        parts = dsn.split(DSN_SEP)
        if len(parts) not in (2, 3, 5):
            raise MalformedConfigError(details={"segments": len(parts)})

        account_id, _, version = parts[0].partition(DSN_OPT_SEP)
        if not account_id:
            raise MissingAccountIdError()
        if not parts[1]:
            raise MissingDeveloperTokenError()

        base = dict(
            account_id=account_id,
            developer_token=parts[1],
            api_version=version or default_version,
        )
        if len(parts) == 2:
            return cls(**base)
        if len(parts) == 3:
            if not parts[2]:
                raise InvalidTokenError()
            return cls(access_token=parts[2], **base)
        return cls(client_id=parts[2], client_secret=parts[3], refresh_token=parts[4], **base)

    @property
    def identity(self) -> Identity:
        return Identity(
            account_id=self.account_id,
            developer_token=self.developer_token,
            api_version=self.api_version,
        )

    @property
    def options(self) -> ReportOptions:
        return ReportOptions(version=self.api_version)

    def credential(
        self, static_token_lifetime: float = STATIC_TOKEN_LIFETIME
    ) -> Optional[Union[StaticToken, RefreshableToken]]:
        """
        Build the credential implied by the DSN.

        :return: A :class:`StaticToken` for an access token, a :class:`RefreshableToken`
            (with zero expiry) for client credentials, ``None`` otherwise.
        """
        if self.access_token is not None:
            return StaticToken.issue(self.access_token, static_token_lifetime)
        if self.client_id is not None:
            return RefreshableToken(
                client_id=self.client_id,
                client_secret=self.client_secret or "",
                refresh_token=self.refresh_token or "",
            )
        return None

    def __str__(self) -> str:
        parts: List[str] = [self.account_id + DSN_OPT_SEP + self.api_version, self.developer_token]
        if self.access_token is not None:
            parts.append(self.access_token)
        elif self.client_id is not None:
            parts.extend([self.client_id, self.client_secret or "", self.refresh_token or ""])
        return DSN_SEP.join(parts)


__all__ = ["Dsn"]
