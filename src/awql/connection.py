# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Optional

import requests

from .core._auth import _AuthManager, _TokenRefresher
from .core._cache import ReportCache
from .core._error_codes import VALIDATION_EMPTY_QUERY
from .core._http import _HttpClient
from .core.config import AwqlConfig
from .core.errors import NotSupportedError, ValidationError
from .dbapi import Cursor
from .models.credentials import Credential
from .models.options import Identity, ReportOptions
from .statement import Statement


class Connection:
    """
    Connection to the AdWords report download API.

    A connection holds the account identity, the report options and at most
    one credential. It performs no network I/O until a statement is executed
    or :meth:`authenticate` is called.

    **Context Manager Support (Recommended)**:
        Using the connection as a context manager reuses a single
        :class:`requests.Session` for every request and closes it on exit::

            with Driver().open(dsn) as conn:
                rows = conn.prepare("SELECT CampaignId FROM CAMPAIGN_PERFORMANCE_REPORT").execute()

    :param identity: Account id, API version and developer token.
    :type identity: ~awql.models.options.Identity
    :param credential: Credential used to authorize requests, or None for
        unauthenticated requests.
    :type credential: ~awql.models.credentials.StaticToken or
        ~awql.models.credentials.RefreshableToken or
        ~azure.core.credentials.TokenCredential or None
    :param options: Report formatting flags. Defaults to :class:`ReportOptions`
        for the identity API version.
    :type options: ~awql.models.options.ReportOptions or None
    :param config: Endpoints and timeouts. Defaults to :meth:`AwqlConfig.from_env`.
    :type config: ~awql.core.config.AwqlConfig or None

    .. note::
        A connection is not safe for concurrent use. Use one connection per thread.
    """

    def __init__(
        self,
        identity: Identity,
        credential: Optional[Credential] = None,
        options: Optional[ReportOptions] = None,
        config: Optional[AwqlConfig] = None,
    ) -> None:
        self.identity = identity
        self.options = options or ReportOptions(version=identity.api_version)
        self.config = config or AwqlConfig.from_env()
        self._session: Optional[requests.Session] = None
        self._owns_session: bool = False
        self._http = _HttpClient(timeout=self.config.report_timeout)
        self._auth = _AuthManager(
            credential,
            _TokenRefresher(self._http, self.config.token_url, self.config.token_timeout),
        )
        self._cache: Optional[ReportCache] = ReportCache(self.config.cache_dir) if self.config.cache_dir else None

    @property
    def credential(self) -> Optional[Credential]:
        return self._auth.credential

    @property
    def report_url(self) -> str:
        return self.config.report_url + self.options.version

    def __enter__(self) -> "Connection":
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            self._http._session = self._session
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the HTTP session, if any. Safe to call multiple times.
        """
        if self._session is not None and self._owns_session:
            self._http.close()
            self._session = None
            self._owns_session = False

    def authenticate(self) -> None:
        """
        Make sure the connection credential holds a usable access token.

        Refreshes a :class:`~awql.models.credentials.RefreshableToken` that is not
        valid anymore. Calling it again while the token is valid performs no I/O.

        :raises InvalidTokenError: If the credential cannot be refreshed.
        :raises NetworkUnreachableError: If the token endpoint cannot be reached.
        :raises ServiceUnavailableError: If the token endpoint answers an unexpected status.
        """
        self._auth.authenticate()

    def prepare(self, query: str) -> Statement:
        """
        Return a statement for ``query``, bound to this connection.

        :raises ValidationError: If ``query`` is empty.
        """
        if not query:
            raise ValidationError("No query to prepare.", subcode=VALIDATION_EMPTY_QUERY)
        return Statement(self, query)

    def begin(self):
        raise NotSupportedError("Transactions are not supported.")

    def commit(self) -> None:
        # Nothing to commit: reports are read-only.
        return None

    def rollback(self) -> None:
        raise NotSupportedError("Transactions are not supported.")

    def cursor(self) -> Cursor:
        """Return a new DB-API cursor on this connection."""
        return Cursor(self)
