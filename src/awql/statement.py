# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Prepared AWQL statements: parameter binding and report download."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import requests

from .common.constants import REPORT_FORMAT
from .core.errors import (
    ApiRejectedError,
    AwqlError,
    BindingMismatchError,
    InvalidTokenError,
    NetworkUnreachableError,
    NotSupportedError,
    ServiceUnavailableError,
)
from .data._api_error import _parse_api_error
from .rows import Rows

if TYPE_CHECKING:
    from .connection import Connection

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _escape(c: str) -> str:
    e = _ESCAPES.get(c)
    if e is not None:
        return e
    if c.isprintable():
        return c
    n = ord(c)
    if n < 0x80:
        return "\\x%02x" % n
    if n < 0x10000:
        return "\\u%04x" % n
    return "\\U%08x" % n


def quote(value: Any) -> str:
    """Render ``value`` as a double-quoted AWQL string literal."""
    if value is None:
        s = ""
    elif isinstance(value, bool):
        s = "true" if value else "false"
    elif isinstance(value, (bytes, bytearray)):
        s = bytes(value).decode("utf-8")
    else:
        s = str(value)
    return '"' + "".join(_escape(c) for c in s) + '"'


def bind(query: str, args: Sequence[Any]) -> str:
    """
    Replace each ``?`` of ``query`` with the quoted value of the matching argument.

    :raises BindingMismatchError: If ``len(args)`` differs from the number of placeholders.
    """
    pieces = query.split(PLACEHOLDER)
    expected = len(pieces) - 1
    if len(args) != expected:
        raise BindingMismatchError(expected, len(args))
    if not expected:
        return query
    out = [pieces[0]]
    for value, piece in zip(args, pieces[1:]):
        out.append(quote(value))
        out.append(piece)
    return "".join(out)


class Statement:
    """
    A prepared AWQL query bound to a connection.

    Arguments are bound on the first execution; afterwards the statement can
    only be executed again as-is.

    :param connection: Owning connection.
    :type connection: ~awql.connection.Connection
    :param query: AWQL query, with ``?`` placeholders for positional parameters.
    :type query: str
    """

    def __init__(self, connection: "Connection", query: str) -> None:
        self._conn = connection
        self.query = query
        self._parameter_count = query.count(PLACEHOLDER)
        self._bound = False

    def num_input(self) -> int:
        """Number of placeholder parameters of the prepared query."""
        return self._parameter_count

    def bind(self, args: Optional[Sequence[Any]] = None) -> str:
        """
        Bind ``args`` into the query.

        :return: The bound query.
        :raises BindingMismatchError: If the argument count does not match,
            or if arguments are given to an already bound statement.
        """
        args = list(args or ())
        if self._bound:
            if args:
                raise BindingMismatchError(0, len(args))
            return self.query
        self.query = bind(self.query, args)
        self._bound = True
        return self.query

    def execute(self, args: Optional[Sequence[Any]] = None) -> Rows:
        """
        Bind ``args``, download the report and return its rows.

        :raises BindingMismatchError: On argument count mismatch.
        :raises InvalidTokenError: If the credential cannot be refreshed.
        :raises NetworkUnreachableError: If the API cannot be reached.
        :raises ApiRejectedError: If the API rejected the query (HTTP 400).
        :raises ServiceUnavailableError: On any other non-200 status.
        """
        q = self.bind(args)
        payload = self._download(q)
        cache = self._conn._cache
        if cache is not None:
            return Rows.from_file(cache.store(q, payload))
        return Rows.from_bytes(payload)

    def exec(self, args: Optional[Sequence[Any]] = None):
        raise NotSupportedError("AWQL statements only read reports.")

    def close(self) -> None:
        return None

    # --- Internal helpers ---
    def _headers(self) -> Dict[str, str]:
        conn = self._conn
        headers = {
            "Content-Type": "application/x-www-form-urlencoded; param=value",
            "Accept": "*/*",
            "clientCustomerId": conn.identity.account_id,
            "developerToken": conn.identity.developer_token,
        }
        headers.update(conn.options.headers())
        return headers

    def _download(self, q: str) -> bytes:
        conn = self._conn
        headers = self._headers()
        if conn._auth.enabled:
            try:
                conn.authenticate()
            except InvalidTokenError:
                raise
            except AwqlError as exc:
                raise InvalidTokenError(
                    subcode=exc.subcode,
                    status_code=exc.status_code,
                    details={"cause": exc.message},
                ) from exc
            headers["Authorization"] = conn._auth.authorization()

        url = conn.report_url
        data = {"__rdquery": q, "__fmt": REPORT_FORMAT}
        try:
            r = conn._http._request("post", url, data=data, headers=headers, timeout=conn.config.report_timeout)
        except requests.exceptions.RequestException as exc:
            raise NetworkUnreachableError(url=url) from exc

        if r.status_code == 200:
            return r.content
        if r.status_code == 400:
            api_error = _parse_api_error(r.content)
            logger.warning("Report download rejected: %s", api_error)
            raise ApiRejectedError(str(api_error), api_error_type=api_error.type, url=url)
        raise ServiceUnavailableError(r.status_code, url=url, body_excerpt=(r.text or "")[:200])
