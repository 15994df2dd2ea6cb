# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the AWQL driver.

Every error carries a stable ``code`` and ``subcode`` (see
:mod:`awql.core._error_codes`) so callers can branch on the failure kind
without parsing messages.

The classes follow the PEP 249 exception hierarchy: :class:`AwqlError` is the
DB-API ``Error``, and every failure kind derives from one of its standard
subclasses::

    Exception
    |__AwqlWarning
    |__AwqlError
       |__InterfaceError
       |__DatabaseError
          |__DataError            (MalformedReportError)
          |__OperationalError     (InvalidTokenError, HttpError)
          |__IntegrityError
          |__InternalError        (MissingDataSourceError)
          |__ProgrammingError     (ValidationError)
          |__NotSupportedError
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from . import _error_codes as ec


class AwqlWarning(Exception):
    """Important warnings, such as data truncation (DB-API ``Warning``)."""


class AwqlError(Exception):
    """Base structured error for the AWQL driver."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class InterfaceError(AwqlError):
    """Misuse of the driver interface itself, such as a closed cursor."""


class DatabaseError(AwqlError):
    """Errors related to the reporting service or the data it returns."""


class DataError(DatabaseError):
    pass


class OperationalError(DatabaseError):
    """Failures outside the caller's control: authentication, network, service status."""


class IntegrityError(DatabaseError):
    pass


class InternalError(DatabaseError):
    pass


class ProgrammingError(DatabaseError):
    """Invalid input from the caller: connection string, query or arguments."""


class NotSupportedError(DatabaseError):
    def __init__(self, message: str):
        super().__init__(message, code=ec.NOT_SUPPORTED)


class ValidationError(ProgrammingError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code=ec.VALIDATION_ERROR, subcode=subcode, details=details, source="client")


class MalformedConfigError(ValidationError):
    """The DSN does not have 2, 3 or 5 segments."""

    def __init__(self, message: str = "ConnectionError.INVALID_DSN", *, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, subcode=ec.VALIDATION_MALFORMED_CONFIG, details=details)


class MissingAccountIdError(ValidationError):
    def __init__(self, message: str = "ConnectionError.ADWORDS_ID"):
        super().__init__(message, subcode=ec.VALIDATION_MISSING_ACCOUNT_ID)


class MissingDeveloperTokenError(ValidationError):
    def __init__(self, message: str = "ConnectionError.DEVELOPER_TOKEN"):
        super().__init__(message, subcode=ec.VALIDATION_MISSING_DEVELOPER_TOKEN)


class BindingMismatchError(ValidationError):
    """The number of arguments does not match the number of ``?`` placeholders."""

    def __init__(self, expected: int, received: int):
        super().__init__(
            "QueryError.BINDING_NOT_MATCH",
            subcode=ec.VALIDATION_BINDING_MISMATCH,
            details={"expected": expected, "received": received},
        )


class InvalidTokenError(OperationalError):
    """The credential is unusable, cannot be refreshed, or was rejected by the token endpoint."""

    def __init__(
        self,
        message: str = "ConnectionError.INVALID_ACCESS_TOKEN",
        *,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            code=ec.AUTH_ERROR,
            subcode=subcode or ec.AUTH_INVALID_TOKEN,
            status_code=status_code,
            details=details,
            source="client",
        )


class HttpError(OperationalError):
    def __init__(
        self,
        message: str,
        status_code: Optional[int],
        is_transient: bool = False,
        subcode: Optional[str] = None,
        url: Optional[str] = None,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if url is not None:
            d["url"] = url
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code=ec.HTTP_ERROR,
            subcode=subcode,
            status_code=status_code,
            details=d,
            source="server",
            is_transient=is_transient,
        )


class NetworkUnreachableError(HttpError):
    """No HTTP response was obtained (connection failure, DNS error or timeout)."""

    def __init__(self, message: str = "ConnectionError.NOT_FOUND", *, url: Optional[str] = None):
        super().__init__(
            message,
            status_code=None,
            is_transient=True,
            subcode=ec.HTTP_NETWORK_UNREACHABLE,
            url=url,
        )


class ServiceUnavailableError(HttpError):
    """The server answered with an unexpected status code."""

    def __init__(
        self,
        status_code: int,
        message: str = "ConnectionError.SERVICE_UNAVAILABLE",
        *,
        url: Optional[str] = None,
        body_excerpt: Optional[str] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            is_transient=status_code in (429, 502, 503, 504),
            subcode=ec.http_subcode(status_code),
            url=url,
            body_excerpt=body_excerpt,
        )


class ApiRejectedError(HttpError):
    """The report download API rejected the query with a structured ``ApiError``."""

    def __init__(self, message: str, *, api_error_type: Optional[str] = None, url: Optional[str] = None):
        details: Dict[str, Any] = {}
        if api_error_type:
            details["api_error_type"] = api_error_type
        super().__init__(message, status_code=400, subcode=ec.HTTP_400, url=url, details=details)


class MissingDataSourceError(InternalError):
    """An error payload was expected but the response body was empty."""

    def __init__(self, message: str = "InternalError.MISSING_DATA_SOURCE"):
        super().__init__(message, code=ec.INTERNAL_ERROR, subcode=ec.INTERNAL_MISSING_DATA_SOURCE, source="server")


class MalformedReportError(DataError):
    """A report row does not have as many fields as the header row."""

    def __init__(self, line: int, expected: int, received: int):
        super().__init__(
            f"InternalError.MALFORMED_REPORT: line {line} has {received} fields, expected {expected}",
            code=ec.INTERNAL_ERROR,
            subcode=ec.INTERNAL_MALFORMED_REPORT,
            details={"line": line, "expected": expected, "received": received},
            source="server",
        )


__all__ = [
    "AwqlWarning",
    "AwqlError",
    "InterfaceError",
    "DatabaseError",
    "DataError",
    "OperationalError",
    "IntegrityError",
    "InternalError",
    "ProgrammingError",
    "NotSupportedError",
    "ValidationError",
    "MalformedConfigError",
    "MissingAccountIdError",
    "MissingDeveloperTokenError",
    "BindingMismatchError",
    "InvalidTokenError",
    "HttpError",
    "NetworkUnreachableError",
    "ServiceUnavailableError",
    "ApiRejectedError",
    "MissingDataSourceError",
    "MalformedReportError",
]
