# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the AWQL driver.

This module contains the foundational components including authentication,
configuration, HTTP client, report cache, and error handling.
"""

from .config import AwqlConfig
from .errors import (
    AwqlWarning,
    AwqlError,
    InterfaceError,
    DatabaseError,
    DataError,
    OperationalError,
    IntegrityError,
    InternalError,
    ProgrammingError,
    NotSupportedError,
    ValidationError,
    MalformedConfigError,
    MissingAccountIdError,
    MissingDeveloperTokenError,
    BindingMismatchError,
    InvalidTokenError,
    HttpError,
    NetworkUnreachableError,
    ServiceUnavailableError,
    ApiRejectedError,
    MissingDataSourceError,
    MalformedReportError,
)

__all__ = [
    "AwqlConfig",
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
