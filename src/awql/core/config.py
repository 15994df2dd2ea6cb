# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.constants import (
    API_VERSION,
    REPORT_TIMEOUT,
    REPORT_URL,
    STATIC_TOKEN_LIFETIME,
    TOKEN_TIMEOUT,
    TOKEN_URL,
)


@dataclass(frozen=True)
class AwqlConfig:
    """
    Configuration settings for AWQL connections.

    :param api_version: AdWords API version used when the DSN does not specify one.
    :type api_version: str
    :param report_url: Report download endpoint; the API version is appended to it.
    :type report_url: str
    :param token_url: OAuth2 token endpoint used to refresh access tokens.
    :type token_url: str
    :param report_timeout: Timeout in seconds of a report download (default: 30).
    :type report_timeout: float
    :param token_timeout: Timeout in seconds of a token refresh (default: 4).
    :type token_timeout: float
    :param static_token_lifetime: Lifetime in seconds given to an access token passed
        directly in the DSN (default: one year).
    :type static_token_lifetime: float
    :param cache_dir: Directory where downloaded reports are saved before being parsed.
        ``None`` keeps reports in memory only.
    :type cache_dir: str or None
    """

    api_version: str = API_VERSION
    report_url: str = REPORT_URL
    token_url: str = TOKEN_URL
    report_timeout: float = REPORT_TIMEOUT
    token_timeout: float = TOKEN_TIMEOUT
    static_token_lifetime: float = STATIC_TOKEN_LIFETIME
    cache_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AwqlConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~awql.core.config.AwqlConfig
        """
        # Environment-free defaults
        return cls(
            api_version=API_VERSION,
            report_url=REPORT_URL,
            token_url=TOKEN_URL,
            report_timeout=REPORT_TIMEOUT,
            token_timeout=TOKEN_TIMEOUT,
            static_token_lifetime=STATIC_TOKEN_LIFETIME,
            cache_dir=None,
        )
