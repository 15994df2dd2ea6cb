# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for the AdWords report download API and its OAuth2 token endpoint.
"""

# Default AdWords API version used when the DSN does not carry one
API_VERSION = "v201607"

# Report download endpoint, suffixed with the API version
REPORT_URL = "https://adwords.google.com/api/adwords/reportdownload/"
REPORT_FORMAT = "CSV"
REPORT_TIMEOUT = 30.0

# OAuth2 token endpoint
TOKEN_URL = "https://accounts.google.com/o/oauth2/token"
TOKEN_TIMEOUT = 4.0
TOKEN_TYPE_BEARER = "Bearer"

TOKEN_EXPIRY_DELTA = 10.0
"""Seconds subtracted from a token expiry before it is considered stale."""

STATIC_TOKEN_LIFETIME = 365 * 24 * 3600.0
"""Lifetime given to an access token passed directly in the DSN (one year)."""

# DSN separators: AccountId[:ApiVersion]|DeveloperToken[|...]
DSN_SEP = "|"
DSN_OPT_SEP = ":"
