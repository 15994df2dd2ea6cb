# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Error codes
VALIDATION_ERROR = "validation_error"
AUTH_ERROR = "auth_error"
HTTP_ERROR = "http_error"
INTERNAL_ERROR = "internal_error"
NOT_SUPPORTED = "not_supported"

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_NETWORK_UNREACHABLE = "http_network_unreachable"

# Validation subcodes
VALIDATION_MALFORMED_CONFIG = "validation_malformed_config"
VALIDATION_MISSING_ACCOUNT_ID = "validation_missing_account_id"
VALIDATION_MISSING_DEVELOPER_TOKEN = "validation_missing_developer_token"
VALIDATION_BINDING_MISMATCH = "validation_binding_mismatch"
VALIDATION_EMPTY_QUERY = "validation_empty_query"

# Auth subcodes
AUTH_INVALID_TOKEN = "auth_invalid_token"

# Internal subcodes
INTERNAL_MISSING_DATA_SOURCE = "internal_missing_data_source"
INTERNAL_MALFORMED_REPORT = "internal_malformed_report"


def http_subcode(status: int) -> str:
    """Return the ``http_<status>`` subcode for a status code."""
    return f"http_{status}"
