# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Report payload handling for the AWQL driver.

This module contains CSV report parsing and XML error envelope decoding.
"""

from ._api_error import decode_api_error
from ._report import Table, parse_payload, parse_table, read_table

__all__ = ["decode_api_error", "Table", "parse_payload", "parse_table", "read_table"]
