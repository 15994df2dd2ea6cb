# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models for the AWQL driver.

Provides the DSN, credential variants, account identity and report options.
"""

from .credentials import Credential, RefreshableToken, StaticToken
from .dsn import Dsn
from .options import Identity, ReportOptions

__all__ = ["Credential", "RefreshableToken", "StaticToken", "Dsn", "Identity", "ReportOptions"]
