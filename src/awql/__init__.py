# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
AWQL driver: query AdWords reports through a database driver interface.

Example::

    import awql

    with awql.connect("123-456-7890|dEve1op3er7okeN|ya29.AcC3s57okeN") as conn:
        cur = conn.cursor()
        cur.execute("SELECT CampaignName, Clicks FROM CAMPAIGN_PERFORMANCE_REPORT WHERE CampaignStatus = ?", ["ENABLED"])
        for row in cur.fetchall():
            print(row)
"""

from .connection import Connection
from .core.config import AwqlConfig
from .dbapi import (
    STRING,
    Cursor,
    DatabaseError,
    DataError,
    Error,
    IntegrityError,
    InterfaceError,
    InternalError,
    NotSupportedError,
    OperationalError,
    ProgrammingError,
    Warning,
    apilevel,
    paramstyle,
    threadsafety,
)
from .driver import Driver, connect
from .rows import Rows
from .statement import Statement

__version__ = "0.1.0"

__all__ = [
    "connect",
    "Driver",
    "Connection",
    "Statement",
    "Rows",
    "Cursor",
    "AwqlConfig",
    "apilevel",
    "threadsafety",
    "paramstyle",
    "STRING",
    "Warning",
    "Error",
    "InterfaceError",
    "DatabaseError",
    "DataError",
    "OperationalError",
    "IntegrityError",
    "InternalError",
    "ProgrammingError",
    "NotSupportedError",
]
