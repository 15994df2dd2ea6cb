# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from typing import Optional

from .connection import Connection
from .core.config import AwqlConfig
from .models.dsn import Dsn


class Driver:
    """
    Factory of AWQL connections.

    The driver is passed explicitly to the code that needs connections; there
    is no process-wide registry.

    :param config: Configuration shared by every opened connection.
    :type config: ~awql.core.config.AwqlConfig or None

    Example::

        driver = Driver()
        conn = driver.open("123-456-7890:v201607|dEve1op3er7okeN|ya29.AcC3s57okeN")
    """

    def __init__(self, config: Optional[AwqlConfig] = None) -> None:
        self.config = config or AwqlConfig.from_env()

    def open(self, dsn: str) -> Connection:
        """
        Open a connection described by ``dsn``.

        No network I/O is performed: tokens are fetched on first use.

        :raises MalformedConfigError: If the DSN does not have 2, 3 or 5 segments.
        :raises MissingAccountIdError: If the account id is empty.
        :raises MissingDeveloperTokenError: If the developer token is empty.
        """
        d = Dsn.parse(dsn, default_version=self.config.api_version)
        return Connection(
            d.identity,
            credential=d.credential(self.config.static_token_lifetime),
            options=d.options,
            config=self.config,
        )


def connect(dsn: str, config: Optional[AwqlConfig] = None) -> Connection:
    """Open a connection with a default :class:`Driver` (DB-API entry point)."""
    return Driver(config).open(dsn)
