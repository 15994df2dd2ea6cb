# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
On-disk report cache.

Downloaded reports are saved under ``<directory>/<hash>.csv`` where ``hash``
is the decimal 64-bit FNV-1 hash of the bound query text.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

logger = logging.getLogger(__name__)

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def fnv1_64(data: bytes) -> int:
    """64-bit FNV-1 hash of ``data``."""
    h = _FNV64_OFFSET
    for b in data:
        h = (h * _FNV64_PRIME) & _MASK64
        h ^= b
    return h


def default_cache_dir() -> str:
    return os.path.join(tempfile.gettempdir(), "awql")


class ReportCache:
    """
    Directory of downloaded reports keyed by query.

    :param directory: Cache directory. Defaults to ``<tempdir>/awql``.
    :type directory: str or None
    """

    def __init__(self, directory: Optional[str] = None) -> None:
        self.directory = directory or default_cache_dir()

    def path(self, query: str) -> str:
        """Path of the file holding the report of ``query``."""
        return os.path.join(self.directory, f"{fnv1_64(query.encode('utf-8'))}.csv")

    def store(self, query: str, payload: bytes) -> str:
        """Write ``payload`` for ``query`` and return the file path."""
        os.makedirs(self.directory, exist_ok=True)
        path = self.path(query)
        with open(path, "wb") as f:
            f.write(payload)
        logger.debug("Report saved to %s (%d bytes)", path, len(payload))
        return path

    def exists(self, query: str) -> bool:
        return os.path.isfile(self.path(query))

    def load(self, query: str):
        """
        Rows of a report already on disk.

        :return: The parsed report, or None when ``query`` has no cached file.
        :rtype: ~awql.rows.Rows or None
        """
        if not self.exists(query):
            return None
        from ..rows import Rows

        return Rows.from_file(self.path(query))
