# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
PEP 249 (DB-API 2.0) cursor over AWQL connections.

Every value is returned as a string, exactly as found in the CSV report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Sequence, Tuple

from .core._error_codes import VALIDATION_ERROR
from .core.errors import (
    AwqlError,
    AwqlWarning,
    DatabaseError,
    DataError,
    IntegrityError,
    InterfaceError,
    InternalError,
    NotSupportedError,
    OperationalError,
    ProgrammingError,
)
from .rows import Rows

if TYPE_CHECKING:
    from .connection import Connection

apilevel = "2.0"
threadsafety = 1
paramstyle = "qmark"

# PEP 249 exception names
Warning = AwqlWarning
Error = AwqlError

STRING = "STRING"

Description = Tuple[str, str, None, None, None, None, bool]


class Cursor:
    """
    DB-API cursor executing AWQL queries.

    :param connection: Connection the queries are run on.
    :type connection: ~awql.connection.Connection
    """

    arraysize: int = 1

    def __init__(self, connection: "Connection") -> None:
        self.connection = connection
        self._rows: Optional[Rows] = None
        self._closed = False
        self.description: Optional[List[Description]] = None
        self.rowcount: int = -1

    def _check(self) -> None:
        if self._closed:
            raise InterfaceError("Cursor is closed.", code=VALIDATION_ERROR)

    def execute(self, operation: str, parameters: Optional[Sequence[Any]] = None) -> "Cursor":
        """
        Run ``operation`` with ``?`` placeholders replaced by ``parameters``.

        :return: The cursor itself.
        """
        self._check()
        rows = self.connection.prepare(operation).execute(parameters)
        self._rows = rows
        self.rowcount = len(rows)
        self.description = [(name, STRING, None, None, None, None, True) for name in rows.columns()] or None
        return self

    def executemany(self, operation: str, seq_of_parameters: Sequence[Sequence[Any]]) -> None:
        raise NotSupportedError("executemany is not supported for read-only reports.")

    def _result(self) -> Rows:
        self._check()
        if self._rows is None:
            raise ProgrammingError("No query has been executed.", code=VALIDATION_ERROR)
        return self._rows

    def fetchone(self) -> Optional[Tuple[str, ...]]:
        rows = self._result()
        try:
            return tuple(next(rows))
        except StopIteration:
            return None

    def fetchmany(self, size: Optional[int] = None) -> List[Tuple[str, ...]]:
        rows = self._result()
        n = self.arraysize if size is None else size
        if n <= 0:
            return []
        out: List[Tuple[str, ...]] = []
        for row in rows:
            out.append(tuple(row))
            if len(out) >= n:
                break
        return out

    def fetchall(self) -> List[Tuple[str, ...]]:
        return [tuple(row) for row in self._result()]

    def setinputsizes(self, sizes: Any) -> None:
        return None

    def setoutputsize(self, size: Any, column: Optional[int] = None) -> None:
        return None

    def close(self) -> None:
        if self._rows is not None:
            self._rows.close()
        self._rows = None
        self._closed = True

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        for row in self._result():
            yield tuple(row)

    def __enter__(self) -> "Cursor":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "apilevel",
    "threadsafety",
    "paramstyle",
    "Cursor",
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
