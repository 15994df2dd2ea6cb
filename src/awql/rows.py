# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Forward-only iterator over a downloaded report."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, MutableSequence, Optional

from .data._report import Table, parse_payload, read_table

if TYPE_CHECKING:
    import pandas as pd


class Rows:
    """
    Iterator over the rows of an executed query.

    Row 0 of the table is the column header; data rows start at index 1.
    :meth:`next` fills a caller-provided buffer and returns ``False`` once
    the data is exhausted. Rows can also be consumed with a ``for`` loop,
    each row being a list of strings. Iteration is single-pass.

    :param table: Parsed report, header row first. ``None`` or a table without
        data rows yields an empty result.
    :type table: list[list[str]] or None

    Example::

        rows = stmt.execute(["ENABLED"])
        dest = [None] * len(rows.columns())
        while rows.next(dest):
            print(dest)
    """

    def __init__(self, table: Optional[Table] = None) -> None:
        if table is not None and len(table) > 1:
            self._table: Table = table
        else:
            self._table = []
        self._size = len(self._table)
        self._pos = 1 if self._size else 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "Rows":
        """Build rows from a raw CSV report body."""
        return cls(parse_payload(data))

    @classmethod
    def from_file(cls, path: str) -> "Rows":
        """Build rows from a CSV report already saved on disk."""
        return cls(read_table(path))

    @property
    def position(self) -> int:
        return self._pos

    @property
    def size(self) -> int:
        return self._size

    def columns(self) -> List[str]:
        """Names of the columns, as found in the header row."""
        if not self._table:
            return []
        return list(self._table[0])

    def next(self, dest: MutableSequence) -> bool:
        """
        Copy the current row into ``dest`` and move forward.

        :param dest: Buffer with one slot per column.
        :type dest: list
        :return: True if a row was copied, False at end of data (``dest`` is left untouched).
        :rtype: bool
        """
        if self._pos == self._size:
            return False
        for k, v in enumerate(self._table[self._pos]):
            dest[k] = v
        self._pos += 1
        return True

    def __iter__(self) -> Iterator[List[str]]:
        return self

    def __next__(self) -> List[str]:
        if self._pos == self._size:
            raise StopIteration
        row = list(self._table[self._pos])
        self._pos += 1
        return row

    def __len__(self) -> int:
        """Number of data rows in the result, consumed or not."""
        return max(self._size - 1, 0)

    def close(self) -> None:
        """Nothing to release: the table lives in memory."""
        return None

    def to_dataframe(self) -> "pd.DataFrame":
        """
        Consume the remaining rows into a pandas DataFrame.

        :return: DataFrame with one string column per report column.
        :rtype: pandas.DataFrame
        """
        from .utils._pandas import rows_to_dataframe

        return rows_to_dataframe(self.columns(), list(self))
