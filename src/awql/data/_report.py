# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""CSV report payload parsing."""

from __future__ import annotations

import csv
import io
from typing import Iterable, List

from ..core.errors import MalformedReportError

Table = List[List[str]]


def _read(lines: Iterable[str]) -> Table:
    reader = csv.reader(lines)
    table: Table = []
    for row in reader:
        if not row:
            continue
        # Every row must have as many fields as the header.
        if table and len(row) != len(table[0]):
            raise MalformedReportError(reader.line_num, len(table[0]), len(row))
        table.append(row)
    return table


def parse_table(text: str) -> Table:
    """
    Parse CSV text (comma separated, double-quote escaping) into a list of rows.

    :raises MalformedReportError: If a row does not have as many fields as the first one.
    """
    return _read(io.StringIO(text, newline=""))


def parse_payload(data: bytes, encoding: str = "utf-8") -> Table:
    """Decode a raw report body and parse it as CSV."""
    return parse_table(data.decode(encoding))


def read_table(path: str, encoding: str = "utf-8") -> Table:
    """Parse a report previously saved on disk."""
    with open(path, "r", encoding=encoding, newline="") as f:
        return _read(f)
