# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import List, Sequence

import pandas as pd


def rows_to_dataframe(columns: Sequence[str], rows: List[List[str]]) -> pd.DataFrame:
    """Build a DataFrame of strings from report rows.

    Short rows are padded with missing values. Duplicate column names, which
    the report API can return, are kept as-is.

    :param columns: Header row.
    :param rows: Data rows.
    """
    width = len(columns)
    padded = [list(r) + [None] * (width - len(r)) if len(r) < width else list(r)[:width] for r in rows]
    return pd.DataFrame(padded, columns=list(columns), dtype="object")
