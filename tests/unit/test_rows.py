# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pandas as pd
import pytest

from awql.core.errors import AwqlError, MalformedReportError
from awql.rows import Rows


class TestRows:
    def test_csv_round_trip(self):
        rows = Rows.from_bytes(b"a,b\n1,2\n3,4")
        assert rows.columns() == ["a", "b"]
        dest = [None] * len(rows.columns())
        assert rows.next(dest) is True
        assert dest == ["1", "2"]
        assert rows.next(dest) is True
        assert dest == ["3", "4"]
        assert rows.next(dest) is False

    def test_end_of_data_leaves_buffer_untouched(self):
        rows = Rows([["id", "name"], ["19", "rv"]])
        dest = [None, None]
        assert rows.next(dest)
        dest[:] = ["x", "y"]
        assert not rows.next(dest)
        assert not rows.next(dest)
        assert dest == ["x", "y"]

    def test_position_and_size(self):
        rows = Rows([["id"], ["1"], ["2"]])
        assert (rows.position, rows.size) == (1, 3)
        next(rows)
        assert rows.position == 2
        assert len(rows) == 2

    def test_header_only_is_empty(self):
        rows = Rows.from_bytes(b"a,b\n")
        assert rows.columns() == []
        assert rows.next([None, None]) is False
        assert list(rows) == []
        assert len(rows) == 0

    def test_empty_payload(self):
        rows = Rows.from_bytes(b"")
        assert rows.size == 0
        assert rows.next([]) is False

    def test_iteration_single_pass(self):
        rows = Rows([["a"], ["1"], ["2"]])
        assert list(rows) == [["1"], ["2"]]
        assert list(rows) == []

    def test_close_is_noop(self):
        rows = Rows([["a"], ["1"]])
        assert rows.close() is None
        assert list(rows) == [["1"]]

    def test_from_file(self, tmp_path):
        path = tmp_path / "report.csv"
        path.write_text("Campaign ID,Clicks\n42,7\n", encoding="utf-8")
        rows = Rows.from_file(str(path))
        assert rows.columns() == ["Campaign ID", "Clicks"]
        assert list(rows) == [["42", "7"]]

    def test_row_longer_than_header_rejected(self):
        with pytest.raises(MalformedReportError) as ei:
            Rows.from_bytes(b"a,b\n1,2,3\n")
        assert isinstance(ei.value, AwqlError)
        assert ei.value.details == {"line": 2, "expected": 2, "received": 3}

    def test_row_shorter_than_header_rejected(self):
        with pytest.raises(MalformedReportError) as ei:
            Rows.from_bytes(b"a,b\n1,2\n3\n")
        assert ei.value.details == {"line": 3, "expected": 2, "received": 1}

    def test_ragged_file_rejected(self, tmp_path):
        path = tmp_path / "report.csv"
        path.write_text("a,b\n1\n", encoding="utf-8")
        with pytest.raises(MalformedReportError):
            Rows.from_file(str(path))


class TestRowsDataFrame:
    def test_to_dataframe(self):
        df = Rows([["Campaign", "Clicks"], ["A", "1"], ["B", "2"]]).to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["Campaign", "Clicks"]
        assert df["Clicks"].tolist() == ["1", "2"]

    def test_to_dataframe_consumes_remaining_rows(self):
        rows = Rows([["a"], ["1"], ["2"]])
        next(rows)
        assert rows.to_dataframe()["a"].tolist() == ["2"]

    def test_to_dataframe_pads_short_rows(self):
        df = Rows([["a", "b"], ["1"]]).to_dataframe()
        assert df.shape == (1, 2)
        assert pd.isna(df.loc[0, "b"])

    def test_empty_dataframe(self):
        df = Rows([["a", "b"]]).to_dataframe()
        assert df.empty
