# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

from awql.core.errors import DataError, MalformedReportError
from awql.data import parse_payload, parse_table, read_table


def test_parse_simple_table():
    assert parse_table("a,b\n1,2\n3,4") == [["a", "b"], ["1", "2"], ["3", "4"]]


def test_quoting_rules():
    text = 'Campaign,Label\n"Brand, exact","say ""hi"""\n'
    assert parse_table(text) == [["Campaign", "Label"], ["Brand, exact", 'say "hi"']]


def test_quoted_newline_and_crlf():
    text = 'a,b\r\n"line1\nline2",2\r\n'
    assert parse_table(text) == [["a", "b"], ["line1\nline2", "2"]]


def test_blank_lines_skipped():
    assert parse_table("a,b\n\n1,2\n\n") == [["a", "b"], ["1", "2"]]


def test_parse_payload_decodes_utf8():
    assert parse_payload("Ville,Clics\nMontréal,3\n".encode("utf-8")) == [["Ville", "Clics"], ["Montréal", "3"]]


def test_read_table(tmp_path):
    path = tmp_path / "report.csv"
    path.write_bytes(b"a,b\n1,2\n")
    assert read_table(str(path)) == [["a", "b"], ["1", "2"]]


def test_ragged_row_reports_source_line():
    with pytest.raises(MalformedReportError) as ei:
        parse_table("a,b\n\n1,2\n3\n")
    assert ei.value.details["line"] == 4
    assert isinstance(ei.value, DataError)
