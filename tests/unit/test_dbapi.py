# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import pytest

import awql
from awql.core.errors import (
    ApiRejectedError,
    AwqlError,
    BindingMismatchError,
    InvalidTokenError,
    MalformedConfigError,
    MalformedReportError,
    MissingDataSourceError,
    NetworkUnreachableError,
    NotSupportedError,
)
from awql.dbapi import (
    DatabaseError,
    DataError,
    Error,
    IntegrityError,
    InterfaceError,
    InternalError,
    OperationalError,
    ProgrammingError,
    Warning,
)

CSV = b"Campaign,Clicks\nA,1\nB,2\nC,3\n"


@pytest.fixture
def cursor(make_connection):
    conn, fake = make_connection([(200, CSV)])
    return conn.cursor()


def test_execute_sets_description_and_rowcount(cursor):
    assert cursor.rowcount == -1
    assert cursor.description is None
    assert cursor.execute("SELECT CampaignName, Clicks FROM R WHERE Status = ?", ["ENABLED"]) is cursor
    assert [d[0] for d in cursor.description] == ["Campaign", "Clicks"]
    assert cursor.rowcount == 3


def test_fetch_methods(cursor):
    cursor.execute("SELECT CampaignName, Clicks FROM R")
    assert cursor.fetchone() == ("A", "1")
    assert cursor.fetchmany(1) == [("B", "2")]
    assert cursor.fetchall() == [("C", "3")]
    assert cursor.fetchone() is None
    assert cursor.fetchmany() == []


def test_fetchmany_default_arraysize(cursor):
    cursor.execute("SELECT CampaignName, Clicks FROM R")
    cursor.arraysize = 2
    assert cursor.fetchmany() == [("A", "1"), ("B", "2")]
    assert cursor.fetchmany(0) == []


def test_iteration(cursor):
    cursor.execute("SELECT CampaignName, Clicks FROM R")
    assert list(cursor) == [("A", "1"), ("B", "2"), ("C", "3")]


def test_fetch_before_execute(cursor):
    with pytest.raises(ProgrammingError):
        cursor.fetchone()


def test_closed_cursor(cursor):
    with cursor:
        pass
    with pytest.raises(InterfaceError):
        cursor.execute("SELECT x FROM R")


def test_executemany_not_supported(cursor):
    with pytest.raises(NotSupportedError):
        cursor.executemany("SELECT x FROM R WHERE y = ?", [["a"], ["b"]])


def test_api_error_is_operational_error(make_connection):
    body = (
        b"<reportDownloadError><ApiError><type>QueryError.X</type><trigger/>"
        b"<fieldPath>selector</fieldPath></ApiError></reportDownloadError>"
    )
    conn, _ = make_connection([(400, body)])
    with pytest.raises(OperationalError) as ei:
        conn.cursor().execute("SELECT x FROM R")
    assert isinstance(ei.value, ApiRejectedError)
    assert str(ei.value) == "QueryError.X"


class TestExceptionHierarchy:
    def test_module_exposes_every_exception(self):
        for name in (
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
        ):
            assert getattr(awql, name) is getattr(awql.dbapi, name)

    def test_standard_tree(self):
        assert issubclass(Warning, Exception)
        assert not issubclass(Warning, Error)
        assert Error is AwqlError
        assert issubclass(InterfaceError, Error)
        assert issubclass(DatabaseError, Error)
        assert not issubclass(InterfaceError, DatabaseError)
        for cls in (DataError, OperationalError, IntegrityError, InternalError, ProgrammingError, NotSupportedError):
            assert issubclass(cls, DatabaseError)

    @pytest.mark.parametrize(
        "err, category",
        [
            (MalformedConfigError(), ProgrammingError),
            (BindingMismatchError(1, 0), ProgrammingError),
            (InvalidTokenError(), OperationalError),
            (NetworkUnreachableError(), OperationalError),
            (ApiRejectedError("QueryError.X"), OperationalError),
            (MissingDataSourceError(), InternalError),
            (MalformedReportError(2, 2, 3), DataError),
            (NotSupportedError("no"), NotSupportedError),
        ],
    )
    def test_driver_errors_map_onto_categories(self, err, category):
        assert isinstance(err, category)
        assert isinstance(err, DatabaseError)

    def test_binding_mismatch_through_cursor(self, cursor):
        with pytest.raises(ProgrammingError):
            cursor.execute("SELECT x FROM R WHERE y = ?")
