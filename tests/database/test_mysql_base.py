from __future__ import annotations

from datetime import time, timedelta
from decimal import Decimal

import mysql.connector
import pytest
from mysql.connector.errors import PoolError

from src.shift_attendance.shift_attendance.core.exceptions import DatabaseError, NotFoundError
from src.shift_attendance.shift_attendance.database.connection import DatabaseConnection, DBConfig
from src.shift_attendance.shift_attendance.database.mysql_base import db_cursor, normalize_mysql_time, to_decimal


class FakeCursor:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self):
        self.cursor_obj = FakeCursor()
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self):
        self.conn = FakeConn()

    def connect(self):
        return self.conn


def test_db_cursor_commits_on_success():
    factory = FakeFactory()
    with db_cursor(factory) as (conn, cur):
        assert cur is factory.conn.cursor_obj

    assert factory.conn.committed and not factory.conn.rolled_back
    assert factory.conn.closed and factory.conn.cursor_obj.closed


def test_db_cursor_wraps_driver_errors():
    factory = FakeFactory()
    with pytest.raises(DatabaseError):
        with db_cursor(factory):
            raise mysql.connector.Error("lost connection")

    assert factory.conn.rolled_back and not factory.conn.committed
    assert factory.conn.closed


def test_db_cursor_passes_domain_errors_through():
    factory = FakeFactory()
    with pytest.raises(NotFoundError):
        with db_cursor(factory):
            raise NotFoundError("gone")

    assert factory.conn.rolled_back


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, None),
        (time(22, 0), time(22, 0)),
        (timedelta(hours=6), time(6, 0)),
        (timedelta(hours=9, minutes=30, seconds=5), time(9, 30, 5)),
        ("17:00:00", time(17, 0)),
        ("08:30", time(8, 30)),
    ],
)
def test_normalize_mysql_time(raw, expected):
    assert normalize_mysql_time(raw) == expected


def test_normalize_mysql_time_rejects_other_types():
    with pytest.raises(TypeError):
        normalize_mysql_time(930)


def test_to_decimal():
    assert to_decimal(None) is None
    assert to_decimal("8.25") == Decimal("8.25")
    assert to_decimal(1.5) == Decimal("1.5")


def test_db_config_from_partial_dict():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307", "database": "shifts"})

    assert (cfg.host, cfg.port, cfg.user, cfg.database) == ("db", 3307, "root", "shifts")
    assert cfg.connect_kwargs(with_database=False) == {"host": "db", "port": 3307, "user": "root", "password": ""}


class ExhaustedPool:
    def get_connection(self):
        raise PoolError("Failed getting connection; pool exhausted")


def test_exhausted_pool_falls_back_to_direct_connection(monkeypatch):
    opened = []
    monkeypatch.setattr(mysql.connector, "connect", lambda **kwargs: opened.append(kwargs) or FakeConn())
    conn_factory = DatabaseConnection(DBConfig(database="shifts", pool_size=1))
    conn_factory._pool = ExhaustedPool()

    assert isinstance(conn_factory.connect(), FakeConn)
    assert opened == [{"host": "localhost", "port": 3306, "user": "root", "password": "", "database": "shifts"}]


def test_connect_failure_is_database_error(monkeypatch):
    def refuse(**kwargs):
        raise mysql.connector.InterfaceError("Can't connect to MySQL server")

    monkeypatch.setattr(mysql.connector, "connect", refuse)
    conn_factory = DatabaseConnection(DBConfig())
    conn_factory._pool = ExhaustedPool()

    with pytest.raises(DatabaseError):
        conn_factory.connect()
