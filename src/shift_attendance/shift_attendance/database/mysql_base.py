from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from decimal import Decimal
from typing import Any, Optional

import mysql.connector

from ..core.exceptions import DatabaseError


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit when the block finishes, roll back otherwise.

    ``mysql.connector.Error`` is re-raised as ``DatabaseError``; domain errors
    raised inside the block pass through unchanged after the rollback.
    """

    conn = conn_factory.connect()
    cur = None
    try:
        cur = conn.cursor(dictionary=dictionary)
        yield conn, cur
        conn.commit()
    except mysql.connector.Error as e:
        conn.rollback()
        raise DatabaseError(str(e)) from e
    except BaseException:
        conn.rollback()
        raise
    finally:
        if cur is not None:
            cur.close()
        conn.close()


def fetchone(cur) -> Optional[dict]:
    return cur.fetchone() or None


def fetchall(cur) -> list[dict]:
    return list(cur.fetchall() or [])


def normalize_mysql_time(value: Any) -> Optional[time]:
    """TIME columns come back as ``timedelta`` from the C extension, ``time`` or ``str`` otherwise."""

    if value is None or isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, (seconds // 60) % 60, seconds % 60)

    if isinstance(value, str):
        h, m, *rest = value.strip().split(":")
        return time(int(h), int(m), int(rest[0]) if rest and rest[0] else 0)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")


def to_decimal(value: Any) -> Optional[Decimal]:
    """DECIMAL columns as ``Decimal``; NULL stays ``None``."""
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))
