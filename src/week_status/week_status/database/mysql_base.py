from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Tuple

import mysql.connector

from ..core.exceptions import SourceError
from .connection import DatabaseConnection


@contextmanager
def read_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise SourceError(f"cannot connect to source database: {e}") from e
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
        finally:
            cur.close()
    except mysql.connector.Error as e:
        raise SourceError(f"source query failed: {e}") from e
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def padded_window(start: date, end: date) -> Tuple[date, date]:
    """Half-open [lo, hi) window one day wider than [start, end] on each side.

    Stored timestamps are UTC; rows are placed on local days later, so the
    query must not cut off rows that land on the edge days after conversion.
    """

    return start - timedelta(days=1), end + timedelta(days=2)


def as_utc(value: Any) -> Any:
    """Tag naive DATETIME/TIMESTAMP values as UTC, which is how the API stores them."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def calendar_day(value: Any) -> Any:
    """Calendar date of an event DATETIME.

    Date-only events are stored at UTC noon; the stored calendar date is the
    event's day everywhere, so it is never shifted into the viewer's zone.
    """
    if isinstance(value, datetime):
        return value.date()
    return value
