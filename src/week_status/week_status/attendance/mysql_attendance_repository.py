from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_utc, calendar_day, fetchall, padded_window, read_cursor
from .model import AttendanceRecord
from .repository import AttendanceSource

logger = logging.getLogger(__name__)


class MySQLAttendanceSource(AttendanceSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, *, user_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        lo, hi = padded_window(start, end)
        with read_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.id, c.event_id, c.status, c.check_in_time, c.is_ad_hoc, e.date AS event_date
                FROM check_ins c
                LEFT JOIN events e ON e.id = c.event_id
                WHERE c.user_id=%s
                  AND COALESCE(e.date, c.check_in_time) >= %s
                  AND COALESCE(e.date, c.check_in_time) < %s
                """,
                (user_id, lo, hi),
            )
            rows = fetchall(cur)

        records = []
        for r in rows:
            try:
                status = AttendanceStatus(r["status"])
            except ValueError:
                logger.warning("skipping check-in %s with unknown status %r", r["id"], r["status"])
                continue
            records.append(
                AttendanceRecord(
                    attendance_id=str(r["id"]),
                    status=status,
                    event_id=str(r["event_id"]) if r.get("event_id") else None,
                    occurred_on=as_utc(r.get("check_in_time")),
                    is_ad_hoc=bool(r.get("is_ad_hoc")),
                    event_date=calendar_day(r.get("event_date")),
                )
            )
        logger.debug("attendance source user=%s rows=%d", user_id, len(records))
        return records
