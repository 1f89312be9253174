from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import calendar_day, fetchall, padded_window, read_cursor
from .model import ScheduledEvent
from .repository import ScheduleSource

logger = logging.getLogger(__name__)


class MySQLScheduleSource(ScheduleSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_org(self, *, org_id: str, start: date, end: date) -> Sequence[ScheduledEvent]:
        lo, hi = padded_window(start, end)
        with read_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, date, organization_id
                FROM events
                WHERE organization_id=%s AND is_ad_hoc=0 AND date >= %s AND date < %s
                ORDER BY date ASC
                """,
                (org_id, lo, hi),
            )
            rows = fetchall(cur)

        logger.debug("schedule source org=%s rows=%d", org_id, len(rows))
        return [
            ScheduledEvent(
                event_id=str(r["id"]),
                event_date=calendar_day(r["date"]),
                org_id=str(r["organization_id"]),
            )
            for r in rows
        ]
