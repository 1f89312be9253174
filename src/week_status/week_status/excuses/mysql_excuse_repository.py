from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

from ..core.enums import ExcuseStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import calendar_day, fetchall, padded_window, read_cursor
from .model import ExcuseRequest
from .repository import ExcuseSource

logger = logging.getLogger(__name__)


class MySQLExcuseSource(ExcuseSource):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, *, user_id: str, start: date, end: date) -> Sequence[ExcuseRequest]:
        lo, hi = padded_window(start, end)
        with read_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT x.id, x.event_id, x.status, e.date AS event_date
                FROM excuse_requests x
                JOIN events e ON e.id = x.event_id
                WHERE x.user_id=%s AND e.date >= %s AND e.date < %s
                """,
                (user_id, lo, hi),
            )
            rows = fetchall(cur)

        requests = []
        for r in rows:
            try:
                status = ExcuseStatus(r["status"])
            except ValueError:
                logger.warning("skipping excuse request %s with unknown status %r", r["id"], r["status"])
                continue
            requests.append(
                ExcuseRequest(
                    request_id=str(r["id"]),
                    event_id=str(r["event_id"]),
                    status=status,
                    event_date=calendar_day(r.get("event_date")),
                )
            )
        logger.debug("excuse source user=%s rows=%d", user_id, len(requests))
        return requests
