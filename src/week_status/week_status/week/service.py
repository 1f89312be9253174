from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceSource
from ..common.datetime_utils import now_local, to_day_key, week_start
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_FETCH_WORKERS, DEFAULT_WEEK_DAYS, MAX_RANGE_DAYS
from ..core.enums import DayStatus, WeekStart
from ..core.exceptions import ValidationError
from ..excuses.model import ExcuseRequest
from ..excuses.repository import ExcuseSource
from ..reconciliation.engine import statuses_for_range
from ..reconciliation.factory import DayRuleTable
from ..reconciliation.index import DayIndex
from ..schedules.model import ScheduledEvent
from ..schedules.repository import ScheduleSource
from .presenter import present_day, summarize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshots:
    events: Sequence[ScheduledEvent]
    attendance: Sequence[AttendanceRecord]
    excuses: Sequence[ExcuseRequest]


@dataclass(frozen=True)
class WeekOverview:
    start: date
    end: date
    statuses: list[DayStatus]
    days: list[dict]
    summary: dict

    def to_dict(self) -> dict:
        return {
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "days": self.days,
            "summary": self.summary,
        }


class WeekStatusService:
    def __init__(
        self,
        schedules: ScheduleSource,
        attendance: AttendanceSource,
        excuses: ExcuseSource | None = None,
        *,
        week_days: int = DEFAULT_WEEK_DAYS,
        starts_on: WeekStart = WeekStart.SUNDAY,
        max_workers: int = DEFAULT_FETCH_WORKERS,
        tz: Optional[tzinfo] = None,
        rule_table: DayRuleTable | None = None,
    ):
        self._schedules = schedules
        self._attendance = attendance
        self._excuses = excuses
        self._week_days = int(week_days)
        self._starts_on = starts_on
        self._max_workers = max(int(max_workers), 1)
        self._tz = tz
        self._table = rule_table or DayRuleTable()

    def fetch_snapshots(self, *, user_id: str, org_id: str, start: date, end: date) -> Snapshots:
        """Read the three sources in parallel.

        Without an excuse source (viewer has no linked identity yet) the
        excuse snapshot is empty. Source errors propagate.
        """

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            events_f = pool.submit(self._schedules.list_for_org, org_id=org_id, start=start, end=end)
            attendance_f = pool.submit(self._attendance.list_for_user, user_id=user_id, start=start, end=end)
            excuses_f = (
                pool.submit(self._excuses.list_for_user, user_id=user_id, start=start, end=end)
                if self._excuses is not None
                else None
            )

            events = list(events_f.result() or [])
            attendance = list(attendance_f.result() or [])
            excuses = list(excuses_f.result() or []) if excuses_f is not None else []

        logger.debug(
            "snapshots user=%s org=%s events=%d attendance=%d excuses=%d",
            user_id, org_id, len(events), len(attendance), len(excuses),
        )
        return Snapshots(events=events, attendance=attendance, excuses=excuses)

    def get_week(
        self,
        *,
        user_id: str,
        org_id: str,
        start_day: date | None = None,
        now: datetime | None = None,
        day_count: int | None = None,
    ) -> WeekOverview:
        user_id = require_non_empty(user_id, "user_id")
        org_id = require_non_empty(org_id, "org_id")

        count = self._week_days if day_count is None else int(day_count)
        if count < 1 or count > MAX_RANGE_DAYS:
            raise ValidationError(f"days must be between 1 and {MAX_RANGE_DAYS}")

        now = now or now_local()
        today = to_day_key(now, self._tz)
        if today is None:
            raise ValidationError("now is not a valid instant")
        start = start_day or week_start(today, self._starts_on)
        end = start + timedelta(days=count - 1)

        snap = self.fetch_snapshots(user_id=user_id, org_id=org_id, start=start, end=end)
        index = DayIndex(snap.events, snap.attendance, snap.excuses, org_id=org_id, tz=self._tz)
        if index.dropped:
            logger.debug("dropped %d records with unplaceable dates user=%s", index.dropped, user_id)

        statuses = statuses_for_range(index, start, count, today, table=self._table)
        days = [present_day(start + timedelta(days=i), s) for i, s in enumerate(statuses)]
        return WeekOverview(start=start, end=end, statuses=statuses, days=days, summary=summarize(statuses))
