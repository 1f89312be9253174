from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import DateRepr, DayKey, to_day_key
from ..core.enums import AttendanceStatus, ExcuseStatus
from ..excuses.model import ExcuseRequest
from ..schedules.model import ScheduledEvent

_CHECKED_IN = frozenset({AttendanceStatus.ON_TIME, AttendanceStatus.LATE})


@dataclass(frozen=True)
class DayFacts:
    """Everything the rules need to know about one day, already matched."""

    has_event: bool = False
    has_attendance: bool = False
    checked_in: bool = False
    excused_record: bool = False
    excuse_approved: bool = False
    excuse_pending: bool = False


NO_FACTS = DayFacts()


class DayIndex:
    """Places one snapshot of each source on local calendar days.

    Attendance and excuses are placed on the linked event's day when the link
    resolves (the record's ``event_date``, then the scheduled event with the
    same id) and on their own ``occurred_on`` otherwise. Ad-hoc attendance is
    left out. Records that cannot be placed are counted in ``dropped``.
    """

    def __init__(
        self,
        events: Optional[Iterable[ScheduledEvent]] = None,
        attendance: Optional[Iterable[AttendanceRecord]] = None,
        excuses: Optional[Iterable[ExcuseRequest]] = None,
        *,
        org_id: Optional[str] = None,
        tz: Optional[tzinfo] = None,
    ):
        self._tz = tz
        self.dropped = 0

        self._event_days: dict[str, DayKey] = {}
        self._days_with_event: set[DayKey] = set()
        for ev in events or ():
            if org_id is not None and ev.org_id != org_id:
                continue
            day = to_day_key(ev.event_date, tz)
            if day is None:
                self.dropped += 1
                continue
            self._event_days[ev.event_id] = day
            self._days_with_event.add(day)

        self._attendance: dict[DayKey, set[AttendanceStatus]] = {}
        for rec in attendance or ():
            if rec.is_ad_hoc:
                continue
            day = self._place(rec.event_date, rec.event_id, rec.occurred_on)
            if day is None:
                self.dropped += 1
                continue
            self._attendance.setdefault(day, set()).add(rec.status)

        self._excuses: dict[DayKey, set[ExcuseStatus]] = {}
        for req in excuses or ():
            day = self._place(req.event_date, req.event_id, req.occurred_on)
            if day is None:
                self.dropped += 1
                continue
            self._excuses.setdefault(day, set()).add(req.status)

    def _place(
        self,
        event_date: Optional[DateRepr],
        event_id: Optional[str],
        occurred_on: Optional[DateRepr],
    ) -> Optional[DayKey]:
        if event_date is not None:
            day = to_day_key(event_date, self._tz)
            if day is not None:
                return day
        if event_id is not None and event_id in self._event_days:
            return self._event_days[event_id]
        return to_day_key(occurred_on, self._tz)

    def facts_for(self, day: date) -> DayFacts:
        if day not in self._days_with_event:
            return NO_FACTS

        statuses = self._attendance.get(day, set())
        excuses = self._excuses.get(day, set())
        return DayFacts(
            has_event=True,
            has_attendance=bool(statuses),
            checked_in=bool(statuses & _CHECKED_IN),
            excused_record=AttendanceStatus.EXCUSED in statuses,
            excuse_approved=ExcuseStatus.APPROVED in excuses,
            excuse_pending=ExcuseStatus.PENDING in excuses,
        )
