from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

import pytest

from src.week_status.week_status.attendance.model import AttendanceRecord
from src.week_status.week_status.core.enums import AttendanceStatus, DayStatus, ExcuseStatus, WeekStart
from src.week_status.week_status.core.exceptions import SourceError, ValidationError
from src.week_status.week_status.excuses.model import ExcuseRequest
from src.week_status.week_status.schedules.model import ScheduledEvent
from src.week_status.week_status.week.service import WeekStatusService

TZ = timezone(timedelta(hours=-6))
WEDNESDAY_NOON = datetime(2026, 2, 11, 12, 0, tzinfo=TZ)


@dataclass
class InMemorySchedules:
    events: list[ScheduledEvent]
    calls: list[dict] = field(default_factory=list)

    def list_for_org(self, *, org_id: str, start: date, end: date):
        self.calls.append({"org_id": org_id, "start": start, "end": end, "thread": threading.get_ident()})
        return [e for e in self.events if e.org_id == org_id]


@dataclass
class InMemoryAttendance:
    records: list[AttendanceRecord]
    calls: list[dict] = field(default_factory=list)

    def list_for_user(self, *, user_id: str, start: date, end: date):
        self.calls.append({"user_id": user_id, "start": start, "end": end})
        return list(self.records)


@dataclass
class InMemoryExcuses:
    requests: list[ExcuseRequest]
    calls: list[dict] = field(default_factory=list)

    def list_for_user(self, *, user_id: str, start: date, end: date):
        self.calls.append({"user_id": user_id, "start": start, "end": end})
        return list(self.requests)


class BrokenSchedules:
    def list_for_org(self, *, org_id, start, end):
        raise SourceError("schedule store unavailable")


def _service(events=(), attendance=(), excuses=(), *, with_excuses=True, **kwargs):
    schedules = InMemorySchedules(list(events))
    attendance_src = InMemoryAttendance(list(attendance))
    excuse_src = InMemoryExcuses(list(excuses)) if with_excuses else None
    svc = WeekStatusService(schedules, attendance_src, excuse_src, tz=TZ, **kwargs)
    return svc, schedules, attendance_src, excuse_src


def test_default_week_starts_on_sunday_of_now():
    events = [ScheduledEvent(event_id="ev-wed", event_date="2026-02-11", org_id="org-1")]
    svc, schedules, attendance_src, excuse_src = _service(events)

    week = svc.get_week(user_id="u1", org_id="org-1", now=WEDNESDAY_NOON)

    assert week.start == date(2026, 2, 8)
    assert week.end == date(2026, 2, 14)
    assert week.statuses == [
        DayStatus.OFF,
        DayStatus.OFF,
        DayStatus.OFF,
        DayStatus.SCHEDULED,
        DayStatus.OFF,
        DayStatus.OFF,
        DayStatus.OFF,
    ]
    assert schedules.calls[0]["start"] == date(2026, 2, 8)
    assert schedules.calls[0]["end"] == date(2026, 2, 14)
    assert attendance_src.calls[0]["user_id"] == "u1"
    assert excuse_src.calls[0]["user_id"] == "u1"


def test_monday_start_and_custom_length():
    svc, schedules, _, _ = _service(starts_on=WeekStart.MONDAY, week_days=5)

    week = svc.get_week(user_id="u1", org_id="org-1", now=WEDNESDAY_NOON)

    assert week.start == date(2026, 2, 9)
    assert len(week.statuses) == 5
    assert schedules.calls[0]["end"] == date(2026, 2, 13)


def test_explicit_start_and_day_count():
    svc, _, _, _ = _service()

    week = svc.get_week(user_id="u1", org_id="org-1", start_day=date(2026, 1, 1), now=WEDNESDAY_NOON, day_count=14)

    assert week.start == date(2026, 1, 1)
    assert week.end == date(2026, 1, 14)
    assert len(week.days) == 14


def test_past_week_reconciles_all_three_sources():
    events = [
        ScheduledEvent(event_id="mon", event_date="2026-02-09", org_id="org-1"),
        ScheduledEvent(event_id="tue", event_date="2026-02-10", org_id="org-1"),
        ScheduledEvent(event_id="wed", event_date="2026-02-11", org_id="org-1"),
        ScheduledEvent(event_id="thu", event_date="2026-02-12", org_id="org-1"),
        ScheduledEvent(event_id="other", event_date="2026-02-13", org_id="org-2"),
    ]
    attendance = [
        AttendanceRecord(attendance_id="a1", event_id="mon", status=AttendanceStatus.ON_TIME),
        AttendanceRecord(attendance_id="a2", event_id="tue", status=AttendanceStatus.ABSENT),
        AttendanceRecord(attendance_id="a3", event_id="other", event_date="2026-02-13", status=AttendanceStatus.LATE),
    ]
    excuses = [
        ExcuseRequest(request_id="x1", event_id="tue", status=ExcuseStatus.APPROVED),
        ExcuseRequest(request_id="x2", event_id="wed", status=ExcuseStatus.PENDING),
    ]
    svc, _, _, _ = _service(events, attendance, excuses)

    week = svc.get_week(user_id="u1", org_id="org-1", now=datetime(2026, 2, 16, 8, 0, tzinfo=TZ), start_day=date(2026, 2, 8))

    assert week.statuses == [
        DayStatus.OFF,
        DayStatus.CHECKED_IN,
        DayStatus.EXCUSE_APPROVED,
        DayStatus.EXCUSE_PENDING,
        DayStatus.ABSENT,
        DayStatus.OFF,
        DayStatus.OFF,
    ]
    assert week.summary["counts"]["CHECKED_IN"] == 1
    assert week.summary["scheduled_days"] == 4
    assert week.summary["attendance_rate"] == 0.5


def test_missing_excuse_source_is_treated_as_empty():
    events = [ScheduledEvent(event_id="tue", event_date="2026-02-10", org_id="org-1")]
    svc, _, _, excuse_src = _service(events, with_excuses=False)

    week = svc.get_week(user_id="u1", org_id="org-1", now=WEDNESDAY_NOON)

    assert excuse_src is None
    assert week.statuses[2] == DayStatus.ABSENT


def test_rows_are_presented_per_day():
    svc, _, _, _ = _service()

    week = svc.get_week(user_id="u1", org_id="org-1", now=WEDNESDAY_NOON)
    payload = week.to_dict()

    assert payload["start"] == "2026-02-08"
    assert payload["days"][0]["date"] == "2026-02-08"
    assert payload["days"][0]["weekday"] == "Sun"
    assert payload["days"][0]["status"] == "OFF"


def test_source_error_propagates():
    svc = WeekStatusService(BrokenSchedules(), InMemoryAttendance([]), None, tz=TZ)

    with pytest.raises(SourceError):
        svc.get_week(user_id="u1", org_id="org-1", now=WEDNESDAY_NOON)


@pytest.mark.parametrize("user_id, org_id", [("", "org-1"), ("u1", ""), ("u1", None), ("  ", "org-1")])
def test_missing_ids_are_rejected(user_id, org_id):
    svc, _, _, _ = _service()

    with pytest.raises(ValidationError):
        svc.get_week(user_id=user_id, org_id=org_id, now=WEDNESDAY_NOON)


@pytest.mark.parametrize("days", [0, -1, 63])
def test_day_count_out_of_bounds_is_rejected(days):
    svc, _, _, _ = _service()

    with pytest.raises(ValidationError):
        svc.get_week(user_id="u1", org_id="org-1", now=WEDNESDAY_NOON, day_count=days)
