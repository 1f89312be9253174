"""Reconcile scheduled events, check-ins and excuse requests into day statuses.

Pure functions: no I/O, no clock reads other than the ``now`` passed in, and
no exceptions for malformed upstream data. Safe to call from any thread.
"""

from __future__ import annotations

from datetime import date, timedelta, tzinfo
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import DateRepr, to_day_key
from ..core.enums import DayStatus
from ..excuses.model import ExcuseRequest
from ..schedules.model import ScheduledEvent
from .factory import DayRuleTable
from .index import DayIndex
from .rules.base import DayContext

_DEFAULT_TABLE = DayRuleTable()


def resolve_indexed(
    index: DayIndex,
    day: date,
    today: Optional[date],
    *,
    table: Optional[DayRuleTable] = None,
) -> DayStatus:
    ctx = DayContext(day=day, today=today, facts=index.facts_for(day))
    return (table or _DEFAULT_TABLE).for_day(ctx).status


def statuses_for_range(
    index: DayIndex,
    start_day: date,
    day_count: int,
    today: Optional[date],
    *,
    table: Optional[DayRuleTable] = None,
) -> list[DayStatus]:
    return [
        resolve_indexed(index, start_day + timedelta(days=offset), today, table=table)
        for offset in range(max(int(day_count), 0))
    ]


def resolve_day(
    day: DateRepr,
    events: Optional[Iterable[ScheduledEvent]],
    attendance: Optional[Iterable[AttendanceRecord]],
    excuses: Optional[Iterable[ExcuseRequest]],
    now: DateRepr,
    *,
    org_id: Optional[str] = None,
    tz: Optional[tzinfo] = None,
    table: Optional[DayRuleTable] = None,
) -> DayStatus:
    """Status of a single day. An unplaceable ``day`` is ``OFF``."""

    day_key = to_day_key(day, tz)
    if day_key is None:
        return DayStatus.OFF
    index = DayIndex(events, attendance, excuses, org_id=org_id, tz=tz)
    return resolve_indexed(index, day_key, to_day_key(now, tz), table=table)


def build_range(
    start_day: DateRepr,
    day_count: int,
    events: Optional[Iterable[ScheduledEvent]],
    attendance: Optional[Iterable[AttendanceRecord]],
    excuses: Optional[Iterable[ExcuseRequest]],
    now: DateRepr,
    *,
    org_id: Optional[str] = None,
    tz: Optional[tzinfo] = None,
    table: Optional[DayRuleTable] = None,
) -> list[DayStatus]:
    """One status per day, chronological from ``start_day``.

    The snapshots are indexed once for the whole range. A ``start_day`` that
    cannot be placed yields ``OFF`` for every requested day.
    """

    count = max(int(day_count), 0)
    start = to_day_key(start_day, tz)
    if start is None:
        return [DayStatus.OFF] * count
    index = DayIndex(events, attendance, excuses, org_id=org_id, tz=tz)
    return statuses_for_range(index, start, count, to_day_key(now, tz), table=table)
