from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import DateRepr
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """A user's recorded outcome for one occurrence.

    ``occurred_on`` is the check-in instant and may be missing for absences
    marked after the event ended. ``event_date`` is the linked event's date
    when the source returns it alongside the record.
    """

    attendance_id: str
    status: AttendanceStatus
    event_id: Optional[str] = None
    occurred_on: Optional[DateRepr] = None
    is_ad_hoc: bool = False
    event_date: Optional[DateRepr] = None
