from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Outcome stored on a check-in record."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    ABSENT = "ABSENT"
    EXCUSED = "EXCUSED"


class ExcuseStatus(str, Enum):
    """Approval state of an excuse request."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class DayStatus(str, Enum):
    """One label per calendar day in the week view."""

    OFF = "OFF"
    SCHEDULED = "SCHEDULED"
    CHECKED_IN = "CHECKED_IN"
    EXCUSE_APPROVED = "EXCUSE_APPROVED"
    EXCUSE_PENDING = "EXCUSE_PENDING"
    ABSENT = "ABSENT"


class DateShape(str, Enum):
    EPOCH_SECONDS = "EPOCH_SECONDS"
    EPOCH_MILLIS = "EPOCH_MILLIS"
    ISO_DATE = "ISO_DATE"
    ISO_DATETIME = "ISO_DATETIME"
    NATIVE = "NATIVE"


class WeekStart(str, Enum):
    SUNDAY = "sunday"
    MONDAY = "monday"
