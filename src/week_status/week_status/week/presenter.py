from __future__ import annotations

from collections import Counter
from datetime import date
from typing import Iterable, Optional

from ..core.enums import DayStatus

_LABELS = {
    DayStatus.OFF: "Off",
    DayStatus.SCHEDULED: "Scheduled",
    DayStatus.CHECKED_IN: "Checked in",
    DayStatus.EXCUSE_APPROVED: "Excused",
    DayStatus.EXCUSE_PENDING: "Excuse pending",
    DayStatus.ABSENT: "Absent",
}

_COLORS = {
    DayStatus.OFF: "rgba(255,255,255,0.05)",
    DayStatus.SCHEDULED: "rgba(255,255,255,0.1)",
    DayStatus.CHECKED_IN: "#27ae60",
    DayStatus.EXCUSE_APPROVED: "#9b59b6",
    DayStatus.EXCUSE_PENDING: "#f39c12",
    DayStatus.ABSENT: "#e74c3c",
}

_ICONS = {
    DayStatus.OFF: "minus",
    DayStatus.SCHEDULED: "calendar",
    DayStatus.CHECKED_IN: "check",
    DayStatus.EXCUSE_APPROVED: "info",
    DayStatus.EXCUSE_PENDING: "clock",
    DayStatus.ABSENT: "x",
}


def present_day(day: date, status: DayStatus) -> dict:
    return {
        "date": day.strftime("%Y-%m-%d"),
        "weekday": day.strftime("%a"),
        "status": status.value,
        "label": _LABELS.get(status, status.value),
        "color": _COLORS.get(status, _COLORS[DayStatus.OFF]),
        "icon": _ICONS.get(status, "minus"),
    }


def attendance_rate(checked_in: int, absent: int) -> Optional[float]:
    """Share of decided days that were attended; excused days are not counted."""
    decided = checked_in + absent
    if decided == 0:
        return None
    return round(checked_in / decided, 4)


def summarize(statuses: Iterable[DayStatus]) -> dict:
    counts = Counter(statuses)
    return {
        "counts": {s.value: counts.get(s, 0) for s in DayStatus},
        "scheduled_days": sum(n for s, n in counts.items() if s != DayStatus.OFF),
        "attendance_rate": attendance_rate(counts.get(DayStatus.CHECKED_IN, 0), counts.get(DayStatus.ABSENT, 0)),
    }
