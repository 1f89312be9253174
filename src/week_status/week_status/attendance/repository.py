from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceSource(Protocol):
    def list_for_user(self, *, user_id: str, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
