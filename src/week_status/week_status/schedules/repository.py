from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ScheduledEvent


class ScheduleSource(Protocol):
    def list_for_org(self, *, org_id: str, start: date, end: date) -> Sequence[ScheduledEvent]:
        """Scheduled (non ad-hoc) events of ``org_id`` between start and end, inclusive."""

        raise NotImplementedError
