from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import DateRepr


@dataclass(frozen=True)
class ScheduledEvent:
    """A non ad-hoc event scheduled for an organization on some day."""

    event_id: str
    event_date: DateRepr
    org_id: str
