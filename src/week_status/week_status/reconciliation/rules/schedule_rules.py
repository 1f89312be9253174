from __future__ import annotations

from ...core.enums import DayStatus
from .base import DayContext, DayRule


class NoEventRule(DayRule):
    """No scheduled event that day: nothing else about the day matters."""

    status = DayStatus.OFF

    def applies(self, ctx: DayContext) -> bool:
        return not ctx.facts.has_event


class OutcomePendingRule(DayRule):
    """Event still ahead, or today with nothing recorded yet.

    An unknown ``today`` also counts: without a usable clock the outcome
    cannot be judged.
    """

    status = DayStatus.SCHEDULED

    def applies(self, ctx: DayContext) -> bool:
        if ctx.today is None or ctx.is_future:
            return True
        if ctx.is_today:
            return not ctx.facts.has_attendance and not ctx.facts.excuse_approved
        return False
