from __future__ import annotations

from ...core.enums import DayStatus
from .base import DayContext, DayRule


class CheckedInRule(DayRule):
    status = DayStatus.CHECKED_IN

    def applies(self, ctx: DayContext) -> bool:
        return ctx.facts.checked_in


class ExcuseApprovedRule(DayRule):
    status = DayStatus.EXCUSE_APPROVED

    def applies(self, ctx: DayContext) -> bool:
        return ctx.facts.excused_record or ctx.facts.excuse_approved


class ExcusePendingRule(DayRule):
    status = DayStatus.EXCUSE_PENDING

    def applies(self, ctx: DayContext) -> bool:
        return ctx.facts.excuse_pending


class AbsentRule(DayRule):
    """Catch-all: a past or current event with no check-in and no valid excuse."""

    status = DayStatus.ABSENT

    def applies(self, ctx: DayContext) -> bool:
        return True
