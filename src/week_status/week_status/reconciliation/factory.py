from __future__ import annotations

from dataclasses import dataclass

from .rules.base import DayContext, DayRule
from .rules.outcome_rules import AbsentRule, CheckedInRule, ExcuseApprovedRule, ExcusePendingRule
from .rules.schedule_rules import NoEventRule, OutcomePendingRule

# Order is the business rule: first match wins.
DEFAULT_RULES: tuple[DayRule, ...] = (
    NoEventRule(),
    OutcomePendingRule(),
    CheckedInRule(),
    ExcuseApprovedRule(),
    ExcusePendingRule(),
    AbsentRule(),
)

_FALLBACK = AbsentRule()


@dataclass(frozen=True)
class DayRuleTable:
    """Factory Pattern: pick the rule that decides a day."""

    rules: tuple[DayRule, ...] = DEFAULT_RULES

    def for_day(self, ctx: DayContext) -> DayRule:
        for rule in self.rules:
            if rule.applies(ctx):
                return rule
        return _FALLBACK
