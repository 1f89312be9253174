from datetime import date

from src.week_status.week_status.core.enums import DayStatus
from src.week_status.week_status.reconciliation.factory import DEFAULT_RULES, DayRuleTable
from src.week_status.week_status.reconciliation.index import DayFacts
from src.week_status.week_status.reconciliation.rules.base import DayContext
from src.week_status.week_status.reconciliation.rules.outcome_rules import (
    AbsentRule,
    CheckedInRule,
    ExcuseApprovedRule,
    ExcusePendingRule,
)
from src.week_status.week_status.reconciliation.rules.schedule_rules import NoEventRule, OutcomePendingRule

TODAY = date(2026, 2, 11)
YESTERDAY = date(2026, 2, 10)
TOMORROW = date(2026, 2, 12)


def _rule(day, facts, today=TODAY):
    return DayRuleTable().for_day(DayContext(day=day, today=today, facts=facts))


def test_table_order_is_the_precedence_order():
    assert [r.status for r in DEFAULT_RULES] == [
        DayStatus.OFF,
        DayStatus.SCHEDULED,
        DayStatus.CHECKED_IN,
        DayStatus.EXCUSE_APPROVED,
        DayStatus.EXCUSE_PENDING,
        DayStatus.ABSENT,
    ]


def test_no_event_wins_over_everything():
    facts = DayFacts(has_event=False, has_attendance=True, checked_in=True, excuse_approved=True)
    assert isinstance(_rule(YESTERDAY, facts), NoEventRule)


def test_future_event_is_pending_even_with_check_in():
    facts = DayFacts(has_event=True, has_attendance=True, checked_in=True)
    assert isinstance(_rule(TOMORROW, facts), OutcomePendingRule)


def test_today_without_record_or_approval_is_pending():
    facts = DayFacts(has_event=True, excuse_pending=True)
    assert isinstance(_rule(TODAY, facts), OutcomePendingRule)


def test_today_with_check_in_is_checked_in():
    facts = DayFacts(has_event=True, has_attendance=True, checked_in=True)
    assert isinstance(_rule(TODAY, facts), CheckedInRule)


def test_today_with_approved_excuse_and_no_record():
    facts = DayFacts(has_event=True, excuse_approved=True)
    assert isinstance(_rule(TODAY, facts), ExcuseApprovedRule)


def test_check_in_beats_pending_excuse():
    facts = DayFacts(has_event=True, has_attendance=True, checked_in=True, excuse_pending=True)
    assert isinstance(_rule(YESTERDAY, facts), CheckedInRule)


def test_excused_record_counts_as_approved():
    facts = DayFacts(has_event=True, has_attendance=True, excused_record=True)
    assert isinstance(_rule(YESTERDAY, facts), ExcuseApprovedRule)


def test_pending_excuse_on_past_event():
    facts = DayFacts(has_event=True, excuse_pending=True)
    assert isinstance(_rule(YESTERDAY, facts), ExcusePendingRule)


def test_past_event_with_nothing_is_absent():
    assert isinstance(_rule(YESTERDAY, DayFacts(has_event=True)), AbsentRule)


def test_unknown_today_keeps_event_days_pending():
    facts = DayFacts(has_event=True, has_attendance=True, checked_in=True)
    assert isinstance(_rule(YESTERDAY, facts, today=None), OutcomePendingRule)


def test_table_without_catch_all_falls_back_to_absent():
    table = DayRuleTable(rules=(NoEventRule(),))
    ctx = DayContext(day=YESTERDAY, today=TODAY, facts=DayFacts(has_event=True))
    assert table.for_day(ctx).status == DayStatus.ABSENT
