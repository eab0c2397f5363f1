"""Tests for paycycle.schedule.reminders: rule editing and send dates."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from paycycle.core.errors import ValidationError
from paycycle.core.result import Err, Ok, unwrap
from paycycle.core.types import TriggerField
from paycycle.infra.config import ScheduleDefaults
from paycycle.schedule.generator import generate_schedule
from paycycle.schedule.reminders import (
    add_reminder_rule,
    reminder_send_date,
    remove_reminder_rule,
    upcoming_reminders,
)
from paycycle.schedule.types import ReminderRule, ScheduleConfig

_QS = ReminderRule("qs@example.com", 3, TriggerField.DUE_DATE)
_ACCOUNTS = ReminderRule("accounts@example.com", 3, TriggerField.FINAL_DATE_FOR_PAYMENT)


def _cycles(rules: tuple[ReminderRule, ...], months: int = 1):  # noqa: ANN202
    return unwrap(generate_schedule(ScheduleConfig(
        first_due_date=date(2024, 3, 30),
        payment_terms_days=14,
        pay_less_notice_offset_days=5,
        application_offset_days=7,
        recurrence_months=months,
        retention_percentage=Decimal("5"),
        reminder_rules=rules,
    )))


def _early_cycle(days_before: int = 40):  # noqa: ANN202
    return unwrap(generate_schedule(ScheduleConfig(
        first_due_date=date(1, 1, 31),
        payment_terms_days=14,
        pay_less_notice_offset_days=5,
        application_offset_days=0,
        recurrence_months=1,
        reminder_rules=(
            ReminderRule("qs@example.com", days_before, TriggerField.APPLICATION_DATE),
        ),
    )))[0]


class TestAddReminderRule:
    def test_appends(self) -> None:
        rules = unwrap(add_reminder_rule((_QS,), "pm@example.com", 5, TriggerField.APPLICATION_DATE))
        assert rules == (_QS, ReminderRule("pm@example.com", 5, TriggerField.APPLICATION_DATE))

    def test_strips_email(self) -> None:
        rules = unwrap(add_reminder_rule((), "  pm@example.com ", 1, TriggerField.DUE_DATE))
        assert rules[0].email == "pm@example.com"

    def test_blank_email_rejected(self) -> None:
        result = add_reminder_rule((_QS,), "  ", 3, TriggerField.DUE_DATE)
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)
        assert result.error.fields[0].path == "email"

    def test_defaults_seed_new_rule(self) -> None:
        rules = unwrap(add_reminder_rule((), "qs@example.com"))
        assert rules == (ReminderRule("qs@example.com", 3, TriggerField.DUE_DATE),)

    def test_configured_defaults_seed_new_rule(self) -> None:
        defaults = ScheduleDefaults(
            reminder_days_before=10, reminder_trigger=TriggerField.APPLICATION_DATE,
        )
        rules = unwrap(add_reminder_rule((), "qs@example.com", defaults=defaults))
        assert rules[0].days_before == 10
        assert rules[0].trigger_field is TriggerField.APPLICATION_DATE

    def test_explicit_zero_days_before_kept(self) -> None:
        rules = unwrap(add_reminder_rule((), "qs@example.com", 0, TriggerField.DUE_DATE))
        assert rules[0].days_before == 0

    @pytest.mark.parametrize("days_before", [-4, "3", True, 2.5])
    def test_bad_days_before_rejected(self, days_before: object) -> None:
        result = add_reminder_rule(
            (_QS,), "pm@example.com", days_before, TriggerField.DUE_DATE,  # type: ignore[arg-type]
        )
        assert isinstance(result, Err)
        assert [f.path for f in result.error.fields] == ["days_before"]

    def test_bad_trigger_rejected(self) -> None:
        result = add_reminder_rule((), "pm@example.com", 3, "dueDate")  # type: ignore[arg-type]
        assert isinstance(result, Err)
        assert [f.path for f in result.error.fields] == ["trigger_field"]

    def test_collects_every_violation(self) -> None:
        result = add_reminder_rule((), " ", -1, None, defaults=ScheduleDefaults())
        assert isinstance(result, Err)
        assert [f.path for f in result.error.fields] == ["email", "days_before"]


class TestRemoveReminderRule:
    def test_removes_by_index(self) -> None:
        assert unwrap(remove_reminder_rule((_QS, _ACCOUNTS), 0)) == (_ACCOUNTS,)

    def test_out_of_range(self) -> None:
        assert isinstance(remove_reminder_rule((_QS,), 1), Err)
        assert isinstance(remove_reminder_rule((_QS,), -1), Err)

    def test_empty(self) -> None:
        assert isinstance(remove_reminder_rule((), 0), Err)


class TestReminderSendDate:
    def test_each_trigger(self) -> None:
        rules = (
            ReminderRule("a@example.com", 3, TriggerField.APPLICATION_DATE),
            ReminderRule("b@example.com", 3, TriggerField.DUE_DATE),
            ReminderRule("c@example.com", 3, TriggerField.FINAL_DATE_FOR_PAYMENT),
        )
        cycle = _cycles(rules)[0]
        sends = [unwrap(reminder_send_date(cycle, r)) for r in cycle.reminders]
        assert sends == [date(2024, 3, 20), date(2024, 3, 27), date(2024, 4, 10)]

    def test_before_calendar_start_is_err(self) -> None:
        cycle = _early_cycle()
        result = reminder_send_date(cycle, cycle.reminders[0])
        assert isinstance(result, Err)
        assert isinstance(result.error, ValidationError)

    def test_at_calendar_start_is_ok(self) -> None:
        cycle = _early_cycle(days_before=30)
        assert reminder_send_date(cycle, cycle.reminders[0]) == Ok(date(1, 1, 1))


class TestUpcomingReminders:
    def test_matches_send_date(self) -> None:
        cycles = _cycles((_QS, _ACCOUNTS), months=2)
        due = upcoming_reminders(cycles, date(2024, 3, 27))
        assert len(due) == 1
        cycle, reminder = due[0]
        assert cycle.cycle_index == 0
        assert reminder.email == "qs@example.com"

    def test_nothing_due(self) -> None:
        assert upcoming_reminders(_cycles((_QS,)), date(2024, 1, 1)) == ()

    def test_off_calendar_reminder_skipped(self) -> None:
        assert upcoming_reminders((_early_cycle(),), date(1, 1, 1)) == ()
