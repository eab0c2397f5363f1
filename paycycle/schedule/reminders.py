"""Reminder-rule editing and reminder send dates."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from paycycle.core.calendar import add_days
from paycycle.core.errors import FieldViolation, ValidationError, validation_error
from paycycle.core.result import Err, Ok
from paycycle.core.types import NonEmptyStr, TriggerField
from paycycle.infra.config import ScheduleDefaults
from paycycle.schedule.types import PaymentCycle, Reminder, ReminderRule


def add_reminder_rule(
    rules: tuple[ReminderRule, ...],
    email: str,
    days_before: int | None = None,
    trigger_field: TriggerField | None = None,
    *,
    defaults: ScheduleDefaults | None = None,
) -> Ok[tuple[ReminderRule, ...]] | Err[ValidationError]:
    """Append a rule; the rules are unchanged on Err.

    days_before and trigger_field fall back to the reminder defaults
    (3 days before the due date unless configured otherwise).
    """
    d = defaults if defaults is not None else ScheduleDefaults()
    if days_before is None:
        days_before = d.reminder_days_before
    if trigger_field is None:
        trigger_field = d.reminder_trigger

    violations: list[FieldViolation] = []
    addr = ""
    match NonEmptyStr.parse(email):
        case Err(msg):
            violations.append(
                FieldViolation(path="email", constraint=msg, actual_value=repr(email)),
            )
        case Ok(parsed):
            addr = parsed.value
    if isinstance(days_before, bool) or not isinstance(days_before, int) or days_before < 0:
        violations.append(FieldViolation(
            path="days_before", constraint="must be an integer >= 0",
            actual_value=repr(days_before),
        ))
    if not isinstance(trigger_field, TriggerField):
        violations.append(FieldViolation(
            path="trigger_field",
            constraint="must be applicationDate, dueDate or finalDateForPayment",
            actual_value=repr(trigger_field),
        ))
    if violations:
        return Err(validation_error("schedule.reminders.add_reminder_rule", violations))
    rule = ReminderRule(email=addr, days_before=days_before, trigger_field=trigger_field)
    return Ok((*rules, rule))


def remove_reminder_rule(
    rules: tuple[ReminderRule, ...], index: int,
) -> Ok[tuple[ReminderRule, ...]] | Err[ValidationError]:
    if not (0 <= index < len(rules)):
        return Err(validation_error(
            "schedule.reminders.remove_reminder_rule",
            [FieldViolation(
                path="index",
                constraint=f"must be in range 0..{len(rules) - 1}" if rules else "no rules to remove",
                actual_value=str(index),
            )],
        ))
    return Ok(rules[:index] + rules[index + 1:])


def reminder_send_date(
    cycle: PaymentCycle, reminder: Reminder,
) -> Ok[date] | Err[ValidationError]:
    """Date the reminder goes out: its trigger date minus days_before.

    Err when that date falls outside the supported calendar (years 1..9999).
    """
    trigger_date = cycle.date_of(reminder.trigger_field)
    try:
        return Ok(add_days(trigger_date, -reminder.days_before))
    except OverflowError:
        return Err(validation_error(
            "schedule.reminders.reminder_send_date",
            [FieldViolation(
                path=f"reminders[{reminder.reminder_id}].days_before",
                constraint=f"send date leaves the supported calendar range from {trigger_date}",
                actual_value=str(reminder.days_before),
            )],
        ))


def upcoming_reminders(
    cycles: Iterable[PaymentCycle], on_date: date,
) -> tuple[tuple[PaymentCycle, Reminder], ...]:
    """Every (cycle, reminder) pair due to be sent on on_date, in schedule order.

    A reminder whose send date is off the calendar is never due.
    """
    return tuple(
        (cycle, reminder)
        for cycle in cycles
        for reminder in cycle.reminders
        if reminder_send_date(cycle, reminder) == Ok(on_date)
    )
