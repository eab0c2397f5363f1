"""Schedule value types: configuration in, payment cycles out.

A ScheduleConfig is immutable for one generation run. Each PaymentCycle is
one monthly interim-payment instance carrying its four JCT dates.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Literal, TypeAlias, final

from paycycle.core.types import TriggerField

_ZERO = Decimal("0")


class ApplicationStatus(Enum):
    """Progress of one payment application through the tracking workflow."""

    TO_DO = "to_do"
    APPLIED = "applied"
    CERTIFIED = "certified"
    INVOICED = "invoiced"
    PAID = "paid"


CycleDateField: TypeAlias = Literal[
    "application_date", "due_date", "pay_less_notice_date", "final_date_for_payment",
]

CYCLE_DATE_FIELDS: tuple[CycleDateField, ...] = (
    "application_date",
    "due_date",
    "pay_less_notice_date",
    "final_date_for_payment",
)


def _require_int(owner: str, name: str, value: object) -> None:
    # bool is an int subclass but never a valid day count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{owner}.{name} must be int, got {type(value).__name__}")


@final
@dataclass(frozen=True, slots=True)
class ReminderRule:
    """Reminder template: email someone N days before a cycle date."""

    email: str
    days_before: int
    trigger_field: TriggerField

    def __post_init__(self) -> None:
        if not self.email:
            raise TypeError("ReminderRule.email must be non-empty")
        _require_int("ReminderRule", "days_before", self.days_before)
        if not isinstance(self.trigger_field, TriggerField):
            raise TypeError(
                f"ReminderRule.trigger_field must be TriggerField, got {self.trigger_field!r}"
            )


@final
@dataclass(frozen=True, slots=True)
class Reminder:
    """A reminder rule instantiated on one payment cycle."""

    reminder_id: str
    email: str
    days_before: int
    trigger_field: TriggerField

    @staticmethod
    def from_rule(rule: ReminderRule, reminder_id: str) -> Reminder:
        return Reminder(
            reminder_id=reminder_id,
            email=rule.email,
            days_before=rule.days_before,
            trigger_field=rule.trigger_field,
        )


@final
@dataclass(frozen=True, slots=True)
class ScheduleConfig:
    """Inputs of one schedule generation run.

    first_due_date may be a date or an ISO string as entered on the form;
    it is only parsed when the schedule is generated. Day offsets are
    unconstrained here; rejecting negatives is the caller's job.
    """

    first_due_date: date | str
    payment_terms_days: int
    pay_less_notice_offset_days: int
    application_offset_days: int
    recurrence_months: int
    retention_percentage: Decimal = _ZERO
    reminder_rules: tuple[ReminderRule, ...] = ()

    def __post_init__(self) -> None:
        for name in (
            "payment_terms_days",
            "pay_less_notice_offset_days",
            "application_offset_days",
            "recurrence_months",
        ):
            _require_int("ScheduleConfig", name, getattr(self, name))
        if not isinstance(self.retention_percentage, Decimal):
            raise TypeError(
                "ScheduleConfig.retention_percentage must be Decimal, "
                f"got {type(self.retention_percentage).__name__}"
            )
        if not isinstance(self.reminder_rules, tuple):
            raise TypeError("ScheduleConfig.reminder_rules must be a tuple")


@final
@dataclass(frozen=True, slots=True)
class PaymentCycle:
    """One monthly interim payment with its JCT dates.

    Amounts start at zero and are filled in later by application tracking.
    """

    cycle_index: int
    period_label: str
    application_date: date
    due_date: date
    pay_less_notice_date: date
    final_date_for_payment: date
    retention_percentage: Decimal
    reminders: tuple[Reminder, ...] = ()
    status: ApplicationStatus = ApplicationStatus.TO_DO
    applied_amount: Decimal = _ZERO
    gross_certified_amount: Decimal = _ZERO
    retention_deducted: Decimal = _ZERO
    certified_amount: Decimal = _ZERO
    invoiced_amount: Decimal = _ZERO
    amount: Decimal = _ZERO

    def date_of(self, trigger: TriggerField) -> date:
        """The cycle date a reminder trigger refers to."""
        value: date = getattr(self, trigger.attribute)
        return value


@final
@dataclass(frozen=True, slots=True)
class ProjectRef:
    """The project a schedule is committed against."""

    project_id: str
    name: str

    def __post_init__(self) -> None:
        if not self.project_id:
            raise TypeError("ProjectRef.project_id must be non-empty")


@final
@dataclass(frozen=True, slots=True)
class ApplicationRecord:
    """A committed payment cycle. Independent of the batch it came from."""

    application_id: str
    project_id: str
    project_name: str
    cycle: PaymentCycle
