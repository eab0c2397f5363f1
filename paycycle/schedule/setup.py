"""Seeding the schedule setup form.

The caller passes today's date in; nothing here reads the clock.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from paycycle.core.calendar import end_of_month
from paycycle.infra.config import ScheduleDefaults
from paycycle.schedule.types import ScheduleConfig


def default_first_due_date(today: date, project_start: date | None = None) -> date:
    """Last day of the project's start month, or of today's month."""
    return end_of_month(project_start if project_start is not None else today)


def initial_config(
    today: date,
    *,
    project_start: date | None = None,
    client_payment_terms_days: int | None = None,
    project_retention_percentage: Decimal | None = None,
    defaults: ScheduleDefaults | None = None,
) -> ScheduleConfig:
    """Config the form opens with.

    Client terms and project retention replace the defaults only when set
    and non-zero.
    """
    d = defaults if defaults is not None else ScheduleDefaults()
    return ScheduleConfig(
        first_due_date=default_first_due_date(today, project_start),
        payment_terms_days=client_payment_terms_days or d.payment_terms_days,
        pay_less_notice_offset_days=d.pay_less_notice_offset_days,
        application_offset_days=d.application_offset_days,
        recurrence_months=d.recurrence_months,
        retention_percentage=project_retention_percentage or d.retention_percentage,
        reminder_rules=(),
    )
