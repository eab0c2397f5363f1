"""Payment schedule generator.

generate_schedule derives one PaymentCycle per month from a ScheduleConfig:

    due date        = first due date + i calendar months (clamped)
    application     = due date - application offset
    final payment   = due date + payment terms
    pay-less notice = final payment - pay-less notice offset

A first due date on the last day of its month keeps every cycle on the last
day of its month. The generator is a pure function of its config: no clock,
no I/O, and no chronological checks on the four dates (see
paycycle.schedule.review for those).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import final

from paycycle.core.calendar import (
    add_calendar_months,
    add_days,
    is_month_end,
    parse_iso_date,
    period_label,
)
from paycycle.core.errors import InvalidConfigurationError, invalid_configuration
from paycycle.core.result import Err, Ok
from paycycle.core.serialization import content_hash
from paycycle.logging_config import LogContext, get_logger
from paycycle.schedule.types import PaymentCycle, Reminder, ScheduleConfig

logger = get_logger("schedule.generator")

_SOURCE = "schedule.generator.generate_schedule"
_BATCH_ID_LENGTH = 12


@final
@dataclass(frozen=True, slots=True)
class CycleDates:
    """The four JCT dates of one cycle."""

    application_date: date
    due_date: date
    pay_less_notice_date: date
    final_date_for_payment: date


def cycle_dates(due_date: date, config: ScheduleConfig) -> CycleDates:
    """Derive the other three dates of a cycle from its due date."""
    final_date = add_days(due_date, config.payment_terms_days)
    return CycleDates(
        application_date=add_days(due_date, -config.application_offset_days),
        due_date=due_date,
        pay_less_notice_date=add_days(final_date, -config.pay_less_notice_offset_days),
        final_date_for_payment=final_date,
    )


def reminder_id(batch_id: str, cycle_index: int, rule_index: int) -> str:
    return f"rem-{batch_id}-{cycle_index}-{rule_index}"


def batch_id_for(config: ScheduleConfig) -> Ok[str] | Err[str]:
    """Short content hash of the config, used to scope reminder ids.

    The first due date is hashed as the parsed date, so "2024-01-31",
    date(2024, 1, 31) and datetime(2024, 1, 31) share a batch id.
    """
    normalized = parse_iso_date(config.first_due_date).map(
        lambda anchor: replace(config, first_due_date=anchor),
    ).unwrap_or(config)
    return content_hash(normalized).map(lambda h: h[:_BATCH_ID_LENGTH])


def generate_schedule(
    config: ScheduleConfig, *, batch_id: str | None = None,
) -> Ok[tuple[PaymentCycle, ...]] | Err[InvalidConfigurationError]:
    """Generate recurrence_months payment cycles anchored on first_due_date.

    Returns Err(InvalidConfigurationError) and no cycles when the first due
    date does not parse or the schedule would leave the calendar range.
    batch_id defaults to a hash of the config, so the same config always
    yields the same cycles, reminder ids included.
    """
    match parse_iso_date(config.first_due_date):
        case Err(reason):
            logger.warning(
                "schedule_rejected",
                extra={"field": "first_due_date", "reason": reason},
            )
            return Err(invalid_configuration(
                _SOURCE, "first_due_date", config.first_due_date,
                f"first_due_date: {reason}",
            ))
        case Ok(anchor):
            pass

    if batch_id is None:
        match batch_id_for(config):
            case Err(reason):
                return Err(invalid_configuration(_SOURCE, "config", config, reason))
            case Ok(derived):
                batch_id = derived

    roll_end_of_month = is_month_end(anchor)
    cycles: list[PaymentCycle] = []
    with LogContext.bind(batch_id=batch_id):
        try:
            for i in range(config.recurrence_months):
                due = add_calendar_months(anchor, i, roll_end_of_month=roll_end_of_month)
                dates = cycle_dates(due, config)
                reminders = tuple(
                    Reminder.from_rule(rule, reminder_id(batch_id, i, j))
                    for j, rule in enumerate(config.reminder_rules)
                )
                cycles.append(PaymentCycle(
                    cycle_index=i,
                    period_label=period_label(due),
                    application_date=dates.application_date,
                    due_date=dates.due_date,
                    pay_less_notice_date=dates.pay_less_notice_date,
                    final_date_for_payment=dates.final_date_for_payment,
                    retention_percentage=config.retention_percentage,
                    reminders=reminders,
                ))
        except (OverflowError, ValueError) as e:
            # date arithmetic past year 9999 or before year 1
            logger.warning(
                "schedule_rejected",
                extra={"field": "first_due_date", "reason": str(e)},
            )
            return Err(invalid_configuration(
                _SOURCE, "first_due_date", anchor,
                f"schedule leaves the supported calendar range: {e}",
            ))

        logger.info(
            "schedule_generated",
            extra={
                "first_due_date": anchor.isoformat(),
                "cycles": len(cycles),
                "month_end_anchor": roll_end_of_month,
            },
        )
    return Ok(tuple(cycles))
