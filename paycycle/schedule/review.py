"""Reviewing a generated schedule before it is committed.

A reviewer may hand-edit any of the four dates of any cycle. The generator
does not enforce JCT ordering, so validate_schedule offers that check to
callers that want it:

    application_date < due_date <= pay_less_notice_date <= final_date_for_payment
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import date

from paycycle.core.calendar import parse_iso_date, period_label
from paycycle.core.errors import FieldViolation, ValidationError, validation_error
from paycycle.core.result import Err, Ok
from paycycle.schedule.types import CYCLE_DATE_FIELDS, PaymentCycle

_OVERRIDE_SOURCE = "schedule.review.override_cycle_date"


def _single_violation(path: str, constraint: str, actual: object) -> ValidationError:
    return validation_error(
        _OVERRIDE_SOURCE,
        [FieldViolation(path=path, constraint=constraint, actual_value=repr(actual))],
    )


def override_cycle_date(
    cycles: Sequence[PaymentCycle], index: int, field: str, value: date | str,
) -> Ok[tuple[PaymentCycle, ...]] | Err[ValidationError]:
    """Replace one date of one cycle. Other cycles are returned untouched.

    Moving a due date relabels the cycle's period.
    """
    if not (0 <= index < len(cycles)):
        return Err(_single_violation("index", f"must be in range 0..{len(cycles) - 1}", index))
    if field not in CYCLE_DATE_FIELDS:
        return Err(_single_violation(
            "field", f"must be one of {', '.join(CYCLE_DATE_FIELDS)}", field,
        ))
    match parse_iso_date(value):
        case Err(msg):
            return Err(_single_violation(f"cycles[{index}].{field}", msg, value))
        case Ok(new_date):
            pass

    cycle = cycles[index]
    changes: dict[str, object] = {field: new_date}
    if field == "due_date":
        changes["period_label"] = period_label(new_date)
    edited = replace(cycle, **changes)
    return Ok((*cycles[:index], edited, *cycles[index + 1:]))


def check_cycle_ordering(cycle: PaymentCycle, prefix: str = "") -> tuple[FieldViolation, ...]:
    """Ordering violations of one cycle; empty when the dates are in JCT order."""
    violations: list[FieldViolation] = []
    if cycle.application_date >= cycle.due_date:
        violations.append(FieldViolation(
            path=f"{prefix}application_date",
            constraint="must be before due_date",
            actual_value=cycle.application_date.isoformat(),
        ))
    if cycle.final_date_for_payment < cycle.due_date:
        violations.append(FieldViolation(
            path=f"{prefix}final_date_for_payment",
            constraint="must be on or after due_date",
            actual_value=cycle.final_date_for_payment.isoformat(),
        ))
    if cycle.pay_less_notice_date < cycle.due_date:
        violations.append(FieldViolation(
            path=f"{prefix}pay_less_notice_date",
            constraint="must be on or after due_date",
            actual_value=cycle.pay_less_notice_date.isoformat(),
        ))
    if cycle.pay_less_notice_date > cycle.final_date_for_payment:
        violations.append(FieldViolation(
            path=f"{prefix}pay_less_notice_date",
            constraint="must be on or before final_date_for_payment",
            actual_value=cycle.pay_less_notice_date.isoformat(),
        ))
    return tuple(violations)


def validate_schedule(
    cycles: Sequence[PaymentCycle],
) -> Ok[tuple[PaymentCycle, ...]] | Err[ValidationError]:
    """Check every cycle's date ordering, reporting all violations at once."""
    violations: list[FieldViolation] = []
    for i, cycle in enumerate(cycles):
        violations.extend(check_cycle_ordering(cycle, prefix=f"cycles[{i}]."))
    if violations:
        return Err(validation_error("schedule.review.validate_schedule", violations))
    return Ok(tuple(cycles))
