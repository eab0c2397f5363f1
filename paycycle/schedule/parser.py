"""Setup-form parser: raw form dict to ScheduleConfig.

parse_schedule_config is the boundary between the setup form and the
generator. It collects every field problem into one ValidationError. The
first due date is only type-checked here; whether it is a real calendar
date is decided by generate_schedule.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from datetime import date
from decimal import Decimal

from paycycle.core.errors import FieldViolation, ValidationError, validation_error
from paycycle.core.result import Err, Ok
from paycycle.core.types import Percentage, TriggerField
from paycycle.infra.config import ScheduleDefaults
from paycycle.schedule.types import ReminderRule, ScheduleConfig

# Form keys per ScheduleConfig field. The first key is the one the setup
# form sends; later keys are accepted aliases.
_DAY_FIELDS: dict[str, tuple[str, ...]] = {
    "payment_terms_days": ("paymentTermsDays",),
    "pay_less_notice_offset_days": ("payLessNoticeOffset", "payLessNoticeOffsetDays"),
    "application_offset_days": ("applicationOffset", "applicationOffsetDays"),
}
_RECURRENCE_KEY = "recurrenceMonths"
_FIRST_DUE_KEY = "firstDueDate"
_RETENTION_KEY = "retentionPercentage"
_REMINDERS_KEY = "reminderRules"


def _lookup(raw: Mapping[str, object], keys: tuple[str, ...]) -> tuple[str, object] | None:
    for key in keys:
        if key in raw:
            return key, raw[key]
    return None


def _coerce_int(val: object) -> int | None:
    if isinstance(val, bool):
        return None
    if isinstance(val, int):
        return val
    if isinstance(val, str):
        try:
            return int(val.strip())
        except ValueError:
            return None
    return None


def _parse_reminder_rule(
    raw: object, path: str, violations: list[FieldViolation],
) -> ReminderRule | None:
    if not isinstance(raw, Mapping):
        violations.append(FieldViolation(
            path=path, constraint="must be an object", actual_value=repr(raw),
        ))
        return None
    ok = True

    email = raw.get("email")
    if not isinstance(email, str) or not email.strip():
        violations.append(FieldViolation(
            path=f"{path}.email", constraint="required non-empty string",
            actual_value=repr(email),
        ))
        ok = False

    days_before = _coerce_int(raw.get("daysBefore"))
    if days_before is None or days_before < 0:
        violations.append(FieldViolation(
            path=f"{path}.daysBefore", constraint="must be an integer >= 0",
            actual_value=repr(raw.get("daysBefore")),
        ))
        ok = False

    trigger: TriggerField | None = None
    try:
        trigger = TriggerField(raw.get("triggerField"))
    except ValueError:
        violations.append(FieldViolation(
            path=f"{path}.triggerField",
            constraint="must be applicationDate, dueDate or finalDateForPayment",
            actual_value=repr(raw.get("triggerField")),
        ))
        ok = False

    if not ok or trigger is None or days_before is None or not isinstance(email, str):
        return None
    return ReminderRule(email=email.strip(), days_before=days_before, trigger_field=trigger)


def parse_schedule_config(
    raw: Mapping[str, object], defaults: ScheduleDefaults | None = None,
) -> Ok[ScheduleConfig] | Err[ValidationError]:
    """Parse the setup form into a ScheduleConfig.

    Missing numeric fields take their default. Day counts must be
    integers >= 0, recurrenceMonths must lie in 1..max_recurrence_months,
    retentionPercentage in 0..100.
    """
    d = defaults if defaults is not None else ScheduleDefaults()
    violations: list[FieldViolation] = []

    # --- First due date: type only ---
    first_due = raw.get(_FIRST_DUE_KEY, "")
    if not isinstance(first_due, (str, date)):
        violations.append(FieldViolation(
            path=_FIRST_DUE_KEY, constraint="must be a date or ISO date string",
            actual_value=repr(first_due),
        ))
        first_due = ""

    # --- Day offsets ---
    days: dict[str, int] = {}
    for field_name, keys in _DAY_FIELDS.items():
        found = _lookup(raw, keys)
        if found is None:
            days[field_name] = getattr(d, field_name)
            continue
        key, val = found
        parsed = _coerce_int(val)
        if parsed is None or parsed < 0:
            violations.append(FieldViolation(
                path=key, constraint="must be an integer >= 0", actual_value=repr(val),
            ))
            parsed = 0
        days[field_name] = parsed

    # --- Recurrence ---
    recurrence = d.recurrence_months
    if _RECURRENCE_KEY in raw:
        val = raw[_RECURRENCE_KEY]
        parsed = _coerce_int(val)
        if parsed is None or not (1 <= parsed <= d.max_recurrence_months):
            violations.append(FieldViolation(
                path=_RECURRENCE_KEY,
                constraint=f"must be an integer between 1 and {d.max_recurrence_months}",
                actual_value=repr(val),
            ))
        else:
            recurrence = parsed

    # --- Retention ---
    retention: Decimal = d.retention_percentage
    if _RETENTION_KEY in raw:
        match Percentage.parse(raw[_RETENTION_KEY]):
            case Ok(pct):
                retention = pct.value
            case Err(msg):
                violations.append(FieldViolation(
                    path=_RETENTION_KEY, constraint=msg,
                    actual_value=repr(raw[_RETENTION_KEY]),
                ))

    # --- Reminder rules ---
    rules: list[ReminderRule] = []
    raw_rules = raw.get(_REMINDERS_KEY, ())
    if not isinstance(raw_rules, (list, tuple)):
        violations.append(FieldViolation(
            path=_REMINDERS_KEY, constraint="must be a list", actual_value=repr(raw_rules),
        ))
        raw_rules = ()
    for i, raw_rule in enumerate(raw_rules):
        rule = _parse_reminder_rule(raw_rule, f"{_REMINDERS_KEY}[{i}]", violations)
        if rule is not None:
            rules.append(rule)

    if violations:
        return Err(validation_error("schedule.parser.parse_schedule_config", violations))

    return Ok(ScheduleConfig(
        first_due_date=first_due,
        payment_terms_days=days["payment_terms_days"],
        pay_less_notice_offset_days=days["pay_less_notice_offset_days"],
        application_offset_days=days["application_offset_days"],
        recurrence_months=recurrence,
        retention_percentage=retention,
        reminder_rules=tuple(rules),
    ))


def merge_extracted_terms(
    config: ScheduleConfig,
    extracted: Mapping[str, object],
    defaults: ScheduleDefaults | None = None,
) -> Ok[ScheduleConfig] | Err[ValidationError]:
    """Overlay terms read from a contract document onto a config.

    An empty firstDueDate or a zero/missing paymentTermsDays keeps the
    current value. Keys other than the schedule terms are ignored. Merged
    values obey the same bounds as parse_schedule_config.
    """
    d = defaults if defaults is not None else ScheduleDefaults()
    violations: list[FieldViolation] = []
    overrides: dict[str, object] = {}

    first_due = extracted.get(_FIRST_DUE_KEY)
    if first_due:
        if isinstance(first_due, (str, date)):
            overrides["first_due_date"] = first_due
        else:
            violations.append(FieldViolation(
                path=_FIRST_DUE_KEY, constraint="must be a date or ISO date string",
                actual_value=repr(first_due),
            ))

    int_keys: dict[str, tuple[str, ...]] = {**_DAY_FIELDS, "recurrence_months": (_RECURRENCE_KEY,)}
    for field_name, keys in int_keys.items():
        found = _lookup(extracted, keys)
        if found is None:
            continue
        key, val = found
        parsed = _coerce_int(val)
        if parsed is None:
            violations.append(FieldViolation(
                path=key, constraint="must be an integer", actual_value=repr(val),
            ))
            continue
        if field_name == "payment_terms_days" and not parsed:
            continue
        if field_name == "recurrence_months":
            if not (1 <= parsed <= d.max_recurrence_months):
                violations.append(FieldViolation(
                    path=key,
                    constraint=f"must be an integer between 1 and {d.max_recurrence_months}",
                    actual_value=repr(val),
                ))
                continue
        elif parsed < 0:
            violations.append(FieldViolation(
                path=key, constraint="must be an integer >= 0", actual_value=repr(val),
            ))
            continue
        overrides[field_name] = parsed

    if violations:
        return Err(validation_error("schedule.parser.merge_extracted_terms", violations))
    return Ok(replace(config, **overrides))
