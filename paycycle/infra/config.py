"""Default schedule terms and environment overrides.

No I/O beyond reading the mapping handed to from_env. Pure configuration data.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import final

from paycycle.core.errors import FieldViolation, ValidationError, validation_error
from paycycle.core.result import Err, Ok
from paycycle.core.types import Percentage, TriggerField

ENV_PREFIX: str = "PAYCYCLE_"


@final
@dataclass(frozen=True, slots=True)
class ScheduleDefaults:
    """Values the setup form starts from.

    JCT standard: pay-less notice 5 days before the final date for payment.
    """

    payment_terms_days: int = 14
    pay_less_notice_offset_days: int = 5
    application_offset_days: int = 7
    recurrence_months: int = 12
    max_recurrence_months: int = 60  # form limit, not enforced by the generator
    retention_percentage: Decimal = Decimal("5")
    reminder_days_before: int = 3
    reminder_trigger: TriggerField = TriggerField.DUE_DATE

    @staticmethod
    def from_env(environ: Mapping[str, str]) -> Ok[ScheduleDefaults] | Err[ValidationError]:
        """Overlay PAYCYCLE_<FIELD> variables onto the defaults.

        e.g. PAYCYCLE_PAYMENT_TERMS_DAYS=30. Unset variables keep the default.
        """
        base = ScheduleDefaults()
        overrides: dict[str, object] = {}
        violations: list[FieldViolation] = []
        for f in fields(ScheduleDefaults):
            key = f"{ENV_PREFIX}{f.name.upper()}"
            raw = environ.get(key)
            if raw is None:
                continue
            current = getattr(base, f.name)
            if isinstance(current, TriggerField):
                try:
                    overrides[f.name] = TriggerField(raw.strip())
                except ValueError:
                    violations.append(FieldViolation(
                        path=key,
                        constraint="must be applicationDate, dueDate or finalDateForPayment",
                        actual_value=raw,
                    ))
            elif isinstance(current, Decimal):
                match Percentage.parse(raw.strip()):
                    case Ok(pct):
                        overrides[f.name] = pct.value
                    case Err(msg):
                        violations.append(FieldViolation(
                            path=key, constraint=msg, actual_value=raw,
                        ))
            else:
                try:
                    overrides[f.name] = int(raw.strip())
                except ValueError:
                    violations.append(FieldViolation(
                        path=key, constraint="must be an integer", actual_value=raw,
                    ))
        if violations:
            return Err(validation_error("config.ScheduleDefaults.from_env", violations))
        return Ok(replace(base, **overrides))
