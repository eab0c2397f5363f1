"""Refined value types shared across paycycle.

UtcDatetime stamps error values; NonEmptyStr and Percentage guard the few
constrained fields of a schedule configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import final

from paycycle.core.result import Err, Ok

# ---------------------------------------------------------------------------
# Reminder triggers (here rather than schedule/types.py for import ordering)
# ---------------------------------------------------------------------------


class TriggerField(Enum):
    """Cycle date a reminder counts back from."""

    APPLICATION_DATE = "applicationDate"
    DUE_DATE = "dueDate"
    FINAL_DATE_FOR_PAYMENT = "finalDateForPayment"

    @property
    def attribute(self) -> str:
        """PaymentCycle attribute holding this trigger's date."""
        match self:
            case TriggerField.APPLICATION_DATE:
                return "application_date"
            case TriggerField.DUE_DATE:
                return "due_date"
            case TriggerField.FINAL_DATE_FOR_PAYMENT:
                return "final_date_for_payment"


@final
@dataclass(frozen=True, slots=True)
class UtcDatetime:
    """Timezone-aware UTC datetime. Naive datetimes are rejected."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            raise TypeError("UtcDatetime requires timezone-aware datetime, got naive")

    @staticmethod
    def parse(raw: datetime) -> Ok[UtcDatetime] | Err[str]:
        if raw.tzinfo is None:
            return Err("UtcDatetime requires timezone-aware datetime, got naive")
        return Ok(UtcDatetime(value=raw.astimezone(UTC)))

    @staticmethod
    def now() -> UtcDatetime:
        return UtcDatetime(value=datetime.now(tz=UTC))


@final
@dataclass(frozen=True, slots=True)
class NonEmptyStr:
    """String constrained to be non-empty after stripping whitespace."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise TypeError("NonEmptyStr requires non-empty string")

    @staticmethod
    def parse(raw: str) -> Ok[NonEmptyStr] | Err[str]:
        if not isinstance(raw, str):
            return Err(f"NonEmptyStr requires str, got {type(raw).__name__}")
        if not raw.strip():
            return Err("NonEmptyStr requires non-empty string")
        return Ok(NonEmptyStr(value=raw.strip()))


_HUNDRED = Decimal("100")


@final
@dataclass(frozen=True, slots=True)
class Percentage:
    """Finite Decimal in the closed range [0, 100]."""

    value: Decimal

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, Decimal)
            or not self.value.is_finite()
            or not (0 <= self.value <= _HUNDRED)
        ):
            raise TypeError(f"Percentage requires Decimal in [0, 100], got {self.value!r}")

    @staticmethod
    def parse(raw: object) -> Ok[Percentage] | Err[str]:
        """Accept Decimal, int or numeric str. Floats go through str() first."""
        if isinstance(raw, bool) or not isinstance(raw, (Decimal, int, float, str)):
            return Err(f"Percentage requires a number, got {type(raw).__name__}")
        try:
            value = raw if isinstance(raw, Decimal) else Decimal(str(raw))
        except InvalidOperation:
            return Err(f"Percentage requires a number, got {raw!r}")
        if not value.is_finite():
            return Err(f"Percentage must be finite, got {raw!r}")
        if not (0 <= value <= _HUNDRED):
            return Err(f"Percentage must be between 0 and 100, got {value}")
        return Ok(Percentage(value=value))
