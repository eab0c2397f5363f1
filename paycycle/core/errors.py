"""Error values for paycycle. Domain functions return these inside Err.

Each error is a frozen dataclass that can be matched on and serialized.
Base class PaycycleError, three @final subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final

from paycycle.core.types import UtcDatetime


@dataclass(frozen=True, slots=True)
class PaycycleError:
    """Base error value. NOT @final: has subclasses."""

    message: str
    code: str
    timestamp: UtcDatetime
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> PaycycleError:
        """Return a copy with context prepended to the message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp.value.isoformat(),
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """A single field that failed a check."""

    path: str  # e.g. "cycles[2].pay_less_notice_date"
    constraint: str  # e.g. "must be on or after due_date"
    actual_value: str


@final
@dataclass(frozen=True, slots=True)
class InvalidConfigurationError(PaycycleError):
    """The schedule configuration cannot produce a schedule at all."""

    field: str
    actual_value: str

    def to_dict(self) -> dict[str, object]:
        return {
            **PaycycleError.to_dict(self),
            "field": self.field,
            "actual_value": self.actual_value,
        }


@final
@dataclass(frozen=True, slots=True)
class ValidationError(PaycycleError):
    """One or more fields failed caller-side validation."""

    fields: tuple[FieldViolation, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            **PaycycleError.to_dict(self),
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
        }


@final
@dataclass(frozen=True, slots=True)
class PersistenceError(PaycycleError):
    """Storage operation failed.

    stored_ids lists records a multi-record operation wrote before failing.
    """

    operation: str
    stored_ids: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            **PaycycleError.to_dict(self),
            "operation": self.operation,
            "stored_ids": list(self.stored_ids),
        }


def invalid_configuration(
    source: str, field: str, actual_value: object, message: str,
) -> InvalidConfigurationError:
    return InvalidConfigurationError(
        message=message,
        code="INVALID_CONFIGURATION",
        timestamp=UtcDatetime.now(),
        source=source,
        field=field,
        actual_value=repr(actual_value),
    )


def validation_error(
    source: str, violations: list[FieldViolation] | tuple[FieldViolation, ...],
) -> ValidationError:
    """Build a ValidationError whose message summarizes every violation."""
    summary = "; ".join(f"{v.path}: {v.constraint}" for v in violations)
    return ValidationError(
        message=summary,
        code="VALIDATION_ERROR",
        timestamp=UtcDatetime.now(),
        source=source,
        fields=tuple(violations),
    )
