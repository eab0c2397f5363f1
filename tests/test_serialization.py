"""Tests for paycycle.core.serialization: canonical bytes and hashing."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from paycycle.core.result import Err, unwrap
from paycycle.core.serialization import canonical_bytes, content_hash
from paycycle.core.types import TriggerField
from paycycle.schedule.types import ReminderRule, ScheduleConfig


def _config(first_due: date | str = date(2024, 1, 31)) -> ScheduleConfig:
    return ScheduleConfig(
        first_due_date=first_due,
        payment_terms_days=14,
        pay_less_notice_offset_days=5,
        application_offset_days=7,
        recurrence_months=3,
        retention_percentage=Decimal("5.00"),
        reminder_rules=(ReminderRule("qs@example.com", 3, TriggerField.DUE_DATE),),
    )


class TestCanonicalBytes:
    def test_deterministic(self) -> None:
        assert unwrap(canonical_bytes(_config())) == unwrap(canonical_bytes(_config()))

    def test_decimal_normalized(self) -> None:
        assert unwrap(canonical_bytes(Decimal("5.00"))) == unwrap(canonical_bytes(Decimal("5")))

    def test_all_zeros_equal(self) -> None:
        assert unwrap(canonical_bytes(Decimal("0.00"))) == b'"0"'

    def test_dates_iso(self) -> None:
        assert unwrap(canonical_bytes(date(2024, 1, 31))) == b'"2024-01-31"'

    def test_enum_value(self) -> None:
        assert unwrap(canonical_bytes(TriggerField.DUE_DATE)) == b'"dueDate"'

    def test_type_name_included(self) -> None:
        assert b'"_type":"ScheduleConfig"' in unwrap(canonical_bytes(_config()))

    def test_naive_datetime_err(self) -> None:
        assert isinstance(canonical_bytes(datetime(2024, 1, 1)), Err)

    def test_unsupported_err(self) -> None:
        assert isinstance(canonical_bytes(object()), Err)


class TestContentHash:
    def test_sha256_hex(self) -> None:
        h = unwrap(content_hash(_config()))
        assert len(h) == 64
        int(h, 16)

    def test_differs_by_anchor(self) -> None:
        assert unwrap(content_hash(_config())) != unwrap(content_hash(_config(date(2024, 2, 29))))
