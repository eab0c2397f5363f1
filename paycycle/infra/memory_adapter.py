"""In-memory ApplicationStore.

Stands in for the application storage of the host app in tests and demos.
"""

from __future__ import annotations

from typing import final

from paycycle.core.errors import PersistenceError
from paycycle.core.result import Err, Ok
from paycycle.core.types import UtcDatetime
from paycycle.schedule.types import ApplicationRecord


def _persistence_error(operation: str, detail: str) -> PersistenceError:
    return PersistenceError(
        message=detail,
        code="PERSISTENCE_ERROR",
        timestamp=UtcDatetime.now(),
        source=f"memory_adapter.{operation}",
        operation=operation,
    )


@final
class InMemoryApplicationStore:
    """Dict-backed store preserving insertion order."""

    def __init__(self) -> None:
        self._records: dict[str, ApplicationRecord] = {}

    def store(
        self, record: ApplicationRecord,
    ) -> Ok[str] | Err[PersistenceError]:
        existing = self._records.get(record.application_id)
        if existing is not None and existing != record:
            return Err(_persistence_error(
                "store",
                f"Application id already holds a different record: {record.application_id}",
            ))
        self._records[record.application_id] = record
        return Ok(record.application_id)

    def retrieve(
        self, application_id: str,
    ) -> Ok[ApplicationRecord] | Err[PersistenceError]:
        if application_id in self._records:
            return Ok(self._records[application_id])
        return Err(_persistence_error(
            "retrieve", f"Application not found: {application_id}",
        ))

    def list_for_project(
        self, project_id: str,
    ) -> Ok[tuple[ApplicationRecord, ...]] | Err[PersistenceError]:
        return Ok(tuple(r for r in self._records.values() if r.project_id == project_id))

    def count(self) -> int:
        """Test-only helper."""
        return len(self._records)
