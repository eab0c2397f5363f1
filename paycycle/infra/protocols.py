"""Storage protocol for committed payment applications.

All methods return Ok[T] | Err[PersistenceError]; storage failures are
values, never exceptions.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from paycycle.core.errors import PersistenceError
from paycycle.core.result import Err, Ok
from paycycle.schedule.types import ApplicationRecord


@runtime_checkable
class ApplicationStore(Protocol):
    """Keyed by application_id.

    Invariants:
      - store() of an identical record twice is a no-op returning the same id.
      - store() of a different record under an existing id returns Err.
      - retrieve() returns Err if the id is unknown.
    """

    def store(
        self, record: ApplicationRecord,
    ) -> Ok[str] | Err[PersistenceError]: ...

    def retrieve(
        self, application_id: str,
    ) -> Ok[ApplicationRecord] | Err[PersistenceError]: ...

    def list_for_project(
        self, project_id: str,
    ) -> Ok[tuple[ApplicationRecord, ...]] | Err[PersistenceError]: ...
