"""Committing a reviewed schedule as payment application records."""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from dataclasses import replace

from paycycle.core.errors import (
    FieldViolation,
    PersistenceError,
    ValidationError,
    validation_error,
)
from paycycle.core.result import Err, Ok
from paycycle.infra.protocols import ApplicationStore
from paycycle.logging_config import LogContext, get_logger
from paycycle.schedule.types import ApplicationRecord, PaymentCycle, ProjectRef

logger = get_logger("schedule.commit")


def new_application_id() -> str:
    return f"APP-{uuid.uuid4().hex}"


def commit_schedule(
    project: ProjectRef,
    cycles: Sequence[PaymentCycle],
    store: ApplicationStore,
) -> Ok[tuple[str, ...]] | Err[ValidationError | PersistenceError]:
    """Store each cycle as an ApplicationRecord for the project.

    Returns the new application ids in schedule order. Stops at the first
    storage failure; records stored before it are not rolled back, and their
    ids come back in the error's stored_ids.
    """
    if not cycles:
        return Err(validation_error(
            "schedule.commit.commit_schedule",
            [FieldViolation(path="cycles", constraint="must not be empty", actual_value="()")],
        ))

    ids: list[str] = []
    with LogContext.bind(project_id=project.project_id):
        for cycle in cycles:
            record = ApplicationRecord(
                application_id=new_application_id(),
                project_id=project.project_id,
                project_name=project.name,
                cycle=cycle,
            )
            match store.store(record):
                case Err(error):
                    logger.error(
                        "schedule_commit_failed",
                        extra={"stored": len(ids), "reason": error.message},
                    )
                    return Err(replace(error, stored_ids=tuple(ids)))
                case Ok(application_id):
                    ids.append(application_id)
        logger.info("schedule_committed", extra={"applications": len(ids)})
    return Ok(tuple(ids))
