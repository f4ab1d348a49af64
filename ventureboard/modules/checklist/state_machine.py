"""Task status transitions and the completedAt invariant."""

import logging
from datetime import datetime

from ventureboard.domain.task import Task, TaskStatus


logger = logging.getLogger(__name__)


# Transitions the engine performs on its own. completed and skipped are terminal
# here, but apply_status() still lets a direct update reopen a task.
ALLOWED_TRANSITIONS: dict[TaskStatus, set[TaskStatus]] = {
    TaskStatus.PENDING: {TaskStatus.IN_PROGRESS, TaskStatus.COMPLETED, TaskStatus.SKIPPED},
    TaskStatus.IN_PROGRESS: {TaskStatus.COMPLETED, TaskStatus.SKIPPED},
    TaskStatus.COMPLETED: set(),
    TaskStatus.SKIPPED: set(),
}


def validate_transition(from_status: TaskStatus, to_status: TaskStatus) -> bool:
    """Return True if the engine would make this transition on its own."""
    return to_status in ALLOWED_TRANSITIONS.get(from_status, set())


def apply_status(task: Task, status: TaskStatus, *, now: datetime) -> Task:
    """Set a task's status while keeping completed_at in step.

    Moving to completed stamps completed_at if it is unset; any other status
    clears it. Reopening a completed or skipped task is allowed.
    """
    if task.status != status and not validate_transition(task.status, status):
        logger.info(
            "Reopening task outside the normal flow",
            extra={"task_id": task.id, "from_status": task.status, "to_status": status},
        )

    task.status = status
    if status == TaskStatus.COMPLETED:
        if task.completed_at is None:
            task.completed_at = now
    else:
        task.completed_at = None
    return task
