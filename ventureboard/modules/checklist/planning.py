"""Next-task selection and daily stand-up assembly."""

import logging
from collections.abc import Callable, Mapping, Sequence

from ventureboard.core.config import Constants
from ventureboard.domain.business import BUSINESS_PRIORITY_RANK, Business, BusinessPriority, BusinessStage
from ventureboard.domain.task import RESOLVED_STATUSES, Task, TaskPriority, TaskStatus
from ventureboard.models.service_models import (
    BusinessHealth,
    DailyStandUp,
    DailyTask,
    HealthSignal,
    NextTaskResult,
    StandUpGroup,
)


logger = logging.getLogger(__name__)

STANDUP_PRIORITIES: frozenset[TaskPriority] = frozenset({TaskPriority.CRITICAL, TaskPriority.HIGH})


def selection_key(task: Task) -> tuple[int, int]:
    """Sort key for task selection: priority rank first, then order."""
    return (task.priority_rank, task.order)


def dependencies_met(task: Task, tasks_by_id: Mapping[str, Task]) -> bool:
    """True when every dependency exists and is completed or skipped."""
    for dependency_id in task.dependencies:
        dependency = tasks_by_id.get(dependency_id)
        if dependency is None or dependency.status not in RESOLVED_STATUSES:
            return False
    return True


def select_next_task(
    candidates: Sequence[Task],
    tasks_by_id: Mapping[str, Task],
    *,
    stage: BusinessStage,
) -> Task | None:
    """Pick the next task to work on within one stage.

    Open tasks in the stage are ranked by (priority, order). The first one whose
    dependencies are all resolved wins. If every candidate is gated, the top
    candidate is returned anyway so a dependency gap never reads as "nothing to
    do".

    Args:
        candidates: Tasks owned by one business
        tasks_by_id: Lookup for resolving dependencies across all tasks
        stage: Stage to select from

    Returns:
        The selected task, or None when the stage has no open tasks
    """
    ranked = sorted(
        (task for task in candidates if task.stage == stage and task.is_open),
        key=selection_key,
    )
    if not ranked:
        return None

    for task in ranked:
        if dependencies_met(task, tasks_by_id):
            return task

    logger.debug(
        "All candidates gated by dependencies, surfacing top candidate",
        extra={"task_id": ranked[0].id, "stage": stage},
    )
    return ranked[0]


def attention_order(
    businesses: Sequence[Business],
    health_by_id: Mapping[str, BusinessHealth],
) -> list[Business]:
    """Order businesses for attention: priority tier first, then least healthy."""

    def key(business: Business) -> tuple[int, int]:
        health = health_by_id.get(business.id)
        return (
            BUSINESS_PRIORITY_RANK[business.priority],
            health.health if health is not None else 0,
        )

    return sorted(businesses, key=key)


def select_global_next_task(
    businesses: Sequence[Business],
    health_by_id: Mapping[str, BusinessHealth],
    next_task_for: Callable[[Business], Task | None],
) -> NextTaskResult | None:
    """Walk businesses in attention order and return the first next task found."""
    for business in attention_order(businesses, health_by_id):
        task = next_task_for(business)
        if task is not None:
            return NextTaskResult(business=business, task=task)
    return None


def _daily_task(task: Task) -> DailyTask:
    return DailyTask(
        task_id=task.id,
        title=task.title,
        priority=task.priority.value,
        business_id=task.business_id,
        completed=task.status == TaskStatus.COMPLETED,
        notes=task.notes,
    )


def pick_standup_tasks(tasks: Sequence[Task], *, stage: BusinessStage) -> list[Task]:
    """In-progress tasks for the stage, topped up with critical/high pending tasks.

    Every in-progress task is kept; pending tasks only fill the remaining room
    up to the per-business cap.
    """
    stage_tasks = [task for task in tasks if task.stage == stage and not task.cross_cutting]
    in_progress = sorted(
        (task for task in stage_tasks if task.status == TaskStatus.IN_PROGRESS),
        key=lambda task: task.order,
    )
    room = max(0, Constants.STANDUP_ITEMS_PER_BUSINESS - len(in_progress))
    pending = sorted(
        (
            task
            for task in stage_tasks
            if task.status == TaskStatus.PENDING and task.priority in STANDUP_PRIORITIES
        ),
        key=lambda task: task.order,
    )[:room]
    return in_progress + pending


def pick_cross_cutting_tasks(
    businesses: Sequence[Business],
    tasks_by_business: Mapping[str, Sequence[Task]],
) -> list[Task]:
    """Open cross-cutting tasks in each business's current stage."""
    picked: list[Task] = []
    for business in businesses:
        picked.extend(
            task
            for task in tasks_by_business.get(business.id, ())
            if task.cross_cutting and task.is_open and task.stage == business.stage
        )
    picked.sort(key=lambda task: (task.status != TaskStatus.IN_PROGRESS, *selection_key(task)))
    return picked[: Constants.STANDUP_CROSS_CUTTING_CAP]


def focus_recommendation(
    businesses: Sequence[Business],
    health_by_id: Mapping[str, BusinessHealth],
) -> str | None:
    """Name the worst-health primary business that is not healthy, if any."""
    candidates = [
        health_by_id[business.id]
        for business in businesses
        if business.priority == BusinessPriority.PRIMARY
        and business.id in health_by_id
        and health_by_id[business.id].signal != HealthSignal.HEALTHY
    ]
    if not candidates:
        return None

    worst = min(candidates, key=lambda health: health.health)
    return f"Focus on {worst.business_name}: health {worst.health}/100 ({worst.signal})"


def build_daily_standup(
    *,
    date: str,
    businesses: Sequence[Business],
    tasks_by_business: Mapping[str, Sequence[Task]],
    health_by_id: Mapping[str, BusinessHealth],
) -> DailyStandUp:
    """Assemble the stand-up: per-business groups, cross-cutting items, focus line."""
    groups = [
        StandUpGroup(
            business_id=business.id,
            business_name=business.name,
            stage=business.stage,
            tasks=[
                _daily_task(task)
                for task in pick_standup_tasks(tasks_by_business.get(business.id, ()), stage=business.stage)
            ],
        )
        for business in businesses
    ]
    cross_cutting = [_daily_task(task) for task in pick_cross_cutting_tasks(businesses, tasks_by_business)]

    return DailyStandUp(
        date=date,
        groups=groups,
        cross_cutting=cross_cutting,
        focus_recommendation=focus_recommendation(businesses, health_by_id),
    )
