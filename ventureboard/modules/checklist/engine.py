"""Checklist engine: owns the in-memory state and every operation on it.

The engine is synchronous and assumes it is the only writer of its store.
Mutations mark the state dirty; nothing is persisted until save() is called.
Lookups by id or name return None (or False) when they do not resolve;
StorageError from load/save is the only failure that propagates.
"""

import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ventureboard.core.config import Constants
from ventureboard.core.errors import StorageError, ValidationError
from ventureboard.core.logging import span
from ventureboard.core.matching import match_exact, match_id_prefix
from ventureboard.core.store import DocumentStore
from ventureboard.domain.base import utc_now
from ventureboard.domain.business import (
    CHECKLIST_STAGES,
    Business,
    BusinessPriority,
    BusinessStage,
    derive_short_name,
)
from ventureboard.domain.create_models import BusinessCreate, TaskCreate
from ventureboard.domain.state import ChecklistState
from ventureboard.domain.task import Task, TaskCategory, TaskStatus
from ventureboard.domain.update_models import BusinessUpdate, TaskUpdate
from ventureboard.models.service_models import (
    BusinessHealth,
    DailyStandUp,
    NextTaskResult,
    OverallProgress,
    StageProgress,
)
from ventureboard.modules.checklist import health, planning, summaries
from ventureboard.modules.checklist.migrations import upgrade_document
from ventureboard.modules.checklist.seed import default_categories, instantiate_seed_tasks
from ventureboard.modules.checklist.state_machine import apply_status


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Task fields a partial update may not clear
_REQUIRED_TASK_FIELDS = frozenset({"title", "stage", "category", "priority", "dependencies", "order", "cross_cutting"})

# Business fields a partial update may not clear
_REQUIRED_BUSINESS_FIELDS = frozenset(
    {"name", "short_name", "stage", "role", "revenue_status", "priority", "related_to", "tags"}
)


def _validate(model: type[ModelT], payload: ModelT | Mapping[str, Any] | None, *, label: str) -> ModelT:
    """Coerce a payload into a request model, raising ValidationError on bad input."""
    if isinstance(payload, model):
        return payload
    if payload is None:
        msg = f"{label} details are required"
        raise ValidationError(msg)
    try:
        return model.model_validate(payload)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or label}: {error['msg']}" for error in e.errors()
        )
        msg = f"Invalid {label}: {problems}"
        raise ValidationError(msg) from e


class ChecklistEngine:
    """Staged business checklists with health scoring and next-task selection."""

    def __init__(self, store: DocumentStore, *, clock: Callable[[], datetime] | None = None) -> None:
        self._store = store
        self._clock = clock or utc_now
        self._dirty = False
        self._businesses_by_id: dict[str, Business] = {}
        self._tasks_by_id: dict[str, Task] = {}
        self._task_ids_by_business: dict[str, list[str]] = {}
        self._state = self.load()

    # Persistence

    def load(self) -> ChecklistState:
        """Load state from the store, upgrading legacy documents in memory.

        A missing document yields an empty current-version state. An upgraded
        document marks the engine dirty but is not written back until save().

        Raises:
            StorageError: If the document cannot be read or does not validate
        """
        with span("checklist_engine.load", store=repr(self._store)):
            raw = self._store.read()
            if raw is None:
                now = self._clock()
                state = ChecklistState(created_at=now, updated_at=now)
                upgraded = False
            else:
                document, upgraded = upgrade_document(raw, now=self._clock())
                try:
                    state = ChecklistState.model_validate(document)
                except PydanticValidationError as e:
                    msg = f"Checklist document is malformed: {e}"
                    raise StorageError(msg) from e

            self._state = state
            self._dirty = upgraded
            self._reindex()
            logger.info(
                "Checklist loaded",
                extra={
                    "businesses": len(state.businesses),
                    "tasks": len(state.tasks),
                    "upgraded": upgraded,
                },
            )
            return state

    def save(self) -> None:
        """Persist the full document, stamping updatedAt.

        Raises:
            StorageError: If the store cannot be written
        """
        with span("checklist_engine.save"):
            self._state.updated_at = self._clock()
            self._store.write(self._state.to_document())
            self._dirty = False

    @property
    def is_dirty(self) -> bool:
        """Whether there are in-memory changes not yet saved."""
        return self._dirty

    @property
    def state(self) -> ChecklistState:
        return self._state

    def now(self) -> datetime:
        """Current time according to the engine clock."""
        return self._clock()

    def _mark_dirty(self) -> None:
        self._dirty = True

    def _reindex(self) -> None:
        self._businesses_by_id = {business.id: business for business in self._state.businesses}
        self._tasks_by_id = {task.id: task for task in self._state.tasks}
        self._task_ids_by_business = {}
        for task in self._state.tasks:
            self._task_ids_by_business.setdefault(task.business_id, []).append(task.id)

    # Bootstrap

    def init_from_template(
        self,
        operator_id: str,
        *,
        business_name: str,
        short_name: str | None = None,
    ) -> Business:
        """Replace the state with the default catalog and one seeded primary business.

        Raises:
            ValidationError: If the business name is blank; the state is left untouched
        """
        request = _validate(
            BusinessCreate,
            {"name": business_name, "short_name": short_name, "priority": BusinessPriority.PRIMARY},
            label="business",
        )
        with span("checklist_engine.init_from_template", operator_id=operator_id):
            now = self._clock()
            self._state = ChecklistState(
                operator_id=operator_id,
                categories=default_categories(),
                created_at=now,
                updated_at=now,
            )
            self._reindex()
            business = self.add_business(request, seed=True)
            logger.info("Initialized checklist from template", extra={"business_id": business.id})
            return business

    # Businesses

    @property
    def businesses(self) -> list[Business]:
        return list(self._state.businesses)

    @property
    def active_business(self) -> Business | None:
        """The default scope for unscoped commands; falls back to the first business."""
        if self._state.active_business in self._businesses_by_id:
            return self._businesses_by_id[self._state.active_business]
        return self._state.businesses[0] if self._state.businesses else None

    def get_business(self, business_id: str) -> Business | None:
        return self._businesses_by_id.get(business_id)

    def add_business(
        self,
        request: BusinessCreate | Mapping[str, Any] | None,
        *,
        seed: bool = True,
    ) -> Business:
        """Create a business, optionally seeding the full template task catalog.

        Args:
            request: Business fields; name is required
            seed: Seed the template tasks for the business (default: True)

        Returns:
            The created business

        Raises:
            ValidationError: If the name is missing or a field is invalid
        """
        data = _validate(BusinessCreate, request, label="business")
        with span("checklist_engine.add_business", business_name=data.name, seed=seed):
            now = self._clock()
            business = Business(
                id=str(uuid.uuid4()),
                name=data.name,
                short_name=data.short_name or derive_short_name(data.name),
                stage=data.stage,
                role=data.role,
                revenue_status=data.revenue_status,
                priority=data.priority,
                domain=data.domain,
                related_to=list(data.related_to),
                tags=list(data.tags),
                created_at=now,
                updated_at=now,
            )
            self._state.businesses.append(business)
            self._businesses_by_id[business.id] = business
            self._task_ids_by_business.setdefault(business.id, [])

            if seed:
                if not self._state.categories:
                    self._state.categories.extend(default_categories())
                for task in instantiate_seed_tasks(business_id=business.id, now=now):
                    self._insert_task(task)

            if self._state.active_business not in self._businesses_by_id:
                self._state.active_business = business.id

            self._mark_dirty()
            logger.info(
                "Added business",
                extra={"business_id": business.id, "business_name": business.name, "seeded": seed},
            )
            return business

    def update_business(
        self,
        business_id: str,
        fields: BusinessUpdate | Mapping[str, Any] | None,
    ) -> Business | None:
        """Merge fields into a business and stamp updatedAt.

        Returns:
            The updated business, or None if the id is unknown

        Raises:
            ValidationError: If a field value is invalid or the name is blanked
        """
        business = self._businesses_by_id.get(business_id)
        if business is None:
            return None

        update = _validate(BusinessUpdate, fields or {}, label="business update")
        changes = {
            field: value
            for field, value in update.model_dump(exclude_unset=True).items()
            if value is not None or field not in _REQUIRED_BUSINESS_FIELDS
        }
        if "name" in changes and not changes["name"].strip():
            raise ValidationError("Business name cannot be empty")

        with span("checklist_engine.update_business", business_id=business_id):
            for field, value in changes.items():
                setattr(business, field, value)
            business.updated_at = self._clock()
            self._mark_dirty()
            logger.info("Updated business", extra={"business_id": business_id, "fields": sorted(changes)})
            return business

    def set_stage(self, business_id: str, stage: BusinessStage | str) -> Business | None:
        """Move a business to a stage, forward or backward."""
        return self.update_business(business_id, {"stage": stage})

    def set_active_business(self, business_id: str) -> bool:
        """Switch the default scope. Returns False if the id does not resolve."""
        if business_id not in self._businesses_by_id:
            return False
        self._state.active_business = business_id
        self._mark_dirty()
        return True

    def resolve_business(self, name_or_id: str | None) -> Business | None:
        """Resolve a business by exact id, then name, then short name.

        Name and short name comparisons are case-insensitive but exact; no
        partial matching.
        """
        if not name_or_id or not name_or_id.strip():
            return None
        query = name_or_id.strip()
        if query in self._businesses_by_id:
            return self._businesses_by_id[query]
        return match_exact(self._state.businesses, query, keys=("name", "short_name"))

    # Tasks

    def _insert_task(self, task: Task) -> None:
        self._state.tasks.append(task)
        self._tasks_by_id[task.id] = task
        self._task_ids_by_business.setdefault(task.business_id, []).append(task.id)

    def _business_tasks(self, business_id: str) -> list[Task]:
        return [self._tasks_by_id[task_id] for task_id in self._task_ids_by_business.get(business_id, [])]

    def get_task(self, task_id: str) -> Task | None:
        return self._tasks_by_id.get(task_id)

    def find_task(self, id_or_prefix: str | None) -> Task | None:
        """Resolve a task by full id or by an unambiguous id prefix."""
        if not id_or_prefix:
            return None
        return match_id_prefix(self._state.tasks, id_or_prefix)

    def get_tasks(
        self,
        business_id: str | None = None,
        *,
        stage: BusinessStage | str | None = None,
        category: str | None = None,
        status: TaskStatus | str | None = None,
    ) -> list[Task]:
        """Tasks matching the filters, sorted by order."""
        tasks = self._business_tasks(business_id) if business_id is not None else list(self._state.tasks)
        if stage is not None:
            tasks = [task for task in tasks if task.stage == stage]
        if category is not None:
            tasks = [task for task in tasks if task.category == category]
        if status is not None:
            tasks = [task for task in tasks if task.status == status]
        return sorted(tasks, key=lambda task: task.order)

    def add_task(self, request: TaskCreate | Mapping[str, Any] | None) -> Task | None:
        """Add a task to a business.

        Stage defaults to the business's current stage, category to
        "<stage>-custom" and order to the custom-task slot.

        Returns:
            The created task, or None if the business id is unknown

        Raises:
            ValidationError: If the title is missing or a field is invalid
        """
        data = _validate(TaskCreate, request, label="task")
        business = self._businesses_by_id.get(data.business_id)
        if business is None:
            logger.warning("Cannot add task to unknown business", extra={"business_id": data.business_id})
            return None

        with span("checklist_engine.add_task", business_id=business.id, title=data.title):
            now = self._clock()
            stage = data.stage or business.stage
            task = Task(
                id=str(uuid.uuid4()),
                title=data.title,
                description=data.description,
                business_id=business.id,
                stage=stage,
                category=data.category or f"{stage}-custom",
                priority=data.priority,
                source=data.source,
                dependencies=list(data.dependencies),
                order=data.order if data.order is not None else Constants.CUSTOM_TASK_ORDER,
                cross_cutting=data.cross_cutting,
                due_date=data.due_date,
                notes=data.notes,
                ai_suggestion=data.ai_suggestion,
                created_at=now,
                updated_at=now,
            )
            apply_status(task, data.status, now=now)
            self._insert_task(task)
            self._mark_dirty()
            logger.info("Added task", extra={"task_id": task.id, "business_id": business.id})
            return task

    def update_task(self, task_id: str, updates: TaskUpdate | Mapping[str, Any] | None) -> Task | None:
        """Apply a partial update to a task.

        Setting status to completed stamps completedAt if unset; any other
        status clears it. Completed or skipped tasks may be reopened.

        Returns:
            The updated task, or None if the id is unknown

        Raises:
            ValidationError: If a field value is invalid or the title is blanked
        """
        task = self._tasks_by_id.get(task_id)
        if task is None:
            return None

        update = _validate(TaskUpdate, updates or {}, label="task update")
        changes = update.model_dump(exclude_unset=True)
        status = changes.pop("status", None)
        if "title" in changes and changes["title"] is not None and not changes["title"].strip():
            raise ValidationError("Task title cannot be empty")

        with span("checklist_engine.update_task", task_id=task_id):
            now = self._clock()
            for field, value in changes.items():
                if value is None and field in _REQUIRED_TASK_FIELDS:
                    continue
                setattr(task, field, value)
            if status is not None:
                apply_status(task, status, now=now)
            task.updated_at = now
            self._mark_dirty()
            logger.info(
                "Updated task",
                extra={"task_id": task_id, "status": task.status, "fields": sorted(changes)},
            )
            return task

    def start_task(self, task_id: str) -> Task | None:
        return self.update_task(task_id, {"status": TaskStatus.IN_PROGRESS})

    def complete_task(self, task_id: str) -> Task | None:
        return self.update_task(task_id, {"status": TaskStatus.COMPLETED})

    def skip_task(self, task_id: str) -> Task | None:
        return self.update_task(task_id, {"status": TaskStatus.SKIPPED})

    def delete_task(self, task_id: str) -> bool:
        """Remove a task. Returns False if the id is unknown."""
        task = self._tasks_by_id.pop(task_id, None)
        if task is None:
            return False

        with span("checklist_engine.delete_task", task_id=task_id):
            self._state.tasks.remove(task)
            owned = self._task_ids_by_business.get(task.business_id, [])
            if task_id in owned:
                owned.remove(task_id)
            self._mark_dirty()
            logger.info("Deleted task", extra={"task_id": task_id, "business_id": task.business_id})
            return True

    # Categories

    def get_categories(self, stage: BusinessStage | str | None = None) -> list[TaskCategory]:
        if stage is None:
            return list(self._state.categories)
        return [category for category in self._state.categories if category.stage == stage]

    def category_name(self, category_id: str) -> str:
        """Display label for a category id, falling back to the id itself."""
        for category in self._state.categories:
            if category.id == category_id:
                return category.name
        return category_id

    # Progress

    def get_progress(self, business_id: str, stage: BusinessStage | str | None = None) -> list[StageProgress]:
        """Per-stage completion for a business.

        Defaults to the idea, launch and growth stages; mature and sunset are
        only reported when asked for explicitly.
        """
        stages = [BusinessStage(stage)] if stage is not None else list(CHECKLIST_STAGES)
        tasks = self._business_tasks(business_id)
        progress = []
        for current in stages:
            stage_tasks = [task for task in tasks if task.stage == current]
            completed = sum(1 for task in stage_tasks if task.status == TaskStatus.COMPLETED)
            skipped = sum(1 for task in stage_tasks if task.status == TaskStatus.SKIPPED)
            progress.append(
                StageProgress(
                    stage=current,
                    total=len(stage_tasks),
                    completed=completed,
                    skipped=skipped,
                    percent=health.percent(completed, len(stage_tasks)),
                )
            )
        return progress

    def get_overall_progress(self, business_id: str | None = None) -> OverallProgress:
        """Completion across all stages of one business, or of every task."""
        tasks = self._business_tasks(business_id) if business_id is not None else self._state.tasks
        completed = sum(1 for task in tasks if task.status == TaskStatus.COMPLETED)
        return OverallProgress(total=len(tasks), completed=completed, percent=health.percent(completed, len(tasks)))

    # Health

    def get_business_health(self, business_id: str) -> BusinessHealth | None:
        """Health score and signal for a business, or None if the id is unknown."""
        business = self._businesses_by_id.get(business_id)
        if business is None:
            return None
        return health.compute_business_health(business, self._business_tasks(business_id), now=self._clock())

    def get_all_business_health(self) -> list[BusinessHealth]:
        """Health for every business, worst first."""
        now = self._clock()
        scores = [
            health.compute_business_health(business, self._business_tasks(business.id), now=now)
            for business in self._state.businesses
        ]
        return sorted(scores, key=lambda score: score.health)

    # Next task

    def get_next_task(self, business_id: str, stage: BusinessStage | str | None = None) -> Task | None:
        """Highest-priority open task in the business's current stage.

        Returns:
            The next task, or None when the stage has no pending or in-progress tasks
        """
        business = self._businesses_by_id.get(business_id)
        if business is None:
            return None
        return planning.select_next_task(
            self._business_tasks(business_id),
            self._tasks_by_id,
            stage=BusinessStage(stage) if stage is not None else business.stage,
        )

    def get_global_next_task(self) -> NextTaskResult | None:
        """Next task across all businesses.

        Primary businesses are always considered before secondary ones; within a
        priority tier the least healthy business goes first.
        """
        health_by_id = {score.business_id: score for score in self.get_all_business_health()}
        return planning.select_global_next_task(
            self._state.businesses,
            health_by_id,
            lambda business: self.get_next_task(business.id),
        )

    # Stand-up

    def generate_daily_stand_up(self, date: str | None = None) -> DailyStandUp:
        """Today's short list per business plus cross-cutting items and a focus line."""
        health_by_id = {score.business_id: score for score in self.get_all_business_health()}
        return planning.build_daily_standup(
            date=date or self._clock().date().isoformat(),
            businesses=self._state.businesses,
            tasks_by_business={business.id: self._business_tasks(business.id) for business in self._state.businesses},
            health_by_id=health_by_id,
        )

    # Read-only summaries

    def to_letta_summary(self, business_id: str | None = None) -> str:
        """Plain-text state summary for mirroring into a structured-state store."""
        return summaries.letta_summary(self, business_id)

    def get_operator_overview(self) -> str:
        """Plain-text overview of every business, worst health first."""
        return summaries.operator_overview(self)
