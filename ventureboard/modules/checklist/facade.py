"""Command facade: flat action requests in, plain text out.

Every call to ChecklistFacade.execute returns a string. Missing parameters,
unknown ids and storage failures are all rendered as messages rather than
raised, so an agent or CLI caller can show the result verbatim.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from ventureboard.core.config import Constants, Settings, settings
from ventureboard.core.errors import ChecklistError, NotFoundError, StorageError, classify_error_with_response
from ventureboard.core.logging import span
from ventureboard.domain.business import Business, BusinessPriority, BusinessStage
from ventureboard.domain.task import Task, TaskPriority, TaskSource, TaskStatus
from ventureboard.modules.checklist import planning
from ventureboard.modules.checklist.engine import ChecklistEngine
from ventureboard.modules.checklist.health import round_half_up
from ventureboard.modules.checklist.summaries import SIGNAL_ICONS


logger = logging.getLogger(__name__)

ChecklistAction = Literal[
    "status",
    "overview",
    "businesses",
    "focus",
    "add-business",
    "next",
    "complete",
    "skip",
    "add",
    "daily",
    "list",
    "detail",
    "set-stage",
]

VALID_ACTIONS: tuple[str, ...] = get_args(ChecklistAction)

STATUS_ICONS: dict[TaskStatus, str] = {
    TaskStatus.PENDING: "☐",
    TaskStatus.IN_PROGRESS: "⏳",
    TaskStatus.COMPLETED: "✅",
    TaskStatus.SKIPPED: "⏭",
}


class ChecklistCommand(BaseModel):
    """Parameters for a checklist command."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action: str = Field(description=f"Action to run: {', '.join(VALID_ACTIONS)}")
    stage: BusinessStage | None = Field(default=None, description="Stage filter or target stage")
    category: str | None = Field(default=None, description="Category ID filter or target category")
    task_id: str | None = Field(default=None, description="Task ID or unique ID prefix")
    business_id: str | None = Field(default=None, description="Business ID (defaults to the active business)")
    business_name: str | None = Field(
        default=None,
        description="Business name or short name; the new business name for add-business",
    )
    title: str | None = Field(default=None, description="Title of a task to add")
    description: str | None = Field(default=None, description="Description of a task to add")
    priority: TaskPriority | None = Field(default=None, description="Priority of a task to add")
    business_priority: BusinessPriority | None = Field(default=None, description="Priority of a business to add")
    domain: str | None = Field(default=None, description="Web domain of a business to add")
    short_name: str | None = Field(default=None, description="Short name of a business to add")
    status: TaskStatus | None = Field(default=None, description="Status filter for list")


def progress_bar(percent: int) -> str:
    """Fixed-width text bar for a percentage."""
    width = Constants.PROGRESS_BAR_WIDTH
    filled = min(width, max(0, round_half_up(percent * width / 100)))
    return "█" * filled + "░" * (width - filled)


def short_id(task_id: str) -> str:
    return task_id[: Constants.SHORT_ID_LENGTH]


def _capped(lines: list[str], cap: int) -> list[str]:
    """Truncate a list of lines, noting how many were left out."""
    if len(lines) <= cap:
        return lines
    return [*lines[:cap], "", f"... and {len(lines) - cap} more"]


class ChecklistFacade:
    """Dispatches checklist commands to an engine and renders the results."""

    def __init__(self, engine: ChecklistEngine, *, config: Settings | None = None) -> None:
        self.engine = engine
        self._config = config or settings
        self._bootstrapped = False
        self._handlers: dict[str, Callable[[ChecklistCommand], str]] = {
            "status": self._status,
            "overview": self._overview,
            "businesses": self._businesses,
            "focus": self._focus,
            "add-business": self._add_business,
            "next": self._next,
            "complete": self._complete,
            "skip": self._skip,
            "add": self._add,
            "daily": self._daily,
            "list": self._list,
            "detail": self._detail,
            "set-stage": self._set_stage,
        }

    def execute(self, command: ChecklistCommand | Mapping[str, Any]) -> str:
        """Run one command and return its text response.

        Args:
            command: A ChecklistCommand or a mapping with camelCase or snake_case keys

        Returns:
            Response text; never raises
        """
        try:
            if not isinstance(command, ChecklistCommand):
                command = ChecklistCommand.model_validate(command)
        except PydanticValidationError as e:
            logger.warning("Invalid checklist command", extra={"error": str(e)})
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in e.errors()
            )
            return f"❌ Invalid command: {problems}"

        handler = self._handlers.get(command.action)
        if handler is None:
            return f"❌ Unknown action: {command.action}. Valid: {', '.join(VALID_ACTIONS)}"

        try:
            with span("checklist_facade.execute", action=command.action):
                self._ensure_bootstrapped()
                return handler(command)
        except NotFoundError as e:
            logger.info("Checklist lookup missed", extra={"action": command.action, "error": str(e)})
            return f"❌ {e}"
        except StorageError as e:
            logger.error("Checklist storage failure", extra={"action": command.action, "error": str(e)})
            return self._render_error(e)
        except ChecklistError as e:
            logger.warning("Checklist command failed", extra={"action": command.action, "error": str(e)})
            return self._render_error(e)
        except Exception as e:
            logger.error(
                "Unexpected error in checklist command",
                extra={"action": command.action, "error": str(e), "type": type(e).__name__},
            )
            return self._render_error(e)

    @staticmethod
    def _render_error(exception: Exception) -> str:
        response = classify_error_with_response(exception)
        return f"❌ {response.message}\n{response.suggestion}"

    def _ensure_bootstrapped(self) -> None:
        """Seed a default business the first time an empty store is used."""
        if self._bootstrapped:
            return
        if not self.engine.businesses:
            business = self.engine.init_from_template(
                self._config.operator_id,
                business_name=self._config.default_business_name,
                short_name=self._config.default_business_short_name,
            )
            self.engine.save()
            logger.info("Bootstrapped checklist", extra={"business_id": business.id})
        self._bootstrapped = True

    def _resolve_scope(self, command: ChecklistCommand) -> Business:
        """Business a command applies to.

        Raises:
            NotFoundError: If the requested business does not resolve
        """
        if command.business_id:
            business = self.engine.get_business(command.business_id)
            query = command.business_id
        elif command.business_name:
            business = self.engine.resolve_business(command.business_name)
            query = command.business_name
        else:
            business = self.engine.active_business
            query = None
        if business is None:
            raise NotFoundError(f"Business not found: {query}" if query else "No businesses tracked")
        return business

    def _find_task(self, task_id: str) -> Task:
        task = self.engine.find_task(task_id)
        if task is None:
            raise NotFoundError("Task not found")
        return task

    # Handlers

    def _status(self, command: ChecklistCommand) -> str:
        business = self._resolve_scope(command)

        overall = self.engine.get_overall_progress(business.id)
        health = self.engine.get_business_health(business.id)
        lines = [
            f"📊 {business.display_name} Progress",
            f"Stage: {business.stage.upper()}",
        ]
        if health is not None:
            lines.append(f"Health: {health.health}/100 ({health.signal})")
        lines.append(f"Overall: {overall.completed}/{overall.total} tasks ({overall.percent}%)")
        lines.append("")
        lines.extend(
            f"{progress.stage.upper()}: {progress_bar(progress.percent)} {progress.percent}% "
            f"({progress.completed}/{progress.total})"
            for progress in self.engine.get_progress(business.id, command.stage)
        )

        next_task = self.engine.get_next_task(business.id, command.stage)
        if next_task is not None:
            lines.append("")
            lines.append(f"▶ Next: {next_task.title} [{next_task.priority}]")
        return "\n".join(lines)

    def _overview(self, command: ChecklistCommand) -> str:
        return self.engine.get_operator_overview()

    def _businesses(self, command: ChecklistCommand) -> str:
        active = self.engine.active_business
        lines = []
        for business in self.engine.businesses:
            health = self.engine.get_business_health(business.id)
            marker = "*" if active is not None and business.id == active.id else " "
            icon = SIGNAL_ICONS[health.signal] if health is not None else ""
            score = f"{health.health}/100" if health is not None else "n/a"
            lines.append(
                f"{marker} {icon} {business.display_name} [{business.priority}] "
                f"{business.stage}, {business.revenue_status}: {score}\n   ID: {business.id}"
            )
        return "\n".join(
            [f"🏢 Businesses ({len(lines)}):", "", *_capped(lines, Constants.LIST_DISPLAY_CAP)]
        )

    def _focus(self, command: ChecklistCommand) -> str:
        result = self.engine.get_global_next_task()
        if result is None:
            return "✅ Nothing left to do across all businesses!"

        task = result.task
        lines = [
            f"🎯 Focus: {result.business.display_name}",
            f"▶ {task.title} [{task.priority}]",
            f"Stage: {task.stage} | Category: {self.engine.category_name(task.category)}",
        ]
        if task.ai_suggestion:
            lines.append(f"💡 Tip: {task.ai_suggestion}")
        lines.append(f"ID: {task.id}")

        health_by_id = {score.business_id: score for score in self.engine.get_all_business_health()}
        recommendation = planning.focus_recommendation(self.engine.businesses, health_by_id)
        if recommendation:
            lines.append("")
            lines.append(f"⚠ {recommendation}")
        return "\n".join(lines)

    def _add_business(self, command: ChecklistCommand) -> str:
        if not command.business_name:
            return "❌ businessName required"

        business = self.engine.add_business(
            {
                "name": command.business_name,
                "short_name": command.short_name,
                "stage": command.stage or BusinessStage.IDEA,
                "priority": command.business_priority or BusinessPriority.SECONDARY,
                "domain": command.domain,
            }
        )
        self.engine.save()
        seeded = len(self.engine.get_tasks(business.id))
        return (
            f"🏢 Added business: {business.display_name} [{business.priority}]\n"
            f"Seeded {seeded} tasks\nID: {business.id}"
        )

    def _next(self, command: ChecklistCommand) -> str:
        business = self._resolve_scope(command)

        task = self.engine.get_next_task(business.id, command.stage)
        if task is None:
            return "✅ All tasks in this stage are complete!"

        lines = [
            f"▶ Next Task: {task.title}",
            f"Priority: {task.priority} | Stage: {task.stage} | Category: {task.category}",
        ]
        if task.description:
            lines.extend(["", task.description])
        if task.ai_suggestion:
            lines.extend(["", f"💡 Tip: {task.ai_suggestion}"])
        lines.extend(["", f"ID: {task.id}"])
        return "\n".join(lines)

    def _complete(self, command: ChecklistCommand) -> str:
        if not command.task_id:
            return "❌ taskId required"
        task = self._find_task(command.task_id)

        self.engine.complete_task(task.id)
        self.engine.save()
        progress = self.engine.get_overall_progress(task.business_id)
        return f"✅ Completed: {task.title}\nProgress: {progress.completed}/{progress.total} ({progress.percent}%)"

    def _skip(self, command: ChecklistCommand) -> str:
        if not command.task_id:
            return "❌ taskId required"
        task = self._find_task(command.task_id)

        self.engine.skip_task(task.id)
        self.engine.save()
        return f"⏭ Skipped: {task.title}"

    def _add(self, command: ChecklistCommand) -> str:
        if not command.title:
            return "❌ title required"
        business = self._resolve_scope(command)

        stage = command.stage or business.stage
        task = self.engine.add_task(
            {
                "business_id": business.id,
                "title": command.title,
                "description": command.description,
                "stage": stage,
                "category": command.category or f"{stage}-custom",
                "priority": command.priority or TaskPriority.MEDIUM,
                "source": TaskSource.USER,
                "order": Constants.CUSTOM_TASK_ORDER,
            }
        )
        if task is None:
            raise NotFoundError(f"Business not found: {business.id}")
        self.engine.save()
        return f"➕ Added: {task.title} ({task.stage}/{task.category})\nID: {task.id}"

    def _daily(self, command: ChecklistCommand) -> str:
        standup = self.engine.generate_daily_stand_up()
        if not standup.tasks:
            return "📋 No tasks for today's stand-up"

        lines = [f"📋 Daily Stand-Up: {standup.date}"]
        for group in standup.groups:
            if not group.tasks:
                continue
            lines.extend(["", f"{group.business_name} ({group.stage})"])
            lines.extend(f"☐ {item.title} [{item.priority}]" for item in group.tasks)
        if standup.cross_cutting:
            lines.extend(["", "Cross-cutting"])
            lines.extend(f"☐ {item.title} [{item.priority}]" for item in standup.cross_cutting)
        if standup.focus_recommendation:
            lines.extend(["", f"🎯 {standup.focus_recommendation}"])
        return "\n".join(lines)

    def _list(self, command: ChecklistCommand) -> str:
        business = self._resolve_scope(command)

        tasks = self.engine.get_tasks(
            business.id,
            stage=command.stage,
            category=command.category,
            status=command.status,
        )
        if not tasks:
            return "No tasks match the filter."

        lines = [
            f"{STATUS_ICONS[task.status]} {task.title} [{task.priority}] {short_id(task.id)}" for task in tasks
        ]
        return "\n".join([f"Tasks ({len(tasks)}):", "", *_capped(lines, Constants.LIST_DISPLAY_CAP)])

    def _detail(self, command: ChecklistCommand) -> str:
        if not command.task_id:
            return "❌ taskId required"
        task = self._find_task(command.task_id)

        business = self.engine.get_business(task.business_id)
        lines = [
            f"📌 {task.title}",
            f"Business: {business.display_name if business else task.business_id}",
            f"Status: {task.status} | Priority: {task.priority}",
            f"Stage: {task.stage} | Category: {self.engine.category_name(task.category)}",
            f"Source: {task.source} | Created: {task.created_at.date().isoformat()}",
        ]
        if task.completed_at is not None:
            lines.append(f"Completed: {task.completed_at.date().isoformat()}")
        if task.due_date:
            lines.append(f"Due: {task.due_date}")
        if task.dependencies:
            lines.append(f"Depends on: {', '.join(short_id(dependency) for dependency in task.dependencies)}")
        if task.description:
            lines.extend(["", task.description])
        if task.ai_suggestion:
            lines.extend(["", f"💡 {task.ai_suggestion}"])
        if task.notes:
            lines.extend(["", f"📝 {task.notes}"])
        lines.extend(["", f"ID: {task.id}"])
        return "\n".join(lines)

    def _set_stage(self, command: ChecklistCommand) -> str:
        if command.stage is None:
            return f"❌ stage required ({'/'.join(stage.value for stage in BusinessStage)})"
        business = self._resolve_scope(command)

        self.engine.set_stage(business.id, command.stage)
        self.engine.save()
        progress = self.engine.get_progress(business.id, command.stage)[0]
        return (
            f"🔄 {business.display_name} stage set to: {command.stage.upper()}\n"
            f"Progress: {progress.completed}/{progress.total} ({progress.percent}%)"
        )
