"""Task domain models and enums."""

from datetime import datetime
from enum import StrEnum

from pydantic import Field

from ventureboard.domain.base import DocumentModel
from ventureboard.domain.business import BusinessStage


class TaskStatus(StrEnum):
    """Task lifecycle state."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"


# Statuses that still need work
OPEN_STATUSES: frozenset[TaskStatus] = frozenset({TaskStatus.PENDING, TaskStatus.IN_PROGRESS})

# Statuses that satisfy a dependency
RESOLVED_STATUSES: frozenset[TaskStatus] = frozenset({TaskStatus.COMPLETED, TaskStatus.SKIPPED})


class TaskPriority(StrEnum):
    """Task priority; defines the total order used for task selection."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


PRIORITY_RANK: dict[TaskPriority, int] = {
    TaskPriority.CRITICAL: 0,
    TaskPriority.HIGH: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 3,
}


class TaskSource(StrEnum):
    """Who created the task. Informational only."""

    TEMPLATE = "template"
    AI = "ai"
    USER = "user"


class TaskCategory(DocumentModel):
    """Category metadata shown when grouping tasks."""

    id: str = Field(..., description="Category ID, conventionally <stage>-<topic>")
    name: str = Field(..., description="Display label")
    stage: BusinessStage = Field(..., description="Stage the category belongs to")
    description: str | None = Field(default=None, description="Optional explanation")
    order: int = Field(default=0, description="Display order within the stage")
    icon: str | None = Field(default=None, description="Emoji shown next to the label")


class Task(DocumentModel):
    """Checklist task owned by exactly one business."""

    id: str = Field(..., description="Unique task ID")
    title: str = Field(..., description="Task title")
    description: str | None = Field(default=None, description="Detailed explanation")
    business_id: str = Field(..., description="Owning business ID")
    stage: BusinessStage = Field(..., description="Stage this task belongs to")
    category: str = Field(..., description="Category ID")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Current lifecycle state")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Selection priority")
    source: TaskSource = Field(default=TaskSource.USER, description="Provenance")
    dependencies: list[str] = Field(default_factory=list, description="Task IDs that gate this task")
    order: int = Field(default=0, description="Sort order within the category")
    cross_cutting: bool = Field(default=False, description="Reported outside per-business stand-up groups")
    completed_at: datetime | None = Field(default=None, description="Set if and only if status is completed")
    due_date: str | None = Field(default=None, description="Due date (ISO format)")
    notes: str | None = Field(default=None, description="Operator notes")
    ai_suggestion: str | None = Field(default=None, description="Opaque tip supplied by an AI caller")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @property
    def is_open(self) -> bool:
        """Whether the task still needs work."""
        return self.status in OPEN_STATUSES

    @property
    def priority_rank(self) -> int:
        return PRIORITY_RANK[self.priority]
