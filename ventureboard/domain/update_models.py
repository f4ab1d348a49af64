"""Partial update models for checklist records.

Only fields explicitly set by the caller are applied (``exclude_unset``).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ventureboard.domain.business import BusinessPriority, BusinessStage, RevenueStatus
from ventureboard.domain.task import TaskPriority, TaskStatus


class BusinessUpdate(BaseModel):
    """Update payload for a business."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    name: str | None = None
    short_name: str | None = None
    stage: BusinessStage | None = None
    role: str | None = None
    revenue_status: RevenueStatus | None = None
    priority: BusinessPriority | None = None
    domain: str | None = None
    related_to: list[str] | None = None
    tags: list[str] | None = None


class TaskUpdate(BaseModel):
    """Update payload for a task. Ownership and provenance are not updatable."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    title: str | None = None
    description: str | None = None
    stage: BusinessStage | None = None
    category: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    dependencies: list[str] | None = None
    order: int | None = None
    cross_cutting: bool | None = None
    due_date: str | None = None
    notes: str | None = None
    ai_suggestion: str | None = None
