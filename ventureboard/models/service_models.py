"""Pydantic models for engine return types.

These models give the engine typed, read-only results at its boundary; the
facade formats them into text.
"""

from enum import StrEnum

from pydantic import BaseModel

from ventureboard.domain.business import Business, BusinessStage
from ventureboard.domain.task import Task


class HealthSignal(StrEnum):
    """Attention signal derived from health score and recency."""

    CRITICAL = "critical"
    STALE = "stale"
    ATTENTION = "attention"
    HEALTHY = "healthy"


class StageProgress(BaseModel):
    """Completion counts for one stage of a business."""

    stage: BusinessStage
    total: int
    completed: int
    skipped: int
    percent: int


class OverallProgress(BaseModel):
    """Completion counts across all stages."""

    total: int
    completed: int
    percent: int


class HealthBreakdown(BaseModel):
    """Individual components of a health score, before clamping."""

    checklist: float
    revenue: int
    recency: int
    blockers: int
    engagement: int
    structural: int


class BusinessHealth(BaseModel):
    """Health score and signal for a business."""

    business_id: str
    business_name: str
    health: int
    signal: HealthSignal
    checklist_percent: int
    days_since_activity: int
    critical_blocked: int
    breakdown: HealthBreakdown


class NextTaskResult(BaseModel):
    """Highest-priority next task paired with its owning business."""

    business: Business
    task: Task


class DailyTask(BaseModel):
    """Task entry on a daily stand-up."""

    task_id: str
    title: str
    priority: str
    business_id: str
    completed: bool = False
    notes: str | None = None


class StandUpGroup(BaseModel):
    """Stand-up items for one business."""

    business_id: str
    business_name: str
    stage: BusinessStage
    tasks: list[DailyTask]


class DailyStandUp(BaseModel):
    """Daily stand-up across all businesses."""

    date: str
    groups: list[StandUpGroup]
    cross_cutting: list[DailyTask]
    focus_recommendation: str | None = None
    reflection: str | None = None
    ai_insight: str | None = None

    @property
    def tasks(self) -> list[DailyTask]:
        """All items, per-business groups first."""
        return [task for group in self.groups for task in group.tasks] + list(self.cross_cutting)
