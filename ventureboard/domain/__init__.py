"""Domain models and DTOs."""

from ventureboard.domain.business import (
    BUSINESS_PRIORITY_RANK,
    CHECKLIST_STAGES,
    Business,
    BusinessPriority,
    BusinessStage,
    RevenueStatus,
)
from ventureboard.domain.create_models import BusinessCreate, TaskCreate
from ventureboard.domain.state import ChecklistState, LegacyChecklistState
from ventureboard.domain.task import (
    OPEN_STATUSES,
    PRIORITY_RANK,
    RESOLVED_STATUSES,
    Task,
    TaskCategory,
    TaskPriority,
    TaskSource,
    TaskStatus,
)
from ventureboard.domain.update_models import BusinessUpdate, TaskUpdate


__all__ = [
    "BUSINESS_PRIORITY_RANK",
    "CHECKLIST_STAGES",
    "OPEN_STATUSES",
    "PRIORITY_RANK",
    "RESOLVED_STATUSES",
    "Business",
    "BusinessCreate",
    "BusinessPriority",
    "BusinessStage",
    "BusinessUpdate",
    "ChecklistState",
    "LegacyChecklistState",
    "RevenueStatus",
    "Task",
    "TaskCategory",
    "TaskCreate",
    "TaskPriority",
    "TaskSource",
    "TaskStatus",
    "TaskUpdate",
]
