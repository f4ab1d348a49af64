"""Pydantic models for creating checklist records."""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ventureboard.domain.business import BusinessPriority, BusinessStage, RevenueStatus
from ventureboard.domain.task import TaskPriority, TaskSource, TaskStatus


class BusinessCreate(BaseModel):
    """Pydantic model for creating a business record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., description="Business name")
    short_name: str | None = Field(default=None, description="Display abbreviation (derived from name if unset)")
    stage: BusinessStage = Field(default=BusinessStage.IDEA, description="Starting stage")
    role: str = Field(default="", description="Role in the operator's portfolio")
    revenue_status: RevenueStatus = Field(default=RevenueStatus.PRE_REVENUE, description="Revenue posture")
    priority: BusinessPriority = Field(default=BusinessPriority.SECONDARY, description="Attention priority")
    domain: str | None = Field(default=None, description="Primary web domain")
    related_to: list[str] = Field(default_factory=list, description="IDs of related businesses")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")

    @field_validator("name")
    @classmethod
    def validate_name_present(cls, v: str) -> str:
        """Validate name is not blank."""
        v = v.strip()
        if not v:
            raise ValueError("Business name cannot be empty")
        return v


class TaskCreate(BaseModel):
    """Pydantic model for creating a task record.

    Stage defaults to the owning business's current stage and category to
    "<stage>-custom".
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_id: str = Field(..., description="Owning business ID")
    title: str = Field(..., description="Task title")
    description: str | None = Field(default=None, description="Detailed explanation")
    stage: BusinessStage | None = Field(default=None, description="Stage the task belongs to")
    category: str | None = Field(default=None, description="Category ID")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="Initial status")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="Selection priority")
    source: TaskSource = Field(default=TaskSource.USER, description="Provenance")
    dependencies: list[str] = Field(default_factory=list, description="Task IDs that gate this task")
    order: int | None = Field(default=None, description="Sort order within the category")
    cross_cutting: bool = Field(default=False, description="Report outside per-business stand-up groups")
    due_date: str | None = Field(default=None, description="Due date (ISO format)")
    notes: str | None = Field(default=None, description="Operator notes")
    ai_suggestion: str | None = Field(default=None, description="Opaque tip supplied by an AI caller")

    @field_validator("title")
    @classmethod
    def validate_title_present(cls, v: str) -> str:
        """Validate title is not blank."""
        v = v.strip()
        if not v:
            raise ValueError("Task title cannot be empty")
        return v
