"""Checklist document models: the current root aggregate and the legacy v1 shape."""

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from ventureboard.domain.base import DocumentModel, utc_now
from ventureboard.domain.business import Business, BusinessStage
from ventureboard.domain.task import Task, TaskCategory


class ChecklistState(DocumentModel):
    """Root aggregate persisted as a single JSON document (schema version 2).

    Tasks are kept in a flat list that references businesses by id rather than
    being nested under them, so cross-business queries are a single pass.
    """

    version: Literal[2] = Field(default=2, description="Schema generation marker")
    operator_id: str = Field(default="", description="Operator that owns this state")
    businesses: list[Business] = Field(default_factory=list, description="Businesses, unique by id")
    active_business: str | None = Field(default=None, description="Default scope for unscoped commands")
    tasks: list[Task] = Field(default_factory=list, description="All tasks across businesses")
    categories: list[TaskCategory] = Field(default_factory=list, description="Category catalog")
    created_at: datetime = Field(default_factory=utc_now, description="Creation timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last save timestamp")


class LegacyChecklistState(DocumentModel):
    """Single-business document written before multi-business support.

    Tasks are kept as raw records; they are re-validated as v2 tasks after the
    upgrade stamps their owning business.
    """

    version: Literal[1] = Field(default=1, description="Schema generation marker")
    user_id: str = Field(default="", description="Operator ID")
    business_name: str | None = Field(default=None, description="Name of the implicit business")
    current_stage: BusinessStage = Field(default=BusinessStage.IDEA, description="Stage of the implicit business")
    tasks: list[dict[str, Any]] = Field(default_factory=list, description="Tasks without businessId")
    categories: list[dict[str, Any]] = Field(default_factory=list, description="Category catalog")
    created_at: str | None = Field(default=None, description="Creation timestamp (ISO format)")
    updated_at: str | None = Field(default=None, description="Last save timestamp (ISO format)")
