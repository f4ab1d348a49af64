"""Business domain models and enums."""

import re
from datetime import datetime
from enum import StrEnum

from pydantic import Field

from ventureboard.domain.base import DocumentModel


# Constants for short name derivation
MAX_SHORT_NAME_LENGTH = 4


class BusinessStage(StrEnum):
    """Lifecycle stage of a business. Ordered, but may be set backward."""

    IDEA = "idea"
    LAUNCH = "launch"
    GROWTH = "growth"
    MATURE = "mature"
    SUNSET = "sunset"


# Stages that carry a checklist; mature and sunset are left out of progress rollups
CHECKLIST_STAGES: tuple[BusinessStage, ...] = (
    BusinessStage.IDEA,
    BusinessStage.LAUNCH,
    BusinessStage.GROWTH,
)


class RevenueStatus(StrEnum):
    """Revenue posture of a business."""

    ACTIVE = "active"
    PRE_REVENUE = "pre-revenue"
    DECLINING = "declining"
    PAUSED = "paused"


class BusinessPriority(StrEnum):
    """How much operator attention a business should get relative to the others."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUPPORTING = "supporting"
    PASSIVE = "passive"


BUSINESS_PRIORITY_RANK: dict[BusinessPriority, int] = {
    BusinessPriority.PRIMARY: 0,
    BusinessPriority.SECONDARY: 1,
    BusinessPriority.SUPPORTING: 2,
    BusinessPriority.PASSIVE: 3,
}


def derive_short_name(name: str) -> str:
    """Build a display abbreviation from a business name.

    "Startempire Wire" -> "SW", "Acme" -> "ACME".
    """
    words = re.findall(r"[^\W_]+", name, re.UNICODE)
    if not words:
        return ""
    if len(words) == 1:
        return words[0][:MAX_SHORT_NAME_LENGTH].upper()
    return "".join(word[0] for word in words)[:MAX_SHORT_NAME_LENGTH].upper()


class Business(DocumentModel):
    """Business tracked by the checklist."""

    id: str = Field(..., description="Unique business ID")
    name: str = Field(..., description="Business name")
    short_name: str = Field(default="", description="Display abbreviation, used as a lookup key")
    stage: BusinessStage = Field(default=BusinessStage.IDEA, description="Current lifecycle stage")
    role: str = Field(default="", description="What the business is for in the operator's portfolio")
    revenue_status: RevenueStatus = Field(default=RevenueStatus.PRE_REVENUE, description="Revenue posture")
    priority: BusinessPriority = Field(default=BusinessPriority.SECONDARY, description="Attention priority")
    domain: str | None = Field(default=None, description="Primary web domain")
    related_to: list[str] = Field(default_factory=list, description="IDs of related businesses")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @property
    def display_name(self) -> str:
        """Name with short name suffix when one is set."""
        if self.short_name and self.short_name != self.name:
            return f"{self.name} ({self.short_name})"
        return self.name
