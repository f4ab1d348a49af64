"""Shared base for persisted domain records."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(moment: datetime) -> datetime:
    """Treat naive datetimes from hand-edited documents as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


class DocumentModel(BaseModel):
    """Record stored in the checklist document.

    Attributes are snake_case in Python and camelCase in the persisted JSON.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_document(self) -> dict:
        """Serialize to the JSON-compatible persisted shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
