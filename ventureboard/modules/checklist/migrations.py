"""Schema upgrades for the persisted checklist document.

Each upgrade function takes a document of version N and returns version N+1.
`upgrade_document` chains them, so a new schema generation only needs one
function written against the generation before it. Upgrades run in memory;
nothing is written back until the engine is explicitly saved.

v1 -> v2:
  - userId becomes operatorId
  - businessName/currentStage become a single primary Business record
  - every task is stamped with that business's id
  - the business becomes the active business
"""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ventureboard.core.config import Constants
from ventureboard.core.errors import StorageError
from ventureboard.domain.base import utc_now
from ventureboard.domain.business import BusinessPriority, RevenueStatus, derive_short_name
from ventureboard.domain.state import LegacyChecklistState


logger = logging.getLogger(__name__)

Document = dict[str, Any]

# Name given to the implicit business of a v1 document that never recorded one
LEGACY_DEFAULT_BUSINESS_NAME = "My Business"

# Namespace for ids synthesized during upgrades, so repeated upgrades agree
_UPGRADE_NAMESPACE = uuid.UUID("6f2b8c4e-3d1a-5b7e-9c0f-2a4d6e8b1c3f")


def document_version(document: Document) -> int:
    """Schema version of a raw document. A missing version means v1."""
    version = document.get("version", Constants.LEGACY_SCHEMA_VERSION)
    if isinstance(version, bool) or not isinstance(version, int):
        msg = f"Invalid checklist schema version: {version!r}"
        raise StorageError(msg)
    return version


def legacy_business_id(legacy: LegacyChecklistState) -> str:
    """Deterministic id for the business synthesized from a v1 document."""
    seed = f"{legacy.user_id}|{legacy.business_name or ''}|{legacy.created_at or ''}"
    return str(uuid.uuid5(_UPGRADE_NAMESPACE, seed))


def upgrade_v1_to_v2(document: Document, now: datetime | None = None) -> Document:
    """Upgrade a single-business v1 document to the multi-business v2 shape.

    Timestamps missing from the legacy document are filled from now.
    """
    try:
        legacy = LegacyChecklistState.model_validate({**document, "version": 1})
    except PydanticValidationError as e:
        msg = f"Legacy checklist document is malformed: {e}"
        raise StorageError(msg) from e

    business_id = legacy_business_id(legacy)
    name = (legacy.business_name or "").strip() or LEGACY_DEFAULT_BUSINESS_NAME
    created_at = legacy.created_at or legacy.updated_at or (now or utc_now()).isoformat()
    updated_at = legacy.updated_at or created_at

    business: Document = {
        "id": business_id,
        "name": name,
        "shortName": derive_short_name(name),
        "stage": legacy.current_stage.value,
        "role": "",
        "revenueStatus": RevenueStatus.PRE_REVENUE.value,
        "priority": BusinessPriority.PRIMARY.value,
        "relatedTo": [],
        "tags": [],
        "createdAt": created_at,
        "updatedAt": updated_at,
    }

    tasks = [{**task, "businessId": task.get("businessId") or business_id} for task in legacy.tasks]

    upgraded: Document = {
        "version": 2,
        "operatorId": legacy.user_id,
        "businesses": [business],
        "activeBusiness": business_id,
        "tasks": tasks,
        "categories": list(legacy.categories),
        "createdAt": created_at,
        "updatedAt": updated_at,
    }

    logger.info(
        "Upgraded checklist document v1 -> v2",
        extra={"business_id": business_id, "task_count": len(tasks)},
    )
    return upgraded


# Upgrade functions keyed by the version they upgrade from
UPGRADES: dict[int, Callable[[Document, datetime | None], Document]] = {
    1: upgrade_v1_to_v2,
}


def upgrade_document(document: Document, now: datetime | None = None) -> tuple[Document, bool]:
    """Bring a raw document up to the current schema version.

    Args:
        document: Raw document as read from the store
        now: Time used for any timestamp an upgrade has to synthesize

    Returns:
        Tuple of (current-version document, whether any upgrade ran)

    Raises:
        StorageError: If the version is newer than supported or has no upgrade path
    """
    version = document_version(document)
    if version > Constants.SCHEMA_VERSION:
        msg = f"Checklist schema version {version} is newer than supported version {Constants.SCHEMA_VERSION}"
        raise StorageError(msg)

    upgraded = False
    while version < Constants.SCHEMA_VERSION:
        upgrade = UPGRADES.get(version)
        if upgrade is None:
            msg = f"No upgrade path from checklist schema version {version}"
            raise StorageError(msg)
        document = upgrade(document, now)
        version = document_version(document)
        upgraded = True

    return document, upgraded
