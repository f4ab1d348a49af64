"""Tests for checklist document upgrades."""

from datetime import UTC, datetime

import pytest

from ventureboard.core.errors import StorageError
from ventureboard.domain.business import BusinessPriority, BusinessStage, RevenueStatus
from ventureboard.domain.task import TaskStatus
from ventureboard.modules.checklist.engine import ChecklistEngine
from ventureboard.modules.checklist.migrations import (
    LEGACY_DEFAULT_BUSINESS_NAME,
    document_version,
    upgrade_document,
    upgrade_v1_to_v2,
)
from tests.unit.mocks import InMemoryStore


def _legacy_task(task_id: str, *, status: str = "pending", completed_at: str | None = None) -> dict:
    task = {
        "id": task_id,
        "title": f"Task {task_id}",
        "stage": "idea",
        "category": "idea-identity",
        "status": status,
        "priority": "critical",
        "source": "template",
        "dependencies": [],
        "order": 1,
        "createdAt": "2025-01-01T00:00:00Z",
        "updatedAt": "2025-01-02T00:00:00Z",
    }
    if completed_at:
        task["completedAt"] = completed_at
    return task


@pytest.fixture
def legacy_document():
    """A single-business v1 document without a version field."""
    return {
        "userId": "verious",
        "businessName": "Startempire Wire",
        "currentStage": "launch",
        "tasks": [
            _legacy_task("t1", status="completed", completed_at="2025-01-02T00:00:00Z"),
            _legacy_task("t2"),
        ],
        "categories": [{"id": "idea-identity", "name": "Business Identity", "stage": "idea", "order": 1}],
        "createdAt": "2025-01-01T00:00:00Z",
        "updatedAt": "2025-01-03T00:00:00Z",
    }


@pytest.mark.unit
class TestDocumentVersion:
    """Tests for document_version."""

    def test_missing_version_is_legacy(self):
        """Test documents without a version are v1."""
        assert document_version({"userId": "x"}) == 1

    def test_explicit_version(self):
        """Test an explicit integer version is returned."""
        assert document_version({"version": 2}) == 2

    @pytest.mark.parametrize("version", ["2", 2.0, True, None])
    def test_non_integer_version_rejected(self, version):
        """Test a malformed version marker is a storage failure."""
        with pytest.raises(StorageError, match="Invalid checklist schema version"):
            document_version({"version": version})


@pytest.mark.unit
class TestUpgradeV1ToV2:
    """Tests for upgrade_v1_to_v2."""

    def test_builds_primary_business(self, legacy_document):
        """Test the implicit business becomes one primary Business record."""
        upgraded = upgrade_v1_to_v2(legacy_document)

        assert upgraded["version"] == 2
        assert upgraded["operatorId"] == "verious"
        [business] = upgraded["businesses"]
        assert business["name"] == "Startempire Wire"
        assert business["shortName"] == "SW"
        assert business["stage"] == BusinessStage.LAUNCH.value
        assert business["priority"] == BusinessPriority.PRIMARY.value
        assert business["revenueStatus"] == RevenueStatus.PRE_REVENUE.value
        assert upgraded["activeBusiness"] == business["id"]

    def test_stamps_every_task(self, legacy_document):
        """Test every task gets the synthesized business id."""
        upgraded = upgrade_v1_to_v2(legacy_document)
        business_id = upgraded["businesses"][0]["id"]

        assert [task["businessId"] for task in upgraded["tasks"]] == [business_id, business_id]

    def test_business_id_is_deterministic(self, legacy_document):
        """Test upgrading the same legacy document twice yields the same id."""
        first = upgrade_v1_to_v2(legacy_document)
        second = upgrade_v1_to_v2(legacy_document)

        assert first["businesses"][0]["id"] == second["businesses"][0]["id"]

    def test_missing_business_name_gets_default(self, legacy_document):
        """Test a v1 document without a business name still upgrades."""
        del legacy_document["businessName"]

        upgraded = upgrade_v1_to_v2(legacy_document)

        assert upgraded["businesses"][0]["name"] == LEGACY_DEFAULT_BUSINESS_NAME

    def test_missing_timestamps_use_now(self, legacy_document):
        """Test an undated v1 document takes its timestamps from the supplied time."""
        del legacy_document["createdAt"]
        del legacy_document["updatedAt"]
        now = datetime(2026, 3, 2, 12, 0, tzinfo=UTC)

        upgraded = upgrade_v1_to_v2(legacy_document, now)

        assert upgraded["businesses"][0]["createdAt"] == now.isoformat()
        assert upgraded["updatedAt"] == now.isoformat()

    def test_malformed_legacy_document(self):
        """Test a v1 document that does not validate is a storage failure."""
        with pytest.raises(StorageError, match="Legacy checklist document is malformed"):
            upgrade_v1_to_v2({"tasks": "not a list"})


@pytest.mark.unit
class TestUpgradeDocument:
    """Tests for upgrade_document."""

    def test_current_version_untouched(self):
        """Test a v2 document passes through without upgrading."""
        document = {"version": 2, "businesses": []}

        result, upgraded = upgrade_document(document)

        assert result is document
        assert upgraded is False

    def test_newer_version_rejected(self):
        """Test a document from a newer schema is refused."""
        with pytest.raises(StorageError, match="newer than supported"):
            upgrade_document({"version": 3})

    def test_missing_upgrade_path(self):
        """Test versions with no upgrade function are refused."""
        with pytest.raises(StorageError, match="No upgrade path"):
            upgrade_document({"version": 0})


@pytest.mark.unit
class TestEngineLoadsLegacyDocuments:
    """Tests for loading v1 documents through the engine."""

    def test_load_upgrades_in_memory_only(self, legacy_document, clock):
        """Test a legacy load marks the engine dirty but never writes on its own."""
        store = InMemoryStore(legacy_document)

        engine = ChecklistEngine(store, clock=clock)

        assert engine.is_dirty
        assert store.writes == []
        assert store.document == legacy_document
        assert engine.active_business.name == "Startempire Wire"
        assert len(engine.get_tasks(engine.active_business.id)) == 2

    def test_completed_at_survives_upgrade(self, legacy_document, clock):
        """Test legacy completion timestamps are preserved."""
        engine = ChecklistEngine(InMemoryStore(legacy_document), clock=clock)

        task = engine.get_task("t1")

        assert task.status == TaskStatus.COMPLETED
        assert task.completed_at is not None

    def test_load_save_reload_is_stable(self, legacy_document, clock):
        """Test v1 load, save and reload gives the same document without migrating again."""
        store = InMemoryStore(legacy_document)
        first = ChecklistEngine(store, clock=clock)
        first.save()

        second = ChecklistEngine(store, clock=clock)

        assert not second.is_dirty
        assert second.state.to_document() == store.document
        assert second.state.to_document() == first.state.to_document()

    def test_current_document_loads_identically_twice(self, engine, acme, store, clock):
        """Test loading a v2 document twice yields identical state."""
        engine.save()

        first = ChecklistEngine(store, clock=clock)
        second = ChecklistEngine(store, clock=clock)

        assert not first.is_dirty
        assert first.state.to_document() == second.state.to_document() == store.document

    def test_malformed_current_document(self, clock):
        """Test a v2 document that does not validate is a storage failure."""
        store = InMemoryStore({"version": 2, "businesses": [{"name": "no id"}]})

        with pytest.raises(StorageError, match="malformed"):
            ChecklistEngine(store, clock=clock)

    def test_undated_legacy_document_upgrades_identically_twice(self, legacy_document, clock):
        """Test repeated in-memory upgrades of an undated v1 document agree."""
        del legacy_document["createdAt"]
        del legacy_document["updatedAt"]
        store = InMemoryStore(legacy_document)

        first = ChecklistEngine(store, clock=clock)
        second = ChecklistEngine(store, clock=clock)

        assert first.state.to_document() == second.state.to_document()
        assert first.active_business.created_at == clock.now
