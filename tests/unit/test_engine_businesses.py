"""Tests for business operations on the checklist engine."""

import pytest

from ventureboard.core.errors import ValidationError
from ventureboard.domain.business import BusinessPriority, BusinessStage, RevenueStatus
from ventureboard.domain.create_models import BusinessCreate
from ventureboard.domain.task import TaskSource, TaskStatus
from ventureboard.modules.checklist.engine import ChecklistEngine
from ventureboard.modules.checklist.seed import SEED_TASKS


@pytest.mark.unit
class TestLoadEmptyStore:
    """Tests for an engine over an empty store."""

    def test_empty_state(self, engine):
        """Test a missing document yields an empty, clean state."""
        assert engine.businesses == []
        assert engine.state.tasks == []
        assert engine.active_business is None
        assert not engine.is_dirty

    def test_save_writes_current_version(self, engine, store, clock):
        """Test save stamps updatedAt and writes a v2 document."""
        clock.advance(hours=1)

        engine.save()

        assert store.document["version"] == 2
        assert store.document["updatedAt"] == "2026-03-02T13:00:00Z"
        assert not engine.is_dirty


@pytest.mark.unit
class TestAddBusiness:
    """Tests for add_business."""

    def test_seeds_full_catalog(self, engine):
        """Test a new business owns exactly the seed catalog, all pending template tasks."""
        business = engine.add_business({"name": "Acme"})

        tasks = engine.get_tasks(business.id)
        assert len(tasks) == len(SEED_TASKS)
        assert all(task.status == TaskStatus.PENDING for task in tasks)
        assert all(task.source == TaskSource.TEMPLATE for task in tasks)

    def test_defaults(self, engine, clock):
        """Test omitted fields take their documented defaults."""
        business = engine.add_business(BusinessCreate(name="Startempire Wire"))

        assert business.stage == BusinessStage.IDEA
        assert business.revenue_status == RevenueStatus.PRE_REVENUE
        assert business.priority == BusinessPriority.SECONDARY
        assert business.short_name == "SW"
        assert business.created_at == clock.now
        assert business.related_to == []

    def test_installs_default_categories_when_catalog_empty(self, engine):
        """Test seeding a business into an empty catalog installs the categories."""
        engine.add_business({"name": "Acme"})

        assert len(engine.get_categories()) == 15
        assert len(engine.get_categories(BusinessStage.LAUNCH)) == 5

    def test_without_seed(self, engine):
        """Test seed=False creates a business with no tasks."""
        business = engine.add_business({"name": "Side Project"}, seed=False)

        assert engine.get_tasks(business.id) == []
        assert engine.get_categories() == []

    def test_first_business_becomes_active(self, engine):
        """Test the first business is the active one and later ones do not replace it."""
        first = engine.add_business({"name": "First"}, seed=False)
        engine.add_business({"name": "Second"}, seed=False)

        assert engine.active_business.id == first.id

    def test_marks_dirty(self, engine):
        """Test adding a business requires a save."""
        engine.add_business({"name": "Acme"}, seed=False)

        assert engine.is_dirty

    @pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "   "}, None])
    def test_missing_name_rejected(self, engine, payload):
        """Test a missing or blank name is a validation error."""
        with pytest.raises(ValidationError):
            engine.add_business(payload)

        assert engine.businesses == []

    def test_invalid_enum_rejected(self, engine):
        """Test an unknown priority is a validation error."""
        with pytest.raises(ValidationError, match="priority"):
            engine.add_business({"name": "Acme", "priority": "urgent"})


@pytest.mark.unit
class TestInitFromTemplate:
    """Tests for init_from_template."""

    def test_bootstraps_primary_business(self, engine):
        """Test the bootstrap business is primary, active and seeded."""
        business = engine.init_from_template("verious", business_name="Startempire Wire", short_name="SEW")

        assert engine.state.operator_id == "verious"
        assert business.priority == BusinessPriority.PRIMARY
        assert business.short_name == "SEW"
        assert engine.active_business.id == business.id
        assert len(engine.get_tasks(business.id)) == len(SEED_TASKS)
        assert len(engine.get_categories()) == 15


@pytest.mark.unit
class TestUpdateBusiness:
    """Tests for update_business, set_stage and set_active_business."""

    def test_merges_fields_and_stamps_updated_at(self, engine, acme, clock):
        """Test an update merges fields and moves updatedAt."""
        clock.advance(days=2)

        updated = engine.update_business(acme.id, {"revenueStatus": "active", "tags": ["saas"]})

        assert updated.revenue_status == RevenueStatus.ACTIVE
        assert updated.tags == ["saas"]
        assert updated.name == "Acme Labs"
        assert updated.updated_at == clock.now

    def test_none_clears_optional_field(self, engine, acme):
        """Test an explicit None clears the domain but leaves required fields alone."""
        engine.update_business(acme.id, {"domain": "acme.io"})

        updated = engine.update_business(acme.id, {"domain": None, "name": None, "tags": None})

        assert updated.domain is None
        assert updated.name == "Acme Labs"
        assert updated.tags == []

    def test_unknown_business(self, engine):
        """Test updating an unknown id returns None."""
        assert engine.update_business("missing", {"role": "x"}) is None

    def test_blank_name_rejected(self, engine, acme):
        """Test a business cannot be renamed to nothing."""
        with pytest.raises(ValidationError, match="cannot be empty"):
            engine.update_business(acme.id, {"name": "  "})

    def test_unknown_field_rejected(self, engine, acme):
        """Test fields outside the update model are refused."""
        with pytest.raises(ValidationError):
            engine.update_business(acme.id, {"id": "hijack"})

    def test_set_stage_moves_backward(self, engine, acme):
        """Test stages may move backward."""
        engine.set_stage(acme.id, BusinessStage.GROWTH)

        business = engine.set_stage(acme.id, "launch")

        assert business.stage == BusinessStage.LAUNCH

    def test_set_active_business(self, engine, acme):
        """Test switching scope to a known business."""
        other = engine.add_business({"name": "Other Co"}, seed=False)

        assert engine.set_active_business(other.id) is True
        assert engine.active_business.id == other.id

    def test_set_active_business_unknown(self, engine, acme):
        """Test switching scope to an unknown id fails without changing scope."""
        assert engine.set_active_business("missing") is False
        assert engine.active_business.id == acme.id


@pytest.mark.unit
class TestResolveBusiness:
    """Tests for resolve_business."""

    def test_by_id(self, engine, acme):
        """Test an exact id resolves."""
        assert engine.resolve_business(acme.id) is acme

    def test_by_name_case_insensitive(self, engine, acme):
        """Test names resolve case-insensitively."""
        assert engine.resolve_business("acme labs") is acme

    def test_by_short_name(self, engine, acme):
        """Test short names resolve after names."""
        assert engine.resolve_business("al") is acme

    def test_no_partial_match(self, engine, acme):
        """Test partial names do not resolve."""
        assert engine.resolve_business("Acme") is None

    @pytest.mark.parametrize("query", [None, "", "   ", "Unknown Co"])
    def test_unresolved(self, engine, acme, query):
        """Test blank or unknown queries resolve to None."""
        assert engine.resolve_business(query) is None

    def test_survives_reload(self, engine, acme, store, clock):
        """Test lookups work against a freshly loaded engine."""
        engine.save()

        reloaded = ChecklistEngine(store, clock=clock)

        assert reloaded.resolve_business("AL").id == acme.id
