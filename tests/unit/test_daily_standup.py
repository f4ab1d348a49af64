"""Tests for daily stand-up generation."""

import pytest

from ventureboard.domain.business import BusinessPriority


def _add(engine, business, title, **fields):
    return engine.add_task({"business_id": business.id, "title": title, **fields})


@pytest.fixture
def solo(engine):
    """Unseeded primary business in the idea stage."""
    return engine.add_business({"name": "Solo Co", "priority": BusinessPriority.PRIMARY}, seed=False)


@pytest.mark.unit
class TestGenerateDailyStandUp:
    """Tests for generate_daily_stand_up."""

    def test_date_defaults_to_clock(self, engine, solo):
        """Test the date comes from the engine clock."""
        assert engine.generate_daily_stand_up().date == "2026-03-02"
        assert engine.generate_daily_stand_up("2026-12-24").date == "2026-12-24"

    def test_in_progress_then_high_priority_pending(self, engine, solo):
        """Test in-progress tasks lead and critical/high pending tasks fill to two."""
        started = _add(engine, solo, "Started", priority="low", order=9)
        engine.start_task(started.id)
        _add(engine, solo, "Medium", priority="medium", order=1)
        _add(engine, solo, "High", priority="high", order=3)
        critical = _add(engine, solo, "Critical", priority="critical", order=2)

        [group] = engine.generate_daily_stand_up().groups

        assert [item.task_id for item in group.tasks] == [started.id, critical.id]

    def test_all_in_progress_kept(self, engine, solo):
        """Test every in-progress task is listed even beyond the cap."""
        started = [_add(engine, solo, f"Started {i}", order=10 - i) for i in range(3)]
        for task in started:
            engine.start_task(task.id)
        _add(engine, solo, "Critical", priority="critical")

        [group] = engine.generate_daily_stand_up().groups

        assert [item.title for item in group.tasks] == ["Started 2", "Started 1", "Started 0"]

    def test_other_stages_excluded(self, engine, solo):
        """Test only the business's current stage contributes."""
        _add(engine, solo, "Launch critical", stage="launch", priority="critical")

        standup = engine.generate_daily_stand_up()

        assert standup.tasks == []

    def test_groups_per_business(self, engine, solo):
        """Test each business gets its own group."""
        other = engine.add_business({"name": "Other Co"}, seed=False)
        _add(engine, solo, "Solo critical", priority="critical")
        _add(engine, other, "Other high", priority="high")

        standup = engine.generate_daily_stand_up()

        assert [group.business_name for group in standup.groups] == ["Solo Co", "Other Co"]
        assert [item.title for item in standup.tasks] == ["Solo critical", "Other high"]

    def test_cross_cutting_listed_separately_and_capped(self, engine, solo):
        """Test cross-cutting tasks leave the groups and are capped at three."""
        for i in range(4):
            _add(engine, solo, f"Shared {i}", priority="low", order=i, cross_cutting=True)
        regular = _add(engine, solo, "Regular", priority="critical")

        standup = engine.generate_daily_stand_up()

        assert [item.task_id for item in standup.groups[0].tasks] == [regular.id]
        assert [item.title for item in standup.cross_cutting] == ["Shared 0", "Shared 1", "Shared 2"]

    def test_focus_names_unhealthy_primary(self, engine, solo):
        """Test the focus line names the worst primary business that is not healthy."""
        health = engine.get_business_health(solo.id)

        standup = engine.generate_daily_stand_up()

        assert standup.focus_recommendation == f"Focus on Solo Co: health {health.health}/100 ({health.signal})"

    def test_no_focus_when_primary_healthy(self, engine):
        """Test a healthy primary business needs no focus line."""
        engine.add_business({"name": "Cash Cow", "priority": "primary", "revenueStatus": "active"}, seed=False)
        engine.add_business({"name": "Side", "revenueStatus": "paused"}, seed=False)

        assert engine.generate_daily_stand_up().focus_recommendation is None

    def test_daily_task_fields(self, engine, solo):
        """Test stand-up items carry priority, owner and notes."""
        task = _add(engine, solo, "Critical", priority="critical", notes="call bank")

        [item] = engine.generate_daily_stand_up().tasks

        assert item.task_id == task.id
        assert item.priority == "critical"
        assert item.business_id == solo.id
        assert item.notes == "call bank"
        assert item.completed is False
