"""Tests for progress reporting."""

import pytest

from ventureboard.domain.business import BusinessStage
from ventureboard.modules.checklist.health import percent, round_half_up


@pytest.mark.unit
class TestPercent:
    """Tests for the percentage helpers."""

    def test_zero_total_is_zero(self):
        """Test an empty denominator reports 0 rather than failing."""
        assert percent(0, 0) == 0

    def test_half_rounds_up(self):
        """Test .5 rounds up (1/8 = 12.5% -> 13%)."""
        assert percent(1, 8) == 13
        assert round_half_up(2.5) == 3

    def test_rounding(self):
        """Test ordinary rounding."""
        assert percent(1, 3) == 33
        assert percent(2, 3) == 67


@pytest.mark.unit
class TestGetProgress:
    """Tests for get_progress and get_overall_progress."""

    def test_four_of_ten(self, engine):
        """Test 4 completed out of 10 idea tasks reports 40%."""
        business = engine.add_business({"name": "Ten Tasks"}, seed=False)
        tasks = [engine.add_task({"business_id": business.id, "title": f"Task {i}"}) for i in range(10)]
        for task in tasks[:4]:
            engine.complete_task(task.id)

        idea, launch, growth = engine.get_progress(business.id)

        assert (idea.stage, idea.completed, idea.total, idea.percent) == (BusinessStage.IDEA, 4, 10, 40)
        assert (launch.total, launch.percent) == (0, 0)
        assert (growth.total, growth.percent) == (0, 0)

    def test_skipped_counted_separately(self, engine):
        """Test skipped tasks are reported but do not count as completed."""
        business = engine.add_business({"name": "Skippy"}, seed=False)
        task = engine.add_task({"business_id": business.id, "title": "Skip me"})
        engine.skip_task(task.id)

        [idea] = engine.get_progress(business.id, "idea")

        assert (idea.skipped, idea.completed, idea.percent) == (1, 0, 0)

    def test_zero_tasks(self, engine):
        """Test a business without tasks reports 0% everywhere."""
        business = engine.add_business({"name": "Empty"}, seed=False)

        assert all(progress.percent == 0 for progress in engine.get_progress(business.id))
        assert engine.get_overall_progress(business.id).percent == 0

    def test_explicit_stage_outside_checklist(self, engine, acme):
        """Test mature is reported only when requested."""
        [mature] = engine.get_progress(acme.id, BusinessStage.MATURE)

        assert (mature.stage, mature.total) == (BusinessStage.MATURE, 0)

    def test_seeded_business_totals(self, engine, acme):
        """Test a seeded business reports the per-stage catalog sizes."""
        totals = [progress.total for progress in engine.get_progress(acme.id)]

        assert totals == [22, 22, 20]
        assert engine.get_overall_progress(acme.id).total == 64

    def test_overall_across_businesses(self, engine, acme):
        """Test overall progress without a business covers every task."""
        other = engine.add_business({"name": "Other"}, seed=False)
        task = engine.add_task({"business_id": other.id, "title": "Only"})
        engine.complete_task(task.id)

        overall = engine.get_overall_progress()

        assert (overall.completed, overall.total, overall.percent) == (1, 65, 2)
