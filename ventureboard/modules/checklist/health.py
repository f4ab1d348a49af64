"""Business health scoring.

Health is a weighted sum of six components, clamped to [0, 100] and rounded:

- checklist completion: overall checklist percent * 0.20
- revenue posture: fixed points per revenue status
- attention recency: 15 points, minus one per day since the last activity
- blocker penalty: 20 points, minus four per open critical task
- engagement bonus: 10 points if the business owns any task
- structural bonus: constant 10 points, reserved for dependency-graph health

The signal is derived from the clamped score *and* recency: a business whose
score looks acceptable is still `stale` once it has gone untouched for more
than two weeks.
"""

import math
from collections.abc import Sequence
from datetime import datetime

from ventureboard.core.config import Constants
from ventureboard.domain.base import ensure_utc
from ventureboard.domain.business import Business, RevenueStatus
from ventureboard.domain.task import Task, TaskPriority, TaskStatus
from ventureboard.models.service_models import BusinessHealth, HealthBreakdown, HealthSignal


CHECKLIST_WEIGHT = 0.20

REVENUE_POINTS: dict[RevenueStatus, int] = {
    RevenueStatus.ACTIVE: 25,
    RevenueStatus.PRE_REVENUE: 10,
    RevenueStatus.DECLINING: 5,
    RevenueStatus.PAUSED: 0,
}

RECENCY_MAX_POINTS = 15
BLOCKER_MAX_POINTS = 20
BLOCKER_PENALTY_PER_TASK = 4
ENGAGEMENT_POINTS = 10
STRUCTURAL_POINTS = 10

# Signal thresholds
CRITICAL_BELOW = 30
STALE_BELOW = 50
ATTENTION_BELOW = 70

MIN_HEALTH = 0
MAX_HEALTH = 100


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (12.5 -> 13)."""
    return math.floor(value + 0.5)


def percent(part: int, total: int) -> int:
    """Rounded percentage, defined as 0 when there is no denominator."""
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)


def last_activity(business: Business, tasks: Sequence[Task]) -> datetime:
    """Latest updated_at across the business record and its tasks."""
    return max(ensure_utc(moment) for moment in [business.updated_at, *(task.updated_at for task in tasks)])


def days_since(moment: datetime, now: datetime) -> int:
    """Whole days elapsed since a moment; never negative."""
    return max(0, (ensure_utc(now) - ensure_utc(moment)).days)


def count_critical_blocked(tasks: Sequence[Task]) -> int:
    """Open critical tasks: pending or in progress."""
    return sum(
        1
        for task in tasks
        if task.priority == TaskPriority.CRITICAL and task.status in (TaskStatus.PENDING, TaskStatus.IN_PROGRESS)
    )


def derive_signal(health: int, days_since_activity: int) -> HealthSignal:
    """Map a clamped health score and recency onto a signal."""
    if health < CRITICAL_BELOW:
        return HealthSignal.CRITICAL
    if health < STALE_BELOW or days_since_activity > Constants.STALE_AFTER_DAYS:
        return HealthSignal.STALE
    if health < ATTENTION_BELOW:
        return HealthSignal.ATTENTION
    return HealthSignal.HEALTHY


def compute_business_health(business: Business, tasks: Sequence[Task], *, now: datetime) -> BusinessHealth:
    """Score a business from the tasks it owns.

    Args:
        business: The business to score
        tasks: All tasks owned by the business, any stage
        now: Reference time for recency

    Returns:
        BusinessHealth with the clamped score, signal and component breakdown
    """
    completed = sum(1 for task in tasks if task.status == TaskStatus.COMPLETED)
    checklist_percent = percent(completed, len(tasks))
    days_idle = days_since(last_activity(business, tasks), now)
    critical_blocked = count_critical_blocked(tasks)

    breakdown = HealthBreakdown(
        checklist=checklist_percent * CHECKLIST_WEIGHT,
        revenue=REVENUE_POINTS.get(business.revenue_status, 0),
        recency=max(0, RECENCY_MAX_POINTS - days_idle),
        blockers=max(0, BLOCKER_MAX_POINTS - critical_blocked * BLOCKER_PENALTY_PER_TASK),
        engagement=ENGAGEMENT_POINTS if tasks else 0,
        structural=STRUCTURAL_POINTS,
    )
    raw = (
        breakdown.checklist
        + breakdown.revenue
        + breakdown.recency
        + breakdown.blockers
        + breakdown.engagement
        + breakdown.structural
    )
    health = round_half_up(min(MAX_HEALTH, max(MIN_HEALTH, raw)))

    return BusinessHealth(
        business_id=business.id,
        business_name=business.name,
        health=health,
        signal=derive_signal(health, days_idle),
        checklist_percent=checklist_percent,
        days_since_activity=days_idle,
        critical_blocked=critical_blocked,
        breakdown=breakdown,
    )
