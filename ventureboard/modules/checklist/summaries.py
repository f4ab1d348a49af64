"""Read-only text summaries of checklist state."""

from typing import TYPE_CHECKING

from ventureboard.core.config import Constants
from ventureboard.models.service_models import HealthSignal
from ventureboard.modules.checklist import planning


if TYPE_CHECKING:
    from ventureboard.modules.checklist.engine import ChecklistEngine


SIGNAL_ICONS: dict[HealthSignal, str] = {
    HealthSignal.HEALTHY: "🟢",
    HealthSignal.ATTENTION: "🟡",
    HealthSignal.STALE: "🟠",
    HealthSignal.CRITICAL: "🔴",
}


def letta_summary(engine: "ChecklistEngine", business_id: str | None = None) -> str:
    """Summarize one business for a structured-state store.

    Covers stage, health, overall and per-stage progress and the next task.
    When more than one business is tracked a short portfolio section follows.
    """
    business = engine.get_business(business_id) if business_id else engine.active_business
    if business is None:
        return f"Business not found: {business_id}" if business_id else "No businesses tracked."

    health = engine.get_business_health(business.id)
    overall = engine.get_overall_progress(business.id)

    lines = [
        f"Business: {business.display_name}",
        f"Stage: {business.stage}",
    ]
    if health is not None:
        lines.append(f"Health: {health.health}/100 ({health.signal})")
    lines.append(f"Overall: {overall.completed}/{overall.total} ({overall.percent}%)")
    lines.append("")
    lines.extend(
        f"{progress.stage}: {progress.completed}/{progress.total} ({progress.percent}%)"
        for progress in engine.get_progress(business.id)
    )

    next_task = engine.get_next_task(business.id)
    if next_task is not None:
        lines.append("")
        lines.append(
            f"Next task: {next_task.title} [{next_task.priority}] ({engine.category_name(next_task.category)})"
        )

    others = [other for other in engine.get_all_business_health() if other.business_id != business.id]
    if others:
        lines.append("")
        lines.append(f"Portfolio: {len(others) + 1} businesses")
        for other in others:
            lines.append(f"- {other.business_name}: {other.health}/100 ({other.signal})")

    return "\n".join(lines)


def operator_overview(engine: "ChecklistEngine") -> str:
    """One line per business, worst health first, then the global next task and focus."""
    scores = engine.get_all_business_health()
    if not scores:
        return "No businesses tracked."

    lines = [f"🏢 Operator Overview: {len(scores)} businesses", ""]
    for score in scores[: Constants.OVERVIEW_DISPLAY_CAP]:
        business = engine.get_business(score.business_id)
        if business is None:
            continue
        lines.append(
            f"{SIGNAL_ICONS[score.signal]} {business.display_name} [{business.priority}] "
            f"{business.stage}: {score.health}/100 ({score.signal}), "
            f"checklist {score.checklist_percent}%, idle {score.days_since_activity}d"
        )
    if len(scores) > Constants.OVERVIEW_DISPLAY_CAP:
        lines.append(f"... and {len(scores) - Constants.OVERVIEW_DISPLAY_CAP} more")

    global_next = engine.get_global_next_task()
    if global_next is not None:
        lines.append("")
        lines.append(
            f"▶ Next: {global_next.task.title} [{global_next.task.priority}] ({global_next.business.display_name})"
        )

    focus = planning.focus_recommendation(engine.businesses, {score.business_id: score for score in scores})
    if focus:
        lines.append(f"🎯 {focus}")

    return "\n".join(lines)
