"""Default category catalog and seed tasks used to bootstrap a business.

Three checklist stages (idea, launch, growth), five categories each. Seed
tasks are templates: ids and timestamps are assigned when they are
instantiated for a business, never here.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ventureboard.domain.business import BusinessStage
from ventureboard.domain.task import Task, TaskCategory, TaskPriority, TaskSource, TaskStatus


IDEA = BusinessStage.IDEA
LAUNCH = BusinessStage.LAUNCH
GROWTH = BusinessStage.GROWTH

CRITICAL = TaskPriority.CRITICAL
HIGH = TaskPriority.HIGH
MEDIUM = TaskPriority.MEDIUM


class SeedTask(BaseModel):
    """Template for a task seeded into every new business."""

    model_config = ConfigDict(frozen=True)

    title: str
    stage: BusinessStage
    category: str
    priority: TaskPriority
    order: int
    ai_suggestion: str | None = None


DEFAULT_CATEGORIES: tuple[TaskCategory, ...] = (
    # Idea stage
    TaskCategory(id="idea-identity", name="Business Identity", stage=IDEA, order=1, icon="💡"),
    TaskCategory(id="idea-research", name="Market Research", stage=IDEA, order=2, icon="🔍"),
    TaskCategory(id="idea-planning", name="Business Planning", stage=IDEA, order=3, icon="📋"),
    TaskCategory(id="idea-finance", name="Financial Planning", stage=IDEA, order=4, icon="💰"),
    TaskCategory(id="idea-legal", name="Legal Foundation", stage=IDEA, order=5, icon="⚖️"),
    # Launch stage
    TaskCategory(id="launch-brand", name="Brand & Marketing", stage=LAUNCH, order=1, icon="🎨"),
    TaskCategory(id="launch-digital", name="Digital Presence", stage=LAUNCH, order=2, icon="🌐"),
    TaskCategory(id="launch-ops", name="Operations Setup", stage=LAUNCH, order=3, icon="⚙️"),
    TaskCategory(id="launch-product", name="Product/Service Ready", stage=LAUNCH, order=4, icon="📦"),
    TaskCategory(id="launch-sales", name="Sales Pipeline", stage=LAUNCH, order=5, icon="🤝"),
    # Growth stage
    TaskCategory(id="growth-scale", name="Scaling Operations", stage=GROWTH, order=1, icon="📈"),
    TaskCategory(id="growth-team", name="Team Building", stage=GROWTH, order=2, icon="👥"),
    TaskCategory(id="growth-revenue", name="Revenue Optimization", stage=GROWTH, order=3, icon="💵"),
    TaskCategory(id="growth-systems", name="Systems & Automation", stage=GROWTH, order=4, icon="🤖"),
    TaskCategory(id="growth-network", name="Network & Partnerships", stage=GROWTH, order=5, icon="🌍"),
)


SEED_TASKS: tuple[SeedTask, ...] = (
    # Idea: Business Identity
    SeedTask(
        title="Create Mission Statement",
        stage=IDEA,
        category="idea-identity",
        priority=CRITICAL,
        order=1,
        ai_suggestion="A strong mission statement answers: What do you do? Who do you serve? Why does it matter?",
    ),
    SeedTask(
        title="Define Vision Statement",
        stage=IDEA,
        category="idea-identity",
        priority=CRITICAL,
        order=2,
        ai_suggestion="Where do you see this business in 5 years? Paint the future you're building toward.",
    ),
    SeedTask(title="Identify Core Values", stage=IDEA, category="idea-identity", priority=HIGH, order=3),
    SeedTask(title="Choose Business Name", stage=IDEA, category="idea-identity", priority=CRITICAL, order=4),
    SeedTask(title="Write Elevator Pitch", stage=IDEA, category="idea-identity", priority=HIGH, order=5),
    # Idea: Market Research
    SeedTask(
        title="Identify Target Customer",
        stage=IDEA,
        category="idea-research",
        priority=CRITICAL,
        order=1,
        ai_suggestion="Be specific: age, income, location, pain points, where they hang out online.",
    ),
    SeedTask(title="Analyze Competitors", stage=IDEA, category="idea-research", priority=HIGH, order=2),
    SeedTask(title="Validate Problem-Solution Fit", stage=IDEA, category="idea-research", priority=CRITICAL, order=3),
    SeedTask(
        title="Estimate Market Size (TAM/SAM/SOM)", stage=IDEA, category="idea-research", priority=MEDIUM, order=4
    ),
    SeedTask(
        title="Talk to 10 Potential Customers",
        stage=IDEA,
        category="idea-research",
        priority=CRITICAL,
        order=5,
        ai_suggestion="Nothing replaces real conversations. Ask open-ended questions, listen more than talk.",
    ),
    # Idea: Business Planning
    SeedTask(title="Write One-Page Business Plan", stage=IDEA, category="idea-planning", priority=HIGH, order=1),
    SeedTask(title="Define Revenue Model", stage=IDEA, category="idea-planning", priority=CRITICAL, order=2),
    SeedTask(title="Set 90-Day Goals", stage=IDEA, category="idea-planning", priority=HIGH, order=3),
    SeedTask(title="Identify Key Milestones", stage=IDEA, category="idea-planning", priority=MEDIUM, order=4),
    # Idea: Financial Planning
    SeedTask(title="Calculate Startup Costs", stage=IDEA, category="idea-finance", priority=HIGH, order=1),
    SeedTask(title="Set Pricing Strategy", stage=IDEA, category="idea-finance", priority=HIGH, order=2),
    SeedTask(title="Open Business Bank Account", stage=IDEA, category="idea-finance", priority=MEDIUM, order=3),
    SeedTask(title="Create Budget Forecast (6 months)", stage=IDEA, category="idea-finance", priority=MEDIUM, order=4),
    # Idea: Legal Foundation
    SeedTask(
        title="Choose Business Structure (LLC/Corp/Sole Prop)",
        stage=IDEA,
        category="idea-legal",
        priority=HIGH,
        order=1,
    ),
    SeedTask(title="Register Business Name", stage=IDEA, category="idea-legal", priority=HIGH, order=2),
    SeedTask(title="Get EIN (Tax ID)", stage=IDEA, category="idea-legal", priority=HIGH, order=3),
    SeedTask(title="Research Required Licenses/Permits", stage=IDEA, category="idea-legal", priority=MEDIUM, order=4),
    # Launch: Brand & Marketing
    SeedTask(title="Design Logo", stage=LAUNCH, category="launch-brand", priority=HIGH, order=1),
    SeedTask(title="Create Brand Style Guide", stage=LAUNCH, category="launch-brand", priority=MEDIUM, order=2),
    SeedTask(title="Write Brand Story", stage=LAUNCH, category="launch-brand", priority=MEDIUM, order=3),
    SeedTask(title="Plan Launch Marketing Campaign", stage=LAUNCH, category="launch-brand", priority=HIGH, order=4),
    SeedTask(title="Set Up Social Media Accounts", stage=LAUNCH, category="launch-brand", priority=HIGH, order=5),
    # Launch: Digital Presence
    SeedTask(title="Register Domain Name", stage=LAUNCH, category="launch-digital", priority=CRITICAL, order=1),
    SeedTask(title="Build Website (MVP)", stage=LAUNCH, category="launch-digital", priority=CRITICAL, order=2),
    SeedTask(title="Set Up Business Email", stage=LAUNCH, category="launch-digital", priority=HIGH, order=3),
    SeedTask(title="Set Up Google Business Profile", stage=LAUNCH, category="launch-digital", priority=HIGH, order=4),
    SeedTask(title="Implement Basic SEO", stage=LAUNCH, category="launch-digital", priority=MEDIUM, order=5),
    # Launch: Operations Setup
    SeedTask(title="Set Up Accounting System", stage=LAUNCH, category="launch-ops", priority=HIGH, order=1),
    SeedTask(
        title="Create Standard Operating Procedures", stage=LAUNCH, category="launch-ops", priority=MEDIUM, order=2
    ),
    SeedTask(
        title="Set Up Customer Communication Tools", stage=LAUNCH, category="launch-ops", priority=HIGH, order=3
    ),
    SeedTask(title="Choose Payment Processing", stage=LAUNCH, category="launch-ops", priority=CRITICAL, order=4),
    # Launch: Product/Service Ready
    SeedTask(
        title="Finalize Product/Service Offering", stage=LAUNCH, category="launch-product", priority=CRITICAL, order=1
    ),
    SeedTask(title="Create Sales Materials", stage=LAUNCH, category="launch-product", priority=HIGH, order=2),
    SeedTask(title="Set Up Fulfillment Process", stage=LAUNCH, category="launch-product", priority=HIGH, order=3),
    SeedTask(
        title="Get Beta Customers (3-5)",
        stage=LAUNCH,
        category="launch-product",
        priority=CRITICAL,
        order=4,
        ai_suggestion="Beta customers validate your offering AND become your first testimonials.",
    ),
    # Launch: Sales Pipeline
    SeedTask(title="Define Sales Process", stage=LAUNCH, category="launch-sales", priority=HIGH, order=1),
    SeedTask(title="Create Lead Generation Strategy", stage=LAUNCH, category="launch-sales", priority=HIGH, order=2),
    SeedTask(title="Set Up CRM", stage=LAUNCH, category="launch-sales", priority=MEDIUM, order=3),
    SeedTask(title="Make First 10 Sales", stage=LAUNCH, category="launch-sales", priority=CRITICAL, order=4),
    # Growth: Scaling Operations
    SeedTask(title="Document All Key Processes", stage=GROWTH, category="growth-scale", priority=HIGH, order=1),
    SeedTask(title="Identify Bottlenecks", stage=GROWTH, category="growth-scale", priority=CRITICAL, order=2),
    SeedTask(title="Set Up Quality Metrics", stage=GROWTH, category="growth-scale", priority=HIGH, order=3),
    SeedTask(title="Plan for 10x Volume", stage=GROWTH, category="growth-scale", priority=MEDIUM, order=4),
    # Growth: Team Building
    SeedTask(title="Define First Hire Role", stage=GROWTH, category="growth-team", priority=HIGH, order=1),
    SeedTask(title="Create Hiring Process", stage=GROWTH, category="growth-team", priority=MEDIUM, order=2),
    SeedTask(title="Build Company Culture Doc", stage=GROWTH, category="growth-team", priority=MEDIUM, order=3),
    SeedTask(title="Set Up Onboarding Playbook", stage=GROWTH, category="growth-team", priority=MEDIUM, order=4),
    # Growth: Revenue Optimization
    SeedTask(title="Analyze Unit Economics", stage=GROWTH, category="growth-revenue", priority=CRITICAL, order=1),
    SeedTask(
        title="Identify Upsell/Cross-sell Paths", stage=GROWTH, category="growth-revenue", priority=HIGH, order=2
    ),
    SeedTask(title="Build Retention Strategy", stage=GROWTH, category="growth-revenue", priority=HIGH, order=3),
    SeedTask(title="Set Revenue Targets (Monthly)", stage=GROWTH, category="growth-revenue", priority=HIGH, order=4),
    # Growth: Systems & Automation
    SeedTask(title="Automate Repetitive Tasks", stage=GROWTH, category="growth-systems", priority=HIGH, order=1),
    SeedTask(title="Set Up Analytics Dashboard", stage=GROWTH, category="growth-systems", priority=MEDIUM, order=2),
    SeedTask(
        title="Implement Customer Feedback Loop", stage=GROWTH, category="growth-systems", priority=HIGH, order=3
    ),
    SeedTask(title="Plan Tech Stack for Scale", stage=GROWTH, category="growth-systems", priority=MEDIUM, order=4),
    # Growth: Network & Partnerships
    SeedTask(title="Identify Strategic Partners", stage=GROWTH, category="growth-network", priority=HIGH, order=1),
    SeedTask(title="Join Industry Communities", stage=GROWTH, category="growth-network", priority=MEDIUM, order=2),
    SeedTask(title="Build Referral Program", stage=GROWTH, category="growth-network", priority=HIGH, order=3),
    SeedTask(title="Attend/Host 1 Industry Event", stage=GROWTH, category="growth-network", priority=MEDIUM, order=4),
)


def default_categories() -> list[TaskCategory]:
    """Fresh copies of the default category catalog."""
    return [category.model_copy() for category in DEFAULT_CATEGORIES]


def instantiate_seed_tasks(*, business_id: str, now: datetime) -> list[Task]:
    """Create pending template tasks for a business from the seed catalog."""
    return [
        Task(
            id=str(uuid.uuid4()),
            title=seed.title,
            business_id=business_id,
            stage=seed.stage,
            category=seed.category,
            status=TaskStatus.PENDING,
            priority=seed.priority,
            source=TaskSource.TEMPLATE,
            order=seed.order,
            ai_suggestion=seed.ai_suggestion,
            created_at=now,
            updated_at=now,
        )
        for seed in SEED_TASKS
    ]
