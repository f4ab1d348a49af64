"""Checklist module for staged business tracking."""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pydantic_ai import Agent

    from ventureboard.agents.base import Deps


class ChecklistModule:
    """Checklist module for multi-business operational tracking.

    Provides:
    - Seed catalog of stage checklists
    - Health scoring and attention signals per business
    - Next-task selection within and across businesses
    - Daily stand-up generation
    - Command facade and agent tool
    """

    @property
    def name(self) -> str:
        """Module name (unique identifier)."""
        return "checklist"

    @property
    def description(self) -> str:
        """Module description (human-readable)."""
        return "Staged business checklists with health scoring and next-task selection"

    def register_tools(self, agent: "Agent[Deps, str]") -> None:
        """Register tools with the agent instance."""
        import ventureboard.modules.checklist.tools

        ventureboard.modules.checklist.tools.register_tools(agent)

    def get_system_prompt_section(self) -> str:
        """Return the system prompt section for this module."""
        import ventureboard.modules.checklist.prompt

        return ventureboard.modules.checklist.prompt.CHECKLIST_PROMPT_SECTION
