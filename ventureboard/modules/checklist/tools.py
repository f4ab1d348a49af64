"""Checklist tool for ventureboard agents."""

import logging

import logfire
from pydantic_ai import Agent, RunContext

from ventureboard.agents.base import Deps
from ventureboard.modules.checklist.facade import ChecklistCommand


logger = logging.getLogger(__name__)


async def tool_checklist(ctx: RunContext[Deps], params: ChecklistCommand) -> str:
    """
    Run a business checklist command.

    Shows progress, health and next tasks per business, records completions,
    adds tasks and businesses, and builds the daily stand-up.

    Args:
        ctx: Agent runtime context with dependencies
        params: Checklist command parameters

    Returns:
        Command result or error message
    """
    with logfire.span("tool_checklist", action=params.action, operator_id=ctx.deps.operator_id):
        logger.info("Checklist tool invoked", extra={"action": params.action})
        return ctx.deps.checklist.execute(params)


def register_tools(agent: Agent[Deps, str]) -> None:
    """Register checklist tools with agent."""
    agent.tool(tool_checklist)
