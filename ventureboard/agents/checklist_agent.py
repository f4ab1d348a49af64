"""Pydantic AI agent for operating the business checklists."""

import logging

from pydantic_ai import Agent, RunContext
from pydantic_ai.models import Model
from pydantic_ai.models.openrouter import OpenRouterModel
from pydantic_ai.providers.openrouter import OpenRouterProvider

from ventureboard.agents.base import Deps
from ventureboard.core.config import settings
from ventureboard.core.errors import classify_error_with_response
from ventureboard.core.logging import span
from ventureboard.modules.checklist import ChecklistModule


logger = logging.getLogger(__name__)

MODULES = (ChecklistModule(),)


class _AgentState:
    """Singleton state for agent instance."""

    instance: Agent[Deps, str] | None = None


def build_system_prompt(deps: Deps) -> str:
    """Build the system prompt from the base section and each module's section.

    Args:
        deps: Run dependencies; supplies the operator and current time

    Returns:
        Complete system prompt as a string
    """
    base_prompt = f"""You are ventureboard, an operations assistant for an operator running several businesses. Your role is strictly functional.

CORE DIRECTIVES:
1. Be concise. Report what the checklist tool returns; never invent progress or health figures.
2. Reference tasks by ID when confirming a change.
3. If a business name is ambiguous, ask which one and list the options.

CURRENT CONTEXT:
- Operator: {deps.operator_id}
- Time: {deps.current_time.isoformat()}
"""

    sections = [module.get_system_prompt_section() for module in MODULES]
    return "\n".join([base_prompt, *(section for section in sections if section)])


def _default_model() -> Model:
    api_key = settings.require_credential("openrouter_api_key", "OpenRouter API key")
    return OpenRouterModel(model_name=settings.model_id, provider=OpenRouterProvider(api_key=api_key))


def build_agent(model: Model | None = None) -> Agent[Deps, str]:
    """Create an agent with every module's tools and the dynamic system prompt.

    Args:
        model: Model to run against (default: OpenRouter with settings.model_id)

    Raises:
        ValueError: If no model is given and OPENROUTER_API_KEY is not set
    """
    agent: Agent[Deps, str] = Agent(model=model or _default_model(), deps_type=Deps)
    for module in MODULES:
        module.register_tools(agent)

    @agent.instructions
    def _instructions(ctx: RunContext[Deps]) -> str:
        return build_system_prompt(ctx.deps)

    return agent


def get_agent() -> Agent[Deps, str]:
    """Get or create the default agent instance."""
    if _AgentState.instance is None:
        _AgentState.instance = build_agent()
    return _AgentState.instance


async def run_agent(*, user_message: str, deps: Deps) -> str:
    """Run the agent on one operator message.

    Args:
        user_message: The message from the operator
        deps: The injected dependencies (checklist facade, operator, current time)

    Returns:
        The agent's response, or a rendered error message if the run failed
    """
    try:
        agent = get_agent()
        with span("checklist_agent.run", operator_id=deps.operator_id):
            logger.info("checklist_agent_run", extra={"operator_id": deps.operator_id})
            result = await agent.run(user_message, deps=deps)
        return result.output
    except Exception as e:
        logger.error("Agent execution failed", extra={"error": str(e), "type": type(e).__name__})
        response = classify_error_with_response(e)
        return f"❌ {response.message}\n{response.suggestion}"
