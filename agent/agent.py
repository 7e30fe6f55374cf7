"""
Pydantic AI Agent configuration.

Builds the agent and registers the context management tools it can call.
"""

import logging

from pydantic_ai import Agent, RunContext, Tool
from pydantic_ai.models.anthropic import AnthropicModel, AnthropicModelSettings
from pydantic_ai.providers.anthropic import AnthropicProvider

from config import DEFAULT_MODEL, get_config
from .tools.release import RELEASE_CONTEXT_DESCRIPTION, SessionDeps
from .tools.release import release_context as release_context_impl

logger = logging.getLogger(__name__)

# Constants
MAX_OUTPUT_TOKENS = 64000  # Max output tokens for Claude models
RELEASE_CONTEXT_TOOL_NAME = "release_context"


SYSTEM_INSTRUCTIONS = """You are a helpful coding assistant.

Tool outputs stay in the conversation and count against your context window.
When earlier outputs (file reads, command output, search results) are no
longer needed verbatim, release them with the release_context tool. Every
tool result carries its tool call ID; use those IDs to release specific calls.

Be concise but thorough.
"""


def get_anthropic_model_settings() -> AnthropicModelSettings:
    """Get Anthropic model settings for the agent."""
    settings: AnthropicModelSettings = {
        'max_tokens': MAX_OUTPUT_TOKENS,
    }
    return settings


async def _release_context_tool(
    ctx: RunContext[SessionDeps],
    toolCallIds: list[str] | None = None,
    count: int | None = None,
    tools: list[str] | None = None,
) -> str:
    """Release the output of earlier tool calls to free up context.

    Args:
        toolCallIds: Tool call IDs to release. If omitted, recent tool calls are auto-detected.
        count: Number of recent tool calls to release when toolCallIds is omitted (default 3)
        tools: Only auto-release calls from these tools, e.g. ['read', 'grep']
    """
    return await release_context_impl(
        ctx.deps.session_id,
        tool_call_ids=toolCallIds,
        count=count,
        tools=tools,
        event_bus=ctx.deps.event_bus,
    )


def create_agent(
    model_id: str | None = None,
    api_key: str | None = None,
) -> Agent:
    """
    Create an agent with the context release tool.

    Runs must pass `deps=SessionDeps(session_id)` so the tool releases
    calls from the conversation the agent is running in.

    Args:
        model_id: Anthropic model identifier (defaults to config, then DEFAULT_MODEL)
        api_key: Optional API key (defaults to ANTHROPIC_API_KEY env var)

    Returns:
        Configured Pydantic AI Agent
    """
    config = get_config()
    model_id = model_id or config.model or DEFAULT_MODEL

    if api_key:
        model = AnthropicModel(model_id, provider=AnthropicProvider(api_key=api_key))
    else:
        model = f"anthropic:{model_id}"

    tools = []
    if config.tools.release_context:
        tools.append(
            Tool(
                _release_context_tool,
                takes_ctx=True,
                name=RELEASE_CONTEXT_TOOL_NAME,
                description=RELEASE_CONTEXT_DESCRIPTION,
            )
        )

    agent = Agent(
        model,
        system_prompt=SYSTEM_INSTRUCTIONS,
        deps_type=SessionDeps,
        model_settings=get_anthropic_model_settings(),
        tools=tools,
    )

    logger.debug("Created agent for model %s with %d tool(s)", model_id, len(tools))
    return agent
