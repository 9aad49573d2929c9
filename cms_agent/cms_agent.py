# =============================================================================
# cms_agent/cms_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the content assistant: a Google ADK Agent whose reasoning engine
#   is any LiteLlm-supported model and whose only tools are the ones served
#   by cms_tools/mcp_server.py.
#
# CONNECTION HANDLING:
#   The CMS URL and bearer token are collected once, before the session
#   starts, and stored in session state.  inject_connection() runs before
#   every tool call and writes them into the call's arguments, so the model
#   never asks for them and never sees the token.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess ("uv run python -m
#   cms_tools.mcp_server") and talks to it over stdin/stdout.
#
# MODEL:
#   CMS_AGENT_MODEL picks the LiteLlm model string
#   (default "openrouter/openai/gpt-4o").  LiteLlm reads the provider key,
#   e.g. OPENROUTER_API_KEY, from the environment.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from cms_agent.prompt import CMS_ASSISTANT_PROMPT

DEFAULT_MODEL = "openrouter/openai/gpt-4o"

# tool argument -> session state key
CONNECTION_STATE_KEYS = {
    "cms_url": "cms_url",
    "auth_token": "cms_auth_token",
}

_SECRET_ARGS = {"auth_token"}


def connection_state(cms_url: str, auth_token: str | None = None) -> dict[str, str]:
    """Build the initial session state for one CMS instance.

    Raises:
        ValueError: cms_url is empty.
    """
    cms_url = (cms_url or "").strip()
    if not cms_url:
        raise ValueError("A CMS URL is required to start the assistant")
    return {
        CONNECTION_STATE_KEYS["cms_url"]: cms_url,
        CONNECTION_STATE_KEYS["auth_token"]: (auth_token or "").strip(),
    }


def inject_connection(tool, args: dict, tool_context):
    """before_tool_callback: overwrite connection arguments from session state.

    Returning None lets ADK run the tool with the (mutated) args.
    """
    for arg, key in CONNECTION_STATE_KEYS.items():
        # An empty token means anonymous access; the adapters treat "" as absent.
        args[arg] = tool_context.state.get(key) or ""
    return None


def describe_tool_call(name: str, args: dict) -> str:
    """One console line for a tool call, with secrets masked."""
    args = dict(args or {})
    operation = args.pop("operation", None)
    details = ", ".join(
        f"{key}={'***' if key in _SECRET_ARGS else value!r}"
        for key, value in args.items()
        if value not in (None, "")
    )
    label = f"{name} [{operation}]" if operation else name
    return f"{label}({details})"


def create_agent() -> Agent:
    """Create and configure the CMS content assistant.

    Returns:
        A configured Google ADK Agent instance.
    """
    # The server module is run from the project root so that cms_core and
    # cms_tools resolve inside the project's virtualenv.
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "cms_tools.mcp_server"],
            cwd=project_root,
        ),
    )

    model_name = os.environ.get("CMS_AGENT_MODEL", DEFAULT_MODEL)

    return Agent(
        name="cms_content_assistant",
        model=LiteLlm(model=model_name),
        instruction=CMS_ASSISTANT_PROMPT,
        tools=[mcp_tools],
        before_tool_callback=inject_connection,
    )
