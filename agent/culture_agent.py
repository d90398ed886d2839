# =============================================================================
# agent/culture_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the "Turkish Culture Expert" ADK agent: a LiteLlm-backed model,
#   the system prompt from agent/prompt.py, and the FastMCP tool server from
#   tools/mcp_server.py.
#
#   ┌──────────────────────────────┐        ┌─────────────────────────┐
#   │  Google ADK Agent            │  MCP   │  FastMCP Server         │
#   │  prompt + LiteLlm model      │───────▶│  (tools/mcp_server.py)  │
#   └──────────────────────────────┘ stdio  │  analyzeTurkishWord ... │
#                                           └────────────┬────────────┘
#                                                        ▼
#                                           ┌─────────────────────────┐
#                                           │  core/ orchestrators    │
#                                           └─────────────────────────┘
#
# MODEL CHOICE:
#   Any LiteLLM model string works (AGENT_MODEL).  The default,
#   "gemini/gemini-2.0-flash", reads GEMINI_API_KEY from the environment;
#   "openrouter/openai/gpt-4o" would read OPENROUTER_API_KEY instead.
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess with the current interpreter
#   and talks to it over stdin/stdout.  The subprocess inherits our
#   environment, so provider keys in .env reach the tools too.
# =============================================================================

import os
import sys
from typing import Optional

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from google.adk.tools.mcp_tool.mcp_session_manager import StdioConnectionParams
from mcp import StdioServerParameters

from agent.prompt import get_turkish_culture_prompt
from core.config import Settings

AGENT_NAME = "turkish_culture_expert"
AGENT_DISPLAY_NAME = "Turkish Culture Expert"
AGENT_DESCRIPTION = (
    "Türk dili, kültürü ve gelenekleri uzmanı: kelime analizi, çeviri, "
    "etimoloji ve kültürel bağlam"
)


def create_mcp_toolset(timeout: float = 60.0) -> MCPToolset:
    """Connection to tools/mcp_server.py over stdio."""
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    mcp_server_path = os.path.join(project_root, "tools", "mcp_server.py")

    return MCPToolset(
        connection_params=StdioConnectionParams(
            server_params=StdioServerParameters(
                command=sys.executable,
                args=[mcp_server_path],
                cwd=project_root,
            ),
            timeout=timeout,
        ),
    )


def create_agent(settings: Optional[Settings] = None) -> Agent:
    """Create the Turkish culture agent.

    The agent has no domain logic of its own: the prompt says which tool to
    call, the tools do the work, the model phrases the answer.
    """
    settings = settings or Settings.from_env()
    return Agent(
        name=AGENT_NAME,
        model=LiteLlm(model=settings.agent_model),
        description=AGENT_DESCRIPTION,
        instruction=get_turkish_culture_prompt(),
        tools=[create_mcp_toolset()],
    )
