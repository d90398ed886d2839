# =============================================================================
# tools/http_app.py  -  HTTP boundary for remote clients
# =============================================================================
#
# Routes:
#   GET  /health                       liveness probe -> {"status": "ok"}
#   GET  /api/agents                   {agentId: {name, description, tools}}
#   POST /api/agents/{agent_id}/generate
#        body {"messages": [{"role": "user", "content": "..."}]}
#        -> {"text": "..."}
#   POST /api/tools/{name}             body = tool arguments -> tool result
#
# Failures are JSON {"error": message}:
#   400 malformed body / invalid tool arguments
#   404 unknown agent or tool
#   502 the agent runtime failed
# =============================================================================

import json
import logging
from typing import Awaitable, Optional, Protocol

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from core.errors import AgentError, ToolInputError
from tools.registry import TOOLS, ToolContext, invoke_tool

logger = logging.getLogger(__name__)

AGENT_ID = "turkishCultureAgent"


class Gateway(Protocol):
    name: str
    description: str

    def generate(self, messages: list[dict]) -> Awaitable[str]: ...


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


async def _json_body(request: Request):
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ToolInputError(f"Invalid request body: {exc}") from exc


def _validate_messages(body) -> list[dict]:
    if not isinstance(body, dict) or not isinstance(body.get("messages"), list):
        raise ToolInputError("body must be an object with a 'messages' list")
    messages = body["messages"]
    for message in messages:
        if not isinstance(message, dict) or not isinstance(message.get("content"), str):
            raise ToolInputError("each message needs a string 'content'")
    if not any(m.get("role", "user") == "user" and m["content"].strip() for m in messages):
        raise ToolInputError("no user message to answer")
    return messages


def create_app(gateway: Gateway, context: Optional[ToolContext] = None) -> Starlette:
    """Build the Starlette app around one agent gateway and one tool context."""
    context = context or ToolContext.from_settings()
    agents = {
        AGENT_ID: {
            "name": gateway.name,
            "description": gateway.description,
            "tools": sorted(TOOLS),
        }
    }

    async def health(request: Request) -> Response:
        return JSONResponse({"status": "ok"})

    async def list_agents(request: Request) -> Response:
        return JSONResponse(agents)

    async def generate(request: Request) -> Response:
        agent_id = request.path_params["agent_id"]
        if agent_id not in agents:
            return _error(f"Agent '{agent_id}' not found", 404)
        try:
            messages = _validate_messages(await _json_body(request))
        except ToolInputError as exc:
            return _error(str(exc), 400)

        try:
            text = await gateway.generate(messages)
        except AgentError as exc:
            logger.error("agent %s failed: %s", agent_id, exc)
            return _error(str(exc), 502)
        return JSONResponse({"text": text})

    async def call_tool(request: Request) -> Response:
        name = request.path_params["name"]
        if name not in TOOLS:
            return _error(f"Tool '{name}' not found", 404)
        try:
            body = await _json_body(request) if await request.body() else {}
            result = await invoke_tool(name, body, context)
        except ToolInputError as exc:
            return _error(str(exc), 400)
        return JSONResponse(result)

    routes = [
        Route("/health", health, methods=["GET"]),
        Route("/api/agents", list_agents, methods=["GET"]),
        Route("/api/agents/{agent_id}/generate", generate, methods=["POST"]),
        Route("/api/tools/{name}", call_tool, methods=["POST"]),
    ]
    return Starlette(debug=False, routes=routes)
