# =============================================================================
# agent/gateway.py  -  One-shot access to the ADK agent
# =============================================================================
#
# The HTTP boundary (tools/http_app.py) needs "messages in, text out".
# AgentGateway wraps the ADK Runner to provide exactly that:
#
#   text = await gateway.generate([{"role": "user", "content": "çay nedir?"}])
#
# Each call gets a fresh in-memory session, so remote callers never see
# each other's history.  The agent (and its MCP subprocess) is created on
# first use and reused afterwards.
# =============================================================================

import logging
import uuid
from typing import Optional

from google.adk.agents import Agent
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.culture_agent import AGENT_DESCRIPTION, AGENT_DISPLAY_NAME, create_agent
from core.errors import AgentError

logger = logging.getLogger(__name__)

APP_NAME = "turkish_culture"


def last_user_text(messages: list[dict]) -> str:
    for message in reversed(messages):
        if message.get("role", "user") == "user" and str(message.get("content", "")).strip():
            return str(message["content"]).strip()
    raise AgentError("no user message to answer")


class AgentGateway:
    name = AGENT_DISPLAY_NAME
    description = AGENT_DESCRIPTION

    def __init__(self, agent: Optional[Agent] = None):
        self._agent = agent
        self._runner: Optional[Runner] = None
        self._session_service = InMemorySessionService()

    def _get_runner(self) -> Runner:
        if self._runner is None:
            self._runner = Runner(
                agent=self._agent or create_agent(),
                app_name=APP_NAME,
                session_service=self._session_service,
            )
        return self._runner

    async def generate(self, messages: list[dict]) -> str:
        """Run the agent on the latest user message and return its final text."""
        prompt = last_user_text(messages)
        user_id = f"remote_{uuid.uuid4().hex[:12]}"

        try:
            runner = self._get_runner()
            session = await self._session_service.create_session(app_name=APP_NAME, user_id=user_id)
            final_response = ""
            async for event in runner.run_async(
                user_id=user_id,
                session_id=session.id,
                new_message=types.Content(role="user", parts=[types.Part(text=prompt)]),
            ):
                if event.content and event.content.parts:
                    for part in event.content.parts:
                        if part.text:
                            final_response = part.text
                        if part.function_call:
                            logger.info("agent called tool %s", part.function_call.name)
        except AgentError:
            raise
        except Exception as exc:
            logger.exception("agent run failed")
            raise AgentError(f"agent run failed: {exc}") from exc

        if not final_response:
            raise AgentError("agent produced no response")
        return final_response
