# =============================================================================
# main.py  -  Entry Point for the Turkish Culture Agent
# =============================================================================
#
# HOW TO RUN:
#   python main.py            interactive chat in the terminal
#   python main.py serve      HTTP server for remote clients (port 4111)
#
# WHAT HAPPENS (chat):
#   1. Creates the Google ADK agent (agent/culture_agent.py)
#   2. Sets up a Runner and an in-memory session
#   3. Sends each line you type to the agent
#   4. Shows the tools it calls and its final answer
#
# WHAT HAPPENS (serve):
#   Builds the Starlette app from tools/http_app.py around an AgentGateway
#   and runs it with uvicorn.  GET /health answers as soon as it is up.
#
# ENVIRONMENT:
#   .env is loaded first: GEMINI_API_KEY (or the key of whatever AGENT_MODEL
#   names), DEEPL_API_KEY, OXFORD_APP_ID / OXFORD_APP_KEY, HOST, PORT,
#   LOG_LEVEL, USE_LIVE_PROVIDERS.
# =============================================================================

import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

# LiteLlm reads its API key from the environment when the agent is created.
load_dotenv()

from google.adk.runners import Runner  # noqa: E402
from google.adk.sessions import InMemorySessionService  # noqa: E402
from google.genai import types  # noqa: E402

from agent.culture_agent import create_agent  # noqa: E402
from core.config import Settings  # noqa: E402


async def run_agent():
    """Run the Turkish culture agent interactively."""
    print("=" * 70)
    print("  TURKISH CULTURE EXPERT")
    print("  Powered by Google ADK + LiteLLM + FastMCP")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name="turkish_culture",
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name="turkish_culture",
        user_id="demo_user",
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Bir kelime, deyim ya da kültürel kavram sorun.")
    print("   (Çıkmak için 'quit')\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 Siz: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Güle güle!")
            break

        if user_input.lower() in ("quit", "exit", "q", "çıkış"):
            print("\n👋 Güle güle!")
            break
        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\n🤖 Agent is thinking...\n")
        print("-" * 70)

        final_response = ""
        async for event in runner.run_async(
            user_id="demo_user",
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if part.text:
                        final_response = part.text
                    if part.function_call:
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Agent:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")
        print("\n" + "=" * 70)


def serve():
    """Serve the HTTP boundary with uvicorn."""
    import uvicorn

    from agent.gateway import AgentGateway
    from tools.http_app import create_app

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = Settings.from_env()
    app = create_app(AgentGateway())
    uvicorn.run(app, host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        serve()
    else:
        asyncio.run(run_agent())
