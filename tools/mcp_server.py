# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (all six tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the Turkish culture tools over MCP.  Each tool is a thin
#   wrapper: it logs the call, hands the arguments to
#   tools.registry.invoke_tool(), and logs the answer.
#
# HOW IT WORKS (the flow):
#   1. The ADK agent decides it needs information (e.g. a word's etymology)
#   2. It calls a tool by name via MCP (e.g. "getEtymology")
#   3. FastMCP routes the call to the decorated function below
#   4. invoke_tool() validates the arguments and runs the core/ orchestrator
#   5. The agent receives the result dict
#
# TOOL NAMES:
#   camelCase wire names (analyzeTurkishWord, translateText, ...) are kept
#   stable because the agent prompt and the mobile client refer to them.
#
# ERRORS:
#   Bad arguments come back as {"error": ...} instead of an exception, so
#   the agent can read the message and retry with better input.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m tools.mcp_server
#     b) Spawned by the ADK agent over stdio (agent/culture_agent.py)
# =============================================================================

import json
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

# Running as a script (`python tools/mcp_server.py`) puts tools/ on sys.path
# instead of the project root.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.errors import ToolInputError  # noqa: E402
from tools.registry import ToolContext, invoke_tool  # noqa: E402

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP transport, so every log line goes to STDERR.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for response JSON
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"

load_dotenv()

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: dict) -> dict:
    """Log the tool response as compact JSON in GREEN, then return it."""
    logging.info(
        f"{_GREEN}  ← {tool_name} response: "
        f"{json.dumps(result, ensure_ascii=False, separators=(',', ':'))}{_RESET}"
    )
    return result


# =============================================================================
# Server instance and its tool context
# =============================================================================
mcp = FastMCP("turkish-culture-mcp")

_context: Optional[ToolContext] = None


def get_context() -> ToolContext:
    """The server's ToolContext, built on first use (one selector per server)."""
    global _context
    if _context is None:
        _context = ToolContext.from_settings()
    return _context


async def _call(tool_name: str, **args) -> dict:
    _log_request(tool_name, **args)
    try:
        result = await invoke_tool(tool_name, args, get_context())
    except ToolInputError as exc:
        _log_status(f"rejected: {exc}")
        return _log_response(tool_name, {"error": str(exc)})
    if "dataSource" in result:
        _log_status(f"dataSource: {result['dataSource']}")
    return _log_response(tool_name, result)


# =============================================================================
# TOOL 1: analyzeTurkishWord
# =============================================================================
@mcp.tool(name="analyzeTurkishWord")
async def analyze_turkish_word(
    word: str,
    includeEtymology: bool = True,
    includeCulturalContext: bool = True,
) -> dict:
    """Analyze a Turkish word using the national dictionary (TDK), the
    Nisanyan etymology dictionary and the Oxford dictionary.

    WHEN TO CALL THIS: the user asks what a Turkish word means, how it is
    used, or wants a general analysis of it.

    Args:
        word: The Turkish word to analyze (e.g. "misafir").
        includeEtymology: Also consult the etymology sources.
        includeCulturalContext: Attach the cultural note when one exists.

    Returns:
        A dict with tdkData (meanings, compounds, proverbs, regional words,
        science terms, ...), nisanyanData, oxfordDefinitions,
        culturalContext, examples, relatedConcepts and dataSource.
        tdkData.available is false when the dictionary could not be reached.
    """
    return await _call(
        "analyzeTurkishWord",
        word=word,
        includeEtymology=includeEtymology,
        includeCulturalContext=includeCulturalContext,
    )


# =============================================================================
# TOOL 2: translateText
# =============================================================================
@mcp.tool(name="translateText")
async def translate_text(
    text: str,
    sourceLang: str,
    targetLang: str,
    preserveCulturalContext: bool = True,
) -> dict:
    """Translate text between Turkish ("tr") and English ("en").

    Uses DeepL when configured, otherwise a small phrase dictionary.
    translationFound is false when neither could translate the text; the
    translatedText then wraps the original in a "[Çeviri bulunamadı: ...]"
    marker.  culturalNotes explain idioms found in the source text.
    """
    return await _call(
        "translateText",
        text=text,
        sourceLang=sourceLang,
        targetLang=targetLang,
        preserveCulturalContext=preserveCulturalContext,
    )


# =============================================================================
# TOOL 3: getEtymology
# =============================================================================
@mcp.tool(name="getEtymology")
async def get_etymology(
    word: str,
    includeRelatedLanguages: bool = False,
    showEtymologyTree: bool = True,
) -> dict:
    """Origin and historical development of a Turkish word.

    Consults the Nisanyan CLI (plain and tree views), the Nisanyan web API
    and TDK concurrently.  dataSource is "Veri bulunamadı" when no source
    knows the word.
    """
    return await _call(
        "getEtymology",
        word=word,
        includeRelatedLanguages=includeRelatedLanguages,
        showEtymologyTree=showEtymologyTree,
    )


# =============================================================================
# TOOL 4: getCulturalContext
# =============================================================================
@mcp.tool(name="getCulturalContext")
async def get_cultural_context(
    concept: str,
    includeRegionalVariations: bool = False,
    includeHistoricalContext: bool = False,
) -> dict:
    """Cultural significance, practices and social role of a Turkish
    concept (e.g. "misafirperverlik", "çay kültürü").  found is false for
    unknown concepts.
    """
    return await _call(
        "getCulturalContext",
        concept=concept,
        includeRegionalVariations=includeRegionalVariations,
        includeHistoricalContext=includeHistoricalContext,
    )


# =============================================================================
# TOOL 5: getTurkishCultureInfo
# =============================================================================
@mcp.tool(name="getTurkishCultureInfo")
async def get_turkish_culture_info(topic: str, detailLevel: str = "basic") -> dict:
    """General information about a Turkish culture topic.

    Args:
        topic: One of gelenekler, değerler, aile_yapısı, sosyal_ilişkiler,
               yemek_kültürü, müzik_dans, sanat_edebiyat, din_inanç,
               eğitim, iş_yaşamı.
        detailLevel: basic (at most two examples), detailed or comprehensive.
    """
    return await _call("getTurkishCultureInfo", topic=topic, detailLevel=detailLevel)


# =============================================================================
# TOOL 6: analyzeRandomWord
# =============================================================================
@mcp.tool(name="analyzeRandomWord")
async def analyze_random_word() -> dict:
    """Pick a random Turkish word (avoiding recent repeats) and analyze it."""
    return await _call("analyzeRandomWord")


if __name__ == "__main__":
    mcp.run()
