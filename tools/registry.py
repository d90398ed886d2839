# =============================================================================
# tools/registry.py  -  Tool table and dispatcher (the serving boundary)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Knows every tool by its stable wire name, validates the caller's
#   arguments against a small declarative schema, and dispatches to the
#   matching core/ orchestrator.  The MCP server and the HTTP app both go
#   through invoke_tool(), so validation lives in exactly one place.
#
# ARGUMENT SCHEMA:
#   Each ToolSpec lists its arguments as ArgSpec(name, type, required,
#   default, choices).  Unknown names, missing required arguments, wrong
#   types and values outside `choices` raise ToolInputError.  Extra,
#   undeclared arguments are ignored.
#
# TOOL CONTEXT:
#   ToolContext carries the ProviderSet, the KnowledgeStore and the single
#   RandomTermSelector of this server instance.
# =============================================================================

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Union

from core.config import Settings
from core.culture import DETAIL_LEVELS, get_cultural_context, get_culture_info
from core.errors import ToolInputError
from core.etymology import get_etymology
from core.knowledge import CULTURE_TOPICS, KnowledgeStore, default_store
from core.providers import ProviderSet
from core.random_word import analyze_random_word
from core.selector import RandomTermSelector
from core.translation import translate_text
from core.word_analysis import analyze_word

logger = logging.getLogger(__name__)

LANGUAGES = ("tr", "en")


@dataclass
class ToolContext:
    providers: ProviderSet
    store: KnowledgeStore
    selector: RandomTermSelector

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ToolContext":
        settings = settings or Settings.from_env()
        return cls(
            providers=ProviderSet.default(settings),
            store=default_store(),
            selector=RandomTermSelector(),
        )


@dataclass(frozen=True)
class ArgSpec:
    name: str
    type: type
    required: bool = False
    default: Any = None
    choices: Optional[tuple] = None


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    handler: Callable[[dict, ToolContext], Union[Awaitable[Any], Any]]
    args: tuple[ArgSpec, ...] = field(default_factory=tuple)


TOOLS: dict[str, ToolSpec] = {
    spec.name: spec
    for spec in (
        ToolSpec(
            name="analyzeTurkishWord",
            description="Comprehensive analysis of a Turkish word: dictionary, etymology, English definitions, cultural context",
            handler=lambda a, ctx: analyze_word(
                a["word"],
                include_etymology=a["includeEtymology"],
                include_cultural_context=a["includeCulturalContext"],
                providers=ctx.providers,
                store=ctx.store,
            ),
            args=(
                ArgSpec("word", str, required=True),
                ArgSpec("includeEtymology", bool, default=True),
                ArgSpec("includeCulturalContext", bool, default=True),
            ),
        ),
        ToolSpec(
            name="translateText",
            description="Translate between Turkish and English, keeping cultural notes",
            handler=lambda a, ctx: translate_text(
                a["text"],
                a["sourceLang"],
                a["targetLang"],
                preserve_cultural_context=a["preserveCulturalContext"],
                providers=ctx.providers,
                store=ctx.store,
            ),
            args=(
                ArgSpec("text", str, required=True),
                ArgSpec("sourceLang", str, required=True, choices=LANGUAGES),
                ArgSpec("targetLang", str, required=True, choices=LANGUAGES),
                ArgSpec("preserveCulturalContext", bool, default=True),
            ),
        ),
        ToolSpec(
            name="getEtymology",
            description="Origin and historical development of a Turkish word",
            handler=lambda a, ctx: get_etymology(
                a["word"],
                include_related_languages=a["includeRelatedLanguages"],
                show_etymology_tree=a["showEtymologyTree"],
                providers=ctx.providers,
                store=ctx.store,
            ),
            args=(
                ArgSpec("word", str, required=True),
                ArgSpec("includeRelatedLanguages", bool, default=False),
                ArgSpec("showEtymologyTree", bool, default=True),
            ),
        ),
        ToolSpec(
            name="getCulturalContext",
            description="Cultural meaning and social importance of a Turkish concept",
            handler=lambda a, ctx: get_cultural_context(
                a["concept"],
                include_regional_variations=a["includeRegionalVariations"],
                include_historical_context=a["includeHistoricalContext"],
                store=ctx.store,
            ),
            args=(
                ArgSpec("concept", str, required=True),
                ArgSpec("includeRegionalVariations", bool, default=False),
                ArgSpec("includeHistoricalContext", bool, default=False),
            ),
        ),
        ToolSpec(
            name="getTurkishCultureInfo",
            description="General information about a Turkish culture topic",
            handler=lambda a, ctx: get_culture_info(
                a["topic"],
                detail_level=a["detailLevel"],
                store=ctx.store,
            ),
            args=(
                ArgSpec("topic", str, required=True, choices=CULTURE_TOPICS),
                ArgSpec("detailLevel", str, default="basic", choices=DETAIL_LEVELS),
            ),
        ),
        ToolSpec(
            name="analyzeRandomWord",
            description="Pick a random Turkish word, avoiding recent repeats, and analyze it",
            handler=lambda a, ctx: analyze_random_word(
                ctx.selector,
                providers=ctx.providers,
                store=ctx.store,
            ),
        ),
    )
}


def validate_args(spec: ToolSpec, args: Optional[dict]) -> dict:
    """Check `args` against the tool's schema and fill in defaults."""
    if args is None:
        args = {}
    if not isinstance(args, dict):
        raise ToolInputError(f"{spec.name}: arguments must be an object", tool=spec.name)

    clean = {}
    for arg in spec.args:
        value = args.get(arg.name)
        if value is None:
            if arg.required:
                raise ToolInputError(f"{spec.name}: missing required argument '{arg.name}'", tool=spec.name)
            clean[arg.name] = arg.default
            continue
        # bool is a subclass of int; keep them apart
        if not isinstance(value, arg.type) or (arg.type is not bool and isinstance(value, bool)):
            raise ToolInputError(
                f"{spec.name}: '{arg.name}' must be of type {arg.type.__name__}", tool=spec.name
            )
        if arg.type is str and arg.required and not value.strip():
            raise ToolInputError(f"{spec.name}: '{arg.name}' must not be empty", tool=spec.name)
        if arg.choices is not None and value not in arg.choices:
            raise ToolInputError(
                f"{spec.name}: '{arg.name}' must be one of {', '.join(arg.choices)}", tool=spec.name
            )
        clean[arg.name] = value
    return clean


async def invoke_tool(name: str, args: Optional[dict], context: ToolContext) -> dict:
    """Validate and run one tool, returning its result dict verbatim."""
    spec = TOOLS.get(name)
    if spec is None:
        raise ToolInputError(f"unknown tool '{name}'", tool=name)

    clean = validate_args(spec, args)
    logger.info("invoking %s(%s)", name, ", ".join(f"{k}={v!r}" for k, v in clean.items()))
    result = spec.handler(clean, context)
    if inspect.isawaitable(result):
        result = await result
    return result.to_dict()
