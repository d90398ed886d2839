# =============================================================================
# core/providers.py  -  Provider Adapters (one per external data source)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps every external source the tools consult behind the same contract:
#
#       async adapter(term, settings) -> ProviderResult
#
#   | adapter              | source                               | transport   |
#   |----------------------|--------------------------------------|-------------|
#   | lookup_dictionary    | TDK national dictionary              | HTTP GET    |
#   | etymology_plain      | Nisanyan CLI  `nis <w> --plain`      | subprocess  |
#   | etymology_tree       | Nisanyan CLI  `nis <w> --tree --plain` | subprocess |
#   | etymology_api        | Nisanyan web API                     | HTTP GET    |
#   | translate            | DeepL                                | HTTP POST   |
#   | english_definitions  | Oxford Dictionaries                  | HTTP GET    |
#
# THE GUARD:
#   Each adapter hands its actual work to _guarded(), which bounds it with a
#   timeout and converts ANY failure into ProviderResult.unavailable / timeout.
#   Adapters therefore never raise, and a slow or broken source never takes
#   its siblings down with it.
#
# ProviderSet bundles the six adapters so orchestrators can be handed a
# different set (offline, or fakes in tests) without patching anything.
# =============================================================================

import asyncio
import contextlib
import logging
import time
from dataclasses import dataclass
from functools import partial
from typing import Any, Awaitable, Callable, Optional
from urllib.parse import quote

import httpx

from core.config import Settings
from core.errors import ProviderError
from core.models import ProviderResult

logger = logging.getLogger(__name__)

DICTIONARY = "tdk"
ETYMOLOGY_CLI = "nisanyan-cli"
ETYMOLOGY_TREE = "nisanyan-tree"
ETYMOLOGY_API = "nisanyan-api"
TRANSLATION = "deepl"
ENGLISH_DICTIONARY = "oxford"

USER_AGENT = "turkish-culture-agent/1.0"


async def _guarded(
    provider: str,
    timeout: float,
    work: Callable[[], Awaitable[Any]],
) -> ProviderResult:
    """Run one provider call with a timeout; never raise."""
    logger.info("%s: request started", provider)
    started = time.monotonic()
    try:
        payload = await asyncio.wait_for(work(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("%s: timed out after %.1fs", provider, timeout)
        return ProviderResult.timeout(provider, timeout)
    except Exception as exc:
        elapsed = time.monotonic() - started
        logger.warning("%s: unavailable (%s: %s)", provider, type(exc).__name__, exc)
        return ProviderResult.unavailable(provider, str(exc) or type(exc).__name__, elapsed)

    elapsed = time.monotonic() - started
    if payload in (None, "", [], {}):
        logger.info("%s: no data (%.2fs)", provider, elapsed)
    else:
        logger.info("%s: data received (%.2fs)", provider, elapsed)
    return ProviderResult.success(provider, payload, elapsed)


def _offline(provider: str, settings: Settings) -> Optional[ProviderResult]:
    if settings.use_live_providers:
        return None
    return ProviderResult.unavailable(provider, "live providers disabled")


async def _get_json(url: str, timeout: float, **kwargs) -> Any:
    async with httpx.AsyncClient(timeout=timeout) as client:
        response = await client.get(url, **kwargs)
    if response.status_code != 200:
        raise ProviderError(url, f"HTTP {response.status_code}")
    return response.json()


async def _run_cli(*argv: str) -> Optional[str]:
    """Run a command and return its stripped stdout (None when empty)."""
    process = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        # wait_for cancelled us; don't leave the child running
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        await process.wait()
        raise
    if stderr:
        logger.debug("%s stderr: %s", argv[0], stderr.decode(errors="replace").strip())
    if process.returncode != 0:
        raise ProviderError(argv[0], f"exit status {process.returncode}")
    return stdout.decode(errors="replace").strip() or None


# =============================================================================
# National dictionary (TDK)
# =============================================================================
async def lookup_dictionary(term: str, settings: Settings) -> ProviderResult:
    """Look a word up in the national dictionary.

    TDK answers an unknown word with HTTP 200 and {"error": "Sonuç bulunamadı"};
    that is reported as a successful call with no payload.
    """
    offline = _offline(DICTIONARY, settings)
    if offline:
        return offline

    async def work():
        data = await _get_json(
            settings.dictionary_url,
            settings.dictionary_timeout,
            params={"ara": term},
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
        )
        if isinstance(data, dict) and "error" in data:
            return None
        return data

    return await _guarded(DICTIONARY, settings.dictionary_timeout, work)


# =============================================================================
# Etymology (Nisanyan): two CLI views + web API
# =============================================================================
async def etymology_plain(term: str, settings: Settings) -> ProviderResult:
    offline = _offline(ETYMOLOGY_CLI, settings)
    if offline:
        return offline
    return await _guarded(
        ETYMOLOGY_CLI,
        settings.provider_timeout,
        lambda: _run_cli(settings.etymology_cli, term, "--plain"),
    )


async def etymology_tree(term: str, settings: Settings) -> ProviderResult:
    offline = _offline(ETYMOLOGY_TREE, settings)
    if offline:
        return offline
    return await _guarded(
        ETYMOLOGY_TREE,
        settings.provider_timeout,
        lambda: _run_cli(settings.etymology_cli, term, "--tree", "--plain"),
    )


async def etymology_api(term: str, settings: Settings) -> ProviderResult:
    offline = _offline(ETYMOLOGY_API, settings)
    if offline:
        return offline
    url = f"{settings.etymology_api_url.rstrip('/')}/{quote(term)}"
    return await _guarded(
        ETYMOLOGY_API,
        settings.provider_timeout,
        lambda: _get_json(url, settings.provider_timeout, params={"session": 1}),
    )


# =============================================================================
# Translation (DeepL)
# =============================================================================
async def translate(
    text: str,
    source_lang: str,
    target_lang: str,
    settings: Settings,
) -> ProviderResult:
    offline = _offline(TRANSLATION, settings)
    if offline:
        return offline
    if not settings.translation_api_key:
        return ProviderResult.unavailable(TRANSLATION, "DEEPL_API_KEY not configured")

    async def work():
        async with httpx.AsyncClient(timeout=settings.provider_timeout) as client:
            response = await client.post(
                settings.translation_url,
                headers={"Authorization": f"DeepL-Auth-Key {settings.translation_api_key}"},
                data={
                    "text": text,
                    "source_lang": source_lang.upper(),
                    "target_lang": target_lang.upper(),
                },
            )
        if response.status_code != 200:
            raise ProviderError(TRANSLATION, f"HTTP {response.status_code}")
        return response.json()

    return await _guarded(TRANSLATION, settings.provider_timeout, work)


# =============================================================================
# English dictionary (Oxford)
# =============================================================================
async def english_definitions(term: Optional[str], settings: Settings) -> ProviderResult:
    """Fetch Oxford entries for an English word.

    `term` is whatever an upstream translation produced, so it may be None.
    """
    if not term:
        return ProviderResult.unavailable(ENGLISH_DICTIONARY, "no input term")
    offline = _offline(ENGLISH_DICTIONARY, settings)
    if offline:
        return offline
    if not (settings.oxford_app_id and settings.oxford_app_key):
        return ProviderResult.unavailable(ENGLISH_DICTIONARY, "OXFORD_APP_ID/OXFORD_APP_KEY not configured")

    url = f"{settings.english_dictionary_url.rstrip('/')}/entries/en-gb/{quote(term.lower())}"
    return await _guarded(
        ENGLISH_DICTIONARY,
        settings.provider_timeout,
        lambda: _get_json(
            url,
            settings.provider_timeout,
            headers={"app_id": settings.oxford_app_id, "app_key": settings.oxford_app_key},
        ),
    )


# =============================================================================
# ProviderSet  -  the adapters an orchestrator is allowed to call
# =============================================================================
@dataclass
class ProviderSet:
    dictionary: Callable[[str], Awaitable[ProviderResult]]
    etymology_plain: Callable[[str], Awaitable[ProviderResult]]
    etymology_tree: Callable[[str], Awaitable[ProviderResult]]
    etymology_api: Callable[[str], Awaitable[ProviderResult]]
    translate: Callable[[str, str, str], Awaitable[ProviderResult]]
    english_definitions: Callable[[Optional[str]], Awaitable[ProviderResult]]

    @classmethod
    def default(cls, settings: Optional[Settings] = None) -> "ProviderSet":
        settings = settings or Settings.from_env()
        return cls(
            dictionary=partial(lookup_dictionary, settings=settings),
            etymology_plain=partial(etymology_plain, settings=settings),
            etymology_tree=partial(etymology_tree, settings=settings),
            etymology_api=partial(etymology_api, settings=settings),
            translate=partial(translate, settings=settings),
            english_definitions=partial(english_definitions, settings=settings),
        )

    @classmethod
    def offline(cls, reason: str = "live providers disabled") -> "ProviderSet":
        def down(provider: str):
            async def adapter(*args, **kwargs) -> ProviderResult:
                return ProviderResult.unavailable(provider, reason)
            return adapter

        return cls(
            dictionary=down(DICTIONARY),
            etymology_plain=down(ETYMOLOGY_CLI),
            etymology_tree=down(ETYMOLOGY_TREE),
            etymology_api=down(ETYMOLOGY_API),
            translate=down(TRANSLATION),
            english_definitions=down(ENGLISH_DICTIONARY),
        )
