# =============================================================================
# core/etymology.py  -  getEtymology orchestrator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Answers "where does this word come from?" by consulting, concurrently:
#     - the etymology CLI, plain text view
#     - the etymology CLI, tree view           (only if show_etymology_tree)
#     - the etymology web API
#     - the national dictionary (its `etymological` section)
#
# PRECEDENCE FOR THE STRUCTURED ETYMOLOGY:
#   web API finding  >  local table (core/knowledge.py)  >  placeholder
#
# TRI-STATE ETYMOLOGY TEXTS:
#   For each of the three access paths the result field is
#     - the provider's text / JSON        provider ran and found something
#     - None (omitted from the wire)      provider ran and found nothing
#     - a localized "unreachable" value   provider could not be consulted
#   render_etymology_texts() is shared with core/word_analysis.py.
# =============================================================================

import asyncio
import dataclasses
import logging
from typing import Optional

from core.knowledge import KnowledgeStore, default_store
from core.models import (
    EtymologyFinding,
    EtymologyResult,
    EtymologyTexts,
    LinguisticAnalysis,
    ProviderResult,
    normalize_term,
)
from core.normalizer import normalize_cli_text, normalize_dictionary, normalize_etymology_api
from core.provenance import DICTIONARY_SHORT_LABEL, ETYMOLOGY_BOTH_LABEL, Provenance
from core.providers import ProviderSet

logger = logging.getLogger(__name__)


def cli_unreachable(word: str) -> str:
    return f"Nisanyan CLI'ye ulaşılamadı: {word} kelimesi için etimoloji bilgisi şu anda mevcut değil."


def tree_unreachable(word: str) -> str:
    return f"Nisanyan etimoloji ağacı şu anda mevcut değil: {word}"


def api_unreachable(word: str, reason: Optional[str] = None) -> dict:
    if reason:
        logger.info("etymology web API unreachable for %r: %s", word, reason)
    return {"isUnsuccessful": True, "error": f"Nisanyan Web API'ye ulaşılamadı: {word}", "words": []}


def discard_empty_api(api: Optional[ProviderResult]) -> Optional[ProviderResult]:
    """A web API answer without a usable etymology counts as "found nothing"."""
    if api is not None and api.has_data and normalize_etymology_api(api.payload).is_empty():
        return dataclasses.replace(api, payload=None)
    return api


def render_etymology_texts(
    word: str,
    plain: Optional[ProviderResult],
    tree: Optional[ProviderResult],
    api: Optional[ProviderResult],
) -> EtymologyTexts:
    """Turn the three etymology ProviderResults into what the agent sees.

    A path that was not consulted at all is passed as None and stays None.
    """
    texts = EtymologyTexts()
    if plain is not None:
        texts.cli_output = normalize_cli_text(plain.payload) if plain.ok else cli_unreachable(word)
    if tree is not None:
        texts.etymology_tree = normalize_cli_text(tree.payload) if tree.ok else tree_unreachable(word)
    if api is not None:
        texts.api_data = (api.payload or None) if api.ok else api_unreachable(word, api.reason)
    return texts


def _placeholder(word: str) -> tuple[EtymologyFinding, LinguisticAnalysis]:
    return (
        EtymologyFinding(origin=None, original_meaning=None, language_family=None),
        LinguisticAnalysis(
            morphology=f"'{word}' için morfolojik analiz mevcut değil",
            semantic_evolution="",
        ),
    )


async def get_etymology(
    word: str,
    include_related_languages: bool = False,
    show_etymology_tree: bool = True,
    providers: Optional[ProviderSet] = None,
    store: Optional[KnowledgeStore] = None,
) -> EtymologyResult:
    providers = providers or ProviderSet.default()
    store = store or default_store()
    term = normalize_term(word)

    async def skipped() -> None:
        return None

    plain, tree, api, dictionary = await asyncio.gather(
        providers.etymology_plain(term),
        providers.etymology_tree(term) if show_etymology_tree else skipped(),
        providers.etymology_api(term),
        providers.dictionary(term),
    )
    api = discard_empty_api(api)

    texts = render_etymology_texts(term, plain, tree, api)
    provenance = Provenance()
    provenance.record(ETYMOLOGY_BOTH_LABEL, plain, tree, api)

    tdk_etymology = None
    if dictionary.has_data:
        tdk_etymology = normalize_dictionary(dictionary.payload).etymological or None
        if tdk_etymology:
            provenance.add(DICTIONARY_SHORT_LABEL)

    api_finding = normalize_etymology_api(api.payload) if api.has_data else EtymologyFinding()
    entry = store.etymology(term)

    if not api_finding.is_empty():
        finding = api_finding
        if entry is not None:
            analysis = entry.linguistic_analysis
            provenance.local()
        else:
            analysis = _placeholder(term)[1]
    elif entry is not None:
        logger.info("etymology for %r from local table", term)
        finding, analysis = entry.etymology, entry.linguistic_analysis
        provenance.local()
    else:
        finding, analysis = _placeholder(term)

    return EtymologyResult(
        word=term,
        etymology=finding,
        linguistic_analysis=analysis,
        data_source=provenance.render(),
        include_related_languages=include_related_languages,
        nisanyan_cli=texts.cli_output,
        nisanyan_tree=texts.etymology_tree,
        nisanyan_api=texts.api_data,
        tdk_etymology=tdk_etymology,
    )
