# =============================================================================
# core/translation.py  -  translateText orchestrator
# =============================================================================
#
# ORDER OF ATTEMPTS:
#   1. same language          -> text returned unchanged ("Identity")
#   2. translation service    -> "DeepL API"
#   3. phrase dictionary      -> "Fallback Dictionary"; known phrases are
#                                replaced in the lowercased text, longest
#                                first, in a single pass
#   4. nothing matched        -> "[Çeviri bulunamadı: <text>]" with
#                                translation_found=False
#
# Cultural notes come from scanning the source text for known idioms and do
# not depend on which step produced the translation.
# =============================================================================

import logging
import re
from typing import Mapping, Optional

from core.knowledge import KnowledgeStore, default_store
from core.models import TranslationResult, normalize_term
from core.normalizer import normalize_translation
from core.provenance import TRANSLATION_LABEL
from core.providers import ProviderSet

logger = logging.getLogger(__name__)

IDENTITY_SOURCE = "Identity"
FALLBACK_SOURCE = "Fallback Dictionary"


def not_found_marker(text: str) -> str:
    return f"[Çeviri bulunamadı: {text}]"


def phrase_translate(text: str, phrases: Mapping[str, str]) -> Optional[str]:
    """Replace every known phrase in `text`; None if none occurs."""
    if not phrases:
        return None
    lowered = normalize_term(text)
    ordered = sorted(phrases, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(p) for p in ordered))
    if not pattern.search(lowered):
        return None
    return pattern.sub(lambda m: phrases[m.group(0)], lowered)


async def translate_text(
    text: str,
    source_lang: str,
    target_lang: str,
    preserve_cultural_context: bool = True,
    providers: Optional[ProviderSet] = None,
    store: Optional[KnowledgeStore] = None,
) -> TranslationResult:
    providers = providers or ProviderSet.default()
    store = store or default_store()
    notes = store.idiom_notes(text) if preserve_cultural_context else None

    if source_lang == target_lang:
        return TranslationResult(
            original_text=text,
            translated_text=text,
            source_lang=source_lang,
            target_lang=target_lang,
            translation_source=IDENTITY_SOURCE,
            cultural_notes=notes,
        )

    fallback = phrase_translate(text, store.phrase_translations(source_lang, target_lang))

    result = await providers.translate(text, source_lang, target_lang)
    translated = normalize_translation(result.payload) if result.has_data else None
    if translated:
        alternatives = [fallback] if fallback and fallback != normalize_term(translated) else None
        return TranslationResult(
            original_text=text,
            translated_text=translated,
            source_lang=source_lang,
            target_lang=target_lang,
            translation_source=TRANSLATION_LABEL,
            cultural_notes=notes,
            alternative_translations=alternatives,
        )

    logger.info("translation service gave nothing (%s), using phrase dictionary", result.reason or "empty")
    return TranslationResult(
        original_text=text,
        translated_text=fallback if fallback is not None else not_found_marker(text),
        source_lang=source_lang,
        target_lang=target_lang,
        translation_source=FALLBACK_SOURCE,
        translation_found=fallback is not None,
        cultural_notes=notes,
    )
