# =============================================================================
# core/word_analysis.py  -  analyzeTurkishWord orchestrator
# =============================================================================
#
# HOW IT WORKS (the flow):
#   1. Fan out: dictionary lookup + the three etymology paths, concurrently
#   2. Translate the word tr -> en                        (waits for nothing)
#   3. Look the translation up in the English dictionary (needs step 2)
#   4. Normalize everything, derive examples and related concepts
#   5. Attach the local cultural note, filling only what the dictionary
#      left empty
#   6. Build the dataSource string
#
# Steps 2 and 3 are sequential because the English lookup needs the
# translation's output.  Nothing here raises on provider failure.
# =============================================================================

import asyncio
import dataclasses
import logging
from typing import Optional

from core.etymology import discard_empty_api, render_etymology_texts
from core.knowledge import KnowledgeStore, default_store
from core.models import (
    DictionaryFinding,
    ExampleSentence,
    WordAnalysis,
    normalize_term,
)
from core.normalizer import (
    normalize_dictionary,
    normalize_english_definitions,
    normalize_translation,
    unavailable_dictionary,
)
from core.provenance import (
    DICTIONARY_LABEL,
    ENGLISH_DICTIONARY_LABEL,
    ETYMOLOGY_LABEL,
    TRANSLATION_LABEL,
    Provenance,
)
from core.providers import ProviderSet

logger = logging.getLogger(__name__)

MAX_RELATED_CONCEPTS = 5
EXAMPLE_CONTEXT = "TDK örnek cümle"


def derive_examples(finding: DictionaryFinding) -> list[ExampleSentence]:
    """Example sentences from the first meaning, or nothing."""
    if not finding.meanings:
        return []
    return [
        ExampleSentence(sentence=s, translation=f"Example: {s}", context=EXAMPLE_CONTEXT)
        for s in finding.meanings[0].examples
    ]


def derive_related_concepts(finding: DictionaryFinding) -> list[str]:
    return finding.compounds[:MAX_RELATED_CONCEPTS]


async def analyze_word(
    word: str,
    include_etymology: bool = True,
    include_cultural_context: bool = True,
    providers: Optional[ProviderSet] = None,
    store: Optional[KnowledgeStore] = None,
) -> WordAnalysis:
    providers = providers or ProviderSet.default()
    store = store or default_store()
    term = normalize_term(word)
    logger.info("analyzing %r", term)

    if include_etymology:
        dictionary, plain, tree, api = await asyncio.gather(
            providers.dictionary(term),
            providers.etymology_plain(term),
            providers.etymology_tree(term),
            providers.etymology_api(term),
        )
    else:
        dictionary = await providers.dictionary(term)
        plain = tree = api = None
    api = discard_empty_api(api)

    translation = await providers.translate(term, "tr", "en")
    english_term = normalize_translation(translation.payload) if translation.has_data else None
    if english_term is None and translation.has_data:
        translation = dataclasses.replace(translation, payload=None)
    english = await providers.english_definitions(english_term)

    if dictionary.has_data:
        tdk = normalize_dictionary(dictionary.payload)
    elif dictionary.ok:
        tdk = DictionaryFinding()
    else:
        tdk = unavailable_dictionary()

    oxford = normalize_english_definitions(english.payload) if english.has_data else []

    provenance = Provenance()
    provenance.record(DICTIONARY_LABEL, dictionary)
    if include_etymology:
        provenance.record(ETYMOLOGY_LABEL, plain, tree, api)
    provenance.record(TRANSLATION_LABEL, translation)
    provenance.record(ENGLISH_DICTIONARY_LABEL, english)

    note = None
    if include_cultural_context:
        note = store.cultural_note(term)
        if note is not None:
            if tdk.compilation:
                note = dataclasses.replace(
                    note,
                    regional_variations=tuple(
                        f"{c.region}: {c.word}" if c.region else c.word for c in tdk.compilation
                    ),
                )
            provenance.local()

    return WordAnalysis(
        word=term,
        tdk_data=tdk,
        nisanyan_data=render_etymology_texts(term, plain, tree, api) if include_etymology else None,
        oxford_definitions=oxford or None,
        cultural_context=note,
        examples=derive_examples(tdk),
        related_concepts=derive_related_concepts(tdk),
        data_source=provenance.render(),
    )
