# =============================================================================
# core/culture.py  -  getCulturalContext / getTurkishCultureInfo
# =============================================================================
#
# Pure knowledge-store lookups, no providers involved.  An unknown concept
# or topic gives a well-typed result with found=False instead of an error.
# =============================================================================

import logging
from typing import Optional

from core.knowledge import KnowledgeStore, default_store
from core.models import CulturalContextResult, CultureInfoResult, normalize_term

logger = logging.getLogger(__name__)

DETAIL_LEVELS = ("basic", "detailed", "comprehensive")
BASIC_EXAMPLE_LIMIT = 2


def get_cultural_context(
    concept: str,
    include_regional_variations: bool = False,
    include_historical_context: bool = False,
    store: Optional[KnowledgeStore] = None,
) -> CulturalContextResult:
    store = store or default_store()
    key = normalize_term(concept)
    profile = store.concept(key)

    if profile is None:
        logger.info("no cultural context for %r", key)
        return CulturalContextResult(
            concept=key,
            cultural_significance=f"'{concept}' kavramı için kültürel bilgi bulunamadı",
            traditional_practices=[],
            modern_adaptations=[],
            social_importance="",
            related_traditions=[],
            found=False,
            regional_variations=[] if include_regional_variations else None,
        )

    return CulturalContextResult(
        concept=key,
        cultural_significance=profile.cultural_significance,
        traditional_practices=list(profile.traditional_practices),
        modern_adaptations=list(profile.modern_adaptations),
        social_importance=profile.social_importance,
        related_traditions=list(profile.related_traditions),
        regional_variations=list(profile.regional_variations) if include_regional_variations else None,
        historical_context=profile.historical_context if include_historical_context else None,
    )


def get_culture_info(
    topic: str,
    detail_level: str = "basic",
    store: Optional[KnowledgeStore] = None,
) -> CultureInfoResult:
    """Overview of one culture topic; "basic" keeps at most two examples."""
    store = store or default_store()
    key = normalize_term(topic)
    profile = store.topic(key)

    if profile is None:
        logger.info("no culture info for %r", key)
        return CultureInfoResult(
            topic=key,
            overview=f"'{topic}' konusu için bilgi bulunamadı",
            found=False,
        )

    examples = list(profile.examples)
    if detail_level == "basic":
        examples = examples[:BASIC_EXAMPLE_LIMIT]

    return CultureInfoResult(
        topic=key,
        overview=profile.overview,
        key_elements=list(profile.key_elements),
        traditional_aspects=list(profile.traditional_aspects),
        modern_adaptations=list(profile.modern_adaptations),
        cultural_values=list(profile.cultural_values),
        examples=examples,
        related_topics=list(profile.related_topics),
    )
