# =============================================================================
# core/random_word.py  -  analyzeRandomWord orchestrator
# =============================================================================
#
# Picks a word with the caller's RandomTermSelector and runs the full word
# analysis on it.  The selector is passed in, never looked up globally, so
# its used-word set lives exactly as long as its owner.
# =============================================================================

import logging
from typing import Optional

from core.knowledge import KnowledgeStore
from core.models import RandomWordResult
from core.providers import ProviderSet
from core.selector import RandomTermSelector
from core.word_analysis import analyze_word

logger = logging.getLogger(__name__)


async def analyze_random_word(
    selector: RandomTermSelector,
    unique_probability: float = 0.5,
    providers: Optional[ProviderSet] = None,
    store: Optional[KnowledgeStore] = None,
) -> RandomWordResult:
    word, strategy = selector.select(unique_probability)
    logger.info("random word %r via %s (%d/%d used)", word, strategy, len(selector.used), len(selector.pool))
    analysis = await analyze_word(word, providers=providers, store=store)
    return RandomWordResult(
        word=word,
        strategy=strategy,
        used_count=len(selector.used),
        pool_size=len(selector.pool),
        analysis=analysis,
    )
