# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the system: what a provider hands back, what the normalizer turns it
# into, and what each tool finally returns to the agent.
#
# THREE LAYERS OF MODELS:
#   1. ProviderResult       -  one per external call (success / unavailable /
#                              timeout), payload still in the provider's shape
#   2. *Finding             -  the canonical, provider-neutral shape produced
#                              by core/normalizer.py.  Every field is optional;
#                              an empty field means "not found", never an error
#   3. *Result              -  what a tool returns.  Each has to_dict(), which
#                              emits the camelCase wire shape the agent sees
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


def normalize_term(term: str) -> str:
    """Lowercase a Turkish term the way a Turkish speaker would.

    str.lower() maps "I" to "i" and "İ" to "i̇" (with a combining dot), which
    is wrong for Turkish.  The dotted/dotless pairs are mapped first.
    """
    return term.strip().replace("I", "ı").replace("İ", "i").lower()


# -----------------------------------------------------------------------------
# ProviderResult  -  tagged union returned by every provider adapter
# -----------------------------------------------------------------------------
class ProviderStatus(str, Enum):
    SUCCESS = "success"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of one provider call.

    SUCCESS with an empty payload means the provider ran and found nothing.
    UNAVAILABLE / TIMEOUT mean the provider could not be consulted at all.
    """

    provider: str
    status: ProviderStatus
    payload: Any = None
    reason: Optional[str] = None
    elapsed: float = 0.0

    @classmethod
    def success(cls, provider: str, payload: Any, elapsed: float = 0.0) -> "ProviderResult":
        return cls(provider, ProviderStatus.SUCCESS, payload=payload, elapsed=elapsed)

    @classmethod
    def unavailable(cls, provider: str, reason: str, elapsed: float = 0.0) -> "ProviderResult":
        return cls(provider, ProviderStatus.UNAVAILABLE, reason=reason, elapsed=elapsed)

    @classmethod
    def timeout(cls, provider: str, seconds: float) -> "ProviderResult":
        return cls(
            provider,
            ProviderStatus.TIMEOUT,
            reason=f"no answer within {seconds:g}s",
            elapsed=seconds,
        )

    @property
    def ok(self) -> bool:
        return self.status is ProviderStatus.SUCCESS

    @property
    def has_data(self) -> bool:
        """True when the provider ran AND returned something non-empty."""
        return self.ok and self.payload not in (None, "", [], {})


# -----------------------------------------------------------------------------
# Dictionary finding  -  canonical shape of a national-dictionary lookup
# -----------------------------------------------------------------------------
@dataclass
class Meaning:
    definition: str
    examples: list[str] = field(default_factory=list)
    properties: list[str] = field(default_factory=list)
    type: Optional[str] = None


@dataclass
class Proverb:
    text: str
    meaning: str = ""


@dataclass
class RegionalWord:
    word: str
    meaning: str = ""
    region: str = ""


@dataclass
class ScienceTerm:
    term: str
    definition: str = ""
    field: str = ""


@dataclass
class OriginNote:
    word: str
    origin: str = ""
    meaning: str = ""


@dataclass
class GuideEntry:
    foreign: str
    turkish: str = ""


@dataclass
class DictionaryFinding:
    """Everything the national dictionary said about a word.

    `available` is False when the dictionary could not be consulted, which
    keeps "unreachable" apart from "reached, nothing found" (both have empty
    sections).
    """

    available: bool = True
    word: Optional[str] = None
    language: Optional[str] = None
    meanings: list[Meaning] = field(default_factory=list)
    compounds: list[str] = field(default_factory=list)
    proverbs: list[Proverb] = field(default_factory=list)
    compilation: list[RegionalWord] = field(default_factory=list)
    science_terms: list[ScienceTerm] = field(default_factory=list)
    western_origin: list[OriginNote] = field(default_factory=list)
    guide: list[GuideEntry] = field(default_factory=list)
    etymological: list[OriginNote] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.meanings or self.compounds or self.proverbs or self.compilation
            or self.science_terms or self.western_origin or self.guide
            or self.etymological
        )

    def to_dict(self) -> dict:
        return {
            "available": self.available,
            "word": self.word,
            "language": self.language,
            "meanings": [
                {
                    "definition": m.definition,
                    "examples": list(m.examples),
                    "properties": list(m.properties),
                    "type": m.type,
                }
                for m in self.meanings
            ],
            "compounds": list(self.compounds),
            "proverbs": [{"text": p.text, "meaning": p.meaning} for p in self.proverbs],
            "compilation": [
                {"word": c.word, "meaning": c.meaning, "region": c.region}
                for c in self.compilation
            ],
            "scienceTerms": [
                {"term": s.term, "definition": s.definition, "field": s.field}
                for s in self.science_terms
            ],
            "westernOrigin": [
                {"word": o.word, "origin": o.origin, "meaning": o.meaning}
                for o in self.western_origin
            ],
            "guide": [{"foreign": g.foreign, "turkish": g.turkish} for g in self.guide],
            "etymological": [
                {"word": o.word, "origin": o.origin, "meaning": o.meaning}
                for o in self.etymological
            ],
        }


# -----------------------------------------------------------------------------
# Etymology finding  -  canonical shape shared by the web API and local table
# -----------------------------------------------------------------------------
@dataclass
class EtymologyFinding:
    origin: Optional[str] = None
    original_meaning: Optional[str] = None
    language_family: Optional[str] = None
    historical_path: list[str] = field(default_factory=list)
    first_known_use: Optional[str] = None
    related_languages: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (
            self.origin or self.original_meaning or self.language_family
            or self.historical_path or self.first_known_use or self.related_languages
        )

    def to_dict(self, include_related_languages: bool = True) -> dict:
        data = {
            "origin": self.origin or "",
            "originalMeaning": self.original_meaning or "",
            "languageFamily": self.language_family or "",
            "historicalPath": list(self.historical_path),
            "firstKnownUse": self.first_known_use,
        }
        if include_related_languages:
            data["relatedLanguages"] = dict(self.related_languages)
        return data


@dataclass
class LinguisticAnalysis:
    morphology: str
    phonetical_changes: list[str] = field(default_factory=list)
    semantic_evolution: str = ""

    def to_dict(self) -> dict:
        return {
            "morphology": self.morphology,
            "phoneticalChanges": list(self.phonetical_changes),
            "semanticEvolution": self.semantic_evolution,
        }


# -----------------------------------------------------------------------------
# Fallback entries  -  hand-written records in core/knowledge.py
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CulturalNote:
    significance: str
    traditional_usage: str
    modern_usage: str
    regional_variations: tuple[str, ...] = ()


@dataclass(frozen=True)
class EtymologyEntry:
    etymology: EtymologyFinding
    linguistic_analysis: LinguisticAnalysis


@dataclass(frozen=True)
class RegionalVariation:
    region: str
    variation: str
    description: str


@dataclass(frozen=True)
class HistoricalContext:
    origins: str
    evolution: str
    key_periods: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConceptProfile:
    cultural_significance: str
    traditional_practices: tuple[str, ...]
    modern_adaptations: tuple[str, ...]
    social_importance: str
    regional_variations: tuple[RegionalVariation, ...] = ()
    historical_context: Optional[HistoricalContext] = None
    related_traditions: tuple[str, ...] = ()


@dataclass(frozen=True)
class CultureExample:
    title: str
    description: str
    significance: str


@dataclass(frozen=True)
class TopicProfile:
    overview: str
    key_elements: tuple[str, ...]
    traditional_aspects: tuple[str, ...]
    modern_adaptations: tuple[str, ...]
    cultural_values: tuple[str, ...]
    examples: tuple[CultureExample, ...]
    related_topics: tuple[str, ...]


# -----------------------------------------------------------------------------
# Tool results
# -----------------------------------------------------------------------------
@dataclass
class ExampleSentence:
    sentence: str
    translation: str
    context: str


@dataclass
class EtymologyTexts:
    """The three etymology access paths as the agent sees them.

    Each field is None when the path ran and found nothing, and a localized
    "unreachable" message when the path could not be consulted.
    """

    cli_output: Optional[str] = None
    api_data: Any = None
    etymology_tree: Optional[str] = None

    def to_dict(self) -> dict:
        data = {}
        if self.cli_output is not None:
            data["cliOutput"] = self.cli_output
        if self.api_data is not None:
            data["apiData"] = self.api_data
        if self.etymology_tree is not None:
            data["etymologyTree"] = self.etymology_tree
        return data


@dataclass
class WordAnalysis:
    word: str
    tdk_data: Optional[DictionaryFinding] = None
    nisanyan_data: Optional[EtymologyTexts] = None
    oxford_definitions: Optional[list[str]] = None
    cultural_context: Optional[CulturalNote] = None
    examples: list[ExampleSentence] = field(default_factory=list)
    related_concepts: list[str] = field(default_factory=list)
    data_source: str = ""

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"word": self.word}
        if self.tdk_data is not None:
            data["tdkData"] = self.tdk_data.to_dict()
        if self.nisanyan_data is not None:
            data["nisanyanData"] = self.nisanyan_data.to_dict()
        if self.oxford_definitions:
            data["oxfordDefinitions"] = list(self.oxford_definitions)
        if self.cultural_context is not None:
            note = self.cultural_context
            data["culturalContext"] = {
                "significance": note.significance,
                "traditionalUsage": note.traditional_usage,
                "modernUsage": note.modern_usage,
                "regionalVariations": list(note.regional_variations),
            }
        data["examples"] = [
            {"sentence": e.sentence, "translation": e.translation, "context": e.context}
            for e in self.examples
        ]
        data["relatedConcepts"] = list(self.related_concepts)
        data["dataSource"] = self.data_source
        return data


@dataclass
class TranslationResult:
    original_text: str
    translated_text: str
    source_lang: str
    target_lang: str
    translation_source: str
    translation_found: bool = True
    cultural_notes: Optional[list[str]] = None
    alternative_translations: Optional[list[str]] = None

    def to_dict(self) -> dict:
        data = {
            "originalText": self.original_text,
            "translatedText": self.translated_text,
            "sourceLang": self.source_lang,
            "targetLang": self.target_lang,
            "translationSource": self.translation_source,
            "translationFound": self.translation_found,
        }
        if self.cultural_notes is not None:
            data["culturalNotes"] = list(self.cultural_notes)
        if self.alternative_translations is not None:
            data["alternativeTranslations"] = list(self.alternative_translations)
        return data


@dataclass
class EtymologyResult:
    word: str
    etymology: EtymologyFinding
    linguistic_analysis: LinguisticAnalysis
    data_source: str
    include_related_languages: bool = False
    nisanyan_cli: Optional[str] = None
    nisanyan_tree: Optional[str] = None
    nisanyan_api: Any = None
    tdk_etymology: Optional[list[OriginNote]] = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"word": self.word}
        if self.nisanyan_cli is not None:
            data["nisanyanCLI"] = self.nisanyan_cli
        if self.nisanyan_tree is not None:
            data["nisanyanTree"] = self.nisanyan_tree
        if self.nisanyan_api is not None:
            data["nisanyanAPI"] = self.nisanyan_api
        if self.tdk_etymology:
            data["tdkEtymology"] = [
                {"word": o.word, "origin": o.origin, "meaning": o.meaning}
                for o in self.tdk_etymology
            ]
        data["etymology"] = self.etymology.to_dict(self.include_related_languages)
        data["linguisticAnalysis"] = self.linguistic_analysis.to_dict()
        data["dataSource"] = self.data_source
        return data


@dataclass
class CulturalContextResult:
    concept: str
    cultural_significance: str
    traditional_practices: list[str]
    modern_adaptations: list[str]
    social_importance: str
    related_traditions: list[str]
    found: bool = True
    regional_variations: Optional[list[RegionalVariation]] = None
    historical_context: Optional[HistoricalContext] = None

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "concept": self.concept,
            "found": self.found,
            "culturalSignificance": self.cultural_significance,
            "traditionalPractices": list(self.traditional_practices),
            "modernAdaptations": list(self.modern_adaptations),
            "socialImportance": self.social_importance,
        }
        if self.regional_variations is not None:
            data["regionalVariations"] = [
                {"region": v.region, "variation": v.variation, "description": v.description}
                for v in self.regional_variations
            ]
        if self.historical_context is not None:
            data["historicalContext"] = {
                "origins": self.historical_context.origins,
                "evolution": self.historical_context.evolution,
                "keyPeriods": list(self.historical_context.key_periods),
            }
        data["relatedTraditions"] = list(self.related_traditions)
        return data


@dataclass
class CultureInfoResult:
    topic: str
    overview: str
    key_elements: list[str] = field(default_factory=list)
    traditional_aspects: list[str] = field(default_factory=list)
    modern_adaptations: list[str] = field(default_factory=list)
    cultural_values: list[str] = field(default_factory=list)
    examples: list[CultureExample] = field(default_factory=list)
    related_topics: list[str] = field(default_factory=list)
    found: bool = True

    def to_dict(self) -> dict:
        return {
            "topic": self.topic,
            "found": self.found,
            "overview": self.overview,
            "keyElements": list(self.key_elements),
            "traditionalAspects": list(self.traditional_aspects),
            "modernAdaptations": list(self.modern_adaptations),
            "culturalValues": list(self.cultural_values),
            "examples": [
                {"title": e.title, "description": e.description, "significance": e.significance}
                for e in self.examples
            ],
            "relatedTopics": list(self.related_topics),
        }


@dataclass
class RandomWordResult:
    word: str
    strategy: str
    used_count: int
    pool_size: int
    analysis: WordAnalysis

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "selectionStrategy": self.strategy,
            "usedWords": self.used_count,
            "poolSize": self.pool_size,
            "analysis": self.analysis.to_dict(),
        }
