# =============================================================================
# core/normalizer.py  -  Response Normalizer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps each provider's raw payload onto the canonical finding types in
#   core/models.py.  Pure functions, no I/O.
#
# RULES:
#   - None, {} or a payload of the wrong type gives an all-empty finding.
#   - Missing nested lists become empty lists; entries that are not dicts
#     are skipped.
#   - Field names are translated one-to-one.  Nothing is derived here
#     (examples, related concepts, provenance are the orchestrators' job).
#
# DICTIONARY SHAPES:
#   The national dictionary reaches us in two shapes, both handled:
#     a) the aggregated lookup-library object
#          {lisan, means[{anlam, orneklerListe, ozelliklerListe, tur}],
#           compounds, proverbs[{madde, anlam}], compilation[{madde, anlam, yer}],
#           glossaryOfScienceAndArtTerms[{terim, anlam, alan}],
#           westOpposite[{madde, kokeni, anlam}], guide[{yabanci, turkce}],
#           etymological[{madde, kokeni, anlam}]}
#     b) the raw TDK `gts` list
#          [{madde, lisan, anlamlarListe[{anlam, orneklerListe[{ornek}],
#            ozelliklerListe[{tam_adi}]}], birlesikler: "a, b", atasozu[{madde}]}]
# =============================================================================

from typing import Any, Optional

from core.models import (
    DictionaryFinding,
    EtymologyFinding,
    GuideEntry,
    Meaning,
    OriginNote,
    Proverb,
    RegionalWord,
    ScienceTerm,
)


def _entries(value: Any) -> list[dict]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _texts(value: Any, key: Optional[str] = None) -> list[str]:
    """Flatten a list of strings, or of dicts carrying the string under `key`."""
    if not isinstance(value, list):
        return []
    out = []
    for item in value:
        if isinstance(item, dict):
            item = item.get(key) if key else None
        text = _text(item)
        if text:
            out.append(text)
    return out


def _origin_notes(value: Any) -> list[OriginNote]:
    return [
        OriginNote(word=_text(e.get("madde")), origin=_text(e.get("kokeni")), meaning=_text(e.get("anlam")))
        for e in _entries(value)
    ]


# =============================================================================
# National dictionary
# =============================================================================
def normalize_dictionary(raw: Any) -> DictionaryFinding:
    if isinstance(raw, list):
        return _normalize_gts(raw)
    if not isinstance(raw, dict):
        return DictionaryFinding()

    return DictionaryFinding(
        word=raw.get("word") or None,
        language=raw.get("lisan") or None,
        meanings=[
            Meaning(
                definition=_text(m.get("anlam")),
                examples=_texts(m.get("orneklerListe"), "ornek"),
                properties=_texts(m.get("ozelliklerListe"), "tam_adi"),
                type=m.get("tur") or None,
            )
            for m in _entries(raw.get("means"))
        ],
        compounds=_texts(raw.get("compounds"), "madde"),
        proverbs=[
            Proverb(text=_text(p.get("madde")), meaning=_text(p.get("anlam")))
            for p in _entries(raw.get("proverbs"))
        ],
        compilation=[
            RegionalWord(word=_text(c.get("madde")), meaning=_text(c.get("anlam")), region=_text(c.get("yer")))
            for c in _entries(raw.get("compilation"))
        ],
        science_terms=[
            ScienceTerm(term=_text(t.get("terim")), definition=_text(t.get("anlam")), field=_text(t.get("alan")))
            for t in _entries(raw.get("glossaryOfScienceAndArtTerms"))
        ],
        western_origin=_origin_notes(raw.get("westOpposite")),
        guide=[
            GuideEntry(foreign=_text(g.get("yabanci")), turkish=_text(g.get("turkce")))
            for g in _entries(raw.get("guide"))
        ],
        etymological=_origin_notes(raw.get("etymological")),
    )


def _normalize_gts(raw: list) -> DictionaryFinding:
    entries = _entries(raw)
    if not entries:
        return DictionaryFinding()

    finding = DictionaryFinding(
        word=entries[0].get("madde") or None,
        language=entries[0].get("lisan") or None,
    )
    for entry in entries:
        for m in _entries(entry.get("anlamlarListe")):
            finding.meanings.append(Meaning(
                definition=_text(m.get("anlam")),
                examples=_texts(m.get("orneklerListe"), "ornek"),
                properties=_texts(m.get("ozelliklerListe"), "tam_adi"),
            ))
        compounds = entry.get("birlesikler")
        if isinstance(compounds, str):
            finding.compounds.extend(c.strip() for c in compounds.split(",") if c.strip())
        finding.proverbs.extend(
            Proverb(text=_text(p.get("madde"))) for p in _entries(entry.get("atasozu"))
        )
    return finding


def unavailable_dictionary() -> DictionaryFinding:
    return DictionaryFinding(available=False)


# =============================================================================
# Etymology web API
# =============================================================================
def normalize_etymology_api(raw: Any) -> EtymologyFinding:
    """The `etymology` object of the first word entry, if it has one."""
    if not isinstance(raw, dict) or raw.get("isUnsuccessful"):
        return EtymologyFinding()

    words = _entries(raw.get("words"))
    etymology = words[0].get("etymology") if words else None
    if isinstance(etymology, dict):
        related = etymology.get("relatedLanguages")
        path = etymology.get("path")
        return EtymologyFinding(
            origin=etymology.get("origin") or None,
            original_meaning=etymology.get("meaning") or None,
            language_family=etymology.get("languageFamily") or None,
            historical_path=_texts(path) if isinstance(path, list) else ([_text(path)] if path else []),
            first_known_use=etymology.get("firstUse") or None,
            related_languages=(
                {str(k): _text(v) for k, v in related.items()} if isinstance(related, dict) else {}
            ),
        )
    return EtymologyFinding()


def normalize_cli_text(raw: Any) -> Optional[str]:
    text = _text(raw)
    return text or None


# =============================================================================
# Translation / English dictionary
# =============================================================================
def normalize_translation(raw: Any) -> Optional[str]:
    if not isinstance(raw, dict):
        return None
    translations = _entries(raw.get("translations"))
    if not translations:
        return None
    return _text(translations[0].get("text")) or None


def normalize_english_definitions(raw: Any) -> list[str]:
    if not isinstance(raw, dict):
        return []
    results = _entries(raw.get("results"))
    if not results:
        return []

    definitions: list[str] = []
    for lexical_entry in _entries(results[0].get("lexicalEntries")):
        entries = _entries(lexical_entry.get("entries"))
        if not entries:
            continue
        for sense in _entries(entries[0].get("senses")):
            definitions.extend(_texts(sense.get("definitions")))
    return definitions
