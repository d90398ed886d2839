# =============================================================================
# core/knowledge.py  -  Local Knowledge Store (hand-written fallback data)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the small curated tables the tools fall back on when the external
#   providers have nothing to say: cultural notes, etymologies, cultural
#   concepts, culture topics, a phrase dictionary and idiom notes.
#
# LOOKUP RULES:
#   - Exact match on the Turkish-lowercased key ("ÇAY" and "çay" are the same
#     entry).  No fuzzy or partial matching, except idiom_notes(), which scans
#     free text for known phrases.
#   - The tables are read-only.  A KnowledgeStore is built once and shared.
# =============================================================================

import copy
from types import MappingProxyType
from typing import Mapping, Optional

from core.models import (
    ConceptProfile,
    CulturalNote,
    CultureExample,
    EtymologyEntry,
    EtymologyFinding,
    HistoricalContext,
    LinguisticAnalysis,
    RegionalVariation,
    TopicProfile,
    normalize_term,
)


# -----------------------------------------------------------------------------
# Cultural notes attached to a word analysis
# -----------------------------------------------------------------------------
_CULTURAL_NOTES: dict[str, CulturalNote] = {
    "misafir": CulturalNote(
        significance="Türk kültüründe misafirperverlik en önemli değerlerden biridir. 'Misafir Allah'ın emaneti' anlayışı yaygındır.",
        traditional_usage="Geleneksel Türk evlerinde misafir odası ayrılır, en iyi yemekler misafire ikram edilir",
        modern_usage="Modern yaşamda da misafir ağırlama geleneği devam eder, apartman dairelerinde bile önemlidir",
        regional_variations=("Anadolu'da 'konuk'", "Doğu'da 'mehman'"),
    ),
    "çay": CulturalNote(
        significance="Türk sosyal yaşamının merkezi, dostluk ve sohbetin simgesi. Günde ortalama 3-5 bardak çay içilir.",
        traditional_usage="İnce belli bardaklarda servis edilir, şekerle içilir, çay ocağının sürekli yanık tutulması geleneği",
        modern_usage="Günde ortalama 3-5 bardak çay içilir, her fırsatta ikram edilir, ofislerde çay molası geleneği",
        regional_variations=("Doğu'da samovar çayı", "Rize'de yerel çay üretimi"),
    ),
    "nazar": CulturalNote(
        significance="Türk halk inançlarının önemli parçası, koruyucu amaçlı kullanılır. Özellikle bebek ve çocuklar için önemli.",
        traditional_usage="Mavi boncuklar, nazarlıklar koruma amaçlı takılır, evlerin girişine asılır",
        modern_usage="Hala yaygın olarak kullanılır, bebeklere ve değerli eşyalara takılır, modern takılarda da görülür",
        regional_variations=("Anadolu'da mavi boncuk", "Kapadokya'da özel nazarlık sanatı"),
    ),
}


# -----------------------------------------------------------------------------
# Etymologies
# -----------------------------------------------------------------------------
_ETYMOLOGIES: dict[str, EtymologyEntry] = {
    "çay": EtymologyEntry(
        etymology=EtymologyFinding(
            origin="Çince 'cha' (茶)",
            original_meaning="Çay yaprağı, çay bitkisi",
            language_family="Sino-Tibetan > Chinese",
            historical_path=[
                "Çince 'cha' (茶)",
                "Türkçe 'çay' (19. yüzyıl)",
                "Rusça 'chai' etkisi",
                "Modern Türkçe kullanım",
            ],
            first_known_use="19. yüzyıl ortaları",
            related_languages={
                "Chinese": "茶 (cha)",
                "Russian": "чай (chai)",
                "Persian": "چای (chai)",
                "Arabic": "شاي (shai)",
            },
        ),
        linguistic_analysis=LinguisticAnalysis(
            morphology="Tek heceli, basit kök",
            phonetical_changes=["cha > çay (Türkçe ses uyumu)"],
            semantic_evolution="Bitki adından içecek adına, sonra kültürel kavrama dönüşüm",
        ),
    ),
    "misafir": EtymologyEntry(
        etymology=EtymologyFinding(
            origin="Arapça 'musafir' (مسافر)",
            original_meaning="Yolcu, seyahat eden kişi",
            language_family="Semitic > Arabic",
            historical_path=[
                "Arapça 'musafir' (مسافر) - yolcu",
                "Osmanlı Türkçesi 'misafir'",
                "Modern Türkçe 'misafir' - konuk",
            ],
            first_known_use="Osmanlı dönemi",
            related_languages={
                "Arabic": "مسافر (musafir)",
                "Persian": "مسافر (musafer)",
                "Urdu": "مسافر (musafir)",
            },
        ),
        linguistic_analysis=LinguisticAnalysis(
            morphology="mi-sa-fir (üç heceli)",
            phonetical_changes=["musafir > misafir (ünlü uyumu)"],
            semantic_evolution="Yolcu anlamından konuk anlamına semantik genişleme",
        ),
    ),
}


# -----------------------------------------------------------------------------
# Cultural concepts
# -----------------------------------------------------------------------------
_CONCEPTS: dict[str, ConceptProfile] = {
    "misafirperverlik": ConceptProfile(
        cultural_significance="Türk kültürünün en temel değerlerinden biri, konuğa gösterilen saygı ve özenin ifadesi",
        traditional_practices=(
            "Misafir geldiğinde ayakkabılarını çıkarması",
            "En iyi yemeklerin misafire ikram edilmesi",
            "Misafir odası hazırlanması",
            "Çay ve kahve ikramı",
            "Misafiri uğurlarken hediye verilmesi",
        ),
        modern_adaptations=(
            "Apartman dairelerinde misafir ağırlama",
            "Restoranlarda hesabı ödeme yarışı",
            "Sosyal medyada misafir paylaşımları",
            "Modern ev dekorasyonunda misafir alanları",
        ),
        social_importance="Toplumsal statü ve saygınlığın göstergesi, aile onurunun parçası",
        regional_variations=(
            RegionalVariation(
                region="Doğu Anadolu",
                variation="Daha geleneksel ve resmi protokoller",
                description="Misafir ağırlama daha uzun sürer, daha çok ritüel içerir",
            ),
            RegionalVariation(
                region="Ege Bölgesi",
                variation="Daha rahat ve samimi yaklaşım",
                description="Misafir ağırlama daha sıcak ve dostane",
            ),
        ),
        historical_context=HistoricalContext(
            origins="Göçebe Türk kültüründen gelen gelenek",
            evolution="İslam kültürü ile birleşerek güçlenmiş",
            key_periods=("Göçebe dönem", "İslamiyet kabulü", "Osmanlı dönemi", "Cumhuriyet dönemi"),
        ),
        related_traditions=("ikram", "hediyeleşme", "komşuluk", "akrabalık"),
    ),
    "çay kültürü": ConceptProfile(
        cultural_significance="Türk sosyal yaşamının merkezi, dostluk ve sohbetin vazgeçilmez parçası",
        traditional_practices=(
            "İnce belli bardaklarda servis",
            "Şekerle birlikte içilmesi",
            "Çay ocağının sürekli yanık tutulması",
            "Misafire ilk ikram çay olması",
            "Çay bahçelerinde sosyalleşme",
        ),
        modern_adaptations=(
            "Ofislerde çay molası geleneği",
            "Çay bardağı tasarımlarının modernleşmesi",
            "Çay markalarının çeşitlenmesi",
            "Çay evlerinin kafelere dönüşümü",
        ),
        social_importance="Sosyal bağların güçlendirilmesi, iş görüşmelerinin başlatılması",
        regional_variations=(
            RegionalVariation(
                region="Rize",
                variation="Yerel çay üretimi ve tüketimi",
                description="Çay tarımının merkezi, özel çay kültürü",
            ),
            RegionalVariation(
                region="Doğu",
                variation="Samovar çayı geleneği",
                description="Rus etkisi ile samovar kullanımı",
            ),
        ),
        historical_context=HistoricalContext(
            origins="19. yüzyılda Çin'den gelen içecek",
            evolution="Kısa sürede Türk kültürünün parçası oldu",
            key_periods=("19. yüzyıl girişi", "Cumhuriyet dönemi yaygınlaşma", "Modern dönem endüstrileşme"),
        ),
        related_traditions=("sohbet", "misafirperverlik", "çay bahçeleri", "çay saati"),
    ),
}


# -----------------------------------------------------------------------------
# Culture topics (keys match the getTurkishCultureInfo enum)
# -----------------------------------------------------------------------------
CULTURE_TOPICS = (
    "gelenekler",
    "değerler",
    "aile_yapısı",
    "sosyal_ilişkiler",
    "yemek_kültürü",
    "müzik_dans",
    "sanat_edebiyat",
    "din_inanç",
    "eğitim",
    "iş_yaşamı",
)

_TOPICS: dict[str, TopicProfile] = {
    "gelenekler": TopicProfile(
        overview="Türk gelenekleri, binlerce yıllık tarihten gelen zengin bir kültürel mirasın ürünüdür",
        key_elements=("Misafirperverlik", "Saygı ve hürmet", "Aile bağları", "Bayramlar ve özel günler", "Geçiş törenleri"),
        traditional_aspects=("Büyüklere saygı gösterme", "El öpme geleneği", "Bayram ziyaretleri", "Düğün gelenekleri", "Cenaze törenleri"),
        modern_adaptations=(
            "Sosyal medyada bayram kutlamaları",
            "Modern düğün organizasyonları",
            "Şehirli yaşamda gelenek adaptasyonu",
            "Teknoloji ile gelenek birleşimi",
        ),
        cultural_values=("Aile birliği", "Toplumsal dayanışma", "Misafirperverlik", "Saygı", "Yardımlaşma"),
        examples=(
            CultureExample(
                title="Bayram Ziyaretleri",
                description="Dini bayramlarda büyükleri ziyaret etme geleneği",
                significance="Aile bağlarını güçlendirir ve kuşaklar arası iletişimi sağlar",
            ),
            CultureExample(
                title="El Öpme",
                description="Büyüklerin elini öpüp alnına götürme",
                significance="Saygı ve hürmetin fiziksel ifadesi",
            ),
        ),
        related_topics=("değerler", "aile_yapısı", "sosyal_ilişkiler", "din_inanç"),
    ),
    "yemek_kültürü": TopicProfile(
        overview="Türk mutfağı, Orta Asya'dan Anadolu'ya uzanan zengin bir kuliner geleneğin ürünüdür",
        key_elements=("Çeşitlilik ve zenginlik", "Mevsimsel yemekler", "Bölgesel özellikler", "Sosyal yemek kültürü", "Misafir ikramı"),
        traditional_aspects=(
            "Tandır ve ocak başı pişirme",
            "Kış hazırlıkları (turşu, reçel)",
            "Bayram yemekleri",
            "Düğün yemekleri",
            "Geleneksel tarifler",
        ),
        modern_adaptations=(
            "Restoran kültürü",
            "Fast food adaptasyonları",
            "Modern mutfak aletleri",
            "Televizyon yemek programları",
            "Sosyal medyada yemek paylaşımı",
        ),
        cultural_values=("Paylaşma", "Bereket", "Misafirperverlik", "Aile birliği", "Geleneklere bağlılık"),
        examples=(
            CultureExample(
                title="Çay Saati",
                description="Günün her saatinde çay içme geleneği",
                significance="Sosyal bağları güçlendirir, dinlenme ve sohbet fırsatı",
            ),
            CultureExample(
                title="Ramazan İftarları",
                description="Ramazan ayında toplu iftar yemekleri",
                significance="Toplumsal dayanışma ve paylaşımın ifadesi",
            ),
            CultureExample(
                title="Pazar Kahvaltısı",
                description="Hafta sonu ailece uzun ve zengin kahvaltı sofrası",
                significance="Aile bireylerini aynı sofrada buluşturur",
            ),
        ),
        related_topics=("gelenekler", "sosyal_ilişkiler", "din_inanç", "aile_yapısı"),
    ),
}


# -----------------------------------------------------------------------------
# Phrase dictionary for the translation fallback
# -----------------------------------------------------------------------------
_PHRASES: dict[str, dict[str, str]] = {
    "tr-en": {
        "merhaba": "hello",
        "çay": "tea",
        "misafir": "guest",
        "nazar": "evil eye",
        "hoş geldiniz": "welcome",
        "afiyet olsun": "bon appétit / enjoy your meal",
        "maşallah": "mashallah (expression of appreciation)",
        "inşallah": "god willing",
        "hayırlı olsun": "may it be blessed",
        "teşekkür ederim": "thank you",
        "günaydın": "good morning",
        "iyi akşamlar": "good evening",
        "nasılsınız": "how are you",
        "görüşürüz": "see you later",
    },
    "en-tr": {
        "hello": "merhaba",
        "tea": "çay",
        "guest": "misafir",
        "evil eye": "nazar",
        "welcome": "hoş geldiniz",
        "thank you": "teşekkür ederim",
        "please": "lütfen",
        "excuse me": "affedersiniz",
        "good morning": "günaydın",
        "good evening": "iyi akşamlar",
        "how are you": "nasılsınız",
        "see you later": "görüşürüz",
    },
}


# Ordered: notes are emitted in this order when several phrases match.
_IDIOM_NOTES: tuple[tuple[str, str], ...] = (
    ("afiyet olsun", "'Afiyet olsun' is said before or after meals, similar to 'bon appétit' but also used after eating to wish good health"),
    ("maşallah", "'Maşallah' is used to express appreciation and protect from evil eye, showing admiration without envy"),
    ("misafir", "In Turkish culture, guests are considered sacred and hospitality is extremely important - 'guest is God's trust'"),
    ("çay", "Tea is central to Turkish social life, offered to guests and consumed throughout the day as a social bonding activity"),
    ("nazar", "Evil eye belief is deeply rooted in Turkish culture, with blue beads used as protection against negative energy"),
)


class KnowledgeStore:
    """Read-only access to the curated fallback tables."""

    def __init__(
        self,
        cultural_notes: Optional[Mapping[str, CulturalNote]] = None,
        etymologies: Optional[Mapping[str, EtymologyEntry]] = None,
        concepts: Optional[Mapping[str, ConceptProfile]] = None,
        topics: Optional[Mapping[str, TopicProfile]] = None,
    ):
        self._cultural_notes = self._freeze(cultural_notes if cultural_notes is not None else _CULTURAL_NOTES)
        self._etymologies = self._freeze(etymologies if etymologies is not None else _ETYMOLOGIES)
        self._concepts = self._freeze(concepts if concepts is not None else _CONCEPTS)
        self._topics = self._freeze(topics if topics is not None else _TOPICS)
        self._phrases = MappingProxyType({
            pair: MappingProxyType({normalize_term(k): v for k, v in table.items()})
            for pair, table in _PHRASES.items()
        })

    @staticmethod
    def _freeze(table: Mapping) -> Mapping:
        return MappingProxyType({normalize_term(k): v for k, v in table.items()})

    def cultural_note(self, term: str) -> Optional[CulturalNote]:
        return self._cultural_notes.get(normalize_term(term))

    def etymology(self, term: str) -> Optional[EtymologyEntry]:
        """A private copy; the finding inside holds mutable lists."""
        entry = self._etymologies.get(normalize_term(term))
        return copy.deepcopy(entry) if entry is not None else None

    def concept(self, concept: str) -> Optional[ConceptProfile]:
        return self._concepts.get(normalize_term(concept))

    def topic(self, topic: str) -> Optional[TopicProfile]:
        return self._topics.get(normalize_term(topic))

    def phrase_translations(self, source_lang: str, target_lang: str) -> Mapping[str, str]:
        return self._phrases.get(f"{source_lang}-{target_lang}", MappingProxyType({}))

    def idiom_notes(self, text: str) -> list[str]:
        """Canned notes for every known idiom that occurs in `text`."""
        lowered = normalize_term(text)
        return [note for phrase, note in _IDIOM_NOTES if phrase in lowered]


_default_store: Optional[KnowledgeStore] = None


def default_store() -> KnowledgeStore:
    global _default_store
    if _default_store is None:
        _default_store = KnowledgeStore()
    return _default_store
