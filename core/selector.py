# =============================================================================
# core/selector.py  -  Random Term Selector
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Picks a word from a curated Turkish word pool for the "random word
#   analysis" feature, keeping visible repetition low across calls.
#
# TWO MODES:
#   - select_avoiding_repeats()  draws from the pool minus the words already
#                                returned; once the used set reaches 75% of
#                                the pool it is cleared first, so the pool is
#                                never permanently exhausted
#   - select_pure_random()       uniform over the whole pool, no state change
#
#   select() mixes the two, the same way the mobile client did.
#
# RANDOMNESS:
#   One random.SystemRandom (OS entropy) instead of blending several weak
#   signals.  Tests pass a seeded random.Random for determinism.
#
# OWNERSHIP:
#   The used set belongs to one selector instance.  Build it once per server
#   (tools/registry.ToolContext) or per client and pass it around explicitly.
# =============================================================================

import logging
import math
import random
import time
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

AVOID_REPEATS = "avoid_repeats"
PURE_RANDOM = "pure_random"

_WORDS_BY_CATEGORY = {
    "yaygın": (
        "kitap", "masa", "pencere", "kapı", "yol", "ev", "su", "ağaç", "çiçek", "güneş",
        "ay", "yıldız", "göl", "nehir", "köprü", "şehir", "köy", "bahçe", "park", "meydan",
        "sokak", "cadde", "bina", "oda", "salon",
    ),
    "kültür": (
        "misafir", "bereket", "nazar", "afiyet", "vefa", "sabır", "huzur", "gurbet", "hasret", "özlem",
        "memleket", "vatan", "bayrak", "millet", "devlet", "tarih", "gelenek", "örf", "adet", "töre",
        "kahvehane", "çayhane", "mahalle", "komşu", "hemşehri", "dostluk", "kardeşlik", "birlik", "beraberlik", "dayanışma",
    ),
    "doğa": (
        "bahar", "yağmur", "deniz", "dağ", "orman", "yaprak", "bulut", "rüzgar", "toprak", "gökyüzü",
        "kar", "buz", "çiğ", "sis", "fırtına", "şimşek", "gök", "çimen", "ot", "çam",
        "meşe", "kavak", "söğüt", "çınar", "lale", "gül", "karanfil", "menekşe", "papatya",
    ),
    "duygu": (
        "sevgi", "umut", "sevinç", "hüzün", "merak", "korku", "öfke", "şaşkınlık", "mutluluk", "üzüntü",
        "keder", "acı", "elem", "dert", "tasa", "kaygı", "endişe", "heyecan", "coşku", "gurur",
        "onur", "şeref", "haysiyet", "izzet", "merhamet", "şefkat", "sevecenlik", "nezaket", "incelik",
    ),
    "soyut": (
        "zaman", "hayat", "ölüm", "rüya", "gerçek", "hayal", "düşünce", "akıl", "kalp", "ruh",
        "vicdan", "izan", "şuur", "bilinç", "hafıza", "hatıra", "anı", "gelecek", "geçmiş", "şimdi",
        "ebediyet", "sonsuzluk", "yokluk", "varlık", "hiçlik", "bilgi", "hikmet", "irfan", "marifet", "feraset",
    ),
    "gelenek": (
        "han", "kervan", "çarşı", "hamam", "cami", "medrese", "divan", "şair", "aşık", "hikaye",
        "masal", "destan", "türkü", "ninni", "ağıt", "koşma", "gazel", "kaside", "rubai", "mesnevi",
        "saz", "bağlama", "zurna", "davul", "def", "ney", "kanun", "ud", "kemençe", "tambur",
    ),
    "yemek": (
        "pilav", "börek", "kebap", "baklava", "lokum", "helva", "meze", "dolma", "sarma", "mantı",
        "çorba", "yoğurt", "peynir", "bal", "reçel", "turşu", "salça", "bulgur", "mercimek", "nohut",
        "fasulye", "pirinç", "ekmek", "pide", "simit", "poğaça", "açma", "çörek", "tatlı", "çay",
    ),
    "aile": (
        "anne", "baba", "kardeş", "dede", "nine", "teyze", "amca", "hala", "dayı", "yeğen",
        "torun", "gelin", "damat", "kaynana", "kayınpeder", "görümce", "baldız", "enişte", "yenge", "elti",
        "çocuk", "bebek", "genç", "yaşlı", "abi", "abla", "evlat",
    ),
    "renk": (
        "kırmızı", "mavi", "yeşil", "sarı", "mor", "turuncu", "pembe", "siyah", "beyaz", "gri",
        "kahverengi", "lacivert", "bordo", "eflatun", "turkuaz", "altın", "gümüş", "bakır", "demir", "kara",
    ),
    "hayvan": (
        "aslan", "kartal", "kurt", "ayı", "geyik", "tavşan", "kedi", "köpek", "at", "kuş",
        "balık", "kelebek", "arı", "karınca", "böcek", "yılan", "kaplumbağa", "kurbağa", "deve", "koyun",
    ),
    "sanat": (
        "şiir", "roman", "oyun", "tiyatro", "sinema", "müzik", "resim", "heykel", "dans", "sergi",
        "müze", "kütüphane", "yazı", "kelime", "cümle", "eser", "yapıt", "sanat", "güzellik", "estetik",
    ),
    "zaman": (
        "saniye", "dakika", "saat", "gün", "hafta", "yıl", "asır", "çağ", "devir", "ilkbahar",
        "yaz", "sonbahar", "kış", "sabah", "öğle", "akşam", "gece", "şafak", "alacakaranlık", "vakit",
        "an", "lahza", "dem",
    ),
}


def default_word_pool() -> tuple[str, ...]:
    """All curated words, first occurrence wins when a word repeats."""
    words = (w for group in _WORDS_BY_CATEGORY.values() for w in group)
    return tuple(dict.fromkeys(words))


class RandomTermSelector:
    """Stateful word picker with a self-resetting exclusion set."""

    def __init__(
        self,
        pool: Optional[Iterable[str]] = None,
        rng: Optional[random.Random] = None,
        reset_ratio: float = 0.75,
    ):
        self.pool = tuple(dict.fromkeys(pool)) if pool is not None else default_word_pool()
        if not self.pool:
            raise ValueError("word pool must not be empty")
        self._rng = rng or random.SystemRandom()
        self.reset_threshold = math.ceil(reset_ratio * len(self.pool))
        self.used: set[str] = set()
        self.last_selected_at: Optional[float] = None

    def working_pool(self) -> list[str]:
        """A shuffled copy of the pool, for log output only."""
        words = list(self.pool)
        self._rng.shuffle(words)
        return words

    def select_avoiding_repeats(self) -> str:
        if len(self.used) >= self.reset_threshold:
            logger.info(
                "used %d/%d words (%d%%), resetting",
                len(self.used), len(self.pool), round(100 * len(self.used) / len(self.pool)),
            )
            self.used.clear()

        candidates = [w for w in self.pool if w not in self.used]
        if not candidates:
            candidates = list(self.pool)
        logger.debug("%d unused, %d used, %d total", len(candidates), len(self.used), len(self.pool))

        word = self._rng.choice(candidates)
        self.used.add(word)
        self.last_selected_at = time.time()
        return word

    def select_pure_random(self) -> str:
        return self._rng.choice(self.pool)

    def select(self, unique_probability: float = 0.5) -> tuple[str, str]:
        """Pick a word with one of the two strategies; returns (word, strategy)."""
        if self._rng.random() < unique_probability:
            word, strategy = self.select_avoiding_repeats(), AVOID_REPEATS
        else:
            word, strategy = self.select_pure_random(), PURE_RANDOM
        logger.info("selected %r (%s), sample of pool: %s", word, strategy, self.working_pool()[:5])
        return word, strategy
