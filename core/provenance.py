# =============================================================================
# core/provenance.py  -  "dataSource" strings
# =============================================================================
#
# Every tool result carries a human-readable dataSource telling the caller
# which sources actually contributed data and which were skipped or fell
# back to the local tables.  A source is listed as a contributor only when
# its ProviderResult has data; a source that was unreachable is listed as
# such, so "real" and "synthesized" answers stay distinguishable.
#
# Examples:
#   "TDK Resmi API (7 Sözlük) + Nisanyan Etimoloji + Oxford Dictionary"
#   "Yerel veritabanı (ulaşılamayan: TDK, Nisanyan Etimoloji)"
#   "Veri bulunamadı"
#
# When nothing contributed, the string is exactly NO_DATA; unreachable
# sources are not appended to it.
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional

from core.models import ProviderResult

DICTIONARY_LABEL = "TDK Resmi API (7 Sözlük)"
DICTIONARY_SHORT_LABEL = "TDK"
ETYMOLOGY_LABEL = "Nisanyan Etimoloji"
ETYMOLOGY_BOTH_LABEL = "Nisanyan Etimoloji Sözlüğü (CLI + API)"
ENGLISH_DICTIONARY_LABEL = "Oxford Dictionary"
TRANSLATION_LABEL = "DeepL API"
LOCAL_LABEL = "Yerel veritabanı"
NO_DATA = "Veri bulunamadı"


@dataclass
class Provenance:
    contributed: list[str] = field(default_factory=list)
    unreachable: list[str] = field(default_factory=list)
    used_local: bool = False

    def record(self, label: str, *results: Optional[ProviderResult]) -> bool:
        """Note one source, backed by one or more provider calls.

        The source contributed if any call returned data.  It is unreachable
        only if every call failed.  Returns True when it contributed.
        """
        results = [r for r in results if r is not None]
        if not results:
            return False
        if any(r.has_data for r in results):
            self.add(label)
            return True
        if all(not r.ok for r in results) and label not in self.unreachable:
            self.unreachable.append(label)
        return False

    def add(self, label: str) -> None:
        if label not in self.contributed:
            self.contributed.append(label)

    def local(self) -> None:
        self.used_local = True

    def render(self) -> str:
        parts = list(self.contributed)
        if self.used_local:
            parts.append(LOCAL_LABEL)
        if not parts:
            return NO_DATA
        text = " + ".join(parts)
        if self.unreachable:
            text += f" (ulaşılamayan: {', '.join(self.unreachable)})"
        return text
