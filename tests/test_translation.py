"""Tests for the translateText orchestrator."""

import pytest

from core.models import ProviderResult
from core.translation import FALLBACK_SOURCE, IDENTITY_SOURCE, phrase_translate, translate_text
from tests.helpers import providers_with, returning


def deepl_returns(text):
    return providers_with(translate=returning(ProviderResult.success("deepl", {"translations": [{"text": text}]})))


class TestFallbackDictionary:
    """Translation service unavailable."""

    @pytest.mark.asyncio
    async def test_known_phrase(self, offline_providers, store):
        """An exact dictionary key translates through the fallback."""
        result = await translate_text("merhaba", "tr", "en", providers=offline_providers, store=store)
        assert result.translated_text == "hello"
        assert result.translation_found is True
        assert result.translation_source == FALLBACK_SOURCE

    @pytest.mark.asyncio
    async def test_case_insensitive_replacement(self, offline_providers, store):
        """Phrases are found inside longer, mixed-case text."""
        result = await translate_text("Hello, welcome!", "en", "tr", providers=offline_providers, store=store)
        assert result.translated_text == "merhaba, hoş geldiniz!"

    @pytest.mark.asyncio
    async def test_unknown_text_marked_not_found(self, offline_providers, store):
        """No phrase matched: explicit marker, never a fake translation."""
        result = await translate_text("qwxz plop", "tr", "en", providers=offline_providers, store=store)
        assert result.translated_text == "[Çeviri bulunamadı: qwxz plop]"
        assert result.translation_found is False
        assert result.to_dict()["translationFound"] is False

    def test_longest_phrase_first(self):
        """A longer phrase wins over its prefix."""
        phrases = {"evil": "kötü", "evil eye": "nazar"}
        assert phrase_translate("The Evil Eye", phrases) == "the nazar"

    def test_no_phrases(self):
        """An empty table never matches."""
        assert phrase_translate("merhaba", {}) is None


class TestTranslationService:
    """Translation service available."""

    @pytest.mark.asyncio
    async def test_service_result_used(self, store):
        """The service answer wins; the fallback becomes an alternative."""
        result = await translate_text("merhaba", "tr", "en", providers=deepl_returns("Hi"), store=store)
        assert result.translated_text == "Hi"
        assert result.translation_source == "DeepL API"
        assert result.alternative_translations == ["hello"]

    @pytest.mark.asyncio
    async def test_empty_service_answer_falls_back(self, store):
        """A service answer without text is treated as no answer."""
        providers = providers_with(translate=returning(ProviderResult.success("deepl", {"translations": []})))
        result = await translate_text("merhaba", "tr", "en", providers=providers, store=store)
        assert result.translated_text == "hello"
        assert result.translation_source == FALLBACK_SOURCE


class TestCulturalNotes:
    """Idiom notes are independent of translation success."""

    @pytest.mark.asyncio
    async def test_misafir_note_on_failure(self, offline_providers, store):
        """Fallback path still carries the hospitality note."""
        result = await translate_text("misafirimiz var", "tr", "en", providers=offline_providers, store=store)
        assert any("hospitality" in n for n in result.cultural_notes)

    @pytest.mark.asyncio
    async def test_misafir_note_on_success(self, store):
        """Service path carries it as well."""
        result = await translate_text(
            "misafirimiz var", "tr", "en", providers=deepl_returns("we have guests"), store=store
        )
        assert any("hospitality" in n for n in result.cultural_notes)

    @pytest.mark.asyncio
    async def test_notes_can_be_disabled(self, offline_providers, store):
        """preserveCulturalContext=False omits the notes."""
        result = await translate_text(
            "misafir", "tr", "en", preserve_cultural_context=False, providers=offline_providers, store=store
        )
        assert "culturalNotes" not in result.to_dict()


class TestIdentity:
    """Same source and target language."""

    @pytest.mark.asyncio
    async def test_identity(self, store):
        """The text is returned unchanged without calling the service."""
        calls = []
        providers = providers_with(translate=returning(ProviderResult.success("deepl", {}), calls))
        result = await translate_text("Merhaba", "tr", "tr", providers=providers, store=store)
        assert result.translated_text == "Merhaba"
        assert result.translation_source == IDENTITY_SOURCE
        assert calls == []
