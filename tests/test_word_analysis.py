"""Tests for the analyzeTurkishWord orchestrator."""

import asyncio

import pytest

from core.etymology import cli_unreachable, tree_unreachable
from core.models import ProviderResult
from core.provenance import NO_DATA
from core.word_analysis import analyze_word
from tests.helpers import providers_with, returning

DICTIONARY_PAYLOAD = {
    "word": "misafir",
    "lisan": "Arapça",
    "means": [
        {"anlam": "konuk", "orneklerListe": ["Misafir geldi.", "Misafir ağırladık."]},
        {"anlam": "yolcu", "orneklerListe": ["Yolda misafiriz."]},
    ],
    "compounds": ["a", "b", "c", "d", "e", "f", "g"],
    "compilation": [{"madde": "mihman", "anlam": "misafir", "yer": "Kars"}],
}


class TestAllProvidersUnavailable:
    """Every adapter down: a well-formed result, never an exception."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("word", ["misafir", "ÇAY", "qwxz", "  "])
    async def test_does_not_raise(self, word, offline_providers, store):
        """The wire shape is complete for any term."""
        data = (await analyze_word(word, providers=offline_providers, store=store)).to_dict()
        for key in ("word", "tdkData", "nisanyanData", "examples", "relatedConcepts", "dataSource"):
            assert key in data
        assert data["tdkData"]["available"] is False
        assert data["examples"] == []
        assert data["relatedConcepts"] == []

    @pytest.mark.asyncio
    async def test_unreachable_etymology_rendered(self, offline_providers, store):
        """Unreachable paths become localized messages."""
        data = (await analyze_word("misafir", providers=offline_providers, store=store)).to_dict()
        nisanyan = data["nisanyanData"]
        assert nisanyan["cliOutput"] == cli_unreachable("misafir")
        assert nisanyan["etymologyTree"] == tree_unreachable("misafir")
        assert nisanyan["apiData"]["isUnsuccessful"] is True

    @pytest.mark.asyncio
    async def test_local_cultural_note(self, offline_providers, store):
        """Known words still get their cultural note; provenance says so."""
        data = (await analyze_word("Misafir", providers=offline_providers, store=store)).to_dict()
        assert "misafirperverlik" in data["culturalContext"]["significance"]
        assert data["dataSource"].startswith("Yerel veritabanı")
        assert "TDK Resmi API (7 Sözlük)" in data["dataSource"]  # listed as unreachable
        assert "DeepL API" in data["dataSource"]

    @pytest.mark.asyncio
    async def test_unknown_word_no_data(self, offline_providers, store):
        """Nothing anywhere: explicit no-data provenance."""
        data = (await analyze_word("qwxz", providers=offline_providers, store=store)).to_dict()
        assert data["dataSource"] == NO_DATA
        assert "culturalContext" not in data


class TestWithProviderData:
    """Providers that answer."""

    @pytest.mark.asyncio
    async def test_derived_fields(self, store):
        """Examples from the first meaning, five related concepts."""
        providers = providers_with(dictionary=returning(ProviderResult.success("tdk", DICTIONARY_PAYLOAD)))
        data = (await analyze_word("misafir", providers=providers, store=store)).to_dict()

        assert data["tdkData"]["available"] is True
        assert data["examples"] == [
            {"sentence": "Misafir geldi.", "translation": "Example: Misafir geldi.", "context": "TDK örnek cümle"},
            {"sentence": "Misafir ağırladık.", "translation": "Example: Misafir ağırladık.", "context": "TDK örnek cümle"},
        ]
        assert data["relatedConcepts"] == ["a", "b", "c", "d", "e"]
        assert data["dataSource"].startswith("TDK Resmi API (7 Sözlük)")

    @pytest.mark.asyncio
    async def test_dictionary_regional_words_win(self, store):
        """Regional variations come from the dictionary when it has them."""
        providers = providers_with(dictionary=returning(ProviderResult.success("tdk", DICTIONARY_PAYLOAD)))
        data = (await analyze_word("misafir", providers=providers, store=store)).to_dict()
        assert data["culturalContext"]["regionalVariations"] == ["Kars: mihman"]

    @pytest.mark.asyncio
    async def test_translation_feeds_english_lookup(self, store):
        """The English dictionary is asked about the translation."""
        english_calls = []
        providers = providers_with(
            translate=returning(ProviderResult.success("deepl", {"translations": [{"text": "guest"}]})),
            english_definitions=returning(
                ProviderResult.success(
                    "oxford",
                    {"results": [{"lexicalEntries": [{"entries": [{"senses": [{"definitions": ["a visitor"]}]}]}]}]},
                ),
                english_calls,
            ),
        )
        data = (await analyze_word("misafir", providers=providers, store=store)).to_dict()
        assert english_calls == [("guest",)]
        assert data["oxfordDefinitions"] == ["a visitor"]
        assert "Oxford Dictionary" in data["dataSource"]
        assert "DeepL API" in data["dataSource"]

    @pytest.mark.asyncio
    async def test_translation_credited(self, store):
        """A translated word is not reported as no-data."""
        providers = providers_with(
            translate=returning(ProviderResult.success("deepl", {"translations": [{"text": "guest"}]})),
            english_definitions=returning(ProviderResult.success("oxford", None)),
        )
        data = (await analyze_word("qwxz", providers=providers, store=store)).to_dict()
        assert data["dataSource"].startswith("DeepL API")

    @pytest.mark.asyncio
    async def test_unsuccessful_etymology_api_not_credited(self, store):
        """An isUnsuccessful reply is found-nothing, not data."""
        payload = {"isUnsuccessful": True, "words": []}
        providers = providers_with(etymology_api=returning(ProviderResult.success("nisanyan-api", payload)))
        data = (await analyze_word("qwxz", providers=providers, store=store)).to_dict()
        assert data["dataSource"] == NO_DATA
        assert "apiData" not in data["nisanyanData"]

    @pytest.mark.asyncio
    async def test_empty_etymology_distinct_from_unreachable(self, store):
        """Ran-but-empty paths are omitted, not rendered as unreachable."""
        providers = providers_with(
            etymology_plain=returning(ProviderResult.success("nisanyan-cli", None)),
            etymology_tree=returning(ProviderResult.success("nisanyan-tree", None)),
        )
        data = (await analyze_word("qwxz", providers=providers, store=store)).to_dict()
        assert "cliOutput" not in data["nisanyanData"]
        assert "etymologyTree" not in data["nisanyanData"]
        assert "apiData" in data["nisanyanData"]

    @pytest.mark.asyncio
    async def test_dictionary_empty_but_reachable(self, store):
        """Found nothing is available=True with empty sections."""
        providers = providers_with(dictionary=returning(ProviderResult.success("tdk", None)))
        data = (await analyze_word("qwxz", providers=providers, store=store)).to_dict()
        assert data["tdkData"]["available"] is True
        assert data["tdkData"]["meanings"] == []

    @pytest.mark.asyncio
    async def test_etymology_skipped(self, store):
        """includeEtymology=False consults no etymology path."""
        calls = []
        providers = providers_with(etymology_plain=returning(ProviderResult.success("nisanyan-cli", "x"), calls))
        data = (await analyze_word("çay", include_etymology=False, providers=providers, store=store)).to_dict()
        assert calls == []
        assert "nisanyanData" not in data

    @pytest.mark.asyncio
    async def test_cultural_context_skipped(self, offline_providers, store):
        """includeCulturalContext=False omits the note."""
        data = (
            await analyze_word("çay", include_cultural_context=False, providers=offline_providers, store=store)
        ).to_dict()
        assert "culturalContext" not in data


class TestConcurrency:
    """Dictionary and etymology calls run together."""

    @pytest.mark.asyncio
    async def test_dictionary_and_etymology_overlap(self, store):
        """The dictionary waits on an event only the etymology call sets."""
        started = asyncio.Event()

        async def dictionary(term):
            await started.wait()
            return ProviderResult.success("tdk", None)

        async def plain(term):
            started.set()
            return ProviderResult.success("nisanyan-cli", "köken")

        providers = providers_with(dictionary=dictionary, etymology_plain=plain)
        result = await asyncio.wait_for(analyze_word("çay", providers=providers, store=store), timeout=2)
        assert result.nisanyan_data.cli_output == "köken"
