"""Tests for the provider adapters."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from core.config import Settings
from core.models import ProviderStatus
from core.providers import (
    ProviderSet,
    english_definitions,
    etymology_api,
    etymology_plain,
    etymology_tree,
    lookup_dictionary,
    translate,
)

LIVE = Settings(use_live_providers=True, dictionary_timeout=0.5, provider_timeout=0.5)


def mock_http_client(mock_client_class, status_code=200, json_data=None, method="get"):
    """Configure a patched httpx.AsyncClient; returns the inner client."""
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.json.return_value = json_data

    mock_client = MagicMock()
    setattr(mock_client, method, AsyncMock(return_value=mock_response))
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client_class.return_value = mock_client
    return mock_client


def mock_process(stdout=b"", stderr=b"", returncode=0):
    process = MagicMock()
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.returncode = returncode
    return process


class TestLookupDictionary:
    """National dictionary adapter."""

    @pytest.mark.asyncio
    async def test_success(self):
        """JSON payload is returned untouched."""
        payload = [{"madde": "çay", "anlamlarListe": [{"anlam": "içecek"}]}]
        with patch("httpx.AsyncClient") as mock_client_class:
            client = mock_http_client(mock_client_class, json_data=payload)
            result = await lookup_dictionary("çay", LIVE)

        assert result.status is ProviderStatus.SUCCESS
        assert result.payload == payload
        assert client.get.call_args.kwargs["params"] == {"ara": "çay"}

    @pytest.mark.asyncio
    async def test_no_result_is_empty_success(self):
        """TDK's {"error": ...} body means ran, found nothing."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_http_client(mock_client_class, json_data={"error": "Sonuç bulunamadı"})
            result = await lookup_dictionary("qwxz", LIVE)

        assert result.ok
        assert result.payload is None
        assert not result.has_data

    @pytest.mark.asyncio
    async def test_http_error_is_unavailable(self):
        """Non-200 becomes Unavailable with the status in the reason."""
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_http_client(mock_client_class, status_code=503)
            result = await lookup_dictionary("çay", LIVE)

        assert result.status is ProviderStatus.UNAVAILABLE
        assert "503" in result.reason

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self):
        """Connection failures never raise."""
        with patch("httpx.AsyncClient") as mock_client_class:
            client = mock_http_client(mock_client_class)
            client.get = AsyncMock(side_effect=httpx.ConnectError("refused"))
            result = await lookup_dictionary("çay", LIVE)

        assert result.status is ProviderStatus.UNAVAILABLE

    @pytest.mark.asyncio
    async def test_timeout(self):
        """A call slower than the budget becomes Timeout."""

        async def slow(*args, **kwargs):
            await asyncio.sleep(5)

        settings = Settings(dictionary_timeout=0.05)
        with patch("httpx.AsyncClient") as mock_client_class:
            client = mock_http_client(mock_client_class)
            client.get = AsyncMock(side_effect=slow)
            result = await lookup_dictionary("çay", settings)

        assert result.status is ProviderStatus.TIMEOUT
        assert not result.ok

    @pytest.mark.asyncio
    async def test_offline(self):
        """Live providers disabled: no I/O at all."""
        with patch("httpx.AsyncClient") as mock_client_class:
            result = await lookup_dictionary("çay", Settings(use_live_providers=False))

        assert result.status is ProviderStatus.UNAVAILABLE
        assert result.reason == "live providers disabled"
        mock_client_class.assert_not_called()


class TestEtymologyCli:
    """Plain and tree CLI adapters."""

    @pytest.mark.asyncio
    async def test_plain_output(self):
        """Stdout is stripped and returned."""
        process = mock_process(stdout="çay: Çince cha\n".encode())
        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)) as spawn:
            result = await etymology_plain("çay", LIVE)

        assert result.payload == "çay: Çince cha"
        assert spawn.call_args.args[:3] == ("nis", "çay", "--plain")

    @pytest.mark.asyncio
    async def test_tree_flags(self):
        """The tree view passes --tree --plain."""
        process = mock_process(stdout=b"tree")
        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)) as spawn:
            result = await etymology_tree("çay", LIVE)

        assert result.payload == "tree"
        assert spawn.call_args.args[:4] == ("nis", "çay", "--tree", "--plain")

    @pytest.mark.asyncio
    async def test_empty_output_is_empty_success(self):
        """Ran, printed nothing: success without data."""
        process = mock_process(stdout=b"  \n")
        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            result = await etymology_plain("qwxz", LIVE)

        assert result.ok
        assert result.payload is None

    @pytest.mark.asyncio
    async def test_nonzero_exit_is_unavailable(self):
        """A failing CLI is unavailable, not empty."""
        process = mock_process(stderr=b"boom", returncode=2)
        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            result = await etymology_plain("çay", LIVE)

        assert result.status is ProviderStatus.UNAVAILABLE
        assert "exit status 2" in result.reason

    @pytest.mark.asyncio
    async def test_timeout_kills_and_reaps_child(self):
        """A hung CLI is killed and waited for before the timeout is reported."""

        async def hang():
            await asyncio.sleep(10)

        process = mock_process()
        process.communicate = AsyncMock(side_effect=hang)
        process.kill = MagicMock()
        process.wait = AsyncMock(return_value=-9)
        settings = Settings(use_live_providers=True, provider_timeout=0.05)
        with patch("asyncio.create_subprocess_exec", new=AsyncMock(return_value=process)):
            result = await etymology_plain("çay", settings)

        assert result.status is ProviderStatus.TIMEOUT
        process.kill.assert_called_once()
        process.wait.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_binary_is_unavailable(self):
        """FileNotFoundError from the spawn is contained."""
        spawn = AsyncMock(side_effect=FileNotFoundError("nis"))
        with patch("asyncio.create_subprocess_exec", new=spawn):
            result = await etymology_plain("çay", LIVE)

        assert result.status is ProviderStatus.UNAVAILABLE


class TestEtymologyApi:
    """Etymology web API adapter."""

    @pytest.mark.asyncio
    async def test_url_and_session(self):
        """The term is quoted into the path, session=1 in the query."""
        with patch("httpx.AsyncClient") as mock_client_class:
            client = mock_http_client(mock_client_class, json_data={"isUnsuccessful": False, "words": []})
            result = await etymology_api("çay", LIVE)

        assert result.ok
        url = client.get.call_args.args[0]
        assert url.endswith("/%C3%A7ay")
        assert client.get.call_args.kwargs["params"] == {"session": 1}


class TestTranslate:
    """Translation adapter."""

    @pytest.mark.asyncio
    async def test_missing_key(self):
        """No key configured: unavailable without a request."""
        with patch("httpx.AsyncClient") as mock_client_class:
            result = await translate("merhaba", "tr", "en", LIVE)

        assert result.status is ProviderStatus.UNAVAILABLE
        assert "DEEPL_API_KEY" in result.reason
        mock_client_class.assert_not_called()

    @pytest.mark.asyncio
    async def test_form_post(self):
        """Form fields are upper-cased, key goes in the header."""
        settings = Settings(translation_api_key="secret", provider_timeout=0.5)
        with patch("httpx.AsyncClient") as mock_client_class:
            client = mock_http_client(
                mock_client_class, json_data={"translations": [{"text": "hello"}]}, method="post"
            )
            result = await translate("merhaba", "tr", "en", settings)

        assert result.payload == {"translations": [{"text": "hello"}]}
        kwargs = client.post.call_args.kwargs
        assert kwargs["data"] == {"text": "merhaba", "source_lang": "TR", "target_lang": "EN"}
        assert kwargs["headers"]["Authorization"] == "DeepL-Auth-Key secret"


class TestEnglishDefinitions:
    """English dictionary adapter."""

    @pytest.mark.asyncio
    async def test_no_input_term(self):
        """An upstream translation failure leaves nothing to look up."""
        result = await english_definitions(None, LIVE)
        assert result.status is ProviderStatus.UNAVAILABLE
        assert result.reason == "no input term"

    @pytest.mark.asyncio
    async def test_credentials_sent(self):
        """app_id and app_key headers, lowercased term."""
        settings = Settings(oxford_app_id="id", oxford_app_key="key", provider_timeout=0.5)
        with patch("httpx.AsyncClient") as mock_client_class:
            client = mock_http_client(mock_client_class, json_data={"results": []})
            await english_definitions("Guest", settings)

        assert client.get.call_args.args[0].endswith("/entries/en-gb/guest")
        assert client.get.call_args.kwargs["headers"] == {"app_id": "id", "app_key": "key"}


class TestProviderSet:
    """Adapter bundles."""

    @pytest.mark.asyncio
    async def test_offline_set(self):
        """Every offline adapter reports unavailable."""
        providers = ProviderSet.offline()
        results = await asyncio.gather(
            providers.dictionary("çay"),
            providers.etymology_plain("çay"),
            providers.etymology_tree("çay"),
            providers.etymology_api("çay"),
            providers.translate("çay", "tr", "en"),
            providers.english_definitions("tea"),
        )
        assert all(r.status is ProviderStatus.UNAVAILABLE for r in results)

    @pytest.mark.asyncio
    async def test_default_set_binds_settings(self):
        """Adapters of the default set use the given settings."""
        providers = ProviderSet.default(Settings(use_live_providers=False))
        result = await providers.dictionary("çay")
        assert result.reason == "live providers disabled"
