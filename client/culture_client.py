# =============================================================================
# client/culture_client.py  -  Remote client for the agent HTTP boundary
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Lets a remote caller (the mobile app, a script) talk to the agent served
#   by tools/http_app.py without knowing in advance where it runs.
#
# ENDPOINT DISCOVERY:
#   The client holds an ordered list of candidate base URLs.  On first use
#   it probes GET <base>/health on each (3 s timeout) and remembers the
#   first one answering 200 for the rest of its lifetime.  If none answers,
#   it settles on the first candidate anyway: some networks fail the probe
#   but let real requests through.
#
# FAILURE MODES OF send_message():
#   - transport failure (refused, unreachable, timeout)  -> demo answer,
#     success=True, marked with demo=True
#   - HTTP 404                                            -> "agent not found"
#   - HTTP >= 500                                         -> "server error"
#   Nothing raises out of send_message().
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence
from urllib.parse import quote

import httpx

from core.config import DEFAULT_CLIENT_ENDPOINTS
from core.errors import EndpointUnavailableError
from core.selector import RandomTermSelector

logger = logging.getLogger(__name__)

AGENT_NAME = "Turkish Culture Expert"
AGENT_NOT_FOUND = "Turkish Culture Agent bulunamadı. Agent'ın doğru şekilde yapılandırıldığından emin olun."
SERVER_ERROR = "Sunucu hatası. Lütfen daha sonra tekrar deneyin."


@dataclass
class AgentResponse:
    success: bool
    data: Any = None
    error: Optional[str] = None
    demo: bool = False


def find_agent_key(agents: Any) -> Optional[str]:
    """The key of the culture agent in an /api/agents map, else the first key."""
    if not isinstance(agents, dict) or not agents:
        return None
    for key, info in agents.items():
        name = info.get("name", "") if isinstance(info, dict) else ""
        haystack = f"{key} {name}".lower()
        if "turkish" in haystack or "culture" in haystack:
            return key
    return next(iter(agents))


def demo_response(message: str) -> AgentResponse:
    lowered = message.lower()
    if "rastgele" in lowered or "random" in lowered:
        heading = "Rastgele kelime analizi (demo)"
    else:
        heading = "Turkish Culture Expert (demo)"
    text = (
        f"🇹🇷 **{heading}**\n\n"
        f"**Sorunuz:** \"{message}\"\n\n"
        "Sunucuya şu anda ulaşılamıyor; bu yanıt cihaz üzerinde üretildi.\n\n"
        "Gerçek yanıt için:\n"
        "1. Turkish Culture sunucusu çalışıyor olmalı (python main.py serve)\n"
        "2. Cihaz ve sunucu aynı ağda olmalı\n"
        "3. 4111 numaralı port erişilebilir olmalı\n\n"
        "Yanıtlar TDK, Nisanyan Etimoloji Sözlüğü, DeepL ve Oxford Dictionary "
        "kaynaklarından derlenir."
    )
    return AgentResponse(success=True, data=text, demo=True)


class CultureClient:
    """HTTP client with one cached working endpoint per instance."""

    def __init__(
        self,
        endpoints: Optional[Sequence[str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        probe_timeout: float = 3.0,
        request_timeout: float = 30.0,
    ):
        self.endpoints = tuple(e.rstrip("/") for e in (endpoints or DEFAULT_CLIENT_ENDPOINTS))
        if not self.endpoints:
            raise ValueError("at least one endpoint is required")
        self.probe_timeout = probe_timeout
        self.request_timeout = request_timeout
        self.working_endpoint: Optional[str] = None
        self._transport = transport

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    async def _probe(self, url: str) -> bool:
        try:
            async with self._client(self.probe_timeout) as client:
                response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.debug("probe %s failed: %s", url, exc)
            return False
        return response.status_code == 200

    async def find_working_endpoint(self) -> str:
        if self.working_endpoint is not None:
            return self.working_endpoint

        for endpoint in self.endpoints:
            logger.info("testing endpoint %s", endpoint)
            if await self._probe(f"{endpoint}/health"):
                logger.info("working endpoint found: %s", endpoint)
                self.working_endpoint = endpoint
                return endpoint

        logger.warning("no endpoint answered the health probe, using %s", self.endpoints[0])
        self.working_endpoint = self.endpoints[0]
        return self.working_endpoint

    async def list_agents(self) -> Optional[dict]:
        endpoint = await self.find_working_endpoint()
        try:
            async with self._client(10.0) as client:
                response = await client.get(f"{endpoint}/api/agents")
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("failed to list agents: %s", exc)
            return None

    async def _generate(self, endpoint: str, path: str, message: str) -> Any:
        body = {"messages": [{"role": "user", "content": message}]}
        try:
            async with self._client(self.request_timeout) as client:
                response = await client.post(f"{endpoint}{path}", json=body)
        except httpx.HTTPError as exc:
            raise EndpointUnavailableError(f"{path}: {exc}") from exc
        if response.status_code >= 400:
            raise EndpointUnavailableError(f"{path}: HTTP {response.status_code}", response.status_code)
        try:
            data = response.json()
        except ValueError:
            return response.text
        if isinstance(data, dict) and data.get("text"):
            return data["text"]
        return data

    async def send_message(self, message: str) -> AgentResponse:
        endpoint = await self.find_working_endpoint()
        agent_id = find_agent_key(await self.list_agents())
        if agent_id is None:
            logger.warning("no agents found at %s", endpoint)
            return demo_response(message)

        paths = [f"/api/agents/{quote(agent_id, safe='')}/generate"]
        if agent_id != quote(agent_id, safe=""):
            paths.append(f"/api/agents/{agent_id}/generate")

        last_error: Optional[EndpointUnavailableError] = None
        for path in paths:
            try:
                return AgentResponse(success=True, data=await self._generate(endpoint, path, message))
            except EndpointUnavailableError as exc:
                logger.info("path failed: %s", exc)
                last_error = exc

        status = last_error.status_code if last_error else None
        if status == 404:
            return AgentResponse(success=False, error=AGENT_NOT_FOUND)
        if status is not None and status >= 500:
            return AgentResponse(success=False, error=SERVER_ERROR)
        return demo_response(message)

    async def check_server_status(self) -> bool:
        """Health, then root, then /api.

        The first path that answers decides (200 means up).  Only when none
        of them can be reached at all is the answer an optimistic True.
        """
        endpoint = await self.find_working_endpoint()
        async with self._client(self.probe_timeout) as client:
            for path in ("/health", "/", "/api"):
                try:
                    response = await client.get(f"{endpoint}{path}")
                except httpx.HTTPError as exc:
                    logger.debug("status check %s failed: %s", path, exc)
                    continue
                return response.status_code == 200
        logger.warning("server status unknown, assuming reachable")
        return True

    # -------------------------------------------------------------------------
    # Prompt helpers
    # -------------------------------------------------------------------------
    async def analyze_word(self, word: str) -> AgentResponse:
        return await self.send_message(
            f'"{word}" kelimesini detaylı analiz et. TDK anlamlarını, örnek cümleleri, '
            "etimolojik kökenini ve kültürel bağlamını açık başlıklar altında düzenle."
        )

    async def translate_text(self, text: str, source_lang: str = "tr", target_lang: str = "en") -> AgentResponse:
        source = "Türkçeden" if source_lang == "tr" else "İngilizceden"
        target = "Türkçeye" if target_lang == "tr" else "İngilizceye"
        return await self.send_message(
            f'"{text}" ifadesini {source} {target} çevir. Ana çeviriyi, alternatifleri '
            "ve kültürel notları ekle."
        )

    async def get_etymology(self, word: str) -> AgentResponse:
        return await self.send_message(
            f'"{word}" kelimesinin etimolojisini araştır: köken, dil ailesi, tarihsel '
            "gelişim ve ilgili dillerdeki karşılıkları."
        )

    async def get_cultural_context(self, concept: str) -> AgentResponse:
        return await self.send_message(f"{concept} kavramının kültürel bağlamını açıkla")

    async def get_random_word_analysis(self, selector: RandomTermSelector) -> AgentResponse:
        word, strategy = selector.select()
        logger.info("random word %r (%s)", word, strategy)
        return await self.send_message(
            f'Rastgele seçilen "{word}" kelimesini tüm araçları kullanarak kapsamlı '
            "şekilde analiz et. Başka kelime seçme."
        )
