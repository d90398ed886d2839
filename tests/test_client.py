"""Tests for the remote client: endpoint discovery and failure modes."""

import httpx
import pytest

from client.culture_client import (
    AGENT_NOT_FOUND,
    SERVER_ERROR,
    CultureClient,
    find_agent_key,
)
from core.selector import RandomTermSelector
from tests.helpers import FirstChoiceRandom

ENDPOINTS = ["http://10.0.0.1:4111", "http://10.0.0.2:4111", "http://10.0.0.3:4111"]
AGENTS = {"turkishCultureAgent": {"name": "Turkish Culture Expert", "description": "", "tools": []}}


class FakeServer:
    """MockTransport handler; only `live_host` answers, others refuse."""

    def __init__(self, live_host="10.0.0.2", generate_status=200, agents=AGENTS):
        self.live_host = live_host
        self.generate_status = generate_status
        self.agents = agents
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host != self.live_host:
            raise httpx.ConnectError("connection refused", request=request)
        path = request.url.path
        if path == "/health":
            return httpx.Response(200, json={"status": "ok"})
        if path == "/api/agents":
            return httpx.Response(200, json=self.agents)
        if path.endswith("/generate"):
            if self.generate_status != 200:
                return httpx.Response(self.generate_status, json={"error": "x"})
            return httpx.Response(200, json={"text": "Merhaba!"})
        return httpx.Response(404)

    def paths(self):
        return [(r.url.host, r.url.path) for r in self.requests]


def make_client(server):
    return CultureClient(endpoints=ENDPOINTS, transport=httpx.MockTransport(server))


class TestFindAgentKey:
    """Picking the agent out of /api/agents."""

    def test_prefers_culture_agent(self):
        agents = {"weatherAgent": {"name": "Weather"}, "x": {"name": "Turkish Culture Expert"}}
        assert find_agent_key(agents) == "x"

    def test_falls_back_to_first(self):
        assert find_agent_key({"a": {}, "b": {}}) == "a"

    def test_empty(self):
        assert find_agent_key({}) is None
        assert find_agent_key(None) is None


class TestEndpointDiscovery:
    """Health probing and caching."""

    @pytest.mark.asyncio
    async def test_second_candidate_cached(self):
        """The first healthy candidate is remembered and reused."""
        server = FakeServer(live_host="10.0.0.2")
        client = make_client(server)

        assert await client.find_working_endpoint() == ENDPOINTS[1]
        probes = len(server.requests)
        assert probes == 2

        response = await client.send_message("merhaba")
        assert response.success is True
        assert response.data == "Merhaba!"
        assert all(host == "10.0.0.2" for host, _ in server.paths()[probes:])

    @pytest.mark.asyncio
    async def test_none_answer(self):
        """No healthy candidate: settle on the first one."""
        server = FakeServer(live_host="nowhere")
        client = make_client(server)
        assert await client.find_working_endpoint() == ENDPOINTS[0]
        assert client.working_endpoint == ENDPOINTS[0]


class TestSendMessage:
    """Failure modes of send_message."""

    @pytest.mark.asyncio
    async def test_transport_failure_is_demo(self):
        """Unreachable server: demo answer, success=True."""
        client = make_client(FakeServer(live_host="nowhere"))
        response = await client.send_message("çay nedir?")
        assert response.success is True
        assert response.demo is True
        assert "çay nedir?" in response.data

    @pytest.mark.asyncio
    async def test_not_found(self):
        """404 on generate: agent-not-found message."""
        client = make_client(FakeServer(generate_status=404))
        response = await client.send_message("x")
        assert response.success is False
        assert response.error == AGENT_NOT_FOUND

    @pytest.mark.asyncio
    async def test_server_error(self):
        """5xx on generate: server-error message."""
        client = make_client(FakeServer(generate_status=500))
        response = await client.send_message("x")
        assert response.success is False
        assert response.error == SERVER_ERROR

    @pytest.mark.asyncio
    async def test_no_agents_is_demo(self):
        """An empty agent list falls back to the demo answer."""
        client = make_client(FakeServer(agents={}))
        response = await client.send_message("x")
        assert response.demo is True

    @pytest.mark.asyncio
    async def test_random_word_prompt(self):
        """The selected word goes into the prompt."""
        server = FakeServer()
        client = make_client(server)
        selector = RandomTermSelector(pool=["nazar"], rng=FirstChoiceRandom())
        await client.get_random_word_analysis(selector)
        generate = [r for r in server.requests if r.url.path.endswith("/generate")]
        assert "nazar" in generate[0].content.decode("utf-8")


class TestServerStatus:
    """check_server_status: answers decide, unreachable is optimistic."""

    @pytest.mark.asyncio
    async def test_true_when_unreachable(self):
        client = make_client(FakeServer(live_host="nowhere"))
        assert await client.check_server_status() is True

    @pytest.mark.asyncio
    async def test_true_when_healthy(self):
        client = make_client(FakeServer())
        assert await client.check_server_status() is True

    @pytest.mark.asyncio
    async def test_false_when_unhealthy(self):
        """A server answering 503 is reported down."""

        def unhealthy(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"error": "maintenance"})

        client = CultureClient(endpoints=ENDPOINTS, transport=httpx.MockTransport(unhealthy))
        assert await client.check_server_status() is False
