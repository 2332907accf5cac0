"""End-to-end tests: proxy HTTP shell against the mock Riot API server."""

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestClient, TestServer

from riot_proxy.adapters.http import create_app
from riot_proxy.config import Config, Environment
from mock_riot_api.control import MockRiotControlClient
from tests.riot_api_mocks import TEST_API_KEY, RiotAPIMockData


@pytest.fixture
def mock_base_url(mock_riot_api_server):
    return f"http://localhost:{mock_riot_api_server.port}"


@pytest.fixture
def control(mock_base_url):
    return MockRiotControlClient(mock_base_url)


@pytest_asyncio.fixture
async def proxy(mock_base_url):
    """Proxy app that owns its Riot API client, pointed at the mock server."""
    config = Config(
        riot_api_key=TEST_API_KEY,
        environment=Environment.CI,
        riot_api_base_url=mock_base_url,
        riot_api_timeout_seconds=5.0,
    )
    client = TestClient(TestServer(create_app(config)))
    await client.start_server()
    yield client
    await client.close()


@pytest.mark.integration
class TestProxyAgainstMockRiot:
    """Full request path through the shell, flows and client."""

    @pytest.mark.asyncio
    async def test_identity_then_rank(self, proxy, control):
        await control.create_player(
            "Hide on bush",
            "KR1",
            puuid="faker_puuid",
            platforms=["kr"],
            summoner_level=700,
            league_entries=[
                RiotAPIMockData.get_league_entry("RANKED_SOLO_5x5", "GOLD", "II", wins=7, losses=3),
                RiotAPIMockData.get_league_entry("RANKED_FLEX_SR", "SILVER", "I", wins=0, losses=0),
            ],
        )

        response = await proxy.get("/api/summoner/Hide%20on%20bush/KR1")
        body = await response.json()

        assert response.status == 200
        assert body["data"]["puuid"] == "faker_puuid"
        assert body["data"]["summonerLevel"] == 700

        response = await proxy.get(f"/api/rank/{body['data']['puuid']}?server=kr")
        body = await response.json()

        assert response.status == 200
        assert [rank["winRate"] for rank in body["data"]["ranks"]] == [70.0, 0]
        assert body["data"]["summary"] == {"totalRankedQueues": 2, "highestTier": "GOLD"}

    @pytest.mark.asyncio
    async def test_unknown_account(self, proxy, mock_riot_api_server):
        response = await proxy.get("/api/summoner/Nobody/0000?region=asia")
        body = await response.json()

        assert response.status == 404
        assert body["error"] == "Summoner not found"
        assert mock_riot_api_server.request_log == ["account"]

    @pytest.mark.asyncio
    async def test_identity_without_summoner(self, proxy, control):
        await control.create_player("NoLoL", "EUW", puuid="tft_only")

        response = await proxy.get("/api/summoner/NoLoL/EUW?region=europe&server=euw1")
        body = await response.json()

        assert response.status == 200
        assert body["data"] == {"puuid": "tft_only", "gameName": "NoLoL", "tagLine": "EUW"}
        assert body["metadata"]["region"] == "europe"
        assert body["metadata"]["server"] == "euw1"

    @pytest.mark.asyncio
    async def test_summoner_outage_is_soft_for_identity_hard_for_rank(
        self, proxy, control, mock_riot_api_server
    ):
        await control.create_player("Faker", "KR1", puuid="faker_puuid", platforms=["kr"])
        await control.force_status(summoner=503)

        response = await proxy.get("/api/summoner/Faker/KR1")
        assert response.status == 200
        assert "summonerId" not in (await response.json())["data"]

        mock_riot_api_server.request_log.clear()
        response = await proxy.get("/api/rank/faker_puuid")
        body = await response.json()

        assert response.status == 503
        assert body["error"] == "Failed to get summoner info"
        assert "league" not in mock_riot_api_server.request_log

    @pytest.mark.asyncio
    async def test_wrong_api_key(self, mock_base_url):
        config = Config(riot_api_key="wrong", riot_api_base_url=mock_base_url)
        client = TestClient(TestServer(create_app(config)))
        await client.start_server()
        try:
            response = await client.get("/api/summoner/Faker/KR1")
            body = await response.json()
        finally:
            await client.close()

        assert response.status == 403
        assert body["error"] == "API authentication failed"
