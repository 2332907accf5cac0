"""Mock utilities for Riot API responses in tests."""

from typing import Dict, Any, List, Optional

import httpx
import respx

TEST_API_KEY = "test_api_key"


class RiotAPIMockData:
    """Collection of mock data for Riot API responses."""

    @staticmethod
    def get_account_response(
        game_name: str = "Hide on bush",
        tag_line: str = "KR1",
        puuid: str = "test_puuid_123",
    ) -> Dict[str, Any]:
        """Generate a mock account response from Riot API."""
        return {
            "puuid": puuid,
            "gameName": game_name,
            "tagLine": tag_line,
        }

    @staticmethod
    def get_summoner_response(
        puuid: str = "test_puuid_123",
        summoner_id: str = "test_summoner_id",
        summoner_level: int = 512,
    ) -> Dict[str, Any]:
        """Generate a mock summoner-v4 response."""
        return {
            "id": summoner_id,
            "accountId": "test_account_id",
            "puuid": puuid,
            "summonerLevel": summoner_level,
            "profileIconId": 6,
            "revisionDate": 1700000000000,
        }

    @staticmethod
    def get_league_entry(
        queue_type: str = "RANKED_SOLO_5x5",
        tier: Optional[str] = "GOLD",
        rank: str = "II",
        wins: int = 7,
        losses: int = 3,
        **extra: Any,
    ) -> Dict[str, Any]:
        """Generate one league-v4 entry."""
        entry = {
            "leagueId": "league-1",
            "queueType": queue_type,
            "tier": tier,
            "rank": rank,
            "summonerId": "test_summoner_id",
            "leaguePoints": 42,
            "wins": wins,
            "losses": losses,
        }
        entry.update(extra)
        return entry

    @staticmethod
    def get_error_response(status_code: int, message: str = "Error") -> Dict[str, Any]:
        """Generate a mock error response."""
        return {"status": {"message": message, "status_code": status_code}}


class RiotAPIMockRouter:
    """Mock router for Riot API endpoints using respx."""

    def __init__(self, region: str = "asia", platform: str = "kr"):
        self.router = respx.MockRouter(assert_all_called=False)
        self.region_url = f"https://{region}.api.riotgames.com"
        self.platform_url = f"https://{platform}.api.riotgames.com"

    def _mock(self, url: str, status_code: int, response_data: Any) -> respx.Route:
        return self.router.get(url).mock(
            return_value=httpx.Response(status_code=status_code, json=response_data)
        )

    def mock_account(
        self,
        encoded_game_name: str = "Hide%20on%20bush",
        encoded_tag_line: str = "KR1",
        status_code: int = 200,
        response_data: Optional[Dict[str, Any]] = None,
    ) -> respx.Route:
        """Mock the account-by-riot-id endpoint."""
        if response_data is None:
            response_data = RiotAPIMockData.get_account_response()
        url = f"{self.region_url}/riot/account/v1/accounts/by-riot-id/{encoded_game_name}/{encoded_tag_line}"
        return self._mock(url, status_code, response_data)

    def mock_summoner(
        self,
        puuid: str = "test_puuid_123",
        status_code: int = 200,
        response_data: Optional[Dict[str, Any]] = None,
    ) -> respx.Route:
        """Mock the summoner-by-puuid endpoint."""
        if response_data is None:
            response_data = RiotAPIMockData.get_summoner_response(puuid=puuid)
        url = f"{self.platform_url}/lol/summoner/v4/summoners/by-puuid/{puuid}"
        return self._mock(url, status_code, response_data)

    def mock_league(
        self,
        summoner_id: str = "test_summoner_id",
        status_code: int = 200,
        entries: Optional[List[Dict[str, Any]]] = None,
    ) -> respx.Route:
        """Mock the league-entries-by-summoner endpoint."""
        response_data = entries if entries is not None else []
        url = f"{self.platform_url}/lol/league/v4/entries/by-summoner/{summoner_id}"
        return self._mock(url, status_code, response_data)

    def start(self):
        """Start the mock router."""
        return self.router.start()

    def stop(self):
        """Stop the mock router."""
        return self.router.stop()

    def __enter__(self):
        """Context manager entry."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.stop()
