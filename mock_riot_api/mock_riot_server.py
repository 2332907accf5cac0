"""Mock Riot API server for local development and testing.

This module serves the account, summoner and league endpoints used by the
proxy from in-memory players, and exposes control endpoints to seed players
and force error responses.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, List
import uuid

from aiohttp import web
import structlog

logger = structlog.get_logger()

# Route families that can be forced to fail via /control/settings
ROUTE_FAMILIES = ("account", "summoner", "league")


@dataclass
class MockSummoner:
    """Mock summoner data for one platform."""
    summoner_id: str
    account_id: str
    summoner_level: int = 30
    profile_icon_id: int = 1
    revision_date: int = 0

    def to_api_response(self, puuid: str) -> Dict[str, Any]:
        """Convert to summoner-v4 response format."""
        return {
            "id": self.summoner_id,
            "accountId": self.account_id,
            "puuid": puuid,
            "summonerLevel": self.summoner_level,
            "profileIconId": self.profile_icon_id,
            "revisionDate": self.revision_date,
        }


@dataclass
class MockPlayer:
    """Mock player data."""
    puuid: str
    game_name: str
    tag_line: str
    summoners: Dict[str, MockSummoner] = field(default_factory=dict)
    league_entries: List[Dict[str, Any]] = field(default_factory=list)


def _not_found(message: str) -> web.Response:
    return web.json_response(
        {"status": {"message": message, "status_code": 404}},
        status=404
    )


class MockRiotAPIServer:
    """Mock Riot API server with control endpoints."""

    def __init__(self, port: int = 8080, api_key: Optional[str] = None):
        self.port = port
        self.api_key = api_key
        self.app = web.Application()
        self.players: Dict[str, MockPlayer] = {}
        self.forced_status: Dict[str, int] = {}
        self.request_log: List[str] = []
        self.setup_routes()

    def setup_routes(self):
        """Set up all API routes."""
        # Riot API endpoints
        self.app.router.add_get('/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}', self.get_account_by_riot_id)
        self.app.router.add_get('/lol/summoner/v4/summoners/by-puuid/{puuid}', self.get_summoner_by_puuid)
        self.app.router.add_get('/lol/league/v4/entries/by-summoner/{summoner_id}', self.get_league_entries)

        # Control endpoints
        self.app.router.add_post('/control/players', self.create_player)
        self.app.router.add_get('/control/players', self.list_players)
        self.app.router.add_put('/control/settings', self.update_settings)
        self.app.router.add_post('/control/reset', self.reset_server)

    def check_request(self, request: web.Request, family: str) -> Optional[web.Response]:
        """Record the request and return a forced or auth error if one applies."""
        self.request_log.append(family)

        if self.api_key is not None and request.headers.get("X-Riot-Token") != self.api_key:
            return web.json_response(
                {"status": {"message": "Forbidden", "status_code": 403}},
                status=403
            )

        status = self.forced_status.get(family)
        if status:
            return web.json_response(
                {"status": {"message": "Forced error", "status_code": status}},
                status=status
            )
        return None

    # Riot API endpoints
    async def get_account_by_riot_id(self, request: web.Request) -> web.Response:
        """Mock /riot/account/v1/accounts/by-riot-id endpoint."""
        if error_response := self.check_request(request, "account"):
            return error_response

        game_name = request.match_info['game_name']
        tag_line = request.match_info['tag_line']

        # Riot IDs match case-insensitively
        for player in self.players.values():
            if player.game_name.lower() == game_name.lower() and player.tag_line.lower() == tag_line.lower():
                return web.json_response({
                    "puuid": player.puuid,
                    "gameName": player.game_name,
                    "tagLine": player.tag_line
                })

        return _not_found("Data not found - No results found for player with riot id")

    async def get_summoner_by_puuid(self, request: web.Request) -> web.Response:
        """Mock /lol/summoner/v4/summoners/by-puuid endpoint.

        The mock serves every platform from one host, so a player's first
        registered summoner is returned.
        """
        if error_response := self.check_request(request, "summoner"):
            return error_response

        player = self.players.get(request.match_info['puuid'])
        if player is None or not player.summoners:
            return _not_found("Data not found - summoner not found")

        summoner = next(iter(player.summoners.values()))
        return web.json_response(summoner.to_api_response(player.puuid))

    async def get_league_entries(self, request: web.Request) -> web.Response:
        """Mock /lol/league/v4/entries/by-summoner endpoint."""
        if error_response := self.check_request(request, "league"):
            return error_response

        summoner_id = request.match_info['summoner_id']
        for player in self.players.values():
            for summoner in player.summoners.values():
                if summoner.summoner_id == summoner_id:
                    return web.json_response(player.league_entries)

        # Riot answers unknown summoners with an empty list
        return web.json_response([])

    # Control endpoints
    async def create_player(self, request: web.Request) -> web.Response:
        """Create a new mock player."""
        data = await request.json()

        puuid = data.get("puuid", str(uuid.uuid4()))
        player = MockPlayer(
            puuid=puuid,
            game_name=data["game_name"],
            tag_line=data["tag_line"],
            league_entries=data.get("league_entries", []),
        )
        for platform in data.get("platforms", []):
            player.summoners[platform] = MockSummoner(
                summoner_id=data.get("summoner_id", f"summoner_{puuid}"),
                account_id=data.get("account_id", f"account_{puuid}"),
                summoner_level=data.get("summoner_level", 30),
                profile_icon_id=data.get("profile_icon_id", 1),
                revision_date=data.get("revision_date", 0),
            )

        self.players[puuid] = player

        logger.info("Created mock player", puuid=puuid, game_name=player.game_name)

        return web.json_response({
            "puuid": player.puuid,
            "game_name": player.game_name,
            "tag_line": player.tag_line,
            "platforms": list(player.summoners)
        })

    async def list_players(self, request: web.Request) -> web.Response:
        """List all mock players."""
        players_data = []
        for player in self.players.values():
            players_data.append({
                "puuid": player.puuid,
                "game_name": player.game_name,
                "tag_line": player.tag_line,
                "platforms": list(player.summoners),
                "ranked_queues": len(player.league_entries)
            })

        return web.json_response({"players": players_data})

    async def update_settings(self, request: web.Request) -> web.Response:
        """Force (or clear with 0) an error status per route family."""
        data = await request.json()

        for family in ROUTE_FAMILIES:
            if family in data:
                status = int(data[family])
                if status:
                    self.forced_status[family] = status
                else:
                    self.forced_status.pop(family, None)

        logger.info("Updated server settings", forced_status=self.forced_status)

        return web.json_response({"forced_status": self.forced_status})

    async def reset_server(self, request: web.Request) -> web.Response:
        """Reset server to initial state."""
        self.players.clear()
        self.forced_status.clear()
        self.request_log.clear()

        logger.info("Reset mock server to initial state")

        return web.json_response({"status": "reset"})

    def run(self):
        """Run the mock server."""
        logger.info("Starting mock Riot API server", port=self.port)
        web.run_app(self.app, host='0.0.0.0', port=self.port)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description='Mock Riot API Server')
    parser.add_argument('--port', type=int, default=8080, help='Port to run on')
    parser.add_argument('--api-key', default=None, help='Reject requests without this X-Riot-Token')
    args = parser.parse_args()

    server = MockRiotAPIServer(port=args.port, api_key=args.api_key)
    server.run()


if __name__ == '__main__':
    main()
