"""aiohttp shell exposing the identity and rank flows over HTTP."""

from typing import Optional, Tuple

from aiohttp import web
import structlog

from riot_proxy.adapters.riot_api.client import RiotAPIClient
from riot_proxy.application.flows import (
    Envelope,
    IdentityFlow,
    IdentityQuery,
    RankFlow,
    RankQuery,
)
from riot_proxy.config import Config

logger = structlog.get_logger()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

CONFIG_KEY = web.AppKey("config", Config)
CLIENT_KEY = web.AppKey("riot_api_client", RiotAPIClient)


@web.middleware
async def cors_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Answer preflight requests, reject non-GET methods, add CORS headers."""
    if request.method == "OPTIONS":
        response = web.Response(status=200)
    elif request.method != "GET":
        response = web.json_response(
            {"success": False, "error": "Method not allowed"}, status=405
        )
    else:
        response = await handler(request)
    response.headers.update(CORS_HEADERS)
    return response


def _respond(envelope: Envelope) -> web.Response:
    return web.json_response(envelope.body, status=envelope.status)


def _raw_name_segments(request: web.Request) -> Tuple[str, str]:
    """Get the game name and tag line segments exactly as the caller encoded them."""
    # match_info is already decoded; the identity flow decodes on its own.
    # raw_parts: ("/", "api", "summoner", game_name, tag_line, *extra)
    parts = request.rel_url.raw_parts
    return parts[3], parts[4]


async def get_summoner(request: web.Request) -> web.Response:
    """GET /api/summoner/{game_name}/{tag_line}"""
    app = request.app
    game_name, tag_line = _raw_name_segments(request)
    query = IdentityQuery(
        game_name=game_name,
        tag_line=tag_line,
        region=request.query.get("region"),
        platform=request.query.get("server"),
    )
    logger.info("Identity lookup requested", region=query.region, server=query.platform)
    flow = IdentityFlow(
        app[CLIENT_KEY],
        default_region=app[CONFIG_KEY].default_region,
        default_platform=app[CONFIG_KEY].default_platform,
    )
    return _respond(await flow.run(query))


async def get_rank(request: web.Request) -> web.Response:
    """GET /api/rank/{puuid}"""
    app = request.app
    query = RankQuery(
        puuid=request.match_info.get("puuid"),
        platform=request.query.get("server"),
    )
    logger.info("Rank lookup requested", server=query.platform)
    flow = RankFlow(app[CLIENT_KEY], default_platform=app[CONFIG_KEY].default_platform)
    return _respond(await flow.run(query))


async def invalid_summoner_path(request: web.Request) -> web.Response:
    """Summoner requests missing the tag line segment."""
    flow = IdentityFlow(request.app[CLIENT_KEY])
    return _respond(await flow.run(IdentityQuery(game_name=None, tag_line=None)))


async def missing_puuid(request: web.Request) -> web.Response:
    flow = RankFlow(request.app[CLIENT_KEY])
    return _respond(await flow.run(RankQuery(puuid=None)))


async def health(request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


def create_app(config: Config, client: Optional[RiotAPIClient] = None) -> web.Application:
    """Build the aiohttp application.

    Args:
        config: Service configuration
        client: Optional Riot API client; created from config when omitted

    Returns:
        Configured aiohttp Application
    """
    app = web.Application(middlewares=[cors_middleware])
    app[CONFIG_KEY] = config

    async def riot_client_ctx(app: web.Application):
        owned = client is None
        app[CLIENT_KEY] = client or RiotAPIClient(
            config.riot_api_key,
            base_url=config.riot_api_base_url or None,
            request_timeout=config.riot_api_timeout_seconds,
        )
        yield
        if owned:
            await app[CLIENT_KEY].close()

    app.cleanup_ctx.append(riot_client_ctx)

    app.router.add_route("*", "/api/summoner/{game_name}/{tag_line}", get_summoner)
    app.router.add_route("*", "/api/summoner/{game_name}/{tag_line}/{extra:.*}", get_summoner)
    app.router.add_route("*", "/api/summoner/{game_name}", invalid_summoner_path)
    app.router.add_route("*", "/api/summoner", invalid_summoner_path)
    app.router.add_route("*", "/api/summoner/{extra:.*}", invalid_summoner_path)
    app.router.add_route("*", "/api/rank/{puuid}", get_rank)
    app.router.add_route("*", "/api/rank", missing_puuid)
    app.router.add_route("*", "/api/rank/", missing_puuid)
    app.router.add_get("/health", health)

    return app
