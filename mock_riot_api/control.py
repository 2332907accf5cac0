"""Control client for the mock Riot API server.

This module provides a Python client and CLI for controlling the mock server,
making it easy to seed players and simulate Riot API failures.
"""

import asyncio
import json
from typing import Optional, Dict, Any, List

import httpx
import structlog
import click

logger = structlog.get_logger()


class MockRiotControlClient:
    """Client for controlling the mock Riot API server."""

    def __init__(self, base_url: str = "http://localhost:8080"):
        self.base_url = base_url
        self.control_url = f"{base_url}/control"

    async def create_player(
        self,
        game_name: str,
        tag_line: str,
        puuid: Optional[str] = None,
        platforms: Optional[List[str]] = None,
        summoner_level: int = 30,
        league_entries: Optional[List[Dict[str, Any]]] = None
    ) -> Dict[str, Any]:
        """Create a new mock player, optionally with summoners and ranks."""
        async with httpx.AsyncClient() as client:
            data = {
                "game_name": game_name,
                "tag_line": tag_line,
                "platforms": platforms or [],
                "summoner_level": summoner_level,
                "league_entries": league_entries or []
            }
            if puuid:
                data["puuid"] = puuid

            response = await client.post(f"{self.control_url}/players", json=data)
            response.raise_for_status()
            return response.json()

    async def list_players(self) -> Dict[str, Any]:
        """List all mock players."""
        async with httpx.AsyncClient() as client:
            response = await client.get(f"{self.control_url}/players")
            response.raise_for_status()
            return response.json()

    async def force_status(self, **statuses: int) -> Dict[str, Any]:
        """Force error statuses per route family, 0 clears.

        Example: ``await client.force_status(summoner=503)``
        """
        async with httpx.AsyncClient() as client:
            response = await client.put(f"{self.control_url}/settings", json=statuses)
            response.raise_for_status()
            return response.json()

    async def reset_server(self) -> Dict[str, Any]:
        """Reset server to initial state."""
        async with httpx.AsyncClient() as client:
            response = await client.post(f"{self.control_url}/reset")
            response.raise_for_status()
            return response.json()


# CLI Commands
@click.group()
@click.option('--server-url', default='http://localhost:8080', help='Mock server URL')
@click.pass_context
def cli(ctx, server_url):
    """Mock Riot API Control CLI."""
    ctx.ensure_object(dict)
    ctx.obj['client'] = MockRiotControlClient(server_url)


@cli.command()
@click.argument('game_name')
@click.argument('tag_line')
@click.option('--puuid', help='Specific PUUID to use')
@click.option('--platform', 'platforms', multiple=True, help='Platform with a summoner (repeatable)')
@click.option('--level', default=30, type=int, help='Summoner level')
@click.option('--entries', default='[]', help='League entries as a JSON list')
@click.pass_context
def create_player(ctx, game_name, tag_line, puuid, platforms, level, entries):
    """Create a new mock player."""
    client = ctx.obj['client']
    result = asyncio.run(client.create_player(
        game_name, tag_line, puuid, list(platforms), level, json.loads(entries)
    ))
    click.echo(f"Created player: {result}")


@cli.command()
@click.pass_context
def list_players(ctx):
    """List all mock players."""
    client = ctx.obj['client']
    result = asyncio.run(client.list_players())

    players = result.get('players', [])
    if not players:
        click.echo("No players found")
        return

    for player in players:
        click.echo(f"\n{player['game_name']}#{player['tag_line']} ({player['puuid']})")
        click.echo(f"  Platforms: {', '.join(player['platforms']) or '-'}")
        click.echo(f"  Ranked queues: {player['ranked_queues']}")


@cli.command()
@click.option('--account', type=int, help='Status for account lookups (0 clears)')
@click.option('--summoner', type=int, help='Status for summoner lookups (0 clears)')
@click.option('--league', type=int, help='Status for league lookups (0 clears)')
@click.pass_context
def force(ctx, account, summoner, league):
    """Force Riot API error responses."""
    client = ctx.obj['client']
    statuses = {
        name: value
        for name, value in (("account", account), ("summoner", summoner), ("league", league))
        if value is not None
    }
    result = asyncio.run(client.force_status(**statuses))
    click.echo(f"Settings: {result}")


@cli.command()
@click.pass_context
def reset(ctx):
    """Reset the mock server."""
    client = ctx.obj['client']
    result = asyncio.run(client.reset_server())
    click.echo(f"Server reset: {result}")


if __name__ == '__main__':
    cli()
