"""Pytest fixtures for riot-proxy tests."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web

# Add the parent directory to the path if not already there
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from riot_proxy.adapters.riot_api.client import RiotAPIClient
from riot_proxy.config import Config, Environment
from mock_riot_api.mock_riot_server import MockRiotAPIServer
from tests.riot_api_mocks import TEST_API_KEY, RiotAPIMockRouter


@pytest_asyncio.fixture
async def riot_client():
    """Riot API client pointed at the real hosts (mock them with respx)."""
    client = RiotAPIClient(TEST_API_KEY)
    yield client
    await client.close()


@pytest_asyncio.fixture
async def keyless_client():
    """Riot API client without a configured key."""
    client = RiotAPIClient("")
    yield client
    await client.close()


@pytest.fixture
def riot_mock():
    """respx router for the asia region and kr platform hosts."""
    with RiotAPIMockRouter(region="asia", platform="kr") as router:
        yield router


@pytest.fixture
def test_config():
    """Create test configuration."""
    return Config(
        riot_api_key=TEST_API_KEY,
        environment=Environment.CI,
        riot_api_timeout_seconds=5.0,
        log_format="text",
    )


@pytest_asyncio.fixture
async def mock_riot_api_server(unused_tcp_port):
    """Start mock Riot API server."""
    server = MockRiotAPIServer(port=unused_tcp_port, api_key=TEST_API_KEY)

    # Start server in background
    runner = web.AppRunner(server.app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", unused_tcp_port)
    await site.start()

    yield server

    await runner.cleanup()
