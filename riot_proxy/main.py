#!/usr/bin/env python3
"""
riot-proxy - Main entry point

This service resolves Riot IDs and ranked standings through the Riot Games
API and serves the results as JSON over HTTP.
"""
import argparse
import sys

from aiohttp import web
import structlog

from riot_proxy.adapters.http.app import create_app
from riot_proxy.config import init_config
from riot_proxy.logging_setup import configure_logging


logger = structlog.get_logger()


def main(argv=None):
    """Main entry point for the riot-proxy service."""
    parser = argparse.ArgumentParser(description="Riot API lookup proxy")
    parser.add_argument("--host", help="Bind host (overrides HTTP_HOST)")
    parser.add_argument("--port", type=int, help="Bind port (overrides HTTP_PORT)")
    args = parser.parse_args(argv)

    # Load configuration
    config = init_config()
    if args.host:
        config.http_host = args.host
    if args.port:
        config.http_port = args.port

    configure_logging(config.log_level, config.log_format)

    if not config.has_api_key():
        logger.warning("RIOT_API_KEY is not set; lookups will report a configuration error")

    logger.info(
        "Starting riot-proxy",
        host=config.http_host,
        port=config.http_port,
        environment=config.environment.value,
    )

    try:
        web.run_app(
            create_app(config),
            host=config.http_host,
            port=config.http_port,
            print=None,
        )
    except Exception as e:
        logger.error("Service failed with error", error=str(e))
        sys.exit(1)
    finally:
        logger.info("riot-proxy stopped")


if __name__ == "__main__":
    main()
