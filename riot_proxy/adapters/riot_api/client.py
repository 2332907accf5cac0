"""Riot API client that classifies every response into an outcome."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx
import structlog

logger = structlog.get_logger()

USER_AGENT = "lol-api-proxy/1.0"


class OutcomeKind(Enum):
    """Classification of a single upstream call."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    AUTH_FAILURE = "auth_failure"
    UPSTREAM_ERROR = "upstream_error"
    TRANSPORT_FAILURE = "transport_failure"


@dataclass(frozen=True)
class UpstreamOutcome:
    """Result of one GET against the Riot API.

    Only the fields relevant to ``kind`` are populated: ``data`` for
    SUCCESS, ``status`` and ``body`` for AUTH_FAILURE / UPSTREAM_ERROR,
    ``cause`` for TRANSPORT_FAILURE.
    """

    kind: OutcomeKind
    data: Any = None
    status: Optional[int] = None
    body: Optional[str] = None
    cause: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @classmethod
    def success(cls, data: Any) -> "UpstreamOutcome":
        return cls(OutcomeKind.SUCCESS, data=data, status=200)

    @classmethod
    def not_found(cls) -> "UpstreamOutcome":
        return cls(OutcomeKind.NOT_FOUND, status=404)

    @classmethod
    def auth_failure(cls, status: int) -> "UpstreamOutcome":
        return cls(OutcomeKind.AUTH_FAILURE, status=status)

    @classmethod
    def upstream_error(cls, status: int, body: str) -> "UpstreamOutcome":
        return cls(OutcomeKind.UPSTREAM_ERROR, status=status, body=body)

    @classmethod
    def transport_failure(cls, cause: str) -> "UpstreamOutcome":
        return cls(OutcomeKind.TRANSPORT_FAILURE, cause=cause)


class RiotAPIClient:
    """Authenticated GET client for Riot API hosts."""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        request_timeout: float = 10.0,
    ):
        """Initialize the Riot API client.

        Args:
            api_key: Riot API key sent as X-Riot-Token
            base_url: Base URL replacing https://{host} (mock server)
            request_timeout: Per-request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/") if base_url else None
        self.request_timeout = request_timeout
        self.client = httpx.AsyncClient(timeout=request_timeout)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    def _get_base_url(self, host: str) -> str:
        """Get the base URL for a routing host."""
        return self.base_url if self.base_url else f"https://{host}"

    def _headers(self) -> dict:
        return {
            "X-Riot-Token": self.api_key,
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }

    async def call(self, host: str, path: str) -> UpstreamOutcome:
        """Issue one GET and classify its result.

        This is the only place that interprets Riot status codes.

        Args:
            host: Routing host, e.g. asia.api.riotgames.com
            path: Request path starting with '/'

        Returns:
            UpstreamOutcome describing the response
        """
        url = f"{self._get_base_url(host)}{path}"

        try:
            response = await self.client.get(url, headers=self._headers())
        except httpx.RequestError as e:
            logger.error("HTTP request failed", host=host, path=path, error=str(e))
            return UpstreamOutcome.transport_failure(f"Request failed: {e}")

        status = response.status_code
        logger.info("Riot API response", host=host, path=path, status_code=status)

        if status == 404:
            return UpstreamOutcome.not_found()

        if status in (401, 403):
            logger.warning("Riot API rejected credentials", host=host, status_code=status)
            return UpstreamOutcome.auth_failure(status)

        if status < 200 or status >= 300:
            logger.error(
                "Riot API error",
                url=url,
                status_code=status,
                response=response.text,
            )
            return UpstreamOutcome.upstream_error(status, response.text)

        try:
            return UpstreamOutcome.success(response.json())
        except ValueError as e:
            logger.error("Invalid JSON from Riot API", url=url, error=str(e))
            return UpstreamOutcome.transport_failure(f"Invalid response body: {e}")
