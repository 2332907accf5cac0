"""Identity and rank lookup flows.

The flows sequence the lookup stages and assemble the response envelope.
Every failure is turned into a structured envelope; nothing raises out of
``run``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

from riot_proxy.adapters.riot_api.client import OutcomeKind, RiotAPIClient
from riot_proxy.application.stages import (
    SummonerLookupKind,
    aggregate_ranks,
    lookup_summoner,
    outcome_error,
    resolve_identity,
)
from riot_proxy.core.errors import (
    CredentialMissing,
    InternalError,
    MissingInput,
    ProxyError,
    SummonerLookupFailed,
)
from riot_proxy.core.topology import resolve_platform_host, resolve_region_host

logger = structlog.get_logger()

DEFAULT_REGION = "asia"
DEFAULT_PLATFORM = "kr"


@dataclass
class Envelope:
    """Response body plus the HTTP status the shell should use."""

    status: int
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return bool(self.body.get("success"))

    @classmethod
    def ok(cls, data: Dict[str, Any], metadata: Dict[str, Any]) -> "Envelope":
        return cls(200, {"success": True, "data": data, "metadata": metadata})

    @classmethod
    def from_error(cls, error: ProxyError) -> "Envelope":
        return cls(error.status, error.to_envelope())


@dataclass(frozen=True)
class IdentityQuery:
    """Parsed identity request; name parts are still percent-encoded."""

    game_name: Optional[str]
    tag_line: Optional[str]
    region: Optional[str] = None
    platform: Optional[str] = None


@dataclass(frozen=True)
class RankQuery:
    """Parsed rank request."""

    puuid: Optional[str]
    platform: Optional[str] = None


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class IdentityFlow:
    """Riot ID -> account, then best-effort summoner enrichment."""

    def __init__(
        self,
        client: RiotAPIClient,
        default_region: str = DEFAULT_REGION,
        default_platform: str = DEFAULT_PLATFORM,
    ):
        self.client = client
        self.default_region = default_region
        self.default_platform = default_platform

    async def run(self, query: IdentityQuery) -> Envelope:
        try:
            return await self._run(query)
        except ProxyError as e:
            logger.info("Identity lookup failed", error=e.error, status=e.status)
            return Envelope.from_error(e)
        except Exception as e:
            logger.exception("Identity lookup crashed", error=str(e))
            return Envelope.from_error(InternalError(str(e)))

    async def _run(self, query: IdentityQuery) -> Envelope:
        if not query.game_name or not query.tag_line:
            raise MissingInput(
                "Invalid URL format. Expected: /api/summoner/{gameName}/{tagLine}",
                example="/api/summoner/Hide%20on%20bush/KR1",
            )
        if not self.client.api_key:
            raise CredentialMissing()

        region = query.region or self.default_region
        platform = query.platform or self.default_platform
        resolve_region_host(region)

        identity = await resolve_identity(self.client, region, query.game_name, query.tag_line)

        data = identity.to_dict()
        summoner = await lookup_summoner(self.client, platform, identity.puuid)
        if summoner.found:
            data.update(summoner.record.to_dict())
        else:
            # Summoner presence is optional; only the identity is required.
            logger.info(
                "Summoner info not available",
                platform=platform,
                reason=summoner.kind.value,
            )

        return Envelope.ok(
            data,
            {"region": region, "server": platform, "timestamp": _timestamp()},
        )


class RankFlow:
    """puuid -> summoner -> league entries, every step required."""

    def __init__(self, client: RiotAPIClient, default_platform: str = DEFAULT_PLATFORM):
        self.client = client
        self.default_platform = default_platform

    async def run(self, query: RankQuery) -> Envelope:
        try:
            return await self._run(query)
        except ProxyError as e:
            logger.info("Rank lookup failed", error=e.error, status=e.status)
            return Envelope.from_error(e)
        except Exception as e:
            logger.exception("Rank lookup crashed", error=str(e))
            return Envelope.from_error(InternalError(str(e)))

    async def _run(self, query: RankQuery) -> Envelope:
        if not query.puuid:
            raise MissingInput("PUUID is required", example="/api/rank/{puuid}?server=kr")
        if not self.client.api_key:
            raise CredentialMissing("API key not configured", message=None)

        platform = query.platform or self.default_platform
        resolve_platform_host(platform)

        summoner = await lookup_summoner(self.client, platform, query.puuid)
        if summoner.kind == SummonerLookupKind.NOT_FOUND:
            raise SummonerLookupFailed(
                "Summoner not found on this server",
                404,
                f"No summoner found with PUUID on {platform} server",
            )
        if not summoner.found:
            outcome = summoner.outcome
            if outcome.kind == OutcomeKind.UPSTREAM_ERROR:
                raise SummonerLookupFailed(
                    "Failed to get summoner info", outcome.status, status=outcome.status
                )
            raise outcome_error(outcome)

        record = summoner.record
        aggregate = await aggregate_ranks(self.client, platform, record.summoner_id)

        data = {
            "puuid": query.puuid,
            "summonerId": record.summoner_id,
            "summonerLevel": record.summoner_level,
            "ranks": [entry.to_dict() for entry in aggregate.entries],
            "summary": aggregate.summary.to_dict(),
        }
        return Envelope.ok(data, {"server": platform, "timestamp": _timestamp()})
