"""Lookup stages shared by the identity and rank flows.

Each stage resolves its routing host, issues a single call through the
Riot API client and turns the classified outcome into domain objects or
``ProxyError`` subclasses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote, unquote

import structlog

from riot_proxy.adapters.riot_api.client import OutcomeKind, RiotAPIClient, UpstreamOutcome
from riot_proxy.core.entities import PlayerIdentity, RankAggregate, RankEntry, SummonerRecord
from riot_proxy.core.errors import (
    CredentialInvalid,
    IdentityNotFound,
    InvalidTopologyKey,
    ProxyError,
    TransportFailure,
    UpstreamError,
)
from riot_proxy.core.topology import resolve_platform_host, resolve_region_host

logger = structlog.get_logger()

ACCOUNT_PATH = "/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}"
SUMMONER_PATH = "/lol/summoner/v4/summoners/by-puuid/{puuid}"
LEAGUE_PATH = "/lol/league/v4/entries/by-summoner/{summoner_id}"


def outcome_error(outcome: UpstreamOutcome, error: str = "Riot API error") -> ProxyError:
    """Map a failed outcome to the caller-facing error for it."""
    if outcome.kind == OutcomeKind.AUTH_FAILURE:
        return CredentialInvalid()
    if outcome.kind == OutcomeKind.TRANSPORT_FAILURE:
        return TransportFailure(outcome.cause)
    return UpstreamError(outcome.status, outcome.body, error=error)


async def resolve_identity(
    client: RiotAPIClient, region: str, raw_game_name: str, raw_tag_line: str
) -> PlayerIdentity:
    """Resolve a Riot ID to its account identity.

    Args:
        client: Riot API client
        region: Logical region key
        raw_game_name: Percent-encoded game name path segment
        raw_tag_line: Percent-encoded tag line path segment

    Returns:
        PlayerIdentity for the account

    Raises:
        InvalidTopologyKey: If the region is unknown
        IdentityNotFound: If no account matches the Riot ID
        CredentialInvalid: If Riot rejects the API key
        UpstreamError: For other Riot API failures
        TransportFailure: If the request could not complete
    """
    game_name = unquote(raw_game_name)
    tag_line = unquote(raw_tag_line)
    host = resolve_region_host(region)

    logger.info("Looking up account", game_name=game_name, tag_line=tag_line, region=region)

    path = ACCOUNT_PATH.format(
        game_name=quote(game_name, safe=""),
        tag_line=quote(tag_line, safe=""),
    )
    outcome = await client.call(host, path)

    if outcome.kind == OutcomeKind.NOT_FOUND:
        logger.info("Account not found", game_name=game_name, tag_line=tag_line)
        raise IdentityNotFound(game_name, tag_line)
    if not outcome.ok:
        raise outcome_error(outcome)

    identity = PlayerIdentity.from_api(outcome.data)
    logger.info("Account found", riot_id=identity.riot_id, puuid=identity.puuid)
    return identity


class SummonerLookupKind(Enum):
    """How a summoner lookup ended."""

    FOUND = "found"
    PLATFORM_UNKNOWN = "platform_unknown"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class SummonerLookup:
    """Classified result of the summoner stage.

    The stage never raises for upstream conditions; callers decide whether
    anything other than FOUND is fatal.
    """

    kind: SummonerLookupKind
    platform: str
    record: Optional[SummonerRecord] = None
    outcome: Optional[UpstreamOutcome] = None

    @property
    def found(self) -> bool:
        return self.kind == SummonerLookupKind.FOUND


async def lookup_summoner(client: RiotAPIClient, platform: str, puuid: str) -> SummonerLookup:
    """Look up the summoner record for a puuid on one platform."""
    try:
        host = resolve_platform_host(platform)
    except InvalidTopologyKey:
        return SummonerLookup(SummonerLookupKind.PLATFORM_UNKNOWN, platform)

    outcome = await client.call(host, SUMMONER_PATH.format(puuid=quote(puuid, safe="")))

    if outcome.kind == OutcomeKind.NOT_FOUND:
        return SummonerLookup(SummonerLookupKind.NOT_FOUND, platform, outcome=outcome)
    if not outcome.ok:
        return SummonerLookup(SummonerLookupKind.FAILED, platform, outcome=outcome)

    try:
        record = SummonerRecord.from_api(outcome.data)
    except (KeyError, TypeError) as e:
        logger.warning("Malformed summoner response", platform=platform, error=str(e))
        return SummonerLookup(
            SummonerLookupKind.FAILED,
            platform,
            outcome=UpstreamOutcome.transport_failure(f"Malformed summoner response: {e}"),
        )

    logger.info(
        "Summoner found",
        platform=platform,
        summoner_level=record.summoner_level,
    )
    return SummonerLookup(SummonerLookupKind.FOUND, platform, record=record, outcome=outcome)


async def aggregate_ranks(client: RiotAPIClient, platform: str, summoner_id: str) -> RankAggregate:
    """Fetch league entries for a summoner and summarise them.

    Raises:
        InvalidTopologyKey: If the platform is unknown
        CredentialInvalid: If Riot rejects the API key
        UpstreamError: For other Riot API failures, including 404
        TransportFailure: If the request could not complete
    """
    host = resolve_platform_host(platform)
    outcome = await client.call(host, LEAGUE_PATH.format(summoner_id=quote(summoner_id, safe="")))

    if not outcome.ok:
        raise outcome_error(outcome, error="Failed to get rank info")

    entries = [RankEntry.from_api(raw) for raw in outcome.data]
    aggregate = RankAggregate.from_entries(entries)
    logger.info(
        "Rank entries found",
        platform=platform,
        total_ranked_queues=aggregate.summary.total_ranked_queues,
        highest_tier=aggregate.summary.highest_tier,
    )
    return aggregate
