"""Core layer for the riot-proxy service.

This module provides the lookup tables, domain entities and the error
taxonomy shared by the lookup stages and flows.
"""

from .entities import (
    PlayerIdentity,
    SummonerRecord,
    RankEntry,
    RankSummary,
    RankAggregate,
    derive_win_rate,
)
from .enums import LogicalRegion, LogicalPlatform, Tier, tier_ordinal
from .errors import (
    ProxyError,
    InvalidTopologyKey,
    MissingInput,
    CredentialMissing,
    CredentialInvalid,
    IdentityNotFound,
    SummonerLookupFailed,
    UpstreamError,
    TransportFailure,
    InternalError,
)
from .topology import (
    resolve_region_host,
    resolve_platform_host,
    valid_regions,
    valid_platforms,
)

__all__ = [
    # Entities
    "PlayerIdentity",
    "SummonerRecord",
    "RankEntry",
    "RankSummary",
    "RankAggregate",
    "derive_win_rate",
    # Enums
    "LogicalRegion",
    "LogicalPlatform",
    "Tier",
    "tier_ordinal",
    # Errors
    "ProxyError",
    "InvalidTopologyKey",
    "MissingInput",
    "CredentialMissing",
    "CredentialInvalid",
    "IdentityNotFound",
    "SummonerLookupFailed",
    "UpstreamError",
    "TransportFailure",
    "InternalError",
    # Topology
    "resolve_region_host",
    "resolve_platform_host",
    "valid_regions",
    "valid_platforms",
]
