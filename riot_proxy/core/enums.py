"""Core enums for the riot-proxy service."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class LogicalRegion(Enum):
    """Regional routing values used for account lookups."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"

    @property
    def host(self) -> str:
        """Get the routing host for this region."""
        return f"{self.value}.api.riotgames.com"


class LogicalPlatform(Enum):
    """Platform routing values used for summoner and league lookups."""

    KR = "kr"
    JP1 = "jp1"
    NA1 = "na1"
    BR1 = "br1"
    LAN = "lan"
    LAS = "las"
    OC1 = "oc1"
    EUW1 = "euw1"
    EUN1 = "eun1"
    TR1 = "tr1"
    RU = "ru"

    @property
    def host(self) -> str:
        """Get the routing host for this platform."""
        return f"{self.value}.api.riotgames.com"


class Tier(Enum):
    """Ranked tiers, lowest first.

    Data from: https://developer.riotgames.com/apis#league-v4
    """

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @property
    def ordinal(self) -> int:
        """Position of the tier, IRON=1 through CHALLENGER=10."""
        return TIER_ORDINALS[self.value]

    @classmethod
    def from_string(cls, value: Optional[str]) -> Optional["Tier"]:
        """Convert a string value to a Tier.

        Returns None for unknown or missing values.
        """
        for tier in cls:
            if tier.value == value:
                return tier
        return None


TIER_ORDINALS: Mapping[str, int] = MappingProxyType(
    {tier.value: position for position, tier in enumerate(Tier, start=1)}
)


def tier_ordinal(tier: Optional[str]) -> int:
    """Rank a tier string, 0 for anything unrecognised."""
    known = Tier.from_string(tier)
    return known.ordinal if known is not None else 0
