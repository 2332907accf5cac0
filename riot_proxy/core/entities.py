"""Core entities for the riot-proxy service."""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import tier_ordinal


def derive_win_rate(wins: int, losses: int) -> float:
    """Win percentage rounded to two decimals, 0 when no games were played."""
    games = wins + losses
    if games == 0:
        return 0
    # Halves round up.
    return math.floor(wins / games * 100 * 100 + 0.5) / 100


@dataclass(frozen=True)
class PlayerIdentity:
    """Riot account identity resolved from a Riot ID."""

    puuid: str
    game_name: str
    tag_line: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PlayerIdentity":
        """Build from an account-v1 response."""
        return cls(
            puuid=data["puuid"],
            game_name=data["gameName"],
            tag_line=data["tagLine"],
        )

    @property
    def riot_id(self) -> str:
        """Get the player's Riot ID in game_name#tag_line format."""
        return f"{self.game_name}#{self.tag_line}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "puuid": self.puuid,
            "gameName": self.game_name,
            "tagLine": self.tag_line,
        }


@dataclass(frozen=True)
class SummonerRecord:
    """Summoner information for a puuid on one platform."""

    summoner_id: str
    account_id: Optional[str]
    summoner_level: int
    profile_icon_id: Optional[int]
    revision_date: Optional[int]

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "SummonerRecord":
        """Build from a summoner-v4 response."""
        return cls(
            summoner_id=data["id"],
            account_id=data.get("accountId"),
            summoner_level=data["summonerLevel"],
            profile_icon_id=data.get("profileIconId"),
            revision_date=data.get("revisionDate"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summonerId": self.summoner_id,
            "accountId": self.account_id,
            "summonerLevel": self.summoner_level,
            "profileIconId": self.profile_icon_id,
            "revisionDate": self.revision_date,
        }


@dataclass(frozen=True)
class RankEntry:
    """One ranked queue standing, with the derived win rate."""

    queue_type: str
    tier: Optional[str]
    rank: Optional[str]
    league_points: int
    wins: int
    losses: int
    win_rate: float
    veteran: bool = False
    inactive: bool = False
    fresh_blood: bool = False
    hot_streak: bool = False
    league_name: Optional[str] = None
    mini_series: Optional[Dict[str, Any]] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RankEntry":
        """Build from a league-v4 entry, defaulting omitted flags."""
        wins = data.get("wins", 0)
        losses = data.get("losses", 0)
        return cls(
            queue_type=data.get("queueType"),
            tier=data.get("tier"),
            rank=data.get("rank"),
            league_points=data.get("leaguePoints", 0),
            wins=wins,
            losses=losses,
            win_rate=derive_win_rate(wins, losses),
            veteran=data.get("veteran") or False,
            inactive=data.get("inactive") or False,
            fresh_blood=data.get("freshBlood") or False,
            hot_streak=data.get("hotStreak") or False,
            league_name=data.get("leagueName") or None,
            mini_series=data.get("miniSeries") or None,
        )

    @property
    def tier_ordinal(self) -> int:
        return tier_ordinal(self.tier)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "queueType": self.queue_type,
            "tier": self.tier,
            "rank": self.rank,
            "leaguePoints": self.league_points,
            "wins": self.wins,
            "losses": self.losses,
            "winRate": self.win_rate,
            "veteran": self.veteran,
            "inactive": self.inactive,
            "freshBlood": self.fresh_blood,
            "hotStreak": self.hot_streak,
            "leagueName": self.league_name,
            "miniSeries": self.mini_series,
        }


@dataclass(frozen=True)
class RankSummary:
    """Aggregate over a player's ranked queues."""

    total_ranked_queues: int
    highest_tier: Optional[str]

    @classmethod
    def from_entries(cls, entries: List[RankEntry]) -> "RankSummary":
        """Summarise entries, keeping the first entry on ordinal ties."""
        highest: Optional[RankEntry] = None
        for entry in entries:
            if highest is None or entry.tier_ordinal > highest.tier_ordinal:
                highest = entry
        return cls(
            total_ranked_queues=len(entries),
            highest_tier=highest.tier if highest else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalRankedQueues": self.total_ranked_queues,
            "highestTier": self.highest_tier,
        }


@dataclass(frozen=True)
class RankAggregate:
    """Rank entries for a summoner together with their summary."""

    entries: List[RankEntry] = field(default_factory=list)
    summary: RankSummary = field(default_factory=lambda: RankSummary(0, None))

    @classmethod
    def from_entries(cls, entries: List[RankEntry]) -> "RankAggregate":
        return cls(entries=entries, summary=RankSummary.from_entries(entries))
