"""Tests for core entities: win rate, rank entries and summaries."""

import dataclasses

import pytest

from riot_proxy.core import (
    PlayerIdentity,
    RankEntry,
    RankSummary,
    SummonerRecord,
    derive_win_rate,
)
from tests.riot_api_mocks import RiotAPIMockData


def _entry(tier, queue_type="RANKED_SOLO_5x5"):
    return RankEntry.from_api(RiotAPIMockData.get_league_entry(queue_type=queue_type, tier=tier))


class TestWinRate:
    """Test cases for derived win rate."""

    def test_no_games_is_zero(self):
        assert derive_win_rate(0, 0) == 0

    def test_seven_of_ten(self):
        assert derive_win_rate(7, 3) == 70.0

    def test_rounds_to_two_decimals(self):
        assert derive_win_rate(1, 2) == 33.33
        assert derive_win_rate(2, 1) == 66.67

    def test_exact_half_rounds_up(self):
        # 1 of 32 games is 3.125%
        assert derive_win_rate(1, 31) == 3.13
        assert derive_win_rate(3, 5) == 37.5

    def test_all_wins_and_all_losses(self):
        assert derive_win_rate(12, 0) == 100.0
        assert derive_win_rate(0, 5) == 0.0


class TestRankEntry:
    """Test cases for RankEntry mapping."""

    def test_from_api_defaults_missing_flags(self):
        entry = RankEntry.from_api(RiotAPIMockData.get_league_entry())

        assert entry.win_rate == 70.0
        assert entry.veteran is False
        assert entry.inactive is False
        assert entry.fresh_blood is False
        assert entry.hot_streak is False
        assert entry.league_name is None
        assert entry.mini_series is None

    def test_from_api_keeps_present_flags(self):
        mini_series = {"target": 3, "wins": 1, "losses": 0, "progress": "WNN"}
        entry = RankEntry.from_api(
            RiotAPIMockData.get_league_entry(
                hotStreak=True,
                veteran=True,
                leagueName="Sejuani's Soldiers",
                miniSeries=mini_series,
            )
        )

        assert entry.hot_streak is True
        assert entry.veteran is True
        assert entry.league_name == "Sejuani's Soldiers"
        assert entry.mini_series == mini_series

    def test_zero_games_entry_has_zero_win_rate(self):
        entry = RankEntry.from_api(RiotAPIMockData.get_league_entry(wins=0, losses=0))
        assert entry.win_rate == 0

    def test_to_dict_uses_api_field_names(self):
        entry = RankEntry.from_api(RiotAPIMockData.get_league_entry())
        assert entry.to_dict() == {
            "queueType": "RANKED_SOLO_5x5",
            "tier": "GOLD",
            "rank": "II",
            "leaguePoints": 42,
            "wins": 7,
            "losses": 3,
            "winRate": 70.0,
            "veteran": False,
            "inactive": False,
            "freshBlood": False,
            "hotStreak": False,
            "leagueName": None,
            "miniSeries": None,
        }


class TestRankSummary:
    """Test cases for RankSummary highest-tier selection."""

    def test_highest_tier_picks_diamond(self):
        summary = RankSummary.from_entries([_entry("SILVER"), _entry("DIAMOND"), _entry("GOLD")])
        assert summary.highest_tier == "DIAMOND"
        assert summary.total_ranked_queues == 3

    def test_empty_entries(self):
        summary = RankSummary.from_entries([])
        assert summary.highest_tier is None
        assert summary.total_ranked_queues == 0
        assert summary.to_dict() == {"totalRankedQueues": 0, "highestTier": None}

    def test_ties_keep_first_entry(self):
        first = _entry("GOLD", queue_type="RANKED_SOLO_5x5")
        second = _entry("GOLD", queue_type="RANKED_FLEX_SR")
        summary = RankSummary.from_entries([first, second])
        assert summary.highest_tier == "GOLD"

    def test_unknown_tiers_rank_below_iron(self):
        summary = RankSummary.from_entries([_entry(None), _entry("IRON")])
        assert summary.highest_tier == "IRON"

    def test_only_unknown_tiers_keeps_first(self):
        summary = RankSummary.from_entries([_entry(None), _entry("UNRANKED")])
        assert summary.highest_tier is None
        assert summary.total_ranked_queues == 2


def test_identity_from_api():
    identity = PlayerIdentity.from_api(RiotAPIMockData.get_account_response())
    assert identity.riot_id == "Hide on bush#KR1"
    assert identity.to_dict() == {
        "puuid": "test_puuid_123",
        "gameName": "Hide on bush",
        "tagLine": "KR1",
    }
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.puuid = "other"


def test_summoner_record_from_api():
    record = SummonerRecord.from_api(RiotAPIMockData.get_summoner_response())
    assert record.to_dict() == {
        "summonerId": "test_summoner_id",
        "accountId": "test_account_id",
        "summonerLevel": 512,
        "profileIconId": 6,
        "revisionDate": 1700000000000,
    }
