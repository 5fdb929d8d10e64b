"""Tests for account and summoner value objects."""

import pytest
from pydantic import ValidationError

from coachdiff.features.players.models import RiotAccount, Summoner


class TestRiotAccount:
    """Test cases for RiotAccount."""

    def test_full_riot_id(self):
        account = RiotAccount(puuid="puuid-1", game_name="Faker", tag_line="KR1")
        assert account.full_riot_id == "Faker#KR1"

    def test_provider_aliases(self):
        account = RiotAccount.model_validate(
            {"puuid": "puuid-1", "gameName": "Caps", "tagLine": "EUW"}
        )
        assert account.game_name == "Caps"
        assert account.tag_line == "EUW"

    @pytest.mark.parametrize("field", ["puuid", "game_name", "tag_line"])
    def test_rejects_blank_fields(self, field):
        data = {"puuid": "puuid-1", "game_name": "Faker", "tag_line": "KR1"}
        data[field] = "  "
        with pytest.raises(ValidationError):
            RiotAccount(**data)


class TestSummoner:
    """Test cases for Summoner."""

    def test_valid_summoner(self):
        summoner = Summoner.model_validate(
            {
                "id": "summoner-1",
                "puuid": "puuid-1",
                "profileIconId": 4567,
                "summonerLevel": 312,
                "revisionDate": 1735732800000,
            }
        )
        assert summoner.summoner_id == "summoner-1"
        assert summoner.summoner_level == 312

    @pytest.mark.parametrize("level", [0, -1])
    def test_rejects_non_positive_level(self, level):
        with pytest.raises(ValidationError):
            Summoner(summoner_id="s", puuid="p", summoner_level=level)

    def test_rejects_blank_summoner_id(self):
        with pytest.raises(ValidationError):
            Summoner(summoner_id="", puuid="p", summoner_level=30)
